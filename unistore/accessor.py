"""Process-wide store slot.

Holds at most one :class:`~unistore.Store`, built lazily on first use, and
exposes one forwarding function per store operation::

    from unistore import accessor

    accessor.reduce(Increment, "count", lambda count, action: count + 1)
    accessor.dispatch(Increment())

The slot is a plain module global. It is not safe for concurrent access;
callers sharing it across threads must provide their own locking. Replacing
or resetting the store while it is dispatching is undefined.
"""

from __future__ import annotations

import logging

from typing import Optional
from uuid import UUID

from ._action import Action
from ._merge import MergeFunction
from ._middleware import AfterMiddleware, BeforeMiddleware
from ._observers import Subscriber
from ._reducer import ManualReducer, Reducer
from ._store import ActionTarget, State, Store


__all__ = (
    "after",
    "before",
    "dispatch",
    "get_state",
    "instance",
    "reduce",
    "reduce_and_merge",
    "reset",
    "subscribe",
    "unsubscribe",
    "when_merging",
    "with_state",
)


logger = logging.getLogger("unistore.accessor")

_instance: Optional[Store] = None


def instance() -> Store:
    global _instance

    if _instance is None:
        logger.debug("Creating process-wide store")
        _instance = Store()

    return _instance


def reset() -> None:
    global _instance

    logger.debug("Resetting process-wide store")
    _instance = None


def with_state(state: State) -> Store:
    global _instance

    logger.debug("Replacing process-wide store (%d keys)", len(state))
    _instance = Store(state)

    return _instance


def reduce(
    action: ActionTarget,
    state_key: Optional[str] = None,
    func: Optional[Reducer] = None
) -> Store:
    return instance().reduce(action, state_key, func)


def reduce_and_merge(
    action: ActionTarget,
    state_key: Optional[str] = None,
    func: Optional[ManualReducer] = None
) -> Store:
    return instance().reduce_and_merge(action, state_key, func)


def when_merging(func: Optional[MergeFunction]) -> Store:
    return instance().when_merging(func)


def before(func: Optional[BeforeMiddleware]) -> Store:
    return instance().before(func)


def after(func: Optional[AfterMiddleware]) -> Store:
    return instance().after(func)


def dispatch(action: Action) -> State:
    return instance().dispatch(action)


def subscribe(subscriber: Optional[Subscriber]) -> UUID:
    return instance().subscribe(subscriber)


def unsubscribe(subscriber_id: UUID) -> None:
    instance().unsubscribe(subscriber_id)


def get_state() -> State:
    return instance().state
