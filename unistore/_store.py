from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, Iterable, Optional, Union
from uuid import UUID

from ._action import Action, ActionKind, kind_of
from ._errors import ConfigurationError, InvalidActionError, InvalidStateError
from ._merge import MergeFunction, resolve_merge
from ._middleware import AfterMiddleware, BeforeMiddleware, MiddlewareChain
from ._observers import ObserverRegistry, Subscriber
from ._reducer import ManualReducer, Reducer, ReducerBinding, ReducerTable


__all__ = (
    "State",
    "Store",

    "create_store",
)


State = Mapping[str, Any]

ActionTarget = Union[type[Action], ActionKind]


def _as_state(value: Any) -> dict[str, Any]:
    if not isinstance(value, Mapping):
        raise InvalidStateError(
            f"State must be a mapping, got {type(value).__name__}"
        )

    for key in value:
        if not isinstance(key, str):
            raise InvalidStateError(f"State keys must be strings, got {key!r}")

    return dict(value)


class Store:
    """A single state cell updated only by dispatching actions.

    Reducers are registered per action kind and run in registration order.
    ``reduce`` bindings receive ``(slice, action)`` and have their result
    merged into the state; ``reduce_and_merge`` bindings receive
    ``(slice, action, state)`` and their result replaces the whole state.
    Returning ``None`` from a reducer leaves the state untouched.

    The state is replaced, never mutated, so a reference taken before a
    dispatch keeps describing the state at that time. Callers only ever see
    read-only views of it.

    A store is not thread-safe; one thread of control is expected to drive
    ``dispatch`` at a time.
    """

    _state: dict[str, Any]
    _reducers: ReducerTable
    _middleware: MiddlewareChain
    _observers: ObserverRegistry
    _merge: Optional[MergeFunction]

    def __init__(self, initial_state: Optional[State] = None) -> None:
        self._state = {} if initial_state is None else _as_state(initial_state)
        self._reducers = ReducerTable()
        self._middleware = MiddlewareChain()
        self._observers = ObserverRegistry()
        self._merge = None

    @property
    def state(self) -> State:
        return MappingProxyType(self._state)

    def reduce(
        self,
        action: ActionTarget,
        state_key: Optional[str] = None,
        func: Optional[Reducer] = None
    ) -> Store:
        """Register a reducer whose result is merged into the state.

        The reducer is called with the value under ``state_key`` (or the
        whole state) and the action.
        """
        return self._add_reducer(action, state_key, True, func)

    def reduce_and_merge(
        self,
        action: ActionTarget,
        state_key: Optional[str] = None,
        func: Optional[ManualReducer] = None
    ) -> Store:
        """Register a reducer that builds the whole next state itself.

        The reducer is called with the slice, the action and the full state;
        whatever it returns becomes the new state as is.
        """
        return self._add_reducer(action, state_key, False, func)

    def when_merging(self, func: Optional[MergeFunction]) -> Store:
        """Replace the default merge for every auto-merged reducer."""
        if func is None:
            raise ConfigurationError("A merge function is required")

        if not callable(func):
            raise ConfigurationError(f"Merge function {func!r} is not callable")

        self._merge = func

        return self

    def before(self, func: Optional[BeforeMiddleware]) -> Store:
        self._middleware.add_before(func)

        return self

    def after(self, func: Optional[AfterMiddleware]) -> Store:
        self._middleware.add_after(func)

        return self

    def dispatch(self, action: Action) -> State:
        if not isinstance(action, Action):
            raise InvalidActionError(f"Not an action: {action!r}")

        previous_state = self.state

        dispatched_action = self._middleware.run_before(self, action)

        for binding in self._reducers.lookup(kind_of(dispatched_action)):
            self._apply_reducer(binding, dispatched_action)

        self._middleware.run_after(
            previous_state,
            self.state,
            dispatched_action
        )

        self._observers.notify_all()

        return self.state

    def subscribe(self, subscriber: Optional[Subscriber]) -> UUID:
        return self._observers.subscribe(subscriber)

    def unsubscribe(self, subscriber_id: UUID) -> None:
        self._observers.unsubscribe(subscriber_id)

    def _add_reducer(
        self,
        action: ActionTarget,
        state_key: Optional[str],
        auto_merge: bool,
        func: Optional[Callable[..., Any]]
    ) -> Store:
        self._reducers.register(kind_of(action), func, state_key, auto_merge)

        return self

    def _slice(self, state_key: Optional[str]) -> Any:
        if state_key is None:
            return self.state

        return self._state.get(state_key)

    def _apply_reducer(self, binding: ReducerBinding, action: Action) -> None:
        reducer_slice = self._slice(binding.state_key)

        if binding.auto_merge:
            result = binding.func(reducer_slice, action)
        else:
            result = binding.func(reducer_slice, action, self.state)

        if result is None:
            return

        if binding.auto_merge:
            result = resolve_merge(
                self.state,
                result,
                binding.state_key,
                self._merge
            )

        self._state = _as_state(result)


def create_store(
    initial_state: Optional[State] = None,
    *,
    merge: Optional[MergeFunction] = None,
    before: Iterable[BeforeMiddleware] = (),
    after: Iterable[AfterMiddleware] = ()
) -> Store:
    store = Store(initial_state)

    if merge is not None:
        store.when_merging(merge)

    for middleware in before:
        store.before(middleware)

    for middleware in after:
        store.after(middleware)

    return store
