"""Ready-made middleware. Opt-in; the store itself never logs."""

from __future__ import annotations

import logging

from collections.abc import Mapping
from typing import Any, Optional

from ._action import Action, kind_of
from ._middleware import AfterMiddleware


__all__ = (
    "changed_keys",
    "log_transitions",
)


_MISSING = object()


def changed_keys(
    previous_state: Mapping[str, Any],
    state: Mapping[str, Any]
) -> list[str]:
    """Keys added, removed or rebound between two states, sorted."""
    keys = set(previous_state) | set(state)

    return sorted(
        (
            key for key in keys
            if previous_state.get(key, _MISSING) != state.get(key, _MISSING)
        ),
        key=repr
    )


def log_transitions(
    logger: Optional[logging.Logger] = None,
    level: int = logging.DEBUG
) -> AfterMiddleware:
    """After-middleware logging the action kind and changed keys."""
    target = logger or logging.getLogger("unistore")

    def middleware(
        previous_state: Mapping[str, Any],
        state: Mapping[str, Any],
        action: Action
    ) -> None:
        if not target.isEnabledFor(level):
            return

        changed = changed_keys(previous_state, state)

        if changed:
            target.log(
                level,
                "%s changed %s",
                kind_of(action),
                ", ".join(changed)
            )
        else:
            target.log(level, "%s left state unchanged", kind_of(action))

    return middleware
