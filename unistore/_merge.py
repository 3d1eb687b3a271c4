from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Optional

from ._errors import InvalidStateError


__all__ = (
    "MergeFunction",

    "default_merge",
    "resolve_merge",
)


MergeFunction = Callable[
    [Mapping[str, Any], Any, Optional[str]],
    Mapping[str, Any]
]


def default_merge(
    old_state: Mapping[str, Any],
    new_value: Any,
    state_key: Optional[str]
) -> dict[str, Any]:
    """Shallow-merge a reducer result into a copy of ``old_state``.

    With a ``state_key`` the result replaces that one entry. Without one the
    result must itself be a mapping, whose entries overwrite matching keys.
    """
    if state_key is not None:
        return {**old_state, state_key: new_value}

    if not isinstance(new_value, Mapping):
        raise InvalidStateError(
            f"Reducer without a state key returned {type(new_value).__name__}, "
            "expected a mapping"
        )

    return {**old_state, **new_value}


def resolve_merge(
    old_state: Mapping[str, Any],
    new_value: Any,
    state_key: Optional[str],
    custom_merge: Optional[MergeFunction] = None
) -> Mapping[str, Any]:
    if custom_merge is None:
        return default_merge(old_state, new_value, state_key)

    merged = custom_merge(old_state, new_value, state_key)

    if not isinstance(merged, Mapping):
        raise InvalidStateError(
            f"Merge function returned {type(merged).__name__}, "
            "expected a mapping"
        )

    return merged
