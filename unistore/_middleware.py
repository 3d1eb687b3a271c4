from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable, Optional, TypeVar

from ._action import Action
from ._errors import InvalidActionError

if TYPE_CHECKING:
    from ._store import Store


__all__ = (
    "AfterMiddleware",
    "BeforeMiddleware",
    "MiddlewareChain",
)


A = TypeVar("A", bound=Action)


BeforeMiddleware = Callable[["Store", A], Optional[A]]
AfterMiddleware = Callable[[Mapping[str, Any], Mapping[str, Any], A], Any]


class MiddlewareChain:
    """Functions run around reducer execution.

    Before-functions fold over the dispatched action: each receives the store
    and the current action and may return a replacement (``None`` keeps the
    current one). After-functions observe the transition and their return
    values are ignored. There is no way to remove middleware.
    """

    _before: list[BeforeMiddleware]
    _after: list[AfterMiddleware]

    def __init__(self) -> None:
        self._before = []
        self._after = []

    def add_before(self, middleware: Optional[BeforeMiddleware]) -> None:
        if middleware is not None:
            self._before.append(middleware)

    def add_after(self, middleware: Optional[AfterMiddleware]) -> None:
        if middleware is not None:
            self._after.append(middleware)

    def run_before(self, store: Store, action: Action) -> Action:
        current = action

        for middleware in tuple(self._before):
            replacement = middleware(store, current)

            if replacement is None:
                continue

            if not isinstance(replacement, Action):
                raise InvalidActionError(
                    f"Before middleware {middleware!r} returned "
                    f"{replacement!r}, expected an action"
                )

            current = replacement

        return current

    def run_after(
        self,
        previous_state: Mapping[str, Any],
        state: Mapping[str, Any],
        action: Action
    ) -> None:
        for middleware in tuple(self._after):
            middleware(previous_state, state, action)

    @property
    def before(self) -> tuple[BeforeMiddleware, ...]:
        return tuple(self._before)

    @property
    def after(self) -> tuple[AfterMiddleware, ...]:
        return tuple(self._after)
