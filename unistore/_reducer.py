from __future__ import annotations

from typing import Any, Callable, Iterator, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ._action import Action, ActionKind
from ._errors import ConfigurationError


__all__ = (
    "ManualReducer",
    "Reducer",
    "ReducerBinding",
    "ReducerTable",
)


A = TypeVar("A", bound=Action)


Reducer = Callable[[Any, A], Any]
ManualReducer = Callable[[Any, A, Any], Any]


class ReducerBinding(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    state_key: Optional[str] = None
    auto_merge: bool = True
    func: Callable[..., Any]

    @field_validator("func", mode="before")
    @classmethod
    def validate_func(cls, value: Any) -> Callable[..., Any]:
        if value is None:
            raise ConfigurationError("A reducer function is required")

        if not callable(value):
            raise ConfigurationError(f"Reducer {value!r} is not callable")

        return value


class ReducerTable:
    """Ordered reducer bindings keyed by action kind."""

    _bindings: dict[ActionKind, list[ReducerBinding]]

    def __init__(self) -> None:
        self._bindings = {}

    def register(
        self,
        kind: ActionKind,
        func: Optional[Callable[..., Any]],
        state_key: Optional[str] = None,
        auto_merge: bool = True
    ) -> ReducerBinding:
        try:
            binding = ReducerBinding(
                state_key=state_key,
                auto_merge=auto_merge,
                func=func
            )
        except ValidationError as error:
            raise ConfigurationError(str(error)) from error

        self._bindings.setdefault(kind, []).append(binding)

        return binding

    def lookup(self, kind: ActionKind) -> tuple[ReducerBinding, ...]:
        return tuple(self._bindings.get(kind, ()))

    def kinds(self) -> Iterator[ActionKind]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)
