from __future__ import annotations

from typing import Any, ClassVar, Optional, Union

from pydantic import BaseModel, ConfigDict

from ._errors import ConfigurationError, InvalidActionError


__all__ = (
    "Action",
    "ActionKind",

    "kind_of",
)


ActionKind = str


_kinds: dict[ActionKind, type[Action]] = {}


def _qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


class Action(BaseModel):
    """Base class for dispatchable actions.

    Concrete actions declare the token that reducers are keyed by::

        class Increment(Action):
            kind: ClassVar[str] = "counter/increment"

            amount: int = 1

    Subclasses without a ``kind`` are abstract and cannot be instantiated.
    """

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[Optional[ActionKind]] = None

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)

        kind = cls.__dict__.get("kind")

        if kind is None:
            return

        if not isinstance(kind, str) or not kind:
            raise ConfigurationError(
                f"{cls.__qualname__}.kind must be a non-empty string"
            )

        existing = _kinds.get(kind)

        if (
            existing is not None
            and _qualified_name(existing) != _qualified_name(cls)
        ):
            raise ConfigurationError(
                f"Action kind {kind!r} already declared by "
                f"{_qualified_name(existing)}"
            )

        _kinds[kind] = cls

    def __init__(self, **data: Any) -> None:
        if type(self).kind is None:
            raise ConfigurationError(
                f"{type(self).__qualname__} does not declare an action kind"
            )

        super().__init__(**data)


def kind_of(target: Union[Action, type[Action], ActionKind]) -> ActionKind:
    if isinstance(target, str):
        if not target:
            raise ConfigurationError("Action kind must be a non-empty string")

        return target

    if isinstance(target, Action):
        kind = type(target).kind
    elif isinstance(target, type) and issubclass(target, Action):
        kind = target.kind
    else:
        raise InvalidActionError(f"Not an action: {target!r}")

    if kind is None:
        raise ConfigurationError(f"{target!r} does not declare an action kind")

    return kind
