from __future__ import annotations

from typing import Any, Callable, Optional
from uuid import UUID, uuid4

from ._errors import ConfigurationError


__all__ = (
    "ObserverRegistry",
    "Subscriber",
)


Subscriber = Callable[[], Any]


class ObserverRegistry:
    _subscribers: dict[UUID, Subscriber]

    def __init__(self) -> None:
        self._subscribers = {}

    def subscribe(self, subscriber: Optional[Subscriber]) -> UUID:
        if subscriber is None:
            raise ConfigurationError("A subscriber function is required")

        if not callable(subscriber):
            raise ConfigurationError(
                f"Subscriber {subscriber!r} is not callable"
            )

        subscriber_id = uuid4()
        self._subscribers[subscriber_id] = subscriber

        return subscriber_id

    def unsubscribe(self, subscriber_id: UUID) -> None:
        self._subscribers.pop(subscriber_id, None)

    def notify_all(self) -> None:
        # Subscribers may (un)subscribe while being notified.
        for subscriber in tuple(self._subscribers.values()):
            subscriber()

    def __contains__(self, subscriber_id: object) -> bool:
        return subscriber_id in self._subscribers

    def __len__(self) -> int:
        return len(self._subscribers)
