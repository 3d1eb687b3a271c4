__all__ = (
    "ConfigurationError",
    "InvalidActionError",
    "InvalidStateError",
    "StoreError",
)


class StoreError(Exception):
    pass


class ConfigurationError(StoreError):
    pass


class InvalidStateError(StoreError):
    pass


class InvalidActionError(StoreError):
    pass
