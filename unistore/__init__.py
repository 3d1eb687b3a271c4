from ._action import Action, ActionKind, kind_of
from ._errors import (
    ConfigurationError,
    InvalidActionError,
    InvalidStateError,
    StoreError
)
from ._merge import MergeFunction, default_merge
from ._middleware import AfterMiddleware, BeforeMiddleware
from ._observers import Subscriber
from ._reducer import ManualReducer, Reducer, ReducerBinding
from ._store import State, Store, create_store


__all__ = (
    "Action",
    "ActionKind",
    "AfterMiddleware",
    "BeforeMiddleware",
    "ConfigurationError",
    "InvalidActionError",
    "InvalidStateError",
    "ManualReducer",
    "MergeFunction",
    "Reducer",
    "ReducerBinding",
    "State",
    "Store",
    "StoreError",
    "Subscriber",

    "create_store",
    "default_merge",
    "kind_of",
)
