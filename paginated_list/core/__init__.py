"""Core types shared by the managers and widgets."""

from .errors import FetchTimeoutError, describe_error
from .protocols import FetchMoreItems, ItemBuilder, Listener, Scheduler

__all__ = [
    "FetchMoreItems",
    "FetchTimeoutError",
    "ItemBuilder",
    "Listener",
    "Scheduler",
    "describe_error",
]
