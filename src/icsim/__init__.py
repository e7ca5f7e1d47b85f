"""Simulated IC-card reader with generic and MyNumber cards."""

from icsim.core.generic import ReaderTerminal
from icsim.core.mynumber import MyNumberCard, MyNumberRecord, MyNumberTerminal
from icsim.core.reader import (
    CardDataError,
    CardEvent,
    CardRecord,
    CardType,
    Catalog,
    InvalidState,
    Latency,
    NoDelay,
    NotFound,
    ReaderError,
    ReaderObserver,
    ReaderSession,
    ReaderState,
    SleepDelay,
    StatusEvent,
    TypeMismatch,
    default_catalog,
)

__all__ = [
    "CardDataError",
    "CardEvent",
    "CardRecord",
    "CardType",
    "Catalog",
    "InvalidState",
    "Latency",
    "MyNumberCard",
    "MyNumberRecord",
    "MyNumberTerminal",
    "NoDelay",
    "NotFound",
    "ReaderError",
    "ReaderObserver",
    "ReaderSession",
    "ReaderState",
    "SleepDelay",
    "StatusEvent",
    "TypeMismatch",
    "default_catalog",
]
