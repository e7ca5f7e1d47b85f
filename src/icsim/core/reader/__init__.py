from icsim.core.reader.catalog import Catalog, CatalogError, default_catalog
from icsim.core.reader.errors import (
    CardDataError,
    InvalidState,
    NotFound,
    ReaderError,
    TypeMismatch,
)
from icsim.core.reader.latency import Latency, NoDelay, SleepDelay
from icsim.core.reader.logging import EVENT, TRACE
from icsim.core.reader.observer import LoggingReaderObserver, ReaderObserver
from icsim.core.reader.session import ReaderSession
from icsim.core.reader.types import (
    CardEvent,
    CardRecord,
    CardType,
    ReaderState,
    StatusEvent,
)

__all__ = [
    "CardDataError",
    "CardEvent",
    "CardRecord",
    "CardType",
    "Catalog",
    "CatalogError",
    "EVENT",
    "InvalidState",
    "Latency",
    "LoggingReaderObserver",
    "NoDelay",
    "NotFound",
    "ReaderError",
    "ReaderObserver",
    "ReaderSession",
    "ReaderState",
    "SleepDelay",
    "StatusEvent",
    "TRACE",
    "TypeMismatch",
    "default_catalog",
]
