from __future__ import annotations

from dataclasses import dataclass

from icsim.core.base import Message, Result
from icsim.core.reader.types import CardRecord, ReaderState


@dataclass
class ConnectMessage(Message):
    """Connect the reader."""


@dataclass
class ConnectResult(Result):
    connected: bool
    state: ReaderState


@dataclass
class DisconnectMessage(Message):
    """Disconnect the reader."""


@dataclass
class DisconnectResult(Result):
    state: ReaderState


@dataclass
class GetStatusMessage(Message):
    """Query the reader state (no latency)."""


@dataclass
class StatusResult(Result):
    state: ReaderState
    card_id: str | None = None


@dataclass
class ListCardsMessage(Message):
    """List the catalog identifiers available for insertion."""


@dataclass
class ListCardsResult(Result):
    card_ids: list[str]


@dataclass
class InsertCardMessage(Message):
    """Insert a catalog card into the reader."""

    card_id: str


@dataclass
class ReadCardMessage(Message):
    """Read the inserted card."""


@dataclass
class CardResult(Result):
    card: CardRecord
    state: ReaderState


@dataclass
class RemoveCardMessage(Message):
    """Eject the inserted card and wait for the reader to settle."""


@dataclass
class RemoveCardResult(Result):
    removed: str | None
    state: ReaderState


@dataclass
class WritePropertyMessage(Message):
    """Set a property on the inserted card."""

    key: str
    value: str


@dataclass
class WritePropertyResult(Result):
    success: bool


@dataclass
class AuthenticateMessage(Message):
    """Check a PIN against the inserted card."""

    pin: str


@dataclass
class AuthenticateResult(Result):
    authenticated: bool
