from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from enum import Enum
from typing import ClassVar


class CardType(str, Enum):
    """Card families known to the reader."""

    FELICA = "FeliCa"
    MIFARE = "MIFARE"
    MYNUMBER = "MyNumber"

    def __str__(self) -> str:
        return self.value


class ReaderState(str, Enum):
    """Reader lifecycle state. Exactly one is active at a time."""

    NOT_CONNECTED = "NotConnected"
    CONNECTED = "Connected"
    CARD_INSERTED = "CardInserted"
    CARD_REMOVED = "CardRemoved"
    ERROR = "Error"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CardRecord:
    """A catalog card. Only the property mapping may change."""

    card_id: str
    card_type: CardType
    issue_date: date
    expiry_date: date
    properties: dict[str, str] = field(default_factory=dict)

    def snapshot(self) -> CardRecord:
        """Return a copy with an independent property mapping."""
        return replace(self, properties=dict(self.properties))

    def is_valid(self, on: date | None = None) -> bool:
        """Whether *on* (default: today) lies within the validity period."""
        day = on or date.today()
        return self.issue_date <= day <= self.expiry_date


@dataclass(frozen=True)
class StatusEvent:
    """Emitted on every reader state change."""

    type: ClassVar[str] = "status"

    state: ReaderState
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class CardEvent:
    """Emitted when a card is inserted ("insert") or removed ("remove")."""

    type: str
    card: CardRecord
    timestamp: datetime = field(default_factory=datetime.now)
