"""Information collected by runner commands during a session."""

from __future__ import annotations

from dataclasses import dataclass

from icsim.core.mynumber.records import MyNumberRecord
from icsim.core.reader.types import CardRecord


@dataclass
class SessionInfo:
    """Last results seen by the runner, for display."""

    card: CardRecord | None = None
    authenticated: bool | None = None
    mynumber: MyNumberRecord | None = None
    pin_verified: bool | None = None
    certificate: bytes = b""
    certificate_subject: str = ""

    def clear(self) -> None:
        self.card = None
        self.authenticated = None
        self.mynumber = None
        self.pin_verified = None
        self.certificate = b""
        self.certificate_subject = ""
