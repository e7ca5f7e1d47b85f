"""MyNumber card operations over a ReaderSession.

Each operation needs an inserted card of type MyNumber: InvalidState
when no card is inserted, TypeMismatch for any other card type. The
checks run before the simulated latency.
"""

from __future__ import annotations

import base64
import binascii
import logging

from cryptography import x509

from icsim.core.mynumber.records import CERTIFICATE_DATA, PIN, MyNumberRecord
from icsim.core.reader.errors import CardDataError
from icsim.core.reader.session import ReaderSession
from icsim.core.reader.types import CardType

lg = logging.getLogger(__name__)


class MyNumberCard:
    """MyNumber operations: record extraction, PIN check, certificate."""

    def __init__(self, session: ReaderSession) -> None:
        self._session = session

    async def read_record(self) -> MyNumberRecord:
        """Extract the identity record."""
        card = await self._session.access_card("read_mynumber", card_type=CardType.MYNUMBER)
        return MyNumberRecord.from_card(card)

    async def verify_pin(self, pin: str) -> bool:
        """Compare *pin* with the PIN stored on the card.

        A card without a stored PIN never verifies.
        """
        card = await self._session.access_card("verify_pin", card_type=CardType.MYNUMBER)
        stored = card.properties.get(PIN, "")
        return bool(stored) and pin == stored

    async def get_certificate(self) -> bytes:
        """Decode the stored certificate blob. Empty when none is stored.

        Whitespace (line wrapping) in the blob is ignored.
        """
        card = await self._session.access_card("certificate", card_type=CardType.MYNUMBER)
        blob = "".join(card.properties.get(CERTIFICATE_DATA, "").split())
        try:
            return base64.b64decode(blob, validate=True)
        except binascii.Error as exc:
            raise CardDataError(f"{card.card_id}: malformed certificate data: {exc}") from exc

    async def load_certificate(self) -> x509.Certificate:
        """Decode and parse the stored certificate (DER X.509, not validated)."""
        der = await self.get_certificate()
        cert = parse_certificate(der)
        if cert is None:
            raise CardDataError(f"no DER X.509 certificate on card ({len(der)} bytes)")
        lg.debug("certificate subject: %s", cert.subject.rfc4514_string())
        return cert


def parse_certificate(der: bytes) -> x509.Certificate | None:
    """Parse DER bytes, or None when they are empty or not a certificate."""
    if not der:
        return None
    try:
        return x509.load_der_x509_certificate(der)
    except ValueError:
        lg.debug("not a DER certificate (%d bytes)", len(der))
        return None
