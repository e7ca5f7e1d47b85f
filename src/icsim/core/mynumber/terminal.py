"""MyNumber card terminal.

Extends ReaderTerminal, so the generic reader messages (connect,
insert, read, ...) stay available next to the MyNumber ones.
"""

from __future__ import annotations

from icsim.core.base import handles
from icsim.core.generic import ReaderTerminal
from icsim.core.mynumber.card import MyNumberCard, parse_certificate
from icsim.core.mynumber.messages import (
    CertificateResult,
    GetCertificateMessage,
    MyNumberResult,
    ReadMyNumberMessage,
    VerifyPinMessage,
    VerifyPinResult,
)
from icsim.core.reader.session import ReaderSession


class MyNumberTerminal(ReaderTerminal):
    """Terminal for readers holding MyNumber cards."""

    def __init__(self, session: ReaderSession) -> None:
        super().__init__(session)
        self._card = MyNumberCard(session)

    @handles(ReadMyNumberMessage)
    async def _read_mynumber(self, message: ReadMyNumberMessage) -> MyNumberResult:
        record = await self._card.read_record()
        return MyNumberResult(record=record)

    @handles(VerifyPinMessage)
    async def _verify_pin(self, message: VerifyPinMessage) -> VerifyPinResult:
        verified = await self._card.verify_pin(message.pin)
        return VerifyPinResult(verified=verified)

    @handles(GetCertificateMessage)
    async def _get_certificate(self, message: GetCertificateMessage) -> CertificateResult:
        data = await self._card.get_certificate()
        return CertificateResult(data=data, certificate=parse_certificate(data))
