from __future__ import annotations

from icsim.core.base import Terminal, handles
from icsim.core.generic.messages import (
    AuthenticateMessage,
    AuthenticateResult,
    CardResult,
    ConnectMessage,
    ConnectResult,
    DisconnectMessage,
    DisconnectResult,
    GetStatusMessage,
    InsertCardMessage,
    ListCardsMessage,
    ListCardsResult,
    ReadCardMessage,
    RemoveCardMessage,
    RemoveCardResult,
    StatusResult,
    WritePropertyMessage,
    WritePropertyResult,
)


class ReaderTerminal(Terminal):
    """Terminal for the generic reader operations."""

    @handles(ConnectMessage)
    async def _connect(self, message: ConnectMessage) -> ConnectResult:
        connected = await self._session.connect()
        return ConnectResult(connected=connected, state=self._session.get_status())

    @handles(DisconnectMessage)
    async def _disconnect(self, message: DisconnectMessage) -> DisconnectResult:
        await self._session.disconnect()
        return DisconnectResult(state=self._session.get_status())

    @handles(GetStatusMessage)
    async def _status(self, message: GetStatusMessage) -> StatusResult:
        card = self._session.current_card
        return StatusResult(
            state=self._session.get_status(),
            card_id=card.card_id if card is not None else None,
        )

    @handles(ListCardsMessage)
    async def _list_cards(self, message: ListCardsMessage) -> ListCardsResult:
        return ListCardsResult(card_ids=self._session.list_available_cards())

    @handles(InsertCardMessage)
    async def _insert(self, message: InsertCardMessage) -> CardResult:
        card = await self._session.insert_card(message.card_id)
        return CardResult(card=card, state=self._session.get_status())

    @handles(RemoveCardMessage)
    async def _remove(self, message: RemoveCardMessage) -> RemoveCardResult:
        card = await self._session.remove_card()
        return RemoveCardResult(
            removed=card.card_id if card is not None else None,
            state=self._session.get_status(),
        )

    @handles(ReadCardMessage)
    async def _read(self, message: ReadCardMessage) -> CardResult:
        card = await self._session.read_card()
        return CardResult(card=card, state=self._session.get_status())

    @handles(WritePropertyMessage)
    async def _write(self, message: WritePropertyMessage) -> WritePropertyResult:
        success = await self._session.write_property(message.key, message.value)
        return WritePropertyResult(success=success)

    @handles(AuthenticateMessage)
    async def _authenticate(self, message: AuthenticateMessage) -> AuthenticateResult:
        authenticated = await self._session.authenticate(message.pin)
        return AuthenticateResult(authenticated=authenticated)
