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
from icsim.core.generic.terminal import ReaderTerminal

__all__ = [
    "AuthenticateMessage",
    "AuthenticateResult",
    "CardResult",
    "ConnectMessage",
    "ConnectResult",
    "DisconnectMessage",
    "DisconnectResult",
    "GetStatusMessage",
    "InsertCardMessage",
    "ListCardsMessage",
    "ListCardsResult",
    "ReadCardMessage",
    "ReaderTerminal",
    "RemoveCardMessage",
    "RemoveCardResult",
    "StatusResult",
    "WritePropertyMessage",
    "WritePropertyResult",
]
