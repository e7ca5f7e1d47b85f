"""Card commands: insert, remove, read, write, authenticate."""

from __future__ import annotations

import logging

from icsim.app.display import format_card
from icsim.core.generic import (
    AuthenticateMessage,
    InsertCardMessage,
    ReadCardMessage,
    RemoveCardMessage,
    WritePropertyMessage,
)

lg = logging.getLogger(__name__)

# Card ids, PINs and property values stay strings ("0000" is not 0).
_raw_commands: set[str] = {"insert", "write", "auth"}


def cmd_insert(runner, *, id: str) -> bool:
    """Insert a card from the catalog (id=CARD_ID)."""
    result = runner.send(InsertCardMessage(card_id=id))
    runner.info.clear()
    runner.info.card = result.card
    lg.info("inserted %s (%s)", result.card.card_id, result.card.card_type)
    return True


def cmd_remove(runner) -> bool:
    """Remove the inserted card."""
    result = runner.send(RemoveCardMessage())
    if result.removed is None:
        lg.warning("no card to remove")
    else:
        lg.info("removed %s, reader %s", result.removed, result.state)
    runner.info.clear()
    return True


def cmd_read(runner) -> bool:
    """Read and show the inserted card."""
    result = runner.send(ReadCardMessage())
    runner.info.card = result.card
    lg.info("card:\n%s", format_card(result.card))
    return True


def cmd_write(runner, *, key: str, value: str) -> bool:
    """Write a property to the inserted card (key=NAME value=TEXT)."""
    result = runner.send(WritePropertyMessage(key=key, value=value))
    if not result.success:
        lg.error("write %s failed", key)
        return False
    lg.info("wrote %s = %s", key, value)
    return True


def cmd_auth(runner, *, pin: str) -> bool:
    """Authenticate against the inserted card (pin=PIN)."""
    result = runner.send(AuthenticateMessage(pin=pin))
    runner.info.authenticated = result.authenticated
    if not result.authenticated:
        lg.error("authentication failed")
        return False
    lg.info("authentication succeeded")
    return True
