"""Reader connection and status commands."""

from __future__ import annotations

import logging

from icsim.core.generic import (
    ConnectMessage,
    DisconnectMessage,
    GetStatusMessage,
    ListCardsMessage,
)

lg = logging.getLogger(__name__)

# No commands that receive raw string kwargs.
_raw_commands: set[str] = set()


def cmd_connect(runner) -> bool:
    """Connect the reader."""
    result = runner.send(ConnectMessage())
    lg.info("connected: %s", result.state)
    return result.connected


def cmd_disconnect(runner) -> bool:
    """Disconnect the reader."""
    result = runner.send(DisconnectMessage())
    runner.info.clear()
    lg.info("disconnected: %s", result.state)
    return True


def cmd_reconnect(runner) -> bool:
    """Disconnect and reconnect the reader."""
    runner.send(DisconnectMessage())
    runner.info.clear()
    return runner.send(ConnectMessage()).connected


def cmd_status(runner) -> bool:
    """Show the reader state."""
    result = runner.send(GetStatusMessage())
    if result.card_id is not None:
        lg.info("status: %s (%s)", result.state, result.card_id)
    else:
        lg.info("status: %s", result.state)
    return True


def cmd_list(runner) -> bool:
    """List the cards available for insertion."""
    result = runner.send(ListCardsMessage())
    lg.info("available cards:\n%s", "\n".join(f"  - {c}" for c in result.card_ids))
    return True
