"""Collected-information display."""

from __future__ import annotations

import logging

from icsim.app.display import format_session_info

lg = logging.getLogger(__name__)

# No commands that receive raw string kwargs.
_raw_commands: set[str] = set()


def cmd_display(runner) -> bool:
    """Display collected card information."""
    lg.info("\n%s", format_session_info(runner.info))
    return True


def cmd_clear(runner) -> bool:
    """Forget collected card information."""
    runner.info.clear()
    return True
