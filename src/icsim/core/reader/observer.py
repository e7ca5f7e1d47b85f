from __future__ import annotations

import logging

from smartcard.Observer import Observer

from icsim.core.reader.logging import EVENT
from icsim.core.reader.types import ReaderState

lg = logging.getLogger(__name__)


_GREEN = "\033[32m"
_RED = "\033[31m"
_RESET = "\033[0m"


def _color_state(state: ReaderState) -> str:
    """Return ANSI color for a reader state: red for Error, green otherwise."""
    if state is ReaderState.ERROR:
        return _RED
    return _GREEN


class ReaderObserver(Observer):
    """pyscard Observer for reader events. Subclasses override update()."""

    def update(self, observable, event) -> None:
        pass


class LoggingReaderObserver(ReaderObserver):
    """ReaderObserver that logs reader events via Python logging."""

    def update(self, observable, event) -> None:
        stamp = event.timestamp.strftime("%H:%M:%S")

        if event.type == "status":
            color = _color_state(event.state)
            lg.log(EVENT, "[%s] status %s%s%s", stamp, color, event.state, _RESET)

        elif event.type == "insert":
            name = event.card.properties.get("Name", "unknown")
            lg.log(EVENT, "[%s] card inserted: %s (%s)", stamp, event.card.card_id, name)

        elif event.type == "remove":
            lg.log(EVENT, "[%s] card removed: %s", stamp, event.card.card_id)
