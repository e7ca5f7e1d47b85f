from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Mapping

from smartcard.Observer import Observable

import icsim.core.reader.logging  # noqa: F401  adds Logger.trace
from icsim.core.reader.catalog import Catalog, default_catalog
from icsim.core.reader.errors import InvalidState, NotFound, TypeMismatch
from icsim.core.reader.latency import SleepDelay
from icsim.core.reader.types import (
    CardEvent,
    CardRecord,
    CardType,
    ReaderState,
    StatusEvent,
)

lg = logging.getLogger(__name__)


class ReaderSession(Observable):
    """Simulated IC-card reader.

    Card operations are coroutines that wait a simulated latency before
    taking effect. Preconditions are checked before the wait, so a
    failing call neither sleeps nor mutates anything. Operations are
    serialized: concurrent callers queue on a lock and run one at a time.

    Observers (pyscard Observer instances, registered with addObserver)
    receive a StatusEvent for every state change and a CardEvent for
    every insertion or removal. An observer that raises is logged and
    skipped; the remaining observers still receive the event.
    """

    def __init__(
        self,
        catalog: Catalog | Mapping[str, CardRecord] | Iterable[CardRecord] | None = None,
        *,
        delay=None,
        accepted_pins: Iterable[str] = (),
    ) -> None:
        super().__init__()
        self._catalog = Catalog.coerce(default_catalog() if catalog is None else catalog)
        self._delay = delay if delay is not None else SleepDelay()
        self._accepted_pins = frozenset(accepted_pins)
        self._state = ReaderState.NOT_CONNECTED
        self._card: CardRecord | None = None
        self._lock = asyncio.Lock()

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def current_card(self) -> CardRecord | None:
        """Snapshot of the inserted card, or None."""
        return self._card.snapshot() if self._card is not None else None

    # -- notification --

    def notifyObservers(self, arg=None) -> None:
        with self.mutex:
            if not self.hasChanged():
                return
            observers = self.obs[:]
            self.clearChanged()
        for observer in observers:
            lg.trace("notify %s: %s", type(observer).__name__, getattr(arg, "type", arg))
            try:
                observer.update(self, arg)
            except Exception:
                lg.exception("observer %r failed on %s event", observer, getattr(arg, "type", arg))

    def _notify(self, event) -> None:
        self.setChanged()
        self.notifyObservers(event)

    # -- helpers --

    def _set_state(self, state: ReaderState) -> None:
        lg.debug("%s -> %s", self._state, state)
        self._state = state
        self._notify(StatusEvent(state))

    def _require_card(self, operation: str, card_type: CardType | None = None) -> CardRecord:
        if self._state is not ReaderState.CARD_INSERTED or self._card is None:
            raise InvalidState(f"{operation}: no card inserted (state {self._state})", self._state)
        if card_type is not None and self._card.card_type is not card_type:
            raise TypeMismatch(card_type, self._card.card_type)
        return self._card

    # -- operations --

    def get_status(self) -> ReaderState:
        return self._state

    def list_available_cards(self) -> list[str]:
        return list(self._catalog)

    async def connect(self) -> bool:
        """Connect the reader. Not allowed from the Error state."""
        async with self._lock:
            if self._state is ReaderState.ERROR:
                raise InvalidState("connect: reader is in error state", self._state)
            await self._delay("connect")
            self._card = None
            self._set_state(ReaderState.CONNECTED)
            return True

    async def disconnect(self) -> None:
        """Disconnect the reader from any state, dropping the current card."""
        async with self._lock:
            await self._delay("disconnect")
            self._card = None
            self._set_state(ReaderState.NOT_CONNECTED)

    async def insert_card(self, card_id: str) -> CardRecord:
        """Insert a catalog card. Returns a snapshot of it."""
        async with self._lock:
            if self._state is not ReaderState.CONNECTED:
                raise InvalidState(f"insert: reader not connected (state {self._state})", self._state)
            card = self._catalog.get(card_id)
            if card is None:
                raise NotFound(card_id)
            await self._delay("insert")
            self._card = card
            self._set_state(ReaderState.CARD_INSERTED)
            self._notify(CardEvent("insert", card.snapshot()))
            return card.snapshot()

    async def remove_card(self) -> CardRecord | None:
        """Eject the current card; the reader returns to Connected after settling.

        Returns a snapshot of the removed card, or None (and does nothing)
        when no card is inserted.
        """
        async with self._lock:
            if self._card is None:
                lg.debug("remove: no card inserted")
                return None
            await self._delay("remove")
            removed = self._card.snapshot()
            self._set_state(ReaderState.CARD_REMOVED)
            self._notify(CardEvent("remove", removed))
            self._card = None
            await self._delay("settle")
            if self._state is ReaderState.CARD_REMOVED:
                self._set_state(ReaderState.CONNECTED)
            return removed

    async def access_card(
        self, operation: str, *, card_type: CardType | None = None,
    ) -> CardRecord:
        """Wait the latency of *operation* against the inserted card.

        Returns a snapshot of the card. Raises InvalidState with no card
        inserted, TypeMismatch when *card_type* is given and differs.
        """
        async with self._lock:
            card = self._require_card(operation, card_type)
            await self._delay(operation)
            return card.snapshot()

    async def read_card(self) -> CardRecord:
        return await self.access_card("read")

    async def write_property(self, key: str, value: str) -> bool:
        """Set or overwrite a property on the inserted card."""
        async with self._lock:
            card = self._require_card("write")
            await self._delay("write")
            card.properties[key] = value
            lg.debug("%s: %s updated", card.card_id, key)
            return True

    async def authenticate(self, pin: str) -> bool:
        """True if *pin* is the card's stored PIN or an accepted test PIN."""
        async with self._lock:
            card = self._require_card("authenticate")
            await self._delay("authenticate")
            stored = card.properties.get("PIN")
            return (stored is not None and pin == stored) or pin in self._accepted_pins

    def fail(self, reason: str) -> None:
        """Put the reader in the Error state (platform fault reported by a host)."""
        lg.warning("reader fault: %s", reason)
        self._card = None
        self._set_state(ReaderState.ERROR)
