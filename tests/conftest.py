from __future__ import annotations

import asyncio
from datetime import date

import pytest

from icsim.core.reader import (
    CardRecord,
    CardType,
    NoDelay,
    ReaderObserver,
    ReaderSession,
    default_catalog,
)


class RecordingObserver(ReaderObserver):
    """Collects events and the reader state seen at delivery time."""

    def __init__(self) -> None:
        self.events = []
        self.seen = []

    def update(self, observable, event) -> None:
        self.events.append(event)
        self.seen.append((event.type, observable.get_status(), observable.current_card))

    @property
    def kinds(self) -> list[str]:
        return [
            f"status:{e.state}" if e.type == "status" else f"{e.type}:{e.card.card_id}"
            for e in self.events
        ]


class RecordingDelay:
    """Delay strategy that records operation start/end and yields twice."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    async def __call__(self, operation: str) -> None:
        self.calls.append(("start", operation))
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        self.calls.append(("end", operation))

    @property
    def operations(self) -> list[str]:
        return [op for phase, op in self.calls if phase == "start"]


class GatedDelay:
    """Delay strategy that blocks one operation until released."""

    def __init__(self, gated: str) -> None:
        self.gated = gated
        self.reached = asyncio.Event()
        self.release = asyncio.Event()

    async def __call__(self, operation: str) -> None:
        if operation == self.gated:
            self.reached.set()
            await self.release.wait()
        else:
            await asyncio.sleep(0)


def make_card(card_id: str, card_type: CardType = CardType.FELICA, **properties: str) -> CardRecord:
    return CardRecord(
        card_id=card_id,
        card_type=card_type,
        issue_date=date(2024, 4, 1),
        expiry_date=date(2034, 3, 31),
        properties=dict(properties),
    )


@pytest.fixture
def cards() -> list[CardRecord]:
    return [
        make_card("CARD001", Name="Alice", Company="Example"),
        make_card("CARD002", CardType.MIFARE, Name="Bob", PIN="4321"),
        make_card(
            "MYNUMBER001",
            CardType.MYNUMBER,
            Name="山田太郎",
            MyNumber="123456789012",
            Address="東京都千代田区",
            BirthDate="1990/01/01",
            CertificateData=default_catalog()["MYNUMBER001"].properties["CertificateData"],
            PIN="1234",
        ),
    ]


@pytest.fixture
def session(cards) -> ReaderSession:
    return ReaderSession(cards, delay=NoDelay(), accepted_pins={"0000"})


@pytest.fixture
def observer(session) -> RecordingObserver:
    obs = RecordingObserver()
    session.addObserver(obs)
    return obs
