from __future__ import annotations

import asyncio

import pytest

from conftest import GatedDelay, RecordingDelay, make_card
from icsim.core.reader import (
    InvalidState,
    NoDelay,
    NotFound,
    ReaderSession,
    ReaderState,
    SleepDelay,
)


@pytest.mark.asyncio
async def test_initial_state_and_connect(session):
    assert session.get_status() is ReaderState.NOT_CONNECTED
    assert session.current_card is None
    assert await session.connect() is True
    assert session.get_status() is ReaderState.CONNECTED


def test_list_available_cards_in_catalog_order(session):
    assert session.list_available_cards() == ["CARD001", "CARD002", "MYNUMBER001"]


def test_default_session_uses_demo_catalog_and_sleep_delay():
    reader = ReaderSession()
    assert reader.list_available_cards() == ["CARD001", "CARD002", "MYNUMBER001"]
    assert isinstance(reader._delay, SleepDelay)


@pytest.mark.asyncio
async def test_insert_read_scenario(session):
    await session.connect()
    inserted = await session.insert_card("CARD001")
    assert inserted.card_id == "CARD001"
    assert session.get_status() is ReaderState.CARD_INSERTED

    card = await session.read_card()
    assert card.card_id == "CARD001"
    assert card.properties["Name"] == "Alice"

    assert await session.authenticate("0000") is True

    assert await session.write_property("LastAccess", "X") is True
    card = await session.read_card()
    assert card.properties["LastAccess"] == "X"


@pytest.mark.asyncio
async def test_insert_unknown_card_is_not_found(session):
    await session.connect()
    with pytest.raises(NotFound) as excinfo:
        await session.insert_card("NOPE")
    assert excinfo.value.card_id == "NOPE"
    assert "NOPE" in str(excinfo.value)
    assert session.get_status() is ReaderState.CONNECTED
    assert session.current_card is None


@pytest.mark.asyncio
async def test_insert_requires_connected_reader(session):
    with pytest.raises(InvalidState):
        await session.insert_card("CARD001")
    assert session.get_status() is ReaderState.NOT_CONNECTED

    await session.connect()
    await session.insert_card("CARD001")
    with pytest.raises(InvalidState):
        await session.insert_card("CARD002")
    assert session.current_card.card_id == "CARD001"


@pytest.mark.asyncio
async def test_failed_precondition_does_not_wait(cards):
    delay = RecordingDelay()
    reader = ReaderSession(cards, delay=delay)
    with pytest.raises(InvalidState):
        await reader.read_card()
    await reader.connect()
    with pytest.raises(NotFound):
        await reader.insert_card("NOPE")
    assert delay.operations == ["connect"]


@pytest.mark.asyncio
@pytest.mark.parametrize("op", ["read", "write", "authenticate"])
async def test_card_operations_need_inserted_card(session, op):
    calls = {
        "read": lambda: session.read_card(),
        "write": lambda: session.write_property("k", "v"),
        "authenticate": lambda: session.authenticate("1234"),
    }

    # NotConnected
    with pytest.raises(InvalidState) as excinfo:
        await calls[op]()
    assert excinfo.value.state is ReaderState.NOT_CONNECTED
    assert session.get_status() is ReaderState.NOT_CONNECTED

    # Connected
    await session.connect()
    with pytest.raises(InvalidState):
        await calls[op]()
    assert session.get_status() is ReaderState.CONNECTED

    # Error
    session.fail("test fault")
    with pytest.raises(InvalidState):
        await calls[op]()
    assert session.get_status() is ReaderState.ERROR


@pytest.mark.asyncio
async def test_operation_issued_during_removal_fails(cards):
    delay = GatedDelay("settle")
    reader = ReaderSession(cards, delay=delay)
    await reader.connect()
    await reader.insert_card("CARD001")

    removal = asyncio.create_task(reader.remove_card())
    await delay.reached.wait()
    assert reader.get_status() is ReaderState.CARD_REMOVED
    assert reader.current_card is None

    read = asyncio.create_task(reader.read_card())
    await asyncio.sleep(0)
    delay.release.set()
    await removal
    with pytest.raises(InvalidState):
        await read
    assert reader.get_status() is ReaderState.CONNECTED


@pytest.mark.asyncio
async def test_write_twice_keeps_latest_value(session):
    await session.connect()
    await session.insert_card("CARD001")
    await session.write_property("Note", "first")
    await session.write_property("Note", "second")
    card = await session.read_card()
    assert card.properties["Note"] == "second"
    assert list(card.properties).count("Note") == 1


@pytest.mark.asyncio
async def test_writes_last_for_the_session_but_not_the_caller(cards):
    reader = ReaderSession(cards, delay=NoDelay())
    await reader.connect()
    await reader.insert_card("CARD001")
    await reader.write_property("Name", "Carol")
    await reader.remove_card()
    await reader.insert_card("CARD001")
    assert (await reader.read_card()).properties["Name"] == "Carol"
    assert cards[0].properties["Name"] == "Alice"


@pytest.mark.asyncio
async def test_read_returns_snapshot(session):
    await session.connect()
    await session.insert_card("CARD001")
    card = await session.read_card()
    card.properties["Name"] = "Mallory"
    assert (await session.read_card()).properties["Name"] == "Alice"


@pytest.mark.asyncio
async def test_remove_returns_to_connected(session, observer):
    await session.connect()
    await session.insert_card("CARD001")
    ejected = await session.remove_card()
    assert ejected.card_id == "CARD001"

    removed = [seen for seen in observer.seen if seen[0] == "remove"]
    assert len(removed) == 1
    _, state, card = removed[0]
    assert state is ReaderState.CARD_REMOVED
    assert card.card_id == "CARD001"
    assert session.get_status() is ReaderState.CONNECTED
    assert session.current_card is None


@pytest.mark.asyncio
async def test_remove_state_visible_until_settle_elapses(cards):
    delay = GatedDelay("settle")
    reader = ReaderSession(cards, delay=delay)
    await reader.connect()
    await reader.insert_card("CARD002")

    removal = asyncio.create_task(reader.remove_card())
    await delay.reached.wait()
    assert reader.get_status() is ReaderState.CARD_REMOVED
    assert reader.current_card is None

    delay.release.set()
    await removal
    assert reader.get_status() is ReaderState.CONNECTED


@pytest.mark.asyncio
async def test_remove_without_card_is_noop(session, observer):
    assert await session.remove_card() is None
    assert session.get_status() is ReaderState.NOT_CONNECTED
    await session.connect()
    observer.events.clear()
    await session.remove_card()
    assert session.get_status() is ReaderState.CONNECTED
    assert observer.events == []


@pytest.mark.asyncio
async def test_authenticate(session):
    await session.connect()
    await session.insert_card("CARD002")
    assert await session.authenticate("4321") is True
    assert await session.authenticate("0000") is True
    assert await session.authenticate("9999") is False
    assert await session.authenticate("") is False


@pytest.mark.asyncio
async def test_authenticate_without_stored_pin(cards):
    reader = ReaderSession(cards, delay=NoDelay())
    await reader.connect()
    await reader.insert_card("CARD001")
    assert await reader.authenticate("") is False
    assert await reader.authenticate("1234") is False


@pytest.mark.asyncio
async def test_disconnect_clears_card(session):
    await session.connect()
    await session.insert_card("CARD001")
    await session.disconnect()
    assert session.get_status() is ReaderState.NOT_CONNECTED
    assert session.current_card is None


@pytest.mark.asyncio
async def test_connect_while_card_inserted_drops_card(session):
    await session.connect()
    await session.insert_card("CARD001")
    await session.connect()
    assert session.get_status() is ReaderState.CONNECTED
    assert session.current_card is None


@pytest.mark.asyncio
async def test_error_state_blocks_connect_until_disconnect(session):
    await session.connect()
    await session.insert_card("CARD001")
    session.fail("reader unplugged")
    assert session.get_status() is ReaderState.ERROR
    assert session.current_card is None

    with pytest.raises(InvalidState):
        await session.connect()
    assert session.get_status() is ReaderState.ERROR

    await session.disconnect()
    assert session.get_status() is ReaderState.NOT_CONNECTED
    await session.connect()
    assert session.get_status() is ReaderState.CONNECTED


@pytest.mark.asyncio
async def test_concurrent_operations_are_serialized(cards):
    delay = RecordingDelay()
    reader = ReaderSession(cards, delay=delay)
    await reader.connect()
    delay.calls.clear()

    inserted, card, written = await asyncio.gather(
        reader.insert_card("CARD001"),
        reader.read_card(),
        reader.write_property("Seen", "yes"),
    )
    assert inserted.card_id == card.card_id == "CARD001"
    assert written is True
    assert delay.calls == [
        ("start", "insert"), ("end", "insert"),
        ("start", "read"), ("end", "read"),
        ("start", "write"), ("end", "write"),
    ]


def test_catalog_mapping_must_match_ids():
    from icsim.core.reader import CatalogError

    with pytest.raises(CatalogError):
        ReaderSession({"OTHER": make_card("CARD001")}, delay=NoDelay())
