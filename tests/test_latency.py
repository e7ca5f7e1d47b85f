from __future__ import annotations

import logging

import pytest

from icsim.core.reader import Latency, NoDelay, SleepDelay
from icsim.core.reader import latency as latency_module


def test_default_latency_values():
    latency = Latency()
    assert latency.seconds("connect") == 0.5
    assert latency.seconds("disconnect") == 0.2
    assert latency.seconds("insert") == 0.3
    assert latency.seconds("remove") == 0.1
    assert latency.seconds("settle") == 0.5
    assert latency.seconds("authenticate") == 0.8


def test_scaled():
    fast = Latency().scaled(0.5)
    assert fast.connect == pytest.approx(0.25)
    assert fast.authenticate == pytest.approx(0.4)
    assert Latency().scaled(0).settle == 0
    with pytest.raises(ValueError):
        Latency().scaled(-1)


def test_unknown_operation():
    with pytest.raises(KeyError):
        Latency().seconds("teleport")


@pytest.mark.asyncio
async def test_sleep_delay_sleeps_configured_time(monkeypatch):
    slept = []

    async def fake_sleep(seconds):
        slept.append(seconds)

    monkeypatch.setattr(latency_module.asyncio, "sleep", fake_sleep)
    delay = SleepDelay(Latency(read=0.25))
    await delay("read")
    await delay("write")
    assert slept == [0.25, 0.4]


@pytest.mark.asyncio
async def test_sleep_delay_rejects_unknown_operation():
    with pytest.raises(KeyError):
        await SleepDelay()("teleport")


@pytest.mark.asyncio
async def test_no_delay_accepts_any_operation():
    await NoDelay()("anything")


@pytest.mark.asyncio
async def test_sleep_delay_logs_trace(monkeypatch, caplog):
    async def fake_sleep(seconds):
        pass

    monkeypatch.setattr(latency_module.asyncio, "sleep", fake_sleep)
    with caplog.at_level(logging.DEBUG, logger="icsim.core.reader.latency"):
        await SleepDelay(Latency(read=0.25))("read")

    assert [r.levelname for r in caplog.records] == ["TRACE"]
    assert "read: 0.250s" in caplog.text
