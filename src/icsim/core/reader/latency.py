"""Simulated reader latency.

A delay strategy is an awaitable callable taking the operation name.
The session awaits it once per operation (twice for a removal: the
eject itself and the settle time before the reader goes idle).
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, fields, replace

import icsim.core.reader.logging  # noqa: F401  adds Logger.trace

lg = logging.getLogger(__name__)


@dataclass(frozen=True)
class Latency:
    """Per-operation durations in seconds."""

    connect: float = 0.5
    disconnect: float = 0.2
    insert: float = 0.3
    remove: float = 0.1
    settle: float = 0.5
    read: float = 0.2
    write: float = 0.4
    authenticate: float = 0.8
    read_mynumber: float = 0.5
    verify_pin: float = 0.8
    certificate: float = 0.3

    def scaled(self, factor: float) -> Latency:
        if factor < 0:
            raise ValueError(f"latency factor must be >= 0, got {factor}")
        return replace(self, **{f.name: getattr(self, f.name) * factor for f in fields(self)})

    def seconds(self, operation: str) -> float:
        if operation not in {f.name for f in fields(self)}:
            raise KeyError(operation)
        return getattr(self, operation)


class SleepDelay:
    """Wait the configured latency for each operation."""

    def __init__(self, latency: Latency | None = None) -> None:
        self.latency = latency or Latency()

    async def __call__(self, operation: str) -> None:
        seconds = self.latency.seconds(operation)
        lg.trace("%s: %.3fs", operation, seconds)
        await asyncio.sleep(seconds)


class NoDelay:
    """Yield to the event loop without waiting."""

    async def __call__(self, operation: str) -> None:
        await asyncio.sleep(0)
