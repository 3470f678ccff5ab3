"""
utilkit Clock
=============

Time source used by the control-flow primitives.

Controllers only ever suspend through ``Clock.sleep``; swapping the
clock changes how time passes for them without touching their logic.
"""

from __future__ import annotations

import asyncio
import time


class Clock:
    """Base clock."""

    def monotonic(self) -> float:
        """Get monotonic time in seconds."""
        raise NotImplementedError

    async def sleep(self, seconds: float) -> None:
        """Suspend the current task."""
        raise NotImplementedError

    def elapsed(self, since: float) -> float:
        """Seconds elapsed since a ``monotonic()`` reading."""
        return self.monotonic() - since


class SystemClock(Clock):
    """Event-loop clock backed by ``time.monotonic`` and ``asyncio.sleep``."""

    def monotonic(self) -> float:
        return time.monotonic()

    async def sleep(self, seconds: float) -> None:
        # Zero-length waits never yield
        if seconds > 0:
            await asyncio.sleep(seconds)


DEFAULT_CLOCK = SystemClock()


async def sleep_async(ms: int) -> None:
    """
    Delay for the given number of milliseconds.

    Example:
        await sleep_async(1000)
    """
    await DEFAULT_CLOCK.sleep(ms / 1000)
