"""
Throttler Tests
"""

import asyncio

import pytest

from utilkit.errors import ArgumentError
from utilkit.function import (
    Cancelled,
    ThrottleOptions,
    ThrottleRejected,
    Throttler,
)


@pytest.mark.asyncio
async def test_leading_first_call_runs():
    """With leading enabled the first call executes immediately."""
    throttler = Throttler(0.1, ThrottleOptions(leading=True, trailing=False))

    assert await throttler.execute(lambda: "first") == "first"


@pytest.mark.asyncio
async def test_second_call_in_window_rejected():
    """A call inside the window is rejected without invoking the operation."""
    throttler = Throttler(0.1, ThrottleOptions(leading=True, trailing=False))
    calls = []

    await throttler.execute(lambda: calls.append(1))

    with pytest.raises(ThrottleRejected) as exc_info:
        await throttler.execute(lambda: calls.append(2))

    assert calls == [1]
    assert str(exc_info.value) == "Function error: Function execution was throttled"


@pytest.mark.asyncio
async def test_call_after_window_runs():
    """Once the window elapses the next call executes."""
    throttler = Throttler(0.03, ThrottleOptions(leading=True, trailing=False))
    calls = []

    await throttler.execute(lambda: calls.append(1))
    await asyncio.sleep(0.05)
    await throttler.execute(lambda: calls.append(2))

    assert calls == [1, 2]


@pytest.mark.asyncio
async def test_first_call_without_leading_opens_window():
    """Without leading or trailing the first call is rejected but opens the window."""
    throttler = Throttler(0.03, ThrottleOptions(leading=False, trailing=False))
    calls = []

    with pytest.raises(ThrottleRejected):
        await throttler.execute(lambda: calls.append(1))

    await asyncio.sleep(0.05)
    await throttler.execute(lambda: calls.append(2))

    assert calls == [2]


@pytest.mark.asyncio
async def test_trailing_call_runs_when_window_closes():
    """A throttled call with trailing enabled runs at the end of the window."""
    throttler = Throttler(0.05, ThrottleOptions(leading=True, trailing=True))
    loop = asyncio.get_running_loop()
    times = []

    start = loop.time()
    await throttler.execute(lambda: times.append(loop.time() - start))
    await throttler.execute(lambda: times.append(loop.time() - start))

    assert len(times) == 2
    assert times[0] < 0.02
    assert times[1] >= 0.04


@pytest.mark.asyncio
async def test_only_latest_trailing_call_runs():
    """Older trailing calls are superseded by newer ones."""
    throttler = Throttler(0.05, ThrottleOptions(leading=True, trailing=True))
    executed = []

    await throttler.execute(lambda: executed.append("lead"))

    results = await asyncio.gather(
        throttler.execute(lambda: executed.append("a") or "a"),
        throttler.execute(lambda: executed.append("b") or "b"),
        return_exceptions=True,
    )

    assert isinstance(results[0], ThrottleRejected)
    assert results[1] == "b"
    assert executed == ["lead", "b"]


@pytest.mark.asyncio
async def test_default_options_defer_first_call():
    """Default options (trailing only) run the first call at the window end."""
    throttler = Throttler(0.02)
    calls = []

    await throttler.execute(lambda: calls.append(1))

    assert calls == [1]


@pytest.mark.asyncio
async def test_cancelled_throttler_always_fails():
    """After cancel() every call fails without invoking the operation."""
    throttler = Throttler(0.01, ThrottleOptions(leading=True))
    throttler.cancel()
    calls = []

    for _ in range(3):
        with pytest.raises(Cancelled):
            await throttler.execute(lambda: calls.append(1))
        await asyncio.sleep(0.02)

    assert calls == []
    assert throttler.is_cancelled


@pytest.mark.asyncio
async def test_cancel_rejects_pending_trailing_call():
    """Cancelling while a trailing call waits fails that call."""
    throttler = Throttler(0.05, ThrottleOptions(leading=True, trailing=True))
    calls = []

    await throttler.execute(lambda: calls.append("lead"))
    pending = asyncio.ensure_future(throttler.execute(lambda: calls.append("trail")))
    await asyncio.sleep(0.01)
    throttler.cancel()

    with pytest.raises(Cancelled):
        await pending

    assert calls == ["lead"]


def test_negative_wait_rejected():
    """Negative wait is an argument error."""
    with pytest.raises(ArgumentError):
        Throttler(-0.1)
