"""
Retry Tests
"""

import asyncio
import time

import pytest

from utilkit.errors import ArgumentError
from utilkit.function import RetryExhausted, RetryOptions, with_retry
from utilkit.function.clock import Clock


class RecordingClock(Clock):
    """Clock that records requested sleeps without suspending."""

    def __init__(self):
        self.sleeps = []

    def monotonic(self):
        return time.monotonic()

    async def sleep(self, seconds):
        self.sleeps.append(seconds)


@pytest.mark.asyncio
async def test_first_success_runs_once():
    """A succeeding operation is invoked exactly once."""
    calls = []

    async def operation():
        calls.append(1)
        return "ok"

    assert await with_retry(operation) == "ok"
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_eventual_success():
    """Operation succeeding on the third attempt returns its value."""
    attempts = {"count": 0}

    async def operation():
        attempts["count"] += 1
        if attempts["count"] < 3:
            raise ValueError("not yet")
        return attempts["count"]

    result = await with_retry(operation, RetryOptions(max_retries=3))
    assert result == 3


@pytest.mark.asyncio
async def test_exhaustion_runs_max_retries_plus_one():
    """Always-failing operation runs max_retries + 1 times."""
    attempts = {"count": 0}

    async def operation():
        attempts["count"] += 1
        raise RuntimeError("boom")

    with pytest.raises(RetryExhausted) as exc_info:
        await with_retry(operation, RetryOptions(max_retries=2, delay=0))

    assert attempts["count"] == 3
    assert exc_info.value.retries == 2
    assert exc_info.value.last_error == "boom"
    assert "failed after 2 retries" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, RuntimeError)


@pytest.mark.asyncio
async def test_zero_retries_single_attempt():
    """max_retries=0 means exactly one attempt."""
    attempts = {"count": 0}

    def operation():
        attempts["count"] += 1
        raise ValueError("nope")

    with pytest.raises(RetryExhausted):
        await with_retry(operation, RetryOptions(max_retries=0))

    assert attempts["count"] == 1


@pytest.mark.asyncio
async def test_sync_operation_supported():
    """Plain callables work as operations."""
    assert await with_retry(lambda: 42) == 42


@pytest.mark.asyncio
async def test_zero_delay_never_sleeps():
    """delay=0 never asks the clock to suspend."""
    clock = RecordingClock()

    def operation():
        raise ValueError("fail")

    with pytest.raises(RetryExhausted):
        await with_retry(operation, RetryOptions(max_retries=3, delay=0), clock=clock)

    assert clock.sleeps == []


@pytest.mark.asyncio
async def test_delay_between_attempts_only():
    """Delay is applied between attempts, never after the last one."""
    clock = RecordingClock()

    def operation():
        raise ValueError("fail")

    with pytest.raises(RetryExhausted):
        await with_retry(operation, RetryOptions(max_retries=2, delay=0.25), clock=clock)

    assert clock.sleeps == [0.25, 0.25]


@pytest.mark.asyncio
async def test_real_delay_elapses():
    """Constant delay suspends the caller for real."""
    attempts = {"count": 0}

    async def operation():
        attempts["count"] += 1
        if attempts["count"] < 3:
            raise ValueError("retry")
        return "done"

    start = time.monotonic()
    result = await with_retry(operation, RetryOptions(max_retries=3, delay=0.02))
    elapsed = time.monotonic() - start

    assert result == "done"
    assert elapsed >= 0.035


@pytest.mark.asyncio
async def test_unlisted_exception_propagates():
    """Exceptions outside retry_on are raised unwrapped on the first attempt."""
    attempts = {"count": 0}

    def operation():
        attempts["count"] += 1
        raise KeyError("missing")

    with pytest.raises(KeyError):
        await with_retry(operation, RetryOptions(max_retries=3, retry_on=(ValueError,)))

    assert attempts["count"] == 1


@pytest.mark.asyncio
async def test_attempts_are_logged(logger, memory_handler):
    """Each failed attempt emits a debug record."""
    def operation():
        raise ValueError("bad")

    with pytest.raises(RetryExhausted):
        await with_retry(operation, RetryOptions(max_retries=1), logger=logger)

    assert memory_handler.messages() == ["Attempt failed", "Attempt failed"]
    assert memory_handler.records[0].context["attempt"] == 1


@pytest.mark.asyncio
async def test_concurrent_retries_are_independent():
    """Concurrent calls keep separate attempt budgets."""
    async def flaky(counter):
        counter["n"] += 1
        if counter["n"] == 1:
            raise ValueError("first")
        return counter["n"]

    a, b = {"n": 0}, {"n": 0}
    results = await asyncio.gather(
        with_retry(lambda: flaky(a), RetryOptions(max_retries=1)),
        with_retry(lambda: flaky(b), RetryOptions(max_retries=1)),
    )
    assert results == [2, 2]


def test_negative_options_rejected():
    """Negative budgets and delays are argument errors."""
    with pytest.raises(ArgumentError):
        RetryOptions(max_retries=-1)
    with pytest.raises(ArgumentError):
        RetryOptions(delay=-0.5)
