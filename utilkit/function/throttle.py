"""
utilkit Throttler
=================

Rate-limit an operation to at most one execution per window.

A call arriving when at least ``wait`` seconds have passed since the
previous execution runs immediately. The very first call runs only
when ``leading`` is enabled; otherwise it opens the window.

Calls rejected inside the window either fail at once or, with
``trailing`` enabled, wait for the window to close and run then,
provided they are still the most recent rejected call and nothing
else executed in the meantime.

Example:
    throttler = Throttler(1.0, ThrottleOptions(leading=True, trailing=False))

    try:
        await throttler.execute(refresh)
    except ThrottleRejected:
        pass
"""

from __future__ import annotations

from typing import Awaitable, Callable, Optional, TypeVar, Union

from utilkit.errors import ArgumentError
from utilkit.function.base import Controller, invoke
from utilkit.function.clock import Clock
from utilkit.function.errors import Cancelled, ThrottleRejected
from utilkit.function.policies import ThrottleOptions
from utilkit.utils.logger import Logger


T = TypeVar("T")


class Throttler(Controller):
    """
    Throttle controller.

    Attributes:
        wait: Window length in seconds
        options: Edge policy
    """

    name = "Throttler"

    def __init__(
        self,
        wait: float,
        options: Optional[ThrottleOptions] = None,
        *,
        clock: Optional[Clock] = None,
        logger: Optional[Logger] = None,
    ):
        if wait < 0:
            raise ArgumentError(f"wait must not be negative, got {wait}")

        super().__init__(clock, logger)
        self.wait = wait
        self.options = options or ThrottleOptions()

        self._last_execution: Optional[float] = None
        self._trailing_ticket = 0
        self._cancelled = False

    async def execute(self, operation: Callable[[], Union[Awaitable[T], T]]) -> T:
        """
        Execute an operation with throttling.

        Raises:
            Cancelled: Throttler was cancelled
            ThrottleRejected: Call fell inside the window and was not
                (or could no longer be) deferred to the trailing edge
        """
        with self._lock:
            if self._cancelled:
                raise Cancelled(self.name)

            now = self._clock.monotonic()
            last = self._last_execution

            if last is None:
                # First call opens the window
                self._last_execution = now
                run_now = self.options.leading
            elif now - last >= self.wait:
                self._last_execution = now
                run_now = True
            else:
                run_now = False

            if not run_now and self.options.trailing:
                self._trailing_ticket += 1
                ticket = self._trailing_ticket
                window_start = self._last_execution
                remaining = self.wait - (now - window_start)

        if run_now:
            return await invoke(operation)

        if not self.options.trailing:
            self._logger.trace("Throttled call rejected")
            raise ThrottleRejected()

        return await self._run_trailing(operation, ticket, window_start, remaining)

    async def _run_trailing(
        self,
        operation: Callable[[], Union[Awaitable[T], T]],
        ticket: int,
        window_start: float,
        remaining: float,
    ) -> T:
        await self._clock.sleep(max(remaining, 0.0))

        with self._lock:
            if self._cancelled:
                raise Cancelled(self.name)

            if ticket != self._trailing_ticket or self._last_execution != window_start:
                self._logger.trace("Trailing call superseded", ticket=ticket)
                raise ThrottleRejected()

            self._last_execution = self._clock.monotonic()

        return await invoke(operation)

    def cancel(self) -> None:
        """Reject every subsequent call, including pending trailing ones."""
        with self._lock:
            self._cancelled = True

    @property
    def is_cancelled(self) -> bool:
        with self._lock:
            return self._cancelled
