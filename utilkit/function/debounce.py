"""
utilkit Debouncer
=================

Collapse bursts of calls into a single execution.

Each ``execute`` call records itself as the most recent call. With
``leading`` the operation runs at once. Otherwise the call waits
``wait`` seconds and runs only if no newer call arrived meanwhile and
``trailing`` is enabled; every superseded call is rejected.

Example:
    debouncer = Debouncer(0.3)

    async def on_keystroke(text):
        try:
            return await debouncer.execute(lambda: search(text))
        except DebounceRejected:
            return None
"""

from __future__ import annotations

from typing import Awaitable, Callable, Optional, TypeVar, Union

from utilkit.errors import ArgumentError
from utilkit.function.base import Controller, invoke
from utilkit.function.clock import Clock
from utilkit.function.errors import Cancelled, DebounceRejected
from utilkit.function.policies import DebounceOptions
from utilkit.utils.logger import Logger


T = TypeVar("T")


class Debouncer(Controller):
    """
    Debounce controller.

    Attributes:
        wait: Quiet period in seconds
        options: Edge policy
    """

    name = "Debouncer"

    def __init__(
        self,
        wait: float,
        options: Optional[DebounceOptions] = None,
        *,
        clock: Optional[Clock] = None,
        logger: Optional[Logger] = None,
    ):
        if wait < 0:
            raise ArgumentError(f"wait must not be negative, got {wait}")

        super().__init__(clock, logger)
        self.wait = wait
        self.options = options or DebounceOptions()

        self._last_call: Optional[float] = None
        self._sequence = 0
        self._cancelled = False

    async def execute(self, operation: Callable[[], Union[Awaitable[T], T]]) -> T:
        """
        Execute an operation with debouncing.

        Raises:
            Cancelled: Debouncer was cancelled while the call waited
            DebounceRejected: A newer call superseded this one, or
                trailing execution is disabled
        """
        with self._lock:
            self._sequence += 1
            ticket = self._sequence
            self._last_call = self._clock.monotonic()

        if self.options.leading:
            return await invoke(operation)

        await self._clock.sleep(self.wait)

        with self._lock:
            cancelled = self._cancelled
            superseded = ticket != self._sequence

        if cancelled:
            self._logger.debug("Debounced call cancelled", ticket=ticket)
            raise Cancelled(self.name)

        if superseded or not self.options.trailing:
            self._logger.trace("Debounced call rejected", ticket=ticket, superseded=superseded)
            raise DebounceRejected()

        return await invoke(operation)

    def cancel(self) -> None:
        """Reject calls that are currently waiting."""
        with self._lock:
            self._cancelled = True

    @property
    def is_cancelled(self) -> bool:
        with self._lock:
            return self._cancelled

    def is_pending(self) -> bool:
        """Whether less than ``wait`` has elapsed since the last call."""
        with self._lock:
            last_call = self._last_call

        if last_call is None:
            return False
        return self._clock.elapsed(last_call) < self.wait
