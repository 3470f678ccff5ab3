"""
utilkit Controller Base
=======================

Shared plumbing for the stateful control-flow primitives.
"""

from __future__ import annotations

import inspect
import threading
from typing import Any, Awaitable, Callable, Optional, TypeVar, Union

from utilkit.function.clock import DEFAULT_CLOCK, Clock
from utilkit.utils.logger import Logger, null_logger


T = TypeVar("T")
Operation = Callable[[], Union[Awaitable[T], T]]


async def invoke(operation: Callable[[], Any]) -> Any:
    """Call an operation, awaiting its result when it is awaitable."""
    result = operation()
    if inspect.isawaitable(result):
        return await result
    return result


class Controller:
    """
    Base for controllers owning mutable bookkeeping.

    ``_lock`` guards every bookkeeping field. It is a thread lock so
    ``cancel``/``stop`` may come from any task or thread, and it is
    never held across an ``await``.
    """

    name = "Controller"

    def __init__(
        self,
        clock: Optional[Clock] = None,
        logger: Optional[Logger] = None,
    ):
        self._clock = clock or DEFAULT_CLOCK
        self._logger = logger or null_logger(f"utilkit.{self.name.lower()}")
        self._lock = threading.Lock()

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def logger(self) -> Logger:
        return self._logger
