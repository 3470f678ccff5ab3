"""
utilkit Function Package
========================

Concurrency-control primitives: retry, debounce, throttle and poll.
"""

from __future__ import annotations

from utilkit.function.clock import Clock, SystemClock, sleep_async
from utilkit.function.debounce import Debouncer
from utilkit.function.decorators import debounce, retry, throttle
from utilkit.function.errors import (
    Cancelled,
    DebounceRejected,
    ExecutionRejected,
    FunctionError,
    FunctionTimeout,
    MaxRetriesExceeded,
    PollingError,
    PollingStopped,
    RetryExhausted,
    ThrottleRejected,
)
from utilkit.function.policies import (
    DebounceOptions,
    PollingOptions,
    PollingStatus,
    RetryOptions,
    ThrottleOptions,
)
from utilkit.function.poller import Poller
from utilkit.function.retry import with_retry
from utilkit.function.throttle import Throttler

__all__ = [
    # Clock
    "Clock",
    "SystemClock",
    "sleep_async",
    # Controllers
    "Debouncer",
    "Throttler",
    "Poller",
    "with_retry",
    # Policies
    "RetryOptions",
    "DebounceOptions",
    "ThrottleOptions",
    "PollingOptions",
    "PollingStatus",
    # Decorators
    "retry",
    "debounce",
    "throttle",
    # Errors
    "FunctionError",
    "FunctionTimeout",
    "RetryExhausted",
    "PollingError",
    "MaxRetriesExceeded",
    "PollingStopped",
    "ExecutionRejected",
    "Cancelled",
    "DebounceRejected",
    "ThrottleRejected",
]
