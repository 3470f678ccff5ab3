"""
utilkit Function Errors
=======================

Failures raised by the control-flow primitives.

Rejections (debounced, throttled, cancelled) are ordinary outcomes of
a rate-limited call, not bugs. Callers are expected to catch
``ExecutionRejected`` routinely.
"""

from __future__ import annotations

from typing import Optional

from utilkit.errors import UtilsError


class FunctionError(UtilsError):
    """Base error for function utilities."""

    kind = "Function"

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"{self.kind} error: {message}")


class FunctionTimeout(FunctionError):
    """
    Operation timed out.

    Not raised by the controllers themselves; operations that enforce
    their own deadlines may raise it so callers see a uniform type.
    """

    kind = "Timeout"


class RetryExhausted(FunctionError):
    """
    Retry budget consumed without a successful attempt.

    Attributes:
        retries: Configured retry count
        last_error: Description of the final failure
    """

    kind = "Retry exhausted"

    def __init__(self, retries: int, last_error: Optional[str] = None):
        self.retries = retries
        self.last_error = last_error or "Unknown error"
        super().__init__(
            f"Function failed after {retries} retries. "
            f"Last error: {self.last_error}"
        )


class PollingError(FunctionError):
    """Polling terminated without a result."""

    kind = "Polling"


class MaxRetriesExceeded(PollingError):
    """Poll task failed ``max_retries`` times with ``quit_on_error`` set."""

    def __init__(self, message: str = "Max retries exceeded"):
        super().__init__(message)


class PollingStopped(PollingError):
    """Poll loop exited without success (external stop or execution cap)."""

    def __init__(self, message: str = "Polling stopped"):
        super().__init__(message)


class ExecutionRejected(FunctionError):
    """Call was not executed."""

    kind = "Function"


class Cancelled(ExecutionRejected):
    """Controller was cancelled."""

    def __init__(self, controller: str = "Controller"):
        self.controller = controller
        super().__init__(f"{controller} was cancelled")


class DebounceRejected(ExecutionRejected):
    """Call superseded by a newer one, or trailing edge disabled."""

    def __init__(self, message: str = "Function execution was debounced"):
        super().__init__(message)


class ThrottleRejected(ExecutionRejected):
    """Call arrived inside the throttle window."""

    def __init__(self, message: str = "Function execution was throttled"):
        super().__init__(message)
