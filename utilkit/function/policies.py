"""
utilkit Function Policies
=========================

Immutable option sets for the control-flow primitives.

Durations are in seconds. Every policy can be built from a ``Config``
using its ``retry.*``, ``debounce.*``, ``throttle.*`` or ``poll.*``
section.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple, Type

from utilkit.errors import ArgumentError

if TYPE_CHECKING:
    from utilkit.utils.config import Config


def _check_duration(name: str, value: float) -> None:
    if value < 0:
        raise ArgumentError(f"{name} must not be negative, got {value}")


def _check_count(name: str, value: int) -> None:
    if value < 0:
        raise ArgumentError(f"{name} must not be negative, got {value}")


@dataclass(frozen=True)
class RetryOptions:
    """
    Retry policy.

    Attributes:
        max_retries: Retries after the first attempt (total attempts = max_retries + 1)
        delay: Constant pause between attempts; zero never suspends
        retry_on: Exception types that count as a failed attempt
    """

    max_retries: int = 3
    delay: float = 0.0
    retry_on: Tuple[Type[BaseException], ...] = (Exception,)

    def __post_init__(self) -> None:
        _check_count("max_retries", self.max_retries)
        _check_duration("delay", self.delay)

    @classmethod
    def from_config(cls, config: "Config") -> "RetryOptions":
        """Build from the ``retry`` config section."""
        return cls(
            max_retries=config.get_int("retry.max_retries", 3),
            delay=config.get_float("retry.delay", 0.0),
        )


@dataclass(frozen=True)
class DebounceOptions:
    """Debounce edge policy. Leading takes priority over trailing."""

    leading: bool = False
    trailing: bool = True

    @classmethod
    def from_config(cls, config: "Config") -> "DebounceOptions":
        """Build from the ``debounce`` config section."""
        return cls(
            leading=config.get_bool("debounce.leading", False),
            trailing=config.get_bool("debounce.trailing", True),
        )


@dataclass(frozen=True)
class ThrottleOptions:
    """Throttle edge policy."""

    leading: bool = False
    trailing: bool = True

    @classmethod
    def from_config(cls, config: "Config") -> "ThrottleOptions":
        """Build from the ``throttle`` config section."""
        return cls(
            leading=config.get_bool("throttle.leading", False),
            trailing=config.get_bool("throttle.trailing", True),
        )


@dataclass(frozen=True)
class PollingOptions:
    """
    Polling policy.

    Attributes:
        interval: Pause before each loop execution
        max_retries: Failed executions tolerated when quit_on_error is set
        quit_on_error: Stop with an error once max_retries is reached
        immediate: Run the task once before the first interval
        max_executions: Loop iteration cap (None for unbounded)
    """

    interval: float = 5.0
    max_retries: int = 3
    quit_on_error: bool = True
    immediate: bool = False
    max_executions: Optional[int] = None

    def __post_init__(self) -> None:
        _check_duration("interval", self.interval)
        _check_count("max_retries", self.max_retries)
        if self.max_executions is not None:
            _check_count("max_executions", self.max_executions)

    @classmethod
    def from_config(cls, config: "Config") -> "PollingOptions":
        """Build from the ``poll`` config section."""
        max_executions = config.get("poll.max_executions")
        return cls(
            interval=config.get_float("poll.interval", 5.0),
            max_retries=config.get_int("poll.max_retries", 3),
            quit_on_error=config.get_bool("poll.quit_on_error", True),
            immediate=config.get_bool("poll.immediate", False),
            max_executions=int(max_executions) if max_executions is not None else None,
        )


@dataclass(frozen=True)
class PollingStatus:
    """Point-in-time view of a poller."""

    is_active: bool
    retry_count: int
    execution_count: int
