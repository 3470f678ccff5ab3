"""
utilkit - Async Control Flow & Everyday Helpers
===============================================

Small building blocks for asynchronous Python code that talks to
unreliable things: retry with a fixed delay, debounce, throttle and
interval polling, plus the logging, configuration and environment
plumbing around them and a set of pure helper functions.

Features:
---------
- Retry with constant delay and a bounded attempt budget
- Debounce and throttle with leading/trailing edges and cancellation
- Interval polling with stop conditions, retry budget and execution cap
- Structured logger with text/JSON formatters and an explicit registry
- Layered configuration with UTILKIT_* environment overrides
- String, sequence, dict, number, byte-size and pattern helpers

Quick Start:
    from utilkit import Poller, PollingOptions

    poller = Poller(PollingOptions(interval=1.0, immediate=True))
    job = await poller.start(fetch_job, lambda job: job["done"])
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

from typing import TYPE_CHECKING

# Core imports (always available)
from utilkit.errors import (
    ArgumentError,
    ConfigError,
    ParseError,
    UtilsError,
    ValidationError,
)
from utilkit.function import (
    Cancelled,
    DebounceOptions,
    DebounceRejected,
    Debouncer,
    ExecutionRejected,
    FunctionError,
    FunctionTimeout,
    MaxRetriesExceeded,
    Poller,
    PollingError,
    PollingOptions,
    PollingStatus,
    PollingStopped,
    RetryExhausted,
    RetryOptions,
    ThrottleOptions,
    ThrottleRejected,
    Throttler,
    debounce,
    retry,
    sleep_async,
    throttle,
    with_retry,
)

# Lazy imports for faster startup
if TYPE_CHECKING:
    from utilkit.utils.config import Config
    from utilkit.utils.env import Env
    from utilkit.utils.logger import Logger, LoggerRegistry, LogLevel
    from utilkit.helpers.bytesize import format_bytes, parse_bytes


def __getattr__(name: str):
    """Lazy loading of the ambient and helper layers."""
    _imports = {
        # Utils
        "Config": "utilkit.utils.config",
        "Env": "utilkit.utils.env",
        "Logger": "utilkit.utils.logger",
        "LoggerRegistry": "utilkit.utils.logger",
        "LogLevel": "utilkit.utils.logger",
        "configure_logging": "utilkit.utils.logger",
        # Helpers
        "format_bytes": "utilkit.helpers.bytesize",
        "parse_bytes": "utilkit.helpers.bytesize",
        "helpers": "utilkit.helpers",
    }

    if name in _imports:
        import importlib
        module = importlib.import_module(_imports[name])
        if name == "helpers":
            return module
        return getattr(module, name)

    raise AttributeError(f"module 'utilkit' has no attribute '{name}'")


__all__ = [
    # Metadata
    "__version__",
    "__license__",
    # Errors
    "UtilsError",
    "ArgumentError",
    "ValidationError",
    "ConfigError",
    "ParseError",
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
    # Control flow (always loaded)
    "with_retry",
    "Debouncer",
    "Throttler",
    "Poller",
    "RetryOptions",
    "DebounceOptions",
    "ThrottleOptions",
    "PollingOptions",
    "PollingStatus",
    "sleep_async",
    "retry",
    "debounce",
    "throttle",
    # Utils (lazy)
    "Config",
    "Env",
    "Logger",
    "LoggerRegistry",
    "LogLevel",
    "configure_logging",
    # Helpers (lazy)
    "format_bytes",
    "parse_bytes",
]
