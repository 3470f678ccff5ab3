"""
utilkit Utils Package
=====================

Logging, configuration and environment management.

Only the logger is imported eagerly; the control-flow primitives need
it. Configuration and environment support (and psutil with it) load on
first access.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from utilkit.utils.logger import (
    JsonFormatter,
    LogHandler,
    LogLevel,
    LogRecord,
    Logger,
    LoggerRegistry,
    MemoryHandler,
    StreamHandler,
    TextFormatter,
    configure_logging,
    logger_from_config,
    null_logger,
)

if TYPE_CHECKING:
    from utilkit.utils.config import Config, ConfigSource, DEFAULTS
    from utilkit.utils.env import (
        Env,
        EnvironmentInfo,
        get_environment_info,
        is_ci,
        load_env,
    )


def __getattr__(name: str):
    """Lazy loading of configuration and environment support."""
    _imports = {
        # Configuration
        "Config": "utilkit.utils.config",
        "ConfigSource": "utilkit.utils.config",
        "DEFAULTS": "utilkit.utils.config",
        # Environment
        "Env": "utilkit.utils.env",
        "EnvironmentInfo": "utilkit.utils.env",
        "load_env": "utilkit.utils.env",
        "get_environment_info": "utilkit.utils.env",
        "is_ci": "utilkit.utils.env",
    }

    if name in _imports:
        import importlib
        module = importlib.import_module(_imports[name])
        return getattr(module, name)

    raise AttributeError(f"module 'utilkit.utils' has no attribute '{name}'")


__all__ = [
    # Configuration (lazy)
    "Config",
    "ConfigSource",
    "DEFAULTS",
    # Environment (lazy)
    "Env",
    "EnvironmentInfo",
    "load_env",
    "get_environment_info",
    "is_ci",
    # Logging
    "Logger",
    "LogLevel",
    "LogRecord",
    "LoggerRegistry",
    "LogHandler",
    "StreamHandler",
    "MemoryHandler",
    "TextFormatter",
    "JsonFormatter",
    "configure_logging",
    "logger_from_config",
    "null_logger",
]
