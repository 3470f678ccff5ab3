"""
utilkit Logger
==============

Structured logging with pluggable formatters and handlers.

Loggers are owned by an explicit ``LoggerRegistry`` rather than a
process-wide table, so applications and tests build, reconfigure and
discard them deterministically:

    registry = LoggerRegistry()
    log = registry.get_logger("jobs")
    log.info("Job finished", job_id=42)
"""

from __future__ import annotations

import json
import sys
import threading
import traceback
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Dict, List, Optional, TextIO, Union

from utilkit.errors import ArgumentError

if TYPE_CHECKING:
    from utilkit.utils.config import Config


class LogLevel(IntEnum):
    """Log levels in order of severity."""

    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    @classmethod
    def parse(cls, value: Union[str, int, "LogLevel"]) -> "LogLevel":
        """
        Parse a level name or number.

        Example:
            >>> LogLevel.parse("warn")
            <LogLevel.WARNING: 30>
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise ArgumentError(f"Invalid log level: {value}") from None

        name = str(value).strip().upper()
        if name == "WARN":
            name = "WARNING"

        try:
            return cls[name]
        except KeyError:
            raise ArgumentError(f"Invalid log level: {value}") from None


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


@dataclass
class LogRecord:
    """
    Structured log record.

    Attributes:
        level: Log level
        message: Log message
        timestamp: Record timestamp (UTC)
        context: Additional key-value metadata
        exception: Exception info
        logger_name: Emitting logger
    """

    level: LogLevel
    message: str
    timestamp: datetime = field(default_factory=_utcnow)
    context: Dict[str, Any] = field(default_factory=dict)
    exception: Optional[BaseException] = None
    logger_name: str = "utilkit"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, with context merged at top level."""
        data: Dict[str, Any] = {
            "timestamp": self.timestamp.isoformat(),
            "level": self.level.name,
            "logger": self.logger_name,
            "message": self.message,
        }

        for key, value in self.context.items():
            data.setdefault(key, value)

        if self.exception:
            data["exception"] = {
                "type": type(self.exception).__name__,
                "message": str(self.exception),
                "traceback": traceback.format_exception(
                    type(self.exception),
                    self.exception,
                    self.exception.__traceback__,
                ),
            }

        return data

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), default=str)


class LogFormatter:
    """Base log formatter."""

    def format(self, record: LogRecord) -> str:
        """Format log record."""
        raise NotImplementedError


class TextFormatter(LogFormatter):
    """
    Plain text formatter.

    Example output:
        2024-01-15 10:30:45.120 [INFO] (jobs) Job finished job_id=42
    """

    COLORS = {
        LogLevel.TRACE: "\033[90m",     # Grey
        LogLevel.DEBUG: "\033[36m",     # Cyan
        LogLevel.INFO: "\033[32m",      # Green
        LogLevel.WARNING: "\033[33m",   # Yellow
        LogLevel.ERROR: "\033[31m",     # Red
        LogLevel.CRITICAL: "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(
        self,
        format_string: Optional[str] = None,
        date_format: str = "%Y-%m-%d %H:%M:%S",
        colors: bool = False,
        stream: Optional[TextIO] = None,
    ):
        """
        Initialize formatter.

        Colors are only used when the target stream (stdout by default)
        is a terminal.
        """
        self.format_string = format_string or "{timestamp} [{level}] ({logger}) {message}"
        self.date_format = date_format
        self.colors = colors and _is_tty(stream if stream is not None else sys.stdout)

    def format(self, record: LogRecord) -> str:
        """Format as text."""
        timestamp = record.timestamp.strftime(self.date_format)
        timestamp += f".{record.timestamp.microsecond // 1000:03d}"

        level = record.level.name
        if self.colors:
            level = f"{self.COLORS.get(record.level, '')}{level}{self.RESET}"

        message = record.message
        if record.context:
            pairs = " ".join(f"{k}={v}" for k, v in record.context.items())
            message = f"{message} {pairs}"

        output = self.format_string.format(
            timestamp=timestamp,
            level=level,
            message=message,
            logger=record.logger_name,
        )

        if record.exception:
            output += "\n" + "".join(
                traceback.format_exception(
                    type(record.exception),
                    record.exception,
                    record.exception.__traceback__,
                )
            ).rstrip()

        return output


class JsonFormatter(LogFormatter):
    """
    JSON formatter for structured logging.

    Example output:
        {"timestamp": "2024-01-15T10:30:45+00:00", "level": "INFO", "logger": "jobs", "message": "Job finished", "job_id": 42}
    """

    def __init__(self, pretty: bool = False):
        """Initialize formatter."""
        self.pretty = pretty

    def format(self, record: LogRecord) -> str:
        """Format as JSON."""
        if self.pretty:
            return json.dumps(record.to_dict(), indent=2, default=str)
        return record.to_json()


class LogHandler:
    """Base log handler."""

    def __init__(
        self,
        formatter: Optional[LogFormatter] = None,
        level: LogLevel = LogLevel.TRACE,
    ):
        """Initialize handler."""
        self.formatter = formatter or TextFormatter()
        self.level = level

    def handle(self, record: LogRecord) -> None:
        """Handle log record."""
        if record.level >= self.level:
            self.emit(record)

    def emit(self, record: LogRecord) -> None:
        """Emit formatted record."""
        raise NotImplementedError


class StreamHandler(LogHandler):
    """Stream output handler (stderr by default)."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        formatter: Optional[LogFormatter] = None,
        level: LogLevel = LogLevel.TRACE,
    ):
        """Initialize stream handler."""
        super().__init__(formatter, level)
        self.stream = stream or sys.stderr

    def emit(self, record: LogRecord) -> None:
        """Write to stream."""
        self.stream.write(self.formatter.format(record) + "\n")
        self.stream.flush()


class MemoryHandler(LogHandler):
    """
    Keeps emitted records in memory.

    Example:
        handler = MemoryHandler()
        log = Logger("test", handlers=[handler])
        log.info("hello")
        assert handler.lines == ["... [INFO] (test) hello"]
    """

    def __init__(
        self,
        formatter: Optional[LogFormatter] = None,
        level: LogLevel = LogLevel.TRACE,
    ):
        super().__init__(formatter, level)
        self.records: List[LogRecord] = []
        self.lines: List[str] = []

    def emit(self, record: LogRecord) -> None:
        self.records.append(record)
        self.lines.append(self.formatter.format(record))

    def messages(self) -> List[str]:
        """Raw messages of captured records."""
        return [record.message for record in self.records]

    def clear(self) -> None:
        self.records.clear()
        self.lines.clear()


class Logger:
    """
    Structured logger.

    Example:
        log = Logger("jobs", level=LogLevel.INFO, handlers=[StreamHandler()])

        log.info("Job started", job_id=42)
        log.error("Job failed", exception=e)

        # With context
        log = log.with_context(worker="w1")
        log.info("Heartbeat")
    """

    def __init__(
        self,
        name: str = "utilkit",
        level: LogLevel = LogLevel.INFO,
        handlers: Optional[List[LogHandler]] = None,
    ):
        """
        Initialize logger.

        Args:
            name: Logger name
            level: Minimum log level
            handlers: Log handlers (none means silent)
        """
        self.name = name
        self.level = level
        self._handlers: List[LogHandler] = list(handlers) if handlers is not None else []
        self._context: Dict[str, Any] = {}

    @property
    def handlers(self) -> List[LogHandler]:
        return list(self._handlers)

    def add_handler(self, handler: LogHandler) -> "Logger":
        """Add log handler."""
        self._handlers.append(handler)
        return self

    def remove_handler(self, handler: LogHandler) -> "Logger":
        """Remove log handler."""
        self._handlers.remove(handler)
        return self

    def with_context(self, **context: Any) -> "Logger":
        """
        Create logger with additional context.

        The child shares handlers and level with its parent at the
        time of the call.
        """
        child = Logger(name=self.name, level=self.level, handlers=self._handlers)
        child._context = {**self._context, **context}
        return child

    def is_enabled(self, level: LogLevel) -> bool:
        """Check if a level would be emitted."""
        return level >= self.level

    def log(
        self,
        level: LogLevel,
        message: str,
        exception: Optional[BaseException] = None,
        **context: Any,
    ) -> None:
        """Log a message at an explicit level."""
        if not self.is_enabled(level) or not self._handlers:
            return

        record = LogRecord(
            level=level,
            message=message,
            context={**self._context, **context},
            exception=exception,
            logger_name=self.name,
        )

        for handler in self._handlers:
            try:
                handler.handle(record)
            except Exception as e:
                # Report on stderr; a broken handler must not break the caller
                sys.stderr.write(
                    f"utilkit: {type(handler).__name__} failed for logger "
                    f"{self.name!r}: {e}\n"
                )

    def trace(self, message: str, **context: Any) -> None:
        """Log trace message."""
        self.log(LogLevel.TRACE, message, **context)

    def debug(self, message: str, **context: Any) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, message, **context)

    def info(self, message: str, **context: Any) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, message, **context)

    def warning(self, message: str, **context: Any) -> None:
        """Log warning message."""
        self.log(LogLevel.WARNING, message, **context)

    warn = warning

    def error(
        self,
        message: str,
        exception: Optional[BaseException] = None,
        **context: Any,
    ) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, message, exception, **context)

    def critical(
        self,
        message: str,
        exception: Optional[BaseException] = None,
        **context: Any,
    ) -> None:
        """Log critical message."""
        self.log(LogLevel.CRITICAL, message, exception, **context)

    def exception(self, message: str, **context: Any) -> None:
        """Log the exception currently being handled."""
        self.log(LogLevel.ERROR, message, sys.exc_info()[1], **context)

    def __repr__(self) -> str:
        return f"Logger(name={self.name!r}, level={self.level.name})"


def null_logger(name: str = "utilkit") -> Logger:
    """Logger without handlers; every call is a no-op."""
    return Logger(name=name, handlers=[])


class LoggerRegistry:
    """
    Named logger container.

    Example:
        registry = LoggerRegistry()
        api = registry.get_logger("api")
        registry.set_global_level(LogLevel.WARNING)
    """

    def __init__(
        self,
        default_level: LogLevel = LogLevel.INFO,
        default_handlers: Optional[List[LogHandler]] = None,
    ):
        self.default_level = default_level
        self._default_handlers = default_handlers
        self._loggers: Dict[str, Logger] = {}
        self._lock = threading.Lock()

    def _make_handlers(self) -> List[LogHandler]:
        if self._default_handlers is not None:
            return list(self._default_handlers)
        return [StreamHandler()]

    def get_logger(self, name: str) -> Logger:
        """Get or create a logger by name."""
        with self._lock:
            logger = self._loggers.get(name)
            if logger is None:
                logger = Logger(
                    name=name,
                    level=self.default_level,
                    handlers=self._make_handlers(),
                )
                self._loggers[name] = logger
            return logger

    def create_logger(
        self,
        name: str,
        level: Optional[LogLevel] = None,
        handlers: Optional[List[LogHandler]] = None,
    ) -> Logger:
        """Create a logger, replacing any existing one with that name."""
        logger = Logger(
            name=name,
            level=level if level is not None else self.default_level,
            handlers=handlers if handlers is not None else self._make_handlers(),
        )
        with self._lock:
            self._loggers[name] = logger
        return logger

    def set_global_level(self, level: LogLevel) -> None:
        """Set the level of every registered logger."""
        with self._lock:
            self.default_level = level
            for logger in self._loggers.values():
                logger.level = level

    def names(self) -> List[str]:
        with self._lock:
            return sorted(self._loggers)

    def clear(self) -> None:
        with self._lock:
            self._loggers.clear()

    def __contains__(self, name: str) -> bool:
        return name in self._loggers

    def __len__(self) -> int:
        return len(self._loggers)


def configure_logging(
    registry: LoggerRegistry,
    name: str = "utilkit",
    level: Union[LogLevel, str] = LogLevel.INFO,
    format: str = "text",
    colors: bool = False,
    stream: Optional[TextIO] = None,
) -> Logger:
    """
    Configure a logger in a registry.

    Args:
        registry: Registry that will own the logger
        name: Logger name
        level: Log level
        format: Output format ("text" or "json")
        colors: Enable colored text output when the stream is a terminal
        stream: Output stream (stderr by default)

    Returns:
        Configured logger
    """
    stream = stream or sys.stderr

    if format == "json":
        formatter: LogFormatter = JsonFormatter()
    elif format == "text":
        formatter = TextFormatter(colors=colors, stream=stream)
    else:
        raise ArgumentError(f"Unknown log format: {format}")

    return registry.create_logger(
        name,
        level=LogLevel.parse(level),
        handlers=[StreamHandler(stream=stream, formatter=formatter)],
    )


def logger_from_config(
    config: "Config",
    registry: LoggerRegistry,
    name: str = "utilkit",
    stream: Optional[TextIO] = None,
) -> Logger:
    """Configure a logger from the ``logging`` config section."""
    return configure_logging(
        registry,
        name=name,
        level=config.get("logging.level", "INFO"),
        format=config.get("logging.format", "text"),
        colors=config.get_bool("logging.colors", False),
        stream=stream,
    )
