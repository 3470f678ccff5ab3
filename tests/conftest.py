"""
Shared Test Fixtures
"""

import pytest

from utilkit.utils.logger import Logger, LoggerRegistry, LogLevel, MemoryHandler


CI_VARIABLES = (
    "CI",
    "CONTINUOUS_INTEGRATION",
    "GITHUB_ACTIONS",
    "GITLAB_CI",
    "TRAVIS",
    "CIRCLECI",
)


@pytest.fixture
def memory_handler():
    """Capture log records in memory."""
    return MemoryHandler()


@pytest.fixture
def logger(memory_handler):
    """Trace-level logger writing to the memory handler."""
    return Logger("test", level=LogLevel.TRACE, handlers=[memory_handler])


@pytest.fixture
def registry(memory_handler):
    """Registry whose loggers share the memory handler."""
    return LoggerRegistry(default_handlers=[memory_handler])


@pytest.fixture
def no_ci(monkeypatch):
    """Remove CI markers from the environment."""
    for name in CI_VARIABLES:
        monkeypatch.delenv(name, raising=False)
