"""
utilkit Environment
===================

Environment variable access and runtime environment detection.
"""

from __future__ import annotations

import os
import platform
import re
import struct
import sys
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, TypeVar, Union

import psutil

from utilkit.errors import ConfigError


T = TypeVar("T")

CI_VARIABLES = (
    "CI",
    "CONTINUOUS_INTEGRATION",
    "GITHUB_ACTIONS",
    "GITLAB_CI",
    "TRAVIS",
    "CIRCLECI",
)


class Env:
    """
    Environment variable manager.

    Loads variables from .env files and provides typed access with
    defaults and validation.

    Example:
        env = Env().load()

        debug = env.bool("DEBUG", default=False)
        interval = env.float("POLL_INTERVAL", default=5.0)
        hosts = env.list("ALLOWED_HOSTS", default=["localhost"])

        # Required values
        token = env.str("API_TOKEN", required=True)
    """

    def __init__(
        self,
        env_file: Optional[Union[str, Path]] = None,
        override: bool = False,
    ):
        """
        Initialize environment manager.

        Args:
            env_file: Path to .env file
            override: Override existing environment variables
        """
        self._env_file = Path(env_file) if env_file else None
        self._override = override
        self._cache: Dict[str, str] = {}
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    def load(
        self,
        env_file: Optional[Union[str, Path]] = None,
        override: Optional[bool] = None,
    ) -> "Env":
        """
        Load environment from file.

        Without an explicit path, ``.env`` is searched for in the
        current directory and up to three parents.

        Returns:
            Self for chaining
        """
        path = Path(env_file) if env_file else self._env_file
        should_override = override if override is not None else self._override

        if not path:
            path = self._find_env_file()

        if path and path.exists():
            self._load_file(path, should_override)

        self._loaded = True
        return self

    def _find_env_file(self) -> Optional[Path]:
        cwd = Path.cwd()

        for directory in [cwd] + list(cwd.parents)[:3]:
            env_file = directory / ".env"
            if env_file.exists():
                return env_file

        return None

    def _load_file(self, path: Path, override: bool) -> None:
        for line in path.read_text().splitlines():
            line = line.strip()

            if not line or line.startswith("#"):
                continue

            if line.startswith("export "):
                line = line[7:]

            if "=" not in line:
                continue

            key, _, value = line.partition("=")
            key = key.strip()
            value = value.strip()

            double_quoted = len(value) >= 2 and value[0] == value[-1] == '"'
            single_quoted = len(value) >= 2 and value[0] == value[-1] == "'"

            if double_quoted or single_quoted:
                value = value[1:-1]
            else:
                # Inline comment on unquoted value
                value = value.split(" #", 1)[0].rstrip()

            if double_quoted:
                value = value.encode().decode("unicode_escape")

            # Single-quoted values are literal
            if not single_quoted:
                value = self._expand_variables(value)

            self._cache[key] = value

            if override or key not in os.environ:
                os.environ[key] = value

    def _expand_variables(self, value: str) -> str:
        """Expand ${VAR} and $VAR references."""
        def replace(match: "re.Match[str]") -> str:
            name = match.group(1) or match.group(2)
            return os.getenv(name, self._cache.get(name, ""))

        return re.sub(r"\$\{([^}]+)\}|\$(\w+)", replace, value)

    def get(
        self,
        key: str,
        default: Optional[str] = None,
        required: bool = False,
    ) -> Optional[str]:
        """
        Get environment variable.

        Raises:
            ConfigError: If required and not found
        """
        value = os.getenv(key, self._cache.get(key, default))

        if value is None and required:
            raise ConfigError(key, "required environment variable is not set")

        return value

    def str(
        self,
        key: str,
        default: Optional[str] = None,
        required: bool = False,
    ) -> Optional[str]:
        """Get string value."""
        return self.get(key, default, required)

    def int(
        self,
        key: str,
        default: Optional[int] = None,
        required: bool = False,
    ) -> Optional[int]:
        """Get integer value."""
        return self._convert(key, default, required, int, "integer")

    def float(
        self,
        key: str,
        default: Optional[float] = None,
        required: bool = False,
    ) -> Optional[float]:
        """Get float value."""
        return self._convert(key, default, required, float, "float")

    def _convert(
        self,
        key: str,
        default: Any,
        required: bool,
        convert: Callable[[str], Any],
        type_name: str,
    ) -> Any:
        value = self.get(key, required=required)

        if value is None:
            return default

        try:
            return convert(value)
        except ValueError:
            if default is not None:
                return default
            raise ConfigError(key, f"not a valid {type_name}: {value!r}") from None

    def bool(
        self,
        key: str,
        default: Optional[bool] = None,
        required: bool = False,
    ) -> Optional[bool]:
        """Get boolean value."""
        value = self.get(key, required=required)

        if value is None:
            return default

        lowered = value.lower()
        if lowered in ("true", "1", "yes", "on", "enabled"):
            return True
        if lowered in ("false", "0", "no", "off", "disabled", ""):
            return False

        if default is not None:
            return default

        raise ConfigError(key, f"not a valid boolean: {value!r}")

    def list(
        self,
        key: str,
        default: Optional[List[str]] = None,
        separator: str = ",",
        required: bool = False,
    ) -> Optional[List[str]]:
        """Get list value (comma-separated by default)."""
        value = self.get(key, required=required)

        if value is None:
            return default

        if not value:
            return []

        return [item.strip() for item in value.split(separator)]

    def dict(self, prefix: str) -> Dict[str, str]:
        """
        Get all variables with prefix as dict.

        Example:
            env.dict("DB_")  # {"host": ..., "port": ...}
        """
        return {
            key[len(prefix):].lower(): value
            for key, value in os.environ.items()
            if key.startswith(prefix)
        }

    def set(self, key: str, value: str) -> None:
        """Set environment variable."""
        os.environ[key] = value
        self._cache[key] = value

    def unset(self, key: str) -> None:
        """Unset environment variable."""
        os.environ.pop(key, None)
        self._cache.pop(key, None)

    def __getitem__(self, key: str) -> Optional[str]:
        return self.get(key)

    def __setitem__(self, key: str, value: str) -> None:
        self.set(key, value)

    def __contains__(self, key: str) -> bool:
        return key in os.environ or key in self._cache


# =============================================================================
# Platform Detection
# =============================================================================

@dataclass(frozen=True)
class EnvironmentInfo:
    """
    Runtime environment description.

    Attributes:
        os: Operating system ("linux", "macos", "windows", ...)
        arch: Machine architecture
        family: "unix" or "windows"
        exe_suffix: Executable suffix
        dll_suffix: Shared library suffix
        dll_prefix: Shared library prefix
        is_debug: Assertions enabled (``__debug__``)
        is_release: Running with ``-O``
    """

    os: str
    arch: str
    family: str
    exe_suffix: str
    dll_suffix: str
    dll_prefix: str
    is_debug: bool
    is_release: bool


def get_os_name() -> str:
    """Normalized operating system name."""
    if sys.platform.startswith("win"):
        return "windows"
    if sys.platform == "darwin":
        return "macos"
    if sys.platform.startswith("linux"):
        return "linux"
    return sys.platform


def is_windows() -> bool:
    return get_os_name() == "windows"


def is_macos() -> bool:
    return get_os_name() == "macos"


def is_linux() -> bool:
    return get_os_name() == "linux"


def is_unix() -> bool:
    return os.name == "posix"


def is_debug() -> bool:
    return __debug__


def is_release() -> bool:
    return not __debug__


def is_64bit() -> bool:
    return struct.calcsize("P") * 8 == 64


def is_32bit() -> bool:
    return struct.calcsize("P") * 8 == 32


def get_environment_info() -> EnvironmentInfo:
    """Get comprehensive environment information."""
    os_name = get_os_name()
    windows = os_name == "windows"

    if windows:
        dll_suffix = ".dll"
    elif os_name == "macos":
        dll_suffix = ".dylib"
    else:
        dll_suffix = ".so"

    return EnvironmentInfo(
        os=os_name,
        arch=platform.machine().lower(),
        family="windows" if windows else "unix",
        exe_suffix=".exe" if windows else "",
        dll_suffix=dll_suffix,
        dll_prefix="" if windows else "lib",
        is_debug=is_debug(),
        is_release=is_release(),
    )


def is_ci() -> bool:
    """Check if running in a CI environment."""
    return any(has_env_var(name) for name in CI_VARIABLES)


# =============================================================================
# Process Queries
# =============================================================================

def get_current_dir() -> str:
    return os.getcwd()


def get_env_var(key: str) -> Optional[str]:
    return os.environ.get(key)


def get_env_var_or_default(key: str, default: str) -> str:
    return os.environ.get(key, default)


def get_all_env_vars() -> Dict[str, str]:
    return dict(os.environ)


def has_env_var(key: str) -> bool:
    return key in os.environ


def get_cpu_count() -> int:
    """Number of logical CPUs."""
    return os.cpu_count() or 1


def get_physical_cpu_count() -> int:
    """Number of physical cores, falling back to the logical count."""
    return psutil.cpu_count(logical=False) or get_cpu_count()


# =============================================================================
# Directories
# =============================================================================

def get_home_dir() -> Optional[str]:
    try:
        return str(Path.home())
    except RuntimeError:
        return None


def _user_dir(xdg_var: str, xdg_default: str, mac: str, win_var: str) -> Optional[str]:
    home = get_home_dir()
    os_name = get_os_name()

    if os_name == "windows":
        return os.environ.get(win_var)

    if os_name == "macos":
        return str(Path(home) / mac) if home else None

    configured = os.environ.get(xdg_var)
    if configured:
        return configured
    return str(Path(home) / xdg_default) if home else None


def get_config_dir() -> Optional[str]:
    """Per-user configuration directory."""
    return _user_dir("XDG_CONFIG_HOME", ".config", "Library/Application Support", "APPDATA")


def get_cache_dir() -> Optional[str]:
    """Per-user cache directory."""
    return _user_dir("XDG_CACHE_HOME", ".cache", "Library/Caches", "LOCALAPPDATA")


def get_data_dir() -> Optional[str]:
    """Per-user data directory."""
    return _user_dir("XDG_DATA_HOME", ".local/share", "Library/Application Support", "APPDATA")


def get_temp_dir() -> str:
    return tempfile.gettempdir()


# =============================================================================
# Conditional Execution
# =============================================================================

def run_on_os(os_name: str, func: Callable[[], T]) -> Optional[T]:
    """
    Run a function only on the given operating system.

    Example:
        >>> run_on_os("plan9", lambda: 1) is None
        True
    """
    if get_os_name() == os_name.lower():
        return func()
    return None


def run_on_windows(func: Callable[[], T]) -> Optional[T]:
    return func() if is_windows() else None


def run_on_unix(func: Callable[[], T]) -> Optional[T]:
    return func() if is_unix() else None


# =============================================================================
# Module-level Access
# =============================================================================

_env: Optional[Env] = None


def env(
    key: str,
    default: Optional[str] = None,
    required: bool = False,
) -> Optional[str]:
    """
    Get environment variable using the shared instance.

    The shared instance loads the nearest ``.env`` file on first use.
    """
    global _env

    if _env is None:
        _env = Env()
        _env.load()

    return _env.get(key, default, required)


def load_env(
    env_file: Optional[Union[str, Path]] = None,
    override: bool = False,
) -> Env:
    """
    Load environment from file into a fresh shared instance.

    Args:
        env_file: Path to .env file
        override: Override existing variables

    Returns:
        Env instance
    """
    global _env

    _env = Env(env_file, override)
    _env.load()

    return _env
