"""
utilkit Configuration
=====================

Layered configuration with dot-notation access.

Sources are merged by priority (highest wins):
1. Runtime values (``config.set``)
2. Environment variables (UTILKIT_*)
3. Python config files (``load_from_path``)
4. Library defaults (``Config.with_defaults``)

Example:
    config = Config.with_defaults()
    config.load_env_overrides()

    interval = config.get_float("poll.interval")
    options = PollingOptions.from_config(config)

Environment variables use a double underscore for nesting, so
``UTILKIT_POLL__MAX_RETRIES=5`` sets ``poll.max_retries``.
"""

from __future__ import annotations

import copy
import importlib.util
import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from utilkit.errors import ConfigError


DEFAULTS: Dict[str, Any] = {
    "retry": {
        "max_retries": 3,
        "delay": 0.0,
    },
    "debounce": {
        "leading": False,
        "trailing": True,
    },
    "throttle": {
        "leading": False,
        "trailing": True,
    },
    "poll": {
        "interval": 5.0,
        "max_retries": 3,
        "quit_on_error": True,
        "immediate": False,
        "max_executions": None,
    },
    "logging": {
        "level": "INFO",
        "format": "text",
        "colors": False,
    },
}


@dataclass
class ConfigSource:
    """Configuration source with priority."""
    name: str
    data: Dict[str, Any]
    priority: int = 0


class Config:
    """
    Configuration container.

    Example:
        config = Config()
        config.set("poll.interval", 2.0)

        config.get("poll.interval")            # 2.0
        config.get("poll.missing", "default")  # "default"
    """

    ENV_PREFIX = "UTILKIT_"

    def __init__(self) -> None:
        self._sources: List[ConfigSource] = []
        self._cache: Dict[str, Any] = {}
        self._merged: Dict[str, Any] = {}
        self._dirty = True

    @classmethod
    def with_defaults(cls) -> "Config":
        """Create a config seeded with the library defaults."""
        config = cls()
        config.add_source("defaults", copy.deepcopy(DEFAULTS), priority=0)
        return config

    def load_from_path(self, path: Union[str, Path], priority: int = 10) -> None:
        """
        Load a Python config file.

        The module may define a ``config`` dict; otherwise its
        upper-case globals are used with lower-cased keys.

        Raises:
            ConfigError: File missing or not loadable
        """
        path = Path(path)
        if not path.is_file():
            raise ConfigError(str(path), "config file not found")

        spec = importlib.util.spec_from_file_location(f"utilkit_config_{path.stem}", path)
        if spec is None or spec.loader is None:
            raise ConfigError(str(path), "config file cannot be loaded")

        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)

        config = getattr(module, "config", None)
        if isinstance(config, dict):
            data = config
        else:
            data = {
                key.lower(): value
                for key, value in vars(module).items()
                if key.isupper()
            }

        self.add_source(f"file:{path.name}", data, priority=priority)

    def load_env_overrides(
        self,
        prefix: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        """Load overrides from prefixed environment variables."""
        prefix = prefix or self.ENV_PREFIX
        environ = os.environ if environ is None else environ
        overrides: Dict[str, Any] = {}

        for key, value in environ.items():
            if key.startswith(prefix):
                # UTILKIT_POLL__MAX_RETRIES -> poll.max_retries
                config_key = key[len(prefix):].lower().replace("__", ".")
                overrides[config_key] = self._parse_env_value(value)

        if overrides:
            self.add_source("env_vars", self._unflatten(overrides), priority=100)

    def _parse_env_value(self, value: str) -> Any:
        """Parse environment variable value to appropriate type."""
        lowered = value.lower()
        if lowered in ("true", "yes", "on"):
            return True
        if lowered in ("false", "no", "off"):
            return False
        if lowered in ("none", "null"):
            return None

        try:
            return int(value)
        except ValueError:
            pass

        try:
            return float(value)
        except ValueError:
            pass

        if value.startswith(("{", "[")):
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                pass

        return value

    def _unflatten(self, flat: Dict[str, Any]) -> Dict[str, Any]:
        """Convert flat dot-notation keys to nested dict."""
        result: Dict[str, Any] = {}

        for key, value in flat.items():
            parts = key.split(".")
            current = result

            for part in parts[:-1]:
                current = current.setdefault(part, {})

            current[parts[-1]] = value

        return result

    def add_source(
        self,
        name: str,
        data: Dict[str, Any],
        priority: int = 0,
    ) -> None:
        """Add a configuration source."""
        self._sources.append(ConfigSource(name=name, data=data, priority=priority))
        self._dirty = True
        self._cache.clear()

    def sources(self) -> List[str]:
        """Source names, lowest priority first."""
        return [s.name for s in sorted(self._sources, key=lambda s: s.priority)]

    def _merge(self) -> None:
        """Merge all sources into single configuration."""
        if not self._dirty:
            return

        # Lower priority first, so higher overrides
        self._merged = {}
        for source in sorted(self._sources, key=lambda s: s.priority):
            self._deep_merge(self._merged, copy.deepcopy(source.data))

        self._dirty = False
        self._cache.clear()

    def _deep_merge(self, base: Dict, override: Dict) -> None:
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            key: Configuration key (e.g., "poll.interval")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        self._merge()

        if key in self._cache:
            return self._cache[key]

        current: Any = self._merged
        for part in key.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]

        self._cache[key] = current
        return current

    def get_int(self, key: str, default: int = 0) -> int:
        """Get configuration value as integer."""
        value = self.get(key, default)
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ConfigError(key, f"expected an integer, got {value!r}") from None

    def get_float(self, key: str, default: float = 0.0) -> float:
        """Get configuration value as float."""
        value = self.get(key, default)
        try:
            return float(value)
        except (TypeError, ValueError):
            raise ConfigError(key, f"expected a number, got {value!r}") from None

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get configuration value as boolean."""
        value = self.get(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "yes", "1", "on")
        return bool(value)

    def get_list(self, key: str, default: Optional[List] = None) -> List:
        """Get configuration value as list."""
        value = self.get(key, default)
        if value is None:
            return default or []
        if isinstance(value, list):
            return value
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return [value]

    def set(self, key: str, value: Any) -> None:
        """
        Set a runtime configuration value.

        Runtime values have the highest priority.
        """
        runtime = next((s for s in self._sources if s.name == "runtime"), None)
        if runtime is None:
            runtime = ConfigSource(name="runtime", data={}, priority=1000)
            self._sources.append(runtime)

        parts = key.split(".")
        current = runtime.data
        for part in parts[:-1]:
            current = current.setdefault(part, {})
        current[parts[-1]] = value

        self._dirty = True
        self._cache.clear()

    def has(self, key: str) -> bool:
        """Check if configuration key exists."""
        sentinel = object()
        return self.get(key, sentinel) is not sentinel

    def all(self) -> Dict[str, Any]:
        """Get all configuration as dict."""
        self._merge()
        return copy.deepcopy(self._merged)

    def section(self, prefix: str) -> Dict[str, Any]:
        """Get all values under a prefix."""
        value = self.get(prefix)
        if isinstance(value, dict):
            return copy.deepcopy(value)
        return {}

    def __getitem__(self, key: str) -> Any:
        if not self.has(key):
            raise KeyError(key)
        return self.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __contains__(self, key: str) -> bool:
        return self.has(key)
