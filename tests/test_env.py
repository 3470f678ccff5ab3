"""
Environment Tests
"""

import importlib
import os
import sys

import pytest

from utilkit.errors import ConfigError
from utilkit.utils.env import (
    Env,
    EnvironmentInfo,
    get_all_env_vars,
    get_cache_dir,
    get_config_dir,
    get_cpu_count,
    get_current_dir,
    get_env_var,
    get_env_var_or_default,
    get_environment_info,
    get_physical_cpu_count,
    get_temp_dir,
    has_env_var,
    is_32bit,
    is_64bit,
    is_ci,
    is_linux,
    is_macos,
    is_unix,
    is_windows,
    load_env,
    run_on_os,
    run_on_unix,
    run_on_windows,
)

# load_env() swaps the module-level shared instance
env_module = importlib.import_module("utilkit.utils.env")


@pytest.fixture(autouse=True)
def clean_test_vars():
    """Drop variables written by .env loading."""
    yield
    for key in list(os.environ):
        if key.startswith("UTILKIT_TEST_"):
            del os.environ[key]


@pytest.fixture
def env_file(tmp_path):
    path = tmp_path / ".env"
    path.write_text(
        "# comment\n"
        "UTILKIT_TEST_NAME=demo\n"
        "export UTILKIT_TEST_PORT=8080\n"
        'UTILKIT_TEST_GREETING="hello world"\n'
        "UTILKIT_TEST_LITERAL='$HOME'\n"
        "UTILKIT_TEST_URL=http://${UTILKIT_TEST_NAME}:8080 # inline\n"
        "UTILKIT_TEST_HOSTS=a, b ,c\n"
        "UTILKIT_TEST_DEBUG=on\n"
    )
    return path


@pytest.fixture
def loaded(env_file, monkeypatch):
    """Env loaded from the sample file."""
    for line in env_file.read_text().splitlines():
        if "=" in line:
            key = line.replace("export ", "").split("=", 1)[0].strip()
            monkeypatch.delenv(key, raising=False)

    return Env(env_file).load()


def test_env_file_parsing(loaded):
    """Quotes, exports, expansion and comments are handled."""
    assert loaded.loaded
    assert loaded.str("UTILKIT_TEST_NAME") == "demo"
    assert loaded.int("UTILKIT_TEST_PORT") == 8080
    assert loaded.get("UTILKIT_TEST_GREETING") == "hello world"
    assert loaded.get("UTILKIT_TEST_LITERAL") == "$HOME"
    assert loaded.get("UTILKIT_TEST_URL") == "http://demo:8080"
    assert loaded.list("UTILKIT_TEST_HOSTS") == ["a", "b", "c"]
    assert loaded.bool("UTILKIT_TEST_DEBUG") is True
    assert os.environ["UTILKIT_TEST_NAME"] == "demo"


def test_existing_variables_not_overridden(env_file, monkeypatch):
    """Without override, existing variables win."""
    monkeypatch.setenv("UTILKIT_TEST_NAME", "preset")

    Env(env_file).load()

    assert os.environ["UTILKIT_TEST_NAME"] == "preset"


def test_required_missing_raises(monkeypatch):
    """Missing required values raise ConfigError."""
    monkeypatch.delenv("UTILKIT_TEST_ABSENT", raising=False)

    with pytest.raises(ConfigError) as exc_info:
        Env().str("UTILKIT_TEST_ABSENT", required=True)

    assert exc_info.value.key == "UTILKIT_TEST_ABSENT"


def test_bad_conversion_raises(monkeypatch):
    """Unconvertible values raise unless a default is given."""
    monkeypatch.setenv("UTILKIT_TEST_NUM", "many")
    env = Env()

    with pytest.raises(ConfigError):
        env.int("UTILKIT_TEST_NUM")
    with pytest.raises(ConfigError):
        env.bool("UTILKIT_TEST_NUM")

    assert env.int("UTILKIT_TEST_NUM", default=3) == 3
    assert env.float("UTILKIT_TEST_MISSING_FLOAT", default=1.5) == 1.5


def test_prefix_dict_and_mutation(monkeypatch):
    """dict() collects prefixed variables; set/unset mutate os.environ."""
    monkeypatch.setenv("UTILKIT_DB_HOST", "localhost")
    monkeypatch.setenv("UTILKIT_DB_PORT", "5432")
    env = Env()

    assert env.dict("UTILKIT_DB_") == {"host": "localhost", "port": "5432"}

    env["UTILKIT_DB_USER"] = "admin"
    assert "UTILKIT_DB_USER" in env
    env.unset("UTILKIT_DB_USER")
    assert "UTILKIT_DB_USER" not in os.environ


def test_load_env_shared_instance(env_file, monkeypatch):
    """load_env() replaces the shared instance used by env()."""
    monkeypatch.delenv("UTILKIT_TEST_NAME", raising=False)
    monkeypatch.setattr(env_module, "_env", None)

    instance = load_env(env_file)

    assert isinstance(instance, Env)
    assert env_module.env("UTILKIT_TEST_NAME") == "demo"


def test_platform_flags_consistent():
    """Exactly one of the main OS checks is true on common platforms."""
    flags = [is_windows(), is_macos(), is_linux()]
    if sys.platform in ("win32", "darwin") or sys.platform.startswith("linux"):
        assert flags.count(True) == 1
    assert is_unix() != is_windows()
    assert is_64bit() != is_32bit()


def test_environment_info():
    """EnvironmentInfo reflects the running platform."""
    info = get_environment_info()

    assert isinstance(info, EnvironmentInfo)
    assert info.is_debug != info.is_release
    if is_windows():
        assert (info.family, info.exe_suffix, info.dll_suffix) == ("windows", ".exe", ".dll")
    else:
        assert info.family == "unix"
        assert info.dll_prefix == "lib"


def test_is_ci(no_ci, monkeypatch):
    """Any CI marker variable enables CI detection."""
    assert not is_ci()

    monkeypatch.setenv("GITHUB_ACTIONS", "true")
    assert is_ci()


def test_env_var_queries(monkeypatch):
    """Process environment helpers read os.environ."""
    monkeypatch.setenv("UTILKIT_TEST_QUERY", "value")
    monkeypatch.delenv("UTILKIT_TEST_NONE", raising=False)

    assert get_env_var("UTILKIT_TEST_QUERY") == "value"
    assert get_env_var("UTILKIT_TEST_NONE") is None
    assert get_env_var_or_default("UTILKIT_TEST_NONE", "dflt") == "dflt"
    assert has_env_var("UTILKIT_TEST_QUERY")
    assert get_all_env_vars()["UTILKIT_TEST_QUERY"] == "value"
    assert get_current_dir() == os.getcwd()


def test_cpu_counts():
    """CPU counts are positive."""
    assert get_cpu_count() >= 1
    assert get_physical_cpu_count() >= 1


@pytest.mark.skipif(sys.platform != "linux", reason="XDG layout")
def test_xdg_directories(monkeypatch, tmp_path):
    """XDG variables take precedence on Linux."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "cfg"))
    monkeypatch.delenv("XDG_CACHE_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))

    assert get_config_dir() == str(tmp_path / "cfg")
    assert get_cache_dir() == str(tmp_path / ".cache")
    assert get_temp_dir()


def test_run_on_os():
    """Functions run only on the matching platform."""
    assert run_on_os("no-such-os", lambda: "ran") is None
    assert run_on_os(get_environment_info().os, lambda: "ran") == "ran"

    assert (run_on_unix(lambda: 1) == 1) == is_unix()
    assert (run_on_windows(lambda: 1) == 1) == is_windows()
