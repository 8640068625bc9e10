# topmark:header:start
#
#   project      : OutFormat
#   file         : test_options.py
#   file_relpath : tests/config/test_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the process-local config option store."""

from __future__ import annotations

import threading

import pytest

from outformat.config.options import (
    ConfigOptions,
    get_config_option,
    is_truthy,
    set_config_option,
)


def test_set_and_get() -> None:
    """Stored options are returned; unknown ones fall back to the default."""
    set_config_option("OUTFORMAT_DEBUG", "ON")
    assert get_config_option("OUTFORMAT_DEBUG") == "ON"
    assert get_config_option("MISSING") is None
    assert get_config_option("MISSING", "dflt") == "dflt"


def test_clear_single_option() -> None:
    """Setting None removes the option."""
    set_config_option("KEY", "1")
    set_config_option("KEY", None)
    assert get_config_option("KEY") is None


def test_clear_drops_explicit_options() -> None:
    """`ConfigOptions.clear` forgets everything set so far."""
    set_config_option("A", "1")
    set_config_option("B", "2")
    ConfigOptions.clear()
    assert get_config_option("A") is None
    assert get_config_option("B") is None


def test_environment_fallback(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment values are used unless the option is set explicitly."""
    monkeypatch.setenv("OUTFORMAT_REGISTRY", "/env/path.toml")
    assert get_config_option("OUTFORMAT_REGISTRY") == "/env/path.toml"

    set_config_option("OUTFORMAT_REGISTRY", "/cli/path.toml")
    assert get_config_option("OUTFORMAT_REGISTRY") == "/cli/path.toml"


def test_keys_are_case_sensitive() -> None:
    """Keys are compared like environment variable names."""
    set_config_option("Key", "a")
    assert get_config_option("KEY") is None


def test_empty_key_rejected() -> None:
    """An empty key is a programming error."""
    with pytest.raises(ValueError):
        set_config_option("", "x")


def test_concurrent_writers() -> None:
    """Concurrent writers never lose options."""

    def _writer(i: int) -> None:
        for j in range(50):
            set_config_option(f"K{i}_{j}", str(j))

    threads = [threading.Thread(target=_writer, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert all(
        get_config_option(f"K{i}_{j}") == str(j) for i in range(8) for j in range(50)
    )


@pytest.mark.parametrize(
    "value, expected",
    [
        ("ON", True),
        ("yes", True),
        ("True", True),
        ("1", True),
        (" on ", True),
        ("OFF", False),
        ("0", False),
        ("", False),
        (None, False),
    ],
)
def test_is_truthy(value: str | None, expected: bool) -> None:
    """Boolean option values."""
    assert is_truthy(value) is expected
