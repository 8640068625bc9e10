# topmark:header:start
#
#   project      : OutFormat
#   file         : test_cli_main.py
#   file_relpath : tests/cli/test_cli_main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: group options, `version` and the console entry point."""

from __future__ import annotations

import json
import logging

import pytest

from outformat.cli import main as cli_main
from outformat.cli.exit_codes import ExitCode
from outformat.config.options import get_config_option
from outformat.constants import OUTFORMAT_VERSION
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_no_command_prints_help() -> None:
    """Invoking the group alone prints a hint and the help text."""
    result = run_cli(["--no-color"])

    assert_SUCCESS(result)
    assert "Hint: use 'outformat raster DEST'" in result.output
    assert "resolve" in result.output and "drivers" in result.output


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    """``-v`` with ``-q`` is a usage error."""
    result = run_cli(["-v", "-q", "version"])

    assert_exit(result, ExitCode.USAGE_ERROR)
    assert "mutually exclusive" in result.output


@mark_cli
def test_version() -> None:
    """`version` prints the installed version."""
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.output.strip() == OUTFORMAT_VERSION


@mark_cli
def test_version_json() -> None:
    """`version --format json` is parseable."""
    result = run_cli(["version", "--format", "json"])

    assert_SUCCESS(result)
    assert json.loads(result.output) == {"version": OUTFORMAT_VERSION}


@mark_cli
def test_config_options_are_stored() -> None:
    """``--config`` and ``--debug`` set config options."""
    result = run_cli(["--config", "MY_KEY", "value", "--debug", "off", "version"])

    assert_SUCCESS(result)
    assert get_config_option("MY_KEY") == "value"
    assert get_config_option("OUTFORMAT_DEBUG") == "off"


@mark_cli
def test_debug_on_enables_debug_logging() -> None:
    """``--debug ON`` configures debug logging and shows the selection diagnostic."""
    result = run_cli(["--no-color", "--debug", "ON", "raster", "out.tif"])

    assert_SUCCESS(result)
    assert logging.getLogger().level == logging.DEBUG
    assert "outformat: Using GTiff driver" in result.output


@mark_cli
def test_main_scans_argv_before_click(monkeypatch: pytest.MonkeyPatch) -> None:
    """`main()` applies ``--config`` before Click runs the command."""
    seen: dict[str, str | None] = {}

    def _fake_cli() -> None:
        seen["key"] = get_config_option("EARLY_KEY")

    monkeypatch.setattr(cli_main, "cli", _fake_cli)
    monkeypatch.setattr("sys.argv", ["outformat", "--config", "EARLY_KEY", "yes", "version"])

    cli_main.main()

    assert seen == {"key": "yes"}
