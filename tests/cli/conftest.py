# topmark:header:start
#
#   project      : OutFormat
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running OutFormat through Click's test runner.

Tests assert on ``result.output``, which includes stderr for every supported
Click version, and pass ``--no-color`` so output contains no ANSI codes.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any, Iterator, Sequence

import pytest
from click.testing import CliRunner, Result

from outformat.cli.exit_codes import ExitCode
from outformat.cli.main import cli
from outformat.config.logging import TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from outformat.drivers.registry import DriverRegistry


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Reinstall test logging after each run; the CLI reconfigures the root logger."""
    yield
    setup_logging(level=TRACE_LEVEL)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
    registry: DriverRegistry | None = None,
) -> Result:
    """Invoke the CLI.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["raster", "out.tif"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.
        registry (DriverRegistry | None): Registry snapshot injected into Click's
            context object; the built-in catalog (or ``--registry``) when None.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["--no-color", "raster", "out.tif"])
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    obj: dict[str, Any] = {}
    if registry is not None:
        obj["registry"] = registry
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text, obj=obj)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``."""
    assert result.exit_code == code, result.output
