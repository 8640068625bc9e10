# topmark:header:start
#
#   project      : OutFormat
#   file         : test_cli_raster.py
#   file_relpath : tests/cli/test_cli_raster.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `raster` command output, warnings and exit codes."""

from __future__ import annotations

import json

from outformat.cli.exit_codes import ExitCode
from outformat.drivers.registry import DriverRegistry
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli
from tests.conftest import make_driver, make_registry, mark_cli, parametrize


@mark_cli
@parametrize(
    "destination, expected",
    [
        ("out.tif", "GTiff"),
        ("OUT.PNG", "PNG"),
        ("output", "GTiff"),
        ("PG:dbname=gis", "PostGISRaster"),
    ],
)
def test_raster_prints_driver(destination: str, expected: str) -> None:
    """The selected driver is printed alone on stdout."""
    result = run_cli(["--no-color", "raster", destination])

    assert_SUCCESS(result)
    assert result.output.strip() == expected


@mark_cli
def test_raster_warns_on_ambiguity() -> None:
    """Ambiguity is reported as a warning next to the driver."""
    result = run_cli(["--no-color", "raster", "out.nc"])

    assert_SUCCESS(result)
    assert "Warning: Several drivers matching nc extension. Using netCDF" in result.output
    assert result.output.strip().splitlines()[-1] == "netCDF"


@mark_cli
def test_raster_quiet_suppresses_warning() -> None:
    """``-q`` drops the warning but still prints the driver."""
    result = run_cli(["--no-color", "-q", "raster", "out.nc"])

    assert_SUCCESS(result)
    assert result.output.strip() == "netCDF"


@mark_cli
def test_raster_unknown_extension_exit_code() -> None:
    """An unguessable destination exits with UNSUPPORTED_FORMAT."""
    result = run_cli(["--no-color", "raster", "out.xyz"])

    assert_exit(result, ExitCode.UNSUPPORTED_FORMAT)
    assert "Cannot guess driver for out.xyz" in result.output


@mark_cli
def test_raster_with_injected_registry() -> None:
    """A registry stored in the context object is used as is."""
    reg = make_registry(make_driver("DriverA", "foo"))

    assert run_cli(["--no-color", "raster", "out.foo"], registry=reg).output.strip() == "DriverA"
    result = run_cli(["--no-color", "raster", "noext"], registry=DriverRegistry())
    assert result.output.strip() == "GTiff"


@mark_cli
def test_raster_json() -> None:
    """JSON output carries the driver and the warnings."""
    result = run_cli(["raster", "out.grd", "--format", "json"])

    assert_SUCCESS(result)
    payload = json.loads(result.output)
    assert payload["driver"] == "GS7BG"
    assert payload["warnings"] == ["Several drivers matching grd extension. Using GS7BG"]


@mark_cli
def test_raster_markdown() -> None:
    """Markdown output names the driver in code spans."""
    result = run_cli(["--no-color", "raster", "out.tif", "--format", "markdown"])

    assert_SUCCESS(result)
    assert "`GTiff`" in result.output


@mark_cli
def test_raster_debug_logging_warns_once() -> None:
    """With warnings visible in the log, the console does not repeat them."""
    result = run_cli(["--no-color", "--debug", "ON", "raster", "out.grd"])

    assert_SUCCESS(result)
    assert result.output.count("Several drivers matching grd extension. Using GS7BG") == 1
    assert "[WARNING]" in result.output
    assert "Warning: Several drivers" not in result.output


@mark_cli
def test_raster_verbose_reports_diagnostic_counts() -> None:
    """``-v`` adds a per-level count of the collected diagnostics."""
    result = run_cli(["--no-color", "-v", "raster", "noext"], registry=DriverRegistry())

    assert_SUCCESS(result)
    assert "Diagnostics: 0 warning(s), 1 debug message(s)" in result.output
    assert "noext: GTiff" in result.output


@mark_cli
def test_raster_verbose_counts_ambiguity_warning() -> None:
    """The ambiguity warning is printed and counted."""
    result = run_cli(["--no-color", "-v", "raster", "out.nc"])

    assert_SUCCESS(result)
    assert "Warning: Several drivers matching nc extension. Using netCDF" in result.output
    assert "Diagnostics: 1 warning(s)" in result.output
