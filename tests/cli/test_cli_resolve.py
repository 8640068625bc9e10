# topmark:header:start
#
#   project      : OutFormat
#   file         : test_cli_resolve.py
#   file_relpath : tests/cli/test_cli_resolve.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `resolve` command."""

from __future__ import annotations

import json

from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_resolve_defaults_to_raster() -> None:
    """Without flags raster candidates are listed, one per line."""
    result = run_cli(["--no-color", "resolve", "out.tif"])

    assert_SUCCESS(result)
    assert result.output.splitlines() == ["GTiff", "COG"]


@mark_cli
def test_resolve_vector() -> None:
    """``--vector`` lists vector candidates."""
    result = run_cli(["--no-color", "resolve", "--vector", "out.kml"])

    assert_SUCCESS(result)
    assert result.output.splitlines() == ["KML", "LIBKML"]


@mark_cli
def test_resolve_no_match_is_not_an_error() -> None:
    """An empty result exits successfully."""
    result = run_cli(["--no-color", "resolve", "out.xyz"])

    assert_SUCCESS(result)
    assert "No matching driver." in result.output


@mark_cli
def test_resolve_json() -> None:
    """JSON output includes the token and the ordered drivers."""
    result = run_cli(["resolve", "OUT.SHP.ZIP", "--vector", "--format", "json"])

    assert_SUCCESS(result)
    payload = json.loads(result.output)
    assert payload["extension"] == "shp.zip"
    assert payload["drivers"] == ["ESRI Shapefile"]
    assert payload["raster"] is False and payload["vector"] is True


@mark_cli
def test_resolve_ndjson_ranks() -> None:
    """NDJSON output has one ranked record per driver."""
    result = run_cli(["resolve", "out.nc", "--format", "NDJSON"])

    assert_SUCCESS(result)
    records = [json.loads(line) for line in result.output.splitlines()]
    assert records == [{"rank": 1, "driver": "netCDF"}, {"rank": 2, "driver": "GMT"}]


@mark_cli
def test_resolve_markdown_table() -> None:
    """Markdown output is a ranked table."""
    result = run_cli(["--no-color", "resolve", "out.grd", "--format", "markdown"])

    assert_SUCCESS(result)
    assert "| Rank | Driver  |" in result.output
    assert "`GS7BG`" in result.output


@mark_cli
def test_resolve_rejects_unknown_format() -> None:
    """Unknown ``--format`` values are usage errors."""
    result = run_cli(["resolve", "out.tif", "--format", "yaml"])

    assert result.exit_code == 2
    assert "Invalid value 'yaml'" in result.output
