# topmark:header:start
#
#   project      : OutFormat
#   file         : raster.py
#   file_relpath : src/outformat/cli/commands/raster.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OutFormat `raster` command.

Selects the single driver a raster conversion tool would use to write DEST.
Ambiguity warnings are printed once on stderr, either by the console or by
the log handler when logging already shows them. When no driver can be
guessed the command exits with `ExitCode.UNSUPPORTED_FORMAT`.
"""

from __future__ import annotations

import click

from outformat.cli.cmd_common import get_effective_verbosity, get_registry
from outformat.cli.console import ClickConsole
from outformat.cli.errors import from_core
from outformat.cli.options import output_format_option
from outformat.cli.utils import emit_json, emit_ndjson
from outformat.core.diagnostics import (
    CollectingSink,
    DiagnosticLevel,
    LoggingSink,
    compute_diagnostic_stats,
)
from outformat.core.errors import DriverResolutionError
from outformat.core.formats import OutputFormat, is_machine_format
from outformat.resolver.selector import select_raster_driver


@click.command(
    name="raster",
    help="Print the driver to use to write raster output to DEST.",
)
@click.argument("destination", metavar="DEST")
@output_format_option
def raster_command(
    *,
    destination: str,
    output_format: OutputFormat | None = None,
) -> None:
    """Select the raster output driver for DEST.

    Args:
        destination (str): Output file name or connection string.
        output_format (OutputFormat | None): Output format; text when None.

    Raises:
        OutformatUnsupportedFormatError: If no driver can be guessed.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    vlevel = get_effective_verbosity(ctx)

    registry = get_registry(ctx)
    log_sink = LoggingSink()
    sink = CollectingSink(forward=log_sink)
    try:
        driver: str = select_raster_driver(registry, destination, sink=sink)
    except DriverResolutionError as exc:
        raise from_core(exc) from exc

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if is_machine_format(fmt):
        record = {"destination": destination, "driver": driver, "warnings": list(sink.warnings)}
        if fmt == OutputFormat.JSON:
            emit_json(console, record)
        else:
            emit_ndjson(console, [record])
        return

    # Warnings already written by the log handler are not repeated.
    if vlevel >= 0 and not log_sink.emits_warnings:
        for message in sink.warnings:
            console.echo_err(DiagnosticLevel.WARNING.color(f"Warning: {message}"))
    if vlevel > 0:
        stats = compute_diagnostic_stats(sink.diagnostics)
        console.echo_err(
            f"Diagnostics: {stats.n_warning} warning(s), {stats.n_debug} debug message(s)"
        )

    if fmt == OutputFormat.MARKDOWN:
        console.print(f"**Raster driver for `{destination}`:** `{driver}`")
    elif vlevel > 0:
        console.print(f"{destination}: {console.styled(driver, bold=True)}")
    else:
        console.print(driver)
