# topmark:header:start
#
#   project      : OutFormat
#   file         : resolve.py
#   file_relpath : src/outformat/cli/commands/resolve.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OutFormat `resolve` command.

Prints every driver able to produce a destination, in resolution order.
"""

from __future__ import annotations

import click

from outformat.cli.cmd_common import get_effective_verbosity, get_registry
from outformat.cli.console import ClickConsole
from outformat.cli.options import output_format_option
from outformat.cli.utils import emit_json, emit_ndjson, render_markdown_table
from outformat.core.formats import OutputFormat
from outformat.resolver.extension import normalize_extension
from outformat.resolver.selector import resolve_drivers


@click.command(
    name="resolve",
    help="List the drivers that can write DEST, best match first.",
)
@click.argument("destination", metavar="DEST")
@click.option("--raster", is_flag=True, help="Require raster output support.")
@click.option("--vector", is_flag=True, help="Require vector output support.")
@output_format_option
def resolve_command(
    *,
    destination: str,
    raster: bool = False,
    vector: bool = False,
    output_format: OutputFormat | None = None,
) -> None:
    """List candidate drivers for DEST.

    Args:
        destination (str): Output file name or connection string.
        raster (bool): Require raster output support.
        vector (bool): Require vector output support.
        output_format (OutputFormat | None): Output format; text when None.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    vlevel = get_effective_verbosity(ctx)

    if not raster and not vector:
        raster = True

    registry = get_registry(ctx)
    extension: str = normalize_extension(destination)
    candidates = resolve_drivers(registry, destination, raster=raster, vector=vector)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    if fmt == OutputFormat.JSON:
        emit_json(
            console,
            {
                "destination": destination,
                "extension": extension,
                "raster": raster,
                "vector": vector,
                "drivers": list(candidates),
            },
        )
    elif fmt == OutputFormat.NDJSON:
        emit_ndjson(
            console,
            [{"rank": i, "driver": name} for i, name in enumerate(candidates, start=1)],
        )
    elif fmt == OutputFormat.MARKDOWN:
        console.print(f"# Drivers for `{destination}`\n")
        if candidates:
            rows = [[str(i), f"`{name}`"] for i, name in enumerate(candidates, start=1)]
            console.print(render_markdown_table(["Rank", "Driver"], rows, align={0: "right"}))
        else:
            console.print("_No matching driver._")
    else:
        if vlevel > 0:
            label = extension or "(none)"
            console.print(
                console.styled(f"Drivers for {destination} [extension: {label}]:", bold=True)
            )
        if not candidates and vlevel >= 0:
            console.print(console.styled("No matching driver.", dim=True))
        for name in candidates:
            console.print(name)
