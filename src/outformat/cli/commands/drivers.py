# topmark:header:start
#
#   project      : OutFormat
#   file         : drivers.py
#   file_relpath : src/outformat/cli/commands/drivers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OutFormat `drivers` command.

Lists the drivers of the active registry in registration order, which is the
order resolution reports them in. With ``--toml`` the registry is dumped as a
registry document that ``--registry`` accepts.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING, Any

import click

from outformat.cli.cmd_common import get_effective_verbosity, get_registry
from outformat.cli.console import ClickConsole
from outformat.cli.options import output_format_option
from outformat.cli.utils import emit_json, emit_ndjson, render_markdown_table
from outformat.config.loaders import registry_to_toml
from outformat.constants import OUTFORMAT_VERSION
from outformat.core.formats import OutputFormat

if TYPE_CHECKING:
    from outformat.drivers.registry import DriverMeta


def _serialize(meta: DriverMeta, *, details: bool) -> dict[str, Any]:
    if details:
        return asdict(meta)
    return {"name": meta.name, "description": meta.description}


@click.command(
    name="drivers",
    help="List the drivers of the active registry.",
    epilog="""
Drivers are listed in registration order. When several drivers match a destination,
the one registered first wins (subject to a few built-in precedence rules).
""",
)
@output_format_option
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show extended information (extensions, capabilities, connection prefix).",
)
@click.option(
    "--toml",
    "as_toml",
    is_flag=True,
    help="Dump the registry as a TOML document usable with '--registry'.",
)
def drivers_command(
    *,
    show_details: bool = False,
    as_toml: bool = False,
    output_format: OutputFormat | None = None,
) -> None:
    """List registered drivers.

    Args:
        show_details (bool): If True, shows extensions, capabilities and the
            connection prefix of each driver.
        as_toml (bool): If True, dumps the registry as TOML and ignores ``--format``.
        output_format (OutputFormat | None): Output format; text when None.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    vlevel = get_effective_verbosity(ctx)

    registry = get_registry(ctx)
    if as_toml:
        console.print(registry_to_toml(registry), nl=False)
        return

    metas = list(registry.iter_meta())
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    if fmt == OutputFormat.JSON:
        emit_json(console, [_serialize(m, details=show_details) for m in metas])
        return
    if fmt == OutputFormat.NDJSON:
        emit_ndjson(console, [_serialize(m, details=show_details) for m in metas])
        return

    if fmt == OutputFormat.MARKDOWN:
        console.print("# Output Drivers\n")
        console.print(f"OutFormat version **{OUTFORMAT_VERSION}** knows the following drivers:\n")
        if show_details:
            headers = ["Driver", "Extensions", "Capabilities", "Prefix", "Description"]
            rows = [
                [
                    f"`{m.name}`",
                    ", ".join(m.extensions),
                    ", ".join(m.capabilities),
                    f"`{m.connection_prefix}`" if m.connection_prefix else "",
                    m.description,
                ]
                for m in metas
            ]
        else:
            headers = ["Driver", "Description"]
            rows = [[f"`{m.name}`", m.description] for m in metas]
        console.print(render_markdown_table(headers, rows))
        return

    if vlevel > 0:
        console.print(console.styled("Registered drivers:\n", bold=True, underline=True))

    if not metas:
        return
    num_width = len(str(len(metas)))
    name_len = max(len(m.name) for m in metas)
    for idx, m in enumerate(metas, start=1):
        if show_details:
            console.print(f"{idx:>{num_width}}. {m.name} {console.styled(m.description, dim=True)}")
            if m.extensions:
                console.print(f"      extensions  : {', '.join(m.extensions)}")
            console.print(f"      capabilities: {', '.join(m.capabilities)}")
            if m.connection_prefix:
                console.print(f"      prefix      : {m.connection_prefix}")
        elif vlevel > 0:
            descr = console.styled(m.description, dim=True)
            console.print(f"{idx:>{num_width}}. {m.name:<{name_len}} {descr}")
        else:
            console.print(f"{idx:>{num_width}}. {m.name}")
