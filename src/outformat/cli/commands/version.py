# topmark:header:start
#
#   project      : OutFormat
#   file         : version.py
#   file_relpath : src/outformat/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OutFormat `version` command.

Prints the current OutFormat version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from outformat.cli.cmd_common import get_effective_verbosity
from outformat.cli.console import ClickConsole
from outformat.cli.options import output_format_option
from outformat.cli.utils import emit_ndjson
from outformat.constants import OUTFORMAT_VERSION
from outformat.core.formats import OutputFormat, is_machine_format


@click.command(
    name="version",
    help="Show the current version of OutFormat.",
)
@output_format_option
def version_command(
    *,
    output_format: OutputFormat | None = None,
) -> None:
    """Show the current version of OutFormat.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    vlevel = get_effective_verbosity(ctx)

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if is_machine_format(fmt):
        emit_ndjson(console, [{"version": OUTFORMAT_VERSION}])
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# OutFormat Version\n")
        console.print(f"**OutFormat version: {OUTFORMAT_VERSION}**")
    else:
        if vlevel > 0:
            console.print(console.styled("OutFormat version:\n", bold=True, underline=True))
            console.print(f"    {console.styled(OUTFORMAT_VERSION, bold=True)}")
        else:
            console.print(console.styled(OUTFORMAT_VERSION, bold=True))
