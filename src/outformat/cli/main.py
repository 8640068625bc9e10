# topmark:header:start
#
#   project      : OutFormat
#   file         : main.py
#   file_relpath : src/outformat/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OutFormat command-line interface.

Key ideas:
- Group-level options are initialized once, placed into ``ctx.obj``.
- ``--config KEY VALUE`` and ``--debug VALUE`` are honored twice: by
  [`main`][outformat.cli.main.main], which scans ``sys.argv`` before Click
  runs, and by the group callback, so that invoking `cli` directly (tests,
  embedding) behaves the same.
- Subcommands read the registry snapshot through
  [`get_registry`][outformat.cli.cmd_common.get_registry].
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from outformat.cli.commands.drivers import drivers_command
from outformat.cli.commands.raster import raster_command
from outformat.cli.commands.resolve import resolve_command
from outformat.cli.commands.version import version_command
from outformat.cli.console import ClickConsole
from outformat.cli.options import common_verbose_options, resolve_verbosity
from outformat.config.logging import get_logger, resolve_env_log_level, setup_logging
from outformat.config.options import get_config_option, is_truthy, set_config_option
from outformat.constants import DEBUG_OPTION
from outformat.utils.cmdline import early_set_config_options

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
    registry_path: Path | None,
) -> None:
    """Initialize shared state (verbosity, logging, color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        registry_path (Path | None): Registry file given with ``--registry``.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # OUTFORMAT_DEBUG=ON turns on debug logging; otherwise the env level applies
    level: int | None = resolve_env_log_level()
    if is_truthy(get_config_option(DEBUG_OPTION)):
        level = logging.DEBUG
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    enable_color = not no_color
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)

    if registry_path is not None:
        ctx.obj["registry_path"] = str(registry_path)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Guess the output driver for a destination file name or connection string.",
)
@common_verbose_options
@click.option("--no-color", is_flag=True, help="Disable ANSI colors in program output.")
@click.option(
    "--registry",
    "registry_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="TOML driver registry to use instead of the built-in catalog.",
)
@click.option(
    "--config",
    "config_options",
    nargs=2,
    multiple=True,
    metavar="KEY VALUE",
    help="Set a config option (repeatable).",
)
@click.option(
    "--debug",
    "debug_value",
    default=None,
    metavar="VALUE",
    help="Shortcut for '--config OUTFORMAT_DEBUG VALUE'.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
    registry_path: Path | None,
    config_options: tuple[tuple[str, str], ...],
    debug_value: str | None,
) -> None:
    """Entry point for the OutFormat CLI."""
    for key, value in config_options:
        set_config_option(key, value)
    if debug_value is not None:
        set_config_option(DEBUG_OPTION, debug_value)

    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        no_color=no_color,
        registry_path=registry_path,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'outformat raster DEST' to guess a raster driver.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(resolve_command)

cli.add_command(raster_command)

cli.add_command(drivers_command)


def main() -> None:
    """Console script entry point."""
    early_set_config_options(sys.argv)
    cli()


if __name__ == "__main__":
    main()
