# topmark:header:start
#
#   file         : options.py
#   file_relpath : src/outformat/cli/options.py
#   project      : OutFormat
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Option decorators shared by the OutFormat subcommands.

Each subcommand accepts ``-v``/``-q`` and most accept ``--format``; keeping the
declarations here means every command spells and documents them identically.
"""

from __future__ import annotations

from typing import Callable, ParamSpec, TypeVar

import click

from outformat.cli.cli_types import EnumChoiceParam
from outformat.cli.errors import OutformatUsageError
from outformat.core.formats import OutputFormat

P = ParamSpec("P")
R = TypeVar("R")

_VERBOSITY_OPTIONS = (
    click.option(
        "-v", "--verbose", count=True, help="Explain more of what happens (repeatable)."
    ),
    click.option(
        "-q", "--quiet", count=True, help="Print results only: no hints, no warnings."
    ),
)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Collapse the ``-v`` / ``-q`` counters into a single verbosity level.

    Returns:
        int: ``-1`` for quiet, else the number of ``-v`` flags (``0`` by default).

    Raises:
        OutformatUsageError: When ``-v`` and ``-q`` are combined.
    """
    if quiet_count and verbose_count:
        raise OutformatUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return -1 if quiet_count else verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Attach the ``verbose`` and ``quiet`` counters to a command."""
    for decorate in reversed(_VERBOSITY_OPTIONS):
        f = decorate(f)
    return f


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Attach ``--format`` (passed to the command as ``output_format``, ``None`` if absent)."""
    choices = "|".join(member.value for member in OutputFormat)
    decorate = click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        help=f"Render results as {choices} (default: text).",
    )
    return decorate(f)
