# topmark:header:start
#
#   project      : OutFormat
#   file         : console.py
#   file_relpath : src/outformat/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""User-facing output for the CLI.

Results go to stdout and warnings/errors to stderr, through Click so that
`CliRunner` captures them. Diagnostics for developers belong in `logging`, not here.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click


class ClickConsole:
    """Writes program output, optionally colored.

    The streams default to whatever `sys.stdout` / `sys.stderr` are at write
    time, which keeps Click's output capturing working.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self._out = out
        self._err = err

    def _echo(self, text: str, stream: TextIO | None, nl: bool, **style: Any) -> None:
        click.echo(self.styled(text, **style), file=stream, nl=nl, color=self.enable_color)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Print a result line on stdout."""
        self._echo(text, self._out, nl)

    def echo_err(self, text: str, *, nl: bool = True) -> None:
        """Print already styled text on stderr."""
        self._echo(text, self._err or sys.stderr, nl)

    def error(self, text: str, *, nl: bool = True) -> None:
        self._echo(text, self._err or sys.stderr, nl, fg="bright_red")

    def styled(self, text: str, **style: Any) -> str:
        """`click.style` ``text``, or return it untouched when color is off or no style given."""
        if not (self.enable_color and style):
            return text
        return click.style(text, **style)
