# topmark:header:start
#
#   project      : OutFormat
#   file         : errors.py
#   file_relpath : src/outformat/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the OutFormat CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Core exceptions are translated with `from_core`.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from outformat.cli.exit_codes import ExitCode
from outformat.core.errors import DriverResolutionError, OutformatError, RegistryError


class OutformatCliError(click.ClickException):
    """Base class for all OutFormat CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click’s default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class OutformatUsageError(OutformatCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class OutformatFileNotFoundError(OutformatCliError):
    """Error when the registry file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class OutformatUnsupportedFormatError(OutformatCliError):
    """Error when no driver can be guessed for a destination."""

    exit_code = ExitCode.UNSUPPORTED_FORMAT


class OutformatConfigError(OutformatCliError):
    """Error for invalid registry documents or config options."""

    exit_code = ExitCode.CONFIG_ERROR


def from_core(exc: OutformatError) -> OutformatCliError:
    """Translate a core exception into the matching CLI error."""
    if isinstance(exc, DriverResolutionError):
        return OutformatUnsupportedFormatError(
            f"{exc}. Specify the output format explicitly or use a known extension."
        )
    if isinstance(exc, RegistryError):
        return OutformatConfigError(str(exc))
    return OutformatCliError(str(exc))
