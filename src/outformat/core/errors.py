# topmark:header:start
#
#   project      : OutFormat
#   file         : errors.py
#   file_relpath : src/outformat/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the OutFormat core.

These are UI-agnostic; the CLI maps them to Click exceptions and exit codes in
`outformat.cli.errors`.
"""

from __future__ import annotations


class OutformatError(Exception):
    """Base class for all OutFormat errors."""


class DriverResolutionError(OutformatError):
    """No driver can be guessed for a destination that carries an extension.

    Raised by raster selection only. The condition is terminal for the caller:
    the user has to pick a format explicitly or use another destination name.

    Attributes:
        destination (str): The raw destination string.
        extension (str): The normalized extension token (never empty).
    """

    def __init__(self, destination: str, extension: str) -> None:
        super().__init__(f"Cannot guess driver for {destination}")
        self.destination = destination
        self.extension = extension


class RegistryError(OutformatError, ValueError):
    """Invalid driver definition or registry document."""
