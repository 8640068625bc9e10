# topmark:header:start
#
#   project      : OutFormat
#   file         : logging.py
#   file_relpath : src/outformat/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging for OutFormat: a TRACE level, a package logger class and a colored formatter.

Library modules obtain their logger with [`get_logger`][outformat.config.logging.get_logger]
and never configure handlers themselves. Only the CLI entry point (and the test suite)
calls [`setup_logging`][outformat.config.logging.setup_logging].

The level can be forced through the ``OUTFORMAT_LOG_LEVEL`` environment variable,
which accepts a level name (``trace``, ``DEBUG``, ...) or a number.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from outformat.constants import LOG_LEVEL_ENV

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = (
    "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"
)


class OutformatLogger(logging.Logger):
    """`logging.Logger` with an extra `trace()` method for very chatty diagnostics."""

    def trace(self, msg: object, *args: object, extra: Mapping[str, object] | None = None) -> None:
        """Log ``msg % args`` at TRACE level, attributing the record to the caller."""
        if not self.isEnabledFor(TRACE_LEVEL):
            return
        self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(OutformatLogger)

_ALIASES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "WARN": logging.WARNING,
    "FATAL": logging.CRITICAL,
}

# Lowest threshold first; a record takes the color of the highest threshold it reaches.
_LEVEL_STYLES: Final[tuple[tuple[int, str], ...]] = (
    (TRACE_LEVEL, "blue"),
    (logging.DEBUG, "gray"),
    (logging.INFO, "green"),
    (logging.WARNING, "yellow"),
    (logging.ERROR, "red"),
    (logging.CRITICAL, "red_bright"),
)


class ChalkFormatter(logging.Formatter):
    """Color each formatted record with yachalk according to its severity."""

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        style = "dim"
        for threshold, name in _LEVEL_STYLES:
            if record.levelno < threshold:
                break
            style = name
        return cast("str", getattr(chalk, style)(text))


def parse_log_level(value: str | None) -> int | None:
    """Turn ``"trace"``, ``" Info "`` or ``"10"`` into a numeric level.

    Returns:
        int | None: The level, or ``None`` when ``value`` is empty or not a known name.
    """
    token = (value or "").strip().upper()
    if not token:
        return None
    if token.isdigit():
        return int(token)
    if token in _ALIASES:
        return _ALIASES[token]
    level = logging.getLevelName(token)
    return level if isinstance(level, int) else None


def resolve_env_log_level() -> int | None:
    """Level requested through ``OUTFORMAT_LOG_LEVEL``, if any."""
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV))


def _make_stderr_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    # Source locations only help below INFO.
    handler.setFormatter(ChalkFormatter(DEBUG_LOG_FORMAT if level < logging.INFO else LOG_FORMAT))
    return handler


def setup_logging(level: int | None = None) -> None:
    """(Re)configure the root logger to write colored records to stderr.

    Args:
        level (int | None): Explicit level. When ``None`` the environment is
            consulted and, failing that, only CRITICAL records are shown.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.setLevel(level)
    root.addHandler(_make_stderr_handler(level))


def get_logger(name: str) -> OutformatLogger:
    """Return the `OutformatLogger` registered under ``name``."""
    return cast("OutformatLogger", logging.getLogger(name))
