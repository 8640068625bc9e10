# topmark:header:start
#
#   project      : OutFormat
#   file         : diagnostics.py
#   file_relpath : src/outformat/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics support.

Resolution reports non-fatal conditions through a `DiagnosticSink`. The core
never inspects what a sink does with a message, so sinks are fire-and-forget
and must tolerate concurrent calls.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from threading import Lock
from typing import Protocol, cast, runtime_checkable

from yachalk import chalk

from outformat.config.logging import OutformatLogger, get_logger

logger: OutformatLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics emitted during resolution.

    Ordered by importance: WARNING > DEBUG.
    """

    DEBUG = "debug"
    WARNING = "warning"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Intended for human-readable output only; machine formats should not use colors.

        Returns:
            Callable[[str], str]: The `yachalk` color function associated with this severity level.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.DEBUG: chalk.gray,
                DiagnosticLevel.WARNING: chalk.yellow,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level, message and optional category."""

    level: DiagnosticLevel
    message: str
    category: str | None = None


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_debug: int
    n_warning: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_debug + self.n_warning


def compute_diagnostic_stats(diags: Sequence[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics."""
    n_debug: int = sum(1 for d in diags if d.level == DiagnosticLevel.DEBUG)
    n_warn: int = sum(1 for d in diags if d.level == DiagnosticLevel.WARNING)
    return DiagnosticStats(n_debug=n_debug, n_warning=n_warn)


@runtime_checkable
class DiagnosticSink(Protocol):
    """Write-only destination for resolution diagnostics."""

    def warning(self, message: str) -> None:
        """Report a non-fatal warning."""
        ...

    def debug(self, category: str, message: str) -> None:
        """Report a debug message under ``category``."""
        ...


class LoggingSink:
    """Sink that forwards diagnostics to the OutFormat logger.

    Thread safety is inherited from the `logging` module.
    """

    def __init__(self, log: OutformatLogger | None = None) -> None:
        self._log: OutformatLogger = log or logger

    @property
    def emits_warnings(self) -> bool:
        """Whether warnings sent here actually reach a log handler."""
        return self._log.isEnabledFor(logging.WARNING)

    def warning(self, message: str) -> None:
        """Log ``message`` at WARNING level."""
        self._log.warning("%s", message)

    def debug(self, category: str, message: str) -> None:
        """Log ``message`` at DEBUG level, prefixed with its category."""
        self._log.debug("%s: %s", category, message)


class CollectingSink:
    """Sink that records diagnostics in memory (CLI rendering and tests).

    Optionally forwards every diagnostic to another sink as well.
    """

    def __init__(self, forward: DiagnosticSink | None = None) -> None:
        self._lock = Lock()
        self._items: list[Diagnostic] = []
        self._forward = forward

    def warning(self, message: str) -> None:
        """Record a warning."""
        with self._lock:
            self._items.append(Diagnostic(DiagnosticLevel.WARNING, message))
        if self._forward is not None:
            self._forward.warning(message)

    def debug(self, category: str, message: str) -> None:
        """Record a debug message."""
        with self._lock:
            self._items.append(Diagnostic(DiagnosticLevel.DEBUG, message, category))
        if self._forward is not None:
            self._forward.debug(category, message)

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Snapshot of all recorded diagnostics in emission order."""
        with self._lock:
            return tuple(self._items)

    @property
    def warnings(self) -> tuple[str, ...]:
        """Messages of the recorded warnings."""
        return tuple(d.message for d in self.diagnostics if d.level is DiagnosticLevel.WARNING)

    @property
    def debug_messages(self) -> tuple[str, ...]:
        """Messages of the recorded debug diagnostics."""
        return tuple(d.message for d in self.diagnostics if d.level is DiagnosticLevel.DEBUG)
