# topmark:header:start
#
#   project      : OutFormat
#   file         : selector.py
#   file_relpath : src/outformat/resolver/selector.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output driver resolution: candidate lists and raster driver selection.

`resolve_drivers` runs extension normalization, capability/name matching
and the precedence overrides. `select_raster_driver` turns the raster
candidate list into a single driver name:

| candidates | extension | outcome                                    |
|------------|-----------|--------------------------------------------|
| none       | empty     | ``GTiff``                                  |
| none       | non-empty | `DriverResolutionError`                    |
| one        | any       | that driver                                |
| several    | any       | first one; a warning unless the first two  |
|            |           | are the silent ``GTiff``/``COG`` pair      |

A debug diagnostic naming the chosen driver is emitted on every success.
Both functions are pure with respect to the registry snapshot: they can be
called concurrently and retried freely.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from outformat.config.logging import OutformatLogger, get_logger
from outformat.constants import DEBUG_CATEGORY, DEFAULT_RASTER_DRIVER
from outformat.core.diagnostics import LoggingSink
from outformat.core.errors import DriverResolutionError
from outformat.resolver.ambiguity import apply_precedence_overrides
from outformat.resolver.extension import normalize_extension
from outformat.resolver.matcher import match_drivers

if TYPE_CHECKING:
    from collections.abc import Iterable

    from outformat.core.diagnostics import DiagnosticSink
    from outformat.drivers.base import Driver

logger: OutformatLogger = get_logger(__name__)

# Leading pairs for which picking the first driver is expected and not worth a warning.
_SILENT_LEADING_PAIRS: Final[frozenset[tuple[str, str]]] = frozenset({("GTiff", "COG")})


def resolve_drivers(
    drivers: Iterable[Driver],
    destination: str,
    *,
    raster: bool = False,
    vector: bool = False,
) -> tuple[str, ...]:
    """Return the ordered names of the drivers that can produce ``destination``.

    Args:
        drivers (Iterable[Driver]): Registry snapshot, in registration order.
        destination (str): Output file name or connection string.
        raster (bool): Raster output is requested.
        vector (bool): Vector output is requested.

    Returns:
        tuple[str, ...]: Candidate driver names, possibly empty.
    """
    extension: str = normalize_extension(destination)
    matches = match_drivers(drivers, destination, raster=raster, vector=vector, extension=extension)
    return apply_precedence_overrides(extension, matches)


def _is_silent_tie(candidates: tuple[str, ...]) -> bool:
    return (candidates[0], candidates[1]) in _SILENT_LEADING_PAIRS


def select_raster_driver(
    drivers: Iterable[Driver],
    destination: str,
    *,
    sink: DiagnosticSink | None = None,
) -> str:
    """Select the single driver to write raster output to ``destination``.

    Args:
        drivers (Iterable[Driver]): Registry snapshot, in registration order.
        destination (str): Output file name or connection string.
        sink (DiagnosticSink | None): Receives the ambiguity warning and the
            debug diagnostic; defaults to a `LoggingSink`.

    Returns:
        str: The short name of the selected driver.

    Raises:
        DriverResolutionError: If no driver matches and the destination has an
            extension.
    """
    out: DiagnosticSink = sink if sink is not None else LoggingSink()
    extension: str = normalize_extension(destination)
    candidates = resolve_drivers(drivers, destination, raster=True)

    if not candidates:
        if extension:
            logger.info("No raster driver for '%s' (extension '%s')", destination, extension)
            raise DriverResolutionError(destination, extension)
        selected = DEFAULT_RASTER_DRIVER
    else:
        selected = candidates[0]
        if len(candidates) > 1 and not _is_silent_tie(candidates):
            out.warning(f"Several drivers matching {extension} extension. Using {selected}")

    out.debug(DEBUG_CATEGORY, f"Using {selected} driver")
    return selected
