# topmark:header:start
#
#   project      : OutFormat
#   file         : matcher.py
#   file_relpath : src/outformat/resolver/matcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Capability and name filtering over an ordered driver registry.

A driver is a candidate for a destination when it can write the requested
kind of data *and* it recognizes the destination, either by extension or by
connection prefix. Capability alone is never sufficient.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from outformat.config.logging import OutformatLogger, get_logger
from outformat.resolver.extension import normalize_extension

if TYPE_CHECKING:
    from collections.abc import Iterable

    from outformat.drivers.base import Driver

logger: OutformatLogger = get_logger(__name__)


@dataclass(frozen=True)
class CapabilityRequest:
    """Kind of output requested from the drivers."""

    raster: bool = False
    vector: bool = False


def can_produce(driver: Driver, request: CapabilityRequest) -> bool:
    """Return True if ``driver`` can write the kind of data in ``request``.

    Create or create-copy support combined with a matching raster/vector flag
    qualifies, and so does vector-translate support for vector requests.
    """
    caps = driver.capabilities
    if caps.writable and ((request.raster and caps.raster) or (request.vector and caps.vector)):
        return True
    return request.vector and caps.vector_translate_from


def recognizes(driver: Driver, destination: str, extension: str) -> bool:
    """Return True if ``driver`` recognizes the destination by extension or prefix."""
    if extension and driver.handles_extension(extension):
        return True
    return driver.handles_connection(destination)


def match_drivers(
    drivers: Iterable[Driver],
    destination: str,
    *,
    raster: bool = False,
    vector: bool = False,
    extension: str | None = None,
) -> tuple[str, ...]:
    """Return the names of the drivers able to produce ``destination``.

    Args:
        drivers (Iterable[Driver]): Drivers in registry order (usually a
            `DriverRegistry`).
        destination (str): Raw destination string; used for prefix checks.
        raster (bool): Raster output is requested.
        vector (bool): Vector output is requested.
        extension (str | None): Precomputed extension token; derived from
            ``destination`` when None.

    Returns:
        tuple[str, ...]: Matching driver names in registry order, without
            duplicates. May be empty.
    """
    token: str = normalize_extension(destination) if extension is None else extension
    request = CapabilityRequest(raster=raster, vector=vector)

    seen: set[str] = set()
    matches: list[str] = []
    for drv in drivers:
        if drv.name in seen:
            continue
        if not can_produce(drv, request):
            continue
        if not recognizes(drv, destination, token):
            continue
        seen.add(drv.name)
        matches.append(drv.name)

    logger.trace(
        "Matched %s for '%s' (ext='%s', raster=%s, vector=%s)",
        matches,
        destination,
        token,
        raster,
        vector,
    )
    return tuple(matches)
