# topmark:header:start
#
#   project      : OutFormat
#   file         : ambiguity.py
#   file_relpath : src/outformat/resolver/ambiguity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Fixed precedence overrides applied to match results.

GMT is registered before netCDF because it must win when *opening* ``.nc``
files, but netCDF is the driver to use when *writing* them. This is the only
override; the table is closed.
"""

from __future__ import annotations

from typing import Final

from outformat.config.logging import OutformatLogger, get_logger

logger: OutformatLogger = get_logger(__name__)

# (extension, exact match in registry order) -> replacement order, as indices
_PRECEDENCE_OVERRIDES: Final[dict[tuple[str, tuple[str, ...]], tuple[int, ...]]] = {
    ("nc", ("gmt", "netcdf")): (1, 0),
}


def apply_precedence_overrides(extension: str, matches: tuple[str, ...]) -> tuple[str, ...]:
    """Return ``matches`` reordered if an override applies, else unchanged.

    Driver names are compared case-insensitively, so a registry naming the
    driver ``netCDF`` triggers the same override as ``NETCDF``. The returned
    names are the registry's own.

    Args:
        extension (str): Normalized extension token of the destination.
        matches (tuple[str, ...]): Match result in registry order.

    Returns:
        tuple[str, ...]: The possibly reordered match result.
    """
    key = (extension.lower(), tuple(name.lower() for name in matches))
    order = _PRECEDENCE_OVERRIDES.get(key)
    if order is None:
        return matches
    reordered = tuple(matches[i] for i in order)
    logger.debug("Precedence override for '.%s': %s -> %s", extension, matches, reordered)
    return reordered
