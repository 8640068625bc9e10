# topmark:header:start
#
#   project      : OutFormat
#   file         : registry.py
#   file_relpath : src/outformat/drivers/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable, ordered driver registry snapshots.

A `DriverRegistry` is what resolution reads: an ordered tuple of
[`Driver`][outformat.drivers.base.Driver] objects in registration order. It is
built once by the caller (from the built-in catalog, a TOML document, or any
iterable of drivers) and passed explicitly into every resolution call.

Notes:
    * Snapshots are immutable and can be shared freely between threads.
    * Driver names are unique within a snapshot; construction raises
      `RegistryError` on duplicates.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

from outformat.config.logging import OutformatLogger, get_logger
from outformat.core.errors import RegistryError
from outformat.drivers.base import Driver

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger: OutformatLogger = get_logger(__name__)


@dataclass(frozen=True)
class DriverMeta:
    """Stable, serializable metadata about a registered driver."""

    name: str
    description: str = ""
    extensions: tuple[str, ...] = ()
    capabilities: tuple[str, ...] = ()
    connection_prefix: str | None = None


class DriverRegistry:
    """Ordered, read-only snapshot of drivers.

    Args:
        drivers (Iterable[Driver]): Drivers in registration order.

    Raises:
        RegistryError: If two drivers share a name.
    """

    __slots__ = ("_by_name", "_drivers")

    def __init__(self, drivers: Iterable[Driver] = ()) -> None:
        ordered: tuple[Driver, ...] = tuple(drivers)
        by_name: dict[str, Driver] = {}
        for drv in ordered:
            if drv.name in by_name:
                raise RegistryError(f"Duplicate driver name: {drv.name}")
            by_name[drv.name] = drv
        self._drivers = ordered
        self._by_name = by_name

    def __iter__(self) -> Iterator[Driver]:
        return iter(self._drivers)

    def __len__(self) -> int:
        return len(self._drivers)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __repr__(self) -> str:
        return f"DriverRegistry({list(self.names())!r})"

    def enumerate(self) -> tuple[Driver, ...]:
        """Return the drivers in registration order."""
        return self._drivers

    def names(self) -> tuple[str, ...]:
        """Return driver names in registration order."""
        return tuple(d.name for d in self._drivers)

    def get(self, name: str) -> Driver | None:
        """Return the driver called ``name``, or None."""
        return self._by_name.get(name)

    def iter_meta(self) -> Iterator[DriverMeta]:
        """Iterate over stable metadata for the registered drivers.

        Yields:
            DriverMeta: Serializable metadata about each driver, in registry order.
        """
        for drv in self._drivers:
            yield DriverMeta(
                name=drv.name,
                description=drv.description,
                extensions=tuple(sorted(drv.extensions)),
                capabilities=tuple(flag.value for flag in drv.capabilities.flags()),
                connection_prefix=drv.connection_prefix,
            )


@lru_cache(maxsize=1)
def get_builtin_registry() -> DriverRegistry:
    """Return (and cache) the snapshot of the built-in driver catalog."""
    from outformat.drivers.builtins import DRIVERS

    registry = DriverRegistry(DRIVERS)
    logger.debug("Loaded %d built-in drivers", len(registry))
    return registry
