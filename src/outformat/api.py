# topmark:header:start
#
#   project      : OutFormat
#   file         : api.py
#   file_relpath : src/outformat/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API for OutFormat.

This module is the stable surface for conversion tools that need to guess an
output driver:

```python
from outformat import api

api.resolve_drivers("out.nc", raster=True)   # ("netCDF", "GMT")
api.resolve_raster_driver("out.tif")          # "GTiff"
api.resolve_raster_driver("out", registry=my_registry)
```

When ``registry`` is omitted the cached built-in catalog snapshot is used.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from outformat.core.errors import DriverResolutionError
from outformat.drivers.registry import DriverRegistry, get_builtin_registry
from outformat.resolver.selector import resolve_drivers as _resolve_drivers
from outformat.resolver.selector import select_raster_driver

if TYPE_CHECKING:
    from outformat.core.diagnostics import DiagnosticSink

__all__ = [
    "DriverRegistry",
    "DriverResolutionError",
    "resolve_drivers",
    "resolve_raster_driver",
]


def resolve_drivers(
    destination: str,
    *,
    raster: bool = False,
    vector: bool = False,
    registry: DriverRegistry | None = None,
) -> tuple[str, ...]:
    """Return the ordered names of the drivers able to produce ``destination``.

    Args:
        destination (str): Output file name or connection string. Never opened.
        raster (bool): Raster output is requested.
        vector (bool): Vector output is requested.
        registry (DriverRegistry | None): Registry snapshot; built-ins when None.

    Returns:
        tuple[str, ...]: Candidate driver names (possibly empty).
    """
    reg: DriverRegistry = registry if registry is not None else get_builtin_registry()
    return _resolve_drivers(reg, destination, raster=raster, vector=vector)


def resolve_raster_driver(
    destination: str,
    *,
    registry: DriverRegistry | None = None,
    sink: DiagnosticSink | None = None,
) -> str:
    """Return the driver to use to write raster output to ``destination``.

    Args:
        destination (str): Output file name or connection string. Never opened.
        registry (DriverRegistry | None): Registry snapshot; built-ins when None.
        sink (DiagnosticSink | None): Diagnostic sink; logs through the package
            logger when None.

    Returns:
        str: Selected driver short name.

    Raises:
        DriverResolutionError: If no driver matches a destination with an extension.
    """
    reg: DriverRegistry = registry if registry is not None else get_builtin_registry()
    return select_raster_driver(reg, destination, sink=sink)
