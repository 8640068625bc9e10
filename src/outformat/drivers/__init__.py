# topmark:header:start
#
#   project      : OutFormat
#   file         : __init__.py
#   file_relpath : src/outformat/drivers/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Driver model, built-in catalog and registry snapshots."""

from __future__ import annotations

from outformat.drivers.base import Capability, Driver, DriverCapabilities
from outformat.drivers.registry import DriverMeta, DriverRegistry, get_builtin_registry

__all__ = [
    "Capability",
    "Driver",
    "DriverCapabilities",
    "DriverMeta",
    "DriverRegistry",
    "get_builtin_registry",
]
