# topmark:header:start
#
#   project      : OutFormat
#   file         : loaders.py
#   file_relpath : src/outformat/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load driver registries from TOML documents.

A registry document is an array of ``[[drivers]]`` tables, in registration
order:

```toml
[[drivers]]
name = "GTiff"
description = "GeoTIFF"
extensions = ["tif", "tiff"]
capabilities = ["create", "create_copy", "raster"]

[[drivers]]
name = "PostGISRaster"
capabilities = ["create_copy", "raster"]
connection_prefix = "PG:"
```

Parsing is done with `tomlkit` and the parsed document is unwrapped to plain
Python structures before validation. Every error is reported as a
`RegistryError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import TOMLKitError

from outformat.config.logging import OutformatLogger, get_logger
from outformat.core.errors import RegistryError
from outformat.drivers.base import Capability, Driver, DriverCapabilities
from outformat.drivers.registry import DriverRegistry
from outformat.utils.text import remove_bom

if TYPE_CHECKING:
    from pathlib import Path

logger: OutformatLogger = get_logger(__name__)

DRIVERS_KEY = "drivers"

_KNOWN_KEYS = frozenset({"name", "description", "extensions", "capabilities", "connection_prefix"})


def _string_list(table: dict[str, Any], key: str, where: str) -> list[str]:
    value: Any = table.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise RegistryError(f"{where}: '{key}' must be an array of strings")
    return cast("list[str]", value)


def driver_from_table(table: dict[str, Any], index: int = 0) -> Driver:
    """Build a `Driver` from one ``[[drivers]]`` table.

    Args:
        table (dict[str, Any]): Plain (unwrapped) TOML table.
        index (int): Position of the table, used in error messages.

    Returns:
        Driver: The driver described by the table.

    Raises:
        RegistryError: If the table is malformed.
    """
    where = f"drivers[{index}]"
    name: Any = table.get("name")
    if not isinstance(name, str) or not name.strip():
        raise RegistryError(f"{where}: 'name' must be a non-empty string")
    where = f"{where} ({name})"

    unknown = sorted(set(table) - _KNOWN_KEYS)
    if unknown:
        logger.warning("%s: ignoring unknown keys: %s", where, ", ".join(unknown))

    prefix: Any = table.get("connection_prefix")
    if prefix is not None and not isinstance(prefix, str):
        raise RegistryError(f"{where}: 'connection_prefix' must be a string")
    description: Any = table.get("description", "")
    if not isinstance(description, str):
        raise RegistryError(f"{where}: 'description' must be a string")

    flags = [Capability.parse(v) for v in _string_list(table, "capabilities", where)]
    return Driver(
        name=name,
        capabilities=DriverCapabilities.of(*flags),
        extensions=frozenset(_string_list(table, "extensions", where)),
        connection_prefix=prefix,
        description=description,
    )


def registry_from_document(doc: dict[str, Any]) -> DriverRegistry:
    """Build a `DriverRegistry` from a parsed registry document.

    Raises:
        RegistryError: If the document has no valid ``drivers`` array.
    """
    tables: Any = doc.get(DRIVERS_KEY)
    if tables is None:
        raise RegistryError(f"Registry document has no '{DRIVERS_KEY}' array")
    if not isinstance(tables, list):
        raise RegistryError(f"'{DRIVERS_KEY}' must be an array of tables")
    drivers: list[Driver] = []
    for i, table in enumerate(cast("list[Any]", tables)):
        if not isinstance(table, dict):
            raise RegistryError(f"drivers[{i}] must be a table")
        drivers.append(driver_from_table(cast("dict[str, Any]", table), i))
    return DriverRegistry(drivers)


def load_registry_text(text: str) -> DriverRegistry:
    """Parse TOML ``text`` into a `DriverRegistry`.

    Raises:
        RegistryError: On TOML syntax errors or invalid driver definitions.
    """
    try:
        doc = tomlkit.parse(text)
    except TOMLKitError as exc:
        raise RegistryError(f"Invalid registry TOML: {exc}") from exc
    registry = registry_from_document(cast("dict[str, Any]", doc.unwrap()))
    logger.debug("Parsed registry with %d drivers", len(registry))
    return registry


def load_registry_file(path: Path) -> DriverRegistry:
    """Read and parse the TOML registry at ``path``.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        RegistryError: On encoding errors, TOML syntax errors or invalid driver
            definitions.
    """
    logger.debug("Loading driver registry from %s", path)
    try:
        text: str = remove_bom(path.read_bytes()).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise RegistryError(f"Registry file {path} is not valid UTF-8: {exc}") from exc
    return load_registry_text(text)


def registry_to_toml(registry: DriverRegistry) -> str:
    """Render ``registry`` as a TOML registry document."""
    doc = tomlkit.document()
    tables = tomlkit.aot()
    for meta in registry.iter_meta():
        table = tomlkit.table()
        table.add("name", meta.name)
        if meta.description:
            table.add("description", meta.description)
        table.add("extensions", list(meta.extensions))
        table.add("capabilities", list(meta.capabilities))
        if meta.connection_prefix:
            table.add("connection_prefix", meta.connection_prefix)
        tables.append(table)
    doc.add(DRIVERS_KEY, tables)
    return tomlkit.dumps(doc)
