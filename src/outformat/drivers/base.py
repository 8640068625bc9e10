# topmark:header:start
#
#   project      : OutFormat
#   file         : base.py
#   file_relpath : src/outformat/drivers/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Driver definitions used by OutFormat.

A `Driver` describes a data-format driver as seen by output resolution: its
unique short name, what it can do (`DriverCapabilities`), which file
extensions it writes, and an optional connection prefix identifying
non-file destinations such as ``PG:`` database connection strings.

Drivers are immutable value objects. They are owned by whoever builds the
registry and are never modified during resolution.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from outformat.core.errors import RegistryError

if TYPE_CHECKING:
    from collections.abc import Iterable


class Capability(Enum):
    """Named capability flags a driver may declare.

    Attributes:
        CAN_CREATE: The driver can create a dataset from scratch.
        CAN_CREATE_COPY: The driver can write a copy of an existing dataset.
        IS_RASTER: The driver handles raster data.
        IS_VECTOR: The driver handles vector data.
        SUPPORTS_VECTOR_TRANSLATE_FROM: The driver writes vector output through a
            dedicated translation path, independently of create/copy support.
    """

    CAN_CREATE = "create"
    CAN_CREATE_COPY = "create_copy"
    IS_RASTER = "raster"
    IS_VECTOR = "vector"
    SUPPORTS_VECTOR_TRANSLATE_FROM = "vector_translate_from"

    @classmethod
    def parse(cls, value: str) -> Capability:
        """Return the capability whose value matches ``value`` (case-insensitive).

        Raises:
            RegistryError: If ``value`` names no capability.
        """
        token = value.strip().lower()
        for member in cls:
            if member.value == token:
                return member
        allowed = ", ".join(m.value for m in cls)
        raise RegistryError(f"Unknown driver capability '{value}' (expected one of: {allowed})")


@dataclass(frozen=True)
class DriverCapabilities:
    """Named boolean record of the capabilities of a driver."""

    create: bool = False
    create_copy: bool = False
    raster: bool = False
    vector: bool = False
    vector_translate_from: bool = False

    @classmethod
    def of(cls, *flags: Capability) -> DriverCapabilities:
        """Build a record with exactly the given flags set."""
        return cls(
            create=Capability.CAN_CREATE in flags,
            create_copy=Capability.CAN_CREATE_COPY in flags,
            raster=Capability.IS_RASTER in flags,
            vector=Capability.IS_VECTOR in flags,
            vector_translate_from=Capability.SUPPORTS_VECTOR_TRANSLATE_FROM in flags,
        )

    def has(self, flag: Capability) -> bool:
        """Return True if ``flag`` is set."""
        if flag is Capability.CAN_CREATE:
            return self.create
        if flag is Capability.CAN_CREATE_COPY:
            return self.create_copy
        if flag is Capability.IS_RASTER:
            return self.raster
        if flag is Capability.IS_VECTOR:
            return self.vector
        return self.vector_translate_from

    def flags(self) -> tuple[Capability, ...]:
        """Return the set flags in declaration order."""
        return tuple(flag for flag in Capability if self.has(flag))

    @property
    def writable(self) -> bool:
        """Whether the driver can write at all through create or create-copy."""
        return self.create or self.create_copy


def normalize_extensions(values: Iterable[str]) -> frozenset[str]:
    """Lowercase extensions and strip a leading dot; drop empty entries."""
    return frozenset(v.strip().lstrip(".").lower() for v in values if v.strip().lstrip("."))


@dataclass(frozen=True)
class Driver:
    r"""A registered data-format driver.

    Attributes:
        name (str): Unique short name (e.g. ``"GTiff"``).
        capabilities (DriverCapabilities): What the driver can do.
        extensions (frozenset[str]): Extensions written by the driver, lowercase
            and without leading dot. Compound extensions such as ``"shp.zip"``
            are allowed.
        connection_prefix (str | None): Literal prefix of connection strings the
            driver handles (e.g. ``"PG:"``). An empty prefix is treated as no prefix.
        description (str): Human-readable description (informational only).

    Extensions given with a leading dot or in upper case are normalized on
    construction, so ``Driver("GTiff", extensions={".TIF"})`` declares ``"tif"``.
    """

    name: str
    capabilities: DriverCapabilities = field(default_factory=DriverCapabilities)
    extensions: frozenset[str] = frozenset()
    connection_prefix: str | None = None
    description: str = ""

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise RegistryError("Driver.name is required.")
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "extensions", normalize_extensions(self.extensions))
        if not self.connection_prefix:
            object.__setattr__(self, "connection_prefix", None)

    @property
    def short_name(self) -> str:
        """Unique short name of the driver."""
        return self.name

    def has_capability(self, flag: Capability) -> bool:
        """Return True if the driver declares ``flag``."""
        return self.capabilities.has(flag)

    def supported_extensions(self) -> frozenset[str]:
        """Return the normalized extension set."""
        return self.extensions

    def handles_extension(self, token: str) -> bool:
        """Return True if ``token`` is one of the driver's extensions (case-insensitive)."""
        return bool(token) and token.lower() in self.extensions

    def handles_connection(self, destination: str) -> bool:
        """Return True if the connection prefix is a case-insensitive prefix of ``destination``."""
        prefix = self.connection_prefix
        if not prefix:
            return False
        return destination[: len(prefix)].lower() == prefix.lower()
