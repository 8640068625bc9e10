# topmark:header:start
#
#   project      : OutFormat
#   file         : cmd_common.py
#   file_relpath : src/outformat/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small, focused helpers used by multiple CLI commands:
reading shared state from ``ctx.obj`` and building the registry snapshot the
commands resolve against.
"""

from __future__ import annotations

from pathlib import Path

import click

from outformat.cli.errors import OutformatFileNotFoundError, from_core
from outformat.config.loaders import load_registry_file
from outformat.config.logging import OutformatLogger, get_logger
from outformat.config.options import get_config_option
from outformat.constants import REGISTRY_OPTION
from outformat.core.errors import RegistryError
from outformat.drivers.registry import DriverRegistry, get_builtin_registry

logger: OutformatLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored by the group (0 when unset)."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return int(obj.get("verbosity_level", 0))


def get_registry(ctx: click.Context) -> DriverRegistry:
    """Return the registry snapshot for this invocation.

    Resolution order:
        1. A snapshot already stored in ``ctx.obj["registry"]`` (tests, embedding).
        2. The TOML file given by ``--registry`` or the ``OUTFORMAT_REGISTRY``
           config option.
        3. The built-in driver catalog.

    The snapshot is cached in ``ctx.obj`` so it is built once per invocation.

    Raises:
        OutformatFileNotFoundError: If the registry file does not exist.
        OutformatConfigError: If the registry file is invalid.
    """
    ctx.ensure_object(dict)
    cached = ctx.obj.get("registry")
    if isinstance(cached, DriverRegistry):
        return cached

    source: str | None = ctx.obj.get("registry_path") or get_config_option(REGISTRY_OPTION)
    if source:
        path = Path(source)
        try:
            registry = load_registry_file(path)
        except FileNotFoundError as exc:
            raise OutformatFileNotFoundError(f"Registry file not found: {path}") from exc
        except RegistryError as exc:
            raise from_core(exc) from exc
        logger.info("Using driver registry from %s (%d drivers)", path, len(registry))
    else:
        registry = get_builtin_registry()

    ctx.obj["registry"] = registry
    return registry
