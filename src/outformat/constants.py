# topmark:header:start
#
#   project      : OutFormat
#   file         : constants.py
#   file_relpath : src/outformat/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OutFormat Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

OUTFORMAT_VERSION: str = get_version("outformat")

# Driver selected for raster output when the destination has no extension.
DEFAULT_RASTER_DRIVER: Final[str] = "GTiff"

# Category passed to debug sinks.
DEBUG_CATEGORY: Final[str] = "outformat"

# Config option keys (see `outformat.config.options`).
DEBUG_OPTION: Final[str] = "OUTFORMAT_DEBUG"
REGISTRY_OPTION: Final[str] = "OUTFORMAT_REGISTRY"
LOG_LEVEL_ENV: Final[str] = "OUTFORMAT_LOG_LEVEL"
