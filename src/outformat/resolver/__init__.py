# topmark:header:start
#
#   project      : OutFormat
#   file         : __init__.py
#   file_relpath : src/outformat/resolver/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Driver resolution.

The steps run in this order for every call:

1. ``extension``: destination -> normalized extension token.
2. ``matcher``: registry + capability request -> ordered candidates.
3. ``ambiguity``: fixed precedence overrides on the candidates.
4. ``selector``: raster default/error/tie-break policy.
"""

from __future__ import annotations

from outformat.resolver.ambiguity import apply_precedence_overrides
from outformat.resolver.extension import normalize_extension, raw_extension
from outformat.resolver.matcher import CapabilityRequest, match_drivers
from outformat.resolver.selector import resolve_drivers, select_raster_driver

__all__ = [
    "CapabilityRequest",
    "apply_precedence_overrides",
    "match_drivers",
    "normalize_extension",
    "raw_extension",
    "resolve_drivers",
    "select_raster_driver",
]
