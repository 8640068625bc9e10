# topmark:header:start
#
#   project      : OutFormat
#   file         : __init__.py
#   file_relpath : src/outformat/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer for OutFormat.

Included modules:

- ``logging``
  TRACE-aware logger class, colored formatter and `setup_logging`.

- ``options``
  Process-local config option store filled from ``--config`` / ``--debug``.

- ``loaders``
  TOML loaders that build a `DriverRegistry` from a registry document.
"""

from __future__ import annotations
