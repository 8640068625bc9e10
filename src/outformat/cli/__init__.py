# topmark:header:start
#
#   project      : OutFormat
#   file         : __init__.py
#   file_relpath : src/outformat/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for OutFormat."""

from __future__ import annotations
