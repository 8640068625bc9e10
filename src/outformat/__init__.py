# topmark:header:start
#
#   project      : OutFormat
#   file         : __init__.py
#   file_relpath : src/outformat/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OutFormat package.

OutFormat resolves which data-format driver should write a requested output
destination. It matches destinations against an ordered driver registry by
extension and connection prefix, and exposes both a CLI and a small typed API
for conversion tools that auto-detect their output format.
"""

from __future__ import annotations
