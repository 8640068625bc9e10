# topmark:header:start
#
#   project      : OutFormat
#   file         : __init__.py
#   file_relpath : src/outformat/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across OutFormat.

Included modules:

- ``diagnostics``
  Diagnostic types, the `DiagnosticSink` protocol and its logging and
  collecting implementations.

- ``errors``
  Exception hierarchy (`DriverResolutionError`, `RegistryError`).

- ``formats``
  Output formats understood by the CLI.

Design goals:

- Keep this package free of Click and side effects.
- Prefer small, well-typed helpers over framework-specific utilities.
"""

from __future__ import annotations
