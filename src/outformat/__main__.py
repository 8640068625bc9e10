# topmark:header:start
#
#   project      : OutFormat
#   file         : __main__.py
#   file_relpath : src/outformat/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Allow ``python -m outformat``."""

from __future__ import annotations

from outformat.cli.main import main

if __name__ == "__main__":
    main()
