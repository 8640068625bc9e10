# topmark:header:start
#
#   project      : OutFormat
#   file         : __init__.py
#   file_relpath : src/outformat/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OutFormat CLI subcommands."""
