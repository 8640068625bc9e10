# topmark:header:start
#
#   project      : OutFormat
#   file         : exit_codes.py
#   file_relpath : src/outformat/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the OutFormat CLI.

OutFormat aligns with the BSD `sysexits` convention so that conversion scripts
can tell a user mistake from a missing format or a broken registry file.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the OutFormat CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure. Prefer a more specific code if available.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: Registry file does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        UNSUPPORTED_FORMAT: No driver can be guessed for the destination.
            Mirrors BSD ``EX_UNAVAILABLE (69)``.
        CONFIG_ERROR: Invalid registry document or config option. Mirrors BSD
            ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    UNSUPPORTED_FORMAT = 69  # EX_UNAVAILABLE
    CONFIG_ERROR = 78  # EX_CONFIG
