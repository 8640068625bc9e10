# topmark:header:start
#
#   project      : OutFormat
#   file         : cmdline.py
#   file_relpath : src/outformat/utils/cmdline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Early scanning of command-line config options.

Some options must take effect before the CLI builds its driver registry or
configures logging, which happens before Click parses the command line. This
module performs a minimal scan of ``argv`` for ``--config KEY VALUE`` and
``--debug VALUE`` and stores them as config options. Everything else is left
to Click.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from outformat.config.logging import OutformatLogger, get_logger
from outformat.config.options import set_config_option
from outformat.constants import DEBUG_OPTION

if TYPE_CHECKING:
    from collections.abc import Sequence

logger: OutformatLogger = get_logger(__name__)


def scan_config_options(argv: Sequence[str]) -> list[tuple[str, str]]:
    """Return the ``(key, value)`` pairs given by ``--config`` and ``--debug``.

    ``argv[0]`` is the program name and is skipped. Option names are matched
    case-insensitively. A ``--config`` that is not followed by two more
    arguments, or a ``--debug`` without a value, is ignored.

    Args:
        argv (Sequence[str]): Full argument vector including the program name.

    Returns:
        list[tuple[str, str]]: Pairs in command-line order; ``--debug VALUE``
            yields ``(OUTFORMAT_DEBUG, VALUE)``.
    """
    pairs: list[tuple[str, str]] = []
    argc: int = len(argv)
    i = 1
    while i < argc:
        arg: str = argv[i].lower()
        if arg == "--config" and i + 2 < argc:
            pairs.append((argv[i + 1], argv[i + 2]))
            i += 2
        elif arg == "--debug" and i + 1 < argc:
            pairs.append((DEBUG_OPTION, argv[i + 1]))
            i += 1
        i += 1
    return pairs


def early_set_config_options(argv: Sequence[str]) -> list[tuple[str, str]]:
    """Scan ``argv`` and store the config options found.

    Args:
        argv (Sequence[str]): Full argument vector including the program name.

    Returns:
        list[tuple[str, str]]: The pairs that were applied, in order.
    """
    pairs = scan_config_options(argv)
    for key, value in pairs:
        set_config_option(key, value)
    if pairs:
        logger.debug("Applied %d early config option(s)", len(pairs))
    return pairs
