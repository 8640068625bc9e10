# topmark:header:start
#
#   project      : OutFormat
#   file         : extension.py
#   file_relpath : src/outformat/resolver/extension.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Extension token extraction for output destinations.

The token is the lowercase last dot segment of the destination's file name.
Two compound extensions are recognized through a closed alias table:
``*.shp.zip`` yields ``"shp.zip"`` and ``*.gpkg.zip`` yields ``"gpkg.zip"``.
There is no general multi-dot rule.
"""

from __future__ import annotations

from typing import Final

# raw extension -> ordered (suffix, token) aliases
_COMPOUND_ALIASES: Final[dict[str, tuple[tuple[str, str], ...]]] = {
    "zip": (
        (".shp.zip", "shp.zip"),
        (".gpkg.zip", "gpkg.zip"),
    ),
}


def _filename_start(destination: str) -> int:
    """Index of the first character after the last path separator."""
    return max(destination.rfind("/"), destination.rfind("\\")) + 1


def raw_extension(destination: str) -> str:
    """Return the lowercase last dot segment of the file name part of ``destination``.

    Directory components are ignored, so ``"dir.d/file"`` has no extension.
    A trailing dot yields an empty extension.

    Args:
        destination (str): File name or connection string.

    Returns:
        str: The extension without its dot, or ``""``.
    """
    start: int = _filename_start(destination)
    dot: int = destination.rfind(".", start)
    if dot < 0:
        return ""
    return destination[dot + 1 :].lower()


def normalize_extension(destination: str) -> str:
    """Return the extension token used to match ``destination`` against drivers.

    Args:
        destination (str): File name or connection string.

    Returns:
        str: Lowercase token without dot, including the ``shp.zip`` and
            ``gpkg.zip`` compound aliases; ``""`` when there is no extension.
    """
    ext: str = raw_extension(destination)
    aliases = _COMPOUND_ALIASES.get(ext)
    if aliases:
        lowered: str = destination.lower()
        for suffix, token in aliases:
            if lowered.endswith(suffix):
                return token
    return ext
