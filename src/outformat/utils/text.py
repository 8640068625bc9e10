# topmark:header:start
#
#   project      : OutFormat
#   file         : text.py
#   file_relpath : src/outformat/utils/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stateless text helpers shared by conversion tools.

- `remove_bom`: strip a leading UTF-8 byte-order mark.
- `remove_sql_comments`: drop ``--`` comments from SQL text, quote-aware.
- `get_value_type` / `arg_is_numeric`: classify a command-line token as an
  integer, a real or a plain string.
"""

from __future__ import annotations

import math
import re
from enum import Enum
from typing import Final, overload

UTF8_BOM: Final[bytes] = b"\xef\xbb\xbf"
TEXT_BOM: Final[str] = "\ufeff"

_LINE_SPLIT: Final[re.Pattern[str]] = re.compile(r"[\r\n]+")
_EXPONENT_MARKERS: Final[str] = "eEdD"


@overload
def remove_bom(data: bytes) -> bytes: ...


@overload
def remove_bom(data: str) -> str: ...


def remove_bom(data: bytes | str) -> bytes | str:
    """Return ``data`` without a leading UTF-8 BOM.

    Accepts raw bytes (``EF BB BF``) or decoded text (``U+FEFF``). Only one
    leading mark is removed; data without a BOM is returned unchanged.
    """
    if isinstance(data, bytes):
        return data[len(UTF8_BOM) :] if data.startswith(UTF8_BOM) else data
    return data[len(TEXT_BOM) :] if data.startswith(TEXT_BOM) else data


def _comment_start(line: str) -> int:
    """Index where a ``--`` comment starts in ``line``, or ``len(line)``.

    A doubled quote inside a literal is an escaped quote and does not close it.
    """
    quote: str | None = None
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if quote is not None:
            if ch == quote:
                if i + 1 < n and line[i + 1] == quote:
                    i += 1
                else:
                    quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch == "-" and i + 1 < n and line[i + 1] == "-":
            return i
        i += 1
    return n


def remove_sql_comments(sql: str) -> str:
    """Strip ``--`` line comments from ``sql``.

    The text is split into lines on CR/LF (blank lines are dropped). Each line
    is cut at the first ``--`` outside a single- or double-quoted literal and
    the kept part is followed by a single space, so statements spanning
    several lines stay separated.

    Args:
        sql (str): SQL text, possibly multi-line.

    Returns:
        str: The SQL text on one line without comments.
    """
    parts: list[str] = []
    for line in _LINE_SPLIT.split(sql):
        if not line:
            continue
        parts.append(line[: _comment_start(line)])
        parts.append(" ")
    return "".join(parts)


class ValueType(Enum):
    """Classification of a command-line token."""

    INTEGER = "integer"
    REAL = "real"
    STRING = "string"


def get_value_type(value: str | None) -> ValueType:
    """Classify ``value`` as an integer, a real number or a string.

    Surrounding whitespace and one leading sign are allowed. A real has a
    single decimal point and/or an exponent introduced by ``e``, ``E``, ``d``
    or ``D`` (Fortran style). The exponent marker must follow a digit and be
    followed by a sign or a digit. Reals that overflow to infinity are strings.

    Args:
        value (str | None): Token to classify.

    Returns:
        ValueType: The classification; ``STRING`` for None or empty input.
    """
    if value is None:
        return ValueType.STRING
    text: str = value.strip()
    if not text:
        return ValueType.STRING

    body: str = text[1:] if text[0] in "+-" else text
    found_dot = False
    found_exponent = False
    found_mantissa = False
    last_was_exponent = False
    is_real = False

    for i, ch in enumerate(body):
        if ch.isdigit() and ch.isascii():
            found_mantissa = True
            last_was_exponent = False
        elif ch in "+-":
            if not last_was_exponent:
                return ValueType.STRING
            last_was_exponent = False
        elif ch == ".":
            if found_dot or found_exponent:
                return ValueType.STRING
            found_dot = True
            is_real = True
            last_was_exponent = False
        elif ch in _EXPONENT_MARKERS:
            if not found_mantissa or found_exponent:
                return ValueType.STRING
            following = body[i + 1 : i + 2]
            if not following or not (following in "+-" or following.isdigit()):
                return ValueType.STRING
            found_exponent = True
            is_real = True
            last_was_exponent = True
        else:
            return ValueType.STRING

    if not found_mantissa:
        return ValueType.STRING
    if found_exponent:
        normalized = text.translate(str.maketrans("dD", "eE"))
        try:
            if math.isinf(float(normalized)):
                return ValueType.STRING
        except ValueError:
            return ValueType.STRING
    return ValueType.REAL if is_real else ValueType.INTEGER


def arg_is_numeric(value: str | None) -> bool:
    """Return True if ``value`` is an integer or a real number token."""
    return get_value_type(value) is not ValueType.STRING
