# topmark:header:start
#
#   project      : OutFormat
#   file         : test_text.py
#   file_relpath : tests/utils/test_text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for BOM removal, SQL comment stripping and numeric token classification."""

from __future__ import annotations

from outformat.utils.text import (
    ValueType,
    arg_is_numeric,
    get_value_type,
    remove_bom,
    remove_sql_comments,
)
from tests.conftest import parametrize


def test_remove_bom_bytes() -> None:
    """A leading UTF-8 BOM is dropped from bytes; other bytes are kept."""
    assert remove_bom(b"\xef\xbb\xbfabc") == b"abc"
    assert remove_bom(b"abc") == b"abc"
    assert remove_bom(b"a\xef\xbb\xbf") == b"a\xef\xbb\xbf"
    assert remove_bom(b"\xef\xbb") == b"\xef\xbb"
    assert remove_bom(b"") == b""


def test_remove_bom_text() -> None:
    """A leading U+FEFF is dropped from text, once."""
    assert remove_bom("\ufeffabc") == "abc"
    assert remove_bom("\ufeff\ufeffabc") == "\ufeffabc"
    assert remove_bom("abc") == "abc"


@parametrize(
    "sql, expected",
    [
        ("SELECT 1", "SELECT 1 "),
        ("SELECT 1 -- one", "SELECT 1  "),
        ("-- only a comment", " "),
        ("SELECT *\nFROM t -- all\nWHERE x = 1", "SELECT * FROM t  WHERE x = 1 "),
        ("SELECT '--not' FROM t", "SELECT '--not' FROM t "),
        ('SELECT "a--b" -- c', 'SELECT "a--b"  '),
        ("SELECT 'it''s' -- c", "SELECT 'it''s'  "),
        ("SELECT 1\r\n\r\nFROM t", "SELECT 1 FROM t "),
        ("SELECT 1 - 2", "SELECT 1 - 2 "),
        ("", ""),
    ],
)
def test_remove_sql_comments(sql: str, expected: str) -> None:
    """Comments are cut outside quotes; lines are joined with single spaces."""
    assert remove_sql_comments(sql) == expected


@parametrize(
    "value, expected",
    [
        ("42", ValueType.INTEGER),
        (" -42 ", ValueType.INTEGER),
        ("+7", ValueType.INTEGER),
        ("1.5", ValueType.REAL),
        (".5", ValueType.REAL),
        ("1.", ValueType.REAL),
        ("-1.5e10", ValueType.REAL),
        ("1E-3", ValueType.REAL),
        ("1d5", ValueType.REAL),
        ("2.5D+2", ValueType.REAL),
        ("1e400", ValueType.STRING),
        ("-1e+999", ValueType.STRING),
        ("1e+", ValueType.STRING),
        ("e5", ValueType.STRING),
        ("1e", ValueType.STRING),
        ("1.2.3", ValueType.STRING),
        ("1e5.0", ValueType.STRING),
        ("1e5e3", ValueType.STRING),
        ("1-2", ValueType.STRING),
        ("--1", ValueType.STRING),
        ("0x10", ValueType.STRING),
        (".", ValueType.STRING),
        ("-", ValueType.STRING),
        ("", ValueType.STRING),
        ("   ", ValueType.STRING),
        (None, ValueType.STRING),
        ("abc", ValueType.STRING),
    ],
)
def test_get_value_type(value: str | None, expected: ValueType) -> None:
    """Tokens are classified as integer, real or string."""
    assert get_value_type(value) is expected
    assert arg_is_numeric(value) is (expected is not ValueType.STRING)
