"""Tests for shared whitespace handling."""

import re

import pytest

from pidmatch.utils import WHITESPACE, WHITESPACE_CLASS, trim


@pytest.mark.unit
@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (" \tx \n", "x"),
        ("\ufeffx\ufeff", "x"),
        ("\u00a0x\u202f", "x"),
        ("\u2028x\u2029", "x"),
        ("\v\fx\u3000", "x"),
        ("a b", "a b"),
        ("", ""),
    ],
)
def test_trim_strips_whitespace(value: str, expected: str) -> None:
    """Test trim removes surrounding spaces, line terminators and BOMs."""
    assert trim(value) == expected


@pytest.mark.unit
@pytest.mark.parametrize("char", ["\x1c", "\x1d", "\x1e", "\x1f", "\x85", "\u200b"])
def test_trim_keeps_non_whitespace_controls(char: str) -> None:
    """Test characters outside the whitespace set are kept."""
    assert trim(f"{char}x{char}") == f"{char}x{char}"


@pytest.mark.unit
def test_whitespace_class_matches_whitespace_set() -> None:
    """Test the regex class accepts exactly the trimmed characters."""
    pattern = re.compile(f"[{WHITESPACE_CLASS}]")
    matched = {chr(code) for code in range(0x10000) if pattern.fullmatch(chr(code))}

    assert matched == set(WHITESPACE)
