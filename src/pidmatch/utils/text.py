"""Whitespace handling shared by detection, normalization and CSV import.

Identifiers are pasted from web pages and spreadsheets, so the whitespace
set is the ECMAScript one (``WhiteSpace`` plus ``LineTerminator``): it
includes no-break spaces and the byte order mark, and excludes the ASCII
separator controls that ``str.isspace`` accepts.
"""

__all__ = ["WHITESPACE", "WHITESPACE_CLASS", "trim"]

WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# Body of a regex character class matching one WHITESPACE character
WHITESPACE_CLASS = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"


def trim(value: str) -> str:
    """Strip leading and trailing ``WHITESPACE`` characters."""
    return value.strip(WHITESPACE)
