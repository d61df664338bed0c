"""Shared helpers for timestamps, file digests and whitespace."""

from pidmatch.utils.hashing import calculate_file_sha256, format_sha256
from pidmatch.utils.text import WHITESPACE, WHITESPACE_CLASS, trim
from pidmatch.utils.timestamps import get_iso_timestamp

__all__ = [
    "WHITESPACE",
    "WHITESPACE_CLASS",
    "calculate_file_sha256",
    "format_sha256",
    "get_iso_timestamp",
    "trim",
]
