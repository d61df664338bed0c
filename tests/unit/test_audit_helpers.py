"""Tests for audit helpers and shared utilities."""

import hashlib
import re
from pathlib import Path

import pytest

from pidmatch.audit.helpers import generate_run_id, row_ref
from pidmatch.utils import calculate_file_sha256, format_sha256, get_iso_timestamp


@pytest.mark.unit
def test_generate_run_id_format_and_uniqueness() -> None:
    """Test run ID has correct format and successive calls are unique."""
    rid1 = generate_run_id()
    rid2 = generate_run_id()

    # Format: ISO8601__hex8
    parts = rid1.split("__")
    assert len(parts) == 2
    assert parts[0].endswith("Z")
    assert re.fullmatch(r"[0-9a-f]{8}", parts[1])

    assert rid1 != rid2


@pytest.mark.unit
@pytest.mark.parametrize(("row", "expected"), [(2, "row:2"), (120, "row:120")])
def test_row_ref(row: int, expected: str) -> None:
    """Test row references use the row:<n> form."""
    assert row_ref(row) == expected


@pytest.mark.unit
def test_get_iso_timestamp_is_utc() -> None:
    """Test timestamps are UTC with microseconds and Z suffix."""
    ts = get_iso_timestamp()

    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{6}Z", ts) or re.fullmatch(
        r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z", ts
    )


@pytest.mark.unit
def test_calculate_file_sha256(tmp_path: Path) -> None:
    """Test file digest matches hashlib and carries the prefix."""
    path = tmp_path / "data.bin"
    payload = b"related works\n" * 2000
    path.write_bytes(payload)

    assert calculate_file_sha256(path) == format_sha256(hashlib.sha256(payload).hexdigest())
    assert calculate_file_sha256(path).startswith("sha256:")


@pytest.mark.unit
def test_calculate_file_sha256_missing(tmp_path: Path) -> None:
    """Test digest of a missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        calculate_file_sha256(tmp_path / "missing")
