"""Public API for identifier classification and related-work lists.

This module provides the main public API for pidmatch, enabling:
- Detecting and normalizing persistent identifiers
- Checking entries against an existing related-work list
- Reading and writing related-work records as JSONL
- Importing related works from CSV
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from pidmatch.models.records import RecordFormatError, RelatedIdentifierRecord

if TYPE_CHECKING:
    from pidmatch.engine.config import ImportConfig, ImportResult

__all__ = [
    "load_records",
    "write_jsonl",
    "import_related_works",
]


def load_records(path: str | Path) -> list[RelatedIdentifierRecord]:
    """Load related-work records from a JSONL file.

    Blank lines are ignored. Positions are taken from the file; callers
    that need dense positions should wrap the result in ``RelatedWorkList``.

    Parameters
    ----------
    path : str | Path
        JSONL file, one record object per line.

    Returns
    -------
    list[RelatedIdentifierRecord]
        Records in file order.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    RecordFormatError
        If a line is not valid JSON or does not match the record schema.

    Examples
    --------
        >>> from pidmatch import load_records
        >>> records = load_records("related_works.jsonl")
        >>> [r.identifier for r in records]
        ['10.5880/GFZ.1.1', 'https://example.org/dataset/123']
    """
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    records: list[RelatedIdentifierRecord] = []
    with file_path.open("r", encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                data = json.loads(line)
            except json.JSONDecodeError as e:
                raise RecordFormatError(f"invalid JSON: {e.msg}", line=line_number) from e
            try:
                records.append(RelatedIdentifierRecord.from_dict(data))
            except RecordFormatError as e:
                raise RecordFormatError(str(e), line=line_number) from e

    return records


def write_jsonl(
    records: Iterable[RelatedIdentifierRecord],
    path: str | Path,
    *,
    sort_keys: bool = True,
) -> None:
    """Write records to JSONL file (one JSON object per line).

    Output is deterministic with consistent field ordering and UTF-8 encoding.

    Parameters
    ----------
    records : Iterable[RelatedIdentifierRecord]
        Records to write.
    path : str | Path
        Output file path.
    sort_keys : bool, optional
        Whether to sort dictionary keys for deterministic output,
        by default True.
    """
    file_path = Path(path)

    with file_path.open("w", encoding="utf-8", newline="\n") as f:
        for record in records:
            json_str = json.dumps(record.to_dict(), ensure_ascii=False, sort_keys=sort_keys)
            f.write(json_str + "\n")


def import_related_works(
    csv_path: str | Path,
    *,
    existing_path: str | Path | None = None,
    output_path: str | Path | None = None,
    config: ImportConfig | None = None,
) -> ImportResult:
    """Import related works from a CSV file.

    Simplified interface to the import runner, without an audit trail.
    Invalid rows abort the import unless ``config.skip_invalid_rows`` is
    set; duplicates of existing (or earlier imported) entries are skipped.

    Parameters
    ----------
    csv_path : str | Path
        CSV file to import.
    existing_path : str | Path | None, optional
        JSONL file with the current list.
    output_path : str | Path | None, optional
        Where to write the merged list.
    config : ImportConfig | None, optional
        Import configuration.

    Returns
    -------
    ImportResult
        Counts, row errors, merged records and the duplicate notice.

    Examples
    --------
        >>> from pidmatch import import_related_works
        >>> result = import_related_works("related.csv", output_path="works.jsonl")
        >>> print(result.accepted, result.skipped, result.notice)
    """
    from pidmatch.engine import run_import

    return run_import(
        csv_path,
        existing_path=existing_path,
        output_path=output_path,
        config=config,
    )
