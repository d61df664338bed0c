"""CSV bulk import of related works.

Expected layout (header matched case-insensitively, column order free)::

    identifier,identifier_type,relation_type
    10.5194/nhess-15-1463-2015,DOI,Cites

An optional ``related_title`` column is carried through. Content problems
never raise: they are returned as ``RowError`` entries. Row numbers count
non-blank lines with the header as row 1; file-level problems use row 0.
"""

import csv
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, NamedTuple

from pidmatch.models.enums import DATACITE_SCHEMA_VERSION, IdentifierType, RelationType
from pidmatch.models.records import RelatedIdentifierDraft
from pidmatch.utils.text import trim

__all__ = [
    "EXAMPLE_CSV",
    "REQUIRED_COLUMNS",
    "CsvImportResult",
    "RowError",
    "parse_related_works_csv",
    "read_related_works_csv",
]

REQUIRED_COLUMNS = ("identifier", "identifier_type", "relation_type")
OPTIONAL_COLUMNS = ("related_title",)

EXAMPLE_CSV = """identifier,identifier_type,relation_type
10.5194/nhess-15-1463-2015,DOI,Cites
10.1007/s11069-014-1480-x,DOI,References
https://example.org/dataset/123,URL,IsSupplementTo
10.5281/zenodo.1234567,DOI,IsDerivedFrom
"""


@dataclass(frozen=True)
class RowError:
    """Validation problem in a CSV file.

    Attributes
    ----------
    row : int
        1-based row number (header = 1), or 0 for file-level problems.
    field : str
        Offending column, or ``"file"``, ``"header"``, ``"row"``.
    value : str
        Offending value.
    message : str
        Human-readable description.
    """

    row: int
    field: str
    value: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


class CsvImportResult(NamedTuple):
    """Result of parsing a related-works CSV.

    Supports tuple unpacking: ``items, errors = parse_related_works_csv(text)``.

    Attributes
    ----------
    items : list[RelatedIdentifierDraft]
        Valid rows, in file order.
    errors : list[RowError]
        Validation problems, in file order.
    """

    items: list[RelatedIdentifierDraft]
    errors: list[RowError]


def _split(line: str) -> list[str] | None:
    """Split one CSV line, or return None when it is malformed."""
    try:
        return next(csv.reader([line], strict=True), [])
    except csv.Error:
        return None


def _cell(values: list[str], columns: dict[str, int], name: str) -> str:
    index = columns.get(name)
    return values[index] if index is not None and index < len(values) else ""


def _file_error(field: str, value: str, message: str) -> CsvImportResult:
    return CsvImportResult([], [RowError(0, field, value, message)])


def parse_related_works_csv(text: str) -> CsvImportResult:
    """Parse and validate related-works CSV content.

    Parameters
    ----------
    text : str
        CSV document.

    Returns
    -------
    CsvImportResult
        Valid drafts and row errors. A row contributes a draft only when it
        has no errors.
    """
    # Only "\n" ends a line; other Unicode separators stay inside the field
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    lines = [line for line in lines if trim(line)]
    if len(lines) < 2:
        return _file_error("file", "", "CSV file is empty or has no data rows")

    header = [trim(column).lower() for column in _split(lines[0]) or []]
    missing = [column for column in REQUIRED_COLUMNS if column not in header]
    if missing:
        return _file_error(
            "header", ", ".join(header), f"Missing required columns: {', '.join(missing)}"
        )

    columns = {name: header.index(name) for name in REQUIRED_COLUMNS + OPTIONAL_COLUMNS if name in header}
    items: list[RelatedIdentifierDraft] = []
    errors: list[RowError] = []

    for row_number, line in enumerate(lines[1:], start=2):
        raw_values = _split(line)
        if raw_values is None:
            errors.append(RowError(row_number, "row", line, "Row is not valid CSV"))
            continue
        values = [trim(value) for value in raw_values]
        if len(values) < len(REQUIRED_COLUMNS):
            errors.append(RowError(row_number, "row", line, "Row has insufficient columns"))
            continue

        identifier = _cell(values, columns, "identifier")
        raw_type = _cell(values, columns, "identifier_type")
        raw_relation = _cell(values, columns, "relation_type")
        row_errors: list[RowError] = []

        if not identifier:
            row_errors.append(RowError(row_number, "identifier", identifier, "Identifier is required"))

        try:
            identifier_type = IdentifierType.parse(raw_type)
        except ValueError:
            row_errors.append(
                RowError(
                    row_number,
                    "identifier_type",
                    raw_type,
                    f"Invalid identifier type. Must be one of: {', '.join(IdentifierType.values())}",
                )
            )

        try:
            relation_type = RelationType.parse(raw_relation)
        except ValueError:
            row_errors.append(
                RowError(
                    row_number,
                    "relation_type",
                    raw_relation,
                    f"Invalid relation type. Must be one of DataCite Schema {DATACITE_SCHEMA_VERSION} types",
                )
            )

        if row_errors:
            errors.extend(row_errors)
            continue

        items.append(
            RelatedIdentifierDraft(
                identifier=identifier,
                identifier_type=identifier_type,
                relation_type=relation_type,
                related_title=_cell(values, columns, "related_title") or None,
            )
        )

    return CsvImportResult(items, errors)


def read_related_works_csv(path: str | Path) -> CsvImportResult:
    """Read and parse a related-works CSV file (UTF-8, BOM tolerated).

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    with file_path.open(encoding="utf-8-sig", newline="") as f:
        return parse_related_works_csv(f.read())
