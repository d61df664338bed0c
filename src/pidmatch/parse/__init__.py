"""Related-work input parsing.

Main Components
---------------
- parse_related_works_csv: Validate CSV content into drafts and row errors
- read_related_works_csv: Same, from a file
- EXAMPLE_CSV: Template offered to users
"""

from pidmatch.parse.csv_import import (
    EXAMPLE_CSV,
    REQUIRED_COLUMNS,
    CsvImportResult,
    RowError,
    parse_related_works_csv,
    read_related_works_csv,
)

__all__ = [
    "EXAMPLE_CSV",
    "REQUIRED_COLUMNS",
    "CsvImportResult",
    "RowError",
    "parse_related_works_csv",
    "read_related_works_csv",
]
