"""Import configuration and result dataclasses."""

from dataclasses import asdict, dataclass, field
from typing import Any

from pidmatch.models.records import RelatedIdentifierRecord
from pidmatch.parse.csv_import import RowError


@dataclass
class ImportConfig:
    """Settings for related-work list operations and CSV import.

    Attributes
    ----------
    skipped_preview_limit : int
        Skipped duplicates listed by name in the merge notice (default: 3).
    duplicate_notice_seconds : float
        Display time of the add-one duplicate message (default: 5.0).
    import_notice_seconds : float
        Display time of the bulk import notice (default: 8.0).
    skip_invalid_rows : bool
        Import the valid rows of a CSV that also has invalid rows. When
        False (default) any row error aborts the import.
    """

    skipped_preview_limit: int = 3
    duplicate_notice_seconds: float = 5.0
    import_notice_seconds: float = 8.0
    skip_invalid_rows: bool = False

    def __post_init__(self) -> None:
        """Validate."""
        if self.skipped_preview_limit < 0:
            raise ValueError(
                f"skipped_preview_limit must be >= 0, got {self.skipped_preview_limit}"
            )

        if self.duplicate_notice_seconds <= 0:
            raise ValueError(
                f"duplicate_notice_seconds must be positive, got {self.duplicate_notice_seconds}"
            )

        if self.import_notice_seconds <= 0:
            raise ValueError(
                f"import_notice_seconds must be positive, got {self.import_notice_seconds}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class ImportResult:
    """Outcome of an import run.

    Attributes
    ----------
    success : bool
        Whether the import completed and was applied.
    accepted : int
        Rows appended to the list.
    skipped : int
        Rows dropped as duplicates.
    row_errors : list[RowError]
        CSV validation problems.
    records : list[RelatedIdentifierRecord]
        Full merged list (existing records followed by accepted rows).
    notice : str | None
        Summary of skipped duplicates, if any.
    output_path : str | None
        Written JSONL file, if any.
    error_message : str | None
        Error message if failed.
    """

    success: bool
    accepted: int = 0
    skipped: int = 0
    row_errors: list[RowError] = field(default_factory=list)
    records: list[RelatedIdentifierRecord] = field(default_factory=list)
    notice: str | None = None
    output_path: str | None = None
    error_message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "success": self.success,
            "accepted": self.accepted,
            "skipped": self.skipped,
            "row_errors": [e.to_dict() for e in self.row_errors],
            "records": [r.to_dict() for r in self.records],
            "notice": self.notice,
            "output_path": self.output_path,
            "error_message": self.error_message,
        }
