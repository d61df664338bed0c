"""Persistent identifier classification, normalization and deduplication.

This package provides:
- Data models (pidmatch.models) - identifier and relation vocabularies, records
- Detection (pidmatch.detect) - rule-based identifier type classification
- Normalization (pidmatch.normalize) - canonical identifier forms
- Deduplication (pidmatch.dedupe) - duplicate checks and related-work lists
- Parsing (pidmatch.parse) - CSV bulk import validation
- Engine (pidmatch.engine) - import orchestration
- Audit (pidmatch.audit) - JSONL audit trail
- CLI (pidmatch.cli) - command-line interface
- Public API (pidmatch.api) - high-level convenience functions
"""

__version__ = "0.1.0"
__license__ = "MIT"

from pidmatch.api import import_related_works, load_records, write_jsonl
from pidmatch.dedupe import MergeResult, Notice, RelatedWorkList, equivalence_key, find_duplicate, is_duplicate
from pidmatch.detect import Classification, detect, explain
from pidmatch.engine.config import ImportConfig, ImportResult
from pidmatch.exceptions import DuplicateRelationError, PidmatchError
from pidmatch.models import (
    IdentifierType,
    RecordFormatError,
    RelatedIdentifierDraft,
    RelatedIdentifierRecord,
    RelationType,
)
from pidmatch.normalize import normalize
from pidmatch.parse import CsvImportResult, RowError, parse_related_works_csv

__all__ = [
    "__version__",
    "__license__",
    # Vocabularies and records
    "IdentifierType",
    "RelationType",
    "RelatedIdentifierDraft",
    "RelatedIdentifierRecord",
    # Core
    "Classification",
    "detect",
    "explain",
    "normalize",
    "equivalence_key",
    "find_duplicate",
    "is_duplicate",
    # Related-work list
    "MergeResult",
    "Notice",
    "RelatedWorkList",
    # Import
    "CsvImportResult",
    "RowError",
    "parse_related_works_csv",
    "ImportConfig",
    "ImportResult",
    "import_related_works",
    "load_records",
    "write_jsonl",
    # Errors
    "PidmatchError",
    "DuplicateRelationError",
    "RecordFormatError",
]
