"""Related-work CSV import runner.

Chains the import stages into a single auditable run:

    parse:  read and validate the CSV file
    merge:  load existing records and merge, skipping duplicates
    write:  persist the merged list as JSONL

Failures never propagate: they are reported through ``ImportResult`` and
an ``error`` audit event.
"""

import time
import traceback
from pathlib import Path

from pidmatch.audit.logger import AuditLogger
from pidmatch.dedupe.collection import MergeResult, RelatedWorkList
from pidmatch.engine.config import ImportConfig, ImportResult
from pidmatch.models.records import RelatedIdentifierRecord
from pidmatch.parse.csv_import import CsvImportResult, read_related_works_csv
from pidmatch.utils import calculate_file_sha256


def _stage_parse(csv_path: Path, logger: AuditLogger | None) -> CsvImportResult:
    if logger:
        logger.set_stage("parse")

    parsed = read_related_works_csv(csv_path)

    if logger:
        for err in parsed.errors:
            logger.row_rejected(err.row, err.field, err.value, err.message)

    return parsed


def _stage_merge(
    parsed: CsvImportResult,
    existing_path: Path | None,
    config: ImportConfig,
    logger: AuditLogger | None,
) -> tuple[RelatedWorkList, MergeResult]:
    if logger:
        logger.set_stage("merge")

    from pidmatch.api import load_records

    existing: list[RelatedIdentifierRecord] = load_records(existing_path) if existing_path else []
    works = RelatedWorkList(existing, config=config)
    merged = works.merge(parsed.items)

    if logger:
        for item in merged.skipped:
            logger.duplicate_skipped(item.identifier, item.identifier_type, item.relation_type)

    return works, merged


def _stage_write(works: RelatedWorkList, output_path: Path, logger: AuditLogger | None) -> None:
    if logger:
        logger.set_stage("write")

    from pidmatch.api import write_jsonl

    output_path.parent.mkdir(parents=True, exist_ok=True)
    write_jsonl(works.records, output_path)

    if logger:
        logger.artifact_written(
            str(output_path), calculate_file_sha256(output_path), record_count=len(works)
        )


def _run_stages(
    csv_path: Path,
    existing_path: Path | None,
    output_path: Path | None,
    config: ImportConfig,
    logger: AuditLogger | None,
) -> ImportResult:
    """Execute the import stages sequentially."""
    parsed = _stage_parse(csv_path, logger)

    # File-level problems (row 0) always abort
    fatal = [e for e in parsed.errors if e.row == 0]
    if fatal or (parsed.errors and not config.skip_invalid_rows):
        detail = fatal[0].message if fatal else f"{len(parsed.errors)} invalid value(s) in CSV"
        return ImportResult(
            success=False,
            row_errors=list(parsed.errors),
            error_message=f"Import aborted: {detail}",
        )

    works, merged = _stage_merge(parsed, existing_path, config, logger)

    written: str | None = None
    if output_path is not None:
        _stage_write(works, output_path, logger)
        written = str(output_path)

    return ImportResult(
        success=True,
        accepted=len(merged.accepted),
        skipped=len(merged.skipped),
        row_errors=list(parsed.errors),
        records=list(works.records),
        notice=merged.notice.message if merged.notice else None,
        output_path=written,
    )


def run_import(
    csv_path: Path | str,
    *,
    existing_path: Path | str | None = None,
    output_path: Path | str | None = None,
    config: ImportConfig | None = None,
    audit_logger: AuditLogger | None = None,
) -> ImportResult:
    """Import related works from a CSV file into a JSONL record list.

    Parameters
    ----------
    csv_path : Path | str
        CSV file with ``identifier``, ``identifier_type`` and
        ``relation_type`` columns.
    existing_path : Path | str | None, optional
        JSONL file with the current list. If None, the list starts empty.
    output_path : Path | str | None, optional
        Where to write the merged list. If None, nothing is written.
    config : ImportConfig | None, optional
        Import configuration. If None, uses defaults.
    audit_logger : AuditLogger | None, optional
        Audit logger for tracking. If None, no logging.

    Returns
    -------
    ImportResult
        Counts, row errors, merged records and the duplicate notice.

    Examples
    --------
        >>> from pidmatch.engine import run_import
        >>> result = run_import("related.csv", existing_path="works.jsonl", output_path="works.jsonl")
        >>> if result.success:
        ...     print(f"Imported {result.accepted}, skipped {result.skipped}")
    """
    if config is None:
        config = ImportConfig()

    csv_path = Path(csv_path)
    existing = Path(existing_path) if existing_path is not None else None
    output = Path(output_path) if output_path is not None else None

    start_time = time.perf_counter()
    if audit_logger:
        audit_logger.run_started(
            command=["import", str(csv_path)],
            parameters={
                **config.to_dict(),
                "existing_path": str(existing) if existing else None,
                "output_path": str(output) if output else None,
            },
        )

    try:
        result = _run_stages(csv_path, existing, output, config, audit_logger)
    except Exception as e:
        error_msg = f"{type(e).__name__}: {e}"
        if audit_logger:
            audit_logger.error(
                type(e).__name__,
                str(e),
                stage=audit_logger.current_stage,
                traceback=traceback.format_exc(),
            )
        result = ImportResult(success=False, error_message=error_msg)

    if audit_logger:
        audit_logger.run_finished(
            status="success" if result.success else "failed",
            duration_seconds=time.perf_counter() - start_time,
            counters={
                "accepted": result.accepted,
                "skipped": result.skipped,
                "rejected": len(result.row_errors),
            },
        )

    return result
