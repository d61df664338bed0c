"""Structured JSONL audit trail for related-work imports.

Each event is one JSON object per line, written append-only and flushed
immediately so a crashed run still leaves a readable trail.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from pidmatch.audit.helpers import row_ref
from pidmatch.audit.models import LogEvent
from pidmatch.utils import get_iso_timestamp

__all__ = ["AuditLogger"]


class AuditLogger:
    """JSONL audit logger with a persistent file handle.

    Attributes
    ----------
    run_id : str
        Import run identifier.
    log_path : Path
        Path to the JSONL log file.
    current_stage : str | None
        Stage attached to events that do not name one.
    """

    def __init__(self, run_id: str, log_path: Path) -> None:
        """Open the log file for appending.

        Parameters
        ----------
        run_id : str
            Import run identifier.
        log_path : Path
            Path to the JSONL log file; parent directories are created.
        """
        self.run_id = run_id
        self.log_path = Path(log_path)
        self.current_stage: str | None = None

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.log_path.open("a", encoding="utf-8")

    def __enter__(self) -> "AuditLogger":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Flush and close the log file handle."""
        if not self._file.closed:
            self._file.flush()
            self._file.close()

    def set_stage(self, stage: str | None) -> None:
        """Set the stage attached to subsequent events."""
        self.current_stage = stage

    def event(
        self,
        event_type: str,
        data: dict[str, Any] | None = None,
        level: str = "INFO",
        stage: str | None = None,
        rid: str | None = None,
    ) -> None:
        """Write one structured event.

        Parameters
        ----------
        event_type : str
            Event type identifier.
        data : dict[str, Any] | None, optional
            Event payload.
        level : str, optional
            ``DEBUG``, ``INFO``, ``WARN`` or ``ERROR``.
        stage : str | None, optional
            Stage name; defaults to ``current_stage``.
        rid : str | None, optional
            Row reference for row-specific events.
        """
        log_event = LogEvent(
            ts=get_iso_timestamp(),
            run_id=self.run_id,
            level=level,
            event=event_type,
            data=data if data is not None else {},
            stage=stage if stage is not None else self.current_stage,
            rid=rid,
        )
        json.dump(asdict(log_event), self._file, ensure_ascii=False, separators=(",", ":"))
        self._file.write("\n")
        self._file.flush()

    def run_started(self, command: list[str], parameters: dict[str, Any]) -> None:
        """Log the start of an import run with its configuration."""
        self.event("run_started", data={"command": command, "parameters": parameters})

    def run_finished(
        self,
        status: str,
        duration_seconds: float,
        counters: dict[str, int] | None = None,
    ) -> None:
        """Log the end of an import run.

        Parameters
        ----------
        status : str
            ``"success"`` or ``"failed"``.
        duration_seconds : float
            Wall-clock duration of the run.
        counters : dict[str, int] | None, optional
            Accepted, skipped and rejected counts.
        """
        data: dict[str, Any] = {"status": status, "duration_seconds": duration_seconds}
        if counters:
            data["counters"] = counters
        self.event("run_finished", data=data, stage=None)

    def row_rejected(self, row: int, field: str, value: str, message: str) -> None:
        """Log a CSV row that failed validation."""
        self.event(
            "row_rejected",
            data={"field": field, "value": value, "message": message},
            level="WARN",
            stage="parse",
            rid=row_ref(row) if row > 0 else None,
        )

    def duplicate_skipped(self, identifier: str, identifier_type: str, relation_type: str) -> None:
        """Log an imported entry dropped because it already exists."""
        self.event(
            "duplicate_skipped",
            data={
                "identifier": identifier,
                "identifier_type": identifier_type,
                "relation_type": relation_type,
            },
            stage="merge",
        )

    def artifact_written(self, path: str, sha256: str, record_count: int | None = None) -> None:
        """Log an output file with its digest."""
        data: dict[str, Any] = {"path": path, "sha256": sha256}
        if record_count is not None:
            data["record_count"] = record_count
        self.event("artifact_written", data=data, stage="write")

    def error(
        self,
        exception_class: str,
        message: str,
        stage: str | None = None,
        traceback: str | None = None,
    ) -> None:
        """Log a failure that aborted the run."""
        data: dict[str, Any] = {"exception_class": exception_class, "message": message}
        if traceback is not None:
            data["traceback"] = traceback
        self.event("error", data=data, stage=stage, level="ERROR")
