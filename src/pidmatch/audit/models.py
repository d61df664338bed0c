"""Audit event model."""

from dataclasses import dataclass
from typing import Any

__all__ = ["LogEvent", "LOG_LEVELS"]

LOG_LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")


@dataclass
class LogEvent:
    """One line of the JSONL audit trail.

    Attributes
    ----------
    ts : str
        ISO8601 UTC timestamp with microseconds.
    run_id : str
        Import run identifier.
    level : str
        One of ``LOG_LEVELS``.
    event : str
        Event type (``run_started``, ``row_rejected``, ...).
    data : dict[str, Any]
        Event payload.
    stage : str | None
        Import stage (``parse``, ``merge``, ``write``).
    rid : str | None
        Row reference (``row:<n>``) for row-specific events.
    """

    ts: str
    run_id: str
    level: str
    event: str
    data: dict[str, Any]
    stage: str | None = None
    rid: str | None = None
