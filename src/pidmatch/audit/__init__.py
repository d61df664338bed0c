"""Audit trail for related-work imports.

Main Components
---------------
- AuditLogger: JSONL event logger
- LogEvent: Event record written per line
- generate_run_id: Unique run identifiers
"""

from pidmatch.audit.helpers import generate_run_id, row_ref
from pidmatch.audit.logger import AuditLogger
from pidmatch.audit.models import LOG_LEVELS, LogEvent

__all__ = ["AuditLogger", "LOG_LEVELS", "LogEvent", "generate_run_id", "row_ref"]
