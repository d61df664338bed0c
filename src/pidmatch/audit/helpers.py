"""Run identifiers for audit trails."""

import secrets

from pidmatch.utils import get_iso_timestamp

__all__ = ["generate_run_id", "row_ref"]


def generate_run_id() -> str:
    """Generate a unique run identifier.

    Returns
    -------
    str
        ``<ISO8601 UTC timestamp>__<8 hex chars>``.
    """
    return f"{get_iso_timestamp()}__{secrets.token_hex(4)}"


def row_ref(row: int) -> str:
    """Reference to a CSV row used as the ``rid`` of row events."""
    return f"row:{row}"
