"""UTC timestamps for audit events and run identifiers."""

from datetime import UTC, datetime

__all__ = ["get_iso_timestamp"]


def get_iso_timestamp() -> str:
    """Return the current UTC time as ISO8601 with microseconds and a ``Z`` suffix.

    Returns
    -------
    str
        Timestamp such as ``"2026-02-03T12:34:56.123456Z"``.
    """
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")
