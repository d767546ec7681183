"""Timestamp formatting shared by API responses."""

from datetime import datetime, timezone


def isoformat_utc(value: datetime | None = None) -> str:
    """Format as ISO-8601 UTC with millisecond precision and a ``Z`` suffix."""
    value = value or datetime.now(timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
