"""ISO-8601 timestamp helpers for persisted records."""

from datetime import datetime, timedelta, timezone


def utc_now() -> datetime:
    """Current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_iso(dt: datetime) -> str:
    """Serialize an aware datetime as ISO-8601 in UTC."""
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds")


def parse_iso(value: str) -> datetime:
    """Parse an ISO-8601 string; naive values are taken as UTC.

    Accepts the trailing ``Z`` written by browsers.
    """
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def millis_between(start: datetime, end: datetime) -> int:
    """Whole milliseconds from start to end (negative if end is earlier)."""
    return (end - start) // timedelta(milliseconds=1)


def local_day(dt: datetime) -> str:
    """Calendar day of an instant in local time, as YYYY-MM-DD."""
    return dt.astimezone().date().isoformat()
