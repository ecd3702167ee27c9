"""Time helpers."""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, the form stored in the database."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def floor_minutes(start: datetime, end: datetime) -> int:
    """Whole minutes elapsed between two timestamps, rounded down."""
    return int((end - start).total_seconds() // 60)
