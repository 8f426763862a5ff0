"""UTC datetime helpers.

Stored and compared datetimes are timezone-aware UTC. SQLite returns naive
values, so repositories pass database datetimes through ensure_utc.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Return dt as aware UTC: naive values are taken as UTC, aware ones converted."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
