from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local(tz: Optional[ZoneInfo] = None) -> datetime:
    """Current time, in ``tz`` when one is configured.

    Wrapped so tests can patch it.
    """
    return datetime.now(tz)


def local_wall_time(timestamp: datetime, tz: Optional[ZoneInfo] = None) -> datetime:
    """Naive wall-clock time of a timestamp as the subject sees it.

    Naive timestamps are taken as already local. Aware ones are converted to
    ``tz`` first (or kept in their own offset when no zone is configured).
    Naive and aware values can be compared once passed through here.
    """

    if timestamp.tzinfo is None:
        return timestamp
    if tz is not None:
        timestamp = timestamp.astimezone(tz)
    return timestamp.replace(tzinfo=None)


def local_date(timestamp: datetime, tz: Optional[ZoneInfo] = None) -> date:
    """Calendar date of a timestamp as the subject sees it."""
    return local_wall_time(timestamp, tz).date()


def coerce_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_iso_date(value[:10])
    raise ValueError(f"Unsupported date value: {value!r}")


def coerce_datetime(value) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    # Document stores hand back their own timestamp types (e.g. Firestore's).
    to_datetime = getattr(value, "to_datetime", None) or getattr(value, "ToDatetime", None)
    if callable(to_datetime):
        return to_datetime()
    raise ValueError(f"Unsupported timestamp value: {value!r}")
