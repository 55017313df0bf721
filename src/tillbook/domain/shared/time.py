"""Time helpers. Everything stored or compared is UTC."""

from datetime import date, datetime, timezone


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def today_utc() -> date:
    return utc_now().date()


def ensure_tz_aware(dt: datetime) -> datetime:
    """Attach UTC to naive datetimes (SQLite returns them without offset)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt
