"""
Datetime helpers.
All timestamps inside the service are naive UTC; aware values coming from
callers are converted on the way in.
"""
from datetime import date, datetime, time, timezone


def utcnow() -> datetime:
    """Current time as a naive UTC datetime."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def as_naive_utc(dt: datetime) -> datetime:
    """Drop tzinfo after converting an aware datetime to UTC."""
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def start_of_day(value: datetime) -> datetime:
    return datetime.combine(value.date(), time.min)


def end_of_day(value: datetime) -> datetime:
    return datetime.combine(value.date(), time.max)


def day_start(day: date) -> datetime:
    """Midnight instant of a calendar day."""
    return datetime.combine(day, time.min)

