"""Date manipulation utilities"""

from datetime import date, datetime, time, timezone
from typing import Union

from finance_core.domain.exceptions import InvalidDateError

DateLike = Union[date, datetime, str]

SECONDS_PER_DAY = 24 * 60 * 60


def to_calendar_date(value: DateLike) -> date:
    """Strip time of day: datetimes and ISO-8601 strings become plain dates"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return to_datetime(value).date()


def to_datetime(value: DateLike) -> datetime:
    """Coerce a date-like value to a datetime (plain dates land on midnight)"""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError as e:
            raise InvalidDateError(f"Invalid date string: {value!r}") from e
    raise InvalidDateError(f"Expected a date, datetime or ISO-8601 string, got {type(value).__name__}")


def days_between(start: DateLike, end: DateLike) -> int:
    """Whole calendar days from start to end (negative when end is earlier)"""
    return (to_calendar_date(end) - to_calendar_date(start)).days


def elapsed_days(first: DateLike, second: DateLike) -> float:
    """Absolute time distance in (fractional) days"""
    try:
        delta = to_datetime(first) - to_datetime(second)
    except TypeError as e:
        # naive vs timezone-aware datetimes
        raise InvalidDateError(f"Cannot compare {first!r} with {second!r}") from e
    return abs(delta.total_seconds()) / SECONDS_PER_DAY


def to_iso_utc(value: DateLike) -> str:
    """
    UTC timestamp with milliseconds and a Z suffix; naive values are taken as UTC.

    Example:
        date(2024, 1, 15) → "2024-01-15T00:00:00.000Z"
    """
    moment = to_datetime(value)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    else:
        moment = moment.astimezone(timezone.utc)
    return moment.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"
