"""Inclusive calendar-day interval helpers.

All functions operate on whole dates; an interval ``[start, end]`` includes both
endpoints, so a one-day interval has ``start == end`` and a duration of 1.
"""
from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Optional, Union

from .errors import ValidationError
from .models import DateRange

__all__ = [
    "overlaps",
    "contains",
    "duration_days",
    "clipped_duration_days",
    "intersection",
    "month_range",
    "parse_date",
    "parse_date_range",
    "validate_range",
]

DateLike = Union[date, str]


def overlaps(a: DateRange, b: DateRange) -> bool:
    """Return ``True`` when the two ranges share at least one day."""

    return a.start <= b.end and b.start <= a.end


def contains(interval: DateRange, day: date) -> bool:
    return interval.start <= day <= interval.end


def duration_days(interval: DateRange) -> int:
    return (interval.end - interval.start).days + 1


def intersection(interval: DateRange, window: DateRange) -> Optional[DateRange]:
    start = max(interval.start, window.start)
    end = min(interval.end, window.end)
    if start > end:
        return None
    return DateRange(start, end)


def clipped_duration_days(interval: DateRange, window: DateRange) -> int:
    """Inclusive day count of ``interval`` restricted to ``window``.

    Disjoint ranges give 0, never a negative count.
    """

    clipped = intersection(interval, window)
    if clipped is None:
        return 0
    return duration_days(clipped)


def month_range(year: int, month: int) -> DateRange:
    if not date.min.year <= int(year) <= date.max.year:
        raise ValidationError(f"Year must be between {date.min.year} and {date.max.year}, got {year}", field="year")
    if not 1 <= int(month) <= 12:
        raise ValidationError(f"Month must be between 1 and 12, got {month}", field="month")
    last_day = calendar.monthrange(int(year), int(month))[1]
    return DateRange(date(int(year), int(month), 1), date(int(year), int(month), last_day))


def parse_date(value: DateLike, *, field: str = "date") -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        raise ValidationError(f"{field} is required", field=field)
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field} must be an ISO date (YYYY-MM-DD), got {value!r}", field=field) from None


def parse_date_range(
    start: DateLike,
    end: DateLike,
    *,
    start_field: str = "start",
    end_field: str = "end",
) -> DateRange:
    """Build a :class:`DateRange`, rejecting malformed or inverted input.

    An end date before the start date is a caller error and is reported as
    such rather than swapped.
    """

    date_range = DateRange(parse_date(start, field=start_field), parse_date(end, field=end_field))
    return validate_range(date_range, start_field=start_field, end_field=end_field)


def validate_range(date_range: DateRange, *, start_field: str = "start", end_field: str = "end") -> DateRange:
    if date_range.end < date_range.start:
        raise ValidationError(
            f"{end_field} {date_range.end.isoformat()} is before {start_field} {date_range.start.isoformat()}",
            field=end_field,
        )
    return date_range
