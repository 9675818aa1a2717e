"""
Calendar helpers used by the progress engine: whole-unit differences between timestamps, midpoints, month boundaries and ISO-8601 parsing.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta, timezone
from typing import Any

from engine.exceptions import MalformedTimestampError

_HOUR = timedelta(hours=1)
_DAY = timedelta(days=1)


def parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise MalformedTimestampError(f"invalid timestamp: {value!r}") from e
    else:
        raise MalformedTimestampError(f"invalid timestamp: {value!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _shift_months(value: datetime, months: int) -> datetime:
    total = value.month - 1 + months
    year = value.year + total // 12
    month = total % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def months_between(start: datetime, end: datetime) -> int:
    """Number of full calendar months from ``start`` to ``end``.

    Negative when ``end`` precedes ``start``. A month counts once the same
    day-of-month and time is reached, clamped to the length of the target
    month (Jan 31 to Feb 28 is one month).
    """
    if end < start:
        return -months_between(end, start)
    months = (end.year - start.year) * 12 + end.month - start.month
    if months and _shift_months(start, months) > end:
        months -= 1
    return months


def hours_between(start: datetime, end: datetime) -> int:
    return int((end - start) / _HOUR)


def days_between(start: datetime, end: datetime) -> int:
    return int((end - start) / _DAY)


def midpoint(start: datetime, end: datetime) -> datetime:
    return start + (end - start) / 2


def add_hours(value: datetime, hours: float) -> datetime:
    return value + timedelta(hours=hours)


def add_years(value: datetime, years: int) -> datetime:
    return _shift_months(value, years * 12)


def start_of_month(value: datetime) -> datetime:
    return value.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def end_of_month(value: datetime) -> datetime:
    last_day = calendar.monthrange(value.year, value.month)[1]
    return value.replace(day=last_day, hour=23, minute=59, second=59, microsecond=999999)
