from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from typing import Optional, Union

import numpy as np
from dateutil.relativedelta import relativedelta

DateLike = Union[date, datetime]
Timestamp = Union[DateLike, int, float]


def to_date(value: Timestamp) -> date:
    """Normalise a date, datetime or POSIX timestamp (seconds) to a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value).date()
    raise TypeError(f"Expected a date, datetime or timestamp; got {type(value).__name__}.")


def _as_datetime(value: DateLike) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def _js_weekday(value: DateLike) -> int:
    # 0 = Sunday ... 6 = Saturday
    return value.isoweekday() % 7


# ── month / day boundaries ───────────────────────────────────────────────

def start_of_month(value: DateLike) -> date:
    return to_date(value) + relativedelta(day=1)


def end_of_month(value: DateLike) -> date:
    return to_date(value) + relativedelta(day=31)


def start_of_day(value: DateLike) -> datetime:
    return datetime.combine(to_date(value), time.min)


def end_of_day(value: DateLike) -> datetime:
    return datetime.combine(to_date(value), time.max)


def each_day_of_interval(start: DateLike, end: DateLike) -> list[date]:
    """Every calendar date from ``start`` to ``end``, both inclusive."""
    first = np.datetime64(to_date(start), "D")
    last = np.datetime64(to_date(end), "D")
    return np.arange(first, last + np.timedelta64(1, "D"), dtype="datetime64[D]").tolist()


def add_days(value: DateLike, amount: int) -> date:
    return to_date(value) + timedelta(days=amount)


def sub_days(value: DateLike, amount: int) -> date:
    return to_date(value) - timedelta(days=amount)


# ── indices ──────────────────────────────────────────────────────────────

def day_of_month(value: DateLike) -> int:
    return value.day


def day_of_week(value: DateLike, week_start: int = 0) -> int:
    """1-based position of ``value`` in a week starting on ``week_start`` (0 = Sunday)."""
    return (_js_weekday(value) - week_start) % 7 + 1


def week_of_month(value: DateLike, week_start: int = 0) -> int:
    """
    1-based week of the month containing ``value``.

    The first week runs from the 1st up to the day before the first
    ``week_start`` weekday that follows it; every later week is 7 days.
    """
    offset = (_js_weekday(start_of_month(value)) - week_start) % 7
    return (value.day - 1 + offset) // 7 + 1


# ── labels ───────────────────────────────────────────────────────────────

def month_name(value: DateLike) -> str:
    return calendar.month_name[value.month]


def weekday_name(value: DateLike) -> str:
    return calendar.day_name[value.weekday()]


# ── predicates ───────────────────────────────────────────────────────────

def is_same_day(left: DateLike, right: DateLike) -> bool:
    return to_date(left) == to_date(right)


def is_within_interval(value: DateLike, start: DateLike, end: DateLike) -> bool:
    return _as_datetime(start) <= _as_datetime(value) <= _as_datetime(end)


def is_today(value: DateLike, now: Optional[DateLike] = None) -> bool:
    current = to_date(now) if now is not None else date.today()
    return to_date(value) == current


def is_this_month(value: DateLike, now: Optional[DateLike] = None) -> bool:
    current = to_date(now) if now is not None else date.today()
    return (value.year, value.month) == (current.year, current.month)


# ── year / month override ────────────────────────────────────────────────

def _rollover(value: DateLike, year: int, month: int) -> DateLike:
    # Day-of-month overflows into the following month(s), time is kept.
    return value.replace(year=year, month=month, day=1) + timedelta(days=value.day - 1)


def override_year_month(
    value: DateLike,
    year: Optional[int] = None,
    month: Optional[int] = None,
) -> DateLike:
    """
    Replace the year, then the month, of ``value``.

    Day-of-month and time of day are left as they are, so a day that does
    not exist in the target month rolls forward: overriding the month of
    ``2024-03-31`` with April yields ``2024-05-01``.
    """
    if year is not None:
        value = _rollover(value, year, value.month)
    if month is not None:
        value = _rollover(value, value.year, month)
    return value
