"""
datepicker.dates
~~~~~~~~~~~~~~~~

Calendar date arithmetic used by the month builder and the selection
matcher.  Every function accepts ``datetime.date`` or ``datetime.datetime``
values and treats them as already-normalised local calendar dates.

Basic usage::

    from datetime import date
    from datepicker.dates import each_day_of_interval, week_of_month

    days = each_day_of_interval(date(2024, 2, 1), date(2024, 2, 29))
    week_of_month(date(2024, 2, 5), week_start=1)   # → 2
"""

from __future__ import annotations

from datepicker.dates.dates import (
    DateLike,
    Timestamp,
    add_days,
    day_of_month,
    day_of_week,
    each_day_of_interval,
    end_of_day,
    end_of_month,
    is_same_day,
    is_this_month,
    is_today,
    is_within_interval,
    month_name,
    override_year_month,
    start_of_day,
    start_of_month,
    sub_days,
    to_date,
    week_of_month,
    weekday_name,
)

__all__ = [
    "DateLike",
    "Timestamp",
    "add_days",
    "day_of_month",
    "day_of_week",
    "each_day_of_interval",
    "end_of_day",
    "end_of_month",
    "is_same_day",
    "is_this_month",
    "is_today",
    "is_within_interval",
    "month_name",
    "override_year_month",
    "start_of_day",
    "start_of_month",
    "sub_days",
    "to_date",
    "week_of_month",
    "weekday_name",
]
