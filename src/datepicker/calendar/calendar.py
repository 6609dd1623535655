from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from itertools import groupby
from typing import Any, Callable, Mapping, Optional, Union

from pydantic import ValidationError

from datepicker.dates import (
    Timestamp,
    add_days,
    day_of_month,
    day_of_week,
    each_day_of_interval,
    end_of_month,
    is_this_month,
    is_today,
    month_name,
    override_year_month,
    start_of_month,
    sub_days,
    to_date,
    week_of_month,
    weekday_name,
)
from datepicker.selection import Selection, validate_selection
from datepicker.selection import is_selected as _is_selected

from ._exceptions import InvalidInput
from .options import DatePickerOptions, build_options

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


@dataclass(frozen=True, slots=True)
class Day:
    """
    One calendar date as displayed in a month grid.

    ``in_month`` is true when the date lies in the *wall-clock* month at
    build time, not in the month being displayed.  Browsing any other month
    marks all of its days ``False``.  This is suspect but kept until the
    presentation layer says which meaning it wants.
    """

    date: date
    week_index: int
    month_index: int
    today: bool
    week_name: str
    in_month: bool
    selected: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "weekIndex": self.week_index,
            "monthIndex": self.month_index,
            "today": self.today,
            "weekName": {"fullName": self.week_name},
            "inMonth": self.in_month,
            "selected": self.selected,
        }


@dataclass(frozen=True, slots=True)
class Week:
    days: tuple[Day, ...]
    number: int

    def to_dict(self) -> dict[str, Any]:
        return {"days": [d.to_dict() for d in self.days], "number": self.number}


@dataclass(frozen=True, slots=True)
class Month:
    weeks: tuple[Week, ...]
    name: str
    number: int
    year: int

    @property
    def days(self) -> tuple[Day, ...]:
        return tuple(d for w in self.weeks for d in w.days)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": {"fullName": self.name},
            "number": self.number,
            "weeks": [w.to_dict() for w in self.weeks],
            "year": self.year,
        }


class DatePicker:
    """
    Headless date picker: builds month grids of weeks and days and keeps the
    selection state they are tagged with.

    The configuration record is owned by the instance.  Setters change it in
    place and take effect on the next build; nothing is cached between
    builds.  Instances are not thread-safe.
    """

    def __init__(
        self,
        options: Union[DatePickerOptions, Mapping[str, Any], None] = None,
        *,
        clock: Optional[Clock] = None,
        **overrides: Any,
    ) -> None:
        self._options: DatePickerOptions = build_options(options, **overrides)
        self._clock: Clock = clock if clock is not None else datetime.now

    # ── month building ───────────────────────────────────────────────────

    def build_month(self, reference: Timestamp) -> Month:
        """Month grid of the month containing ``reference``."""
        return self._build_month(reference, self._clock())

    def _build_month(self, reference: Timestamp, now: datetime) -> Month:
        first = start_of_month(reference)
        dates = each_day_of_interval(first, end_of_month(reference))
        weeks = self._dates_to_weeks(dates, now)

        logger.debug(
            "Built %04d-%02d: %d weeks, week_start=%d, equal_weeks=%s",
            first.year, first.month, len(weeks),
            self._options.week_start, self._options.equal_weeks,
        )

        return Month(
            weeks=tuple(weeks),
            name=month_name(first),
            number=first.month,
            year=first.year,
        )

    def get_current_month(self) -> Month:
        now = self._clock()
        return self._build_month(now, now)

    def get_calendar_month(self) -> Month:
        """Month of the configured initial year/month, or of the wall clock."""
        now = self._clock()
        anchor = override_year_month(
            now,
            year=self._options.initial_year,
            month=self._options.initial_month,
        )
        return self._build_month(anchor, now)

    def _date_to_day(self, value: date, now: datetime) -> Day:
        week_start = self._options.week_start
        return Day(
            date=value,
            week_index=day_of_week(value, week_start),
            month_index=day_of_month(value),
            today=is_today(value, now),
            week_name=weekday_name(value),
            in_month=is_this_month(value, now),
            selected=self.is_selected(value),
        )

    def _dates_to_weeks(self, dates: list[date], now: datetime) -> list[Week]:
        week_start = self._options.week_start
        grouped = [
            list(group)
            for _, group in groupby(dates, key=lambda d: week_of_month(d, week_start))
        ]

        weeks: list[Week] = []
        for index, group in enumerate(grouped):
            # Numbered from the first in-month date, before any padding.
            number = week_of_month(group[0], week_start)
            days = [self._date_to_day(d, now) for d in group]

            if self._options.equal_weeks and len(days) < 7:
                missing = 7 - len(days)
                if index == 0:
                    days = [
                        self._date_to_day(sub_days(group[0], n), now)
                        for n in range(missing, 0, -1)
                    ] + days
                if index == len(grouped) - 1:
                    days = days + [
                        self._date_to_day(add_days(group[-1], n), now)
                        for n in range(1, missing + 1)
                    ]

            weeks.append(Week(days=tuple(days), number=number))
        return weeks

    # ── configuration ────────────────────────────────────────────────────

    @property
    def options(self) -> DatePickerOptions:
        return self._options.model_copy()

    def _assign(self, **values: Any) -> None:
        # Validated on a copy so a failure leaves the options untouched.
        updated = self._options.model_copy()
        try:
            for name, value in values.items():
                setattr(updated, name, value)
        except ValidationError as exc:
            raise InvalidInput(str(exc)) from exc
        self._options = updated
        logger.debug("Options updated: %s", values)

    def set_month(self, month: Optional[int]) -> None:
        self._assign(initial_month=month)

    def set_year(self, year: Optional[int]) -> None:
        self._assign(initial_year=year)

    def set_month_year(self, month: Optional[int], year: Optional[int]) -> None:
        self._assign(initial_month=month, initial_year=year)

    # ── selection ────────────────────────────────────────────────────────

    def set_selected(self, value: Any) -> None:
        """
        Replace the selection.

        Raises InvalidInput when ``value`` is None or its shape does not
        match ``select_type``; the previous selection is kept in that case.
        """
        selected = validate_selection(self._options.select_type, value)
        self._assign(selected=selected)

    def get_selected(self) -> Optional[Selection]:
        return self._options.selected

    def clear_selected(self) -> None:
        self._assign(selected=None)

    def is_selected(self, value: Timestamp) -> bool:
        return _is_selected(self._options.select_type, self._options.selected, to_date(value))

    def __repr__(self) -> str:
        o = self._options
        return (
            f"DatePicker(week_start={o.week_start}, "
            f"initial_month={o.initial_month}, "
            f"initial_year={o.initial_year}, "
            f"equal_weeks={o.equal_weeks}, "
            f"select_type={o.select_type!r}, "
            f"selected={o.selected!r})"
        )


def create_date_picker(
    options: Union[DatePickerOptions, Mapping[str, Any], None] = None,
    *,
    clock: Optional[Clock] = None,
    **overrides: Any,
) -> DatePicker:
    """Date picker with ``options`` merged over the defaults."""
    return DatePicker(options, clock=clock, **overrides)
