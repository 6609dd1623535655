"""
datepicker.calendar
~~~~~~~~~~~~~~~~~~~

Month grids for a date picker presentation layer.  A month is split into
weeks under a configurable first weekday; each day carries its position in
the week, today/in-month flags and whether it is selected.

Basic usage::

    from datetime import date
    from datepicker.calendar import create_date_picker

    picker = create_date_picker({"weekStart": 1, "selectType": "range"})
    picker.set_selected({"from": date(2024, 2, 10), "to": date(2024, 2, 12)})
    month = picker.build_month(date(2024, 2, 1))

    len(month.weeks)                       # → 5
    [d.date.day for d in month.weeks[0].days]
                                           # → [29, 30, 31, 1, 2, 3, 4]

With equal_weeks disabled the first and last weeks keep only in-month days::

    picker = create_date_picker(equal_weeks=False)

Public API
----------
create_date_picker  Factory; options merged over the defaults.
DatePicker          Month builder plus configuration and selection state.
DatePickerOptions   Configuration record.
Month, Week, Day    Values returned by the builder.
InvalidInput        Raised on selection or option values of the wrong shape.
"""

from __future__ import annotations

from datepicker.calendar.calendar import Day, DatePicker, Month, Week, create_date_picker
from datepicker.calendar.options import DatePickerOptions, build_options
from datepicker.calendar._exceptions import DatePickerError, InvalidInput

__all__ = [
    "DatePicker",
    "DatePickerError",
    "DatePickerOptions",
    "Day",
    "InvalidInput",
    "Month",
    "Week",
    "build_options",
    "create_date_picker",
]
