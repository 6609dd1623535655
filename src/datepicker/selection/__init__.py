"""
datepicker.selection
~~~~~~~~~~~~~~~~~~~~

Selection state of a date picker and the matcher that decides whether a
calendar day belongs to it.  Three mutually exclusive modes exist:

single    one ``date``
multiple  a sequence of dates
range     a ``DateRange`` (or a ``{"from": ..., "to": ...}`` mapping),
          inclusive on both ends by calendar day

Basic usage::

    from datetime import date
    from datepicker.selection import DateRange, is_selected, validate_selection

    selected = validate_selection("range", {"from": date(2024, 2, 10),
                                            "to": date(2024, 2, 12)})
    is_selected("range", selected, date(2024, 2, 11))   # → True

Public API
----------
validate_selection  Check and normalise a selection value for a mode.
is_selected         Match a date against a selection.
DateRange           Payload of the range mode.
DatePickerError     Base exception for all date picker errors.
InvalidInput        Raised when a value has the wrong shape.
"""

from __future__ import annotations

from datepicker.selection._exceptions import DatePickerError, InvalidInput
from datepicker.selection.selection import (
    SELECT_TYPES,
    DateRange,
    Selection,
    SelectType,
    is_selected,
    validate_selection,
)

__all__ = [
    "SELECT_TYPES",
    "DateRange",
    "DatePickerError",
    "InvalidInput",
    "Selection",
    "SelectType",
    "is_selected",
    "validate_selection",
]
