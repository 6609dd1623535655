from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Literal, Mapping, Optional, Sequence, Union

from datepicker.dates import end_of_day, is_same_day, is_within_interval, start_of_day

from ._exceptions import InvalidInput

SelectType = Literal["single", "multiple", "range"]

SELECT_TYPES: tuple[str, ...] = ("single", "multiple", "range")


@dataclass(frozen=True, slots=True)
class DateRange:
    """Inclusive range of calendar days."""

    start: date
    end: date

    def to_dict(self) -> dict[str, str]:
        return {"from": self.start.isoformat(), "to": self.end.isoformat()}


Selection = Union[date, tuple[date, ...], DateRange]

ValidateFn = Callable[[Any], Selection]
MatchFn = Callable[[Any, date], bool]


@dataclass(frozen=True, slots=True)
class SelectionSpec:
    validate: ValidateFn
    match: MatchFn


# ── single ───────────────────────────────────────────────────────────────

def _validate_single(value: Any) -> date:
    if not isinstance(value, date):
        raise InvalidInput("Invalid date format for 'single' selectType.")
    return value


def _match_single(selected: date, value: date) -> bool:
    return is_same_day(value, selected)


# ── multiple ─────────────────────────────────────────────────────────────

def _validate_multiple(value: Any) -> tuple[date, ...]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise InvalidInput("Invalid date format for 'multiple' selectType.")
    if not all(isinstance(d, date) for d in value):
        raise InvalidInput("Invalid date format for 'multiple' selectType.")
    return tuple(value)


def _match_multiple(selected: tuple[date, ...], value: date) -> bool:
    return any(is_same_day(value, d) for d in selected)


# ── range ────────────────────────────────────────────────────────────────

def _validate_range(value: Any) -> DateRange:
    if isinstance(value, DateRange):
        start, end = value.start, value.end
    elif isinstance(value, Mapping) and "from" in value and "to" in value:
        start, end = value["from"], value["to"]
    else:
        raise InvalidInput("Invalid date format for 'range' selectType.")

    if not isinstance(start, date) or not isinstance(end, date):
        raise InvalidInput("Invalid date format for 'range' selectType.")
    if start_of_day(start) > start_of_day(end):
        raise InvalidInput(
            f"Range start {start.isoformat()} is after range end {end.isoformat()}."
        )
    return value if isinstance(value, DateRange) else DateRange(start, end)


def _match_range(selected: DateRange, value: date) -> bool:
    return is_within_interval(value, start_of_day(selected.start), end_of_day(selected.end))


registry: dict[str, SelectionSpec] = {
    "single": SelectionSpec(_validate_single, _match_single),
    "multiple": SelectionSpec(_validate_multiple, _match_multiple),
    "range": SelectionSpec(_validate_range, _match_range),
}


def validate_selection(select_type: str, value: Any) -> Selection:
    """
    Check that ``value`` has the shape ``select_type`` requires and return
    it normalised: a ``date`` for single, a tuple of dates for multiple and a
    ``DateRange`` for range.

    Raises InvalidInput when no value is given, the mode is unknown or the
    shape does not match.
    """
    if value is None:
        raise InvalidInput("No date provided.")
    spec = registry.get(select_type)
    if spec is None:
        raise InvalidInput(f"Unknown selectType {select_type!r}.")
    return spec.validate(value)


def is_selected(select_type: str, selected: Optional[Selection], value: date) -> bool:
    """Whether ``value`` is part of ``selected`` under ``select_type``."""
    if selected is None:
        return False
    spec = registry.get(select_type)
    if spec is None:
        return False
    return spec.match(selected, value)
