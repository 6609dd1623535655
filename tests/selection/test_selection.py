"""
tests/selection/test_selection.py

Covers:
  - Shape validation per select type (single, multiple, range)
  - Normalisation of the accepted shapes
  - Matching for each select type, including range boundaries
  - Unset selections and unknown select types
"""

from datetime import date, datetime, timedelta

import pytest

from datepicker.selection import (
    DatePickerError,
    DateRange,
    InvalidInput,
    is_selected,
    validate_selection,
)

D1 = date(2024, 2, 10)
D2 = date(2024, 2, 12)


# ── Validation ────────────────────────────────────────────────────────────────

class TestValidateSingle:

    def test_accepts_date(self):
        assert validate_selection("single", D1) == D1

    def test_accepts_datetime(self):
        value = datetime(2024, 2, 10, 9)
        assert validate_selection("single", value) == value

    @pytest.mark.parametrize("value", [[D1], "2024-02-10", {"from": D1, "to": D2}, 5])
    def test_rejects_other_shapes(self, value):
        with pytest.raises(InvalidInput, match="single"):
            validate_selection("single", value)


class TestValidateMultiple:

    def test_list_becomes_tuple(self):
        assert validate_selection("multiple", [D1, D2]) == (D1, D2)

    def test_empty_list_is_allowed(self):
        assert validate_selection("multiple", []) == ()

    @pytest.mark.parametrize("value", [D1, [D1, "2024-02-12"], "2024-02-10", {"from": D1, "to": D2}])
    def test_rejects_other_shapes(self, value):
        with pytest.raises(InvalidInput, match="multiple"):
            validate_selection("multiple", value)


class TestValidateRange:

    def test_mapping_becomes_date_range(self):
        assert validate_selection("range", {"from": D1, "to": D2}) == DateRange(D1, D2)

    def test_date_range_passes_through(self):
        value = DateRange(D1, D2)
        assert validate_selection("range", value) is value

    def test_single_day_range(self):
        assert validate_selection("range", {"from": D1, "to": D1}) == DateRange(D1, D1)

    @pytest.mark.parametrize(
        "value",
        [D1, [D1, D2], {"from": D1}, {"to": D2}, {"from": "2024-02-10", "to": D2}, {"from": D1, "to": None}],
    )
    def test_rejects_other_shapes(self, value):
        with pytest.raises(InvalidInput, match="range"):
            validate_selection("range", value)

    def test_rejects_start_after_end(self):
        with pytest.raises(InvalidInput, match="after"):
            validate_selection("range", {"from": D2, "to": D1})

    def test_to_dict(self):
        assert DateRange(D1, D2).to_dict() == {"from": "2024-02-10", "to": "2024-02-12"}


class TestValidateCommon:

    @pytest.mark.parametrize("select_type", ["single", "multiple", "range"])
    def test_none_is_rejected(self, select_type):
        with pytest.raises(InvalidInput, match="No date provided"):
            validate_selection(select_type, None)

    def test_unknown_select_type(self):
        with pytest.raises(InvalidInput):
            validate_selection("week", D1)

    def test_invalid_input_is_a_value_error(self):
        assert issubclass(InvalidInput, DatePickerError)
        assert issubclass(InvalidInput, ValueError)


# ── Matching ──────────────────────────────────────────────────────────────────

class TestMatchSingle:

    def test_same_day(self):
        assert is_selected("single", D1, D1)

    def test_next_day(self):
        assert not is_selected("single", D1, D1 + timedelta(days=1))

    def test_time_of_day_is_ignored(self):
        assert is_selected("single", datetime(2024, 2, 10, 18), D1)


class TestMatchMultiple:

    def test_members(self):
        selected = (D1, D2)
        assert is_selected("multiple", selected, D1)
        assert is_selected("multiple", selected, D2)

    def test_non_member(self):
        assert not is_selected("multiple", (D1, D2), date(2024, 2, 11))

    def test_empty(self):
        assert not is_selected("multiple", (), D1)


class TestMatchRange:

    @pytest.fixture
    def selected(self):
        return DateRange(D1, D2)

    @pytest.mark.parametrize("day", [10, 11, 12])
    def test_inclusive_bounds(self, selected, day):
        assert is_selected("range", selected, date(2024, 2, day))

    @pytest.mark.parametrize("day", [9, 13])
    def test_outside(self, selected, day):
        assert not is_selected("range", selected, date(2024, 2, day))

    def test_bounds_with_time_still_cover_whole_days(self):
        selected = DateRange(datetime(2024, 2, 10, 18), datetime(2024, 2, 12, 6))
        assert is_selected("range", selected, D1)
        assert is_selected("range", selected, datetime(2024, 2, 12, 23, 30))


class TestMatchUnset:

    @pytest.mark.parametrize("select_type", ["single", "multiple", "range"])
    def test_unset_selection(self, select_type):
        assert not is_selected(select_type, None, D1)

    def test_unknown_select_type(self):
        assert not is_selected("week", D1, D1)
