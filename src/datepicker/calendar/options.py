from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from datepicker.selection import SelectType, validate_selection

from ._exceptions import InvalidInput


class DatePickerOptions(BaseModel):
    """
    Configuration of one date picker.

    Accepts snake_case names or the camelCase aliases used by the
    presentation layer (``weekStart``, ``equalWeeks``, ...).  Unknown keys
    are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    # 0 is Sunday
    week_start: int = Field(default=1, ge=0, le=6)
    initial_month: Optional[int] = Field(default=None, ge=1, le=12)
    initial_year: Optional[int] = Field(default=None, ge=1, le=9999)
    equal_weeks: bool = True
    select_type: SelectType = "single"
    selected: Any = None

    @field_validator("selected")
    @classmethod
    def selected_matches_select_type(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return None
        select_type = info.data.get("select_type")
        if select_type is None:
            # select_type itself failed validation; its error is reported.
            return value
        return validate_selection(select_type, value)


def _field_name(key: str) -> str:
    for name, field in DatePickerOptions.model_fields.items():
        if key == field.alias:
            return name
    return key


def _by_field_name(data: Mapping[str, Any]) -> dict[str, Any]:
    return {_field_name(key): value for key, value in data.items()}


def build_options(
    options: Union[DatePickerOptions, Mapping[str, Any], None] = None,
    **overrides: Any,
) -> DatePickerOptions:
    """
    Fill defaults for ``options`` and apply keyword ``overrides`` on top.

    Keys may be field names or camelCase aliases on either side; both are
    resolved to field names before merging, so an override always wins.
    """
    if isinstance(options, DatePickerOptions):
        data: dict[str, Any] = {
            name: getattr(options, name) for name in DatePickerOptions.model_fields
        }
    else:
        data = _by_field_name(options or {})
    data.update(_by_field_name(overrides))
    try:
        return DatePickerOptions.model_validate(data)
    except ValidationError as exc:
        raise InvalidInput(str(exc)) from exc
