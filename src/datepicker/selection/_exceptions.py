class DatePickerError(Exception):
    """Base exception for all date picker errors."""


class InvalidInput(DatePickerError, ValueError):
    """A value does not match the shape or range the configuration requires."""
