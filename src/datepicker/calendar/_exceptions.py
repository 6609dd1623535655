# Selection and configuration errors share one taxonomy.
from datepicker.selection._exceptions import DatePickerError, InvalidInput

__all__ = ["DatePickerError", "InvalidInput"]
