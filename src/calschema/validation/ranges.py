"""
calschema.validation.ranges
---------------------------
Validators bound to a concrete Range. `validate` rejects caller input
(OutOfRangeError); the `check_*` methods guard computed results
(CalendarOverflowError).
"""

from __future__ import annotations

from typing import Callable, Optional

from calschema.core.errors import CalendarOverflowError, OutOfRangeError
from calschema.core.types import Range


class _RangeValidator:
    _param_name = "value"
    _overflow: Callable[[], CalendarOverflowError] = staticmethod(CalendarOverflowError.dates)

    def __init__(self, range: Range) -> None:
        self.range = range
        self.min_value, self.max_value = range.endpoints

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.range})"

    def _out_of_range(self, value: int, param_name: Optional[str]) -> OutOfRangeError:
        return OutOfRangeError.generic(value, param_name or self._param_name)

    def validate(self, value: int, param_name: Optional[str] = None) -> None:
        if value < self.min_value or value > self.max_value:
            raise self._out_of_range(value, param_name)

    def check_overflow(self, value: int) -> None:
        if value < self.min_value or value > self.max_value:
            raise self._overflow()

    def check_upper_bound(self, value: int) -> None:
        if value > self.max_value:
            raise self._overflow()

    def check_lower_bound(self, value: int) -> None:
        if value < self.min_value:
            raise self._overflow()


class YearsValidator(_RangeValidator):
    _param_name = "year"
    # A year beyond the window means the resulting date is unsupported.
    _overflow = staticmethod(CalendarOverflowError.dates)

    def _out_of_range(self, value: int, param_name: Optional[str]) -> OutOfRangeError:
        return OutOfRangeError.year(value, param_name)


class DaysValidator(_RangeValidator):
    _param_name = "days_since_epoch"
    _overflow = staticmethod(CalendarOverflowError.dates)


class MonthsValidator(_RangeValidator):
    _param_name = "months_since_epoch"
    _overflow = staticmethod(CalendarOverflowError.months)
