"""
calschema.validation.prevalidators
----------------------------------
Cheap bounds checks run on caller-supplied month/day/day-of-year values
before any schema conversion.

Each validator knows a lower bound for the month and year lengths of its
profile: a value at or below that bound is accepted without consulting the
schema, and only values above it cost a call to count_days_in_month or
count_days_in_year. The year itself is never checked here (see
calschema.validation.ranges).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

from calschema.core.constants import (
    LUNAR_MIN_DAYS_IN_MONTH,
    LUNAR_MIN_DAYS_IN_YEAR,
    LUNAR_MONTHS_IN_YEAR,
    LUNISOLAR_MIN_DAYS_IN_MONTH,
    LUNISOLAR_MIN_DAYS_IN_YEAR,
    SOLAR12_MONTHS_IN_YEAR,
    SOLAR13_MONTHS_IN_YEAR,
    SOLAR_MIN_DAYS_IN_MONTH,
    SOLAR_MIN_DAYS_IN_YEAR,
)
from calschema.core.errors import OutOfRangeError
from calschema.validation.profile import Profile

if TYPE_CHECKING:
    from calschema.schemas.base import CalendricalSchema


class PreValidator(Protocol):
    def validate_month(self, y: int, month: int, param_name: Optional[str] = None) -> None: ...
    def validate_month_day(self, y: int, month: int, day: int, param_name: Optional[str] = None) -> None: ...
    def validate_day_of_year(self, y: int, day_of_year: int, param_name: Optional[str] = None) -> None: ...
    def validate_day_of_month(self, y: int, m: int, day: int, param_name: Optional[str] = None) -> None: ...
    def check_month(self, y: int, month: int) -> bool: ...
    def check_month_day(self, y: int, month: int, day: int) -> bool: ...
    def check_day_of_year(self, y: int, day_of_year: int) -> bool: ...


class _BoundedPreValidator:
    """
    Shared logic. Subclasses fix the month count rule and the two
    shortcut bounds (min days in a month, min days in a year).
    """

    min_days_in_month: int = 1
    min_days_in_year: int = 1

    def __init__(self, schema: "CalendricalSchema") -> None:
        self.schema = schema

    def __repr__(self) -> str:
        return f"{type(self).__name__}({type(self.schema).__name__})"

    def months_in_year(self, y: int) -> int:
        return self.schema.count_months_in_year(y)

    def _day_ok(self, y: int, m: int, day: int) -> bool:
        return day >= 1 and (
            day <= self.min_days_in_month or day <= self.schema.count_days_in_month(y, m)
        )

    # ---------------------------------------------------------
    # Soft checks
    # ---------------------------------------------------------

    def check_month(self, y: int, month: int) -> bool:
        return 1 <= month <= self.months_in_year(y)

    def check_month_day(self, y: int, month: int, day: int) -> bool:
        return self.check_month(y, month) and self._day_ok(y, month, day)

    def check_day_of_year(self, y: int, day_of_year: int) -> bool:
        return day_of_year >= 1 and (
            day_of_year <= self.min_days_in_year
            or day_of_year <= self.schema.count_days_in_year(y)
        )

    # ---------------------------------------------------------
    # Raising validators
    # ---------------------------------------------------------

    def validate_month(self, y: int, month: int, param_name: Optional[str] = None) -> None:
        if not self.check_month(y, month):
            raise OutOfRangeError.month(month, param_name)

    def validate_month_day(
        self, y: int, month: int, day: int, param_name: Optional[str] = None
    ) -> None:
        self.validate_month(y, month, param_name)
        if not self._day_ok(y, month, day):
            raise OutOfRangeError.day(day, param_name)

    def validate_day_of_year(
        self, y: int, day_of_year: int, param_name: Optional[str] = None
    ) -> None:
        if not self.check_day_of_year(y, day_of_year):
            raise OutOfRangeError.day_of_year(day_of_year, param_name)

    def validate_day_of_month(
        self, y: int, m: int, day: int, param_name: Optional[str] = None
    ) -> None:
        # The month is assumed valid.
        if not self._day_ok(y, m, day):
            raise OutOfRangeError.day(day, param_name)


# ---------------------------------------------------------
# Profile-specific validators
# ---------------------------------------------------------

class Solar12PreValidator(_BoundedPreValidator):
    min_days_in_month = SOLAR_MIN_DAYS_IN_MONTH
    min_days_in_year = SOLAR_MIN_DAYS_IN_YEAR

    def months_in_year(self, y: int) -> int:
        return SOLAR12_MONTHS_IN_YEAR


class Solar13PreValidator(_BoundedPreValidator):
    min_days_in_month = SOLAR_MIN_DAYS_IN_MONTH
    min_days_in_year = SOLAR_MIN_DAYS_IN_YEAR

    def months_in_year(self, y: int) -> int:
        return SOLAR13_MONTHS_IN_YEAR


class LunarPreValidator(_BoundedPreValidator):
    min_days_in_month = LUNAR_MIN_DAYS_IN_MONTH
    min_days_in_year = LUNAR_MIN_DAYS_IN_YEAR

    def months_in_year(self, y: int) -> int:
        return LUNAR_MONTHS_IN_YEAR


class LunisolarPreValidator(_BoundedPreValidator):
    min_days_in_month = LUNISOLAR_MIN_DAYS_IN_MONTH
    min_days_in_year = LUNISOLAR_MIN_DAYS_IN_YEAR


class PlainPreValidator(_BoundedPreValidator):
    """Correct for every schema; uses the schema's own declared minima."""

    def __init__(self, schema: "CalendricalSchema") -> None:
        super().__init__(schema)
        self.min_days_in_month = schema.min_days_in_month
        self.min_days_in_year = schema.min_days_in_year


# ---------------------------------------------------------
# Schema-free validators for the two most common calendars
# ---------------------------------------------------------

def _gj_days_in_month(leap: bool, m: int) -> int:
    if m != 2:
        return 30 + ((m + (m >> 3)) & 1)
    return 29 if leap else 28


class _GJPreValidator:
    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def is_leap_year(self, y: int) -> bool:
        raise NotImplementedError

    def check_month(self, y: int, month: int) -> bool:
        return 1 <= month <= 12

    def check_month_day(self, y: int, month: int, day: int) -> bool:
        return 1 <= month <= 12 and day >= 1 and (
            day <= 28 or day <= _gj_days_in_month(self.is_leap_year(y), month)
        )

    def check_day_of_year(self, y: int, day_of_year: int) -> bool:
        return day_of_year >= 1 and (
            day_of_year <= 365 or (day_of_year == 366 and self.is_leap_year(y))
        )

    def validate_month(self, y: int, month: int, param_name: Optional[str] = None) -> None:
        if month < 1 or month > 12:
            raise OutOfRangeError.month(month, param_name)

    def validate_month_day(
        self, y: int, month: int, day: int, param_name: Optional[str] = None
    ) -> None:
        self.validate_month(y, month, param_name)
        self.validate_day_of_month(y, month, day, param_name)

    def validate_day_of_year(
        self, y: int, day_of_year: int, param_name: Optional[str] = None
    ) -> None:
        if not self.check_day_of_year(y, day_of_year):
            raise OutOfRangeError.day_of_year(day_of_year, param_name)

    def validate_day_of_month(
        self, y: int, m: int, day: int, param_name: Optional[str] = None
    ) -> None:
        if day < 1 or (day > 28 and day > _gj_days_in_month(self.is_leap_year(y), m)):
            raise OutOfRangeError.day(day, param_name)


class GregorianPreValidator(_GJPreValidator):
    def is_leap_year(self, y: int) -> bool:
        return (y & 3) == 0 and (y % 100 != 0 or y % 400 == 0)


class JulianPreValidator(_GJPreValidator):
    def is_leap_year(self, y: int) -> bool:
        return (y & 3) == 0


_BY_PROFILE = {
    Profile.SOLAR12: Solar12PreValidator,
    Profile.SOLAR13: Solar13PreValidator,
    Profile.LUNAR: LunarPreValidator,
    Profile.LUNISOLAR: LunisolarPreValidator,
    Profile.OTHER: PlainPreValidator,
}


def create_prevalidator(schema: "CalendricalSchema") -> PreValidator:
    """A schema's own validator if it ships one, else the one matching its profile."""
    custom = schema.create_custom_prevalidator()
    if custom is not None:
        return custom
    return _BY_PROFILE[schema.profile](schema)
