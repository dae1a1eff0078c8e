"""
calschema.schemas.gj
--------------------
Gregorian and Julian schemas. Both share the familiar month layout
(31, 28/29, 31, 30, ...) and differ only in the leap rule.
"""

from __future__ import annotations

from typing import Optional, Tuple

from calschema.core.constants import DAYS_PER_GREGORIAN_CYCLE, DAYS_PER_JULIAN_CYCLE
from calschema.core.types import Range, SchemaId
from calschema.schemas.regular import RegularSchema

DAYS_PER_COMMON_YEAR = 365
DAYS_PER_LEAP_YEAR = 366


# ---------------------------------------------------------
# Closed forms reused by the perennial schemas
# ---------------------------------------------------------

def gregorian_is_leap_year(y: int) -> bool:
    return (y & 3) == 0 and (y % 100 != 0 or y % 400 == 0)


def gregorian_start_of_year(y: int) -> int:
    y -= 1
    c = y // 100
    return DAYS_PER_COMMON_YEAR * y + (y >> 2) - c + (c >> 2)


def gregorian_get_year(days_since_epoch: int) -> int:
    # Estimate, then correct by at most one year.
    y = (400 * (days_since_epoch + 2)) // DAYS_PER_GREGORIAN_CYCLE
    c = y // 100
    start_of_year_after = DAYS_PER_COMMON_YEAR * y + (y >> 2) - c + (c >> 2)
    return y if days_since_epoch < start_of_year_after else y + 1


def julian_is_leap_year(y: int) -> bool:
    return (y & 3) == 0


def julian_start_of_year(y: int) -> int:
    y -= 1
    return DAYS_PER_COMMON_YEAR * y + (y >> 2)


def julian_get_year(days_since_epoch: int) -> int:
    return ((days_since_epoch << 2) + 1464) // DAYS_PER_JULIAN_CYCLE


# ---------------------------------------------------------
# Shared month layout
# ---------------------------------------------------------

class GJSchema(RegularSchema):
    """Month layout common to the Gregorian and Julian calendars."""

    months_in_year = 12

    def __init__(self, supported_years: Optional[Range] = None) -> None:
        super().__init__(DAYS_PER_COMMON_YEAR, 28, supported_years)

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return m == 2 and d == 29

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return False

    def count_days_in_year(self, y: int) -> int:
        return DAYS_PER_LEAP_YEAR if self.is_leap_year(y) else DAYS_PER_COMMON_YEAR

    def count_days_in_month(self, y: int, m: int) -> int:
        if m != 2:
            return 30 + ((m + (m >> 3)) & 1)
        return 29 if self.is_leap_year(y) else 28

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        if m < 3:
            return 31 * (m - 1)
        if self.is_leap_year(y):
            return (153 * m - 157) // 5
        return (153 * m - 162) // 5

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        if doy < 60:
            return (doy - 1) // 31 + 1, (doy - 1) % 31 + 1
        leap = self.is_leap_year(y)
        if doy == 60:
            return (2, 29) if leap else (3, 1)
        # Count from March 1st.
        doy -= 61 if leap else 60
        n = (5 * doy + 2) // 153
        return n + 3, doy - (153 * n + 2) // 5 + 1


class GregorianSchema(GJSchema):
    id = SchemaId("solar", "gregorian")

    def is_leap_year(self, y: int) -> bool:
        return gregorian_is_leap_year(y)

    def get_year(self, days_since_epoch: int) -> int:
        return gregorian_get_year(days_since_epoch)

    def get_start_of_year(self, y: int) -> int:
        return gregorian_start_of_year(y)

    def create_custom_prevalidator(self):
        from calschema.validation.prevalidators import GregorianPreValidator
        return GregorianPreValidator()


class JulianSchema(GJSchema):
    id = SchemaId("solar", "julian")

    def is_leap_year(self, y: int) -> bool:
        return julian_is_leap_year(y)

    def count_days_since_epoch(self, y: int, m: int, d: int) -> int:
        # Years start in March so that the leap day sits at the end.
        if m < 3:
            y -= 1
            m += 9
        else:
            m -= 3
        return -306 + (DAYS_PER_JULIAN_CYCLE * y >> 2) + (153 * m + 2) // 5 + d - 1

    def get_date_parts(self, days_since_epoch: int) -> Tuple[int, int, int]:
        days_since_epoch += 306
        y = ((days_since_epoch << 2) + 3) // DAYS_PER_JULIAN_CYCLE
        d0y = days_since_epoch - (DAYS_PER_JULIAN_CYCLE * y >> 2)
        m = (5 * d0y + 2) // 153
        d = 1 + d0y - (153 * m + 2) // 5
        if m > 9:
            return y + 1, m - 9, d
        return y, m + 3, d

    def get_year(self, days_since_epoch: int) -> int:
        return julian_get_year(days_since_epoch)

    def get_start_of_year(self, y: int) -> int:
        return julian_start_of_year(y)

    def create_custom_prevalidator(self):
        from calschema.validation.prevalidators import JulianPreValidator
        return JulianPreValidator()
