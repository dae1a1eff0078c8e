"""
calschema.schemas.perennial
---------------------------
Perennial calendar reforms sharing the Gregorian leap rule. Their blank days
(World days, the Positivist festivals, the IFC leap and year days) are not
counted as a virtual month: they are attached to the month before them.
"""

from __future__ import annotations

from typing import Optional, Tuple

from calschema.core.types import Range, SchemaId
from calschema.schemas.gj import (
    gregorian_get_year,
    gregorian_is_leap_year,
    gregorian_start_of_year,
)
from calschema.schemas.regular import RegularSchema

DAYS_PER_COMMON_YEAR = 365
DAYS_PER_LEAP_YEAR = 366


class _GregorianYears(RegularSchema):
    def is_leap_year(self, y: int) -> bool:
        return gregorian_is_leap_year(y)

    def count_days_in_year(self, y: int) -> int:
        return DAYS_PER_LEAP_YEAR if gregorian_is_leap_year(y) else DAYS_PER_COMMON_YEAR

    def get_year(self, days_since_epoch: int) -> int:
        return gregorian_get_year(days_since_epoch)

    def get_start_of_year(self, y: int) -> int:
        return gregorian_start_of_year(y)


class WorldSchema(_GregorianYears):
    """
    World calendar: four identical quarters of 31/30/30 days. Worldsday
    (12, 31) ends every year, the leap day (6, 31) ends June in leap years.
    """

    id = SchemaId("solar", "world")
    months_in_year = 12

    def __init__(self, supported_years: Optional[Range] = None) -> None:
        super().__init__(DAYS_PER_COMMON_YEAR, 30, supported_years)

    def is_blank_day(self, y: int, m: int, d: int) -> bool:
        return d == 31 and (m == 6 or m == 12)

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return d == 31 and m == 6

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return self.is_blank_day(y, m, d)

    def count_days_in_world_month(self, y: int, m: int) -> int:
        """Length of the month without its blank day."""
        return 31 if (m - 1) % 3 == 0 else 30

    def count_days_in_month(self, y: int, m: int) -> int:
        if m == 12 or (m - 1) % 3 == 0:
            return 31
        if m == 6 and gregorian_is_leap_year(y):
            return 31
        return 30

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        m -= 1
        count = 91 * (m // 3)
        if m > 5 and gregorian_is_leap_year(y):
            count += 1
        m %= 3
        return count if m == 0 else count + 1 + 30 * m

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        if gregorian_is_leap_year(y):
            if doy == 183:
                return 6, 31
            if doy > 183:
                doy -= 1
        if doy == 365:
            return 12, 31
        doy -= 1
        q, j = divmod(doy, 91)
        if j < 31:
            return 1 + 3 * q, 1 + j
        j -= 1
        return 1 + 3 * q + j // 30, 1 + j % 30


class PositivistSchema(_GregorianYears):
    """Comte's calendar: 13 months of 28 days, month 13 absorbs the festival days."""

    id = SchemaId("solar", "positivist")
    months_in_year = 13

    def __init__(self, supported_years: Optional[Range] = None) -> None:
        super().__init__(DAYS_PER_COMMON_YEAR, 28, supported_years)

    def is_blank_day(self, y: int, m: int, d: int) -> bool:
        return d > 28

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return d == 30

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return d > 28

    def count_days_in_month(self, y: int, m: int) -> int:
        if m == 13:
            return 30 if gregorian_is_leap_year(y) else 29
        return 28

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        return 28 * (m - 1)

    def count_days_since_epoch(self, y: int, m: int, d: int) -> int:
        return gregorian_start_of_year(y) + 28 * (m - 1) + d - 1

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        if doy > 336:
            return 13, doy - 336
        q, r = divmod(doy - 1, 28)
        return 1 + q, 1 + r


class InternationalFixedSchema(_GregorianYears):
    """Cotsworth's calendar: 13 x 28 days, leap day after June, year day after December."""

    id = SchemaId("solar", "international_fixed")
    months_in_year = 13

    def __init__(self, supported_years: Optional[Range] = None) -> None:
        super().__init__(DAYS_PER_COMMON_YEAR, 28, supported_years)

    def is_blank_day(self, y: int, m: int, d: int) -> bool:
        return d > 28

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return d == 29 and m == 6

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return d > 28

    def count_days_in_month(self, y: int, m: int) -> int:
        if m == 13 or (m == 6 and gregorian_is_leap_year(y)):
            return 29
        return 28

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        count = 28 * (m - 1)
        if m > 6 and gregorian_is_leap_year(y):
            count += 1
        return count

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        if gregorian_is_leap_year(y):
            if doy == 169:
                return 6, 29
            if doy > 169:
                doy -= 1
        if doy > 336:
            return 13, doy - 336
        q, r = divmod(doy - 1, 28)
        return 1 + q, 1 + r
