"""
calschema.schemas.pax
---------------------
Pax calendar (leap-week): 13 months of 28 days; leap years insert the
7-day month "Pax" before the last month, giving 14 months. Month count
varies, so the schema is not regular and relies on the iterative
prototype for year and month lookups.
"""

from __future__ import annotations

from typing import Optional, Tuple

from calschema.core.types import Range, SchemaId
from calschema.schemas.prototype import NonRegularSchemaPrototype

MONTHS_PER_COMMON_YEAR = 13
MONTHS_PER_LEAP_YEAR = 14
DAYS_PER_WEEK = 7
DAYS_PER_MONTH = 28
DAYS_IN_PAX_MONTH = 7
DAYS_PER_COMMON_YEAR = 52 * DAYS_PER_WEEK
DAYS_PER_LEAP_YEAR = DAYS_PER_COMMON_YEAR + DAYS_IN_PAX_MONTH
PAX_MONTH = 13
PAX_WEEK = 49


class PaxSchema(NonRegularSchemaPrototype):
    id = SchemaId("other", "pax")
    proleptic = False

    def __init__(self, supported_years: Optional[Range] = None) -> None:
        super().__init__(
            MONTHS_PER_COMMON_YEAR, DAYS_PER_COMMON_YEAR, DAYS_IN_PAX_MONTH, supported_years
        )

    def is_pax_month(self, y: int, m: int) -> bool:
        return m == PAX_MONTH and self.is_leap_year(y)

    def is_last_month_of_year(self, y: int, m: int) -> bool:
        return m == 14 or (m == 13 and not self.is_leap_year(y))

    def is_intercalary_week(self, y: int, woy: int) -> bool:
        return woy == PAX_WEEK and self.is_leap_year(y)

    def count_weeks_in_year(self, y: int) -> int:
        return 53 if self.is_leap_year(y) else 52

    def is_leap_year(self, y: int) -> bool:
        Y = y % 100
        return Y == 99 or (Y % 6 == 0 and (Y != 0 or y % 400 != 0))

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return False

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return False

    def count_months_in_year(self, y: int) -> int:
        return MONTHS_PER_LEAP_YEAR if self.is_leap_year(y) else MONTHS_PER_COMMON_YEAR

    def count_days_in_year(self, y: int) -> int:
        return DAYS_PER_LEAP_YEAR if self.is_leap_year(y) else DAYS_PER_COMMON_YEAR

    def count_days_in_month(self, y: int, m: int) -> int:
        return DAYS_IN_PAX_MONTH if self.is_pax_month(y, m) else DAYS_PER_MONTH

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        return PAX_WEEK * DAYS_PER_WEEK if m == 14 else DAYS_PER_MONTH * (m - 1)

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        if doy < 337 or not self.is_leap_year(y):
            q, r = divmod(doy - 1, DAYS_PER_MONTH)
            return 1 + q, 1 + r
        if doy < 344:
            return 13, doy - 336
        return 14, doy - 343

    def get_start_of_year(self, y: int) -> int:
        y -= 1
        C, Y = divmod(y, 100)
        return DAYS_PER_COMMON_YEAR * y + 7 * (18 * C - (C >> 2) + Y // 6 + Y // 99)
