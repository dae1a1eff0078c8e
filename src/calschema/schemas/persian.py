"""
calschema.schemas.persian
-------------------------
Arithmetical Persian calendar with the 2820-year cycle (683 leap years).
Years are reckoned from a cycle anchored at year 474.
"""

from __future__ import annotations

from typing import Optional, Tuple

from calschema.core.types import Range, SchemaId
from calschema.schemas.regular import RegularSchema

DAYS_PER_COMMON_YEAR = 365
DAYS_PER_LEAP_YEAR = 366
DAYS_PER_2820_YEAR_CYCLE = 2820 * DAYS_PER_COMMON_YEAR + 683
DAYS_PER_128_YEAR_SUBCYCLE = 97 * DAYS_PER_COMMON_YEAR + 31 * DAYS_PER_LEAP_YEAR
DAYS_PER_YEAR_BEFORE_JULY = 186
YEAR_ZERO = 474


class Persian2820Schema(RegularSchema):
    id = SchemaId("solar", "persian2820")
    months_in_year = 12

    def __init__(self, supported_years: Optional[Range] = None) -> None:
        super().__init__(DAYS_PER_COMMON_YEAR, 29, supported_years)

    def is_leap_year(self, y: int) -> bool:
        Y = YEAR_ZERO + (y - YEAR_ZERO) % 2820
        return 31 * (Y + 38) % 128 < 31

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return m == 12 and d == 30

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return False

    def count_days_in_year(self, y: int) -> int:
        return DAYS_PER_LEAP_YEAR if self.is_leap_year(y) else DAYS_PER_COMMON_YEAR

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        return 31 * (m - 1) if m <= 7 else 6 + 30 * (m - 1)

    def count_days_in_month(self, y: int, m: int) -> int:
        if m < 7:
            return 31
        if m < 12:
            return 30
        return 30 if self.is_leap_year(y) else 29

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        d0y = doy - 1
        m = 1 + d0y // 31 if d0y < DAYS_PER_YEAR_BEFORE_JULY else 1 + (d0y - 6) // 30
        return m, 1 + d0y - self.count_days_in_year_before_month(y, m)

    def get_year(self, days_since_epoch: int) -> int:
        days_since_epoch -= self.get_start_of_year(YEAR_ZERO + 1)
        C, D = divmod(days_since_epoch, DAYS_PER_2820_YEAR_CYCLE)
        if D == DAYS_PER_2820_YEAR_CYCLE - 1:
            Y = 2820
        else:
            Y = (128 * D + DAYS_PER_128_YEAR_SUBCYCLE + 127) // DAYS_PER_128_YEAR_SUBCYCLE
        return YEAR_ZERO + 2820 * C + Y

    def get_start_of_year(self, y: int) -> int:
        C, r = divmod(y - YEAR_ZERO, 2820)
        Y = YEAR_ZERO + r
        return DAYS_PER_2820_YEAR_CYCLE * C + DAYS_PER_COMMON_YEAR * (Y - 1) + (31 * Y - 5) // 128
