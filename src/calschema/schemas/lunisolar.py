"""
calschema.schemas.lunisolar
---------------------------
A minimal arithmetical lunisolar calendar, used to exercise the code paths
for schemas without a fixed month count.

Every 4th year is a leap year with an extra (13th) month. Months alternate
30/29 days starting with 30, so a common year has 354 days and a leap
year 384. Four years form a cycle of 49 months and 1446 days.
"""

from __future__ import annotations

from typing import Optional, Tuple

from calschema.core.constants import LUNISOLAR_MIN_DAYS_IN_MONTH, LUNISOLAR_MIN_DAYS_IN_YEAR
from calschema.core.types import Range, SchemaId
from calschema.schemas.base import CalendricalSchema

MONTHS_PER_4_YEAR_CYCLE = 49
DAYS_PER_4_YEAR_CYCLE = 1446
MONTHS_IN_COMMON_YEAR = 12
MONTHS_IN_LEAP_YEAR = 13
DAYS_IN_COMMON_YEAR = 354
DAYS_IN_LEAP_YEAR = 384


class LunisolarSchema(CalendricalSchema):
    id = SchemaId("lunisolar", "lunisolar")

    def __init__(self, supported_years: Optional[Range] = None) -> None:
        super().__init__(LUNISOLAR_MIN_DAYS_IN_YEAR, LUNISOLAR_MIN_DAYS_IN_MONTH, supported_years)

    def is_regular(self) -> Tuple[bool, int]:
        return False, 0

    def is_leap_year(self, y: int) -> bool:
        return (y & 3) == 0

    def is_intercalary_month(self, y: int, m: int) -> bool:
        return m == 13

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return False

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return False

    def count_months_in_year(self, y: int) -> int:
        return MONTHS_IN_LEAP_YEAR if self.is_leap_year(y) else MONTHS_IN_COMMON_YEAR

    def count_days_in_year(self, y: int) -> int:
        return DAYS_IN_LEAP_YEAR if self.is_leap_year(y) else DAYS_IN_COMMON_YEAR

    def count_days_in_month(self, y: int, m: int) -> int:
        return 29 + (m & 1)

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        return 29 * (m - 1) + (m >> 1)

    def count_months_since_epoch(self, y: int, m: int) -> int:
        return self.get_start_of_year_in_months(y) + m - 1

    def get_month_parts(self, months_since_epoch: int) -> Tuple[int, int]:
        y = ((months_since_epoch << 2) + 52) // MONTHS_PER_4_YEAR_CYCLE
        return y, 1 + months_since_epoch - ((49 * y - 49) >> 2)

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        d0y = doy - 1
        m = ((d0y << 1) + 59) // 59
        return m, 1 + d0y - 29 * (m - 1) - (m >> 1)

    def get_year(self, days_since_epoch: int) -> int:
        C, D = divmod(days_since_epoch, DAYS_PER_4_YEAR_CYCLE)
        return (C << 2) + (4 if D >= 1416 else 1 + D // DAYS_IN_COMMON_YEAR)

    def get_start_of_year_in_months(self, y: int) -> int:
        y -= 1
        return MONTHS_IN_COMMON_YEAR * y + (y >> 2)

    def get_start_of_year(self, y: int) -> int:
        y -= 1
        return DAYS_IN_COMMON_YEAR * y + 30 * (y >> 2)
