"""
calschema.schemas.islamic
-------------------------
Tabular (arithmetical) Islamic calendar: 30-year cycle with 11 leap years,
odd months of 30 days, even months of 29 days, month 12 gaining a day in
leap years.
"""

from __future__ import annotations

from typing import Optional, Tuple

from calschema.core.types import Range, SchemaId
from calschema.schemas.regular import RegularSchema

DAYS_PER_COMMON_YEAR = 354
DAYS_PER_LEAP_YEAR = 355
DAYS_PER_30_YEAR_CYCLE = 19 * DAYS_PER_COMMON_YEAR + 11 * DAYS_PER_LEAP_YEAR


class TabularIslamicSchema(RegularSchema):
    id = SchemaId("lunar", "tabular_islamic")
    months_in_year = 12
    default_supported_years = Range(-199_999, 200_000)

    def __init__(self, supported_years: Optional[Range] = None) -> None:
        super().__init__(DAYS_PER_COMMON_YEAR, 29, supported_years)

    def is_leap_year(self, y: int) -> bool:
        return (14 + 11 * y) % 30 < 11

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return m == 12 and d == 30

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return False

    def count_days_in_year(self, y: int) -> int:
        return DAYS_PER_LEAP_YEAR if self.is_leap_year(y) else DAYS_PER_COMMON_YEAR

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        return 29 * (m - 1) + (m >> 1)

    def count_days_in_month(self, y: int, m: int) -> int:
        if (m & 1) == 0 and (m != 12 or not self.is_leap_year(y)):
            return 29
        return 30

    def count_days_since_epoch(self, y: int, m: int, d: int) -> int:
        return self.get_start_of_year(y) + 29 * (m - 1) + (m >> 1) + d - 1

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        d0y = doy - 1
        m = (11 * d0y + 330) // 325
        return m, 1 + d0y - 29 * (m - 1) - (m >> 1)

    def get_year(self, days_since_epoch: int) -> int:
        return (30 * days_since_epoch + 10_646) // DAYS_PER_30_YEAR_CYCLE

    def get_start_of_year(self, y: int) -> int:
        return DAYS_PER_COMMON_YEAR * (y - 1) + (3 + 11 * y) // 30
