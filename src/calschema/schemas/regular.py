"""
calschema.schemas.regular
-------------------------
Schemas with a fixed number of months per year. Month addressing is then
plain modular arithmetic on a flattened index n*(y-1) + m - 1.
"""

from __future__ import annotations

from typing import Optional, Tuple

from calschema.core.types import Range
from calschema.schemas.base import CalendricalSchema


class RegularSchema(CalendricalSchema):
    months_in_year: int = 0

    def __init__(
        self,
        min_days_in_year: int,
        min_days_in_month: int,
        supported_years: Optional[Range] = None,
    ) -> None:
        if self.months_in_year <= 0:
            raise ValueError(f"{type(self).__name__}.months_in_year must be positive")
        super().__init__(min_days_in_year, min_days_in_month, supported_years)

    def is_regular(self) -> Tuple[bool, int]:
        return True, self.months_in_year

    def is_intercalary_month(self, y: int, m: int) -> bool:
        return False

    def count_months_in_year(self, y: int) -> int:
        return self.months_in_year

    def count_months_since_epoch(self, y: int, m: int) -> int:
        return self.months_in_year * (y - 1) + m - 1

    def get_month_parts(self, months_since_epoch: int) -> Tuple[int, int]:
        q, r = divmod(months_since_epoch, self.months_in_year)
        return 1 + q, 1 + r

    def get_start_of_year_in_months(self, y: int) -> int:
        return self.months_in_year * (y - 1)

    def get_end_of_year_in_months(self, y: int) -> int:
        return self.months_in_year * y - 1
