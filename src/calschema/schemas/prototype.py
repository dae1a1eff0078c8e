"""
calschema.schemas.prototype
---------------------------
Iterative defaults for schemas whose month count varies from year to year.

A concrete schema only needs the leap rule and the month lengths; every
"find the year" or "find the month" query then walks year or month
boundaries. These loops are linear in the distance from year 1, so
subclasses should override them with closed forms when they have one.
"""

from __future__ import annotations

from typing import Optional, Tuple

from calschema.core.types import Range
from calschema.schemas.base import (
    CalendricalSchema,
    PROLEPTIC_SUPPORTED_YEARS,
    STANDARD_SUPPORTED_YEARS,
)


class NonRegularSchemaPrototype(CalendricalSchema):
    proleptic: bool = False

    def __init__(
        self,
        min_months_in_year: int,
        min_days_in_year: int,
        min_days_in_month: int,
        supported_years: Optional[Range] = None,
    ) -> None:
        if min_months_in_year <= 0:
            raise ValueError("min_months_in_year must be positive")
        self.default_supported_years = (
            PROLEPTIC_SUPPORTED_YEARS if self.proleptic else STANDARD_SUPPORTED_YEARS
        )
        super().__init__(min_days_in_year, min_days_in_month, supported_years)
        self.min_months_in_year = min_months_in_year

    def is_regular(self) -> Tuple[bool, int]:
        return False, 0

    def is_intercalary_month(self, y: int, m: int) -> bool:
        return False

    def count_months_since_epoch(self, y: int, m: int) -> int:
        return self.get_start_of_year_in_months(y) + m - 1

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        return sum(self.count_days_in_month(y, i) for i in range(1, m))

    def get_month_parts(self, months_since_epoch: int) -> Tuple[int, int]:
        y = 1 + months_since_epoch // self.min_months_in_year
        start = self.get_start_of_year_in_months(y)
        if months_since_epoch >= 0:
            while months_since_epoch < start:
                y -= 1
                start -= self.count_months_in_year(y)
        else:
            while months_since_epoch >= start + self.count_months_in_year(y):
                start += self.count_months_in_year(y)
                y += 1
        return y, 1 + months_since_epoch - start

    def get_year_and_day_of_year(self, days_since_epoch: int) -> Tuple[int, int]:
        y = 1 + days_since_epoch // self.min_days_in_year
        start = self.get_start_of_year(y)
        if days_since_epoch >= 0:
            while days_since_epoch < start:
                y -= 1
                start -= self.count_days_in_year(y)
        else:
            while days_since_epoch >= start + self.count_days_in_year(y):
                start += self.count_days_in_year(y)
                y += 1
        return y, 1 + days_since_epoch - start

    def get_year(self, days_since_epoch: int) -> int:
        return self.get_year_and_day_of_year(days_since_epoch)[0]

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        m = 1
        before = 0
        months_in_year = self.count_months_in_year(y)
        while m < months_in_year:
            before_next = self.count_days_in_year_before_month(y, m + 1)
            if doy <= before_next:
                break
            before = before_next
            m += 1
        return m, doy - before

    def get_start_of_year_in_months(self, y: int) -> int:
        if y < 1:
            return -sum(self.count_months_in_year(i) for i in range(y, 1))
        return sum(self.count_months_in_year(i) for i in range(1, y))

    def get_start_of_year(self, y: int) -> int:
        if y < 1:
            return -sum(self.count_days_in_year(i) for i in range(y, 1))
        return sum(self.count_days_in_year(i) for i in range(1, y))
