"""
calschema.datemath
------------------
Exact intervals between two dates, built on a CalendricalArithmetic.

Adding years or months truncates, so the naive field difference between two
dates can overshoot: from 2000-02-29, "+1 year" lands on 2001-02-28. The
counts below re-apply the addition from the start and correct by one when
the landing point passes the end date.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from calschema.arithmetic import CalendricalArithmetic
from calschema.core.types import DateParts


class AdditionRule(Enum):
    """How an addition that overshoots the end of a month is resolved."""
    TRUNCATE = "truncate"


@dataclass(frozen=True)
class DateDifference:
    years: int
    months: int
    days: int

    def __str__(self) -> str:
        return f"{self.years}y {self.months}m {self.days}d"


class DateMath:
    def __init__(
        self, arithmetic: CalendricalArithmetic, rule: AdditionRule = AdditionRule.TRUNCATE
    ) -> None:
        if not isinstance(rule, AdditionRule):
            raise ValueError(f"Unknown addition rule: {rule!r}")
        self.arithmetic = arithmetic
        self.rule = rule

    @property
    def schema(self):
        return self.arithmetic.schema

    def add_years(self, date: DateParts, years: int) -> DateParts:
        return self._adjust(self.arithmetic.add_years_with_roundoff(*date, years))

    def add_months(self, date: DateParts, months: int) -> DateParts:
        return self._adjust(self.arithmetic.add_months_with_roundoff(*date, months))

    def _adjust(self, result) -> DateParts:
        # TRUNCATE keeps the clamped date as is.
        return result.parts

    # ---------------------------------------------------------
    # Intervals
    # ---------------------------------------------------------

    def count_years_between(self, start: DateParts, end: DateParts) -> int:
        return self.count_years_between_with_new_start(start, end)[0]

    def count_years_between_with_new_start(
        self, start: DateParts, end: DateParts
    ) -> Tuple[int, DateParts]:
        """
        Number of whole years from start to end, and start plus that many years.

        The landing point never passes end: it is <= end when start < end and
        >= end otherwise.
        """
        years = end.year - start.year
        new_start = self.add_years(start, years)
        if start < end:
            if new_start > end:
                years -= 1
                new_start = self.add_years(start, years)
        elif new_start < end:
            years += 1
            new_start = self.add_years(start, years)
        return years, new_start

    def count_months_between(self, start: DateParts, end: DateParts) -> int:
        return self.count_months_between_with_new_start(start, end)[0]

    def count_months_between_with_new_start(
        self, start: DateParts, end: DateParts
    ) -> Tuple[int, DateParts]:
        months = self.arithmetic.count_months_between(start.month_parts, end.month_parts)
        new_start = self.add_months(start, months)
        if start < end:
            if new_start > end:
                months -= 1
                new_start = self.add_months(start, months)
        elif new_start < end:
            months += 1
            new_start = self.add_months(start, months)
        return months, new_start

    def subtract(self, start: DateParts, end: DateParts) -> DateDifference:
        """end - start as whole years, then whole months, then days."""
        years, after_years = self.count_years_between_with_new_start(start, end)
        months, after_months = self.count_months_between_with_new_start(after_years, end)
        days = (
            self.schema.count_days_since_epoch(*end)
            - self.schema.count_days_since_epoch(*after_months)
        )
        return DateDifference(years, months, days)
