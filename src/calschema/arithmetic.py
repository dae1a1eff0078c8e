"""
calschema.arithmetic
--------------------
Adding years and months to dates, under the truncation rule.

Two shapes are offered. The non-standard operations take a full
(year, month, day) and clamp the day to the end of the target month, reporting
the clamped amount as a roundoff. The standard operations work on
(year, month) pairs only and are exact.

A strategy object is bound to a schema and a supported-year window; results
that leave the window raise CalendarOverflowError. Inputs are assumed valid.
"""

from __future__ import annotations

import logging
from typing import Optional

from calschema.core.types import AdditionResult, DateParts, MonthParts, Range
from calschema.schemas.base import CalendricalSchema
from calschema.segment import CalendricalSegment
from calschema.validation.ranges import DaysValidator, MonthsValidator, YearsValidator

logger = logging.getLogger(__name__)


class CalendricalArithmetic:
    """
    Base strategy. Subclasses implement add_years_with_roundoff,
    add_months_standard and count_months_between.
    """

    def __init__(self, schema: CalendricalSchema, supported_years: Optional[Range] = None) -> None:
        self.schema = schema
        self.segment = CalendricalSegment.create(
            schema, supported_years if supported_years is not None else schema.supported_years
        )
        self.years_validator = YearsValidator(self.segment.supported_years)
        self.months_validator = MonthsValidator(self.segment.supported_months)
        self.days_validator = DaysValidator(self.segment.supported_days)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({type(self.schema).__name__}, {self.supported_years})"

    @property
    def supported_years(self) -> Range:
        return self.segment.supported_years

    @staticmethod
    def create_default(
        schema: CalendricalSchema, supported_years: Optional[Range] = None
    ) -> "CalendricalArithmetic":
        """RegularArithmetic for a fixed month count, else PlainArithmetic."""
        regular, months_in_year = schema.is_regular()
        cls = RegularArithmetic if regular else PlainArithmetic
        arith = cls(schema, supported_years)
        logger.debug(
            "arithmetic for %s: %s (months_in_year=%s)",
            type(schema).__name__, cls.__name__, months_in_year if regular else "variable",
        )
        return arith

    # ---------------------------------------------------------
    # Non-standard operations: (y, m, d)
    # ---------------------------------------------------------

    def add_years(self, y: int, m: int, d: int, years: int) -> DateParts:
        return self.add_years_with_roundoff(y, m, d, years).parts

    def add_years_with_roundoff(self, y: int, m: int, d: int, years: int) -> AdditionResult:
        raise NotImplementedError

    def add_months(self, y: int, m: int, d: int, months: int) -> DateParts:
        return self.add_months_with_roundoff(y, m, d, months).parts

    def add_months_with_roundoff(self, y: int, m: int, d: int, months: int) -> AdditionResult:
        new_y, new_m = self.add_months_standard(y, m, months)
        return self._truncate(new_y, new_m, d)

    def add_days(self, y: int, m: int, d: int, days: int) -> DateParts:
        dse = self.schema.count_days_since_epoch(y, m, d) + days
        self.days_validator.check_overflow(dse)
        return DateParts(*self.schema.get_date_parts(dse))

    # ---------------------------------------------------------
    # Standard operations: (y, m)
    # ---------------------------------------------------------

    def add_months_standard(self, y: int, m: int, months: int) -> MonthParts:
        raise NotImplementedError

    def count_months_between(self, start: MonthParts, end: MonthParts) -> int:
        raise NotImplementedError

    # ---------------------------------------------------------

    def _truncate(self, y: int, m: int, d: int, roundoff: int = 0) -> AdditionResult:
        days_in_month = self.schema.count_days_in_month(y, m)
        overshoot = max(0, d - days_in_month)
        new_d = days_in_month if overshoot else d
        return AdditionResult(DateParts(y, m, new_d), roundoff + overshoot)


class RegularArithmetic(CalendricalArithmetic):
    """Closed forms for schemas with a fixed number of months per year."""

    def __init__(self, schema: CalendricalSchema, supported_years: Optional[Range] = None) -> None:
        regular, months_in_year = schema.is_regular()
        if not regular:
            raise ValueError(f"{type(schema).__name__} is not regular.")
        super().__init__(schema, supported_years)
        self.months_in_year = months_in_year

    def add_years_with_roundoff(self, y: int, m: int, d: int, years: int) -> AdditionResult:
        new_y = y + years
        self.years_validator.check_overflow(new_y)
        return self._truncate(new_y, m, d)

    def add_months_standard(self, y: int, m: int, months: int) -> MonthParts:
        q, r = divmod(self.months_in_year * (y - 1) + m - 1 + months, self.months_in_year)
        new_y = 1 + q
        self.years_validator.check_overflow(new_y)
        return MonthParts(new_y, 1 + r)

    def count_months_between(self, start: MonthParts, end: MonthParts) -> int:
        return (end.year - start.year) * self.months_in_year + end.month - start.month


class PlainArithmetic(CalendricalArithmetic):
    """Works for any schema; walks through the month count since the epoch."""

    def add_years_with_roundoff(self, y: int, m: int, d: int, years: int) -> AdditionResult:
        new_y = y + years
        self.years_validator.check_overflow(new_y)

        sch = self.schema
        months_in_year = sch.count_months_in_year(new_y)
        if m <= months_in_year:
            return self._truncate(new_y, m, d)

        # The month does not exist in the target year: land on the last day of
        # its last month, and count every day we skipped as roundoff.
        roundoff = d + sum(sch.count_days_in_month(y, i) for i in range(months_in_year + 1, m))
        days_in_month = sch.count_days_in_month(new_y, months_in_year)
        roundoff += max(0, d - days_in_month)
        return AdditionResult(DateParts(new_y, months_in_year, days_in_month), roundoff)

    def add_months_standard(self, y: int, m: int, months: int) -> MonthParts:
        months_since_epoch = self.schema.count_months_since_epoch(y, m) + months
        self.months_validator.check_overflow(months_since_epoch)
        return MonthParts(*self.schema.get_month_parts(months_since_epoch))

    def count_months_between(self, start: MonthParts, end: MonthParts) -> int:
        sch = self.schema
        return sch.count_months_since_epoch(*end) - sch.count_months_since_epoch(*start)
