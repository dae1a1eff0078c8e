"""
calschema.schemas.ptolemaic
---------------------------
Calendars built from twelve 30-day months plus five (or six) epagomenal days.

The "12" variants attach the epagomenal days to month 12, which then has
35 or 36 days; the "13" variants expose them as a short 13th month.

  * Coptic (and Ethiopic): Julian-style leap year every 4th year, shifted by one.
  * Egyptian (Armenian, Zoroastrian): wandering year of exactly 365 days.
  * French Republican: Gregorian leap rule, minus years divisible by 4000.
"""

from __future__ import annotations

from typing import Optional, Tuple

from calschema.core.constants import DAYS_PER_JULIAN_CYCLE, DAYS_PER_WANDERING_YEAR
from calschema.core.types import Range, SchemaId
from calschema.schemas.regular import RegularSchema

DAYS_PER_MONTH = 30
DAYS_PER_LEAP_YEAR = DAYS_PER_WANDERING_YEAR + 1
DAYS_PER_4000_YEAR_CYCLE = 4000 * DAYS_PER_WANDERING_YEAR + 969


def _augmented_divide(d0y: int) -> Tuple[int, int]:
    """(1 + q, 1 + r) for d0y = 30 q + r."""
    q, r = divmod(d0y, DAYS_PER_MONTH)
    return q + 1, r + 1


# ---------------------------------------------------------
# Epagomenal days as a longer 12th month, or a short 13th month
# ---------------------------------------------------------

class _Twelve:
    months_in_year = 12

    def count_days_in_month(self, y: int, m: int) -> int:
        if m == 12:
            return 36 if self.is_leap_year(y) else 35
        return DAYS_PER_MONTH

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        m, d = _augmented_divide(doy - 1)
        if m == 13:
            return 12, d + DAYS_PER_MONTH
        return m, d

    def is_epagomenal_day(self, y: int, m: int, d: int) -> Tuple[bool, int]:
        if d > DAYS_PER_MONTH:
            return True, d - DAYS_PER_MONTH
        return False, 0

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return d == 36

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return d > DAYS_PER_MONTH


class _Thirteen:
    months_in_year = 13

    def count_days_in_month(self, y: int, m: int) -> int:
        if m == 13:
            return 6 if self.is_leap_year(y) else 5
        return DAYS_PER_MONTH

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        return _augmented_divide(doy - 1)

    def is_epagomenal_day(self, y: int, m: int, d: int) -> Tuple[bool, int]:
        if m == 13:
            return True, d
        return False, 0

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return m == 13 and d == 6

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return m == 13


# ---------------------------------------------------------
# Year structure
# ---------------------------------------------------------

class PtolemaicSchema(RegularSchema):
    """365/366-day years of 30-day months."""

    def __init__(self, min_days_in_month: int, supported_years: Optional[Range] = None) -> None:
        super().__init__(DAYS_PER_WANDERING_YEAR, min_days_in_month, supported_years)

    def count_days_in_year(self, y: int) -> int:
        return DAYS_PER_LEAP_YEAR if self.is_leap_year(y) else DAYS_PER_WANDERING_YEAR

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        return DAYS_PER_MONTH * (m - 1)

    def count_days_since_epoch(self, y: int, m: int, d: int) -> int:
        return self.get_start_of_year(y) + DAYS_PER_MONTH * (m - 1) + d - 1


class CopticSchema(PtolemaicSchema):
    def is_leap_year(self, y: int) -> bool:
        return ((y + 1) & 3) == 0

    def get_year(self, days_since_epoch: int) -> int:
        return ((days_since_epoch << 2) + 1463) // DAYS_PER_JULIAN_CYCLE

    def get_start_of_year(self, y: int) -> int:
        return DAYS_PER_WANDERING_YEAR * (y - 1) + (y >> 2)


class FrenchRepublicanSchema(PtolemaicSchema):
    def is_leap_year(self, y: int) -> bool:
        return (y & 3) == 0 and (y % 100 != 0 or y % 400 == 0) and y % 4000 != 0

    def get_year(self, days_since_epoch: int) -> int:
        y = 1 + (4000 * (days_since_epoch + 2)) // DAYS_PER_4000_YEAR_CYCLE
        return y - 1 if days_since_epoch < self.get_start_of_year(y) else y

    def get_start_of_year(self, y: int) -> int:
        y -= 1
        c = y // 100
        millennium = c // 10
        return DAYS_PER_WANDERING_YEAR * y + (y >> 2) - c + (c >> 2) - (millennium >> 2)


class EgyptianSchema(RegularSchema):
    """Annus vagus: every year has exactly 365 days."""

    def __init__(self, min_days_in_month: int, supported_years: Optional[Range] = None) -> None:
        super().__init__(DAYS_PER_WANDERING_YEAR, min_days_in_month, supported_years)

    def is_leap_year(self, y: int) -> bool:
        return False

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return False

    def count_days_in_year(self, y: int) -> int:
        return DAYS_PER_WANDERING_YEAR

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        return DAYS_PER_MONTH * (m - 1)

    def count_days_since_epoch(self, y: int, m: int, d: int) -> int:
        return DAYS_PER_WANDERING_YEAR * (y - 1) + DAYS_PER_MONTH * (m - 1) + d - 1

    def get_year_and_day_of_year(self, days_since_epoch: int) -> Tuple[int, int]:
        q, d0y = divmod(days_since_epoch, DAYS_PER_WANDERING_YEAR)
        return 1 + q, 1 + d0y

    def get_year(self, days_since_epoch: int) -> int:
        return 1 + days_since_epoch // DAYS_PER_WANDERING_YEAR

    def get_start_of_year(self, y: int) -> int:
        return DAYS_PER_WANDERING_YEAR * (y - 1)


# ---------------------------------------------------------
# Concrete schemas
# ---------------------------------------------------------

class Coptic12Schema(_Twelve, CopticSchema):
    id = SchemaId("solar", "coptic12")

    def __init__(self, supported_years: Optional[Range] = None) -> None:
        super().__init__(DAYS_PER_MONTH, supported_years)


class Coptic13Schema(_Thirteen, CopticSchema):
    id = SchemaId("solar", "coptic13")

    def __init__(self, supported_years: Optional[Range] = None) -> None:
        super().__init__(5, supported_years)


class FrenchRepublican12Schema(_Twelve, FrenchRepublicanSchema):
    id = SchemaId("solar", "french_republican12")

    def __init__(self, supported_years: Optional[Range] = None) -> None:
        super().__init__(DAYS_PER_MONTH, supported_years)


class FrenchRepublican13Schema(_Thirteen, FrenchRepublicanSchema):
    id = SchemaId("solar", "french_republican13")

    def __init__(self, supported_years: Optional[Range] = None) -> None:
        super().__init__(5, supported_years)


class Egyptian12Schema(_Twelve, EgyptianSchema):
    id = SchemaId("annus_vagus", "egyptian12")

    def __init__(self, supported_years: Optional[Range] = None) -> None:
        super().__init__(DAYS_PER_MONTH, supported_years)

    def count_days_in_month(self, y: int, m: int) -> int:
        return 35 if m == 12 else DAYS_PER_MONTH

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return False


class Egyptian13Schema(_Thirteen, EgyptianSchema):
    id = SchemaId("annus_vagus", "egyptian13")

    def __init__(self, supported_years: Optional[Range] = None) -> None:
        super().__init__(5, supported_years)

    def count_days_in_month(self, y: int, m: int) -> int:
        return 5 if m == 13 else DAYS_PER_MONTH

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return False
