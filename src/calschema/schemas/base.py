"""
calschema.schemas.base
----------------------
The calendrical schema: a stateless rule object mapping (year, month, day)
to a count of days since the epoch and back.

Concrete schemas implement a handful of primitives (leap rule, month
lengths, days before a month, year and month lookup, start of a year).
Everything else below is derived from those primitives and may be
overridden with a closed form when one is available.

Conventions:
  * day 0 is the first day of year 1 (days_since_epoch = 0 <=> (1, 1, 1));
  * month 0 is the first month of year 1 (months_since_epoch);
  * schemas never validate their input; see calschema.validation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Tuple

from calschema.core.constants import DEFAULT_MAX_YEAR, DEFAULT_MIN_YEAR
from calschema.core.errors import OutOfRangeError
from calschema.core.types import Range, SchemaId

if TYPE_CHECKING:
    from calschema.validation.prevalidators import PreValidator
    from calschema.validation.profile import Profile


DEFAULT_SUPPORTED_YEARS = Range(DEFAULT_MIN_YEAR, DEFAULT_MAX_YEAR)
# Proleptic and standard windows for the iterative prototypes.
PROLEPTIC_SUPPORTED_YEARS = Range(-9998, 9999)
STANDARD_SUPPORTED_YEARS = Range(1, 9999)


class CalendricalSchema:
    """
    Base class for all schemas.

    Subclasses pass their lower bounds for the length of a year and of a
    month; these drive profile classification and the fast validators, so
    they must be true lower bounds over the whole supported range.
    """

    id: SchemaId = SchemaId("other", "abstract")
    # The theoretical window within which the formulas are known to be exact.
    default_supported_years: Range = DEFAULT_SUPPORTED_YEARS

    def __init__(
        self,
        min_days_in_year: int,
        min_days_in_month: int,
        supported_years: Optional[Range] = None,
    ) -> None:
        if min_days_in_year <= 0:
            raise ValueError("min_days_in_year must be positive")
        if min_days_in_month <= 0:
            raise ValueError("min_days_in_month must be positive")

        if supported_years is None:
            supported_years = self.default_supported_years
        elif not supported_years.is_subset_of(self.default_supported_years):
            raise OutOfRangeError(
                "supported_years",
                supported_years.min,
                f"The year range {supported_years} is not a subset of "
                f"{self.default_supported_years} for {type(self).__name__}.",
            )

        self.min_days_in_year = min_days_in_year
        self.min_days_in_month = min_days_in_month
        self.supported_years = supported_years

        # Lazily computed; recomputation is harmless.
        self._profile: Optional["Profile"] = None
        self._prevalidator: Optional["PreValidator"] = None
        self._supported_days: Optional[Range] = None
        self._supported_months: Optional[Range] = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(supported_years={self.supported_years})"

    # ---------------------------------------------------------
    # Cached derived facts
    # ---------------------------------------------------------

    @property
    def profile(self) -> "Profile":
        if self._profile is None:
            from calschema.validation.profile import classify
            self._profile = classify(self)
        return self._profile

    @property
    def prevalidator(self) -> "PreValidator":
        if self._prevalidator is None:
            from calschema.validation.prevalidators import create_prevalidator
            self._prevalidator = create_prevalidator(self)
        return self._prevalidator

    @property
    def supported_days(self) -> Range:
        if self._supported_days is None:
            lo, hi = self.supported_years.endpoints
            self._supported_days = Range(self.get_start_of_year(lo), self.get_end_of_year(hi))
        return self._supported_days

    @property
    def supported_months(self) -> Range:
        if self._supported_months is None:
            lo, hi = self.supported_years.endpoints
            self._supported_months = Range(
                self.get_start_of_year_in_months(lo), self.get_end_of_year_in_months(hi)
            )
        return self._supported_months

    def create_custom_prevalidator(self) -> Optional["PreValidator"]:
        """Hook for schemas shipping a dedicated validator. None means: pick by profile."""
        return None

    def info(self) -> dict:
        regular, n = self.is_regular()
        return {
            "id": self.id.__dict__,
            "schema": type(self).__name__,
            "profile": self.profile.name,
            "regular": regular,
            "months_in_year": n if regular else None,
            "min_days_in_year": self.min_days_in_year,
            "min_days_in_month": self.min_days_in_month,
            "supported_years": self.supported_years.endpoints,
            "supported_days": self.supported_days.endpoints,
            "supported_months": self.supported_months.endpoints,
        }

    # ---------------------------------------------------------
    # Primitives (implemented by concrete schemas)
    # ---------------------------------------------------------

    def is_regular(self) -> Tuple[bool, int]:
        """(True, months_in_year) for a fixed month count, (False, 0) otherwise."""
        raise NotImplementedError

    def is_leap_year(self, y: int) -> bool:
        raise NotImplementedError

    def is_intercalary_month(self, y: int, m: int) -> bool:
        raise NotImplementedError

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        raise NotImplementedError

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        """True for blank/epagomenal days attached to the preceding month."""
        raise NotImplementedError

    def count_months_in_year(self, y: int) -> int:
        raise NotImplementedError

    def count_days_in_year(self, y: int) -> int:
        raise NotImplementedError

    def count_days_in_month(self, y: int, m: int) -> int:
        raise NotImplementedError

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        raise NotImplementedError

    def count_months_since_epoch(self, y: int, m: int) -> int:
        raise NotImplementedError

    def get_month_parts(self, months_since_epoch: int) -> Tuple[int, int]:
        raise NotImplementedError

    def get_year(self, days_since_epoch: int) -> int:
        raise NotImplementedError

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        """Ordinal day -> (month, day)."""
        raise NotImplementedError

    def get_start_of_year_in_months(self, y: int) -> int:
        raise NotImplementedError

    def get_end_of_year_in_months(self, y: int) -> int:
        return self.get_start_of_year_in_months(y) + self.count_months_in_year(y) - 1

    def get_start_of_year(self, y: int) -> int:
        raise NotImplementedError

    # ---------------------------------------------------------
    # Counting days within a year or a month
    # ---------------------------------------------------------

    def count_days_in_year_after_month(self, y: int, m: int) -> int:
        if m >= self.count_months_in_year(y):
            return 0
        return self.count_days_in_year(y) - self.count_days_in_year_before_month(y, m + 1)

    def count_days_in_year_before_date(self, y: int, m: int, d: int) -> int:
        return self.count_days_in_year_before_month(y, m) + d - 1

    def count_days_in_year_before_ordinal(self, y: int, doy: int) -> int:
        return doy - 1

    def count_days_in_year_before_days(self, days_since_epoch: int) -> int:
        _, doy = self.get_year_and_day_of_year(days_since_epoch)
        return doy - 1

    def count_days_in_year_after_date(self, y: int, m: int, d: int) -> int:
        return self.count_days_in_year(y) - self.count_days_in_year_before_month(y, m) - d

    def count_days_in_year_after_ordinal(self, y: int, doy: int) -> int:
        return self.count_days_in_year(y) - doy

    def count_days_in_year_after_days(self, days_since_epoch: int) -> int:
        y, doy = self.get_year_and_day_of_year(days_since_epoch)
        return self.count_days_in_year(y) - doy

    def count_days_in_month_before_date(self, y: int, m: int, d: int) -> int:
        return d - 1

    def count_days_in_month_before_ordinal(self, y: int, doy: int) -> int:
        _, d = self.get_month(y, doy)
        return d - 1

    def count_days_in_month_before_days(self, days_since_epoch: int) -> int:
        _, _, d = self.get_date_parts(days_since_epoch)
        return d - 1

    def count_days_in_month_after_date(self, y: int, m: int, d: int) -> int:
        return self.count_days_in_month(y, m) - d

    def count_days_in_month_after_ordinal(self, y: int, doy: int) -> int:
        m, d = self.get_month(y, doy)
        return self.count_days_in_month(y, m) - d

    def count_days_in_month_after_days(self, days_since_epoch: int) -> int:
        y, m, d = self.get_date_parts(days_since_epoch)
        return self.count_days_in_month(y, m) - d

    # ---------------------------------------------------------
    # Conversions
    # ---------------------------------------------------------

    def count_days_since_epoch(self, y: int, m: int, d: int) -> int:
        return self.get_start_of_year(y) + self.count_days_in_year_before_month(y, m) + d - 1

    def count_days_since_epoch_ordinal(self, y: int, doy: int) -> int:
        return self.get_start_of_year(y) + doy - 1

    def get_date_parts(self, days_since_epoch: int) -> Tuple[int, int, int]:
        # Every closed-form inverse factors as: find the year, then the month.
        y, doy = self.get_year_and_day_of_year(days_since_epoch)
        m, d = self.get_month(y, doy)
        return y, m, d

    def get_year_and_day_of_year(self, days_since_epoch: int) -> Tuple[int, int]:
        y = self.get_year(days_since_epoch)
        return y, 1 + days_since_epoch - self.get_start_of_year(y)

    def get_day_of_year(self, y: int, m: int, d: int) -> int:
        return self.count_days_in_year_before_month(y, m) + d

    # ---------------------------------------------------------
    # Boundaries of years and months
    # ---------------------------------------------------------

    def get_end_of_year(self, y: int) -> int:
        return self.get_start_of_year(y) + self.count_days_in_year(y) - 1

    def get_start_of_month(self, y: int, m: int) -> int:
        return self.get_start_of_year(y) + self.count_days_in_year_before_month(y, m)

    def get_end_of_month(self, y: int, m: int) -> int:
        return self.get_start_of_month(y, m) + self.count_days_in_month(y, m) - 1
