"""
calschema.segment
-----------------
Freezing a schema's supported window.

A CalendricalSegment describes one contiguous range of days for a schema:
its first and last day (as day counts, month counts and parts), the years
it touches, and whether it spans whole years. Segments are produced by a
short-lived CalendricalSegmentBuilder which enforces min <= max on every
mutation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from calschema.core.errors import InvalidStateError, OutOfRangeError
from calschema.core.types import DateParts, MonthParts, OrdinalParts, Range
from calschema.parts import PartsAdapter
from calschema.schemas.base import CalendricalSchema

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Endpoint:
    """One boundary day. months_since_epoch is only fixed when the segment is built."""
    days_since_epoch: int
    date_parts: DateParts
    ordinal_parts: OrdinalParts
    months_since_epoch: Optional[int] = None

    @property
    def month_parts(self) -> MonthParts:
        return self.date_parts.month_parts

    @property
    def year(self) -> int:
        return self.date_parts.year

    def is_greater_than(self, other: Optional["Endpoint"]) -> bool:
        return other is not None and self.days_since_epoch > other.days_since_epoch


@dataclass(frozen=True)
class CalendricalSegment:
    schema: CalendricalSchema
    min: Endpoint
    max: Endpoint
    min_is_start_of_year: bool
    max_is_end_of_year: bool

    @property
    def is_complete(self) -> bool:
        """True when the segment is made of whole years."""
        return self.min_is_start_of_year and self.max_is_end_of_year

    @property
    def supported_days(self) -> Range:
        return Range(self.min.days_since_epoch, self.max.days_since_epoch)

    @property
    def supported_months(self) -> Range:
        return Range(self.min.months_since_epoch, self.max.months_since_epoch)

    @property
    def supported_years(self) -> Range:
        return Range(self.min.year, self.max.year)

    @property
    def min_max_date_parts(self) -> Tuple[DateParts, DateParts]:
        return self.min.date_parts, self.max.date_parts

    @property
    def min_max_ordinal_parts(self) -> Tuple[OrdinalParts, OrdinalParts]:
        return self.min.ordinal_parts, self.max.ordinal_parts

    @property
    def min_max_month_parts(self) -> Tuple[MonthParts, MonthParts]:
        return self.min.month_parts, self.max.month_parts

    def __str__(self) -> str:
        return f"{type(self.schema).__name__}: {self.min.date_parts}..{self.max.date_parts}"

    # ---------------------------------------------------------
    # Factories
    # ---------------------------------------------------------

    @classmethod
    def create(cls, schema: CalendricalSchema, supported_years: Range) -> "CalendricalSegment":
        """Whole years [min, max]; the range must lie inside the schema's window."""
        builder = CalendricalSegmentBuilder(schema)
        builder.set_supported_years(supported_years)
        return builder.build_segment()

    @classmethod
    def create_maximal(cls, schema: CalendricalSchema) -> "CalendricalSegment":
        builder = CalendricalSegmentBuilder(schema)
        builder.set_min_to_start_of_min_supported_year()
        builder.set_max_to_end_of_max_supported_year()
        return builder.build_segment()

    @classmethod
    def create_maximal_on_or_after_year1(cls, schema: CalendricalSchema) -> "CalendricalSegment":
        builder = CalendricalSegmentBuilder(schema)
        if not builder.try_set_min_to_start_of_min_supported_year_on_or_after_year1():
            raise OutOfRangeError(
                "schema",
                schema.supported_years.max,
                f"{type(schema).__name__} supports no year on or after year 1.",
            )
        builder.set_max_to_end_of_max_supported_year()
        return builder.build_segment()


class CalendricalSegmentBuilder:
    """
    Two optional endpoints, each settable from a year, a day count, date
    parts or ordinal parts. Any setter that would put min after max raises
    OutOfRangeError and leaves the builder unchanged. Not thread-safe; use
    once and discard.
    """

    def __init__(self, schema: CalendricalSchema) -> None:
        self.schema = schema
        self._parts = PartsAdapter(schema)
        self._min: Optional[Endpoint] = None
        self._max: Optional[Endpoint] = None

    @property
    def has_min(self) -> bool:
        return self._min is not None

    @property
    def has_max(self) -> bool:
        return self._max is not None

    @property
    def is_buildable(self) -> bool:
        return self.has_min and self.has_max

    # ---------------------------------------------------------
    # Guarded endpoint slots
    # ---------------------------------------------------------

    def _get_min(self) -> Endpoint:
        if self._min is None:
            raise InvalidStateError("The minimum has not been set.")
        return self._min

    def _set_min(self, value: Endpoint) -> None:
        if value.is_greater_than(self._max):
            raise OutOfRangeError.generic(value.days_since_epoch, "min")
        self._min = value

    def _get_max(self) -> Endpoint:
        if self._max is None:
            raise InvalidStateError("The maximum has not been set.")
        return self._max

    def _set_max(self, value: Endpoint) -> None:
        if self._min is not None and self._min.is_greater_than(value):
            raise OutOfRangeError.generic(value.days_since_epoch, "max")
        self._max = value

    # ---------------------------------------------------------
    # Public setters
    # ---------------------------------------------------------

    @property
    def min_days_since_epoch(self) -> int:
        return self._get_min().days_since_epoch

    @min_days_since_epoch.setter
    def min_days_since_epoch(self, value: int) -> None:
        self._set_min(self._endpoint_from_days(value))

    @property
    def max_days_since_epoch(self) -> int:
        return self._get_max().days_since_epoch

    @max_days_since_epoch.setter
    def max_days_since_epoch(self, value: int) -> None:
        self._set_max(self._endpoint_from_days(value))

    @property
    def min_date_parts(self) -> DateParts:
        return self._get_min().date_parts

    @min_date_parts.setter
    def min_date_parts(self, value: DateParts) -> None:
        self._set_min(self._endpoint_from_date_parts(value))

    @property
    def max_date_parts(self) -> DateParts:
        return self._get_max().date_parts

    @max_date_parts.setter
    def max_date_parts(self, value: DateParts) -> None:
        self._set_max(self._endpoint_from_date_parts(value))

    @property
    def min_ordinal_parts(self) -> OrdinalParts:
        return self._get_min().ordinal_parts

    @min_ordinal_parts.setter
    def min_ordinal_parts(self, value: OrdinalParts) -> None:
        self._set_min(self._endpoint_from_ordinal_parts(value))

    @property
    def max_ordinal_parts(self) -> OrdinalParts:
        return self._get_max().ordinal_parts

    @max_ordinal_parts.setter
    def max_ordinal_parts(self, value: OrdinalParts) -> None:
        self._set_max(self._endpoint_from_ordinal_parts(value))

    def set_min_to_start_of_year(self, year: int) -> None:
        self._validate_year(year, "year")
        self._set_min(self._endpoint_at_start_of_year(year))

    def set_max_to_end_of_year(self, year: int) -> None:
        self._validate_year(year, "year")
        self._set_max(self._endpoint_at_end_of_year(year))

    def set_min_to_start_of_min_supported_year(self) -> None:
        self._set_min(self._endpoint_at_start_of_year(self.schema.supported_years.min))

    def set_max_to_end_of_max_supported_year(self) -> None:
        self._set_max(self._endpoint_at_end_of_year(self.schema.supported_years.max))

    def try_set_min_to_start_of_min_supported_year_on_or_after_year1(self) -> bool:
        lo, hi = self.schema.supported_years.endpoints
        if hi < 1:
            return False
        self._set_min(self._endpoint_at_start_of_year(max(lo, 1)))
        return True

    def set_supported_years(self, supported_years: Range) -> None:
        """Set both endpoints to whole years; validated in full before any change."""
        if not supported_years.is_subset_of(self.schema.supported_years):
            raise OutOfRangeError(
                "supported_years",
                supported_years.min,
                f"The year range {supported_years} is not a subset of {self.schema.supported_years}.",
            )
        lo = self._endpoint_at_start_of_year(supported_years.min)
        hi = self._endpoint_at_end_of_year(supported_years.max)
        # Assign directly: the pair is ordered, and the old endpoints are replaced together.
        self._min, self._max = lo, hi

    # ---------------------------------------------------------
    # Build
    # ---------------------------------------------------------

    def build_segment(self) -> CalendricalSegment:
        lo = self._fix(self._get_min())
        hi = self._fix(self._get_max())
        segment = CalendricalSegment(
            schema=self.schema,
            min=lo,
            max=hi,
            min_is_start_of_year=lo.ordinal_parts == self._parts.get_ordinal_parts_at_start_of_year(lo.year),
            max_is_end_of_year=hi.ordinal_parts == self._parts.get_ordinal_parts_at_end_of_year(hi.year),
        )
        logger.debug("built segment %s (complete=%s)", segment, segment.is_complete)
        return segment

    def _fix(self, ep: Endpoint) -> Endpoint:
        y, m = ep.month_parts
        return replace(ep, months_since_epoch=self.schema.count_months_since_epoch(y, m))

    # ---------------------------------------------------------
    # Endpoint construction
    # ---------------------------------------------------------

    def _validate_year(self, year: int, param_name: Optional[str] = None) -> None:
        if year not in self.schema.supported_years:
            raise OutOfRangeError.year(year, param_name)

    def _endpoint_at_start_of_year(self, year: int) -> Endpoint:
        return Endpoint(
            days_since_epoch=self.schema.get_start_of_year(year),
            date_parts=self._parts.get_date_parts_at_start_of_year(year),
            ordinal_parts=self._parts.get_ordinal_parts_at_start_of_year(year),
        )

    def _endpoint_at_end_of_year(self, year: int) -> Endpoint:
        return Endpoint(
            days_since_epoch=self.schema.get_end_of_year(year),
            date_parts=self._parts.get_date_parts_at_end_of_year(year),
            ordinal_parts=self._parts.get_ordinal_parts_at_end_of_year(year),
        )

    def _endpoint_from_days(self, value: int) -> Endpoint:
        if value not in self.schema.supported_days:
            raise OutOfRangeError(
                "value", value, f"The value was out of range; value = {value}."
            )
        return Endpoint(
            days_since_epoch=value,
            date_parts=self._parts.get_date_parts(value),
            ordinal_parts=self._parts.get_ordinal_parts(value),
        )

    def _endpoint_from_date_parts(self, value: DateParts) -> Endpoint:
        y, m, d = value
        self._validate_year(y, "value")
        self.schema.prevalidator.validate_month_day(y, m, d, "value")
        return Endpoint(
            days_since_epoch=self.schema.count_days_since_epoch(y, m, d),
            date_parts=value,
            ordinal_parts=self._parts.get_ordinal_parts_from_date(y, m, d),
        )

    def _endpoint_from_ordinal_parts(self, value: OrdinalParts) -> Endpoint:
        y, doy = value
        self._validate_year(y, "value")
        self.schema.prevalidator.validate_day_of_year(y, doy, "value")
        return Endpoint(
            days_since_epoch=self.schema.count_days_since_epoch_ordinal(y, doy),
            date_parts=self._parts.get_date_parts_from_ordinal(y, doy),
            ordinal_parts=value,
        )
