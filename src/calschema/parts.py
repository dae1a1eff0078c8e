"""
calschema.parts
---------------
Conversions between day counts, month counts and the three part
representations, layered on a schema. Input is assumed pre-validated.

The "start/end of year/month" helpers avoid round-tripping through a day
count when one coordinate is already known.
"""

from __future__ import annotations

from calschema.core.types import DateParts, MonthParts, OrdinalParts
from calschema.schemas.base import CalendricalSchema


class PartsAdapter:
    def __init__(self, schema: CalendricalSchema) -> None:
        self.schema = schema

    # ---------------------------------------------------------
    # From counts
    # ---------------------------------------------------------

    def get_month_parts(self, months_since_epoch: int) -> MonthParts:
        return MonthParts(*self.schema.get_month_parts(months_since_epoch))

    def get_date_parts(self, days_since_epoch: int) -> DateParts:
        return DateParts(*self.schema.get_date_parts(days_since_epoch))

    def get_ordinal_parts(self, days_since_epoch: int) -> OrdinalParts:
        return OrdinalParts(*self.schema.get_year_and_day_of_year(days_since_epoch))

    # ---------------------------------------------------------
    # To counts
    # ---------------------------------------------------------

    def count_days_since_epoch(self, parts: DateParts) -> int:
        return self.schema.count_days_since_epoch(parts.year, parts.month, parts.day)

    def count_days_since_epoch_ordinal(self, parts: OrdinalParts) -> int:
        return self.schema.count_days_since_epoch_ordinal(parts.year, parts.day_of_year)

    def count_months_since_epoch(self, parts: MonthParts) -> int:
        return self.schema.count_months_since_epoch(parts.year, parts.month)

    # ---------------------------------------------------------
    # Between part representations
    # ---------------------------------------------------------

    def get_ordinal_parts_from_date(self, y: int, m: int, d: int) -> OrdinalParts:
        return OrdinalParts(y, self.schema.get_day_of_year(y, m, d))

    def get_date_parts_from_ordinal(self, y: int, doy: int) -> DateParts:
        m, d = self.schema.get_month(y, doy)
        return DateParts(y, m, d)

    # ---------------------------------------------------------
    # Start and end of a year
    # ---------------------------------------------------------

    def get_month_parts_at_start_of_year(self, y: int) -> MonthParts:
        return MonthParts(y, 1)

    def get_date_parts_at_start_of_year(self, y: int) -> DateParts:
        return DateParts(y, 1, 1)

    def get_ordinal_parts_at_start_of_year(self, y: int) -> OrdinalParts:
        return OrdinalParts(y, 1)

    def get_month_parts_at_end_of_year(self, y: int) -> MonthParts:
        return MonthParts(y, self.schema.count_months_in_year(y))

    def get_date_parts_at_end_of_year(self, y: int) -> DateParts:
        m = self.schema.count_months_in_year(y)
        return DateParts(y, m, self.schema.count_days_in_month(y, m))

    def get_ordinal_parts_at_end_of_year(self, y: int) -> OrdinalParts:
        return OrdinalParts(y, self.schema.count_days_in_year(y))

    # ---------------------------------------------------------
    # Start and end of a month
    # ---------------------------------------------------------

    def get_date_parts_at_start_of_month(self, y: int, m: int) -> DateParts:
        return DateParts(y, m, 1)

    def get_ordinal_parts_at_start_of_month(self, y: int, m: int) -> OrdinalParts:
        return OrdinalParts(y, self.schema.count_days_in_year_before_month(y, m) + 1)

    def get_date_parts_at_end_of_month(self, y: int, m: int) -> DateParts:
        return DateParts(y, m, self.schema.count_days_in_month(y, m))

    def get_ordinal_parts_at_end_of_month(self, y: int, m: int) -> OrdinalParts:
        doy = self.schema.count_days_in_year_before_month(y, m) + self.schema.count_days_in_month(y, m)
        return OrdinalParts(y, doy)
