"""
calschema.schemas.interfaces
----------------------------
The schema capability contract consumed by validators, the parts adapter,
the segment builder and the arithmetic layer.

All functions are pure. None of them validates its input: callers run a
pre-validator first. Within a schema's supported years every conversion
round-trips exactly.
"""

from __future__ import annotations

from typing import Protocol, Tuple, runtime_checkable

from calschema.core.types import Range


@runtime_checkable
class SchemaProtocol(Protocol):
    min_days_in_year: int
    min_days_in_month: int
    supported_years: Range

    def is_regular(self) -> Tuple[bool, int]:
        """(True, n) if every year has n months."""
        ...

    # ---------------------------------------------------------
    # 1. Year, month and day facts
    # ---------------------------------------------------------
    def is_leap_year(self, y: int) -> bool: ...
    def is_intercalary_month(self, y: int, m: int) -> bool: ...
    def is_intercalary_day(self, y: int, m: int, d: int) -> bool: ...
    def is_supplementary_day(self, y: int, m: int, d: int) -> bool: ...
    def count_months_in_year(self, y: int) -> int: ...
    def count_days_in_year(self, y: int) -> int: ...
    def count_days_in_month(self, y: int, m: int) -> int: ...

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        """Days of the year strictly before month m."""
        ...

    # ---------------------------------------------------------
    # 2. Conversions
    # ---------------------------------------------------------
    def count_days_since_epoch(self, y: int, m: int, d: int) -> int: ...
    def count_days_since_epoch_ordinal(self, y: int, doy: int) -> int: ...
    def get_date_parts(self, days_since_epoch: int) -> Tuple[int, int, int]: ...
    def get_year(self, days_since_epoch: int) -> int: ...
    def get_year_and_day_of_year(self, days_since_epoch: int) -> Tuple[int, int]: ...
    def get_month(self, y: int, doy: int) -> Tuple[int, int]: ...
    def get_day_of_year(self, y: int, m: int, d: int) -> int: ...
    def count_months_since_epoch(self, y: int, m: int) -> int: ...
    def get_month_parts(self, months_since_epoch: int) -> Tuple[int, int]: ...

    # ---------------------------------------------------------
    # 3. Boundaries
    # ---------------------------------------------------------
    def get_start_of_year(self, y: int) -> int: ...
    def get_end_of_year(self, y: int) -> int: ...
    def get_start_of_month(self, y: int, m: int) -> int: ...
    def get_end_of_month(self, y: int, m: int) -> int: ...
    def get_start_of_year_in_months(self, y: int) -> int: ...
    def get_end_of_year_in_months(self, y: int) -> int: ...
