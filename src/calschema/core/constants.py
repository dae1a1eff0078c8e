"""
calschema.core.constants
------------------------
Thresholds used to bucket schemas into profiles, and default year windows.
"""

from __future__ import annotations

# Solar calendars: at least 365 days a year, 28 days a month.
SOLAR_MIN_DAYS_IN_YEAR = 365
SOLAR_MIN_DAYS_IN_MONTH = 28
SOLAR12_MONTHS_IN_YEAR = 12
SOLAR13_MONTHS_IN_YEAR = 13

LUNAR_MIN_DAYS_IN_YEAR = 354
LUNAR_MIN_DAYS_IN_MONTH = 29
LUNAR_MONTHS_IN_YEAR = 12

LUNISOLAR_MIN_DAYS_IN_YEAR = 353
LUNISOLAR_MIN_DAYS_IN_MONTH = 29

DAYS_PER_WANDERING_YEAR = 365
DAYS_PER_JULIAN_CYCLE = 4 * 365 + 1
DAYS_PER_GREGORIAN_CYCLE = 400 * 365 + 97

# Default theoretical window (years) for a schema.
DEFAULT_MIN_YEAR = -999_998
DEFAULT_MAX_YEAR = 999_999
