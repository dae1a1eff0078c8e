"""
calschema.validation.profile
----------------------------
Coarse classification of a schema from its minimal year/month lengths and
its month-count regularity. The profile selects the fast pre-validator.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from calschema.core.constants import (
    LUNAR_MIN_DAYS_IN_MONTH,
    LUNAR_MIN_DAYS_IN_YEAR,
    LUNAR_MONTHS_IN_YEAR,
    LUNISOLAR_MIN_DAYS_IN_MONTH,
    LUNISOLAR_MIN_DAYS_IN_YEAR,
    SOLAR12_MONTHS_IN_YEAR,
    SOLAR13_MONTHS_IN_YEAR,
    SOLAR_MIN_DAYS_IN_MONTH,
    SOLAR_MIN_DAYS_IN_YEAR,
)

if TYPE_CHECKING:
    from calschema.schemas.base import CalendricalSchema


class Profile(enum.Enum):
    SOLAR12 = "solar12"
    SOLAR13 = "solar13"
    LUNAR = "lunar"
    LUNISOLAR = "lunisolar"
    OTHER = "other"


def classify(schema: "CalendricalSchema") -> Profile:
    """
    Thresholds are tested from the largest year length down: a solar schema
    also satisfies the lunisolar bounds.
    """
    _, months_in_year = schema.is_regular()
    min_year = schema.min_days_in_year
    min_month = schema.min_days_in_month

    if min_year >= SOLAR_MIN_DAYS_IN_YEAR and min_month >= SOLAR_MIN_DAYS_IN_MONTH:
        if months_in_year == SOLAR12_MONTHS_IN_YEAR:
            return Profile.SOLAR12
        if months_in_year == SOLAR13_MONTHS_IN_YEAR:
            return Profile.SOLAR13
        return Profile.OTHER

    if min_year >= LUNAR_MIN_DAYS_IN_YEAR and min_month >= LUNAR_MIN_DAYS_IN_MONTH:
        return Profile.LUNAR if months_in_year == LUNAR_MONTHS_IN_YEAR else Profile.OTHER

    if min_year >= LUNISOLAR_MIN_DAYS_IN_YEAR and min_month >= LUNISOLAR_MIN_DAYS_IN_MONTH:
        # Lunisolar means a varying month count.
        return Profile.LUNISOLAR if months_in_year == 0 else Profile.OTHER

    return Profile.OTHER
