"""calschema public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_schemas,
    schema_info,
    get_schema,
    make_schema,
    register_schema,
    days_since_epoch,
    date_parts,
    ordinal_parts,
    date_from_ordinal,
    month_layout,
    segment,
    arithmetic,
    add_years,
    add_months,
    years_between,
    months_between,
    subtract,
)
from .core.errors import CalendarOverflowError, CalschemaError, InvalidStateError, OutOfRangeError
from .core.types import AdditionResult, DateParts, MonthParts, OrdinalParts, Range
from .datemath import DateDifference

__all__ = [
    "list_schemas",
    "schema_info",
    "get_schema",
    "make_schema",
    "register_schema",
    "days_since_epoch",
    "date_parts",
    "ordinal_parts",
    "date_from_ordinal",
    "month_layout",
    "segment",
    "arithmetic",
    "add_years",
    "add_months",
    "years_between",
    "months_between",
    "subtract",
    "CalschemaError",
    "OutOfRangeError",
    "CalendarOverflowError",
    "InvalidStateError",
    "AdditionResult",
    "DateParts",
    "MonthParts",
    "OrdinalParts",
    "Range",
    "DateDifference",
]
