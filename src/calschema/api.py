from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from .arithmetic import CalendricalArithmetic
from .core.registry import SchemaRegistry
from .core.types import AdditionResult, DateParts, OrdinalParts, Range
from .datemath import DateDifference, DateMath
from .parts import PartsAdapter
from .schemas.base import CalendricalSchema
from .schemas.factory import make_schema as _make_schema
from .schemas.specs import ALL_SPECS, SchemaSpec
from .segment import CalendricalSegment
from .validation.ranges import DaysValidator, YearsValidator

DEFAULT_SCHEMA = "gregorian"
_registry: Optional[SchemaRegistry] = None


def set_registry(reg: SchemaRegistry) -> None:
    global _registry
    _registry = reg


def _reg() -> SchemaRegistry:
    if _registry is None:
        raise RuntimeError("Schema registry not initialized")
    return _registry


def list_schemas() -> List[str]:
    return _reg().list()


def schema_info(name: str) -> Dict[str, Any]:
    return _reg().get(name).info()


def get_schema(name: str, supported_years: Optional[Range] = None) -> CalendricalSchema:
    """
    The registered schema, or a fresh one restricted to `supported_years`
    (which must lie inside the schema's default window).
    """
    if supported_years is None:
        return _reg().get(name)
    if name not in ALL_SPECS:
        raise KeyError(f"Unknown schema spec '{name}'")
    return _make_schema(ALL_SPECS[name].tweak(supported_years=supported_years))


def make_schema(spec: SchemaSpec) -> CalendricalSchema:
    return _make_schema(spec)


def register_schema(name: str, schema: CalendricalSchema, *, overwrite: bool = False) -> None:
    _reg().register(name, schema, overwrite=overwrite)


# ============================================================
# Input validation
# ============================================================

def _as_date(value: Sequence[int]) -> DateParts:
    return value if isinstance(value, DateParts) else DateParts(*value)


def _validate_date(sch: CalendricalSchema, y: int, m: int, d: int) -> None:
    YearsValidator(sch.supported_years).validate(y)
    sch.prevalidator.validate_month_day(y, m, d)


def _validate_ordinal(sch: CalendricalSchema, y: int, doy: int) -> None:
    YearsValidator(sch.supported_years).validate(y)
    sch.prevalidator.validate_day_of_year(y, doy)


# ============================================================
# Conversions
# ============================================================

def days_since_epoch(y: int, m: int, d: int, *, schema: str = DEFAULT_SCHEMA) -> int:
    sch = _reg().get(schema)
    _validate_date(sch, y, m, d)
    return sch.count_days_since_epoch(y, m, d)


def date_parts(days: int, *, schema: str = DEFAULT_SCHEMA) -> DateParts:
    sch = _reg().get(schema)
    DaysValidator(sch.supported_days).validate(days)
    return PartsAdapter(sch).get_date_parts(days)


def ordinal_parts(y: int, m: int, d: int, *, schema: str = DEFAULT_SCHEMA) -> OrdinalParts:
    sch = _reg().get(schema)
    _validate_date(sch, y, m, d)
    return PartsAdapter(sch).get_ordinal_parts_from_date(y, m, d)


def date_from_ordinal(y: int, doy: int, *, schema: str = DEFAULT_SCHEMA) -> DateParts:
    sch = _reg().get(schema)
    _validate_ordinal(sch, y, doy)
    return PartsAdapter(sch).get_date_parts_from_ordinal(y, doy)


def month_layout(y: int, *, schema: str = DEFAULT_SCHEMA) -> List[Dict[str, Any]]:
    """One record per month of year y: length, first day and flags."""
    sch = _reg().get(schema)
    YearsValidator(sch.supported_years).validate(y)
    out = []
    for m in range(1, sch.count_months_in_year(y) + 1):
        out.append({
            "year": y,
            "month": m,
            "days": sch.count_days_in_month(y, m),
            "start": sch.get_start_of_month(y, m),
            "days_before": sch.count_days_in_year_before_month(y, m),
            "intercalary": sch.is_intercalary_month(y, m),
        })
    return out


# ============================================================
# Segments and arithmetic
# ============================================================

def segment(name: str = DEFAULT_SCHEMA, years: Optional[Range] = None) -> CalendricalSegment:
    sch = _reg().get(name)
    if years is None:
        return CalendricalSegment.create_maximal(sch)
    return CalendricalSegment.create(sch, years)


def arithmetic(name: str = DEFAULT_SCHEMA, years: Optional[Range] = None) -> CalendricalArithmetic:
    return CalendricalArithmetic.create_default(_reg().get(name), years)


def add_years(y: int, m: int, d: int, years: int, *, schema: str = DEFAULT_SCHEMA) -> AdditionResult:
    arith = arithmetic(schema)
    _validate_date(arith.schema, y, m, d)
    return arith.add_years_with_roundoff(y, m, d, years)


def add_months(y: int, m: int, d: int, months: int, *, schema: str = DEFAULT_SCHEMA) -> AdditionResult:
    arith = arithmetic(schema)
    _validate_date(arith.schema, y, m, d)
    return arith.add_months_with_roundoff(y, m, d, months)


def _date_math(schema: str, start: Sequence[int], end: Sequence[int]):
    math = DateMath(arithmetic(schema))
    start, end = _as_date(start), _as_date(end)
    _validate_date(math.schema, *start)
    _validate_date(math.schema, *end)
    return math, start, end


def years_between(start: Sequence[int], end: Sequence[int], *, schema: str = DEFAULT_SCHEMA) -> int:
    math, start, end = _date_math(schema, start, end)
    return math.count_years_between(start, end)


def months_between(start: Sequence[int], end: Sequence[int], *, schema: str = DEFAULT_SCHEMA) -> int:
    math, start, end = _date_math(schema, start, end)
    return math.count_months_between(start, end)


def subtract(start: Sequence[int], end: Sequence[int], *, schema: str = DEFAULT_SCHEMA) -> DateDifference:
    math, start, end = _date_math(schema, start, end)
    return math.subtract(start, end)
