# tests/test_arithmetic.py

import logging
import pytest
import random

from calschema.arithmetic import CalendricalArithmetic, PlainArithmetic, RegularArithmetic
from calschema.core.errors import CalendarOverflowError
from calschema.core.types import AdditionResult, DateParts, MonthParts, Range
from calschema.schemas.gj import GregorianSchema, JulianSchema
from calschema.schemas.lunisolar import LunisolarSchema
from calschema.schemas.pax import PaxSchema


def test_create_default_picks_strategy(caplog):
    with caplog.at_level(logging.DEBUG, logger="calschema.arithmetic"):
        assert type(CalendricalArithmetic.create_default(GregorianSchema())) is RegularArithmetic
    assert any("RegularArithmetic" in r.getMessage() for r in caplog.records)
    assert type(CalendricalArithmetic.create_default(PaxSchema())) is PlainArithmetic
    assert type(CalendricalArithmetic.create_default(LunisolarSchema())) is PlainArithmetic


def test_regular_arithmetic_needs_regular_schema():
    with pytest.raises(ValueError):
        RegularArithmetic(LunisolarSchema())


def test_julian_leap_day_truncation():
    arith = CalendricalArithmetic.create_default(JulianSchema())
    assert arith.add_years_with_roundoff(2000, 2, 29, 1) == AdditionResult(DateParts(2001, 2, 28), 1)
    assert arith.add_years(2000, 2, 29, 4) == DateParts(2004, 2, 29)
    assert arith.add_years_with_roundoff(2000, 2, 29, 4).roundoff == 0
    # Non-leap Feb 28 is never truncated.
    assert arith.add_years_with_roundoff(1999, 2, 28, 1) == AdditionResult(DateParts(2000, 2, 28), 0)


def test_gregorian_add_months():
    arith = CalendricalArithmetic.create_default(GregorianSchema())
    r = arith.add_months_with_roundoff(2001, 1, 31, 1)
    assert r.parts == DateParts(2001, 2, 28)
    assert r.roundoff == 3
    assert r.truncated
    assert arith.add_months(2000, 1, 31, 1) == DateParts(2000, 2, 29)
    assert arith.add_months(2000, 12, 15, -12) == DateParts(1999, 12, 15)
    assert arith.add_months(2000, 3, 31, -1) == DateParts(2000, 2, 29)

    assert arith.add_months_standard(2000, 11, 3) == MonthParts(2001, 2)
    assert arith.add_months_standard(2000, 1, -1) == MonthParts(1999, 12)
    assert arith.add_months_standard(1, 1, -13) == MonthParts(-1, 12)


def test_count_months_between():
    arith = CalendricalArithmetic.create_default(GregorianSchema())
    assert arith.count_months_between(MonthParts(2000, 1), MonthParts(2001, 3)) == 14
    assert arith.count_months_between(MonthParts(2001, 3), MonthParts(2000, 1)) == -14

    plain = CalendricalArithmetic.create_default(LunisolarSchema())
    assert plain.count_months_between(MonthParts(1, 1), MonthParts(5, 1)) == 49


def test_add_days():
    arith = CalendricalArithmetic.create_default(GregorianSchema())
    assert arith.add_days(2000, 12, 31, 1) == DateParts(2001, 1, 1)
    assert arith.add_days(2000, 3, 1, -1) == DateParts(2000, 2, 29)


def test_regular_overflow():
    arith = CalendricalArithmetic.create_default(GregorianSchema(), Range(1, 9999))
    assert arith.supported_years == Range(1, 9999)
    with pytest.raises(CalendarOverflowError, match="supported dates"):
        arith.add_years(9999, 1, 1, 1)
    with pytest.raises(CalendarOverflowError):
        arith.add_months(9999, 12, 1, 1)
    with pytest.raises(CalendarOverflowError):
        arith.add_months(1, 1, 1, -1)
    with pytest.raises(CalendarOverflowError):
        arith.add_days(9999, 12, 31, 1)


def test_plain_overflow():
    arith = CalendricalArithmetic.create_default(LunisolarSchema(), Range(1, 100))
    with pytest.raises(CalendarOverflowError, match="supported months"):
        arith.add_months(100, 13, 1, 1)
    with pytest.raises(CalendarOverflowError, match="supported dates"):
        arith.add_years(100, 1, 1, 1)


def test_plain_add_years_missing_month():
    # Year 4 has an intercalary 13th month, year 5 does not.
    arith = CalendricalArithmetic.create_default(LunisolarSchema())
    r = arith.add_years_with_roundoff(4, 13, 30, 1)
    assert r.parts == DateParts(5, 12, 29)
    assert r.roundoff == 31
    assert arith.add_years_with_roundoff(4, 12, 29, 1) == AdditionResult(DateParts(5, 12, 29), 0)

    pax = CalendricalArithmetic.create_default(PaxSchema())
    r = pax.add_years_with_roundoff(2006, 14, 5, 1)
    assert r.parts == DateParts(2007, 13, 28)
    assert r.roundoff == 5


def test_plain_add_months_walks_month_count():
    arith = CalendricalArithmetic.create_default(LunisolarSchema())
    assert arith.add_months(4, 12, 1, 1) == DateParts(4, 13, 1)
    assert arith.add_months(4, 13, 1, 1) == DateParts(5, 1, 1)
    assert arith.add_months(5, 1, 1, -1) == DateParts(4, 13, 1)

    pax = CalendricalArithmetic.create_default(PaxSchema())
    r = pax.add_months_with_roundoff(2006, 12, 28, 1)
    assert r.parts == DateParts(2006, 13, 7)
    assert r.roundoff == 21


def test_plain_matches_regular_on_regular_schema():
    random.seed(42)
    sch = GregorianSchema(Range(1, 9999))
    regular = RegularArithmetic(sch)
    plain = PlainArithmetic(sch)
    for _ in range(2000):
        y = random.randint(200, 9800)
        m = random.randint(1, 12)
        d = random.randint(1, sch.count_days_in_month(y, m))
        n = random.randint(-150, 150)
        assert regular.add_years_with_roundoff(y, m, d, n) == plain.add_years_with_roundoff(y, m, d, n)
        assert regular.add_months_with_roundoff(y, m, d, n) == plain.add_months_with_roundoff(y, m, d, n)
        end = MonthParts(y + n // 12, 1 + abs(n) % 12)
        assert regular.count_months_between(MonthParts(y, m), end) == plain.count_months_between(MonthParts(y, m), end)


def test_truncation_never_raises():
    random.seed(42)
    arith = CalendricalArithmetic.create_default(GregorianSchema())
    for _ in range(1000):
        y = random.randint(-5000, 5000)
        m = random.randint(1, 12)
        d = random.randint(1, arith.schema.count_days_in_month(y, m))
        r = arith.add_months_with_roundoff(y, m, d, random.randint(-100, 100))
        assert 1 <= r.parts.day <= arith.schema.count_days_in_month(r.parts.year, r.parts.month)
        assert r.roundoff == max(0, d - arith.schema.count_days_in_month(r.parts.year, r.parts.month))
