# tests/test_datemath.py

import pytest
import random

from calschema.arithmetic import CalendricalArithmetic
from calschema.core.types import DateParts
from calschema.datemath import AdditionRule, DateDifference, DateMath
from calschema.schemas.gj import GregorianSchema, JulianSchema
from calschema.schemas.lunisolar import LunisolarSchema


def _math(schema=None):
    return DateMath(CalendricalArithmetic.create_default(schema or GregorianSchema()))


def _random_date(sch, lo, hi):
    y = random.randint(lo, hi)
    m = random.randint(1, sch.count_months_in_year(y))
    return DateParts(y, m, random.randint(1, sch.count_days_in_month(y, m)))


def test_rule_must_be_known():
    arith = CalendricalArithmetic.create_default(GregorianSchema())
    assert DateMath(arith).rule is AdditionRule.TRUNCATE
    with pytest.raises(ValueError):
        DateMath(arith, "truncate")


def test_add_truncates():
    dm = _math(JulianSchema())
    assert dm.add_years(DateParts(2000, 2, 29), 1) == DateParts(2001, 2, 28)
    assert dm.add_months(DateParts(2001, 1, 31), 1) == DateParts(2001, 2, 28)


def test_years_between_corrects_overshoot():
    dm = _math()
    assert dm.count_years_between(DateParts(2000, 3, 15), DateParts(2001, 3, 14)) == 0
    assert dm.count_years_between(DateParts(2000, 3, 15), DateParts(2001, 3, 15)) == 1
    assert dm.count_years_between(DateParts(2001, 3, 14), DateParts(2000, 3, 15)) == 0
    assert dm.count_years_between(DateParts(2001, 3, 15), DateParts(2000, 3, 15)) == -1

    years, landing = dm.count_years_between_with_new_start(DateParts(2000, 2, 29), DateParts(2001, 2, 28))
    assert years == 1
    assert landing == DateParts(2001, 2, 28)


def test_months_between_corrects_overshoot():
    dm = _math()
    assert dm.count_months_between(DateParts(2001, 1, 31), DateParts(2001, 2, 28)) == 1
    assert dm.count_months_between(DateParts(2001, 1, 31), DateParts(2001, 2, 27)) == 0
    assert dm.count_months_between(DateParts(2001, 3, 31), DateParts(2001, 2, 28)) == -1
    assert dm.count_months_between(DateParts(2001, 3, 1), DateParts(2001, 1, 2)) == -1


@pytest.mark.parametrize("schema_cls", [GregorianSchema, JulianSchema, LunisolarSchema])
def test_landing_never_passes_end(schema_cls):
    random.seed(42)
    dm = _math(schema_cls())
    sch = dm.schema
    for _ in range(1000):
        start = _random_date(sch, 1, 400)
        end = _random_date(sch, 1, 400)
        years, landing = dm.count_years_between_with_new_start(start, end)
        months, m_landing = dm.count_months_between_with_new_start(start, end)
        if start < end:
            assert landing <= end < dm.add_years(start, years + 1)
            assert m_landing <= end < dm.add_months(start, months + 1)
        elif start > end:
            assert landing >= end
            assert m_landing >= end


def test_subtract():
    dm = _math()
    assert dm.subtract(DateParts(2000, 1, 15), DateParts(2001, 3, 20)) == DateDifference(1, 2, 5)
    assert dm.subtract(DateParts(2000, 1, 31), DateParts(2000, 3, 1)) == DateDifference(0, 1, 1)
    assert dm.subtract(DateParts(2000, 5, 5), DateParts(2000, 5, 5)) == DateDifference(0, 0, 0)
    assert str(DateDifference(1, 2, 3)) == "1y 2m 3d"


def test_subtract_after_truncated_year():
    # 1996-02-29 + 4y overshoots 2000-02-28, + 3y truncates to 1999-02-28,
    # which is then exactly 12 months short of the end.
    dm = _math()
    assert dm.subtract(DateParts(1996, 2, 29), DateParts(2000, 2, 28)) == DateDifference(3, 12, 0)


def test_subtract_adds_back_up():
    random.seed(42)
    dm = _math()
    sch = dm.schema
    for _ in range(500):
        start = _random_date(sch, 1900, 2100)
        end = _random_date(sch, 1900, 2100)
        if end < start:
            start, end = end, start
        diff = dm.subtract(start, end)
        assert diff.years >= 0 and diff.months >= 0 and diff.days >= 0
        after = dm.add_months(dm.add_years(start, diff.years), diff.months)
        assert sch.count_days_since_epoch(*after) + diff.days == sch.count_days_since_epoch(*end)
