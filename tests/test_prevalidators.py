# tests/test_prevalidators.py

import pytest

from calschema.core.errors import OutOfRangeError
from calschema.schemas.factory import make_schema
from calschema.schemas.gj import GregorianSchema, JulianSchema
from calschema.schemas.specs import ALL_SPECS
from calschema.validation.prevalidators import PlainPreValidator

YEARS = [1, 4, 6, 1900, 2000, 2001, 2006, 2007]


@pytest.mark.parametrize("name", sorted(ALL_SPECS))
def test_prevalidator_agrees_with_schema(name):
    sch = make_schema(ALL_SPECS[name])
    v = sch.prevalidator
    for y in YEARS:
        months = sch.count_months_in_year(y)
        assert not v.check_month(y, 0)
        assert not v.check_month(y, months + 1)
        for m in range(1, months + 1):
            days = sch.count_days_in_month(y, m)
            assert v.check_month(y, m)
            assert v.check_month_day(y, m, 1)
            assert v.check_month_day(y, m, days)
            assert not v.check_month_day(y, m, days + 1)
            assert not v.check_month_day(y, m, 0)
            v.validate_month_day(y, m, days)
            v.validate_day_of_month(y, m, days)
        days_in_year = sch.count_days_in_year(y)
        assert v.check_day_of_year(y, days_in_year)
        assert not v.check_day_of_year(y, days_in_year + 1)
        assert not v.check_day_of_year(y, 0)


@pytest.mark.parametrize("name", sorted(ALL_SPECS))
def test_plain_prevalidator_is_always_correct(name):
    sch = make_schema(ALL_SPECS[name])
    plain = PlainPreValidator(sch)
    for y in YEARS:
        for m in range(1, sch.count_months_in_year(y) + 1):
            days = sch.count_days_in_month(y, m)
            assert plain.check_month_day(y, m, days)
            assert not plain.check_month_day(y, m, days + 1)


def test_gregorian_leap_day():
    v = GregorianSchema().prevalidator
    v.validate_month_day(2000, 2, 29)
    with pytest.raises(OutOfRangeError) as exc:
        v.validate_month_day(1900, 2, 29)
    assert exc.value.param_name == "day"
    assert exc.value.value == 29
    assert str(exc.value) == "The value of the day of the month was out of range; value = 29."

    v.validate_day_of_year(2000, 366)
    with pytest.raises(OutOfRangeError, match="day of the year"):
        v.validate_day_of_year(2001, 366)


def test_julian_leap_day():
    v = JulianSchema().prevalidator
    v.validate_month_day(1900, 2, 29)
    with pytest.raises(OutOfRangeError):
        v.validate_month_day(1901, 2, 29)


def test_month_message_and_param_name():
    v = GregorianSchema().prevalidator
    with pytest.raises(OutOfRangeError) as exc:
        v.validate_month(2000, 13)
    assert str(exc.value) == "The value of the month of the year was out of range; value = 13."
    assert exc.value.param_name == "month"

    with pytest.raises(OutOfRangeError) as exc:
        v.validate_month_day(2000, 0, 1, "value")
    assert exc.value.param_name == "value"


def test_month_checked_before_day():
    v = make_schema(ALL_SPECS["coptic12"]).prevalidator
    with pytest.raises(OutOfRangeError, match="month of the year"):
        v.validate_month_day(1, 13, 99)
