# tests/test_ranges.py

import pytest

from calschema.core.errors import CalendarOverflowError, OutOfRangeError
from calschema.core.types import Range
from calschema.validation import DaysValidator, MonthsValidator, YearsValidator


def test_range_basics():
    r = Range(-2, 5)
    assert r.count == 8
    assert r.endpoints == (-2, 5)
    assert 0 in r and 5 in r and 6 not in r
    assert list(Range(1, 3)) == [1, 2, 3]
    assert str(r) == "[-2..5]"
    assert Range.singleton(4) == Range(4, 4)
    assert Range.starting_at(10, 3) == Range(10, 12)
    assert Range(0, 1).is_subset_of(r)
    assert not Range(0, 6).is_subset_of(r)
    assert r.with_min(0) == Range(0, 5)
    assert r.with_max(0) == Range(-2, 0)

    with pytest.raises(ValueError):
        Range(3, 2)


def test_years_validator():
    v = YearsValidator(Range(1, 9999))
    v.validate(1)
    v.validate(9999)
    with pytest.raises(OutOfRangeError) as exc:
        v.validate(0)
    assert exc.value.param_name == "year"
    assert str(exc.value) == "The value of the year was out of range; value = 0."

    with pytest.raises(CalendarOverflowError, match="supported dates"):
        v.check_overflow(10000)
    v.check_upper_bound(0)
    with pytest.raises(CalendarOverflowError):
        v.check_lower_bound(0)


def test_days_and_months_validators():
    days = DaysValidator(Range(0, 100))
    with pytest.raises(OutOfRangeError) as exc:
        days.validate(101)
    assert exc.value.param_name == "days_since_epoch"
    with pytest.raises(CalendarOverflowError, match="supported dates"):
        days.check_upper_bound(101)
    days.check_lower_bound(101)

    months = MonthsValidator(Range(0, 11))
    with pytest.raises(CalendarOverflowError, match="supported months"):
        months.check_overflow(-1)
    with pytest.raises(OutOfRangeError) as exc:
        months.validate(12, "n")
    assert exc.value.param_name == "n"


def test_errors_are_builtin_subclasses():
    assert issubclass(OutOfRangeError, ValueError)
    assert issubclass(CalendarOverflowError, OverflowError)
