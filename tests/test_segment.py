# tests/test_segment.py

import pytest
from datetime import date

from calschema.core.errors import InvalidStateError, OutOfRangeError
from calschema.core.types import DateParts, MonthParts, OrdinalParts, Range
from calschema.schemas.factory import make_schema
from calschema.schemas.gj import GregorianSchema
from calschema.schemas.specs import ALL_SPECS
from calschema.segment import CalendricalSegment, CalendricalSegmentBuilder


@pytest.mark.parametrize("name", sorted(ALL_SPECS))
def test_maximal_segment_is_complete(name):
    sch = make_schema(ALL_SPECS[name])
    seg = CalendricalSegment.create_maximal(sch)
    assert seg.is_complete
    assert seg.supported_years == sch.supported_years
    assert seg.supported_days == sch.supported_days
    assert seg.supported_months == sch.supported_months


def test_gregorian_standard_segment():
    seg = CalendricalSegment.create(GregorianSchema(), Range(1, 9999))
    assert seg.is_complete
    assert seg.supported_days == Range(0, date(9999, 12, 31).toordinal() - 1)
    assert seg.supported_months == Range(0, 9999 * 12 - 1)
    assert seg.min_max_date_parts == (DateParts(1, 1, 1), DateParts(9999, 12, 31))
    assert seg.min_max_ordinal_parts == (OrdinalParts(1, 1), OrdinalParts(9999, 365))
    assert seg.min_max_month_parts == (MonthParts(1, 1), MonthParts(9999, 12))


def test_create_rejects_years_outside_schema():
    with pytest.raises(OutOfRangeError):
        CalendricalSegment.create(make_schema(ALL_SPECS["pax"]), Range(0, 10))


def test_maximal_on_or_after_year1():
    seg = CalendricalSegment.create_maximal_on_or_after_year1(GregorianSchema())
    assert seg.supported_years.min == 1
    assert seg.supported_days.min == 0

    with pytest.raises(OutOfRangeError):
        CalendricalSegment.create_maximal_on_or_after_year1(GregorianSchema(Range(-100, -1)))


def test_builder_starts_empty():
    b = CalendricalSegmentBuilder(GregorianSchema())
    assert not b.has_min and not b.has_max and not b.is_buildable
    with pytest.raises(InvalidStateError):
        b.min_days_since_epoch
    with pytest.raises(InvalidStateError):
        b.max_date_parts
    with pytest.raises(InvalidStateError):
        b.build_segment()


def test_partial_segment():
    b = CalendricalSegmentBuilder(GregorianSchema())
    b.min_date_parts = DateParts(2000, 3, 1)
    b.max_date_parts = DateParts(2000, 3, 31)
    assert b.is_buildable
    assert b.min_ordinal_parts == OrdinalParts(2000, 61)

    seg = b.build_segment()
    assert not seg.min_is_start_of_year
    assert not seg.max_is_end_of_year
    assert not seg.is_complete
    assert seg.supported_years == Range.singleton(2000)
    assert seg.supported_months == Range.singleton(2000 * 12 - 10)
    assert seg.supported_days.count == 31


def test_setters_keep_min_before_max():
    b = CalendricalSegmentBuilder(GregorianSchema())
    b.max_days_since_epoch = 100
    with pytest.raises(OutOfRangeError):
        b.min_days_since_epoch = 101
    assert not b.has_min

    b.min_days_since_epoch = 100
    with pytest.raises(OutOfRangeError):
        b.max_days_since_epoch = 99
    assert b.max_days_since_epoch == 100

    seg = b.build_segment()
    assert seg.supported_days == Range.singleton(100)


def test_setters_validate_input():
    sch = GregorianSchema(Range(1, 9999))
    b = CalendricalSegmentBuilder(sch)
    with pytest.raises(OutOfRangeError) as exc:
        b.min_days_since_epoch = -1
    assert str(exc.value) == "The value was out of range; value = -1."

    with pytest.raises(OutOfRangeError, match="year"):
        b.min_date_parts = DateParts(0, 1, 1)
    with pytest.raises(OutOfRangeError, match="day of the month"):
        b.min_date_parts = DateParts(2001, 2, 29)
    with pytest.raises(OutOfRangeError, match="day of the year"):
        b.max_ordinal_parts = OrdinalParts(2001, 366)
    with pytest.raises(OutOfRangeError):
        b.set_min_to_start_of_year(10000)
    assert not b.has_min and not b.has_max


def test_ordinal_and_year_setters():
    b = CalendricalSegmentBuilder(GregorianSchema())
    b.set_min_to_start_of_year(1999)
    b.max_ordinal_parts = OrdinalParts(2000, 366)
    seg = b.build_segment()
    assert seg.is_complete
    assert seg.max.date_parts == DateParts(2000, 12, 31)

    b.set_max_to_end_of_year(2001)
    assert b.max_date_parts == DateParts(2001, 12, 31)


def test_set_supported_years_is_atomic():
    b = CalendricalSegmentBuilder(GregorianSchema(Range(1, 9999)))
    b.set_supported_years(Range(10, 20))
    before = (b.min_date_parts, b.max_date_parts)

    with pytest.raises(OutOfRangeError):
        b.set_supported_years(Range(5000, 10000))
    assert (b.min_date_parts, b.max_date_parts) == before

    # Replacing both endpoints at once may move the window past the old max.
    b.set_supported_years(Range(30, 40))
    assert b.min_date_parts == DateParts(30, 1, 1)


def test_try_set_min_on_or_after_year1():
    b = CalendricalSegmentBuilder(GregorianSchema(Range(-100, -1)))
    assert not b.try_set_min_to_start_of_min_supported_year_on_or_after_year1()
    assert not b.has_min

    b = CalendricalSegmentBuilder(GregorianSchema(Range(-100, 100)))
    assert b.try_set_min_to_start_of_min_supported_year_on_or_after_year1()
    assert b.min_date_parts == DateParts(1, 1, 1)
