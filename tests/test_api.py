# tests/test_api.py

import pytest
from datetime import date

import calschema
from calschema.core.types import Range, SchemaId
from calschema.schemas.gj import GregorianSchema
from calschema.schemas.specs import ALL_SPECS, SchemaSpec


def test_registry_lists_builtins():
    names = calschema.list_schemas()
    assert names == sorted(names)
    assert set(ALL_SPECS) <= set(names)


def test_schema_info():
    info = calschema.schema_info("julian")
    assert info["schema"] == "JulianSchema"
    assert info["profile"] == "SOLAR12"
    assert info["id"]["name"] == "julian"
    with pytest.raises(KeyError, match="Available"):
        calschema.schema_info("no_such_calendar")


def test_get_schema_with_narrower_window():
    sch = calschema.get_schema("gregorian", Range(1, 9999))
    assert sch.supported_years == Range(1, 9999)
    assert calschema.get_schema("gregorian") is calschema.get_schema("gregorian")

    with pytest.raises(calschema.OutOfRangeError):
        calschema.get_schema("pax", Range(-5, 5))
    with pytest.raises(KeyError):
        calschema.get_schema("no_such_calendar", Range(1, 2))


def test_make_schema_and_specs():
    spec = ALL_SPECS["coptic13"].tweak(supported_years=Range(1, 100))
    sch = calschema.make_schema(spec)
    assert sch.supported_years == Range(1, 100)

    with pytest.raises(TypeError):
        calschema.make_schema({"kind": "gregorian"})
    with pytest.raises(ValueError):
        calschema.make_schema(SchemaSpec(kind="nope", id=SchemaId("other", "nope")))
    with pytest.raises(ValueError):
        SchemaSpec(kind="", id=SchemaId("other", "empty"))


def test_register_schema():
    calschema.register_schema("gregorian_1_9999", GregorianSchema(Range(1, 9999)), overwrite=True)
    assert "gregorian_1_9999" in calschema.list_schemas()
    with pytest.raises(KeyError):
        calschema.register_schema("gregorian_1_9999", GregorianSchema())

    assert calschema.segment("gregorian_1_9999").supported_days.min == 0

    with pytest.raises(TypeError):
        calschema.register_schema("not_a_schema", object())


@pytest.mark.parametrize("name", sorted(ALL_SPECS))
def test_epoch_through_api(name):
    assert calschema.days_since_epoch(1, 1, 1, schema=name) == 0
    assert calschema.date_parts(0, schema=name) == calschema.DateParts(1, 1, 1)


def test_conversions_validate_input():
    assert calschema.days_since_epoch(2000, 2, 29) == date(2000, 2, 29).toordinal() - 1
    assert calschema.ordinal_parts(2000, 12, 31) == calschema.OrdinalParts(2000, 366)
    assert calschema.date_from_ordinal(2000, 60, schema="julian") == calschema.DateParts(2000, 2, 29)

    with pytest.raises(calschema.OutOfRangeError, match="day of the month"):
        calschema.days_since_epoch(2001, 2, 29)
    with pytest.raises(calschema.OutOfRangeError, match="month of the year"):
        calschema.ordinal_parts(2001, 13, 1)
    with pytest.raises(calschema.OutOfRangeError, match="year"):
        calschema.days_since_epoch(0, 1, 1, schema="pax")
    with pytest.raises(calschema.OutOfRangeError, match="day of the year"):
        calschema.date_from_ordinal(2001, 366)
    with pytest.raises(calschema.OutOfRangeError):
        calschema.date_parts(-1, schema="pax")


def test_month_layout():
    layout = calschema.month_layout(2000)
    assert [r["days"] for r in layout][:3] == [31, 29, 31]
    assert layout[2]["start"] == date(2000, 3, 1).toordinal() - 1
    assert layout[2]["days_before"] == 60

    lunisolar = calschema.month_layout(4, schema="lunisolar")
    assert len(lunisolar) == 13
    assert lunisolar[-1]["intercalary"]


def test_segment_and_arithmetic():
    seg = calschema.segment("gregorian", Range(1, 9999))
    assert seg.is_complete
    assert seg.supported_years == Range(1, 9999)

    arith = calschema.arithmetic("julian", Range(1, 3000))
    assert arith.supported_years == Range(1, 3000)


def test_addition():
    r = calschema.add_years(2000, 2, 29, 1, schema="julian")
    assert r.parts == calschema.DateParts(2001, 2, 28)
    assert r.roundoff == 1

    r = calschema.add_months(2001, 1, 31, 1)
    assert r.parts == calschema.DateParts(2001, 2, 28)
    assert r.roundoff == 3

    with pytest.raises(calschema.OutOfRangeError):
        calschema.add_months(2001, 2, 30, 1)
    with pytest.raises(calschema.CalendarOverflowError):
        calschema.add_years(9999, 1, 1, 1, schema="pax")


def test_intervals():
    assert calschema.years_between((2000, 3, 15), (2001, 3, 14)) == 0
    assert calschema.months_between((2001, 1, 31), (2001, 2, 28)) == 1
    assert calschema.subtract((2000, 1, 15), (2001, 3, 20)) == calschema.DateDifference(1, 2, 5)
    with pytest.raises(calschema.OutOfRangeError):
        calschema.years_between((2000, 1, 1), (2001, 2, 29))
