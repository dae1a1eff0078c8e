# tests/test_cli.py

import pytest
from datetime import date

from calschema.cli import main


def test_list(capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "gregorian" in out
    assert "LUNISOLAR" in out


def test_info(capsys):
    assert main(["info", "persian2820"]) == 0
    assert "Persian2820Schema" in capsys.readouterr().out


def test_convert_date(capsys):
    assert main(["convert", "gregorian", "--date", "2000-02-29"]) == 0
    out = capsys.readouterr().out
    assert f"days_since_epoch = {date(2000, 2, 29).toordinal() - 1}" in out
    assert "2000-060" in out


def test_convert_days_and_ordinal(capsys):
    assert main(["convert", "julian", "--days", "0"]) == 0
    assert "0001-01-01" in capsys.readouterr().out
    assert main(["convert", "julian", "--ordinal", "4-60"]) == 0
    assert "0004-02-29" in capsys.readouterr().out


def test_add(capsys):
    assert main(["add", "julian", "2000-02-29", "--years", "1"]) == 0
    out = capsys.readouterr().out
    assert "result   = 2001-02-28" in out
    assert "roundoff = 1" in out


def test_diff(capsys):
    assert main(["diff", "gregorian", "2000-01-15", "2001-03-20"]) == 0
    out = capsys.readouterr().out
    assert "years  = 1" in out
    assert "months = 2" in out
    assert "days   = 5" in out


def test_month(capsys):
    assert main(["month", "lunisolar", "4"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 14
    assert lines[-1].endswith("*")


def test_library_errors_exit_2(capsys):
    assert main(["convert", "gregorian", "--date", "2001-02-29"]) == 2
    assert "out of range" in capsys.readouterr().err
    assert main(["info", "no_such_calendar"]) == 2
    assert "Unknown schema" in capsys.readouterr().err


def test_bad_date_syntax():
    with pytest.raises(SystemExit):
        main(["convert", "gregorian", "--date", "yesterday"])


def test_diag_month_table(capsys):
    assert main(["diag", "month-table", "--schema", "pax", "--from-year", "2005", "--to-year", "2007"]) == 0
    rows = [line for line in capsys.readouterr().out.splitlines() if line.startswith(" 2006")]
    assert len(rows) == 1
    assert rows[0].endswith("| 371")
