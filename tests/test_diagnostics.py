# tests/test_diagnostics.py

import pytest

from calschema.diagnostics import month_table, round_trip, year_lengths


def test_round_trip_passes(capsys):
    rv = round_trip.main(["--schemas", "gregorian,julian,lunisolar,pax", "--N", "300", "--from-year", "1", "--to-year", "3000"])
    assert rv == 0
    assert "All round-trip tests passed." in capsys.readouterr().out


def test_round_trip_skips_disjoint_window(capsys):
    assert round_trip.main(["--schemas", "pax", "--N", "10", "--from-year", "-50", "--to-year", "-1"]) == 0
    assert "skipped" in capsys.readouterr().out


def test_month_table_render():
    text = month_table.render("coptic13", 1, 4)
    lines = text.splitlines()
    assert lines[0] == "coptic13"
    assert lines[3].endswith("| 365")
    assert lines[5].endswith("| 366")


def test_year_lengths():
    np = pytest.importorskip("numpy")
    ys, lengths = year_lengths.year_lengths(np, "julian", 1, 400)
    assert len(ys) == 400
    assert lengths.mean() == pytest.approx(365.25)
    drift = year_lengths.drift_days(np, lengths, 365.25)
    assert drift[-1] == pytest.approx(0.0, abs=1e-9)


def test_year_lengths_main(capsys):
    pytest.importorskip("numpy")
    assert year_lengths.main(["--schemas", "gregorian,tabular_islamic", "--to-year", "400"]) == 0
    out = capsys.readouterr().out
    assert "gregorian" in out
    assert "365.242500" in out
