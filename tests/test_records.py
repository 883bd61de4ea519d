from datetime import date

import numpy as np
import pandas as pd
import pytest

from app_core.matrix.errors import ParseError
from app_core.matrix.records import (
    DailyRecord,
    normalize_row,
    normalize_rows,
    parse_temperature,
    records_from_frame,
)


def test_normalize_row_full_record():
    r = normalize_row({"date": "2020-07-15", "max_temperature": "33.2", "min_temperature": "27.1"})
    assert r == DailyRecord(date=date(2020, 7, 15), year=2020, month=7, day=15, max=33.2, min=27.1)


def test_normalize_row_empty_max_is_none():
    r = normalize_row({"date": "2020-07-16", "max_temperature": "", "min_temperature": "26.0"})
    assert r.max is None
    assert r.min == 26.0


def test_normalize_row_missing_fields_are_none():
    r = normalize_row({"date": "2020-07-16"})
    assert r.max is None
    assert r.min is None


@pytest.mark.parametrize("bad", ["2020/07/15", "15-07-2020", "2020-7-15", "2021-02-30", "", None, "x"])
def test_normalize_row_bad_date_raises(bad):
    with pytest.raises(ParseError):
        normalize_row({"date": bad, "max_temperature": "1", "min_temperature": "0"})


def test_parse_temperature_variants():
    assert parse_temperature(" 12.5 ") == 12.5
    assert parse_temperature("   ") is None
    assert parse_temperature(np.nan) is None
    assert parse_temperature(7) == 7.0
    with pytest.raises(ParseError):
        parse_temperature("warm")
    with pytest.raises(ParseError):
        parse_temperature("inf")


def test_daily_record_is_immutable():
    r = normalize_row({"date": "2020-01-01", "max_temperature": "20", "min_temperature": "10"})
    with pytest.raises(Exception):
        r.max = 5.0


def test_daily_record_rejects_inconsistent_date():
    with pytest.raises(ValueError):
        DailyRecord(date=date(2020, 1, 1), year=2020, month=2, day=1, max=None, min=None)


def test_normalize_rows_drops_bad_rows_and_keeps_order(caplog):
    rows = [
        {"date": "2020-01-02", "max_temperature": "20", "min_temperature": "10"},
        {"date": "not-a-date", "max_temperature": "20", "min_temperature": "10"},
        {"date": "2020-01-01", "max_temperature": "19", "min_temperature": "9"},
    ]
    with caplog.at_level("WARNING"):
        res = normalize_rows(rows)

    assert [r.day for r in res.records] == [2, 1]
    assert res.dropped_rows == (1,)
    assert res.n_dropped == 1
    assert "Dropping row 1" in caplog.text


def test_records_from_frame():
    df = pd.DataFrame(
        {
            "date": ["2021-03-01", "2021-03-02"],
            "max_temperature": ["21.0", ""],
            "min_temperature": ["15.5", "14.0"],
            "extra": ["a", "b"],
        }
    )
    res = records_from_frame(df)
    assert len(res.records) == 2
    assert res.records[1].max is None
    assert res.records[1].min == 14.0


def test_records_from_frame_empty():
    assert records_from_frame(pd.DataFrame()).records == ()


@pytest.mark.parametrize("padded", [" 2020-07-15", "2020-07-15 ", "\t2020-07-15"])
def test_normalize_row_rejects_padded_date(padded):
    with pytest.raises(ParseError):
        normalize_row({"date": padded, "max_temperature": "1", "min_temperature": "0"})
