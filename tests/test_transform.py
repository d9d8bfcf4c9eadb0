"""
tests/test_transform.py

Date/time parsing, calendar derivation and the weekday filter.
"""

from datetime import datetime, time

import pandas as pd
import pytest

from retailer.errors import ConfigurationError
from retailer.sales.transform import filter_weekdays, format_sales, normalize_sales


# ---------------------------------------------------------------------------
# format_sales / normalize_sales
# ---------------------------------------------------------------------------


def test_format_parses_dates_and_times(three_sales, config):
    formatted = format_sales(three_sales, config)

    assert formatted["date"].iloc[0] == pd.Timestamp("2024-01-01")
    assert formatted["time"].iloc[1] == pd.Timestamp("1900-01-01 18:00")
    assert "week" not in formatted.columns


def test_normalize_appends_iso_week_and_month(config):
    df = pd.DataFrame({
        "date": ["2023-01-01", "2024-01-01", "2024-12-30"],
        "time": ["10:00", "10:00", "10:00"],
        "amount": [1.0, 2.0, 3.0],
    })

    normalized = normalize_sales(df, config)

    # 1 Jan 2023 is a Sunday and belongs to ISO week 52 of 2022
    assert normalized["week"].tolist() == [52, 1, 1]
    assert normalized["month"].tolist() == [1, 1, 12]
    assert str(normalized["week"].dtype) == "Int64"


def test_malformed_values_become_missing_without_dropping_rows(three_sales, config):
    df = three_sales.assign(date=["2024-01-01", "not a date", "2024-01-02"])

    normalized = normalize_sales(df, config)

    assert len(normalized) == 3
    assert pd.isna(normalized["date"].iloc[1])
    assert pd.isna(normalized["week"].iloc[1])
    assert normalized["time"].notna().all()


def test_total_time_parse_failure_is_a_configuration_error(three_sales, config):
    with pytest.raises(ConfigurationError, match="time format"):
        normalize_sales(three_sales, config.replace(format_time="%H:%M:%S"))


def test_missing_column_is_a_configuration_error(three_sales, config):
    with pytest.raises(ConfigurationError, match="Timestamp"):
        normalize_sales(three_sales, config.replace(time_var="Timestamp"))


def test_normalize_leaves_input_untouched(three_sales, config):
    before = three_sales.copy()
    normalize_sales(three_sales, config)
    pd.testing.assert_frame_equal(three_sales, before)


def test_normalize_is_idempotent(three_sales, config):
    once = normalize_sales(three_sales, config)
    twice = normalize_sales(once, config)
    pd.testing.assert_frame_equal(once, twice)


# ---------------------------------------------------------------------------
# filter_weekdays
# ---------------------------------------------------------------------------


@pytest.fixture()
def with_weekend(config):
    # Fri 5, Sat 6 and Sun 7 January 2024
    df = pd.DataFrame({
        "date": ["2024-01-05", "2024-01-06", "2024-01-07"],
        "time": ["10:00", "11:00", "12:00"],
        "amount": [1.0, 2.0, 3.0],
    })
    return normalize_sales(df, config)


def test_weekday_filter_keeps_weekends_with_current_predicate(with_weekend):
    # "not Saturday or not Sunday" holds for every day, so nothing is dropped
    filtered = filter_weekdays(with_weekend, "date", weekdays=True)
    assert len(filtered) == len(with_weekend)


def test_weekday_filter_off_returns_the_same_table(with_weekend):
    assert filter_weekdays(with_weekend, "date", weekdays=False) is with_weekend


def test_strict_weekday_filter_drops_saturday_and_sunday(with_weekend):
    filtered = filter_weekdays(with_weekend, "date", weekdays=True, strict=True)
    assert filtered["date"].tolist() == [pd.Timestamp("2024-01-05")]


def test_weekday_filter_needs_parsed_dates(three_sales):
    with pytest.raises(ConfigurationError, match="normalize_sales"):
        filter_weekdays(three_sales, "date", weekdays=True)


def test_spreadsheet_date_and_time_cells(config):
    df = pd.DataFrame({
        "date": [datetime(2024, 1, 1), datetime(2024, 1, 2, 0, 0), None],
        "time": [time(9, 15), None, time(19, 0)],
        "amount": [1.0, 2.0, 3.0],
    })

    normalized = normalize_sales(df, config)

    assert normalized["date"].tolist()[:2] == [pd.Timestamp("2024-01-01"), pd.Timestamp("2024-01-02")]
    assert pd.isna(normalized["date"].iloc[2])
    assert normalized["time"].iloc[0] == pd.Timestamp("1900-01-01 09:15")
    assert pd.isna(normalized["time"].iloc[1])
