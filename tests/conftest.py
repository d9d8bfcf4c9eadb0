"""Shared fixtures: small point-of-sale exports in the snake_case layout."""

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

from retailer.config import AnalyticsConfig, load_config


@pytest.fixture()
def config() -> AnalyticsConfig:
    """snake_case columns, HH:MM times, weekday filter off."""
    return load_config("snake_case").replace(weekdays=False)


@pytest.fixture()
def three_sales() -> pd.DataFrame:
    """Two trading days, three unitary sales (Mon 1 and Tue 2 January 2024)."""
    return pd.DataFrame({
        "date": ["2024-01-01", "2024-01-01", "2024-01-02"],
        "time": ["09:00", "18:00", "19:00"],
        "amount": [10.0, 20.0, 30.0],
        "discount": [0.0, 1.5, 0.5],
        "quantity": [1, 2, 1],
        "name": ["A", "B", "A"],
    })


@pytest.fixture()
def six_weeks() -> pd.DataFrame:
    """One sale a day at noon from Mon 1 Jan to Sun 11 Feb 2024; day n sells 10 + 2n."""
    dates = pd.date_range("2024-01-01", "2024-02-11", freq="D")
    return pd.DataFrame({
        "date": dates.strftime("%Y-%m-%d"),
        "time": ["12:00"] * len(dates),
        "amount": [10.0 + 2 * n for n in range(len(dates))],
        "discount": [1.0] * len(dates),
        "quantity": [2] * len(dates),
        "name": ["A" if n % 2 else "B" for n in range(len(dates))],
    })
