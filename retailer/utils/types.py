"""Shared type definitions for the toolkit."""

from collections.abc import Callable, Iterable, Sequence
from enum import StrEnum

import pandas as pd


type SalesFrame = pd.DataFrame
type BucketFrame = pd.DataFrame
type GroupKeys = str | Sequence[str]
type ProductSet = str | Iterable[str]
type DistributionPoint = tuple[str, float]
type PlotSink = Callable[..., object]

# Day names as returned by pandas' Series.dt.day_name()
WEEKEND_DAYS = ("Saturday", "Sunday")

# strptime() places a bare time of day on this date
TIME_REFERENCE_DATE = pd.Timestamp("1900-01-01")

# Origin of the numeric date axis used for trend fitting
DATE_AXIS_ORIGIN = pd.Timestamp("1970-01-01")


class Reducer(StrEnum):
    SUM = "sum"
    MEAN = "mean"
