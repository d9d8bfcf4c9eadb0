"""Parse date and time fields of unitary sales and derive calendar keys."""

import logging
from datetime import datetime, time

import pandas as pd

from retailer.config import AnalyticsConfig
from retailer.errors import ConfigurationError
from retailer.utils.types import TIME_REFERENCE_DATE, WEEKEND_DAYS, SalesFrame
from retailer.utils.validators import count_parse_failures, require_columns

logger = logging.getLogger(__name__)


def _cell_timestamp(value):
    """Timestamp for a spreadsheet date/time cell; bare times land on the reference date."""
    if isinstance(value, time):
        return datetime.combine(TIME_REFERENCE_DATE.date(), value)
    return value


def _parse_column(raw: pd.Series, fmt: str | None, label: str) -> pd.Series:
    """Parse one column permissively; unparseable values become NaT."""
    if pd.api.types.is_datetime64_any_dtype(raw):
        return raw

    cells = raw.dropna()
    if len(cells) and cells.map(lambda v: isinstance(v, (datetime, time))).all():
        return pd.to_datetime(raw.map(_cell_timestamp), errors="coerce")

    parsed = pd.to_datetime(raw, format=fmt, errors="coerce")
    present = int(raw.notna().sum())
    failures = count_parse_failures(raw, parsed)

    if present and failures == present:
        raise ConfigurationError(
            f"No value in column '{raw.name}' matches the {label} format {fmt!r}"
        )
    if failures:
        logger.warning(f"{failures} of {present} values in '{raw.name}' could not be parsed as {label}")

    return parsed


def format_sales(df: SalesFrame, config: AnalyticsConfig) -> SalesFrame:
    """Return a copy with the date column parsed to dates and the time column to times of day."""
    cols = config.columns
    require_columns(df, [cols.date_var, cols.time_var])

    dates = _parse_column(df[cols.date_var], config.format_date, "date")
    times = _parse_column(df[cols.time_var], config.format_time, "time")

    return df.assign(**{cols.date_var: dates.dt.normalize(), cols.time_var: times})


def normalize_sales(df: SalesFrame, config: AnalyticsConfig) -> SalesFrame:
    """Parse date/time fields and append ISO week-of-year and month-of-year columns."""
    cols = config.columns
    formatted = format_sales(df, config)
    dates = formatted[cols.date_var]

    return formatted.assign(**{
        cols.week_var: dates.dt.isocalendar().week.astype("Int64"),
        cols.month_var: dates.dt.month.astype("Int64"),
    })


def filter_weekdays(
    df: SalesFrame,
    date_var: str,
    weekdays: bool,
    strict: bool = False,
) -> SalesFrame:
    """Keep weekday rows when `weekdays` is set.

    The default predicate keeps a row when its day is not Saturday *or* not
    Sunday, which holds for every row, so weekend sales are retained. Pass
    `strict=True` to actually drop Saturdays and Sundays.
    """
    if not weekdays:
        return df

    require_columns(df, [date_var])
    if not pd.api.types.is_datetime64_any_dtype(df[date_var]):
        raise ConfigurationError(f"Column '{date_var}' must hold parsed dates; run normalize_sales first")

    day_names = df[date_var].dt.day_name()
    saturday, sunday = WEEKEND_DAYS

    if strict:
        keep = ~day_names.isin(WEEKEND_DAYS)
    else:
        keep = (day_names != saturday) | (day_names != sunday)

    return df[keep]
