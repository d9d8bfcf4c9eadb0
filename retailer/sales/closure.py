"""Opportunity cost of closing the shop earlier than it does today."""

import logging

import pandas as pd

from retailer.config import AnalyticsConfig
from retailer.errors import ConfigurationError, EmptyGroupError
from retailer.sales.aggregate import aggregate, bucket_total
from retailer.sales.transform import filter_weekdays, normalize_sales
from retailer.utils.types import SalesFrame
from retailer.utils.validators import require_columns

logger = logging.getLogger(__name__)


def parse_closure_time(time_closure: str, format_time: str) -> pd.Timestamp:
    """Parse a closure time with the same format used for the time column."""
    try:
        return pd.to_datetime(time_closure, format=format_time)
    except (ValueError, TypeError) as exc:
        raise ConfigurationError(
            f"Closure time {time_closure!r} does not match format {format_time!r}"
        ) from exc


def closure_opportunity_cost(
    df: SalesFrame,
    time_closure: str | None = None,
    config: AnalyticsConfig | None = None,
    weekdays: bool | None = None,
) -> float:
    """Average revenue per trading day taken after `time_closure`.

    Late revenue is summed by day and divided by the number of distinct days
    in the weekday-filtered table, including days with no late sales.
    """
    config = config or AnalyticsConfig()
    cols = config.columns
    time_closure = time_closure if time_closure is not None else config.time_closure
    weekdays = config.weekdays if weekdays is None else weekdays

    if time_closure is None:
        raise ConfigurationError("A closure time is required")
    require_columns(df, [cols.date_var, cols.time_var, cols.sales_var])
    closure = parse_closure_time(time_closure, config.format_time)

    sales = filter_weekdays(
        normalize_sales(df, config), cols.date_var, weekdays, strict=config.strict_weekends
    )
    late_sales = sales[sales[cols.time_var] > closure]
    late_by_day = aggregate(late_sales, cols.date_var, cols.sales_var, "sum")

    trading_days = sales[cols.date_var].nunique()
    if trading_days == 0:
        raise EmptyGroupError("No trading days left to average late sales over")

    late_total = bucket_total(late_by_day, cols.sales_var)
    logger.info(
        f"{len(late_sales)} sales after {time_closure} worth {late_total:,.2f} "
        f"across {trading_days} trading days"
    )
    return late_total / trading_days
