"""Average number of items sold in each hour of the day."""

import logging

from retailer.config import AnalyticsConfig
from retailer.sales.aggregate import aggregate
from retailer.sales.plotting import bar_plot
from retailer.sales.transform import filter_weekdays, normalize_sales
from retailer.utils.types import BucketFrame, DistributionPoint, PlotSink, SalesFrame
from retailer.utils.validators import require_columns

logger = logging.getLogger(__name__)

HOUR_KEY_FORMAT = "%H:%M:%S"


def hourly_distribution(buckets: BucketFrame, hour_col: str, value_col: str) -> list[DistributionPoint]:
    """(two-digit hour, value) pairs, as handed to a plotting sink."""
    return [(str(hour)[:2], float(value)) for hour, value in zip(buckets[hour_col], buckets[value_col])]


def mean_items_by_hour(
    df: SalesFrame,
    config: AnalyticsConfig | None = None,
    weekdays: bool | None = None,
    plot: bool | None = None,
    sink: PlotSink = bar_plot,
    **plot_options,
) -> BucketFrame:
    """Mean items sold per hour of day, averaged over the days that had sales in that hour.

    Quantities are first summed per (hour, day), then averaged per hour.
    With `plot` set the distribution is passed to `sink` together with
    `plot_options`; the frame is returned either way, ordered by hour.
    """
    config = config or AnalyticsConfig()
    cols = config.columns
    weekdays = config.weekdays if weekdays is None else weekdays
    plot = config.plot if plot is None else plot
    require_columns(df, [cols.date_var, cols.time_var, cols.quantity_var])

    sales = filter_weekdays(
        normalize_sales(df, config), cols.date_var, weekdays, strict=config.strict_weekends
    )
    hours = sales[cols.time_var].dt.floor("h").dt.strftime(HOUR_KEY_FORMAT)
    sales = sales.assign(**{cols.time_var: hours})

    daily_sum = aggregate(sales, [cols.time_var, cols.date_var], cols.quantity_var, "sum")
    mean_hour = aggregate(daily_sum, cols.time_var, cols.quantity_var, "mean")
    mean_hour = mean_hour.sort_values(cols.time_var, ignore_index=True)

    logger.debug(f"Hourly item rate over {daily_sum[cols.date_var].nunique()} days, {len(mean_hour)} hours")

    if plot:
        sink(hourly_distribution(mean_hour, cols.time_var, cols.quantity_var), **plot_options)

    return mean_hour
