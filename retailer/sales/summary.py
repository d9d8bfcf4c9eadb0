"""Build the composite SalesSummary from a unitary sales table."""

import logging

from retailer.config import AnalyticsConfig
from retailer.sales.aggregate import aggregate
from retailer.sales.models import SalesSummary
from retailer.sales.transform import normalize_sales
from retailer.sales.trend import fit_trend
from retailer.utils.types import SalesFrame
from retailer.utils.validators import require_columns

logger = logging.getLogger(__name__)


def build_sales_summary(df: SalesFrame, config: AnalyticsConfig | None = None) -> SalesSummary:
    """Summed revenue by day, ISO week and month, total discount and daily trend.

    Weeks and months are keyed by number only, so tables spanning more than
    a year fold the same week or month of different years together.
    """
    config = config or AnalyticsConfig()
    cols = config.columns
    require_columns(df, [cols.date_var, cols.time_var, cols.sales_var, cols.discount_var])

    sales = normalize_sales(df, config)
    daily = aggregate(sales, cols.date_var, cols.sales_var, "sum")
    weekly = aggregate(sales, cols.week_var, cols.sales_var, "sum")
    monthly = aggregate(sales, cols.month_var, cols.sales_var, "sum")
    total_discount = float(sales[cols.discount_var].sum())
    trend = fit_trend(daily, cols.date_var, cols.sales_var)

    logger.info(
        f"Summarised {len(sales):,} sales into {len(daily)} days, "
        f"{len(weekly)} weeks and {len(monthly)} months"
    )
    return SalesSummary(
        daily=daily,
        weekly=weekly,
        monthly=monthly,
        total_discount=total_discount,
        trend=trend,
    )
