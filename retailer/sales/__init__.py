"""Unitary sales analytics: calendar buckets, trend, closure cost and product lines."""

from retailer.sales.aggregate import aggregate, bucket_mapping, bucket_total
from retailer.sales.closure import closure_opportunity_cost
from retailer.sales.hours import mean_items_by_hour
from retailer.sales.models import SalesSummary, build_normalized_schema, build_raw_schema
from retailer.sales.segments import segment_product_line
from retailer.sales.summary import build_sales_summary
from retailer.sales.transform import filter_weekdays, format_sales, normalize_sales
from retailer.sales.trend import TrendFit, fit_trend
from retailer.config import AnalyticsConfig
from retailer.errors import RetailerError
from retailer.utils.validators import validate_dataframe


def validate(df, config: AnalyticsConfig | None = None) -> dict:
    """Check that an export can be analysed with the given column configuration."""
    config = config or AnalyticsConfig()
    result = validate_dataframe(df, build_raw_schema(config.columns))

    match result:
        case {"valid": False, "errors": errs}:
            return {"status": "error", "message": "; ".join(errs[:3])}

    try:
        normalized = normalize_sales(df, config)
    except RetailerError as exc:
        return {"status": "error", "message": str(exc)}

    match validate_dataframe(normalized, build_normalized_schema(config.columns)):
        case {"valid": True}:
            return {"status": "ok", "row_count": len(df)}
        case {"valid": False, "errors": errs}:
            return {"status": "error", "message": "; ".join(errs[:3])}
