"""Revenue contribution of a product line per procurement cycle."""

import logging

from retailer.config import AnalyticsConfig
from retailer.errors import ConfigurationError, EmptyGroupError
from retailer.utils.types import ProductSet, SalesFrame
from retailer.utils.validators import require_columns

logger = logging.getLogger(__name__)


def segment_product_line(
    df: SalesFrame,
    products_in_line: ProductSet,
    config: AnalyticsConfig | None = None,
    order_frequency: float | None = None,
) -> float:
    """Total revenue of the named products divided by the number of order cycles.

    If the table covers a 31-day month and the line is restocked daily,
    `order_frequency` is 31.
    """
    config = config or AnalyticsConfig()
    cols = config.columns
    order_frequency = config.order_frequency if order_frequency is None else order_frequency
    require_columns(df, [cols.sales_var, cols.name_var])

    if order_frequency == 0:
        raise EmptyGroupError("Order frequency must not be zero")
    if order_frequency < 0:
        raise ConfigurationError(f"Order frequency must be positive, got {order_frequency}")

    products = [products_in_line] if isinstance(products_in_line, str) else list(products_in_line)
    # Names are matched as text so numeric product codes match either way
    names = df[cols.name_var].astype(str)
    in_line = df[names.isin([str(p) for p in products]) & df[cols.name_var].notna()]
    total = float(in_line[cols.sales_var].sum())

    if in_line.empty:
        logger.warning(f"None of {products} appear in column '{cols.name_var}'")
    logger.debug(f"Product line {products}: {len(in_line)} sales totalling {total:,.2f}")

    return total / order_frequency
