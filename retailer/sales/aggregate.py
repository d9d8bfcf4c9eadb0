"""Group unitary sales by derived keys and reduce a numeric column."""

import logging

import pandas as pd

from retailer.errors import ConfigurationError
from retailer.utils.types import BucketFrame, GroupKeys, Reducer, SalesFrame
from retailer.utils.validators import require_columns

logger = logging.getLogger(__name__)


def _as_key_list(group_by: GroupKeys) -> list[str]:
    if isinstance(group_by, str):
        return [group_by]
    keys = list(group_by)
    if not keys:
        raise ConfigurationError("At least one group-by column is required")
    return keys


def aggregate(
    df: SalesFrame,
    group_by: GroupKeys,
    value_col: str,
    reducer: Reducer | str = Reducer.SUM,
) -> BucketFrame:
    """Reduce `value_col` over every distinct combination of the group-by columns.

    Rows missing any key or the value are left out, so a bucket only exists
    for keys that were actually observed with a value. Buckets come back in
    order of first appearance, one row each, with the key columns followed
    by the reduced value column.
    """
    keys = _as_key_list(group_by)
    require_columns(df, [*keys, value_col])

    try:
        how = Reducer(reducer)
    except ValueError:
        raise ConfigurationError(f"Unsupported reducer: {reducer}") from None

    observed = df.dropna(subset=[*keys, value_col])
    dropped = len(df) - len(observed)
    if dropped:
        logger.debug(f"Excluded {dropped} rows with missing {keys + [value_col]} from aggregation")

    grouped = observed.groupby(keys, sort=False)[value_col]

    match how:
        case Reducer.SUM:
            buckets = grouped.sum()
        case Reducer.MEAN:
            buckets = grouped.mean()

    return buckets.reset_index()


def bucket_total(buckets: BucketFrame, value_col: str) -> float:
    """Sum of the reduced values across all buckets (0 for no buckets)."""
    return float(buckets[value_col].sum()) if len(buckets) else 0.0


def bucket_mapping(buckets: BucketFrame, value_col: str) -> dict:
    """Express a bucket frame as a plain key -> value dict.

    Composite keys become tuples in group-by column order.
    """
    keys = [c for c in buckets.columns if c != value_col]
    if len(keys) == 1:
        index = buckets[keys[0]]
    else:
        index = pd.MultiIndex.from_frame(buckets[keys])
    return dict(zip(index, buckets[value_col]))
