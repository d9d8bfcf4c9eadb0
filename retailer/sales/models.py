"""Result records and pandera schemas for sales analytics."""

from dataclasses import dataclass

import pandas as pd
from pandera import Column, Check, DataFrameSchema

from retailer.config import SalesColumns
from retailer.sales.trend import TrendFit

# Any datetime64 resolution is accepted
IS_DATETIME = Check(
    lambda s: pd.api.types.is_datetime64_any_dtype(s),
    element_wise=False,
    name="is_datetime",
)


@dataclass(frozen=True)
class SalesSummary:
    """Daily, weekly and monthly revenue plus discount total and trend.

    Built once from a table snapshot; each bucket frame holds the key column
    followed by the summed revenue column. Freezing stops the fields being
    reassigned, not the frames being edited in place; copy a frame before
    changing it.
    """

    daily: pd.DataFrame
    weekly: pd.DataFrame
    monthly: pd.DataFrame
    total_discount: float
    trend: TrendFit


def build_normalized_schema(columns: SalesColumns) -> DataFrameSchema:
    """Schema for a table after date/time parsing and calendar derivation."""
    return DataFrameSchema(
        columns={
            columns.date_var: Column(checks=IS_DATETIME, nullable=True),
            columns.time_var: Column(checks=IS_DATETIME, nullable=True),
            columns.sales_var: Column(float, nullable=True, coerce=True),
            columns.week_var: Column("Int64", Check.in_range(1, 53), nullable=True),
            columns.month_var: Column("Int64", Check.in_range(1, 12), nullable=True),
        },
        strict=False,  # exports carry many more columns than we use
    )


def build_raw_schema(columns: SalesColumns) -> DataFrameSchema:
    """Loose schema for an export as read from disk."""
    return DataFrameSchema(
        columns={
            columns.date_var: Column(nullable=True),
            columns.time_var: Column(nullable=True),
            columns.sales_var: Column(float, nullable=True, coerce=True),
            columns.discount_var: Column(float, nullable=True, coerce=True, required=False),
            columns.quantity_var: Column(float, nullable=True, coerce=True, required=False),
            columns.name_var: Column(nullable=True, required=False),
        },
        strict=False,
    )

