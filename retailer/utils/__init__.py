"""Shared utilities for the retail analytics toolkit."""

from retailer.utils.io import read_sales_file
from retailer.utils.validators import require_columns, validate_dataframe
from retailer.utils.types import Reducer, SalesFrame, WEEKEND_DAYS
