"""
tests/test_validation.py

Column checks and export validation.
"""

import pandas as pd
import pytest

from retailer import sales
from retailer.errors import ConfigurationError
from retailer.sales.models import build_normalized_schema
from retailer.sales.transform import normalize_sales
from retailer.utils.validators import require_columns, validate_dataframe


def test_require_columns_names_every_missing_column(three_sales):
    with pytest.raises(ConfigurationError) as excinfo:
        require_columns(three_sales, ["date", "price", "store"])

    assert "price" in str(excinfo.value)
    assert "store" in str(excinfo.value)


def test_configuration_error_is_a_value_error(three_sales):
    with pytest.raises(ValueError):
        require_columns(three_sales, ["price"])


def test_normalized_table_matches_schema(six_weeks, config):
    normalized = normalize_sales(six_weeks, config)
    result = validate_dataframe(normalized, build_normalized_schema(config.columns))
    assert result == {"valid": True, "status": "ok", "errors": []}


def test_unparsed_table_fails_schema(six_weeks, config):
    result = validate_dataframe(six_weeks, build_normalized_schema(config.columns))

    assert result["valid"] is False
    assert result["errors"]


def test_validate_usable_export(three_sales, config):
    assert sales.validate(three_sales, config) == {"status": "ok", "row_count": 3}


def test_validate_reports_wrong_time_format(three_sales, config):
    result = sales.validate(three_sales, config.replace(format_time="%I %p"))

    assert result["status"] == "error"
    assert "time format" in result["message"]


def test_validate_reports_missing_columns(three_sales):
    # Default izettle column names do not exist in a snake_case export
    assert sales.validate(three_sales)["status"] == "error"


def test_validate_reports_non_numeric_amounts(three_sales, config):
    df = three_sales.assign(amount=["10", "twenty", "30"])
    assert sales.validate(df, config)["status"] == "error"
