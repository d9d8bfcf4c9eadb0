"""Reading point-of-sale exports."""

import logging
from pathlib import Path

import pandas as pd

type FilePath = str | Path

logger = logging.getLogger(__name__)


def read_sales_file(path: FilePath, sheet_name: str | int = 0) -> pd.DataFrame:
    """Read a unitary sales export.

    CSV date and time fields stay as text. Excel date and time cells keep
    the types the workbook stores them with.
    """
    path = Path(path)

    match path.suffix.lower():
        case ".csv":
            df = pd.read_csv(path, dtype=str, keep_default_na=False, na_values=[""])
        case ".xlsx":
            df = pd.read_excel(path, sheet_name=sheet_name, engine="openpyxl")
        case ext:
            raise ValueError(f"Unsupported export format: {ext}")

    df = df.apply(_coerce_numeric_column)
    logger.info(f"Read {len(df):,} sales rows from {path.name}")
    return df


def _coerce_numeric_column(col: pd.Series) -> pd.Series:
    """Turn a text column into numbers when every present value is numeric."""
    if not (pd.api.types.is_object_dtype(col) or pd.api.types.is_string_dtype(col)):
        return col

    converted = pd.to_numeric(col, errors="coerce")
    if converted.notna().sum() == col.notna().sum() and col.notna().any():
        return converted
    return col
