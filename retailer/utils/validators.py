"""Column checks and pandera validation helpers."""

from collections.abc import Iterable

import pandera as pa
import pandas as pd
from pandera import DataFrameSchema

from retailer.errors import ConfigurationError

type ValidationResult = dict[str, str | bool | list[str]]


def require_columns(df: pd.DataFrame, columns: Iterable[str]) -> None:
    """Raise ConfigurationError unless every named column is present."""
    missing = [col for col in dict.fromkeys(columns) if col not in df.columns]

    match missing:
        case []:
            return
        case [col]:
            raise ConfigurationError(f"Column '{col}' not found in input table")
        case cols:
            raise ConfigurationError(f"Columns {cols} not found in input table")


def validate_dataframe(df: pd.DataFrame, schema: DataFrameSchema) -> ValidationResult:
    """Validate a DataFrame against a pandera schema."""
    try:
        schema.validate(df, lazy=True)
        return {"valid": True, "status": "ok", "errors": []}
    except pa.errors.SchemaErrors as e:
        errors = []
        for _, row in e.failure_cases.iterrows():
            match row.to_dict():
                case {"column": col, "check": check, "failure_case": val}:
                    errors.append(f"Column '{col}' failed check '{check}': {val}")
                case failure:
                    errors.append(f"Validation failure: {failure}")
        return {"valid": False, "status": "error", "errors": errors}


def count_parse_failures(raw: pd.Series, parsed: pd.Series) -> int:
    """Number of values that were present before parsing but missing after."""
    return int((raw.notna() & parsed.isna()).sum())
