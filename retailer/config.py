"""Column naming and analysis options for point-of-sale exports."""

import dataclasses
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from retailer.errors import ConfigurationError

type ConfigDict = dict[str, str | int | float | bool | dict[str, str]]


@dataclass(frozen=True)
class SalesColumns:
    date_var: str = "Date"
    time_var: str = "Time"
    sales_var: str = "Final.price..GBP."
    discount_var: str = "Discount..GBP."
    quantity_var: str = "Quantity"
    name_var: str = "Name"
    week_var: str = "Week"
    month_var: str = "Month"


@dataclass(frozen=True)
class AnalyticsConfig:
    columns: SalesColumns = field(default_factory=SalesColumns)
    format_time: str = "%H:%M"
    format_date: str | None = "%Y-%m-%d"
    weekdays: bool = True
    strict_weekends: bool = False
    plot: bool = False
    order_frequency: float = 31
    time_closure: str | None = None

    def replace(self, **overrides) -> "AnalyticsConfig":
        """Return a copy with the given options (or column names) swapped in."""
        column_names = {f.name for f in dataclasses.fields(SalesColumns)}
        column_overrides = {k: overrides.pop(k) for k in list(overrides) if k in column_names}
        unknown = set(overrides) - {f.name for f in dataclasses.fields(self)}
        if unknown:
            raise ConfigurationError(f"Unknown configuration options: {sorted(unknown)}")

        columns = dataclasses.replace(self.columns, **column_overrides)
        return dataclasses.replace(self, columns=columns, **overrides)


def load_config(profile: str = "izettle") -> AnalyticsConfig:
    """Return the configuration for a known export layout."""
    match profile:
        case "izettle":
            columns = SalesColumns()
        case "snake_case":
            columns = SalesColumns(
                date_var="date",
                time_var="time",
                sales_var="amount",
                discount_var="discount",
                quantity_var="quantity",
                name_var="name",
                week_var="week",
                month_var="month",
            )
        case other:
            raise ConfigurationError(f"Unknown export profile: {other}")

    return AnalyticsConfig(columns=columns)


def load_config_file(path: str | Path) -> AnalyticsConfig:
    """Load a TOML file with a [retailer] table and optional [retailer.columns].

    Options left out of the file keep the values of the selected profile.
    """
    with open(path, "rb") as f:
        raw: ConfigDict = tomllib.load(f).get("retailer", {})

    options = dict(raw)
    profile = options.pop("profile", "izettle")
    columns = options.pop("columns", {})
    if not isinstance(columns, dict):
        raise ConfigurationError("[retailer.columns] must be a table of column names")

    overlap = sorted(set(columns) & set(options))
    if overlap:
        raise ConfigurationError(f"Options {overlap} set in both [retailer] and [retailer.columns]")

    return load_config(profile).replace(**{**columns, **options})
