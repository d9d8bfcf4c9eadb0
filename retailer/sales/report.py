"""Print sales summaries and distributions as rich tables."""

import pandas as pd
from rich.console import Console
from rich.table import Table

from retailer.sales.models import SalesSummary

console = Console()


def _format_key(value) -> str:
    if isinstance(value, pd.Timestamp):
        return value.strftime("%Y-%m-%d")
    return str(value)


def _bucket_table(title: str, buckets: pd.DataFrame) -> Table:
    table = Table(title=title)
    for col in buckets.columns:
        table.add_column(str(col), justify="right" if col == buckets.columns[-1] else "left")

    for row in buckets.itertuples(index=False):
        *keys, value = row
        table.add_row(*(_format_key(k) for k in keys), f"{value:,.2f}")
    return table


def render_summary(summary: SalesSummary, out: Console | None = None) -> None:
    """Print daily/weekly/monthly revenue, discounts and the fitted trend."""
    out = out or console
    out.print(_bucket_table("Daily sales", summary.daily))
    out.print(_bucket_table("Weekly sales", summary.weekly))
    out.print(_bucket_table("Monthly sales", summary.monthly))

    trend = summary.trend
    direction = "up" if trend.slope > 0 else "down" if trend.slope < 0 else "flat"
    out.print(f"Total discount: [bold]{summary.total_discount:,.2f}[/bold]")
    out.print(
        f"Daily sales trend is {direction}: {trend.slope:+,.2f} per day "
        f"(R² {trend.r_squared:.2f}, {trend.n_points} days)"
    )


def render_distribution(buckets: pd.DataFrame, title: str = "Average items by hour", out: Console | None = None) -> None:
    """Print a bucket frame such as the hourly item-rate distribution."""
    (out or console).print(_bucket_table(title, buckets))
