"""Command-line runner for analysing a point-of-sale export."""

import argparse
import logging
import sys

import matplotlib.pyplot as plt
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from retailer import sales
from retailer.config import AnalyticsConfig, load_config, load_config_file
from retailer.errors import RetailerError
from retailer.sales.report import render_distribution, render_summary
from retailer.utils.io import read_sales_file

console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Analyse unitary sales from a point-of-sale export")
    parser.add_argument("path", help="CSV or XLSX export of unitary sales")
    parser.add_argument("--config", type=str, help="TOML file with a [retailer] table")
    parser.add_argument("--profile", type=str, default="izettle", help="Column naming profile")
    parser.add_argument("--validate", action="store_true", help="Only validate the export")
    parser.add_argument("--closure", type=str, metavar="TIME", help="Estimate the cost of closing at TIME")
    parser.add_argument("--products", nargs="+", metavar="NAME", help="Revenue per order cycle for a product line")
    parser.add_argument("--order-frequency", type=float, help="Order cycles covered by the export")
    parser.add_argument("--hourly", action="store_true", help="Average items sold per hour of day")
    parser.add_argument("--all-days", action="store_true", help="Do not apply the weekday filter")
    parser.add_argument("--plot", action="store_true", help="Show a bar chart of the hourly distribution")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress")
    return parser


def resolve_config(args: argparse.Namespace) -> AnalyticsConfig:
    config = load_config_file(args.config) if args.config else load_config(args.profile)

    overrides = {}
    if args.all_days:
        overrides["weekdays"] = False
    if args.plot:
        overrides["plot"] = True
    if args.order_frequency is not None:
        overrides["order_frequency"] = args.order_frequency
    if args.closure:
        overrides["time_closure"] = args.closure

    return config.replace(**overrides)


def run(args: argparse.Namespace) -> int:
    config = resolve_config(args)
    df = read_sales_file(args.path)

    if args.validate:
        result = sales.validate(df, config)
        table = Table(title="Validation Results")
        table.add_column("File")
        table.add_column("Valid")
        table.add_column("Details")
        valid = result["status"] == "ok"
        status = "[green]✓[/green]" if valid else "[red]✗[/red]"
        detail = result.get("message", f"{result.get('row_count', 0):,} rows")
        table.add_row(args.path, status, detail)
        console.print(table)
        return 0 if valid else 1

    if config.time_closure:
        cost = sales.closure_opportunity_cost(df, config=config)
        console.print(f"Average daily sales after {config.time_closure}: [bold]{cost:,.2f}[/bold]")

    if args.products:
        per_cycle = sales.segment_product_line(df, args.products, config=config)
        console.print(
            f"Product line revenue per order cycle ({config.order_frequency:g} cycles): "
            f"[bold]{per_cycle:,.2f}[/bold]"
        )

    if args.hourly:
        distribution = sales.mean_items_by_hour(df, config=config)
        render_distribution(distribution, out=console)
        if config.plot:
            plt.show()

    if not (config.time_closure or args.products or args.hourly):
        render_summary(sales.build_sales_summary(df, config), out=console)

    return 0


def main():
    args = build_parser().parse_args()
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    try:
        sys.exit(run(args))
    except (RetailerError, ValueError, FileNotFoundError) as exc:
        console.print(f"[red]{exc}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
