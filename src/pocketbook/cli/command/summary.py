"""
Monthly financial summary: totals, expenses by category and the trend.
"""

from __future__ import annotations

from typing import Optional

from rich.table import Table

from pocketbook.config import Settings
from pocketbook.services.aggregation import FinancialSummary, month_label
from pocketbook.workspace import Workspace

from .util import console, fmt_amount, open_service, parse_month


def run(*, month: Optional[str] = None, workspace: Workspace) -> int:
    """Display the financial summary for a month (default: current month).

    Args:
        month: Month as YYYY-MM
        workspace: Workspace providing the record store

    Returns:
        Exit code (0 = success, 1 = invalid month or store)
    """
    try:
        service, settings = open_service(workspace)
        reference = parse_month(month) if month else service.today()
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1

    summary = service.get_financial_summary(reference)
    _display_summary(summary, month_label(reference, settings.month_label_format), settings)
    return 0


def _display_summary(summary: FinancialSummary, label: str, settings: Settings) -> None:
    console.print(f"[bold]Summary for {label}[/]\n")
    console.print(f"[bold]Income:[/]   [green]{settings.money(summary.total_income)}[/]")
    console.print(f"[bold]Expenses:[/] [red]{settings.money(summary.total_expenses)}[/]")
    console.print("[bold]Balance:[/]  ", fmt_amount(summary.balance, settings))

    if summary.expenses_by_category:
        table = Table(title="Expenses by Category")
        table.add_column("Category", style="cyan")
        table.add_column("Amount", style="yellow", justify="right")
        table.add_column("Share", style="magenta", justify="right")
        ordered = sorted(summary.expenses_by_category.items(), key=lambda kv: kv[1], reverse=True)
        for category, amount in ordered:
            share = amount / summary.total_expenses * 100 if summary.total_expenses else 0
            table.add_row(category.label, settings.money(amount), f"{share:.1f}%")
        console.print()
        console.print(table)
    else:
        console.print("\n[dim]No expenses this month.[/dim]")

    trend = Table(title="Monthly Trend")
    trend.add_column("Month", style="cyan", no_wrap=True)
    trend.add_column("Income", style="green", justify="right")
    trend.add_column("Expenses", style="red", justify="right")
    trend.add_column("Balance", justify="right")
    for entry in summary.monthly_trend:
        trend.add_row(
            entry.month,
            settings.money(entry.income),
            settings.money(entry.expenses),
            fmt_amount(entry.balance, settings),
        )
    console.print()
    console.print(trend)
