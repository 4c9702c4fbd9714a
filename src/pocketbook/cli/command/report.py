"""
Financial report for a date range: period totals plus every transaction.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from pocketbook.model import Transaction
from pocketbook.services.aggregation import TransactionFilter, month_bounds
from pocketbook.workspace import Workspace

from .transactions import transactions_table
from .util import console, fmt_amount, open_service, parse_date


@dataclass
class PeriodReport:
    start: date
    end: date
    income: Decimal
    expenses: Decimal
    transactions: list[Transaction]

    @property
    def balance(self) -> Decimal:
        return self.income - self.expenses


def build_report(transactions: list[Transaction], start: date, end: date) -> PeriodReport:
    """Totals over already-filtered transactions for the period."""
    income = sum((t.amount for t in transactions if t.is_income), Decimal("0"))
    expenses = sum((t.amount for t in transactions if t.is_expense), Decimal("0"))
    return PeriodReport(start=start, end=end, income=income, expenses=expenses, transactions=transactions)


def run(
    *,
    start: Optional[str] = None,
    end: Optional[str] = None,
    workspace: Workspace,
) -> int:
    """Display the financial report for ``[start, end]``.

    Defaults to the first day of the current month through today.

    Returns:
        Exit code (0 = success, 1 = invalid options or store)
    """
    try:
        service, settings = open_service(workspace)
        today = service.today()
        start_date = parse_date(start, "--start") if start else month_bounds(today)[0]
        end_date = parse_date(end, "--end") if end else today
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1

    if end_date < start_date:
        console.print("[red]Error:[/] --end must not be before --start")
        return 1

    rows = service.get_transactions(TransactionFilter(start_date=start_date, end_date=end_date))
    report = build_report(rows, start_date, end_date)

    console.print(f"[bold]Financial Report[/] ({start_date.isoformat()} to {end_date.isoformat()})\n")
    console.print(f"[bold]Income:[/]   [green]{settings.money(report.income)}[/]")
    console.print(f"[bold]Expenses:[/] [red]{settings.money(report.expenses)}[/]")
    console.print("[bold]Balance:[/]  ", fmt_amount(report.balance, settings))
    status = "[green]Positive[/]" if report.balance >= 0 else "[red]Negative[/]"
    console.print(f"[bold]Status:[/]   {status}\n")

    if not report.transactions:
        console.print("[yellow]No transactions in this period.[/]")
        return 0

    console.print(transactions_table("Transactions", report.transactions, settings))
    return 0
