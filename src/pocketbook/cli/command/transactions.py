"""
List transactions as a Rich table, most recent first.
"""

from __future__ import annotations

from typing import Optional

from rich.table import Table

from pocketbook.config import Settings
from pocketbook.model import Transaction
from pocketbook.services.aggregation import TransactionFilter
from pocketbook.workspace import Workspace

from .util import (
    AMOUNT_WIDTH,
    console,
    fmt_signed,
    open_service,
    parse_category,
    parse_date,
    parse_type,
    short_id,
)


def build_filter(
    *,
    start: Optional[str],
    end: Optional[str],
    categories: Optional[list[str]],
    type: Optional[str],
) -> TransactionFilter:
    """Translate CLI option strings into a TransactionFilter.

    Raises:
        OptionError: If any option value is invalid
    """
    return TransactionFilter(
        start_date=parse_date(start, "--start") if start else None,
        end_date=parse_date(end, "--end") if end else None,
        categories=[parse_category(c) for c in categories] if categories else None,
        type=parse_type(type) if type else None,
    )


def transactions_table(title: str, rows: list[Transaction], settings: Settings) -> Table:
    table = Table(title=title, show_lines=False)
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Type", no_wrap=True)
    table.add_column("Category", style="blue")
    table.add_column("Description", style="white", overflow="fold")
    table.add_column("Amount", justify="right", no_wrap=True, min_width=AMOUNT_WIDTH)

    for t in rows:
        table.add_row(
            t.date.isoformat(),
            short_id(t.id),
            t.type.value.capitalize(),
            t.category.label,
            t.description,
            fmt_signed(t.amount, t.type, settings),
        )
    return table


def run(
    *,
    start: Optional[str] = None,
    end: Optional[str] = None,
    categories: Optional[list[str]] = None,
    type: Optional[str] = None,
    limit: Optional[int] = None,
    workspace: Workspace,
) -> int:
    """Show filtered transactions, most recent first.

    Without a limit, the configured ``recent_limit`` applies when no filter is
    given; with any filter, all matches are shown.

    Returns:
        Exit code (0 = success, 1 = invalid options or store)
    """
    try:
        filters = build_filter(start=start, end=end, categories=categories, type=type)
        service, settings = open_service(workspace)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1

    rows = service.get_transactions(filters)
    total = len(rows)

    unfiltered = not (start or end or categories or type)
    max_rows = limit if limit is not None else (settings.recent_limit if unfiltered else None)
    if max_rows is not None:
        rows = rows[:max_rows]

    if not rows:
        console.print("[yellow]No transactions found.[/]")
        return 0

    console.print(transactions_table("Transactions", rows, settings))
    if len(rows) < total:
        console.print(f"[dim]Showing {len(rows)} of {total} transactions[/dim]")
    return 0
