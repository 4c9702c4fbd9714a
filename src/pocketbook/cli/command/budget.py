"""
Budgets: list usage against limits, create, remove and refresh spend.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from rich.table import Table

from pocketbook.config import Settings
from pocketbook.model import BudgetPeriod
from pocketbook.services.aggregation import month_bounds
from pocketbook.services.progress import BudgetStatus, BudgetUsage, budget_usage
from pocketbook.workspace import Workspace

from .util import (
    AMOUNT_WIDTH,
    OptionError,
    console,
    open_service,
    parse_amount,
    parse_category,
    parse_date,
    resolve_record,
    short_id,
)


def default_window(period: BudgetPeriod, today: date, start: date | None = None) -> tuple[date, date]:
    """Window for a new budget when dates are not fully given.

    Monthly budgets cover the calendar month of ``start`` (or today); weekly
    budgets cover seven days from ``start`` (or the Monday of this week).
    """
    if period == BudgetPeriod.weekly:
        first = start or (today - timedelta(days=today.weekday()))
        return first, first + timedelta(days=6)
    if start is not None:
        return start, month_bounds(start)[1]
    return month_bounds(today)


def run(
    *,
    add: Optional[str] = None,
    limit: Optional[str] = None,
    period: str = "monthly",
    start: Optional[str] = None,
    end: Optional[str] = None,
    remove: Optional[str] = None,
    refresh: bool = False,
    workspace: Workspace,
) -> int:
    """Manage budgets. With no action options, list budgets with usage.

    Args:
        add: Category to create a budget for
        limit: Spending limit for the new budget
        period: 'monthly' or 'weekly'
        start: Window start (YYYY-MM-DD)
        end: Window end (YYYY-MM-DD)
        remove: Budget id (or unique prefix) to delete
        refresh: Recompute spend for every budget before listing
        workspace: Workspace providing the record store

    Returns:
        Exit code (0 = success, 1 = error)
    """
    if add and remove:
        console.print("[red]Error:[/] Use only one of --add or --remove")
        return 1

    try:
        service, settings = open_service(workspace)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1

    if add:
        return _add_budget(service, settings, add, limit, period, start, end)

    if remove:
        try:
            target = resolve_record(remove, service.get_budgets(), "budget")
        except OptionError as e:
            console.print(f"[red]Error:[/] {e}")
            return 1
        if target is None or not service.delete_budget(target.id):
            console.print(f"[red]Error:[/] Budget not found: {remove}")
            return 1
        console.print(f"[green]Removed budget[/] {short_id(target.id)} ({target.category.label})")
        return 0

    if refresh:
        service.refresh_budget_spend()
        console.print("[green]Budget spend refreshed.[/]")

    usages = [
        budget_usage(b, warning_percent=settings.budget_warning_percent)
        for b in service.get_budgets()
    ]
    _display_budget_report(usages, settings)
    return 0


def _add_budget(service, settings: Settings, category, limit, period, start, end) -> int:
    try:
        if limit is None:
            raise OptionError("--limit is required with --add")
        budget_category = parse_category(category)
        budget_limit = parse_amount(limit, "--limit")
        if budget_limit <= 0:
            raise OptionError("--limit must be greater than zero")
        try:
            budget_period = BudgetPeriod(period.strip().lower())
        except ValueError as e:
            raise OptionError(f"--period must be 'monthly' or 'weekly', got '{period}'") from e
        start_date = parse_date(start, "--start") if start else None
        window_start, window_end = default_window(budget_period, service.today(), start_date)
        if end:
            window_end = parse_date(end, "--end")
        budget = service.create_budget(
            category=budget_category,
            limit=budget_limit,
            period=budget_period,
            start_date=window_start,
            end_date=window_end,
        )
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1

    usage = budget_usage(budget, warning_percent=settings.budget_warning_percent)
    console.print(
        f"[green]Created {budget.period} budget[/] {short_id(budget.id)} for {budget.category.label}: "
        f"{settings.money(budget.limit)} from {budget.start_date.isoformat()} to {budget.end_date.isoformat()} "
        f"({settings.money(usage.spent)} spent so far)"
    )
    return 0


def _display_budget_report(usages: list[BudgetUsage], settings: Settings) -> None:
    if not usages:
        console.print("[yellow]No budgets defined.[/] Use --add CATEGORY --limit AMOUNT to create one.")
        return

    table = Table(title="Budget Report", show_lines=True)
    table.add_column("Budget", style="cyan", overflow="fold")
    table.add_column("Window", style="white", overflow="fold")
    table.add_column("Limit", style="green", justify="right", no_wrap=True, min_width=AMOUNT_WIDTH)
    table.add_column("Spent", style="yellow", justify="right", no_wrap=True, min_width=AMOUNT_WIDTH)
    table.add_column("Remaining", justify="right", no_wrap=True, min_width=AMOUNT_WIDTH)
    table.add_column("% Used", justify="right", no_wrap=True, min_width=6)

    for usage in usages:
        b = usage.budget
        if usage.remaining >= 0:
            remaining_str = f"[green]{settings.money(usage.remaining)}[/]"
        else:
            remaining_str = f"[red]{settings.money(usage.remaining)}[/]"

        if usage.is_over_budget:
            pct_str = f"[red bold]{usage.percent_used:.1f}%[/]"
        elif usage.status == BudgetStatus.WARNING:
            pct_str = f"[yellow]{usage.percent_used:.1f}%[/]"
        else:
            pct_str = f"[green]{usage.percent_used:.1f}%[/]"

        table.add_row(
            f"{b.category.label}\n[dim]{short_id(b.id)} {b.period.value}[/dim]",
            f"{b.start_date.isoformat()}\n{b.end_date.isoformat()}",
            settings.money(usage.limit),
            settings.money(usage.spent),
            remaining_str,
            pct_str,
        )

    console.print(table)

    over = sum(1 for u in usages if u.is_over_budget)
    warning = sum(1 for u in usages if u.status == BudgetStatus.WARNING)
    if over:
        plural = "" if over == 1 else "s"
        console.print(f"\n[red]⚠ {over} budget{plural} over limit[/]")
    if warning:
        plural = "" if warning == 1 else "s"
        console.print(f"[yellow]⚠ {warning} budget{plural} above {settings.budget_warning_percent:g}% of limit[/]")
