"""
Aggregation engine - functional core for summaries, trends and budget spend.

Everything here is a pure function of its inputs. "Now" is never read from
the system clock: callers pass the reference date explicitly.

NO IMPORTS FROM:
- rich (console, table, prompt)
- typer
- pocketbook.storage

Ordering contract: filter_transactions returns the most recent first and
keeps the input order among transactions sharing a date. Listings and
reports depend on that order.
"""

from __future__ import annotations

import calendar
from collections.abc import Collection, Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from pocketbook.model import Budget, Category, Goal, Transaction, TransactionType

ZERO = Decimal("0")
DEFAULT_TREND_MONTHS = 6
DEFAULT_LABEL_FORMAT = "%b %Y"


@dataclass
class TransactionFilter:
    """Optional, AND-combined transaction filters.

    Date bounds are inclusive. An empty or absent category collection means
    no category filtering.
    """

    start_date: date | None = None
    end_date: date | None = None
    categories: Collection[Category] | None = None
    type: TransactionType | None = None


@dataclass
class MonthlyTrend:
    """Income and expense totals for one calendar month."""

    month: str
    income: Decimal
    expenses: Decimal
    balance: Decimal
    start: date
    end: date


@dataclass
class FinancialSummary:
    """Totals for the reference month plus the trailing monthly trend."""

    total_income: Decimal
    total_expenses: Decimal
    balance: Decimal
    expenses_by_category: dict[Category, Decimal] = field(default_factory=dict)
    monthly_trend: list[MonthlyTrend] = field(default_factory=list)


def month_bounds(day: date) -> tuple[date, date]:
    """First and last day of the month containing ``day``."""
    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last)


def shift_months(day: date, months: int) -> date:
    """First day of the month ``months`` away from ``day``'s month (negative = earlier)."""
    index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(index, 12)
    return date(year, month + 1, 1)


def month_label(day: date, fmt: str = DEFAULT_LABEL_FORMAT) -> str:
    """Short month + year label, e.g. ``Jan 2024``."""
    return day.strftime(fmt)


def filter_transactions(
    transactions: Iterable[Transaction],
    filters: TransactionFilter | None = None,
) -> list[Transaction]:
    """Filter transactions and order them by date, most recent first.

    The sort is stable, so transactions on the same date keep their input
    order. The input is never modified.
    """
    f = filters or TransactionFilter()
    categories = set(f.categories) if f.categories else None

    selected = [
        t
        for t in transactions
        if (f.start_date is None or t.date >= f.start_date)
        and (f.end_date is None or t.date <= f.end_date)
        and (categories is None or t.category in categories)
        and (f.type is None or t.type == f.type)
    ]
    return sorted(selected, key=lambda t: t.date, reverse=True)


def _totals(transactions: Iterable[Transaction]) -> tuple[Decimal, Decimal]:
    income = ZERO
    expenses = ZERO
    for t in transactions:
        if t.is_income:
            income += t.amount
        elif t.is_expense:
            expenses += t.amount
    return income, expenses


def compute_category_spend(
    transactions: Iterable[Transaction],
    category: Category,
    start_date: date,
    end_date: date,
) -> Decimal:
    """Sum of expenses in ``category`` dated within ``[start_date, end_date]``.

    Returns 0 when nothing matches.
    """
    matches = filter_transactions(
        transactions,
        TransactionFilter(
            start_date=start_date,
            end_date=end_date,
            categories=[category],
            type=TransactionType.EXPENSE,
        ),
    )
    return sum((t.amount for t in matches), ZERO)


def compute_monthly_trend(
    transactions: Sequence[Transaction],
    reference_date: date,
    *,
    months: int = DEFAULT_TREND_MONTHS,
    label_format: str = DEFAULT_LABEL_FORMAT,
) -> list[MonthlyTrend]:
    """Per-month totals for the ``months`` months ending with the reference month.

    Ordered oldest to newest.
    """
    trend: list[MonthlyTrend] = []
    for i in range(months - 1, -1, -1):
        start, end = month_bounds(shift_months(reference_date, -i))
        window = filter_transactions(transactions, TransactionFilter(start_date=start, end_date=end))
        income, expenses = _totals(window)
        trend.append(
            MonthlyTrend(
                month=month_label(start, label_format),
                income=income,
                expenses=expenses,
                balance=income - expenses,
                start=start,
                end=end,
            )
        )
    return trend


def compute_summary(
    transactions: Iterable[Transaction],
    reference_date: date,
    *,
    trend_months: int = DEFAULT_TREND_MONTHS,
    label_format: str = DEFAULT_LABEL_FORMAT,
) -> FinancialSummary:
    """Summarize the month containing ``reference_date``.

    Categories without expenses in the month are omitted from
    ``expenses_by_category`` rather than reported as zero.
    """
    all_transactions = list(transactions)
    start, end = month_bounds(reference_date)
    monthly = filter_transactions(all_transactions, TransactionFilter(start_date=start, end_date=end))

    total_income, total_expenses = _totals(monthly)

    by_category: dict[Category, Decimal] = {}
    for t in monthly:
        if t.is_expense:
            by_category[t.category] = by_category.get(t.category, ZERO) + t.amount

    return FinancialSummary(
        total_income=total_income,
        total_expenses=total_expenses,
        balance=total_income - total_expenses,
        expenses_by_category=by_category,
        monthly_trend=compute_monthly_trend(
            all_transactions,
            reference_date,
            months=trend_months,
            label_format=label_format,
        ),
    )


def refresh_budget_spend(
    budgets: Iterable[Budget],
    transactions: Sequence[Transaction],
) -> list[Budget]:
    """Recompute ``current_spent`` for every budget from the transactions.

    Returns new Budget objects in the same order; calling it again with the
    same transactions yields equal budgets.
    """
    return [
        b.model_copy(
            update={
                "current_spent": compute_category_spend(
                    transactions, b.category, b.start_date, b.end_date
                )
            }
        )
        for b in budgets
    ]


def contribute_to_goal(goals: list[Goal], goal_id: str, amount: Decimal) -> bool:
    """Add ``amount`` to a goal's progress in place.

    The matched goal is replaced with an updated copy; ``completed`` follows
    from the new amount. Negative amounts are accepted.

    Returns:
        False if no goal has ``goal_id``, True otherwise
    """
    for index, goal in enumerate(goals):
        if goal.id == goal_id:
            goals[index] = goal.with_contribution(amount)
            return True
    return False


__all__ = [
    "FinancialSummary",
    "MonthlyTrend",
    "TransactionFilter",
    "compute_category_spend",
    "compute_monthly_trend",
    "compute_summary",
    "contribute_to_goal",
    "filter_transactions",
    "month_bounds",
    "month_label",
    "refresh_budget_spend",
    "shift_months",
]
