"""
Budget usage and goal progress views.

Derived, display-ready numbers for budgets and goals. Pure functions; the
caller supplies today's date.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import StrEnum

from pocketbook.model import Budget, Goal

HUNDRED = Decimal("100")


class BudgetStatus(StrEnum):
    OK = "ok"
    WARNING = "warning"
    OVER = "over"


@dataclass
class BudgetUsage:
    """Spending against a budget limit."""

    budget: Budget
    spent: Decimal
    limit: Decimal
    remaining: Decimal  # Negative when over the limit
    percent_used: Decimal
    status: BudgetStatus

    @property
    def is_over_budget(self) -> bool:
        return self.status == BudgetStatus.OVER


@dataclass
class GoalProgress:
    goal: Goal
    percent: Decimal
    bar_percent: Decimal  # Capped at 100 for progress bars
    days_left: int
    expired: bool
    completed: bool


def budget_usage(budget: Budget, *, warning_percent: float = 80) -> BudgetUsage:
    """Compare a budget's cached spend with its limit.

    Status is ``over`` above 100%, ``warning`` above ``warning_percent`` and
    ``ok`` otherwise. Refresh the budget spend first for current numbers.
    """
    spent = budget.current_spent
    percent = spent / budget.limit * HUNDRED

    if percent > HUNDRED:
        status = BudgetStatus.OVER
    elif percent > Decimal(str(warning_percent)):
        status = BudgetStatus.WARNING
    else:
        status = BudgetStatus.OK

    return BudgetUsage(
        budget=budget,
        spent=spent,
        limit=budget.limit,
        remaining=budget.limit - spent,
        percent_used=percent,
        status=status,
    )


def goal_progress(goal: Goal, today: date) -> GoalProgress:
    """Progress toward a goal and days remaining until its deadline."""
    percent = goal.current_amount / goal.target_amount * HUNDRED
    days_left = (goal.deadline - today).days
    return GoalProgress(
        goal=goal,
        percent=percent,
        bar_percent=max(Decimal("0"), min(percent, HUNDRED)),
        days_left=days_left,
        expired=days_left < 0,
        completed=goal.completed,
    )


__all__ = [
    "BudgetStatus",
    "BudgetUsage",
    "GoalProgress",
    "budget_usage",
    "goal_progress",
]
