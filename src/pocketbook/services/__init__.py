"""
Service layer for pocketbook.

This module contains the functional core business logic separated from the
imperative shell (CLI). Aggregation and progress functions are pure; the
FinanceService is the only piece that talks to the record store.

Principles:
- No UI framework imports (Rich, Typer)
- All dependencies injected through constructors or parameters
- Functions return data structures, not void
- Fully testable with simple unit tests
"""

from pocketbook.services.aggregation import (
    FinancialSummary,
    MonthlyTrend,
    TransactionFilter,
    compute_category_spend,
    compute_summary,
    contribute_to_goal,
    filter_transactions,
    refresh_budget_spend,
)
from pocketbook.services.progress import (
    BudgetStatus,
    BudgetUsage,
    GoalProgress,
    budget_usage,
    goal_progress,
)
from pocketbook.services.finance_service import FinanceService

__all__ = [
    "FinancialSummary",
    "MonthlyTrend",
    "TransactionFilter",
    "compute_category_spend",
    "compute_summary",
    "contribute_to_goal",
    "filter_transactions",
    "refresh_budget_spend",
    "BudgetStatus",
    "BudgetUsage",
    "GoalProgress",
    "budget_usage",
    "goal_progress",
    "FinanceService",
]
