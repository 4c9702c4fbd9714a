"""
Finance service - stateful facade over the record store.

Loads the three collections once, keeps them in memory, runs the aggregation
engine over them and persists every mutation back through the store.

Responsibilities:
- Create, update and delete transactions
- Create budgets and keep their ``current_spent`` projection fresh
- Create goals and record contributions
- Answer summary and listing queries for a reference date

Lookups that miss return None/False; nothing is raised for a NotFound.

NO IMPORTS FROM:
- rich (console, table, prompt)
- typer
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime
from decimal import Decimal
from uuid import uuid4

from pocketbook.model import (
    Budget,
    BudgetPeriod,
    Category,
    Goal,
    Transaction,
    TransactionType,
    TransactionUpdate,
)
from pocketbook.services import aggregation
from pocketbook.services.aggregation import FinancialSummary, TransactionFilter
from pocketbook.storage.record_io import (
    load_budgets,
    load_goals,
    load_transactions,
    save_budgets,
    save_goals,
    save_transactions,
)
from pocketbook.storage.record_store import RecordStore

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return str(uuid4())


class FinanceService:
    """In-memory view of the store with persistence on every change."""

    def __init__(
        self,
        store: RecordStore,
        *,
        today: Callable[[], date] = date.today,
        now: Callable[[], datetime] = datetime.now,
        id_factory: Callable[[], str] = _new_id,
        trend_months: int = aggregation.DEFAULT_TREND_MONTHS,
        label_format: str = aggregation.DEFAULT_LABEL_FORMAT,
    ):
        """
        Initialize the service and load all collections.

        Args:
            store: Record store to read from and persist to
            today: Clock for the default reference date
            now: Clock for transaction creation timestamps
            id_factory: Generator for new record identifiers
            trend_months: Months included in the summary trend
            label_format: strftime format for trend labels

        Raises:
            RecordError: If a stored record is invalid
        """
        self.store = store
        self._today = today
        self._now = now
        self._new_id = id_factory
        self.trend_months = trend_months
        self.label_format = label_format

        self._transactions: list[Transaction] = load_transactions(store)
        self._budgets: list[Budget] = load_budgets(store)
        self._goals: list[Goal] = load_goals(store)

    # ------------------------------
    # Raw accessors
    # ------------------------------

    def get_all_transactions(self) -> list[Transaction]:
        """All transactions in insertion order."""
        return list(self._transactions)

    def get_budgets(self) -> list[Budget]:
        return list(self._budgets)

    def get_goals(self) -> list[Goal]:
        return list(self._goals)

    def find_transaction(self, transaction_id: str) -> Transaction | None:
        return next((t for t in self._transactions if t.id == transaction_id), None)

    def find_budget(self, budget_id: str) -> Budget | None:
        return next((b for b in self._budgets if b.id == budget_id), None)

    def find_goal(self, goal_id: str) -> Goal | None:
        return next((g for g in self._goals if g.id == goal_id), None)

    # ------------------------------
    # Transactions
    # ------------------------------

    def add_transaction(
        self,
        *,
        amount: Decimal,
        description: str,
        type: TransactionType,
        category: Category,
        date: date,
    ) -> Transaction:
        """Record a new transaction and refresh budget spend."""
        transaction = Transaction(
            id=self._new_id(),
            amount=amount,
            description=description,
            type=type,
            category=category,
            date=date,
            created_at=self._now(),
        )
        self._transactions.append(transaction)
        self._refresh_budgets()
        self._save_all()
        logger.info("Added %s transaction %s", transaction.type, transaction.id)
        return transaction

    def update_transaction(
        self, transaction_id: str, updates: TransactionUpdate
    ) -> Transaction | None:
        """Apply a partial update.

        Returns:
            The updated transaction, or None if the id is unknown
        """
        for index, existing in enumerate(self._transactions):
            if existing.id == transaction_id:
                updated = updates.apply_to(existing)
                self._transactions[index] = updated
                self._refresh_budgets()
                self._save_all()
                logger.info("Updated transaction %s (%s)", transaction_id, ", ".join(updates.changes()))
                return updated
        logger.debug("Transaction not found for update: %s", transaction_id)
        return None

    def delete_transaction(self, transaction_id: str) -> bool:
        """Remove a transaction. Returns False if the id is unknown."""
        for index, existing in enumerate(self._transactions):
            if existing.id == transaction_id:
                del self._transactions[index]
                self._refresh_budgets()
                self._save_all()
                logger.info("Deleted transaction %s", transaction_id)
                return True
        logger.debug("Transaction not found for delete: %s", transaction_id)
        return False

    def get_transactions(self, filters: TransactionFilter | None = None) -> list[Transaction]:
        """Filtered transactions, most recent first."""
        return aggregation.filter_transactions(self._transactions, filters)

    def recent_transactions(self, limit: int = 10) -> list[Transaction]:
        return self.get_transactions()[:limit]

    # ------------------------------
    # Budgets
    # ------------------------------

    def create_budget(
        self,
        *,
        category: Category,
        limit: Decimal,
        period: BudgetPeriod,
        start_date: date,
        end_date: date,
    ) -> Budget:
        """Create a budget with its spend computed from existing transactions."""
        budget = Budget(
            id=self._new_id(),
            category=category,
            limit=limit,
            period=period,
            start_date=start_date,
            end_date=end_date,
            current_spent=aggregation.compute_category_spend(
                self._transactions, category, start_date, end_date
            ),
        )
        self._budgets.append(budget)
        self._save_all()
        logger.info("Created %s budget %s for %s", budget.period, budget.id, budget.category)
        return budget

    def delete_budget(self, budget_id: str) -> bool:
        before = len(self._budgets)
        self._budgets = [b for b in self._budgets if b.id != budget_id]
        if len(self._budgets) == before:
            logger.debug("Budget not found for delete: %s", budget_id)
            return False
        self._save_all()
        logger.info("Deleted budget %s", budget_id)
        return True

    def refresh_budget_spend(self) -> list[Budget]:
        """Recompute every budget's spend and persist."""
        self._refresh_budgets()
        self._save_all()
        return self.get_budgets()

    def category_spend(self, category: Category, start_date: date, end_date: date) -> Decimal:
        return aggregation.compute_category_spend(self._transactions, category, start_date, end_date)

    # ------------------------------
    # Goals
    # ------------------------------

    def create_goal(
        self,
        *,
        title: str,
        target_amount: Decimal,
        deadline: date,
        category: Category,
    ) -> Goal:
        """Create a goal with no progress yet."""
        goal = Goal(
            id=self._new_id(),
            title=title,
            target_amount=target_amount,
            current_amount=Decimal("0"),
            deadline=deadline,
            category=category,
        )
        self._goals.append(goal)
        self._save_all()
        logger.info("Created goal %s", goal.id)
        return goal

    def contribute_to_goal(self, goal_id: str, amount: Decimal) -> bool:
        """Add to a goal's progress and persist.

        Negative amounts are accepted and reduce progress.

        Returns:
            False if the goal id is unknown
        """
        if not aggregation.contribute_to_goal(self._goals, goal_id, amount):
            logger.debug("Goal not found for contribution: %s", goal_id)
            return False
        self._save_all()
        logger.info("Contributed %s to goal %s", amount, goal_id)
        return True

    def delete_goal(self, goal_id: str) -> bool:
        before = len(self._goals)
        self._goals = [g for g in self._goals if g.id != goal_id]
        if len(self._goals) == before:
            logger.debug("Goal not found for delete: %s", goal_id)
            return False
        self._save_all()
        logger.info("Deleted goal %s", goal_id)
        return True

    # ------------------------------
    # Reporting
    # ------------------------------

    def today(self) -> date:
        return self._today()

    def get_financial_summary(self, reference_date: date | None = None) -> FinancialSummary:
        """Summary for the month of ``reference_date`` (default: today)."""
        return aggregation.compute_summary(
            self._transactions,
            reference_date or self._today(),
            trend_months=self.trend_months,
            label_format=self.label_format,
        )

    def clear_all(self) -> None:
        """Remove every transaction, budget and goal."""
        self._transactions = []
        self._budgets = []
        self._goals = []
        self.store.clear()
        logger.info("Cleared all records")

    # ------------------------------
    # Internals
    # ------------------------------

    def _refresh_budgets(self) -> None:
        self._budgets = aggregation.refresh_budget_spend(self._budgets, self._transactions)

    def _save_all(self) -> None:
        save_transactions(self.store, self._transactions)
        save_budgets(self.store, self._budgets)
        save_goals(self.store, self._goals)


__all__ = ["FinanceService"]
