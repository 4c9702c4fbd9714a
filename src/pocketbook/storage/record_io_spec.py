"""
Tests for typed record IO on top of the record store.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from pocketbook.model import Budget, BudgetPeriod, Category, Goal, Transaction, TransactionType
from pocketbook.storage.record_io import (
    RecordError,
    load_budgets,
    load_goals,
    load_transactions,
    save_budgets,
    save_goals,
    save_transactions,
)
from pocketbook.storage.record_store import TRANSACTIONS, RecordStore


@pytest.fixture
def store(tmp_path):
    return RecordStore(tmp_path / "pocketbook.json")


class DescribeTransactionIO:
    def it_should_round_trip_transactions_in_order(self, store):
        txns = [
            Transaction(
                id=f"t{i}",
                amount=Decimal("10.00") * i,
                description=f"Item {i}",
                type=TransactionType.EXPENSE,
                category=Category.FOOD,
                date=date(2024, 1, 10 - i),
                created_at=datetime(2024, 1, 10, 9, i),
            )
            for i in range(1, 4)
        ]
        save_transactions(store, txns)
        assert load_transactions(store) == txns

    def it_should_store_dates_as_iso_strings(self, store):
        save_transactions(
            store,
            [
                Transaction(
                    id="t1",
                    amount=Decimal("5"),
                    type=TransactionType.INCOME,
                    category=Category.OTHER,
                    date=date(2024, 3, 9),
                    created_at=datetime(2024, 3, 9, 10, 0),
                )
            ],
        )
        raw = store.get(TRANSACTIONS)[0]
        assert raw["date"] == "2024-03-09"
        assert raw["createdAt"] == "2024-03-09T10:00:00"

    def it_should_name_the_invalid_record(self, store):
        store.set(TRANSACTIONS, [{"id": "bad", "amount": -1}])
        with pytest.raises(RecordError, match=r"#0 in transactions \(id=bad\)"):
            load_transactions(store)


class DescribeBudgetAndGoalIO:
    def it_should_round_trip_budgets(self, store):
        budgets = [
            Budget(
                id="b1",
                category=Category.FOOD,
                limit=Decimal("500"),
                period=BudgetPeriod.monthly,
                current_spent=Decimal("200"),
                start_date=date(2024, 1, 1),
                end_date=date(2024, 1, 31),
            )
        ]
        save_budgets(store, budgets)
        assert load_budgets(store) == budgets

    def it_should_round_trip_goals(self, store):
        goals = [
            Goal(
                id="g1",
                title="Bike",
                target_amount=Decimal("800"),
                current_amount=Decimal("120.50"),
                deadline=date(2024, 8, 1),
                category=Category.TRANSPORT,
            )
        ]
        save_goals(store, goals)
        loaded = load_goals(store)
        assert loaded == goals
        assert loaded[0].completed is False

    def it_should_load_empty_lists_from_missing_store(self, store):
        assert load_budgets(store) == []
        assert load_goals(store) == []
