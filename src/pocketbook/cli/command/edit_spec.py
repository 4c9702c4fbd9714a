"""Tests for edit and delete commands."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from pathlib import Path
from tempfile import TemporaryDirectory

from pocketbook.cli.command import delete as delete_cmd
from pocketbook.cli.command.edit import run
from pocketbook.model import BudgetPeriod, Category, TransactionType
from pocketbook.services.finance_service import FinanceService
from pocketbook.storage.record_store import RecordStore
from pocketbook.workspace import Workspace


def _seed(workspace: Workspace) -> FinanceService:
    ids = iter(["food-0001", "food-0002", "budget-01"])
    service = FinanceService(RecordStore(workspace.store_path), id_factory=lambda: next(ids))
    service.add_transaction(
        amount=Decimal("200"),
        description="Groceries",
        type=TransactionType.EXPENSE,
        category=Category.FOOD,
        date=date(2024, 1, 10),
    )
    service.add_transaction(
        amount=Decimal("30"),
        description="Snacks",
        type=TransactionType.EXPENSE,
        category=Category.FOOD,
        date=date(2024, 1, 12),
    )
    service.create_budget(
        category=Category.FOOD,
        limit=Decimal("500"),
        period=BudgetPeriod.monthly,
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 31),
    )
    return service


def _reload(workspace: Workspace) -> FinanceService:
    return FinanceService(RecordStore(workspace.store_path))


class DescribeEditCommand:
    def it_should_change_only_given_fields(self):
        with TemporaryDirectory() as tmpdir:
            workspace = Workspace(root=Path(tmpdir))
            _seed(workspace)

            rc = run(txid="food-0001", amount="250", workspace=workspace)

            assert rc == 0
            t = _reload(workspace).find_transaction("food-0001")
            assert t.amount == Decimal("250")
            assert t.description == "Groceries"
            assert t.date == date(2024, 1, 10)

    def it_should_refresh_budget_spend(self):
        with TemporaryDirectory() as tmpdir:
            workspace = Workspace(root=Path(tmpdir))
            _seed(workspace)

            run(txid="food-0001", category="health", workspace=workspace)

            assert _reload(workspace).find_budget("budget-01").current_spent == Decimal("30")

    def it_should_reject_ambiguous_prefix(self, capsys):
        with TemporaryDirectory() as tmpdir:
            workspace = Workspace(root=Path(tmpdir))
            _seed(workspace)

            assert run(txid="food", amount="1", workspace=workspace) == 1
            assert "Ambiguous" in capsys.readouterr().out

    def it_should_accept_unique_prefix(self):
        with TemporaryDirectory() as tmpdir:
            workspace = Workspace(root=Path(tmpdir))
            _seed(workspace)

            assert run(txid="food-0002", on="2024-01-20", workspace=workspace) == 0
            assert _reload(workspace).find_transaction("food-0002").date == date(2024, 1, 20)

    def it_should_fail_when_nothing_to_change(self):
        with TemporaryDirectory() as tmpdir:
            workspace = Workspace(root=Path(tmpdir))
            _seed(workspace)
            assert run(txid="food-0001", workspace=workspace) == 1

    def it_should_fail_for_unknown_transaction(self, capsys):
        with TemporaryDirectory() as tmpdir:
            workspace = Workspace(root=Path(tmpdir))
            _seed(workspace)
            assert run(txid="nope", amount="1", workspace=workspace) == 1
            assert "not found" in capsys.readouterr().out

    def it_should_reject_negative_amount(self):
        with TemporaryDirectory() as tmpdir:
            workspace = Workspace(root=Path(tmpdir))
            _seed(workspace)
            assert run(txid="food-0001", amount="-1", workspace=workspace) == 1
            assert _reload(workspace).find_transaction("food-0001").amount == Decimal("200")


class DescribeDeleteCommand:
    def it_should_delete_and_refresh_budget(self):
        with TemporaryDirectory() as tmpdir:
            workspace = Workspace(root=Path(tmpdir))
            _seed(workspace)

            assert delete_cmd.run(txid="food-0001", workspace=workspace) == 0

            service = _reload(workspace)
            assert service.find_transaction("food-0001") is None
            assert service.find_budget("budget-01").current_spent == Decimal("30")

    def it_should_fail_for_unknown_transaction(self):
        with TemporaryDirectory() as tmpdir:
            workspace = Workspace(root=Path(tmpdir))
            _seed(workspace)
            assert delete_cmd.run(txid="missing", workspace=workspace) == 1
            assert len(_reload(workspace).get_all_transactions()) == 2
