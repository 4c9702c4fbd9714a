"""Tests for report and summary commands."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from pathlib import Path
from tempfile import TemporaryDirectory

from pocketbook.cli.command import summary as summary_cmd
from pocketbook.cli.command.report import build_report, run
from pocketbook.model import Category, Transaction, TransactionType
from pocketbook.services.finance_service import FinanceService
from pocketbook.storage.record_store import RecordStore
from pocketbook.workspace import Workspace


def _seed(workspace: Workspace) -> list[Transaction]:
    service = FinanceService(RecordStore(workspace.store_path))
    for type, amount, category, day in (
        (TransactionType.INCOME, "1000", Category.SALARY, date(2024, 1, 5)),
        (TransactionType.EXPENSE, "200", Category.FOOD, date(2024, 1, 10)),
        (TransactionType.EXPENSE, "100", Category.TRANSPORT, date(2024, 2, 1)),
    ):
        service.add_transaction(
            amount=Decimal(amount),
            description="",
            type=type,
            category=category,
            date=day,
        )
    return service.get_transactions()


class DescribeBuildReport:
    def it_should_total_income_and_expenses(self):
        with TemporaryDirectory() as tmpdir:
            rows = _seed(Workspace(root=Path(tmpdir)))
            report = build_report(rows, date(2024, 1, 1), date(2024, 12, 31))
            assert report.income == Decimal("1000")
            assert report.expenses == Decimal("300")
            assert report.balance == Decimal("700")

    def it_should_be_zero_for_no_transactions(self):
        report = build_report([], date(2024, 1, 1), date(2024, 1, 31))
        assert report.balance == Decimal("0")


class DescribeReportCommand:
    def it_should_report_positive_period(self, capsys):
        with TemporaryDirectory() as tmpdir:
            workspace = Workspace(root=Path(tmpdir))
            _seed(workspace)
            assert run(start="2024-01-01", end="2024-01-31", workspace=workspace) == 0
            out = capsys.readouterr().out
            assert "$800.00" in out
            assert "Positive" in out

    def it_should_report_negative_period(self, capsys):
        with TemporaryDirectory() as tmpdir:
            workspace = Workspace(root=Path(tmpdir))
            _seed(workspace)
            assert run(start="2024-02-01", end="2024-02-29", workspace=workspace) == 0
            assert "Negative" in capsys.readouterr().out

    def it_should_say_when_period_is_empty(self, capsys):
        with TemporaryDirectory() as tmpdir:
            workspace = Workspace(root=Path(tmpdir))
            _seed(workspace)
            assert run(start="2023-01-01", end="2023-01-31", workspace=workspace) == 0
            assert "No transactions in this period" in capsys.readouterr().out

    def it_should_reject_end_before_start(self):
        with TemporaryDirectory() as tmpdir:
            workspace = Workspace(root=Path(tmpdir))
            assert run(start="2024-02-01", end="2024-01-01", workspace=workspace) == 1

    def it_should_default_to_current_month(self):
        with TemporaryDirectory() as tmpdir:
            workspace = Workspace(root=Path(tmpdir))
            assert run(workspace=workspace) == 0


class DescribeSummaryCommand:
    def it_should_summarize_given_month(self, capsys):
        with TemporaryDirectory() as tmpdir:
            workspace = Workspace(root=Path(tmpdir))
            _seed(workspace)
            assert summary_cmd.run(month="2024-01", workspace=workspace) == 0
            out = capsys.readouterr().out
            assert "Summary for Jan 2024" in out
            assert "$1,000.00" in out
            assert "Expenses by Category" in out
            assert "Monthly Trend" in out
            assert "Aug 2023" in out

    def it_should_note_months_without_expenses(self, capsys):
        with TemporaryDirectory() as tmpdir:
            workspace = Workspace(root=Path(tmpdir))
            assert summary_cmd.run(month="2024-03", workspace=workspace) == 0
            assert "No expenses this month" in capsys.readouterr().out

    def it_should_use_configured_trend_length(self, capsys):
        with TemporaryDirectory() as tmpdir:
            workspace = Workspace(root=Path(tmpdir))
            workspace.config_dir.mkdir(parents=True)
            workspace.settings_config.write_text("trend_months: 2\n", encoding="utf-8")
            assert summary_cmd.run(month="2024-01", workspace=workspace) == 0
            out = capsys.readouterr().out
            assert "Dec 2023" in out
            assert "Nov 2023" not in out

    def it_should_reject_malformed_month(self):
        with TemporaryDirectory() as tmpdir:
            workspace = Workspace(root=Path(tmpdir))
            assert summary_cmd.run(month="January", workspace=workspace) == 1

    def it_should_fail_on_invalid_settings(self):
        with TemporaryDirectory() as tmpdir:
            workspace = Workspace(root=Path(tmpdir))
            workspace.config_dir.mkdir(parents=True)
            workspace.settings_config.write_text("trend_months: 0\n", encoding="utf-8")
            assert summary_cmd.run(workspace=workspace) == 1
