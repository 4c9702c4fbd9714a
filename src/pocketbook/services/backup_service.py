"""
Backup export/import document.

A backup is a JSON object with ``transactions``, ``budgets``, ``goals`` and
``exportDate``. On import, a collection key that is absent leaves the stored
collection untouched; a present key (even an empty list) replaces it.

No file I/O here: callers read and write the text.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional

from pydantic import Field, ValidationError, field_validator

from pocketbook.model import Budget, Goal, RecordModel, Transaction
from pocketbook.model.base import parse_timestamp
from pocketbook.storage.record_io import save_budgets, save_goals, save_transactions
from pocketbook.storage.record_store import RecordStore


class BackupError(ValueError):
    """Raised when a backup document cannot be parsed or validated."""


class BackupDocument(RecordModel):
    """Full or partial snapshot of all collections."""

    transactions: Optional[list[Transaction]] = None
    budgets: Optional[list[Budget]] = None
    goals: Optional[list[Goal]] = None
    export_date: Optional[datetime] = Field(default=None)

    @field_validator("export_date", mode="before")
    @classmethod
    def parse_export_date(cls, value: Any) -> Any:
        return parse_timestamp(value)


@dataclass
class ImportResult:
    """Counts of records written per collection (None = collection skipped)."""

    transactions: int | None = None
    budgets: int | None = None
    goals: int | None = None

    @property
    def collections_written(self) -> list[str]:
        return [
            name
            for name, count in (
                ("transactions", self.transactions),
                ("budgets", self.budgets),
                ("goals", self.goals),
            )
            if count is not None
        ]


def build_export(
    transactions: list[Transaction],
    budgets: list[Budget],
    goals: list[Goal],
    exported_at: datetime,
) -> BackupDocument:
    return BackupDocument(
        transactions=list(transactions),
        budgets=list(budgets),
        goals=list(goals),
        export_date=exported_at,
    )


def dump_backup(document: BackupDocument) -> str:
    """Serialize a backup document as indented JSON."""
    data = document.model_dump(mode="json", by_alias=True, exclude_none=True)
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def load_backup(text: str) -> BackupDocument:
    """Parse backup text.

    Raises:
        BackupError: If the text is not JSON, not an object, or holds invalid records
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise BackupError(f"Backup is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise BackupError("Backup must be a JSON object")
    try:
        return BackupDocument.model_validate(data)
    except ValidationError as ve:
        raise BackupError(f"Backup contains invalid records: {ve}") from ve


def apply_backup(store: RecordStore, document: BackupDocument) -> ImportResult:
    """Write the collections present in ``document`` to the store."""
    result = ImportResult()
    if document.transactions is not None:
        save_transactions(store, document.transactions)
        result.transactions = len(document.transactions)
    if document.budgets is not None:
        save_budgets(store, document.budgets)
        result.budgets = len(document.budgets)
    if document.goals is not None:
        save_goals(store, document.goals)
        result.goals = len(document.goals)
    return result


def backup_filename(day: date) -> str:
    return f"backup-{day.isoformat()}.json"


__all__ = [
    "BackupDocument",
    "BackupError",
    "ImportResult",
    "apply_backup",
    "backup_filename",
    "build_export",
    "dump_backup",
    "load_backup",
]
