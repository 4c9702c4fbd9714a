"""
Typed access to the record store (dict rows <-> Pydantic models).

Each collection has a load/save pair. Loading reconstitutes ISO-8601 strings
into date/datetime values via the model validators; saving dumps the models
to their camelCase JSON shape in the order given.

Privacy:
- Pure local processing on top of RecordStore.
- No logging of raw record data here; callers decide what to print.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from pydantic import ValidationError

from pocketbook.model import Budget, Goal, RecordModel, Transaction
from pocketbook.storage.record_store import BUDGETS, GOALS, TRANSACTIONS, RecordStore

TRecord = TypeVar("TRecord", bound=RecordModel)


class RecordError(ValueError):
    """Raised when a stored record does not match its model."""


def parse_records(collection: str, rows: Iterable[dict], model: type[TRecord]) -> list[TRecord]:
    """Validate raw rows into models, naming the offending row on failure."""
    result: list[TRecord] = []
    for index, row in enumerate(rows):
        try:
            result.append(model.model_validate(row))
        except ValidationError as ve:
            ident = row.get("id") if isinstance(row, dict) else None
            raise RecordError(
                f"Invalid record #{index} in {collection}"
                f"{f' (id={ident})' if ident else ''}: {ve}"
            ) from ve
    return result


def dump_records(records: Iterable[RecordModel]) -> list[dict]:
    return [r.to_record() for r in records]


def load_transactions(store: RecordStore) -> list[Transaction]:
    return parse_records(TRANSACTIONS, store.get(TRANSACTIONS), Transaction)


def save_transactions(store: RecordStore, transactions: Iterable[Transaction]) -> None:
    store.set(TRANSACTIONS, dump_records(transactions))


def load_budgets(store: RecordStore) -> list[Budget]:
    return parse_records(BUDGETS, store.get(BUDGETS), Budget)


def save_budgets(store: RecordStore, budgets: Iterable[Budget]) -> None:
    store.set(BUDGETS, dump_records(budgets))


def load_goals(store: RecordStore) -> list[Goal]:
    return parse_records(GOALS, store.get(GOALS), Goal)


def save_goals(store: RecordStore, goals: Iterable[Goal]) -> None:
    store.set(GOALS, dump_records(goals))


__all__ = [
    "RecordError",
    "dump_records",
    "load_budgets",
    "load_goals",
    "load_transactions",
    "parse_records",
    "save_budgets",
    "save_goals",
    "save_transactions",
]
