"""
Shared building blocks for the record models.

Records travel through the store and backup files as JSON objects with
camelCase keys, decimal strings for money and ISO-8601 strings for dates.
Older backups carry plain numbers for amounts and full timestamps
(e.g. ``2024-01-05T00:00:00.000Z``) for date-only fields; both are accepted.

Privacy
- Pure models; no I/O here.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TransactionType(StrEnum):
    """Direction of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class Category(StrEnum):
    """Fixed set of transaction categories."""

    FOOD = "food"
    TRANSPORT = "transport"
    HOUSING = "housing"
    ENTERTAINMENT = "entertainment"
    HEALTH = "health"
    EDUCATION = "education"
    SALARY = "salary"
    INVESTMENT = "investment"
    OTHER = "other"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class RecordModel(BaseModel):
    """Base for persisted records: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_record(self) -> dict[str, Any]:
        """Serialize to the JSON-ready dict shape used by the store and backups."""
        return self.model_dump(mode="json", by_alias=True)


def parse_money(value: Any) -> Any:
    """Coerce a raw amount into a Decimal without float artefacts.

    Floats go through ``str`` so ``0.1`` stays ``Decimal("0.1")``. Anything
    that is not a number or string is handed back for Pydantic to reject.
    """
    if isinstance(value, Decimal) or isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return Decimal(str(value))
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation as e:
            raise ValueError(f"Invalid amount: {value!r}") from e
    return value


def parse_day(value: Any) -> Any:
    """Reduce timestamps to their calendar date; leave plain dates alone."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and len(value.strip()) > 10:
        return datetime.fromisoformat(value.strip()).date()
    return value


def parse_timestamp(value: Any) -> Any:
    if isinstance(value, str):
        return datetime.fromisoformat(value.strip())
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime(value.year, value.month, value.day)
    return value


__all__ = [
    "Category",
    "RecordModel",
    "TransactionType",
    "parse_day",
    "parse_money",
    "parse_timestamp",
]
