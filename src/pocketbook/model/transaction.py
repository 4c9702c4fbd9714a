"""
Transaction records.

A Transaction is a single dated income or expense. Amounts are always
non-negative; the direction lives in ``type``. Records are immutable once
created except through an explicit TransactionUpdate.

The ``datetime`` module is imported whole because a field named ``date``
would otherwise shadow the type inside the class bodies.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field, field_serializer, field_validator

from .base import Category, RecordModel, TransactionType, parse_day, parse_money, parse_timestamp


class Transaction(RecordModel):
    """A recorded income or expense."""

    id: str = Field(min_length=1)
    amount: Decimal = Field(ge=0, description="Non-negative amount in currency units")
    description: str = ""
    type: TransactionType
    category: Category
    date: dt.date
    created_at: dt.datetime

    @property
    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE

    @field_serializer("amount")
    def serialize_amount(self, value: Decimal) -> str:
        """Serialize Decimal to string to preserve precision."""
        return str(value)

    @field_validator("amount", mode="before")
    @classmethod
    def parse_amount(cls, value: Any) -> Any:
        return parse_money(value)

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value: Any) -> Any:
        return parse_day(value)

    @field_validator("created_at", mode="before")
    @classmethod
    def parse_created_at(cls, value: Any) -> Any:
        return parse_timestamp(value)


class TransactionUpdate(BaseModel):
    """Partial update for a Transaction.

    Only fields explicitly provided are applied; ``id`` and ``created_at``
    cannot be changed.
    """

    amount: Optional[Decimal] = Field(default=None, ge=0)
    description: Optional[str] = None
    type: Optional[TransactionType] = None
    category: Optional[Category] = None
    date: Optional[dt.date] = None

    @field_validator("amount", mode="before")
    @classmethod
    def parse_amount(cls, value: Any) -> Any:
        return parse_money(value)

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value: Any) -> Any:
        return parse_day(value)

    def changes(self) -> dict[str, Any]:
        """Fields that were explicitly set, excluding explicit ``None``."""
        return {k: v for k, v in self.model_dump(exclude_unset=True).items() if v is not None}

    @property
    def is_empty(self) -> bool:
        return not self.changes()

    def apply_to(self, transaction: Transaction) -> Transaction:
        """Return a validated copy of ``transaction`` with the changes applied."""
        data = transaction.model_dump()
        data.update(self.changes())
        return Transaction.model_validate(data)


__all__ = ["Transaction", "TransactionUpdate"]
