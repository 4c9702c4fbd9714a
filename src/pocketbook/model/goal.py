"""
Savings goal records.

``completed`` is derived, never stored independently: it is exactly
``current_amount >= target_amount``. A stored ``completed`` key in old
backups is ignored on load and rewritten on dump.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Any

from pydantic import Field, computed_field, field_serializer, field_validator

from .base import Category, RecordModel, parse_day, parse_money


class Goal(RecordModel):
    """A savings target with accumulated progress."""

    id: str = Field(min_length=1)
    title: str = Field(min_length=1)
    target_amount: Decimal = Field(gt=0)
    current_amount: Decimal = Field(default=Decimal("0"))
    deadline: dt.date
    category: Category

    @computed_field  # type: ignore[misc]
    @property
    def completed(self) -> bool:
        return self.current_amount >= self.target_amount

    def with_contribution(self, amount: Decimal) -> Goal:
        return self.model_copy(update={"current_amount": self.current_amount + amount})

    @field_serializer("target_amount", "current_amount")
    def serialize_amount(self, value: Decimal) -> str:
        return str(value)

    @field_validator("target_amount", "current_amount", mode="before")
    @classmethod
    def parse_amount(cls, value: Any) -> Any:
        return parse_money(value)

    @field_validator("deadline", mode="before")
    @classmethod
    def parse_deadline(cls, value: Any) -> Any:
        return parse_day(value)


__all__ = ["Goal"]
