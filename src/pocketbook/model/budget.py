"""
Budget records.

A Budget caps spending for one category over a date window. ``current_spent``
is a cached projection of the expense transactions inside that window; it is
never a source of truth and is recomputed by the aggregation engine.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from enum import StrEnum
from typing import Any

from pydantic import Field, field_serializer, field_validator, model_validator

from .base import Category, RecordModel, parse_day, parse_money


class BudgetPeriod(StrEnum):
    """Budget period types."""

    monthly = "monthly"
    weekly = "weekly"


class Budget(RecordModel):
    """Spending limit for a category over ``[start_date, end_date]``."""

    id: str = Field(min_length=1)
    category: Category
    limit: Decimal = Field(gt=0, description="Spending limit in currency units")
    period: BudgetPeriod = Field(default=BudgetPeriod.monthly)
    current_spent: Decimal = Field(default=Decimal("0"), description="Derived; see refresh_budget_spend")
    start_date: dt.date
    end_date: dt.date

    @model_validator(mode="after")
    def _validate_window(self) -> Budget:
        if self.end_date < self.start_date:
            raise ValueError(
                f"Budget window ends before it starts: {self.start_date} > {self.end_date}"
            )
        return self

    @field_serializer("limit", "current_spent")
    def serialize_amount(self, value: Decimal) -> str:
        return str(value)

    @field_validator("limit", "current_spent", mode="before")
    @classmethod
    def parse_amount(cls, value: Any) -> Any:
        return parse_money(value)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_dates(cls, value: Any) -> Any:
        return parse_day(value)


__all__ = ["Budget", "BudgetPeriod"]
