"""
Tests for transaction models.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest
from pydantic import ValidationError

from pocketbook.model import Category, Transaction, TransactionType, TransactionUpdate


def _tx(**overrides) -> Transaction:
    data = dict(
        id="t1",
        amount=Decimal("42.50"),
        description="Groceries",
        type=TransactionType.EXPENSE,
        category=Category.FOOD,
        date=date(2024, 1, 10),
        created_at=datetime(2024, 1, 10, 12, 30),
    )
    data.update(overrides)
    return Transaction(**data)


class DescribeTransaction:
    def it_should_create_valid_transaction(self):
        t = _tx()
        assert t.amount == Decimal("42.50")
        assert t.is_expense
        assert not t.is_income

    def it_should_reject_negative_amount(self):
        with pytest.raises(ValidationError):
            _tx(amount=Decimal("-1"))

    def it_should_accept_zero_amount(self):
        assert _tx(amount=0).amount == Decimal("0")

    def it_should_convert_floats_without_binary_artefacts(self):
        assert _tx(amount=0.1).amount == Decimal("0.1")

    def it_should_reject_unknown_category(self):
        with pytest.raises(ValidationError):
            _tx(category="groceries")

    def it_should_reject_non_numeric_amount_string(self):
        with pytest.raises(ValidationError):
            _tx(amount="lots")

    def it_should_serialize_to_camel_case_record(self):
        record = _tx().to_record()
        assert record == {
            "id": "t1",
            "amount": "42.50",
            "description": "Groceries",
            "type": "expense",
            "category": "food",
            "date": "2024-01-10",
            "createdAt": "2024-01-10T12:30:00",
        }

    def it_should_load_from_camel_case_record(self):
        t = Transaction.model_validate(
            {
                "id": "t2",
                "amount": 1000,
                "description": "Pay",
                "type": "income",
                "category": "salary",
                "date": "2024-01-05",
                "createdAt": "2024-01-05T08:00:00",
            }
        )
        assert t.amount == Decimal("1000")
        assert t.is_income
        assert t.date == date(2024, 1, 5)
        assert t.created_at == datetime(2024, 1, 5, 8, 0)

    def it_should_take_date_part_of_full_timestamps(self):
        t = Transaction.model_validate(
            {
                "id": "t3",
                "amount": 12.5,
                "type": "expense",
                "category": "transport",
                "date": "2024-02-01T00:00:00.000Z",
                "createdAt": "2024-02-01T09:15:00.000Z",
            }
        )
        assert t.date == date(2024, 2, 1)
        assert t.description == ""

    def it_should_round_trip_through_record(self):
        original = _tx()
        assert Transaction.model_validate(original.to_record()) == original


class DescribeTransactionUpdate:
    def it_should_apply_only_fields_that_were_set(self):
        updated = TransactionUpdate(amount=Decimal("50")).apply_to(_tx())
        assert updated.amount == Decimal("50")
        assert updated.description == "Groceries"
        assert updated.category == Category.FOOD
        assert updated.id == "t1"

    def it_should_ignore_explicit_none(self):
        update = TransactionUpdate(description=None, category=Category.HEALTH)
        assert update.changes() == {"category": Category.HEALTH}

    def it_should_change_date(self):
        updated = TransactionUpdate(date="2024-03-01").apply_to(_tx())
        assert updated.date == date(2024, 3, 1)

    def it_should_report_empty_update(self):
        assert TransactionUpdate().is_empty
        assert not TransactionUpdate(description="x").is_empty

    def it_should_reject_negative_amount(self):
        with pytest.raises(ValidationError):
            TransactionUpdate(amount=Decimal("-5"))

    def it_should_leave_original_untouched(self):
        original = _tx()
        TransactionUpdate(amount=Decimal("1")).apply_to(original)
        assert original.amount == Decimal("42.50")
