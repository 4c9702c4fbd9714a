from .base import Category, RecordModel, TransactionType
from .budget import Budget, BudgetPeriod
from .goal import Goal
from .transaction import Transaction, TransactionUpdate

__all__ = [
    # enums
    "Category",
    "TransactionType",
    "BudgetPeriod",
    # records
    "RecordModel",
    "Transaction",
    "TransactionUpdate",
    "Budget",
    "Goal",
]
