"""
Expenses component - collection pipelines over expenses.
"""

from .component import (
    expenses_tagged,
    group_tags_by_year,
    largest_expenses,
    total_by_year,
)
from .models import Expense, ExpenseError, ExpenseValueError

__all__ = [
    "group_tags_by_year",
    "largest_expenses",
    "total_by_year",
    "expenses_tagged",
    "Expense",
    "ExpenseError",
    "ExpenseValueError",
]
