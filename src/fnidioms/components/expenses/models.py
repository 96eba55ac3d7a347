"""
Expenses component models.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

# --- Error Types ---


class ExpenseError(Exception):
    """Base exception for expenses component errors."""

    pass


class ExpenseValueError(ExpenseError, ValueError):
    """Expense field that cannot be represented."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


# --- Expense Model ---


@dataclass(frozen=True)
class Expense:
    """
    Single expense.

    `tags` accepts any iterable (or None) and is stored as a frozenset;
    `amount` is stored as a finite Decimal.
    """

    year: int
    amount: Decimal
    tags: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", _normalize_amount(self.amount))
        object.__setattr__(self, "tags", _normalize_tags(self.tags))


def _normalize_amount(amount: object) -> Decimal:
    try:
        value = Decimal(str(amount))
    except InvalidOperation:
        raise ExpenseValueError(f"amount must be a number, got {amount!r}", field="amount") from None
    if not value.is_finite():
        raise ExpenseValueError(f"amount must be finite, got {amount!r}", field="amount")
    return value


def _normalize_tags(tags: Iterable[str] | None) -> frozenset[str]:
    if tags is None:
        return frozenset()
    if isinstance(tags, str):
        return frozenset((tags,))
    return frozenset(t for t in tags if t)
