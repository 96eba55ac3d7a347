"""
Expenses component - filter/sort/limit/group collection pipelines.

Each function takes an iterable of expenses and builds its result in a
single pass of comprehensions and itertools; none of them mutates the
input.

Invariants:
- None input yields an empty result instead of raising
- None items inside the input are skipped
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator
from decimal import Decimal
from itertools import islice

from .models import Expense


def _present(expenses: Iterable[Expense | None] | None) -> Iterator[Expense]:
    if expenses is None:
        return iter(())
    return (e for e in expenses if e is not None)


def group_tags_by_year(expenses: Iterable[Expense | None] | None) -> dict[int, frozenset[str]]:
    """
    Union of tags per year.

    Example:
        [Expense(2017, 10, {"food"}), Expense(2017, 5, {"fuel"})]
        -> {2017: frozenset({"food", "fuel"})}
    """
    grouped: defaultdict[int, set[str]] = defaultdict(set)
    for expense in _present(expenses):
        grouped[expense.year].update(expense.tags)
    return {year: frozenset(tags) for year, tags in grouped.items()}


def largest_expenses(
    expenses: Iterable[Expense | None] | None,
    limit: int,
    year: int | None = None,
) -> list[Expense]:
    """
    Largest expenses first, optionally restricted to one year.

    Args:
        expenses: Source expenses
        limit: Maximum number of results
        year: Keep only this year when given

    Raises:
        ValueError: If limit is negative
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")

    selected = (e for e in _present(expenses) if year is None or e.year == year)
    ordered = sorted(selected, key=lambda e: e.amount, reverse=True)
    return list(islice(ordered, limit))


def total_by_year(expenses: Iterable[Expense | None] | None) -> dict[int, Decimal]:
    totals: defaultdict[int, Decimal] = defaultdict(Decimal)
    for expense in _present(expenses):
        totals[expense.year] += expense.amount
    return dict(totals)


def expenses_tagged(expenses: Iterable[Expense | None] | None, tag: str) -> list[Expense]:
    return [e for e in _present(expenses) if tag in e.tags]
