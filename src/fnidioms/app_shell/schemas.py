from decimal import Decimal

from pydantic import BaseModel, Field, TypeAdapter

from fnidioms.components.expenses import Expense


class ExpenseRecord(BaseModel):
    year: int
    amount: Decimal
    tags: list[str] = Field(default_factory=list)

    def to_expense(self) -> Expense:
        return Expense(year=self.year, amount=self.amount, tags=frozenset(self.tags))


ExpenseRecords = TypeAdapter(list[ExpenseRecord])
