from __future__ import annotations

"""
Ledger entry models.

Scope
- Pure Pydantic v2 models; no I/O (handled by item_io.py).
- An Item is one recorded income or expense. Items are frozen: a correction
  is recorded as a new item, never by editing an old one.

JSON layout
- Categories serialize in the externally tagged form used by existing
  store files, e.g. {"Income": "Salary"} or {"Expense": "Food"}.
"""

from datetime import date
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer, model_validator

from kakeibo.errors import InvalidInputError

# Prices are stored as unsigned 32-bit amounts in existing ledgers.
MAX_PRICE = 4_294_967_295


class EntryKind(StrEnum):
    """Whether an item adds to or subtracts from the balance."""

    income = "Income"
    expense = "Expense"


class IncomeCategory(StrEnum):
    salary = "Salary"
    bonus = "Bonus"
    other = "Other"


class ExpenseCategory(StrEnum):
    food = "Food"
    hobby = "Hobby"
    other = "Other"


# Menu order for each register type (0 = income, 1 = expense).
CATEGORY_CHOICES: dict[EntryKind, list[str]] = {
    EntryKind.income: [c.value for c in IncomeCategory],
    EntryKind.expense: [c.value for c in ExpenseCategory],
}

REGISTER_TYPES: list[EntryKind] = [EntryKind.income, EntryKind.expense]


class Category(BaseModel):
    """Income or expense category of an item."""

    model_config = ConfigDict(frozen=True)

    kind: EntryKind
    name: str

    @model_validator(mode="before")
    @classmethod
    def _accept_tagged_form(cls, data: Any) -> Any:
        # {"Expense": "Food"} -> {"kind": "Expense", "name": "Food"}
        if isinstance(data, dict) and len(data) == 1:
            (key, value), = data.items()
            if key in (k.value for k in EntryKind):
                return {"kind": key, "name": value}
        return data

    @model_validator(mode="after")
    def _validate_name(self) -> Category:
        if self.name not in CATEGORY_CHOICES[self.kind]:
            allowed = ", ".join(CATEGORY_CHOICES[self.kind])
            raise ValueError(f"Unknown {self.kind.value.lower()} category '{self.name}' (expected one of: {allowed})")
        return self

    @model_serializer
    def _serialize_tagged(self) -> dict[str, str]:
        return {self.kind.value: self.name}

    @classmethod
    def from_choice(cls, register_type: int, category_type: int) -> Category:
        """Build a category from menu numbers.

        Args:
            register_type: 0 for income, 1 for expense
            category_type: 0, 1 or 2 (Salary/Bonus/Other or Food/Hobby/Other)

        Raises:
            InvalidInputError: if either number is out of range
        """
        if register_type not in (0, 1):
            raise InvalidInputError(f"Invalid register type: {register_type} (expected 0 or 1)")
        kind = REGISTER_TYPES[register_type]
        names = CATEGORY_CHOICES[kind]
        if not 0 <= category_type < len(names):
            raise InvalidInputError(f"Invalid category type: {category_type} (expected 0, 1 or 2)")
        return cls(kind=kind, name=names[category_type])

    @property
    def is_income(self) -> bool:
        return self.kind == EntryKind.income

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.name}"


class Item(BaseModel):
    """A single recorded income or expense.

    `price` is always non-negative; the sign used for totals comes from the
    category kind (see `price_for_summary`).
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(min_length=1, description="Item label")
    category: Category
    price: int = Field(ge=0, le=MAX_PRICE, description="Amount in currency units")
    date: date
    memo: str | None = Field(default=None, description="Optional free-form memo")

    @field_validator("memo")
    @classmethod
    def _blank_memo_is_none(cls, v: str | None) -> str | None:
        return v or None

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    @property
    def first_day(self) -> date:
        """First day of the item's month; used as the monthly grouping key."""
        return self.date.replace(day=1)

    @property
    def price_for_summary(self) -> int:
        """Signed amount: positive for income, negative for expense."""
        return self.price if self.category.is_income else -self.price


__all__ = [
    "MAX_PRICE",
    "EntryKind",
    "IncomeCategory",
    "ExpenseCategory",
    "CATEGORY_CHOICES",
    "REGISTER_TYPES",
    "Category",
    "Item",
]
