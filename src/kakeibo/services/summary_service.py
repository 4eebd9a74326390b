from __future__ import annotations

"""
Summary Service - monthly totals and balances.

Groups items by month and computes signed totals (income positive, expense
negative). Formatting helpers produce the strings shown by the CLI.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional

from kakeibo.model.item import CATEGORY_CHOICES, REGISTER_TYPES, Category, Item


def target_months(items: Iterable[Item]) -> list[date]:
    """Sorted, de-duplicated first-of-month dates for the given items."""
    return sorted({item.first_day for item in items})


def filter_by_month(items: Iterable[Item], day: date) -> list[Item]:
    """Items in the same year and month as `day` (any day of the month works)."""
    return [item for item in items if item.year == day.year and item.month == day.month]


def filter_by_period(
    items: Iterable[Item], year: Optional[int] = None, month: Optional[int] = None
) -> list[Item]:
    """Items matching an optional year and optional month."""
    return [
        item
        for item in items
        if (year is None or item.year == year) and (month is None or item.month == month)
    ]


def summarize(items: Iterable[Item]) -> int:
    """Net total of the items' signed amounts."""
    return sum(item.price_for_summary for item in items)


def monthly_totals(items: list[Item]) -> dict[date, int]:
    """Net total per month, ordered by month."""
    return {month: summarize(filter_by_month(items, month)) for month in target_months(items)}


def format_month(day: date) -> str:
    """Format as 'YYYY/M', e.g. '2022/4'."""
    return f"{day.year}/{day.month}"


def format_price(price: int) -> str:
    """Signed amount; positive values carry a leading '+'."""
    if price > 0:
        return f"+{price}"
    return f"{price}"


@dataclass
class CategoryTotal:
    category: Category
    count: int
    amount: int  # Signed


@dataclass
class Balance:
    """Income, expense and net totals for a set of items."""

    income: int
    expense: int  # Positive sum of expense prices
    count: int
    by_category: list[CategoryTotal] = field(default_factory=list)

    @property
    def net(self) -> int:
        return self.income - self.expense


class SummaryService:
    """Aggregations over a list of items."""

    def __init__(self, items: list[Item]):
        self.items = items

    def monthly(self, year: Optional[int] = None) -> dict[date, int]:
        """Net total per month, optionally restricted to one year."""
        return monthly_totals(filter_by_period(self.items, year=year))

    def balance(self, year: Optional[int] = None, month: Optional[int] = None) -> Balance:
        """Income/expense/net totals with a per-category breakdown.

        Categories are listed income first, then expense, each in menu order,
        and only when they have items in the period.
        """
        selected = filter_by_period(self.items, year=year, month=month)
        income = 0
        expense = 0
        counts: dict[Category, int] = defaultdict(int)
        amounts: dict[Category, int] = defaultdict(int)

        for item in selected:
            if item.category.is_income:
                income += item.price
            else:
                expense += item.price
            counts[item.category] += 1
            amounts[item.category] += item.price_for_summary

        by_category = [
            CategoryTotal(category=cat, count=counts[cat], amount=amounts[cat])
            for cat in sorted(counts, key=_category_order)
        ]
        return Balance(income=income, expense=expense, count=len(selected), by_category=by_category)


def _category_order(category: Category) -> tuple[int, int]:
    return (
        REGISTER_TYPES.index(category.kind),
        CATEGORY_CHOICES[category.kind].index(category.name),
    )


__all__ = [
    "Balance",
    "CategoryTotal",
    "SummaryService",
    "filter_by_month",
    "filter_by_period",
    "format_month",
    "format_price",
    "monthly_totals",
    "summarize",
    "target_months",
]
