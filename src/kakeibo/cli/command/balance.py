from __future__ import annotations

"""
Balance report: income, expense and net totals for a period.
"""

from typing import Optional

from rich.table import Table
from rich.text import Text

from .util import console, fmt_amount, print_error, read_items
from kakeibo.errors import KakeiboError
from kakeibo.model.settings import Settings
from kakeibo.services.summary_service import Balance, SummaryService
from kakeibo.workspace import Workspace


def run(
    *,
    workspace: Workspace,
    settings: Optional[Settings] = None,
    year: Optional[int] = None,
    month: Optional[int] = None,
    by_category: bool = False,
) -> int:
    """Display totals for all entries, or for one year or month.

    Args:
        workspace: Workspace providing the store paths
        settings: Display settings
        year: Filter by year
        month: Filter by month (1-12, requires year)
        by_category: Add a per-category breakdown table

    Returns:
        Exit code (0 for success, 1 for error)
    """
    settings = settings or Settings()

    if month is not None and year is None:
        print_error("--month requires --year")
        return 1

    if month is not None and (month < 1 or month > 12):
        print_error("--month must be between 1 and 12")
        return 1

    try:
        items = read_items(workspace, require_entries=False)
    except KakeiboError as e:
        print_error(e)
        return 1

    balance = SummaryService(items).balance(year=year, month=month)

    if by_category:
        _display_categories(balance, settings.currency_label)

    _display_totals(balance, _period_label(year, month), settings.currency_label)
    return 0


def _period_label(year: Optional[int], month: Optional[int]) -> str:
    if year and month:
        return f"{year}/{month}"
    if year:
        return str(year)
    return "all time"


def _display_categories(balance: Balance, currency_label: str) -> None:
    table = Table(title="By Category")
    table.add_column("Kind", style="magenta", no_wrap=True)
    table.add_column("Category", style="cyan")
    table.add_column("Items", justify="right")
    table.add_column("Amount", justify="right", no_wrap=True)
    for row in balance.by_category:
        table.add_row(
            row.category.kind.value,
            row.category.name,
            str(row.count),
            fmt_amount(row.amount, currency_label),
        )
    console.print(table)


def _display_totals(balance: Balance, period: str, currency_label: str) -> None:
    table = Table(title=f"Balance ({period})", show_header=False)
    table.add_column("Label", no_wrap=True)
    table.add_column("Amount", justify="right", no_wrap=True)
    table.add_row("Income", fmt_amount(balance.income, currency_label))
    table.add_row("Expense", fmt_amount(-balance.expense, currency_label))
    table.add_row(Text("Net", style="bold"), fmt_amount(balance.net, currency_label))
    console.print(table)
    console.print(f"[dim]{balance.count} item(s)[/]")
