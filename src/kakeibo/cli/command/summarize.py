from __future__ import annotations

"""
Monthly summary: net income minus expenses for every month with entries.
"""

from typing import Optional

from rich.table import Table

from .util import console, fmt_amount, print_error, read_items
from kakeibo.errors import KakeiboError
from kakeibo.model.settings import Settings
from kakeibo.services.summary_service import SummaryService, format_month
from kakeibo.workspace import Workspace


def run(
    *,
    workspace: Workspace,
    settings: Optional[Settings] = None,
    year: Optional[int] = None,
) -> int:
    """Print the net balance of each month, oldest first.

    A missing or empty ledger is an error. Returns an exit code.
    """
    settings = settings or Settings()

    try:
        items = read_items(workspace)
    except KakeiboError as e:
        print_error(e)
        return 1

    totals = SummaryService(items).monthly(year=year)
    if not totals:
        console.print(f"[yellow]No entries in[/] {year}.")
        return 0

    title = "Monthly Balance" if year is None else f"Monthly Balance ({year})"
    table = Table(title=title)
    table.add_column("Month", style="cyan", no_wrap=True)
    table.add_column("Balance", justify="right", no_wrap=True)

    for month, total in totals.items():
        table.add_row(format_month(month), fmt_amount(total, settings.currency_label))

    console.print(table)
    return 0
