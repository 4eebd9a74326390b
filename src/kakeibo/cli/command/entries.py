from __future__ import annotations

from typing import Optional

from rich.table import Table
from rich.text import Text

from .util import console, fmt_amount, print_error, read_items
from kakeibo.errors import KakeiboError
from kakeibo.model.settings import Settings
from kakeibo.services.summary_service import filter_by_period
from kakeibo.workspace import Workspace


def run(
    *,
    workspace: Workspace,
    settings: Optional[Settings] = None,
    year: Optional[int] = None,
    month: Optional[int] = None,
    limit: Optional[int] = None,
) -> int:
    """List recorded items sorted by date as a Rich table.

    Items registered on the same day keep their ledger order.
    Returns an exit code (0 for success, 1 for error).
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

    selected = sorted(filter_by_period(items, year=year, month=month), key=lambda i: i.date)
    if limit is not None:
        selected = selected[:limit]

    if not selected:
        console.print("[yellow]No entries to show.[/]")
        return 0

    table = Table(title="Entries")
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Kind", style="magenta", no_wrap=True)
    table.add_column("Category", style="yellow")
    table.add_column("Name", style="white")
    table.add_column("Amount", justify="right", no_wrap=True)
    table.add_column("Memo", style="dim")

    for item in selected:
        table.add_row(
            item.date.isoformat(),
            item.category.kind.value,
            item.category.name,
            Text(item.name),
            fmt_amount(item.price_for_summary, settings.currency_label),
            Text(item.memo or ""),
        )

    console.print(table)
    return 0
