from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from kakeibo.errors import KakeiboError
from kakeibo.model.item import Item
from kakeibo.model.item_io import load_items, load_items_or_fail
from kakeibo.services.summary_service import format_price
from kakeibo.workspace import Workspace

console = Console()


def fmt_amount(amount: int, currency_label: str = "") -> Text:
    """Signed amount, green when positive and red when negative."""
    s = format_price(amount)
    if currency_label:
        s = f"{s} {currency_label}"
    if amount < 0:
        return Text(s, style="bold red")
    elif amount > 0:
        return Text(s, style="bold green")
    return Text(s)


def print_error(error: KakeiboError | str) -> None:
    console.print(f"[red]Error:[/] {escape(str(error))}", highlight=False)


def read_items(workspace: Workspace, *, require_entries: bool = True) -> list[Item]:
    """Load items from the workspace ledger after checking the store exists.

    Raises:
        StoreNotFoundError, LedgerNotFoundError, LedgerFormatError, and
        EmptyLedgerError when require_entries is set.
    """
    workspace.require_store()
    path: Path = workspace.data_path
    if require_entries:
        return load_items_or_fail(path)
    return load_items(path)
