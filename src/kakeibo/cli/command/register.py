from __future__ import annotations

"""
Register an income or expense item.

Fields not supplied as options are asked for interactively, in the order:
register type, name, category, price, date.
"""

from datetime import date
from typing import Optional

from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from .util import console, fmt_amount, print_error
from kakeibo.errors import InvalidInputError, KakeiboError
from kakeibo.model.item import CATEGORY_CHOICES, REGISTER_TYPES, Item
from kakeibo.model.settings import Settings
from kakeibo.services.register_service import RegisterService, build_item
from kakeibo.services.validation import InputValidator
from kakeibo.workspace import Workspace


def _menu_label(options: list[str]) -> str:
    return ", ".join(f"{i}:{name}" for i, name in enumerate(options))


def _ask_register_type() -> int:
    kinds = [k.value for k in REGISTER_TYPES]
    raw = Prompt.ask(f"Register type ({_menu_label(kinds)})", choices=["0", "1"], show_choices=False)
    return InputValidator.validate_register_type(InputValidator.parse_number(raw, "Register type"))


def _ask_category_type(register_type: int) -> int:
    names = CATEGORY_CHOICES[REGISTER_TYPES[register_type]]
    raw = Prompt.ask(f"Category ({_menu_label(names)})", choices=["0", "1", "2"], show_choices=False)
    return InputValidator.parse_number(raw, "Category type")


def _parse_category_option(register_type: int, category: str) -> int:
    """Accept a menu number or a category name such as 'Food' (case-insensitive)."""
    text = category.strip()
    if text.isascii() and text.isdigit():
        return InputValidator.validate_category_type(register_type, int(text))
    kind = REGISTER_TYPES[register_type]
    options = CATEGORY_CHOICES[kind]
    names = [n.lower() for n in options]
    if text.lower() in names:
        return names.index(text.lower())
    raise InvalidInputError(
        f"Unknown {kind.value.lower()} category: '{text}' (expected {_menu_label(options)})"
    )


def _show_item(item: Item, currency_label: str) -> None:
    table = Table(title="Item", show_header=False, box=None)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value")
    table.add_row("Date", item.date.isoformat())
    table.add_row("Name", Text(item.name))
    table.add_row("Category", str(item.category))
    table.add_row("Price", fmt_amount(item.price_for_summary, currency_label))
    if item.memo:
        table.add_row("Memo", Text(item.memo))
    console.print(table)


def run(
    *,
    workspace: Workspace,
    settings: Optional[Settings] = None,
    register_type: Optional[str] = None,
    name: Optional[str] = None,
    category: Optional[str] = None,
    price: Optional[str] = None,
    when: Optional[str] = None,
    memo: Optional[str] = None,
    dry_run: bool = False,
) -> int:
    """Record one item in the ledger.

    Returns an exit code (0 for success, 1 for invalid input or store errors).
    """
    settings = settings or Settings()

    # Fail before prompting if there is nowhere to write.
    try:
        workspace.require_store()
    except KakeiboError as e:
        print_error(e)
        return 1

    try:
        if register_type is None:
            rtype = _ask_register_type()
        else:
            rtype = InputValidator.parse_register_type(register_type)

        item_name = InputValidator.parse_name(
            name if name is not None else Prompt.ask("Name")
        )

        if category is None:
            ctype = _ask_category_type(rtype)
        else:
            ctype = _parse_category_option(rtype, category)

        amount = InputValidator.parse_price(
            price if price is not None else Prompt.ask("Price")
        )
        item_date = InputValidator.parse_date(
            when if when is not None else Prompt.ask("Date (YYYY-MM-DD)", default=date.today().isoformat())
        )

        item = build_item(
            register_type=rtype,
            name=item_name,
            category_type=ctype,
            price=amount,
            when=item_date,
            memo=memo,
        )
    except KakeiboError as e:
        print_error(e)
        return 1

    _show_item(item, settings.currency_label)

    try:
        result = RegisterService(workspace).register(item, dry_run=dry_run)
    except KakeiboError as e:
        print_error(e)
        return 1

    if dry_run:
        console.print("[yellow]Dry run: item not saved.[/]")
        return 0

    if result.created_file:
        console.print(f"[dim]Created new ledger file:[/] {escape(str(workspace.data_path))}")
    console.print(f"[green]Item registered.[/] {result.total_items} item(s) in ledger.")
    return 0
