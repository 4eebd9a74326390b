"""
Register service - appends new items to the ledger.

Builds a validated Item from raw field values and appends it to the ledger
file inside the store directory. The store directory must exist; the ledger
file is created on first use.

NO IMPORTS FROM:
- rich (console, table, prompt)
- typer
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from pydantic import ValidationError

from kakeibo.errors import InvalidInputError
from kakeibo.model.item import Category, Item
from kakeibo.model.item_io import load_items_or_empty, save_items
from kakeibo.services.validation import InputValidator
from kakeibo.workspace import Workspace

logger = logging.getLogger(__name__)


@dataclass
class RegisterResult:
    """Outcome of a registration."""

    item: Item
    created_file: bool  # True when the ledger file did not exist before
    total_items: int  # Items in the ledger after the append


def build_item(
    *,
    register_type: int,
    name: str,
    category_type: int,
    price: int,
    when: date,
    memo: str | None = None,
) -> Item:
    """Validate raw values and build an Item.

    Raises:
        InvalidInputError: if any field is invalid
    """
    InputValidator.validate_category_type(register_type, category_type)
    category = Category.from_choice(register_type, category_type)
    try:
        return Item(name=name, category=category, price=price, date=when, memo=memo)
    except ValidationError as ve:
        errors = "; ".join(f"{'.'.join(map(str, e['loc']))}: {e['msg']}" for e in ve.errors())
        raise InvalidInputError(errors) from ve


class RegisterService:
    """Appends items to the workspace ledger."""

    def __init__(self, workspace: Workspace):
        self.workspace = workspace

    def register(self, item: Item, *, dry_run: bool = False) -> RegisterResult:
        """Append one item to the ledger.

        Existing items are written back unchanged and in order, followed by
        the new item.

        Raises:
            StoreNotFoundError: if the store directory is missing
            LedgerFormatError: if the existing ledger cannot be read
        """
        self.workspace.require_store()
        path = self.workspace.data_path
        created = not path.exists()
        items = load_items_or_empty(path)
        items.append(item)
        if dry_run:
            logger.debug("Dry run: not writing %s", path)
        else:
            save_items(path, items)
            logger.info("Registered item %d in %s", len(items), path)
        return RegisterResult(item=item, created_file=created, total_items=len(items))


__all__ = ["RegisterService", "RegisterResult", "build_item"]
