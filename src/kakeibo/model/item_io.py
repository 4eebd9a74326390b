from __future__ import annotations

"""
Ledger file I/O (JSON).

The ledger is a pretty-printed JSON array of items stored in
store/<data_file>. Reading validates every item through the Item model;
writing replaces the file in one step so a failed write leaves the previous
ledger intact.

Privacy
- Local file I/O only; item names and memos are never logged.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable

from pydantic import TypeAdapter, ValidationError

from kakeibo.errors import EmptyLedgerError, LedgerFormatError, LedgerNotFoundError
from kakeibo.model.item import Item

logger = logging.getLogger(__name__)

_ITEMS = TypeAdapter(list[Item])


def parse_items_json(text: str) -> list[Item]:
    """Parse ledger JSON text into items. Blank text is an empty ledger."""
    if not text.strip():
        return []
    try:
        return _ITEMS.validate_json(text)
    except ValidationError as ve:
        raise LedgerFormatError(f"Invalid ledger data: {ve}") from ve


def dump_items_json(items: Iterable[Item]) -> str:
    """Serialize items to the pretty-printed JSON layout, with trailing newline."""
    data = [item.model_dump(mode="json", exclude_none=True) for item in items]
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def load_items(path: Path) -> list[Item]:
    """Load all items from a ledger file.

    Raises:
        LedgerNotFoundError: if the file does not exist
        LedgerFormatError: if the content is not a valid ledger
    """
    if not path.exists():
        raise LedgerNotFoundError(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as e:
        raise LedgerFormatError(f"{path}: could not read ledger: {e}") from e
    try:
        items = parse_items_json(text)
    except LedgerFormatError as e:
        raise LedgerFormatError(f"{path}: {e}") from e
    logger.debug("Loaded %d item(s) from %s", len(items), path)
    return items


def load_items_or_empty(path: Path) -> list[Item]:
    """Load items, treating a missing ledger file as a new, empty ledger."""
    if not path.exists():
        logger.info("Ledger file %s does not exist yet; starting a new one", path)
        return []
    return load_items(path)


def load_items_or_fail(path: Path) -> list[Item]:
    """Load items for reporting; a missing or empty ledger is an error.

    Raises:
        LedgerNotFoundError: if the file does not exist
        EmptyLedgerError: if the file holds no items
    """
    items = load_items(path)
    if not items:
        raise EmptyLedgerError(path)
    return items


def save_items(path: Path, items: list[Item]) -> None:
    """Write all items to the ledger file, replacing it atomically.

    The parent directory must already exist; it is never created here.
    """
    text = dump_items_json(items)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as fh:
            fh.write(text)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    logger.debug("Wrote %d item(s) to %s", len(items), path)


__all__ = [
    "parse_items_json",
    "dump_items_json",
    "load_items",
    "load_items_or_empty",
    "load_items_or_fail",
    "save_items",
]
