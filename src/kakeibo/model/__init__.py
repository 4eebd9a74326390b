from .item import (
    CATEGORY_CHOICES,
    MAX_PRICE,
    REGISTER_TYPES,
    Category,
    EntryKind,
    ExpenseCategory,
    IncomeCategory,
    Item,
)
from .item_io import (
    dump_items_json,
    load_items,
    load_items_or_empty,
    load_items_or_fail,
    parse_items_json,
    save_items,
)
from .settings import Settings

__all__ = [
    # models
    "Category",
    "EntryKind",
    "ExpenseCategory",
    "IncomeCategory",
    "Item",
    "Settings",
    "CATEGORY_CHOICES",
    "REGISTER_TYPES",
    "MAX_PRICE",
    # IO helpers
    "dump_items_json",
    "load_items",
    "load_items_or_empty",
    "load_items_or_fail",
    "parse_items_json",
    "save_items",
]
