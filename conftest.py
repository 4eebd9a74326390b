# Ensure the package under src/ is importable during tests without installing the package.
from datetime import date
from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))

from kakeibo.model.item import Category, EntryKind, Item  # noqa: E402
from kakeibo.model.item_io import save_items  # noqa: E402
from kakeibo.workspace import Workspace  # noqa: E402


def make_item(name: str, kind: EntryKind, category: str, price: int, when: date, memo=None) -> Item:
    return Item(
        name=name,
        category=Category(kind=kind, name=category),
        price=price,
        date=when,
        memo=memo,
    )


@pytest.fixture
def sample_items() -> list[Item]:
    """Three months of mixed income and expense items."""
    return [
        make_item("New year party", EntryKind.expense, "Food", 5000, date(2022, 1, 10)),
        make_item("Salary", EntryKind.income, "Salary", 300000, date(2022, 1, 20)),
        make_item("Trip", EntryKind.expense, "Hobby", 100000, date(2022, 1, 30)),
        make_item("Dinner out", EntryKind.expense, "Food", 3000, date(2022, 2, 15)),
        make_item("Welcome party", EntryKind.expense, "Other", 10000, date(2022, 4, 15)),
    ]


@pytest.fixture
def workspace(tmp_path) -> Workspace:
    """Workspace whose store/ directory exists but holds no ledger yet."""
    ws = Workspace(root=tmp_path)
    ws.store_dir.mkdir()
    return ws


@pytest.fixture
def ledger_workspace(workspace, sample_items) -> Workspace:
    """Workspace with the sample items already saved."""
    save_items(workspace.data_path, sample_items)
    return workspace
