"""
Exceptions raised by the kakeibo functional core.

Command modules catch these, print a short message to the console and
return a non-zero exit code.
"""
from __future__ import annotations

from pathlib import Path


class KakeiboError(Exception):
    """Base class for all ledger errors."""


class InvalidInputError(KakeiboError, ValueError):
    """User input that cannot be turned into a ledger entry."""


class StoreNotFoundError(KakeiboError, FileNotFoundError):
    """The store directory does not exist. It is never created by the program."""

    def __init__(self, store_dir: Path):
        self.store_dir = store_dir
        super().__init__(
            f"Store directory not found: {store_dir} (create it with 'mkdir {store_dir}')"
        )


class LedgerNotFoundError(KakeiboError, FileNotFoundError):
    """The ledger file is missing when a query needs it."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Ledger file not found: {path}")


class EmptyLedgerError(KakeiboError, ValueError):
    """The ledger file exists but holds no entries."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"No entries recorded in {path}")


class LedgerFormatError(KakeiboError, ValueError):
    """The ledger file could not be parsed or failed validation."""


class SettingsError(KakeiboError, ValueError):
    """kakeibo.yml could not be parsed or failed validation."""


__all__ = [
    "KakeiboError",
    "InvalidInputError",
    "StoreNotFoundError",
    "LedgerNotFoundError",
    "EmptyLedgerError",
    "LedgerFormatError",
    "SettingsError",
]
