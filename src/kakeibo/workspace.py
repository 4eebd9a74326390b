"""
Workspace - centralized data path resolution for the kakeibo application.

A Workspace represents the directory the ledger is run from. The store
directory, ledger file and settings file are computed relative to this root.

Resolution priority:
1. Explicit path (--data-dir CLI option)
2. KAKEIBO_DATA environment variable
3. Current working directory
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from kakeibo.config import DATA_DIR_ENV, DEFAULT_DATA_FILE, SETTINGS_FILENAME, STORE_DIRNAME
from kakeibo.errors import StoreNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Workspace:
    """Root directory for all ledger paths."""

    root: Path
    data_file: str = DEFAULT_DATA_FILE

    @classmethod
    def resolve(cls, explicit: Path | None = None) -> Workspace:
        """Resolve workspace root from explicit path, env var, or CWD.

        Args:
            explicit: Explicitly provided path (highest priority)

        Returns:
            Workspace with resolved root
        """
        if explicit is not None:
            logger.debug("Workspace from --data-dir: %s", explicit)
            return cls(root=explicit)
        env = os.environ.get(DATA_DIR_ENV)
        if env:
            logger.debug("Workspace from %s: %s", DATA_DIR_ENV, env)
            return cls(root=Path(env))
        return cls(root=Path.cwd())

    @property
    def store_dir(self) -> Path:
        return self.root / STORE_DIRNAME

    @property
    def data_path(self) -> Path:
        return self.store_dir / self.data_file

    @property
    def settings_path(self) -> Path:
        return self.root / SETTINGS_FILENAME

    def require_store(self) -> Path:
        """Return the store directory, failing if the user has not created it.

        Raises:
            StoreNotFoundError: if store/ is missing or not a directory
        """
        if not self.store_dir.is_dir():
            raise StoreNotFoundError(self.store_dir)
        return self.store_dir


__all__ = ["Workspace"]
