from __future__ import annotations

"""
Settings I/O (YAML loading).

Reads kakeibo.yml from the workspace root with the safe loader. A missing
file means defaults; a malformed file is an error.
"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from kakeibo.errors import SettingsError
from kakeibo.model.settings import Settings


def load_settings(path: Path) -> Settings:
    """Load settings from YAML, or return defaults when the file is absent.

    Args:
        path: Path to kakeibo.yml

    Returns:
        Settings instance

    Raises:
        SettingsError: if the file cannot be parsed or has invalid values
    """
    if not path.exists():
        return Settings()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (yaml.YAMLError, UnicodeDecodeError, OSError) as e:
        raise SettingsError(f"Could not parse {path}: {e}") from e

    if not isinstance(data, dict):
        raise SettingsError(f"{path} must contain a mapping of settings")

    try:
        return Settings.model_validate(data)
    except ValidationError as ve:
        raise SettingsError(f"Invalid settings in {path}: {ve}") from ve


__all__ = ["load_settings"]
