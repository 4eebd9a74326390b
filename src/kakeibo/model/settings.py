from __future__ import annotations

"""
Settings model mirroring kakeibo.yml.

Every field is optional in the file; missing keys fall back to the
defaults in kakeibo.config.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kakeibo.config import DEFAULT_CURRENCY_LABEL, DEFAULT_DATA_FILE


class Settings(BaseModel):
    """User settings for display and storage."""

    model_config = ConfigDict(extra="forbid")

    currency_label: str = Field(
        default=DEFAULT_CURRENCY_LABEL, description="Label printed after amounts"
    )
    data_file: str = Field(
        default=DEFAULT_DATA_FILE, min_length=1, description="Ledger file name inside store/"
    )

    @field_validator("data_file")
    @classmethod
    def _validate_data_file(cls, v: str) -> str:
        """The ledger always lives directly inside store/."""
        if "/" in v or "\\" in v or v in (".", ".."):
            raise ValueError(f"data_file must be a plain file name: {v}")
        return v
