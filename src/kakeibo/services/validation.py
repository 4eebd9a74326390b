"""
Input validation for ledger entries.

Turns raw text typed at a prompt (or passed as an option) into validated
values. Every failure raises InvalidInputError with a message suitable for
showing to the user.

NO IMPORTS FROM:
- rich (console, table, prompt)
- typer
"""

from __future__ import annotations

from datetime import date

from kakeibo.errors import InvalidInputError
from kakeibo.model.item import MAX_PRICE, REGISTER_TYPES

# Top-level menu: 0 register, 1 summarize, 2 balance.
SERVICE_TYPES = (0, 1, 2)
REGISTER_TYPE_NAMES = {kind.value.lower(): i for i, kind in enumerate(REGISTER_TYPES)}


class InputValidator:
    """Validates menu numbers and entry fields."""

    @staticmethod
    def parse_number(raw: str | int, label: str) -> int:
        """Parse a menu number; surrounding whitespace is ignored."""
        if isinstance(raw, int):
            return raw
        text = (raw or "").strip()
        try:
            return int(text)
        except ValueError:
            raise InvalidInputError(f"{label} must be a number: '{text}'") from None

    @staticmethod
    def validate_service_type(service_type: int) -> int:
        if service_type not in SERVICE_TYPES:
            raise InvalidInputError(f"Invalid service type: {service_type} (expected 0, 1 or 2)")
        return service_type

    @staticmethod
    def validate_register_type(register_type: int) -> int:
        if register_type not in (0, 1):
            raise InvalidInputError(f"Invalid register type: {register_type} (expected 0 or 1)")
        return register_type

    @staticmethod
    def validate_category_type(register_type: int, category_type: int) -> int:
        # Both income and expense offer three categories.
        InputValidator.validate_register_type(register_type)
        if category_type not in (0, 1, 2):
            raise InvalidInputError(f"Invalid category type: {category_type} (expected 0, 1 or 2)")
        return category_type

    @staticmethod
    def parse_register_type(raw: str | int) -> int:
        """Accept 0/1 or the words 'income'/'expense' (case-insensitive)."""
        if isinstance(raw, str):
            word = raw.strip().lower()
            if word in REGISTER_TYPE_NAMES:
                return REGISTER_TYPE_NAMES[word]
        return InputValidator.validate_register_type(
            InputValidator.parse_number(raw, "Register type")
        )

    @staticmethod
    def parse_name(raw: str) -> str:
        name = (raw or "").strip()
        if not name:
            raise InvalidInputError("Name must not be empty")
        return name

    @staticmethod
    def parse_price(raw: str | int) -> int:
        """Parse a non-negative whole amount. Thousands separators are allowed."""
        if isinstance(raw, int):
            price = raw
        else:
            text = (raw or "").strip().replace(",", "").replace("_", "")
            if not (text.isascii() and text.isdigit()):
                raise InvalidInputError(f"Price must be a whole non-negative number: '{raw.strip()}'")
            price = int(text)
        if price < 0:
            raise InvalidInputError(f"Price must not be negative: {price}")
        if price > MAX_PRICE:
            raise InvalidInputError(f"Price is too large: {price} (max {MAX_PRICE})")
        return price

    @staticmethod
    def parse_date(raw: str | date) -> date:
        """Parse a YYYY-MM-DD date."""
        if isinstance(raw, date):
            return raw
        text = (raw or "").strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            raise InvalidInputError(f"Date must be in YYYY-MM-DD format: '{text}'") from None


__all__ = ["InputValidator", "SERVICE_TYPES"]
