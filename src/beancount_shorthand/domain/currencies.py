"""Currency code rule shared by the builder and the account configuration."""
from __future__ import annotations

__all__ = ["MAX_CURRENCY_LENGTH", "is_valid_currency", "normalize_currency"]

# Beancount commodities are at most 24 characters long
MAX_CURRENCY_LENGTH = 24


def is_valid_currency(code: str) -> bool:
    # ASCII letters only; str.isalpha alone would accept e.g. "ÄUD"
    return 1 <= len(code) <= MAX_CURRENCY_LENGTH and code.isascii() and code.isalpha()


def normalize_currency(code: str) -> str:
    """Return the upper-cased code; callers check ``is_valid_currency`` first."""
    return code.strip().upper()
