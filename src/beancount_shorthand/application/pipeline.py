"""Single entry point used by every adapter (CLI, HTTP, Telegram webhook).

Callers pass the AccountMap they hold; there is no module-level configuration.
Both functions are pure and safe to call concurrently.
"""
from __future__ import annotations

from datetime import date

from beancount_shorthand.domain.accounts import AccountMap
from beancount_shorthand.domain.transaction import Transaction

from .builder import build_transaction
from .formatter import format_transaction
from .tokenizer import tokenize

__all__ = ["parse", "parse_and_format"]


def parse(raw: str, accounts: AccountMap, *, today: date | None = None) -> Transaction:
    """Tokenize and build a Transaction; raises a ParseError subclass on failure."""
    return build_transaction(tokenize(raw), accounts, today=today)


def parse_and_format(raw: str, accounts: AccountMap, *, today: date | None = None) -> str:
    """Convert a shorthand line into Beancount text.

    Args:
        raw: One line such as ``2021-09-08 @KFC hamburger 12.40 AUD cba > food``.
        accounts: Loaded account map.
        today: Fallback date for lines without a date field (see
            ``build_transaction``).

    Returns:
        The formatted entry, newline-terminated.

    Raises:
        InputSyntaxError, DateParseError, AmountParseError, CurrencyError,
        AccountResolutionError (all ParseError).
    """
    return format_transaction(parse(raw, accounts, today=today))
