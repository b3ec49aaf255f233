"""Transaction builder: semantic checks and account resolution over tokens."""
from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import date, datetime

from beancount_shorthand.domain.accounts import AccountMap
from beancount_shorthand.domain.currencies import is_valid_currency, normalize_currency
from beancount_shorthand.domain.errors import (
    AccountResolutionError,
    AmountParseError,
    CurrencyError,
    DateParseError,
    InputSyntaxError,
)
from beancount_shorthand.domain.tokens import Token, TokenKind
from beancount_shorthand.domain.transaction import Posting, Transaction

__all__ = ["build_transaction", "parse_amount", "parse_date"]

_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
_AMOUNT_RE = re.compile(r"^\+?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)$")


def parse_date(value: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` calendar date.

    Raises:
        DateParseError: wrong shape or impossible date (month 13, day 40, ...).
    """
    if not _DATE_RE.match(value):
        raise DateParseError(f"Invalid date {value!r}; expected YYYY-MM-DD")
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as exc:
        raise DateParseError(f"Invalid calendar date {value!r}") from exc


def parse_amount(value: str) -> str:
    """Validate a non-negative decimal and return its digit string.

    The value is kept as text so no rounding is introduced; only a leading
    ``+`` is removed.

    Raises:
        AmountParseError: negative, exponent notation, separators or junk.
    """
    if value.startswith("-"):
        raise AmountParseError(f"Amount must be non-negative: {value!r}")
    if not _AMOUNT_RE.match(value):
        raise AmountParseError(f"Invalid amount {value!r}")
    return value.lstrip("+")


def _resolve(accounts: AccountMap, tag: str) -> str:
    account = accounts.lookup(tag)
    if account is None:
        raise AccountResolutionError(tag)
    return account


def build_transaction(
    tokens: Sequence[Token],
    accounts: AccountMap,
    *,
    today: date | None = None,
) -> Transaction:
    """Assemble a Transaction from tokenizer output.

    Checks run in token order: date, amount, currency, then the source tag
    (left of ``>``) and the category tag (right of ``>``), so the first
    failure reported is the leftmost one.

    The category account receives the amount and is listed first; the source
    account is the balancing posting. ``cba > food`` therefore renders
    ``Expenses:Food 12.40 AUD`` followed by ``Assets:Bank:CBA``.

    Args:
        tokens: Output of ``tokenize``.
        accounts: Tag table used to resolve both tags.
        today: Date used when the line has no date field. When None such
            lines are rejected, which keeps the result a pure function of
            (input, configuration).

    Raises:
        InputSyntaxError, DateParseError, AmountParseError, CurrencyError,
        AccountResolutionError.
    """
    by_kind = {t.kind: t.value for t in tokens}
    missing = [
        k.value
        for k in (TokenKind.PAYEE, TokenKind.AMOUNT, TokenKind.CURRENCY, TokenKind.SOURCE_TAG, TokenKind.CATEGORY_TAG)
        if k not in by_kind
    ]
    if missing:
        raise InputSyntaxError(f"Missing fields: {', '.join(missing)}")

    raw_date = by_kind.get(TokenKind.DATE)
    if raw_date is not None:
        txn_date = parse_date(raw_date)
    elif today is not None:
        txn_date = today
    else:
        raise InputSyntaxError("Date is missing")

    amount = parse_amount(by_kind[TokenKind.AMOUNT])

    currency = normalize_currency(by_kind[TokenKind.CURRENCY])
    if not is_valid_currency(currency):
        raise CurrencyError(f"Invalid currency {by_kind[TokenKind.CURRENCY]!r}")

    source_account = _resolve(accounts, by_kind[TokenKind.SOURCE_TAG])
    category_account = _resolve(accounts, by_kind[TokenKind.CATEGORY_TAG])

    return Transaction(
        date=txn_date,
        payee=by_kind[TokenKind.PAYEE],
        narration=by_kind.get(TokenKind.NARRATION, ""),
        postings=(
            Posting(account=category_account, amount=amount, currency=currency),
            Posting(account=source_account),
        ),
    )
