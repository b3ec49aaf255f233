"""Beancount text rendering for a built Transaction.

Layout::

    2021-09-08 * "KFC" "hamburger"
      Expenses:Food          12.40 AUD
      Assets:Bank:CBA

The amount column is cosmetic: Beancount only needs whitespace between the
account and the number.
"""
from __future__ import annotations

from beancount_shorthand.domain.transaction import Posting, Transaction

__all__ = ["ACCOUNT_COLUMN_WIDTH", "INDENT", "escape_string", "format_transaction"]

INDENT = "  "
ACCOUNT_COLUMN_WIDTH = 21
_MIN_GAP = "  "


def escape_string(value: str) -> str:
    # beancount strings are double-quoted; escape backslash first
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _posting_line(posting: Posting) -> str:
    if posting.is_balancing:
        return f"{INDENT}{posting.account}"
    account = posting.account.ljust(ACCOUNT_COLUMN_WIDTH)
    return f"{INDENT}{account}{_MIN_GAP}{posting.amount} {posting.currency}"


def format_transaction(txn: Transaction) -> str:
    """Render ``txn`` as a cleared Beancount entry ending with a newline."""
    header = (
        f'{txn.date.isoformat()} * "{escape_string(txn.payee)}" '
        f'"{escape_string(txn.narration)}"'
    )
    lines = [header, *(_posting_line(p) for p in txn.postings)]
    return "\n".join(lines) + "\n"
