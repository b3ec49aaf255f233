"""Structured transaction produced by the builder and consumed by the formatter."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from .errors import DomainError

__all__ = ["Posting", "Transaction"]


@dataclass(frozen=True, slots=True)
class Posting:
    """One ledger line: an account and optionally an explicit amount.

    ``amount`` is the verbatim decimal string typed by the user. A posting
    without amount is the balancing side of a transaction.
    """

    account: str
    amount: str | None = None
    currency: str | None = None

    def __post_init__(self) -> None:
        if (self.amount is None) != (self.currency is None):
            raise DomainError("Posting amount and currency must be given together")

    @property
    def is_balancing(self) -> bool:
        return self.amount is None


@dataclass(frozen=True, slots=True)
class Transaction:
    """A two-posting cleared transaction.

    Invariant: ``postings[0]`` carries the amount (categorized side) and
    ``postings[1]`` is balancing.
    """

    date: date
    payee: str
    narration: str
    postings: tuple[Posting, Posting]

    def __post_init__(self) -> None:
        if len(self.postings) != 2:
            raise DomainError("Transaction must have exactly two postings")
        categorized, balancing = self.postings
        if categorized.is_balancing or not balancing.is_balancing:
            raise DomainError("First posting must carry the amount, second must be balancing")

    @property
    def categorized(self) -> Posting:
        return self.postings[0]

    @property
    def balancing(self) -> Posting:
        return self.postings[1]
