from __future__ import annotations

from datetime import date

import pytest

from beancount_shorthand.domain.errors import DomainError
from beancount_shorthand.domain.transaction import Posting, Transaction


def _txn(postings) -> Transaction:
    return Transaction(date=date(2021, 9, 8), payee="KFC", narration="hamburger", postings=postings)


def test_posting_amount_and_currency_together():
    assert Posting("Expenses:Food", "12.40", "AUD").is_balancing is False
    assert Posting("Assets:Bank:CBA").is_balancing is True
    with pytest.raises(DomainError):
        Posting("Expenses:Food", "12.40")
    with pytest.raises(DomainError):
        Posting("Expenses:Food", currency="AUD")


def test_transaction_exposes_both_sides():
    txn = _txn((Posting("Expenses:Food", "12.40", "AUD"), Posting("Assets:Bank:CBA")))
    assert txn.categorized.account == "Expenses:Food"
    assert txn.balancing.account == "Assets:Bank:CBA"


def test_transaction_posting_order_enforced():
    with pytest.raises(DomainError):
        _txn((Posting("Assets:Bank:CBA"), Posting("Expenses:Food", "12.40", "AUD")))
    with pytest.raises(DomainError):
        _txn((Posting("Expenses:Food", "1", "AUD"), Posting("Assets:Bank:CBA", "1", "AUD")))


def test_transaction_requires_two_postings():
    with pytest.raises(DomainError):
        _txn((Posting("Expenses:Food", "12.40", "AUD"),))


def test_transaction_is_immutable():
    txn = _txn((Posting("Expenses:Food", "12.40", "AUD"), Posting("Assets:Bank:CBA")))
    with pytest.raises(AttributeError):
        txn.payee = "Other"  # type: ignore[misc]
