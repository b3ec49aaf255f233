"""Account map value object (the account resolver).

Public API:
- AccountMap: immutable tag -> account path table plus default currency.
- is_valid_account_name: Beancount account name check used on construction.

Tags are matched case-insensitively (stored lower-cased). The map is built
once from configuration and shared by reference between concurrent parse
calls; nothing mutates it after ``__post_init__``.
"""
from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .currencies import is_valid_currency, normalize_currency
from .errors import ConfigError

__all__ = ["AccountMap", "is_valid_account_name"]

_TAG_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*$")
_ROOT_RE = re.compile(r"^[A-Z][A-Za-z0-9-]*$")
_COMPONENT_RE = re.compile(r"^[A-Z0-9][A-Za-z0-9-]*$")


def is_valid_account_name(name: str) -> bool:
    """Return True for names like ``Assets:Bank:CBA``.

    Only the shape is checked: a capitalized root followed by at least one
    sub-component. Root names are not fixed because ledgers may rename them
    (``option "name_expenses" "Expense"``).
    """
    parts = name.split(":")
    if len(parts) < 2 or not _ROOT_RE.match(parts[0]):
        return False
    return all(_COMPONENT_RE.match(p) for p in parts[1:])


@dataclass(frozen=True, slots=True)
class AccountMap:
    """Immutable mapping from short tag to canonical account path.

    Attributes:
        currency: default currency code (upper-cased on construction).
        accounts: read-only view of the tag table with lower-cased keys.

    Raises:
        ConfigError: on an invalid currency, tag or account name, or when two
            tags collide after case folding.
    """

    currency: str
    accounts: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        currency = normalize_currency(self.currency or "")
        if not is_valid_currency(currency):
            raise ConfigError(f"Invalid default currency: {self.currency!r}")

        table: dict[str, str] = {}
        for raw_tag, raw_account in self.accounts.items():
            tag = str(raw_tag).strip()
            if not _TAG_RE.match(tag):
                raise ConfigError(f"Invalid account tag: {raw_tag!r}")
            key = tag.lower()
            if key in table:
                raise ConfigError(f"Duplicate account tag (case-insensitive): {raw_tag!r}")
            account = str(raw_account).strip()
            if not is_valid_account_name(account):
                raise ConfigError(f"Invalid account name for tag {tag!r}: {raw_account!r}")
            table[key] = account

        object.__setattr__(self, "currency", currency)
        object.__setattr__(self, "accounts", MappingProxyType(table))

    def lookup(self, tag: str) -> str | None:
        """Return the account path for ``tag`` or None when it is unknown."""
        return self.accounts.get(tag.strip().lower())

    def default_currency(self) -> str:
        return self.currency

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(sorted(self.accounts.items()))

    def __len__(self) -> int:
        return len(self.accounts)
