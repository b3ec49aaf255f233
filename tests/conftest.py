from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import suppress

import pytest

from beancount_shorthand.domain.accounts import AccountMap
from beancount_shorthand.infrastructure.config.settings import get_settings

ACCOUNTS_TOML = """\
currency = "AUD"

[accounts]
cba = "Assets:Bank:CBA"
food = "Expenses:Food"
amex = "Liabilities:CreditCard:AMEX"
"""

_ENV_KEYS = (
    "ENV",
    "CONFIG",
    "ACCOUNTS_FILE",
    "TIMEZONE",
    "LOG_LEVEL",
    "JSON_LOGS",
    "LOG_FILE",
    "LOGGING_ENABLED",
    "BEANSHORT__CONFIG",
    "BEANSHORT__ACCOUNTS_FILE",
    "BEANSHORT__TIMEZONE",
    "BEANSHORT__LOG_LEVEL",
    "BEANSHORT__LOGGING_ENABLED",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate every test from the caller's environment and the settings cache."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    with suppress(AttributeError):
        get_settings.cache_clear()  # type: ignore[attr-defined]
    yield
    logging.getLogger().handlers.clear()
    with suppress(AttributeError):
        get_settings.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture
def account_map() -> AccountMap:
    return AccountMap(
        currency="AUD",
        accounts={
            "cba": "Assets:Bank:CBA",
            "food": "Expenses:Food",
            "amex": "Liabilities:CreditCard:AMEX",
        },
    )


@pytest.fixture
def accounts_toml() -> str:
    return ACCOUNTS_TOML
