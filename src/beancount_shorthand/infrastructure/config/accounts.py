"""Account table loader.

Turns loosely-typed TOML into a validated, immutable ``AccountMap`` once at
start-up. Schema::

    currency = "AUD"

    [accounts]
    cba = "Assets:Bank:CBA"
    food = "Expenses:Food"

Every problem (unreadable file, TOML syntax, wrong types, unknown keys,
invalid tag/account/currency) surfaces as ``ConfigError`` with the original
exception chained.
"""
from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from beancount_shorthand.domain.accounts import AccountMap
from beancount_shorthand.domain.errors import ConfigError
from beancount_shorthand.infrastructure.config.settings import BaseAppSettings
from beancount_shorthand.infrastructure.logging.config import get_logger

__all__ = [
    "AccountsConfig",
    "load_account_map",
    "load_account_map_from_file",
    "load_account_map_from_settings",
    "load_account_map_from_text",
]

log = get_logger("beancount_shorthand.config")


class AccountsConfig(BaseModel):
    """Raw configuration schema (structure and types only)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    currency: str = Field(min_length=1)
    accounts: dict[str, str] = Field(min_length=1)


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)


def load_account_map(data: dict[str, Any]) -> AccountMap:
    """Validate an already-parsed mapping and build the AccountMap."""
    try:
        cfg = AccountsConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid account configuration: {_format_validation_error(exc)}") from exc
    return AccountMap(currency=cfg.currency, accounts=cfg.accounts)


def load_account_map_from_text(text: str) -> AccountMap:
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Account configuration is not valid TOML: {exc}") from exc
    return load_account_map(data)


def load_account_map_from_file(path: str | Path) -> AccountMap:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigError(f"Account configuration file not found: {p}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read account configuration file {p}: {exc}") from exc
    return load_account_map_from_text(text)


def load_account_map_from_settings(settings: BaseAppSettings) -> AccountMap:
    """Load from inline ``CONFIG`` text, else from ``ACCOUNTS_FILE``.

    Raises:
        ConfigError: when neither source is set or the source is invalid.
    """
    if settings.config and settings.config.strip():
        accounts = load_account_map_from_text(settings.config)
        source = "CONFIG"
    elif settings.accounts_file:
        accounts = load_account_map_from_file(settings.accounts_file)
        source = settings.accounts_file
    else:
        raise ConfigError("No account configuration: set CONFIG or ACCOUNTS_FILE")
    log.info("accounts_loaded", source=source, tags=len(accounts), currency=accounts.default_currency())
    return accounts
