"""Explicit handle to the process-wide AccountMap.

Adapters receive an ``AccountMapHolder`` at construction time instead of
reaching for a module global. ``current()`` hands out the map reference;
``swap()`` replaces it whole, so a parse call that already took a reference
keeps working against a complete map.
"""
from __future__ import annotations

import threading

from beancount_shorthand.domain.accounts import AccountMap
from beancount_shorthand.infrastructure.config.accounts import load_account_map_from_settings
from beancount_shorthand.infrastructure.config.settings import BaseAppSettings
from beancount_shorthand.infrastructure.logging.config import get_logger

__all__ = ["AccountMapHolder"]

log = get_logger("beancount_shorthand.config")


class AccountMapHolder:
    def __init__(self, accounts: AccountMap) -> None:
        self._accounts = accounts
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: BaseAppSettings) -> AccountMapHolder:
        return cls(load_account_map_from_settings(settings))

    def current(self) -> AccountMap:
        return self._accounts

    def swap(self, accounts: AccountMap) -> AccountMap:
        """Install ``accounts`` and return the previous map."""
        with self._lock:
            previous, self._accounts = self._accounts, accounts
        log.info("accounts_swapped", tags=len(accounts))
        return previous

    def reload(self, settings: BaseAppSettings) -> AccountMap:
        """Load a fresh map from settings and swap it in.

        On ConfigError the current map stays installed.
        """
        fresh = load_account_map_from_settings(settings)
        self.swap(fresh)
        return fresh
