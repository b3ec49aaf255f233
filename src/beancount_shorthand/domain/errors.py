"""Domain error hierarchy.

Every failure of the shorthand pipeline is a ``ParseError`` subclass carrying a
closed ``ErrorKind`` so adapters can branch exhaustively (HTTP status, bot
reply, CLI exit code) without matching on message text.

- DomainError: base for everything raised by this package on purpose
- ParseError: input could not be turned into a ledger entry
- ConfigError: account configuration is missing or invalid
"""
from __future__ import annotations

from enum import Enum
from typing import ClassVar

__all__ = [
    "ErrorKind",
    "DomainError",
    "ParseError",
    "InputSyntaxError",
    "DateParseError",
    "AmountParseError",
    "CurrencyError",
    "AccountResolutionError",
    "ConfigError",
]


class ErrorKind(str, Enum):
    SYNTAX = "syntax"
    DATE = "date"
    AMOUNT = "amount"
    CURRENCY = "currency"
    ACCOUNT = "account"


class DomainError(Exception):
    """Base class for errors raised deliberately by beancount_shorthand."""


class ParseError(DomainError):
    """Raised when a shorthand line cannot be converted.

    Keep messages concise; callers may present them directly to users.
    """

    kind: ClassVar[ErrorKind]


class InputSyntaxError(ParseError):
    """Structural grammar violation: missing marker, separator or field."""

    kind = ErrorKind.SYNTAX


class DateParseError(ParseError):
    kind = ErrorKind.DATE


class AmountParseError(ParseError):
    kind = ErrorKind.AMOUNT


class CurrencyError(ParseError):
    kind = ErrorKind.CURRENCY


class AccountResolutionError(ParseError):
    """Raised when a tag is absent from the account configuration.

    Public attributes:
    - tag: the offending tag exactly as typed by the user.
    """

    kind = ErrorKind.ACCOUNT

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"account {tag} doesn't exist in current setting")


class ConfigError(DomainError):
    """Account configuration could not be loaded or failed validation."""
