"""Shorthand-to-Beancount transaction converter.

    >>> from beancount_shorthand import AccountMap, parse_and_format
    >>> accounts = AccountMap("AUD", {"cba": "Assets:Bank:CBA", "food": "Expenses:Food"})
    >>> print(parse_and_format("2021-09-08 @KFC hamburger 12.40 AUD cba > food", accounts), end="")
    2021-09-08 * "KFC" "hamburger"
      Expenses:Food          12.40 AUD
      Assets:Bank:CBA
"""

from __future__ import annotations

__version__ = "0.3.0"

from .application.pipeline import parse, parse_and_format  # noqa: E402
from .domain.accounts import AccountMap  # noqa: E402
from .domain.errors import (  # noqa: E402
    AccountResolutionError,
    AmountParseError,
    ConfigError,
    CurrencyError,
    DateParseError,
    ErrorKind,
    InputSyntaxError,
    ParseError,
)

__all__ = [
    "__version__",
    "parse",
    "parse_and_format",
    "AccountMap",
    "ErrorKind",
    "ParseError",
    "InputSyntaxError",
    "DateParseError",
    "AmountParseError",
    "CurrencyError",
    "AccountResolutionError",
    "ConfigError",
]
