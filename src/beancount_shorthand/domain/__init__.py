from .accounts import AccountMap, is_valid_account_name
from .errors import (
    AccountResolutionError,
    AmountParseError,
    ConfigError,
    CurrencyError,
    DateParseError,
    DomainError,
    ErrorKind,
    InputSyntaxError,
    ParseError,
)
from .tokens import Token, TokenKind
from .transaction import Posting, Transaction

__all__ = [
    "AccountMap",
    "is_valid_account_name",
    "DomainError",
    "ErrorKind",
    "ParseError",
    "InputSyntaxError",
    "DateParseError",
    "AmountParseError",
    "CurrencyError",
    "AccountResolutionError",
    "ConfigError",
    "Token",
    "TokenKind",
    "Posting",
    "Transaction",
]
