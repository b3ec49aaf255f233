from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = ["TokenKind", "Token"]


class TokenKind(str, Enum):
    DATE = "date"
    PAYEE = "payee"
    NARRATION = "narration"
    AMOUNT = "amount"
    CURRENCY = "currency"
    SOURCE_TAG = "source_tag"
    SEPARATOR = "separator"
    CATEGORY_TAG = "category_tag"


@dataclass(frozen=True, slots=True)
class Token:
    """A typed field of a shorthand line.

    ``value`` is the raw text of the field with markers removed (the payee
    token has no leading ``@``); validation happens in the builder.
    """

    kind: TokenKind
    value: str
