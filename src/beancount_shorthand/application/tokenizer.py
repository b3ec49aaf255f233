"""Shorthand line tokenizer.

Grammar (whitespace separated, runs of whitespace allowed)::

    [<date>] @<payee> <narration...> <amount> <currency> <source> > <category>

- The date is optional; when the first field already starts with ``@`` no
  DATE token is produced and the builder decides what "today" is.
- The amount is the first field after the payee that looks numeric (an
  optional sign or leading point followed by a digit). It must be followed by
  exactly currency, source tag, ``>`` and category tag.
- ``cba>food`` and ``cba> food`` are accepted and split around ``>``; a ``>``
  inside the payee or narration is kept as text.

This is a pure function: no logging and no configuration access. Values are
not validated beyond structure; see ``application.builder``.
"""
from __future__ import annotations

import re

from beancount_shorthand.domain.errors import InputSyntaxError
from beancount_shorthand.domain.tokens import Token, TokenKind

__all__ = ["PAYEE_MARKER", "SEPARATOR", "tokenize"]

PAYEE_MARKER = "@"
SEPARATOR = ">"

_NUMERIC_LOOKING_RE = re.compile(r"^[+-]?\.?\d")  # any digit; the builder rejects non-ASCII ones

# amount, currency, source tag, separator, category tag
_TAIL_LENGTH = 5


def _split_fields(raw: str) -> list[str]:
    """Split on whitespace; the last field holding ``>`` is split around it.

    Only that field can be the tag pair (``cba>food``, ``cba>``, ``>food``);
    a ``>`` inside the payee or narration stays literal.
    """
    fields = raw.split()
    idx = next((i for i in range(len(fields) - 1, -1, -1) if SEPARATOR in fields[i]), None)
    if idx is None or fields[idx] == SEPARATOR:
        return fields
    head, _, tail = fields[idx].partition(SEPARATOR)
    return [*fields[:idx], *filter(None, (head, SEPARATOR, tail)), *fields[idx + 1:]]


def _looks_numeric(field: str) -> bool:
    return _NUMERIC_LOOKING_RE.match(field) is not None


def tokenize(raw: str) -> list[Token]:
    """Split a shorthand line into typed tokens.

    Args:
        raw: One line of user input.

    Returns:
        Tokens in grammar order: DATE (optional), PAYEE, NARRATION (possibly
        empty), AMOUNT, CURRENCY, SOURCE_TAG, SEPARATOR, CATEGORY_TAG.

    Raises:
        InputSyntaxError: empty input, missing or empty payee, missing or
            misplaced ``>``, missing amount or currency, too few fields.
    """
    fields = _split_fields(raw or "")
    if not fields:
        raise InputSyntaxError("Input is empty")

    tokens: list[Token] = []
    pos = 0
    if not fields[0].startswith(PAYEE_MARKER):
        tokens.append(Token(TokenKind.DATE, fields[0]))
        pos = 1

    if pos >= len(fields) or not fields[pos].startswith(PAYEE_MARKER):
        raise InputSyntaxError(f"Payee must start with {PAYEE_MARKER}")
    payee = fields[pos][len(PAYEE_MARKER):]
    if not payee:
        raise InputSyntaxError("Payee is empty")
    tokens.append(Token(TokenKind.PAYEE, payee))

    rest = fields[pos + 1:]
    if SEPARATOR not in rest:
        raise InputSyntaxError(f"Could not find {SEPARATOR} in input.")
    if len(rest) < _TAIL_LENGTH:
        raise InputSyntaxError(
            f"Expected '<amount> <currency> <tag> {SEPARATOR} <tag>' after payee"
        )
    if rest[-2] != SEPARATOR:
        raise InputSyntaxError(f"{SEPARATOR} must stand between the last two tags")

    amount_index = next((i for i, f in enumerate(rest) if _looks_numeric(f)), None)
    if amount_index is None:
        raise InputSyntaxError("Could not find amount in input")
    expected_index = len(rest) - _TAIL_LENGTH
    if amount_index == expected_index + 1:
        raise InputSyntaxError("Currency is missing after amount")
    if amount_index != expected_index:
        raise InputSyntaxError(
            f"Amount must be followed by '<currency> <tag> {SEPARATOR} <tag>'"
        )

    tokens.append(Token(TokenKind.NARRATION, " ".join(rest[:amount_index])))
    tokens.append(Token(TokenKind.AMOUNT, rest[-5]))
    tokens.append(Token(TokenKind.CURRENCY, rest[-4]))
    tokens.append(Token(TokenKind.SOURCE_TAG, rest[-3]))
    tokens.append(Token(TokenKind.SEPARATOR, rest[-2]))
    tokens.append(Token(TokenKind.CATEGORY_TAG, rest[-1]))
    return tokens
