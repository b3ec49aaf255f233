from .builder import build_transaction
from .formatter import format_transaction
from .pipeline import parse, parse_and_format
from .ports import Clock
from .tokenizer import tokenize

__all__ = [
    "Clock",
    "tokenize",
    "build_transaction",
    "format_transaction",
    "parse",
    "parse_and_format",
]
