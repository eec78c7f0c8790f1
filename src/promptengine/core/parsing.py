"""
Text-to-value conversion for the prompt primitives.

A parser is any callable taking the trimmed line and returning a value,
raising ParseError when the text does not convert. Numeric kinds get their
digit-grouping commas removed before the type's own constructor sees them.
"""
from __future__ import annotations
from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable, Dict, Type, TypeVar, Union

from promptengine.core.errors import ParseError

T = TypeVar("T")

Parser = Callable[[str], T]
Kind = Union[Type[T], Parser]

GROUPING_CHAR = ","

NUMERIC_KINDS = (int, float, Decimal, Fraction)


def strip_grouping(text: str) -> str:
    """Remove digit-grouping commas: '1,454,398' -> '1454398'."""
    return text.replace(GROUPING_CHAR, "")


def _parse_str(text: str) -> str:
    return text


def _parse_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise ParseError(text, bool, "expected 'true' or 'false'")


def _numeric(kind: type) -> Parser:
    def parse_number(text: str):
        cleaned = strip_grouping(text)
        # int('1_000'), float(' 1 ') and int('١٢٣') are Python literal extras, not plain numbers
        if not cleaned or not cleaned.isascii() or "_" in cleaned or cleaned != cleaned.strip():
            raise ParseError(text, kind, "not a plain numeric literal")
        try:
            return kind(cleaned)
        except (ValueError, ArithmeticError) as e:
            raise ParseError(text, kind, str(e)) from e
    parse_number.__name__ = f"parse_{kind.__name__.lower()}"
    return parse_number


_REGISTRY: Dict[Any, Parser] = {
    str: _parse_str,
    bool: _parse_bool,
}
for _kind in NUMERIC_KINDS:
    _REGISTRY[_kind] = _numeric(_kind)


def _wrap(fn: Callable[[str], Any], kind: Any) -> Parser:
    def parse_other(text: str):
        try:
            return fn(text)
        except ParseError:
            raise
        except (ValueError, TypeError, ArithmeticError) as e:
            raise ParseError(text, kind, str(e)) from e
    return parse_other


def parser_for(kind: Kind[T]) -> Parser[T]:
    """Resolve the parser used for ``kind``.

    Registered kinds (str, bool and the numeric types) use their dedicated
    parser. Any other class is constructed from the text, and a plain
    callable is used as-is; in both cases conversion errors surface as
    ParseError.
    """
    if kind in _REGISTRY:
        return _REGISTRY[kind]
    if callable(kind):
        return _wrap(kind, kind)
    raise TypeError(f"{kind!r} is neither a type nor a parser callable")


def parse(text: str, kind: Kind[T] = str) -> T:
    return parser_for(kind)(text)
