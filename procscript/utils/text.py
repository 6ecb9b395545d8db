"""Value-to-text helpers used when rendering SQL literals.

All conversions are locale independent: numbers and dates are formatted with explicit
format specifiers, never through the process locale.
"""

import datetime
import uuid
from decimal import Decimal
from enum import Enum
from typing import Any, Final
from xml.etree import ElementTree

from sqlglot import exp

from procscript.utils.dispatch import TypeDispatcher

__all__ = (
    "bytes_to_hex",
    "format_decimal",
    "quote",
    "to_text",
)

TSQL_DIALECT: Final[str] = "tsql"


def bytes_to_hex(value: "bytes | bytearray | memoryview") -> str:
    """Convert a byte sequence to a ``0x`` prefixed uppercase hexadecimal string.

    Args:
        value: The bytes to convert.

    Returns:
        str: The hexadecimal representation, e.g. ``0x0AFF``.
    """
    return "0x" + bytes(value).hex().upper()


def format_decimal(value: Decimal) -> str:
    """Render a ``Decimal`` in fixed-point notation (no exponent)."""
    return format(value, "f")


def _xml_to_text(value: ElementTree.Element) -> str:
    return ElementTree.tostring(value, encoding="unicode")


_TEXT_CONVERTERS: TypeDispatcher[str] = TypeDispatcher(str)
_TEXT_CONVERTERS.register(str.__str__, str)
_TEXT_CONVERTERS.register(lambda value: "True" if value else "False", bool)
_TEXT_CONVERTERS.register(lambda value: str(int(value)), int)
_TEXT_CONVERTERS.register(repr, float)
_TEXT_CONVERTERS.register(format_decimal, Decimal)
_TEXT_CONVERTERS.register(bytes_to_hex, bytes, bytearray, memoryview)
_TEXT_CONVERTERS.register(lambda value: value.isoformat(sep=" "), datetime.datetime)
_TEXT_CONVERTERS.register(lambda value: value.isoformat(), datetime.date, datetime.time)
_TEXT_CONVERTERS.register(lambda value: str(value).upper(), uuid.UUID)
_TEXT_CONVERTERS.register(lambda value: value.name, Enum)
_TEXT_CONVERTERS.register(_xml_to_text, ElementTree.Element)


def to_text(value: Any) -> str:
    """Return the textual representation of a parameter value.

    Types without a registered converter fall back to ``str()``.

    Args:
        value: The value to convert.

    Returns:
        str: The text form of the value.
    """
    return _TEXT_CONVERTERS(value)


def quote(text: str) -> str:
    """Wrap text in single quotes, doubling any embedded single quote.

    Args:
        text: The raw text.

    Returns:
        str: A T-SQL string literal, e.g. ``'O''Brien'``.
    """
    return exp.Literal.string(text).sql(dialect=TSQL_DIALECT)
