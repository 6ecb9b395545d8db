"""Literal encoding of parameter values.

Each supported ``SqlDbType`` maps a runtime value to the T-SQL literal that reproduces it in a
script. Output-only parameters and missing values always encode as ``NULL``.
"""

import datetime
import uuid
from decimal import Decimal
from enum import Enum
from typing import Any, Final, Union

from typing_extensions import assert_never

from procscript.command.types import ParameterDirection, SqlDbType
from procscript.exceptions import UnsupportedTypeError
from procscript.utils.text import format_decimal, quote, to_text

__all__ = (
    "NULL_LITERAL",
    "encode_literal",
    "format_date",
    "format_datetime",
    "format_datetime2",
    "format_datetimeoffset",
    "format_smalldatetime",
    "format_time",
    "format_uniqueidentifier",
)

NULL_LITERAL: Final[str] = "NULL"
_UNSUPPORTED_TYPES: Final[frozenset[SqlDbType]] = frozenset({SqlDbType.STRUCTURED, SqlDbType.UDT})

DateLike = Union[datetime.datetime, datetime.date]
TimeLike = Union[datetime.datetime, datetime.time, datetime.timedelta]


def _date_part(value: DateLike) -> str:
    return f"{value.month:02d}/{value.day:02d}/{value.year:04d}"


def _time_of_day(value: TimeLike) -> datetime.time:
    if isinstance(value, datetime.datetime):
        return value.time()
    if isinstance(value, datetime.timedelta):
        total_microseconds = (value.days * 86400 + value.seconds) * 1_000_000 + value.microseconds
        total_microseconds %= 86400 * 1_000_000
        seconds, microsecond = divmod(total_microseconds, 1_000_000)
        return datetime.time(seconds // 3600, seconds // 60 % 60, seconds % 60, microsecond)
    return value


def _clock(value: DateLike) -> datetime.time:
    if isinstance(value, datetime.datetime):
        return value.time()
    return datetime.time()


def format_date(value: DateLike) -> str:
    """Format as ``MM/dd/yyyy``."""
    return _date_part(value)


def format_datetime(value: DateLike) -> str:
    """Format as ``MM/dd/yyyy HH:mm:ss.fff`` (milliseconds)."""
    clock = _clock(value)
    return f"{_date_part(value)} {clock.hour:02d}:{clock.minute:02d}:{clock.second:02d}.{clock.microsecond // 1000:03d}"


def format_datetime2(value: DateLike) -> str:
    """Format as ``MM/dd/yyyy HH:mm:ss.fffffff`` (100 nanosecond ticks)."""
    clock = _clock(value)
    return f"{_date_part(value)} {clock.hour:02d}:{clock.minute:02d}:{clock.second:02d}.{clock.microsecond * 10:07d}"


def _format_offset(value: DateLike) -> str:
    offset = value.utcoffset() if isinstance(value, datetime.datetime) else None
    if offset is None:
        return "+00:00"
    sign = "-" if offset < datetime.timedelta(0) else "+"
    minutes = abs(offset) // datetime.timedelta(minutes=1)
    return f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def format_datetimeoffset(value: DateLike) -> str:
    """Format as ``MM/dd/yyyy HH:mm:ss.fffffff+HH:mm``.

    Naive values are rendered with a ``+00:00`` offset.
    """
    return f"{format_datetime2(value)}{_format_offset(value)}"


def format_smalldatetime(value: DateLike) -> str:
    """Format as ``MM/dd/yyyy HH:mm``."""
    clock = _clock(value)
    return f"{_date_part(value)} {clock.hour:02d}:{clock.minute:02d}"


def format_time(value: TimeLike) -> str:
    """Format as ``HH:mm:ss``."""
    clock = _time_of_day(value)
    return f"{clock.hour:02d}:{clock.minute:02d}:{clock.second:02d}"


def format_uniqueidentifier(value: Any) -> str:
    """Format as an uppercase hyphenated UUID.

    Raises:
        ValueError: If ``value`` is not a UUID or a string holding one.
    """
    if not isinstance(value, uuid.UUID):
        value = uuid.UUID(str(value))
    return str(value).upper()


def _integer_text(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(int(value))
    return to_text(value)


def _numeric_text(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, Decimal):
        return format_decimal(value)
    if isinstance(value, float):
        return repr(value)
    return to_text(value)


def _xml_text(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8")
    return to_text(value)


def encode_literal(
    sql_type: Union[SqlDbType, str], value: Any, direction: Union[ParameterDirection, str] = ParameterDirection.INPUT
) -> str:
    """Encode a parameter value as a T-SQL literal.

    Args:
        sql_type: Declared type of the parameter.
        value: Runtime value, or None.
        direction: Parameter direction. ``OUTPUT`` parameters always encode as ``NULL``.

    Raises:
        UnsupportedTypeError: If ``sql_type`` is a structured or user-defined type, or unknown.

    Returns:
        str: The literal text.
    """
    sql_type = SqlDbType.coerce(sql_type)
    direction = ParameterDirection.coerce(direction)
    if sql_type in _UNSUPPORTED_TYPES:
        raise UnsupportedTypeError(sql_type)
    if value is None or direction is ParameterDirection.OUTPUT:
        return NULL_LITERAL

    match sql_type:
        case (
            SqlDbType.CHAR
            | SqlDbType.NCHAR
            | SqlDbType.NTEXT
            | SqlDbType.NVARCHAR
            | SqlDbType.TEXT
            | SqlDbType.VARCHAR
        ):
            return quote(to_text(value))
        case SqlDbType.BIGINT | SqlDbType.INT | SqlDbType.SMALLINT | SqlDbType.TINYINT:
            return _integer_text(value)
        case SqlDbType.DECIMAL | SqlDbType.FLOAT | SqlDbType.MONEY | SqlDbType.REAL | SqlDbType.SMALLMONEY:
            return _numeric_text(value)
        case SqlDbType.BINARY | SqlDbType.IMAGE | SqlDbType.TIMESTAMP | SqlDbType.VARBINARY:
            return quote(to_text(value))
        case SqlDbType.BIT:
            return "1" if value else "0"
        case SqlDbType.DATE:
            return quote(format_date(value))
        case SqlDbType.DATETIME:
            return quote(format_datetime(value))
        case SqlDbType.DATETIME2:
            return quote(format_datetime2(value))
        case SqlDbType.DATETIMEOFFSET:
            return quote(format_datetimeoffset(value))
        case SqlDbType.SMALLDATETIME:
            return quote(format_smalldatetime(value))
        case SqlDbType.TIME:
            return quote(format_time(value))
        case SqlDbType.UNIQUEIDENTIFIER:
            return quote(format_uniqueidentifier(value))
        case SqlDbType.VARIANT:
            return quote(to_text(value))
        case SqlDbType.XML:
            return quote(_xml_text(value))
        case SqlDbType.STRUCTURED | SqlDbType.UDT:
            raise UnsupportedTypeError(sql_type)
        case _:
            assert_never(sql_type)
