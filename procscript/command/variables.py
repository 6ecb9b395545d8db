"""Variable-type declarations for captured output parameters."""

from typing import Union

from typing_extensions import assert_never

from procscript.command.types import SqlDbType, is_max_size
from procscript.exceptions import UnsupportedTypeError

__all__ = ("resolve_variable_type", "size_to_string")


def size_to_string(size: int) -> str:
    """Render a parameter size, using ``max`` for unbounded sizes."""
    if is_max_size(size):
        return "max"
    return str(size)


def _with_precision(type_name: str, precision: int) -> str:
    if precision != 0:
        return f"{type_name}({precision})"
    return type_name


def resolve_variable_type(sql_type: Union[SqlDbType, str], size: int = 0, precision: int = 0, scale: int = 0) -> str:
    """Return the T-SQL type used to declare a variable capturing a parameter's output.

    Args:
        sql_type: Declared type of the parameter.
        size: Parameter size; ``SIZE_MAX`` or ``-1`` renders as ``max``.
        precision: Precision, ``0`` for the type default.
        scale: Scale, only used together with a non-zero precision.

    Raises:
        UnsupportedTypeError: For structured, user-defined or unknown types.

    Returns:
        str: The variable type, e.g. ``varchar(50)`` or ``decimal(18,2)``.
    """
    sql_type = SqlDbType.coerce(sql_type)

    match sql_type:
        case SqlDbType.BIGINT:
            return "bigint"
        case SqlDbType.BINARY:
            return f"binary({size})"
        case SqlDbType.BIT:
            return "bit"
        case SqlDbType.CHAR:
            return f"char({size})"
        case SqlDbType.DATE:
            return "date"
        case SqlDbType.DATETIME:
            return "datetime"
        case SqlDbType.DATETIME2:
            return _with_precision("datetime2", precision)
        case SqlDbType.DATETIMEOFFSET:
            return _with_precision("datetimeoffset", precision)
        case SqlDbType.DECIMAL:
            if precision != 0:
                return f"decimal({precision},{scale})"
            return "decimal"
        case SqlDbType.FLOAT:
            return _with_precision("float", precision)
        case SqlDbType.IMAGE:
            return "varbinary(max)"
        case SqlDbType.INT:
            return "int"
        case SqlDbType.MONEY:
            return "money"
        case SqlDbType.NCHAR:
            return f"nchar({size})"
        case SqlDbType.NTEXT:
            return "nvarchar(max)"
        case SqlDbType.NVARCHAR:
            return f"nvarchar({size_to_string(size)})"
        case SqlDbType.REAL:
            return "real"
        case SqlDbType.SMALLDATETIME:
            return "smalldatetime"
        case SqlDbType.SMALLINT:
            return "smallint"
        case SqlDbType.SMALLMONEY:
            return "smallmoney"
        case SqlDbType.TEXT:
            return "varchar(max)"
        case SqlDbType.TIME:
            return _with_precision("time", precision)
        case SqlDbType.TIMESTAMP:
            return "timestamp"
        case SqlDbType.TINYINT:
            return "tinyint"
        case SqlDbType.UNIQUEIDENTIFIER:
            return "uniqueidentifier"
        case SqlDbType.VARBINARY:
            return f"varbinary({size_to_string(size)})"
        case SqlDbType.VARCHAR:
            return f"varchar({size_to_string(size)})"
        case SqlDbType.VARIANT:
            return "sql_variant"
        case SqlDbType.XML:
            return "xml"
        case SqlDbType.STRUCTURED | SqlDbType.UDT:
            raise UnsupportedTypeError(sql_type)
        case _:
            assert_never(sql_type)
