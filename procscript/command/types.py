"""Command model: a stored procedure call and its typed parameters."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Final, Optional, Union

from procscript.exceptions import ParameterError, UnsupportedTypeError

if TYPE_CHECKING:
    from procscript.config import ScriptConfig

__all__ = (
    "MAX_32BIT_INT",
    "SIZE_MAX",
    "Command",
    "Parameter",
    "ParameterDirection",
    "SqlDbType",
    "is_max_size",
)

MAX_32BIT_INT: Final[int] = 2147483647
SIZE_MAX: Final[int] = MAX_32BIT_INT
"""Size sentinel for unbounded (``max``) character and binary parameters."""


def is_max_size(size: int) -> bool:
    """Return True when ``size`` denotes an unbounded parameter.

    Both the ``SIZE_MAX`` sentinel and ``-1`` (the driver convention for ``max``) qualify.
    """
    return size == -1 or size >= SIZE_MAX


class SqlDbType(str, Enum):
    """SQL Server parameter data types."""

    CHAR = "char"
    NCHAR = "nchar"
    NTEXT = "ntext"
    NVARCHAR = "nvarchar"
    TEXT = "text"
    VARCHAR = "varchar"
    BIGINT = "bigint"
    INT = "int"
    SMALLINT = "smallint"
    TINYINT = "tinyint"
    DECIMAL = "decimal"
    FLOAT = "float"
    MONEY = "money"
    REAL = "real"
    SMALLMONEY = "smallmoney"
    BINARY = "binary"
    IMAGE = "image"
    TIMESTAMP = "timestamp"
    VARBINARY = "varbinary"
    BIT = "bit"
    DATE = "date"
    DATETIME = "datetime"
    DATETIME2 = "datetime2"
    DATETIMEOFFSET = "datetimeoffset"
    SMALLDATETIME = "smalldatetime"
    TIME = "time"
    UNIQUEIDENTIFIER = "uniqueidentifier"
    VARIANT = "variant"
    XML = "xml"
    STRUCTURED = "structured"
    UDT = "udt"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def coerce(cls, value: Any) -> "SqlDbType":
        """Resolve a member from a member, its value or its case-insensitive name.

        Raises:
            UnsupportedTypeError: If ``value`` names no member.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            member = _SQL_DB_TYPE_LOOKUP.get(value.lower())
            if member is not None:
                return member
        raise UnsupportedTypeError(value)


_SQL_DB_TYPE_LOOKUP: Final[dict[str, SqlDbType]] = {member.value: member for member in SqlDbType}


class ParameterDirection(str, Enum):
    """Direction of a parameter relative to the procedure call."""

    INPUT = "input"
    OUTPUT = "output"
    INPUT_OUTPUT = "input_output"
    RETURN_VALUE = "return_value"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def coerce(cls, value: Any) -> "ParameterDirection":
        """Resolve a member from a member, its value or its case-insensitive name.

        Raises:
            ParameterError: If ``value`` names no member.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.lower().replace("-", "_")
            for member in cls:
                if key in {member.value, member.value.replace("_", "")}:
                    return member
        msg = f"Unknown parameter direction: {value!r}"
        raise ParameterError(msg)


@dataclass(frozen=True)
class Parameter:
    """A single typed parameter of a procedure call.

    ``name`` is used verbatim, so it should carry the driver's prefix (``@id``).
    ``precision`` and ``scale`` of ``0`` mean the type default.
    """

    name: str
    sql_type: SqlDbType
    value: Any = None
    direction: ParameterDirection = ParameterDirection.INPUT
    size: int = 0
    precision: int = 0
    scale: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            msg = f"Parameter name must be a non-empty string, got {self.name!r}"
            raise ParameterError(msg)
        if self.precision < 0 or self.scale < 0:
            msg = "Precision and scale must not be negative"
            raise ParameterError(msg, self.name)
        # Unknown type tags are kept as given so compiling reports them as unsupported.
        if isinstance(self.sql_type, str) and self.sql_type.lower() in _SQL_DB_TYPE_LOOKUP:
            object.__setattr__(self, "sql_type", SqlDbType.coerce(self.sql_type))
        object.__setattr__(self, "direction", ParameterDirection.coerce(self.direction))

    @property
    def is_output(self) -> bool:
        """True for parameters whose value is captured after the call."""
        return self.direction in {ParameterDirection.OUTPUT, ParameterDirection.INPUT_OUTPUT}

    @property
    def is_return_value(self) -> bool:
        return self.direction is ParameterDirection.RETURN_VALUE

    def output_variable(self, suffix: str = "_out") -> str:
        """Name of the local variable capturing this parameter's output value."""
        return f"{self.name}{suffix}"


@dataclass(frozen=True, init=False)
class Command:
    """A stored procedure invocation: procedure name plus ordered parameters."""

    name: str
    parameters: tuple[Parameter, ...] = field(default_factory=tuple)

    def __init__(self, name: str, parameters: Optional[Iterable[Parameter]] = None) -> None:
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "parameters", tuple(parameters or ()))

    def get_parameter(self, name: str) -> Union[Parameter, None]:
        """Return the first parameter called ``name`` or None."""
        return next((parameter for parameter in self.parameters if parameter.name == name), None)

    def to_script(self, config: "Optional[ScriptConfig]" = None) -> str:
        """Render this command as an executable T-SQL script.

        Raises:
            UnsupportedTypeError: If any parameter has a type that cannot be rendered.
        """
        from procscript.command.compiler import ScriptCompiler

        return ScriptCompiler(config).compile(self)
