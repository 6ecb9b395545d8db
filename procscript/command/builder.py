"""Fluent builder for procedure commands."""

from typing import Any, Union

from procscript.command.types import Command, Parameter, ParameterDirection, SqlDbType
from procscript.exceptions import ParameterError

__all__ = ("DEFAULT_RETURN_VALUE_PARAMETER_NAME", "CommandBuilder")

DEFAULT_RETURN_VALUE_PARAMETER_NAME = "@RETURN_VALUE"

TypeTag = Union[SqlDbType, str]


class CommandBuilder:
    """Collects parameters in call order and produces an immutable ``Command``.

    Example:
        command = (
            CommandBuilder("dbo.UpdateStatus")
            .add_return_value()
            .add_input("@id", SqlDbType.INT, 42)
            .add_input_output("@status", SqlDbType.VARCHAR, "ok", size=50)
            .build()
        )
    """

    __slots__ = ("_name", "_parameters")

    def __init__(self, name: str) -> None:
        self._name = name
        self._parameters: list[Parameter] = []

    def add(self, parameter: Parameter) -> "CommandBuilder":
        """Append a parameter.

        Raises:
            ParameterError: If a parameter with the same name was already added.
        """
        if any(existing.name == parameter.name for existing in self._parameters):
            msg = "Duplicate parameter name"
            raise ParameterError(msg, parameter.name)
        self._parameters.append(parameter)
        return self

    def add_input(
        self, name: str, sql_type: TypeTag, value: Any = None, size: int = 0, precision: int = 0, scale: int = 0
    ) -> "CommandBuilder":
        return self.add(Parameter(name, sql_type, value, ParameterDirection.INPUT, size, precision, scale))  # type: ignore[arg-type]

    def add_output(
        self, name: str, sql_type: TypeTag, size: int = 0, precision: int = 0, scale: int = 0
    ) -> "CommandBuilder":
        return self.add(Parameter(name, sql_type, None, ParameterDirection.OUTPUT, size, precision, scale))  # type: ignore[arg-type]

    def add_input_output(
        self, name: str, sql_type: TypeTag, value: Any = None, size: int = 0, precision: int = 0, scale: int = 0
    ) -> "CommandBuilder":
        return self.add(Parameter(name, sql_type, value, ParameterDirection.INPUT_OUTPUT, size, precision, scale))  # type: ignore[arg-type]

    def add_return_value(
        self, name: str = DEFAULT_RETURN_VALUE_PARAMETER_NAME, sql_type: TypeTag = SqlDbType.INT
    ) -> "CommandBuilder":
        """Append the parameter receiving the procedure's return code.

        It never appears in a compiled script; the script captures the code itself.
        """
        return self.add(Parameter(name, sql_type, None, ParameterDirection.RETURN_VALUE))  # type: ignore[arg-type]

    @property
    def parameters(self) -> "tuple[Parameter, ...]":
        return tuple(self._parameters)

    def build(self) -> Command:
        return Command(self._name, self._parameters)
