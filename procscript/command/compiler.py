"""Script compiler for stored procedure commands.

Renders a ``Command`` into a T-SQL batch that can be pasted into a query editor to replay the
call: output variables are declared and preset, the procedure is executed with literal
arguments, and the captured outputs and return code are printed.

Layout of the rendered script::

    DECLARE @status_out varchar(50);
    DECLARE @rc int;

    SET @status_out = 'ok';

    EXEC @rc = UpdateStatus
        @id = 42,
        @status = @status_out OUTPUT;

    PRINT '@status OUTPUT: ' + CAST(@status_out AS varchar(max));

    PRINT 'Return Code: ' + CAST(@rc AS varchar(max));
"""

import logging
from typing import Optional

from mypy_extensions import mypyc_attr

from procscript.command.literals import encode_literal
from procscript.command.types import Command, Parameter
from procscript.command.variables import resolve_variable_type
from procscript.config import DEFAULT_SCRIPT_CONFIG, ScriptConfig
from procscript.exceptions import UnsupportedTypeError
from procscript.utils.logging import get_logger, log_with_context

__all__ = ("ScriptCompiler", "compile_command")

logger = get_logger("command.compiler")


@mypyc_attr(allow_interpreted_subclasses=False)
class ScriptCompiler:
    """Compiles commands into executable T-SQL scripts.

    The compiler holds only its configuration, so one instance can be shared freely.
    Compilation is all-or-nothing: an unsupported parameter type aborts the whole script.
    """

    __slots__ = ("_config",)

    def __init__(self, config: Optional[ScriptConfig] = None) -> None:
        self._config = config or DEFAULT_SCRIPT_CONFIG

    @property
    def config(self) -> ScriptConfig:
        return self._config

    def compile(self, command: Command) -> str:
        """Compile ``command`` into script text.

        Args:
            command: The procedure call to render.

        Raises:
            UnsupportedTypeError: If any parameter has a structured, user-defined or unknown type.

        Returns:
            str: The complete script.
        """
        config = self._config
        nl = config.newline
        rc = config.return_code_variable

        declares: list[str] = []
        presets: list[str] = []
        arguments: list[str] = []
        prints: list[str] = []

        for parameter in command.parameters:
            if parameter.is_return_value:
                continue

            literal = self._encode(parameter)

            if parameter.is_output:
                variable = parameter.output_variable(config.output_suffix)
                declares.append(f"DECLARE {variable} {self._resolve(parameter)};{nl}")
                presets.append(f"SET {variable} = {literal};{nl}")
                arguments.append(f"{parameter.name} = {variable} OUTPUT")
                prints.append(f"PRINT '{parameter.name} OUTPUT: ' + CAST({variable} AS varchar(max));{nl}")
            else:
                arguments.append(f"{parameter.name} = {literal}")

        declares.append(f"DECLARE {rc} int;{nl}")
        output_count = len(presets)
        if presets:
            presets.append(nl)
        if prints:
            prints.append(nl)
        prints.append(f"PRINT 'Return Code: ' + CAST({rc} AS varchar(max));{nl}")

        exec_clause = f"EXEC {rc} = {command.name}" + ",".join(f"{nl}{config.indent}{arg}" for arg in arguments)
        script = f"{''.join(declares)}{nl}{''.join(presets)}{exec_clause};{nl}{nl}{''.join(prints)}"

        log_with_context(
            logger,
            logging.DEBUG,
            "Compiled command script",
            procedure=command.name,
            argument_count=len(arguments),
            output_count=output_count,
        )
        return script

    @staticmethod
    def _encode(parameter: Parameter) -> str:
        try:
            return encode_literal(parameter.sql_type, parameter.value, parameter.direction)
        except UnsupportedTypeError as exc:
            logger.debug("Cannot encode parameter %s of type %s", parameter.name, exc.sql_type)
            raise UnsupportedTypeError(exc.sql_type, parameter.name) from exc

    @staticmethod
    def _resolve(parameter: Parameter) -> str:
        try:
            return resolve_variable_type(parameter.sql_type, parameter.size, parameter.precision, parameter.scale)
        except UnsupportedTypeError as exc:
            logger.debug("Cannot declare output variable for %s of type %s", parameter.name, exc.sql_type)
            raise UnsupportedTypeError(exc.sql_type, parameter.name) from exc


def compile_command(command: Command, config: Optional[ScriptConfig] = None) -> str:
    """Compile ``command`` into an executable T-SQL script.

    Args:
        command: The procedure call to render.
        config: Optional script layout configuration.

    Raises:
        UnsupportedTypeError: If any parameter has a structured, user-defined or unknown type.

    Returns:
        str: The complete script.
    """
    return ScriptCompiler(config).compile(command)
