"""Stored procedure command model and script compiler."""

from procscript.command.builder import CommandBuilder
from procscript.command.compiler import ScriptCompiler, compile_command
from procscript.command.literals import NULL_LITERAL, encode_literal
from procscript.command.types import (
    MAX_32BIT_INT,
    SIZE_MAX,
    Command,
    Parameter,
    ParameterDirection,
    SqlDbType,
    is_max_size,
)
from procscript.command.variables import resolve_variable_type, size_to_string

__all__ = (
    "MAX_32BIT_INT",
    "NULL_LITERAL",
    "SIZE_MAX",
    "Command",
    "CommandBuilder",
    "Parameter",
    "ParameterDirection",
    "ScriptCompiler",
    "SqlDbType",
    "compile_command",
    "encode_literal",
    "is_max_size",
    "resolve_variable_type",
    "size_to_string",
)
