"""procscript: render stored procedure calls as executable T-SQL scripts."""

from procscript import command, config, exceptions, utils
from procscript.__metadata__ import __version__
from procscript.command import (
    SIZE_MAX,
    Command,
    CommandBuilder,
    Parameter,
    ParameterDirection,
    ScriptCompiler,
    SqlDbType,
    compile_command,
    encode_literal,
    resolve_variable_type,
)
from procscript.config import ScriptConfig
from procscript.exceptions import (
    CommandError,
    ImproperConfigurationError,
    ParameterError,
    ProcScriptError,
    UnsupportedTypeError,
)

__all__ = (
    "SIZE_MAX",
    "Command",
    "CommandBuilder",
    "CommandError",
    "ImproperConfigurationError",
    "Parameter",
    "ParameterDirection",
    "ParameterError",
    "ProcScriptError",
    "ScriptCompiler",
    "ScriptConfig",
    "SqlDbType",
    "UnsupportedTypeError",
    "__version__",
    "command",
    "compile_command",
    "config",
    "encode_literal",
    "exceptions",
    "resolve_variable_type",
    "utils",
)
