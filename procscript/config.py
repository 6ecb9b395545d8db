"""Script compiler configuration."""

from typing import Any, Final

from procscript.exceptions import ImproperConfigurationError

__all__ = ("DEFAULT_SCRIPT_CONFIG", "ScriptConfig")


class ScriptConfig:
    """Declarative configuration for the script compiler.

    The defaults reproduce the canonical script layout: a ``@rc`` return code variable,
    ``<name>_out`` output variables, tab-indented EXEC arguments and ``\\n`` line endings.
    """

    __slots__ = ("indent", "newline", "output_suffix", "return_code_variable")

    def __init__(
        self,
        return_code_variable: str = "@rc",
        output_suffix: str = "_out",
        indent: str = "\t",
        newline: str = "\n",
    ) -> None:
        """Initialize script configuration.

        Args:
            return_code_variable: Variable that receives the procedure's return code
            output_suffix: Suffix appended to a parameter name to form its output variable
            indent: Prefix for each EXEC argument line
            newline: Line separator of the rendered script

        Raises:
            ImproperConfigurationError: If a value cannot produce a valid script.
        """
        if not return_code_variable.startswith("@") or len(return_code_variable) < 2:  # noqa: PLR2004
            msg = f"Return code variable must be a T-SQL variable name starting with '@', got {return_code_variable!r}"
            raise ImproperConfigurationError(msg)
        if not output_suffix:
            msg = "Output variable suffix must not be empty"
            raise ImproperConfigurationError(msg)
        if not newline:
            msg = "Line separator must not be empty"
            raise ImproperConfigurationError(msg)

        self.return_code_variable = return_code_variable
        self.output_suffix = output_suffix
        self.indent = indent
        self.newline = newline

    def replace(self, **kwargs: Any) -> "ScriptConfig":
        """Return a copy of this configuration with the given fields replaced."""
        values = {name: getattr(self, name) for name in self.__slots__}
        values.update(kwargs)
        return ScriptConfig(**values)

    def hash(self) -> int:
        """Generate a deterministic hash of the configuration."""
        return hash((self.return_code_variable, self.output_suffix, self.indent, self.newline))

    def __hash__(self) -> int:
        return self.hash()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScriptConfig):
            return False
        return all(getattr(self, name) == getattr(other, name) for name in self.__slots__)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(f'{name}={getattr(self, name)!r}' for name in sorted(self.__slots__))})"


DEFAULT_SCRIPT_CONFIG: Final[ScriptConfig] = ScriptConfig()
