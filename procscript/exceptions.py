from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from procscript.command.types import Command

__all__ = (
    "CommandError",
    "ImproperConfigurationError",
    "ParameterError",
    "ProcScriptError",
    "UnsupportedTypeError",
)


class ProcScriptError(Exception):
    """Base exception class from which all procscript exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``ProcScriptError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class UnsupportedTypeError(ProcScriptError):
    """Raised when a parameter's SQL type cannot be rendered into a script."""

    sql_type: Any
    parameter_name: Optional[str]

    def __init__(self, sql_type: Any, parameter_name: Optional[str] = None) -> None:
        """Initialize with the offending type tag and, when known, the parameter name."""
        type_name = getattr(sql_type, "name", sql_type)
        detail_message = f"Unknown parameter data type: {type_name!s}"
        if parameter_name:
            detail_message = f"{detail_message} (Parameter: {parameter_name})"
        super().__init__(detail=detail_message)
        self.sql_type = sql_type
        self.parameter_name = parameter_name


class ParameterError(ProcScriptError):
    """Raised when a parameter definition is invalid."""

    parameter_name: Optional[str]

    def __init__(self, message: str, parameter_name: Optional[str] = None) -> None:
        detail_message = message
        if parameter_name:
            detail_message = f"{message} (Parameter: {parameter_name})"
        super().__init__(detail=detail_message)
        self.parameter_name = parameter_name


class ImproperConfigurationError(ProcScriptError):
    """Improper Configuration error.

    This exception is raised when a ``ScriptConfig`` holds values that cannot produce a valid script.
    """


class CommandError(ProcScriptError):
    """The exception that is raised when a stored procedure call has failed.

    The compiled script of the failing command is kept in ``extended_message`` so it can be
    pasted into a query editor and replayed.
    """

    return_code: Optional[int]
    extended_message: Optional[str]

    def __init__(
        self, message: Optional[str] = None, command: "Optional[Command]" = None, return_code: Optional[int] = None
    ) -> None:
        super().__init__(detail=self._build_message(message, return_code))
        self.return_code = return_code
        self.extended_message = self._render_command(command)

    @staticmethod
    def _build_message(message: Optional[str], return_code: Optional[int]) -> str:
        lines: list[str] = []
        if message:
            lines.append(f"{message}.")
        if return_code is not None:
            lines.append(f"Return Code: {return_code}")
        return "\n".join(lines)

    @staticmethod
    def _render_command(command: "Optional[Command]") -> Optional[str]:
        if command is None:
            return None

        from procscript.utils.logging import get_logger

        try:
            return command.to_script()
        except Exception as exc:  # noqa: BLE001
            get_logger("exceptions").warning("Unable to render failing command %s: %s", command.name, exc)
            return None
