"""Tests for the command script compiler."""

from unittest.mock import patch

import pytest

from procscript.command import Command, CommandBuilder, Parameter, ParameterDirection, SqlDbType
from procscript.command.compiler import ScriptCompiler, compile_command
from procscript.config import ScriptConfig
from procscript.exceptions import UnsupportedTypeError

RETURN_CODE_PRINT = "PRINT 'Return Code: ' + CAST(@rc AS varchar(max));\n"


def test_single_input_parameter(get_user_command: Command) -> None:
    script = compile_command(get_user_command)

    assert script == (f"DECLARE @rc int;\n\nEXEC @rc = GetUser\n\t@id = 42;\n\n{RETURN_CODE_PRINT}")


def test_exec_block_and_single_print_line(get_user_command: Command) -> None:
    script = compile_command(get_user_command)

    assert "EXEC @rc = GetUser\n\t@id = 42;" in script
    assert [line for line in script.splitlines() if line.startswith("PRINT")] == [RETURN_CODE_PRINT.rstrip("\n")]


def test_mixed_directions(update_status_command: Command) -> None:
    script = compile_command(update_status_command)

    assert script == (
        "DECLARE @status_out varchar(50);\n"
        "DECLARE @updated_at_out datetime2(3);\n"
        "DECLARE @rc int;\n"
        "\n"
        "SET @status_out = 'ok';\n"
        "SET @updated_at_out = NULL;\n"
        "\n"
        "EXEC @rc = dbo.UpdateStatus\n"
        "\t@id = 42,\n"
        "\t@status = @status_out OUTPUT,\n"
        "\t@updated_at = @updated_at_out OUTPUT;\n"
        "\n"
        "PRINT '@status OUTPUT: ' + CAST(@status_out AS varchar(max));\n"
        "PRINT '@updated_at OUTPUT: ' + CAST(@updated_at_out AS varchar(max));\n"
        "\n"
        f"{RETURN_CODE_PRINT}"
    )


def test_input_output_parameter_fragments() -> None:
    command = CommandBuilder("SetStatus").add_input_output("@status", SqlDbType.VARCHAR, "ok", size=50).build()

    script = compile_command(command)

    assert "DECLARE @status_out varchar(50);\n" in script
    assert "SET @status_out = 'ok';\n" in script
    assert "\t@status = @status_out OUTPUT;" in script
    status_print = script.index("PRINT '@status OUTPUT: ' + CAST(@status_out AS varchar(max));")
    assert status_print < script.index(RETURN_CODE_PRINT)


def test_output_preset_is_always_null() -> None:
    command = Command(
        "GetTotal", [Parameter("@total", SqlDbType.MONEY, 99, ParameterDirection.OUTPUT)]
    )

    assert "SET @total_out = NULL;\n" in compile_command(command)


def test_return_code_declared_after_parameter_declarations(update_status_command: Command) -> None:
    declarations = [line for line in compile_command(update_status_command).splitlines() if line.startswith("DECLARE")]

    assert declarations[-1] == "DECLARE @rc int;"


def test_return_value_parameter_is_excluded() -> None:
    command = Command(
        "Purge",
        [
            Parameter("@RETURN_VALUE", SqlDbType.INT, None, ParameterDirection.RETURN_VALUE),
            Parameter("@days", SqlDbType.INT, 30),
            Parameter("@ignored", SqlDbType.UDT, None, ParameterDirection.RETURN_VALUE),
            Parameter("@dry_run", SqlDbType.BIT, True),
        ],
    )

    script = compile_command(command)

    assert "RETURN_VALUE" not in script
    assert "@ignored" not in script
    assert "EXEC @rc = Purge\n\t@days = 30,\n\t@dry_run = 1;" in script


def test_parameter_order_is_preserved() -> None:
    names = ["@c", "@a", "@b"]
    command = Command("Ordered", [Parameter(name, SqlDbType.INT, index) for index, name in enumerate(names)])

    script = compile_command(command)

    positions = [script.index(f"\t{name} = ") for name in names]
    assert positions == sorted(positions)


def test_command_without_parameters() -> None:
    script = compile_command(Command("dbo.Ping"))

    assert script == f"DECLARE @rc int;\n\nEXEC @rc = dbo.Ping;\n\n{RETURN_CODE_PRINT}"


def test_unsupported_type_aborts_compile() -> None:
    command = Command(
        "SaveShape",
        [Parameter("@id", SqlDbType.INT, 1), Parameter("@shape", SqlDbType.UDT, object())],
    )

    with pytest.raises(UnsupportedTypeError) as exc_info:
        compile_command(command)

    assert exc_info.value.parameter_name == "@shape"
    assert exc_info.value.sql_type is SqlDbType.UDT


def test_unsupported_output_type_aborts_compile() -> None:
    command = Command("Load", [Parameter("@rows", SqlDbType.STRUCTURED, None, ParameterDirection.OUTPUT)])

    with pytest.raises(UnsupportedTypeError):
        compile_command(command)


def test_unknown_type_tag_aborts_compile() -> None:
    command = Command("Locate", [Parameter("@where", "geography", "POINT(0 0)")])  # type: ignore[arg-type]

    with pytest.raises(UnsupportedTypeError):
        compile_command(command)


def test_compile_is_idempotent(update_status_command: Command) -> None:
    compiler = ScriptCompiler()

    assert compiler.compile(update_status_command) == compiler.compile(update_status_command)


def test_command_to_script_matches_compiler(update_status_command: Command) -> None:
    assert update_status_command.to_script() == compile_command(update_status_command)


def test_custom_configuration(get_user_command: Command) -> None:
    config = ScriptConfig(return_code_variable="@result", indent="    ", newline="\r\n")

    script = ScriptCompiler(config).compile(get_user_command)

    assert script == (
        "DECLARE @result int;\r\n\r\n"
        "EXEC @result = GetUser\r\n    @id = 42;\r\n\r\n"
        "PRINT 'Return Code: ' + CAST(@result AS varchar(max));\r\n"
    )


def test_custom_output_suffix() -> None:
    command = CommandBuilder("Count").add_output("@n", SqlDbType.INT).build()

    script = ScriptCompiler(ScriptConfig(output_suffix="_value")).compile(command)

    assert "DECLARE @n_value int;" in script
    assert "@n = @n_value OUTPUT" in script


def test_compile_logs_summary(get_user_command: Command) -> None:
    with patch("procscript.command.compiler.log_with_context") as mock_log:
        compile_command(get_user_command)

    mock_log.assert_called_once()
    assert mock_log.call_args.kwargs == {"procedure": "GetUser", "argument_count": 1, "output_count": 0}
