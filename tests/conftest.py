from __future__ import annotations

from pathlib import Path

import pytest

from procscript.command import Command, CommandBuilder, SqlDbType

here = Path(__file__).parent
root_path = here.parent


@pytest.fixture
def get_user_command() -> Command:
    return CommandBuilder("GetUser").add_input("@id", SqlDbType.INT, 42).build()


@pytest.fixture
def update_status_command() -> Command:
    return (
        CommandBuilder("dbo.UpdateStatus")
        .add_return_value()
        .add_input("@id", SqlDbType.INT, 42)
        .add_input_output("@status", SqlDbType.VARCHAR, "ok", size=50)
        .add_output("@updated_at", SqlDbType.DATETIME2, precision=3)
        .build()
    )
