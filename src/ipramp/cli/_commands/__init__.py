"""CLI command groups."""

from typing import TYPE_CHECKING

from ._config import app as config_app
from ._context import CLIContext, OutputFormat
from ._data import app as data_app
from ._idea import app as idea_app
from ._settings import app as settings_app
from ._shared import ExitCode, exit_with_error, format_json, format_table
from ._sprint import app as sprint_app
from ._triz import app as triz_app

if TYPE_CHECKING:
    from cyclopts import App

__all__ = [
    "CLIContext",
    "ExitCode",
    "OutputFormat",
    "config_app",
    "data_app",
    "exit_with_error",
    "format_json",
    "format_table",
    "idea_app",
    "register_commands",
    "settings_app",
    "sprint_app",
    "triz_app",
]


def register_commands(app: App) -> None:
    app.command(config_app)
    app.command(data_app)
    app.command(idea_app)
    app.command(settings_app)
    app.command(sprint_app)
    app.command(triz_app)
