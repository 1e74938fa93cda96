# pyright: reportExplicitAny=false, reportAny=false
"""Shared CLI utilities for commands.

This module provides common utilities used across CLI command implementations:
- Standardized exit codes
- Generic output formatters (JSON, table)
- Console utilities for error handling
- Running async adapter work with errors mapped to exit codes
"""

import sqlite3
from collections.abc import Awaitable, Callable  # noqa: TC003
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Never

import anyio
from pydantic import ValidationError

from ipramp.exceptions import (
    DataImportError,
    FrameworkMismatchError,
    IdeaNotFoundError,
    IdeaValidationError,
    SprintNotFoundError,
    SprintValidationError,
)
from ipramp.idea import BadgeColor
from ipramp.storage import PersistenceAdapter, SQLiteKeyValueStore

from ._context import CLIContext

if TYPE_CHECKING:
    from rich.console import Console

    from ipramp.idea import Idea
    from ipramp.sprint import Sprint

# Type alias for formattable data - uses Any to match library signatures
FormattableData = dict[str, Any]

__all__ = [
    "ExitCode",
    "FormattableData",
    "badge_markup",
    "exit_with_error",
    "exit_with_success",
    "format_json",
    "format_table",
    "get_error_console",
    "open_adapter",
    "require_idea",
    "require_sprint",
    "run_with_adapter",
]


class ExitCode(IntEnum):
    """Standard exit codes for ipramp CLI commands."""

    SUCCESS = 0
    LOAD_ERROR = 1
    VALIDATION_ERROR = 2
    NOT_FOUND = 3
    IO_ERROR = 4
    INTERNAL_ERROR = 5


def format_json(data: FormattableData | list[Any], *, indent: bool = True) -> str:
    """Format data as JSON.

    Args:
        data: Dictionary or list to format as JSON.
        indent: Whether to pretty-print with indentation.

    Returns:
        JSON-formatted string representation.
    """
    import orjson

    options = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(data, option=options).decode("utf-8")


def format_table(headers: list[str], rows: list[list[Any]]) -> str:
    """Format rows as a Markdown table.

    Args:
        headers: Column headers.
        rows: Table rows, one value per header.

    Returns:
        Markdown table string.
    """
    from pytablewriter import MarkdownTableWriter

    writer = MarkdownTableWriter(headers=headers, value_matrix=rows, margin=1)
    return writer.dumps()


_RICH_COLORS: dict[BadgeColor, str] = {
    BadgeColor.NEUTRAL: "white",
    BadgeColor.BLUE: "blue",
    BadgeColor.AMBER: "yellow",
    BadgeColor.GREEN: "green",
    BadgeColor.RED: "red",
    BadgeColor.GRAY: "bright_black",
    BadgeColor.FADED: "dim",
}


def badge_markup(text: str, color: BadgeColor) -> str:
    """Wrap badge text in Rich markup for its presentation color."""
    style = _RICH_COLORS[color]
    return f"[{style}]{text}[/{style}]"


def get_error_console() -> Console:
    """Get a Rich console configured for stderr output.

    Returns:
        A Console instance that writes to stderr.
    """
    from rich.console import Console

    return Console(stderr=True)


def exit_with_error(
    message: str,
    code: ExitCode = ExitCode.LOAD_ERROR,
    *,
    console: Console | None = None,
) -> Never:
    """Print an error message and exit with the specified code.

    Args:
        message: Error message to display.
        code: Exit code to use (default: LOAD_ERROR).
        console: Optional Rich console for output. If not provided, a new
            stderr console will be created.

    Raises:
        SystemExit: Always raised with the specified exit code.
    """
    if console is None:
        console = get_error_console()

    console.print(f"[red]Error:[/red] {message}")
    raise SystemExit(code)


def exit_with_success(
    message: str | None = None,
    *,
    console: Console | None = None,
) -> Never:
    """Print an optional success message and exit with SUCCESS code.

    Raises:
        SystemExit: Always raised with ExitCode.SUCCESS (0).
    """
    if message is not None:
        if console is None:
            console = get_error_console()
        console.print(message)
    raise SystemExit(ExitCode.SUCCESS)


# -----------------------------------------------------------------------------
# Adapter access
# -----------------------------------------------------------------------------


def open_adapter(ctx: CLIContext | None = None) -> PersistenceAdapter:
    """Build the persistence adapter described by the CLI configuration.

    Args:
        ctx: CLI context; the current one when omitted.

    Returns:
        Adapter over the configured SQLite database and key prefix.
    """
    if ctx is None:
        ctx = CLIContext.get_current()
    storage = ctx.config.storage
    store = SQLiteKeyValueStore(storage.resolve_path(), logger=ctx.logger)
    return PersistenceAdapter(store, key_prefix=storage.key_prefix, logger=ctx.logger)


async def require_idea(adapter: PersistenceAdapter, idea_id: str) -> Idea:
    """Fetch an idea that must exist.

    Raises:
        IdeaNotFoundError: If no idea has ``idea_id``.
    """
    idea = await adapter.get_idea(idea_id)
    if idea is None:
        msg = f"Idea not found: {idea_id}"
        raise IdeaNotFoundError(msg, idea_id=idea_id)
    return idea


async def require_sprint(adapter: PersistenceAdapter, sprint_id: str) -> Sprint:
    """Fetch a sprint that must exist.

    Raises:
        SprintNotFoundError: If no sprint has ``sprint_id``.
    """
    sprint = await adapter.get_sprint(sprint_id)
    if sprint is None:
        msg = f"Sprint not found: {sprint_id}"
        raise SprintNotFoundError(msg, sprint_id=sprint_id)
    return sprint


def run_with_adapter[T](
    func: Callable[[PersistenceAdapter], Awaitable[T]],
) -> T:
    """Open the adapter and run ``func`` on an event loop.

    Domain errors are printed and mapped to exit codes: missing records to
    NOT_FOUND, invalid input to VALIDATION_ERROR and storage failures to
    IO_ERROR.

    Args:
        func: Coroutine function receiving the adapter.

    Returns:
        Whatever ``func`` returns.

    Raises:
        SystemExit: When ``func`` fails with a handled error.
    """
    ctx = CLIContext.get_current()
    try:
        adapter = open_adapter(ctx)
        return anyio.run(func, adapter)
    except (IdeaNotFoundError, SprintNotFoundError) as e:
        exit_with_error(str(e.args[0]), ExitCode.NOT_FOUND)
    except (
        IdeaValidationError,
        SprintValidationError,
        FrameworkMismatchError,
        DataImportError,
        ValidationError,
    ) as e:
        if ctx.logger:
            ctx.logger.info("command_rejected", error=str(e))
        exit_with_error(str(e), ExitCode.VALIDATION_ERROR)
    except (OSError, sqlite3.Error) as e:
        if ctx.logger:
            ctx.logger.error("storage_failed", error=str(e))
        exit_with_error(f"Storage error: {e}", ExitCode.IO_ERROR)
