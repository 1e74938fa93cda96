# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# ruff: noqa: D415, FBT002, TC003
"""Export, import and clear all stored data."""

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

from cyclopts import App, Parameter
from rich.console import Console

from ipramp.store import SettingsStore

from ._context import CLIContext
from ._shared import ExitCode, exit_with_error, run_with_adapter

if TYPE_CHECKING:
    from ipramp.storage import ImportSummary, PersistenceAdapter

app = App(name="data", help="Back up, restore and clear local data", help_on_error=True)


def _store(adapter: PersistenceAdapter) -> SettingsStore:
    return SettingsStore(adapter, logger=CLIContext.get_current().logger)


@app.command(name="export")
def _export(
    *,
    output: Annotated[
        Path | None,
        Parameter(name=["--output", "-o"], help="Write to this file instead of stdout"),
    ] = None,
) -> None:
    """Export every idea, sprint, member and preference as JSON

    Args:
        output: Destination file.
    """

    async def _run(adapter: PersistenceAdapter) -> str:
        return await _store(adapter).export_all_data()

    document = run_with_adapter(_run)

    if output is None:
        print(document)
        return

    try:
        output.write_text(document + "\n", encoding="utf-8")
    except OSError as e:
        exit_with_error(f"Cannot write {output}: {e}", ExitCode.IO_ERROR)
    Console(stderr=True).print(f"[green]Exported to[/green] {output}")


@app.command(name="import")
def _import(path: Path, /) -> None:
    """Import a JSON export

    Collections present in the file replace the stored ones; collections
    that are missing or null are left untouched.

    Args:
        path: Export file to read.
    """
    console = Console()

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        exit_with_error(f"File not found: {path}", ExitCode.NOT_FOUND)
    except OSError as e:
        exit_with_error(f"Cannot read {path}: {e}", ExitCode.IO_ERROR)

    async def _run(adapter: PersistenceAdapter) -> ImportSummary:
        return await _store(adapter).import_all_data(text)

    summary = run_with_adapter(_run)

    for label, count in (
        ("ideas", summary.ideas),
        ("sprints", summary.sprints),
        ("members", summary.members),
    ):
        if count is not None:
            console.print(f"Imported {count} {label}")
    if summary.prompt_prefs:
        console.print("Imported prompt preferences")
    console.print("[green]Import complete[/green]")


@app.command(name="clear")
def _clear(
    *,
    yes: Annotated[
        bool, Parameter(name=["--yes", "-y"], help="Confirm deleting all data")
    ] = False,
) -> None:
    """Delete all stored data

    Args:
        yes: Confirm the deletion.
    """
    if not yes:
        exit_with_error(
            "Refusing to delete all data without --yes", ExitCode.VALIDATION_ERROR
        )

    async def _run(adapter: PersistenceAdapter) -> int:
        return await adapter.clear_all_data()

    removed = run_with_adapter(_run)
    Console().print(f"[green]Cleared[/green] {removed} stored collection(s)")
