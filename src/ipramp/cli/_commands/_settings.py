# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# pyright: reportAny=false, reportExplicitAny=false
# ruff: noqa: A002, D415
"""Prompt preference and inventor detail commands."""

from typing import TYPE_CHECKING, Annotated, Any

from cyclopts import App, Parameter
from rich.console import Console

from ipramp.settings import (
    CLAIM_STYLE_OPTIONS,
    DOMAIN_FOCUS_OPTIONS,
    JURISDICTION_OPTIONS,
    TECHNICAL_DEPTH_OPTIONS,
    TONE_OPTIONS,
    InventorInfo,
    PromptPreferences,
)
from ipramp.store import SettingsState, SettingsStore

from ._context import CLIContext, OutputFormat
from ._shared import ExitCode, exit_with_error, format_json, run_with_adapter

if TYPE_CHECKING:
    from ipramp.storage import PersistenceAdapter

app = App(
    name="settings",
    help="Drafting preferences and inventor details",
    help_on_error=True,
)

_OPTION_LABELS: dict[str, dict[Any, str]] = {
    "jurisdiction": JURISDICTION_OPTIONS,
    "claim_style": CLAIM_STYLE_OPTIONS,
    "technical_depth": TECHNICAL_DEPTH_OPTIONS,
    "tone": TONE_OPTIONS,
    "domain_focus": DOMAIN_FOCUS_OPTIONS,
}


def _store(adapter: PersistenceAdapter) -> SettingsStore:
    return SettingsStore(adapter, logger=CLIContext.get_current().logger)


def _print_settings(console: Console, state: SettingsState) -> None:
    prefs = state.prompt_preferences
    console.print("[bold]Prompt preferences[/bold]")
    for name in PromptPreferences.model_fields:
        value = getattr(prefs, name)
        label = _OPTION_LABELS.get(name, {}).get(value)
        shown = f"{value} ({label})" if label else (value or "[dim]-[/dim]")
        console.print(f"  {name}: {shown}")
    info = state.inventor_info
    console.print("\n[bold]Inventor[/bold]")
    for name in InventorInfo.model_fields:
        console.print(f"  {name}: {getattr(info, name) or '[dim]-[/dim]'}")


@app.command(name="show")
def _show(
    *,
    format: Annotated[
        OutputFormat, Parameter(name=["--format", "-f"], help="Output format")
    ] = OutputFormat.PLAIN,
) -> None:
    """Show prompt preferences and inventor details

    Args:
        format: Output format (plain, json).
    """

    async def _run(adapter: PersistenceAdapter) -> SettingsState:
        return await _store(adapter).load()

    state = run_with_adapter(_run)

    if format == OutputFormat.JSON:
        print(
            format_json(
                {
                    "promptPrefs": state.prompt_preferences.to_stored(),
                    "inventorInfo": state.inventor_info.model_dump(mode="json"),
                }
            )
        )
        return

    _print_settings(Console(), state)


@app.command(name="set")
def _set(*assignments: str) -> None:
    """Change prompt preferences

    Each assignment is field=value, for example tone=plain.

    Args:
        assignments: Preference assignments.
    """
    updates: dict[str, str] = {}
    for pair in assignments:
        key, sep, value = pair.partition("=")
        if not sep or key not in PromptPreferences.model_fields:
            valid = ", ".join(PromptPreferences.model_fields)
            exit_with_error(
                f"Invalid assignment '{pair}'. Fields: {valid}",
                ExitCode.VALIDATION_ERROR,
            )
        updates[key] = value
    if not updates:
        exit_with_error("Nothing to set", ExitCode.VALIDATION_ERROR)

    async def _run(adapter: PersistenceAdapter) -> SettingsState:
        store = _store(adapter)
        await store.load()
        store.update_prompt_preferences(**updates)
        return await store.save_prompt_preferences()

    _print_settings(Console(), run_with_adapter(_run))


@app.command(name="inventor")
def _inventor(
    *,
    name: Annotated[str | None, Parameter(name=["--name"], help="Full name")] = None,
    department: Annotated[
        str | None, Parameter(name=["--department"], help="Department")
    ] = None,
    email: Annotated[str | None, Parameter(name=["--email"], help="Email")] = None,
) -> None:
    """Set inventor details used on disclosures

    Args:
        name: Inventor name.
        department: Inventor department.
        email: Inventor email.
    """
    changes = {
        k: v
        for k, v in (("name", name), ("department", department), ("email", email))
        if v is not None
    }

    async def _run(adapter: PersistenceAdapter) -> SettingsState:
        store = _store(adapter)
        state = await store.load()
        info = state.inventor_info.model_copy(update=changes)
        return await store.save_inventor_info(info)

    _print_settings(Console(), run_with_adapter(_run))


@app.command(name="reset")
def _reset() -> None:
    """Restore default prompt preferences"""

    async def _run(adapter: PersistenceAdapter) -> SettingsState:
        store = _store(adapter)
        await store.load()
        return await store.reset_prompt_preferences()

    _print_settings(Console(), run_with_adapter(_run))
