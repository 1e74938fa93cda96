# pyright: reportUnusedFunction=false
# ruff: noqa: A002, D415
"""Contradiction matrix reference commands."""

from dataclasses import asdict
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console

from ipramp.triz import (
    SOFTWARE_PARAMETERS,
    SOFTWARE_PRINCIPLES,
    ParameterCategory,
    get_parameter_by_id,
    get_principle_by_id,
    list_contradictions_for,
    lookup_contradiction,
)

from ._context import OutputFormat
from ._shared import ExitCode, exit_with_error, format_json, format_table

app = App(
    name="triz", help="Browse the software contradiction matrix", help_on_error=True
)


@app.command(name="params")
def _params(
    *,
    category: Annotated[
        ParameterCategory | None,
        Parameter(name=["--category", "-c"], help="Only this category"),
    ] = None,
    format: Annotated[
        OutputFormat, Parameter(name=["--format", "-f"], help="Output format")
    ] = OutputFormat.TABLE,
) -> None:
    """List engineering parameters

    Args:
        category: Only show parameters in this category.
        format: Output format (table, json).
    """
    params = [
        p for p in SOFTWARE_PARAMETERS if category is None or p.category == category
    ]

    if format == OutputFormat.JSON:
        print(format_json([asdict(p) for p in params]))
        return

    rows = [[p.id, p.name, p.category.value] for p in params]
    Console().print(format_table(["ID", "Parameter", "Category"], rows))


@app.command(name="principles")
def _principles(
    principle_id: int | None = None,
    /,
    *,
    format: Annotated[
        OutputFormat, Parameter(name=["--format", "-f"], help="Output format")
    ] = OutputFormat.TABLE,
) -> None:
    """List inventive principles, or show one in detail

    Args:
        principle_id: Principle to show.
        format: Output format (table, json).
    """
    console = Console()

    if principle_id is None:
        if format == OutputFormat.JSON:
            print(format_json([asdict(p) for p in SOFTWARE_PRINCIPLES]))
            return
        rows = [[p.id, p.name] for p in SOFTWARE_PRINCIPLES]
        console.print(format_table(["ID", "Principle"], rows))
        return

    principle = get_principle_by_id(principle_id)
    if principle is None:
        exit_with_error(f"Unknown principle: {principle_id}", ExitCode.NOT_FOUND)

    if format == OutputFormat.JSON:
        print(format_json(asdict(principle)))
        return

    console.print(f"[bold]{principle.id}. {principle.name}[/bold]")
    console.print(principle.description)
    if principle.software_examples:
        console.print("\n[bold]Software examples[/bold]")
        for example in principle.software_examples:
            console.print(f"  - {example}")
    if principle.patent_examples:
        console.print("\n[bold]Patent examples[/bold]")
        for example in principle.patent_examples:
            console.print(f"  - {example}")


@app.command(name="lookup")
def _lookup(
    improving: int,
    worsening: int | None = None,
    /,
    *,
    format: Annotated[
        OutputFormat, Parameter(name=["--format", "-f"], help="Output format")
    ] = OutputFormat.TABLE,
) -> None:
    """Suggest principles for a contradiction

    With only an improving parameter, lists every curated pairing for it.

    Args:
        improving: Parameter being improved.
        worsening: Parameter that gets worse.
        format: Output format (table, json).
    """
    console = Console()

    improving_param = get_parameter_by_id(improving)
    if improving_param is None:
        exit_with_error(f"Unknown parameter: {improving}", ExitCode.NOT_FOUND)

    if worsening is None:
        entries = list_contradictions_for(improving)
        if format == OutputFormat.JSON:
            print(format_json([asdict(e) for e in entries]))
            return
        rows: list[list[object]] = []
        for entry in entries:
            param = get_parameter_by_id(entry.worsening)
            principle_ids = ", ".join(str(i) for i in entry.suggested_principles)
            rows.append(
                [entry.worsening, param.name if param else "?", principle_ids]
            )
        console.print(f"[bold]Improving {improving_param.name}[/bold]")
        console.print(format_table(["Worsening", "Parameter", "Principles"], rows))
        return

    worsening_param = get_parameter_by_id(worsening)
    if worsening_param is None:
        exit_with_error(f"Unknown parameter: {worsening}", ExitCode.NOT_FOUND)

    principles = lookup_contradiction(improving, worsening)

    if format == OutputFormat.JSON:
        print(format_json([asdict(p) for p in principles]))
        return

    console.print(
        f"[bold]Improving {improving_param.name} "
        f"worsens {worsening_param.name}[/bold]"
    )
    if not principles:
        console.print("[dim]No curated principles for this pair.[/dim]")
        return
    principle_rows = [[p.id, p.name] for p in principles]
    console.print(format_table(["ID", "Principle"], principle_rows))
