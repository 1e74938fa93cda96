# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# pyright: reportAny=false, reportExplicitAny=false
# ruff: noqa: A002, D415, FBT001, FBT002
"""Idea management commands."""

from dataclasses import fields
from typing import TYPE_CHECKING, Annotated, Any, Final

from cyclopts import App, Parameter
from rich.console import Console

from ipramp.enums import IdeaPhase, IdeaSortField, IdeaStatus
from ipramp.exceptions import IdeaValidationError
from ipramp.idea import (
    IDEA_TEXT_FIELDS,
    AliceQuestion,
    CKData,
    FrameworkPayload,
    IdeaScore,
    SITData,
    TRIZData,
    get_idea_progress,
    get_score_verdict,
    get_status_color,
    get_total_score,
    idea_to_dict,
)
from ipramp.settings import (
    CK_PROMPTS,
    PATENT_MATRIX,
    SIT_TEMPLATES,
    get_framework_option,
    get_patent_matrix_level,
)
from ipramp.store import IdeaStore

from ._context import CLIContext, OutputFormat
from ._shared import (
    ExitCode,
    badge_markup,
    exit_with_error,
    format_json,
    format_table,
    require_idea,
    run_with_adapter,
)

if TYPE_CHECKING:
    from ipramp.idea import Idea
    from ipramp.storage import PersistenceAdapter

app = App(name="idea", help="Capture, score and track patent ideas", help_on_error=True)


def _store(adapter: PersistenceAdapter) -> IdeaStore:
    ctx = CLIContext.get_current()
    return IdeaStore(adapter, user_id=ctx.config.user.id, logger=ctx.logger)


def _status_badge(idea: Idea) -> str:
    return badge_markup(idea.status.value, get_status_color(idea.status))


def _score_display(idea: Idea) -> str:
    total = get_total_score(idea.score)
    if total is None:
        return "-"
    return f"{total}/9 ({get_score_verdict(total).value})"


def _score_breakdown(idea: Idea) -> list[str]:
    if idea.score is None:
        return []
    lines: list[str] = []
    for dimension in PATENT_MATRIX:
        value: int = getattr(idea.score, dimension.key)
        level = get_patent_matrix_level(dimension.key, value)
        detail = f"{level.label}: {level.description}" if level else "not rated"
        lines.append(f"  {dimension.label}: {value} ({detail})")
    return lines


def _worksheet_fields(payload: FrameworkPayload) -> set[str]:
    if isinstance(payload, SITData):
        return {t.id for t in SIT_TEMPLATES}
    return {
        f.name for f in fields(payload) if isinstance(getattr(payload, f.name), str)
    }


def _print_worksheet(console: Console, idea: Idea) -> None:
    payload = idea.framework.data
    if isinstance(payload, SITData):
        rows = [[t.id, t.prompt, payload.answer(t.id)] for t in SIT_TEMPLATES]
        table = format_table(["Template", "Prompt", "Answer"], rows)
    elif isinstance(payload, CKData):
        rows = [
            ["concepts", CK_PROMPTS.concept, payload.concepts],
            ["knowledge", CK_PROMPTS.knowledge, payload.knowledge],
            ["opportunity", CK_PROMPTS.expansion, payload.opportunity],
        ]
        table = format_table(["Field", "Prompt", "Answer"], rows)
    else:
        return
    console.print(table, markup=False, soft_wrap=True)


# Scores, frameworks and sprint links have dedicated commands.
_CLI_UPDATABLE_FIELDS: Final = IDEA_TEXT_FIELDS | {
    "status",
    "phase",
    "tags",
    "tech_stack",
}


def _parse_assignments(pairs: list[str]) -> dict[str, str]:
    result: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            exit_with_error(
                f"Invalid assignment '{pair}'. Use key=value",
                ExitCode.VALIDATION_ERROR,
            )
        result[key.strip()] = value
    return result


@app.command(name="create")
def _create(
    title: str,
    /,
    *,
    problem: Annotated[
        str, Parameter(name=["--problem", "-p"], help="Problem statement")
    ] = "",
    solution: Annotated[
        str, Parameter(name=["--solution", "-s"], help="Proposed solution")
    ] = "",
    tag: Annotated[
        list[str] | None, Parameter(name=["--tag", "-t"], help="Tag (repeatable)")
    ] = None,
    tech: Annotated[
        list[str] | None, Parameter(name=["--tech"], help="Technology (repeatable)")
    ] = None,
    sprint: Annotated[
        str | None, Parameter(name=["--sprint"], help="Sprint to add the idea to")
    ] = None,
) -> None:
    """Create a new idea

    Args:
        title: Idea title.
        problem: Problem statement.
        solution: Proposed solution.
        tag: Tags to attach.
        tech: Technologies involved.
        sprint: Sprint to add the idea to.
    """
    console = Console()

    async def _run(adapter: PersistenceAdapter) -> Idea:
        state = await _store(adapter).add_idea(
            title=title,
            problem_statement=problem,
            proposed_solution=solution,
            tags=tuple(tag or ()),
            tech_stack=tuple(tech or ()),
            sprint_id=sprint,
        )
        return state.ideas[0]

    idea = run_with_adapter(_run)
    console.print(f"[green]Created idea:[/green] {idea.id}")


@app.command(name="list")
def _list(
    *,
    status: Annotated[
        IdeaStatus | None, Parameter(name=["--status"], help="Filter by status")
    ] = None,
    search: Annotated[
        str, Parameter(name=["--search", "-q"], help="Search title, problem and tags")
    ] = "",
    sort: Annotated[
        IdeaSortField, Parameter(name=["--sort"], help="Sort field")
    ] = IdeaSortField.UPDATED_AT,
    ascending: Annotated[
        bool, Parameter(name=["--asc"], help="Sort ascending")
    ] = False,
    format: Annotated[
        OutputFormat, Parameter(name=["--format", "-f"], help="Output format")
    ] = OutputFormat.TABLE,
) -> None:
    """List your ideas

    Args:
        status: Only show ideas with this status.
        search: Case-insensitive search text.
        sort: Field to order by.
        ascending: Oldest or A-Z first.
        format: Output format (table, json).
    """
    console = Console()

    async def _run(adapter: PersistenceAdapter) -> tuple[Idea, ...]:
        store = _store(adapter)
        await store.load()
        store.set_filter_status(status)
        store.set_search_query(search)
        store.set_sort_by(sort)
        if ascending:
            store.toggle_sort_dir()
        return store.state.filtered_ideas

    ideas = run_with_adapter(_run)

    if format == OutputFormat.JSON:
        print(format_json([idea_to_dict(i) for i in ideas]))
        return

    if not ideas:
        console.print("[dim]No ideas found.[/dim]")
        return

    rows = [
        [
            i.id,
            i.title or "(untitled)",
            i.status.value,
            i.phase.value,
            _score_display(i),
        ]
        for i in ideas
    ]
    console.print(format_table(["ID", "Title", "Status", "Phase", "Score"], rows))
    console.print(f"\n[dim]Showing {len(ideas)} idea(s)[/dim]")


@app.command(name="show")
def _show(
    idea_id: str,
    /,
    *,
    format: Annotated[
        OutputFormat, Parameter(name=["--format", "-f"], help="Output format")
    ] = OutputFormat.PLAIN,
) -> None:
    """Show an idea

    Args:
        idea_id: Idea ID.
        format: Output format (plain, json).
    """
    console = Console()

    async def _run(adapter: PersistenceAdapter) -> Idea:
        return await require_idea(adapter, idea_id)

    idea = run_with_adapter(_run)

    if format == OutputFormat.JSON:
        print(format_json(idea_to_dict(idea)))
        return

    console.print(f"[bold]{idea.title or '(untitled)'}[/bold]")
    framework = get_framework_option(idea.framework.used)
    console.print(f"{_status_badge(idea)} | {idea.phase.value} | {framework.label}")
    console.print(f"[dim]ID: {idea.id}[/dim]")
    console.print(f"[dim]Created: {idea.created_at}[/dim]")
    console.print(f"[dim]Updated: {idea.updated_at}[/dim]")
    if idea.sprint_id:
        console.print(f"[dim]Sprint: {idea.sprint_id}[/dim]")
    if idea.tags:
        console.print(f"[dim]Tags: {', '.join(idea.tags)}[/dim]")
    console.print(f"Score: {_score_display(idea)}")
    for line in _score_breakdown(idea):
        console.print(line)
    for label, text in (
        ("Problem", idea.problem_statement),
        ("Existing approach", idea.existing_approach),
        ("Proposed solution", idea.proposed_solution),
        ("Technical approach", idea.technical_approach),
    ):
        if text:
            console.print(f"\n[bold]{label}[/bold]\n{text}")
    _print_worksheet(console, idea)


@app.command(name="update")
def _update(
    idea_id: str,
    /,
    *assignments: str,
) -> None:
    """Update idea fields

    Each assignment is field=value, for example title="Faster cache".
    List fields (tags, tech_stack) take comma-separated values. Scores,
    worksheets and sprint membership have their own commands.

    Args:
        idea_id: Idea ID.
        assignments: Field assignments.
    """
    console = Console()
    updates: dict[str, Any] = dict(_parse_assignments(list(assignments)))
    if not updates:
        exit_with_error("Nothing to update", ExitCode.VALIDATION_ERROR)
    unsupported = sorted(set(updates) - _CLI_UPDATABLE_FIELDS)
    if unsupported:
        exit_with_error(
            f"Cannot update {unsupported[0]} here. Editable fields: "
            + ", ".join(sorted(_CLI_UPDATABLE_FIELDS)),
            ExitCode.VALIDATION_ERROR,
        )
    for key in ("tags", "tech_stack"):
        if key in updates:
            items = (v.strip() for v in str(updates[key]).split(","))
            updates[key] = tuple(v for v in items if v)

    async def _run(adapter: PersistenceAdapter) -> None:
        await require_idea(adapter, idea_id)
        await _store(adapter).update_idea(idea_id, **updates)

    run_with_adapter(_run)
    console.print(f"[green]Updated idea:[/green] {idea_id}")


@app.command(name="score")
def _score(
    idea_id: str,
    inventive_step: int,
    defensibility: int,
    product_fit: int,
    /,
) -> None:
    """Score an idea on three 0-3 dimensions

    Args:
        idea_id: Idea ID.
        inventive_step: How non-obvious the idea is.
        defensibility: How detectable infringement is.
        product_fit: How closely it maps to a product.
    """
    console = Console()

    async def _run(adapter: PersistenceAdapter) -> IdeaScore:
        await require_idea(adapter, idea_id)
        score = IdeaScore(
            inventive_step=inventive_step,
            defensibility=defensibility,
            product_fit=product_fit,
        )
        await _store(adapter).set_score(idea_id, score)
        return score

    score = run_with_adapter(_run)
    total = get_total_score(score) or 0
    console.print(
        f"[green]Scored[/green] {idea_id}: {total}/9 ({get_score_verdict(total).value})"
    )


@app.command(name="status")
def _status(
    idea_id: str,
    status: IdeaStatus,
    /,
    *,
    phase: Annotated[
        IdeaPhase | None, Parameter(name=["--phase"], help="Also move to this phase")
    ] = None,
) -> None:
    """Change an idea's status

    Args:
        idea_id: Idea ID.
        status: New status.
        phase: Optional new pipeline phase.
    """
    console = Console()
    updates: dict[str, Any] = {"status": status}
    if phase is not None:
        updates["phase"] = phase

    async def _run(adapter: PersistenceAdapter) -> None:
        await require_idea(adapter, idea_id)
        await _store(adapter).update_idea(idea_id, **updates)

    run_with_adapter(_run)
    console.print(f"[green]Status set to[/green] {status.value}: {idea_id}")


@app.command(name="delete")
def _delete(idea_id: str, /) -> None:
    """Delete an idea

    Args:
        idea_id: Idea ID.
    """
    console = Console()

    async def _run(adapter: PersistenceAdapter) -> None:
        await require_idea(adapter, idea_id)
        await _store(adapter).remove_idea(idea_id)

    run_with_adapter(_run)
    console.print(f"[green]Deleted idea:[/green] {idea_id}")


@app.command(name="framework")
def _framework(
    idea_id: str,
    framework: str,
    /,
    *assignments: str,
) -> None:
    """Select a framework and fill in worksheet text fields

    Switching to a different framework discards the previous worksheet.
    Assignments such as resolution="Split the cache" merge into the
    active worksheet.

    Args:
        idea_id: Idea ID.
        framework: triz, sit, ck, analogy, fmea or none.
        assignments: Worksheet field assignments.
    """
    console = Console()
    updates = _parse_assignments(list(assignments))

    async def _run(adapter: PersistenceAdapter) -> Idea:
        await require_idea(adapter, idea_id)
        store = _store(adapter)
        state = await store.select_framework(idea_id, framework)
        if updates:
            current = state.get_idea(idea_id)
            payload = current.framework.data if current is not None else None
            if payload is not None:
                text_fields = _worksheet_fields(payload)
                for key in updates:
                    if key not in text_fields:
                        msg = f"'{key}' is not a text field of this worksheet"
                        raise IdeaValidationError(msg, idea_id=idea_id, field=key)
            await store.update_framework_data(idea_id, framework, **updates)
        return await require_idea(adapter, idea_id)

    idea = run_with_adapter(_run)
    console.print(
        f"[green]Framework set to[/green] {idea.framework.used.value}: {idea_id}"
    )
    _print_worksheet(console, idea)


@app.command(name="alice")
def _alice(
    idea_id: str,
    question: AliceQuestion,
    answer: bool,
    /,
) -> None:
    """Answer one Alice pre-screen question on a TRIZ idea

    Args:
        idea_id: Idea ID.
        question: Pre-screen question.
        answer: true if the idea satisfies the question.
    """
    console = Console()

    async def _run(adapter: PersistenceAdapter) -> Idea:
        await require_idea(adapter, idea_id)
        await _store(adapter).set_alice_answer(idea_id, question, answer)
        return await require_idea(adapter, idea_id)

    triz = run_with_adapter(_run).framework.data
    checklist = triz.alice_pre_screen if isinstance(triz, TRIZData) else None
    if checklist is not None:
        console.print(
            f"Alice pre-screen: {checklist.score}/4 ({checklist.verdict.value})"
        )


@app.command(name="progress")
def _progress(idea_id: str, /) -> None:
    """Show pipeline progress for an idea

    Args:
        idea_id: Idea ID.
    """
    console = Console()

    async def _run(adapter: PersistenceAdapter) -> Idea:
        return await require_idea(adapter, idea_id)

    progress = get_idea_progress(run_with_adapter(_run))
    rows = [
        [s.stage.label, "done" if s.done else ""] for s in progress.stages
    ]
    console.print(format_table(["Stage", "Done"], rows))
    console.print(
        f"\n{progress.completed}/{progress.total} stages ({progress.percent}%)"
    )
