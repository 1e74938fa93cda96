# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# ruff: noqa: A002, D415, FBT002
"""Sprint management commands."""

from typing import TYPE_CHECKING, Annotated

from cyclopts import App, Parameter
from rich.console import Console

from ipramp.enums import SessionMode, SprintStatus
from ipramp.idea import get_sprint_status_color
from ipramp.settings import get_session_mode, get_sprint_phase
from ipramp.sprint import MemberRole, member_to_dict, sprint_to_dict
from ipramp.store import SprintState, SprintStore

from ._context import CLIContext, OutputFormat
from ._shared import (
    badge_markup,
    format_json,
    format_table,
    require_idea,
    require_sprint,
    run_with_adapter,
)

if TYPE_CHECKING:
    from ipramp.sprint import Sprint
    from ipramp.storage import PersistenceAdapter

app = App(name="sprint", help="Run ideation sprints", help_on_error=True)


def _store(adapter: PersistenceAdapter) -> SprintStore:
    ctx = CLIContext.get_current()
    config = ctx.config
    return SprintStore(
        adapter,
        user_id=config.user.id,
        default_timer_seconds=config.sprint.default_timer_seconds,
        default_session_mode=config.sprint.default_session_mode,
        logger=ctx.logger,
    )


def _format_timer(seconds: int) -> str:
    hours, rest = divmod(seconds, 3600)
    return f"{hours}h {rest // 60:02d}m"


@app.command(name="create")
def _create(
    name: str,
    /,
    *,
    description: Annotated[
        str, Parameter(name=["--description", "-d"], help="Sprint description")
    ] = "",
    theme: Annotated[str, Parameter(name=["--theme"], help="Problem area")] = "",
    mode: Annotated[
        SessionMode | None,
        Parameter(name=["--mode", "-m"], help="Session mode (default from config)"),
    ] = None,
) -> None:
    """Create a sprint led by you

    Args:
        name: Sprint name.
        description: Sprint description.
        theme: Problem area the sprint focuses on.
        mode: Session mode.
    """
    console = Console()

    async def _run(adapter: PersistenceAdapter) -> Sprint:
        state = await _store(adapter).create_sprint(
            name, description=description, theme=theme, session_mode=mode
        )
        return state.sprints[0]

    sprint = run_with_adapter(_run)
    console.print(f"[green]Created sprint:[/green] {sprint.id}")


@app.command(name="list")
def _list(
    *,
    format: Annotated[
        OutputFormat, Parameter(name=["--format", "-f"], help="Output format")
    ] = OutputFormat.TABLE,
) -> None:
    """List sprints, newest first

    Args:
        format: Output format (table, json).
    """
    console = Console()

    async def _run(adapter: PersistenceAdapter) -> SprintState:
        return await _store(adapter).load_sprints()

    sprints = run_with_adapter(_run).sprints

    if format == OutputFormat.JSON:
        print(format_json([sprint_to_dict(s) for s in sprints]))
        return

    if not sprints:
        console.print("[dim]No sprints found.[/dim]")
        return

    rows = [
        [s.id, s.name, s.status.value, s.session_mode.value, s.phase.value]
        for s in sprints
    ]
    console.print(format_table(["ID", "Name", "Status", "Mode", "Phase"], rows))


@app.command(name="show")
def _show(
    sprint_id: str,
    /,
    *,
    format: Annotated[
        OutputFormat, Parameter(name=["--format", "-f"], help="Output format")
    ] = OutputFormat.PLAIN,
) -> None:
    """Show a sprint with its ideas and members

    Args:
        sprint_id: Sprint ID.
        format: Output format (plain, json).
    """
    console = Console()

    async def _run(adapter: PersistenceAdapter) -> SprintState:
        await require_sprint(adapter, sprint_id)
        return await _store(adapter).load_sprint_detail(sprint_id)

    state = run_with_adapter(_run)
    sprint = state.active_sprint
    if sprint is None:
        return

    if format == OutputFormat.JSON:
        print(
            format_json(
                {
                    "sprint": sprint_to_dict(sprint),
                    "ideaIds": [i.id for i in state.sprint_ideas],
                    "members": [member_to_dict(m) for m in state.members],
                }
            )
        )
        return

    badge = badge_markup(sprint.status.value, get_sprint_status_color(sprint.status))
    console.print(f"[bold]{sprint.name}[/bold] {badge}")
    console.print(f"[dim]ID: {sprint.id}[/dim]")
    if sprint.theme:
        console.print(f"Theme: {sprint.theme}")
    if sprint.description:
        console.print(sprint.description)
    phase = get_sprint_phase(sprint.phase)
    mode = get_session_mode(sprint.session_mode)
    console.print(
        f"Mode: {mode.label} | Phase: {phase.label} (weeks {phase.weeks}) | "
        f"Timer: {_format_timer(sprint.timer_seconds_remaining)}"
    )
    in_phase = sum(1 for i in state.sprint_ideas if i.phase == sprint.phase)
    console.print(
        f"Target: {phase.target} ({in_phase}/{phase.target_count} in phase)"
    )
    console.print(f"{mode.label} rules (aim for {mode.target}):")
    for rule in mode.rules:
        console.print(f"  - {rule}", markup=False)

    console.print(f"\n[bold]Ideas ({len(state.sprint_ideas)})[/bold]")
    for idea in state.sprint_ideas:
        console.print(f"  {idea.id}  {idea.title or '(untitled)'}")
    console.print(f"\n[bold]Members ({len(state.members)})[/bold]")
    for member in state.members:
        console.print(f"  {member.user_id} ({member.role})")


@app.command(name="status")
def _status(sprint_id: str, status: SprintStatus, /) -> None:
    """Change a sprint's status

    Args:
        sprint_id: Sprint ID.
        status: New status.
    """
    console = Console()

    async def _run(adapter: PersistenceAdapter) -> None:
        await require_sprint(adapter, sprint_id)
        await _store(adapter).update_sprint(sprint_id, status=status)

    run_with_adapter(_run)
    console.print(f"[green]Sprint status set to[/green] {status.value}: {sprint_id}")


@app.command(name="delete")
def _delete(sprint_id: str, /) -> None:
    """Delete a sprint

    Its ideas are kept as personal ideas and its members are removed.

    Args:
        sprint_id: Sprint ID.
    """
    console = Console()

    async def _run(adapter: PersistenceAdapter) -> None:
        await require_sprint(adapter, sprint_id)
        await _store(adapter).delete_sprint(sprint_id)

    run_with_adapter(_run)
    console.print(f"[green]Deleted sprint:[/green] {sprint_id}")


@app.command(name="link")
def _link(sprint_id: str, idea_id: str, /) -> None:
    """Add an existing idea to a sprint

    Args:
        sprint_id: Sprint ID.
        idea_id: Idea ID.
    """
    console = Console()

    async def _run(adapter: PersistenceAdapter) -> None:
        await require_sprint(adapter, sprint_id)
        await require_idea(adapter, idea_id)
        await _store(adapter).add_idea_to_sprint(idea_id, sprint_id)

    run_with_adapter(_run)
    console.print(f"[green]Linked[/green] {idea_id} to {sprint_id}")


@app.command(name="unlink")
def _unlink(idea_id: str, /) -> None:
    """Move an idea out of its sprint

    Args:
        idea_id: Idea ID.
    """
    console = Console()

    async def _run(adapter: PersistenceAdapter) -> None:
        await require_idea(adapter, idea_id)
        await _store(adapter).remove_idea_from_sprint(idea_id)

    run_with_adapter(_run)
    console.print(f"[green]Unlinked[/green] {idea_id}")


@app.command(name="quick-add")
def _quick_add(sprint_id: str, title: str, /) -> None:
    """Create a draft idea directly inside a sprint

    Args:
        sprint_id: Sprint ID.
        title: Idea title.
    """
    console = Console()

    async def _run(adapter: PersistenceAdapter) -> str:
        await require_sprint(adapter, sprint_id)
        state = await _store(adapter).quick_add_idea(title, sprint_id)
        return state.sprint_ideas[0].id

    idea_id = run_with_adapter(_run)
    console.print(f"[green]Created idea:[/green] {idea_id}")


@app.command(name="member-add")
def _member_add(
    sprint_id: str,
    user_id: str,
    /,
    *,
    role: Annotated[
        MemberRole, Parameter(name=["--role", "-r"], help="Member role")
    ] = MemberRole.MEMBER,
) -> None:
    """Add a member to a sprint

    Adding an existing member keeps their current role.

    Args:
        sprint_id: Sprint ID.
        user_id: User to add.
        role: Member role.
    """
    console = Console()

    async def _run(adapter: PersistenceAdapter) -> SprintState:
        await require_sprint(adapter, sprint_id)
        return await _store(adapter).add_member(sprint_id, user_id, role)

    state = run_with_adapter(_run)
    rows = [[m.user_id, m.role] for m in state.members]
    console.print(format_table(["User", "Role"], rows))


@app.command(name="member-remove")
def _member_remove(sprint_id: str, user_id: str, /) -> None:
    """Remove a member from a sprint

    Args:
        sprint_id: Sprint ID.
        user_id: User to remove.
    """
    console = Console()

    async def _run(adapter: PersistenceAdapter) -> bool:
        await require_sprint(adapter, sprint_id)
        return await adapter.remove_member(sprint_id, user_id)

    if run_with_adapter(_run):
        console.print(f"[green]Removed member[/green] {user_id}")
    else:
        console.print(f"[dim]{user_id} is not a member of {sprint_id}[/dim]")
