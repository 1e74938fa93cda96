# pyright: reportAny=false, reportExplicitAny=false
"""Sprint store: sprint listing, detail view and membership."""

from dataclasses import replace
from typing import TYPE_CHECKING, Any, Final
from uuid import uuid4

import pendulum

from ipramp.enums import IdeaPhase, IdeaStatus, SessionMode
from ipramp.idea import create_blank_idea
from ipramp.sprint import DEFAULT_TIMER_SECONDS, MemberRole, Sprint

from ._ideas import LOCAL_USER_ID
from ._state import SprintState

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from ipramp.storage import PersistenceAdapter

__all__ = ["SprintStore"]


class SprintStore:
    """Holds the current :class:`SprintState`.

    Creating a sprint makes its owner a ``lead`` member. Deleting a sprint
    unlinks its ideas and removes its members.
    """

    __slots__: Final = (
        "_adapter",
        "_default_session_mode",
        "_default_timer_seconds",
        "_logger",
        "_state",
        "_user_id",
    )

    _adapter: "PersistenceAdapter"  # noqa: UP037
    _user_id: str
    _default_timer_seconds: int
    _default_session_mode: SessionMode
    _logger: "FilteringBoundLogger | None"  # noqa: UP037
    _state: SprintState

    def __init__(
        self,
        adapter: "PersistenceAdapter",  # noqa: UP037
        *,
        user_id: str = LOCAL_USER_ID,
        default_timer_seconds: int = DEFAULT_TIMER_SECONDS,
        default_session_mode: SessionMode = SessionMode.QUANTITY,
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    ) -> None:
        """Initialize the store.

        Args:
            adapter: Persistence adapter.
            user_id: Current user; owns created sprints and quick-added ideas.
            default_timer_seconds: Timer budget for new sprints.
            default_session_mode: Session mode for new sprints.
            logger: Optional logger.
        """
        self._adapter = adapter
        self._user_id = user_id
        self._default_timer_seconds = default_timer_seconds
        self._default_session_mode = default_session_mode
        self._logger = logger
        self._state = SprintState()

    @property
    def state(self) -> SprintState:
        return self._state

    def _commit(self, state: SprintState) -> SprintState:
        self._state = state
        return state

    def _is_active(self, sprint_id: str) -> bool:
        active = self._state.active_sprint
        return active is not None and active.id == sprint_id

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    async def load_sprints(self) -> SprintState:
        sprints = await self._adapter.list_sprints()
        return self._commit(replace(self._state, sprints=tuple(sprints)))

    async def load_sprint_detail(self, sprint_id: str) -> SprintState:
        """Open a sprint: load it with its ideas and members.

        An unknown id clears the detail view.
        """
        sprint = await self._adapter.get_sprint(sprint_id)
        if sprint is None:
            return self._commit(
                replace(self._state, active_sprint=None, sprint_ideas=(), members=())
            )
        ideas = await self._adapter.list_sprint_ideas(sprint_id)
        members = await self._adapter.list_members(sprint_id)
        return self._commit(
            replace(
                self._state,
                active_sprint=sprint,
                sprint_ideas=tuple(ideas),
                members=tuple(members),
            )
        )

    async def load_candidates(self) -> SprintState:
        candidates = await self._adapter.list_candidate_ideas(self._user_id)
        return self._commit(replace(self._state, candidate_ideas=tuple(candidates)))

    # -------------------------------------------------------------------------
    # Sprint CRUD
    # -------------------------------------------------------------------------

    async def create_sprint(
        self,
        name: str,
        *,
        description: str = "",
        theme: str = "",
        team_id: str | None = None,
        session_mode: SessionMode | str | None = None,
    ) -> SprintState:
        """Create a sprint owned by the current user.

        The new sprint is first in the returned snapshot's ``sprints``.
        """
        now = pendulum.now("UTC").to_iso8601_string()
        sprint = Sprint(
            id=str(uuid4()),
            name=name,
            owner_id=self._user_id,
            created_at=now,
            updated_at=now,
            team_id=team_id,
            description=description,
            theme=theme,
            session_mode=SessionMode(session_mode or self._default_session_mode),
            timer_seconds_remaining=self._default_timer_seconds,
        )
        created = await self._adapter.create_sprint(sprint)
        _ = await self._adapter.add_member(created.id, self._user_id, MemberRole.LEAD)
        if self._logger:
            self._logger.info("sprint_created", sprint_id=created.id, name=name)
        return self._commit(
            replace(self._state, sprints=(created, *self._state.sprints))
        )

    async def update_sprint(self, sprint_id: str, **updates: Any) -> SprintState:
        """Merge field updates into a sprint.

        Raises:
            SprintValidationError: If a field is unknown or a value invalid.
        """
        updated = await self._adapter.update_sprint(sprint_id, **updates)
        if updated is None:
            return self._state
        return self._commit(
            replace(
                self._state,
                sprints=tuple(
                    updated if s.id == sprint_id else s for s in self._state.sprints
                ),
                active_sprint=(
                    updated if self._is_active(sprint_id) else self._state.active_sprint
                ),
            )
        )

    async def delete_sprint(self, sprint_id: str) -> SprintState:
        _ = await self._adapter.delete_sprint(sprint_id)
        state = replace(
            self._state,
            sprints=tuple(s for s in self._state.sprints if s.id != sprint_id),
        )
        if self._is_active(sprint_id):
            state = replace(state, active_sprint=None, sprint_ideas=(), members=())
        return self._commit(state)

    # -------------------------------------------------------------------------
    # Sprint ideas
    # -------------------------------------------------------------------------

    async def add_idea_to_sprint(self, idea_id: str, sprint_id: str) -> SprintState:
        linked = await self._adapter.link_to_sprint(idea_id, sprint_id)
        if linked is None:
            return self._state
        return self._commit(
            replace(
                self._state,
                sprint_ideas=(
                    linked,
                    *(i for i in self._state.sprint_ideas if i.id != idea_id),
                ),
                candidate_ideas=tuple(
                    i for i in self._state.candidate_ideas if i.id != idea_id
                ),
            )
        )

    async def remove_idea_from_sprint(self, idea_id: str) -> SprintState:
        unlinked = await self._adapter.unlink_from_sprint(idea_id)
        if unlinked is None:
            return self._state
        return self._commit(
            replace(
                self._state,
                sprint_ideas=tuple(
                    i for i in self._state.sprint_ideas if i.id != idea_id
                ),
                candidate_ideas=(
                    unlinked,
                    *(i for i in self._state.candidate_ideas if i.id != idea_id),
                ),
            )
        )

    async def quick_add_idea(self, title: str, sprint_id: str) -> SprintState:
        """Create a draft idea directly inside a sprint."""
        idea = create_blank_idea(
            self._user_id,
            title=title,
            sprint_id=sprint_id,
            status=IdeaStatus.DRAFT,
            phase=IdeaPhase.FOUNDATION,
        )
        created = await self._adapter.create_idea(idea)
        return self._commit(
            replace(self._state, sprint_ideas=(created, *self._state.sprint_ideas))
        )

    # -------------------------------------------------------------------------
    # Members
    # -------------------------------------------------------------------------

    async def add_member(
        self, sprint_id: str, user_id: str, role: MemberRole | str | None = None
    ) -> SprintState:
        _ = await self._adapter.add_member(sprint_id, user_id, role)
        members = await self._adapter.list_members(sprint_id)
        return self._commit(replace(self._state, members=tuple(members)))

    async def remove_member(self, sprint_id: str, user_id: str) -> SprintState:
        _ = await self._adapter.remove_member(sprint_id, user_id)
        return self._commit(
            replace(
                self._state,
                members=tuple(
                    m
                    for m in self._state.members
                    if not (m.sprint_id == sprint_id and m.user_id == user_id)
                ),
            )
        )
