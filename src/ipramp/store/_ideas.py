# pyright: reportAny=false, reportExplicitAny=false
"""Idea store: loads, edits and lists one user's ideas."""

from collections.abc import Callable  # noqa: TC003
from dataclasses import replace
from typing import TYPE_CHECKING, Any, Final

from ipramp.enums import FrameworkType, IdeaSortField, IdeaStatus, SortDirection
from ipramp.exceptions import FrameworkMismatchError
from ipramp.idea import (
    AliceQuestion,
    Idea,
    IdeaScore,
    LayerDrillState,
    TRIZData,
    create_blank_idea,
    merge_framework_data,
    select_framework,
    set_alice_answer,
    set_layer_drill,
)

from ._state import IdeaState

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from ipramp.storage import PersistenceAdapter

__all__ = ["LOCAL_USER_ID", "IdeaStore"]

LOCAL_USER_ID: Final = "local-user"


class IdeaStore:
    """Holds the current :class:`IdeaState` for one user.

    Every operation returns the new snapshot and also keeps it as
    :attr:`state`. Operations on an unknown idea id return the current
    snapshot unchanged.
    """

    __slots__: Final = ("_adapter", "_logger", "_state", "_user_id")

    _adapter: "PersistenceAdapter"  # noqa: UP037
    _user_id: str
    _logger: "FilteringBoundLogger | None"  # noqa: UP037
    _state: IdeaState

    def __init__(
        self,
        adapter: "PersistenceAdapter",  # noqa: UP037
        *,
        user_id: str = LOCAL_USER_ID,
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    ) -> None:
        self._adapter = adapter
        self._user_id = user_id
        self._logger = logger
        self._state = IdeaState()

    @property
    def state(self) -> IdeaState:
        return self._state

    @property
    def user_id(self) -> str:
        return self._user_id

    def _commit(self, state: IdeaState) -> IdeaState:
        self._state = state
        return state

    def _replace_idea(self, updated: Idea) -> IdeaState:
        ideas = tuple(updated if i.id == updated.id else i for i in self._state.ideas)
        if updated.id not in {i.id for i in self._state.ideas}:
            ideas = (updated, *ideas)
        return self._commit(replace(self._state, ideas=ideas))

    # -------------------------------------------------------------------------
    # Loading and CRUD
    # -------------------------------------------------------------------------

    async def load(self) -> IdeaState:
        """Reload the user's ideas from storage, keeping listing controls."""
        result = await self._adapter.read_ideas()
        ideas = tuple(i for i in result.items if i.user_id == self._user_id)
        if self._logger:
            self._logger.debug(
                "ideas_loaded", count=len(ideas), read_status=result.status.value
            )
        return self._commit(
            replace(self._state, ideas=ideas, read_status=result.status)
        )

    async def add_idea(self, **fields: Any) -> IdeaState:
        """Create a blank idea merged with ``fields``.

        The new idea is first in the returned snapshot's ``ideas``.

        Raises:
            IdeaValidationError: If ``fields`` names a field that cannot be
                set on creation.
        """
        created = await self._adapter.create_idea(
            create_blank_idea(self._user_id, **fields)
        )
        return self._commit(
            replace(self._state, ideas=(created, *self._state.ideas))
        )

    async def update_idea(self, idea_id: str, **updates: Any) -> IdeaState:
        """Merge field updates into an idea.

        Raises:
            IdeaValidationError: If a field is unknown or a value is invalid.
        """
        updated = await self._adapter.update_idea(idea_id, **updates)
        if updated is None:
            return self._state
        return self._replace_idea(updated)

    async def remove_idea(self, idea_id: str) -> IdeaState:
        _ = await self._adapter.delete_idea(idea_id)
        return self._commit(
            replace(
                self._state,
                ideas=tuple(i for i in self._state.ideas if i.id != idea_id),
            )
        )

    # -------------------------------------------------------------------------
    # Scoring and frameworks
    # -------------------------------------------------------------------------

    async def set_score(self, idea_id: str, score: IdeaScore | None) -> IdeaState:
        return await self.update_idea(idea_id, score=score)

    async def select_framework(
        self, idea_id: str, framework: FrameworkType | str
    ) -> IdeaState:
        """Switch an idea's framework.

        Selecting a different framework discards the previous worksheet.
        Re-selecting the active framework keeps it.
        """
        idea = await self._adapter.get_idea(idea_id)
        if idea is None:
            return self._state
        return await self.update_idea(
            idea_id, framework=select_framework(idea.framework, framework)
        )

    async def update_framework_data(
        self, idea_id: str, framework: FrameworkType | str, **updates: Any
    ) -> IdeaState:
        """Merge worksheet fields for the idea's active framework.

        Raises:
            FrameworkMismatchError: If ``framework`` is not active.
            IdeaValidationError: If a worksheet field is unknown.
        """
        idea = await self._adapter.get_idea(idea_id)
        if idea is None:
            return self._state
        merged = merge_framework_data(idea.framework, framework, **updates)
        return await self.update_idea(idea_id, framework=merged)

    async def _update_triz(
        self, idea_id: str, change: Callable[[TRIZData], TRIZData]
    ) -> IdeaState:
        idea = await self._adapter.get_idea(idea_id)
        if idea is None:
            return self._state
        triz = idea.framework.data
        if not isinstance(triz, TRIZData):
            msg = f"Idea {idea_id} has no TRIZ worksheet"
            raise FrameworkMismatchError(
                msg,
                active=idea.framework.used.value,
                requested=FrameworkType.TRIZ.value,
            )
        framework = replace(idea.framework, data=change(triz))
        return await self.update_idea(idea_id, framework=framework)

    async def set_layer_drill(self, idea_id: str, drill: LayerDrillState) -> IdeaState:
        """Store the layered drill for one principle on a TRIZ idea.

        Raises:
            FrameworkMismatchError: If the idea is not using TRIZ.
        """
        return await self._update_triz(
            idea_id, lambda triz: set_layer_drill(triz, drill)
        )

    async def set_alice_answer(
        self, idea_id: str, question: AliceQuestion | str, value: bool
    ) -> IdeaState:
        """Record one Alice pre-screen answer on a TRIZ idea.

        Score and verdict are derived from the answers, so they always
        change together.

        Raises:
            FrameworkMismatchError: If the idea is not using TRIZ.
            IdeaValidationError: If ``question`` is unknown.
        """
        return await self._update_triz(
            idea_id, lambda triz: set_alice_answer(triz, question, value)
        )

    # -------------------------------------------------------------------------
    # Listing controls
    # -------------------------------------------------------------------------

    def set_filter_status(self, status: IdeaStatus | str | None) -> IdeaState:
        return self._commit(
            replace(
                self._state,
                filter_status=IdeaStatus(status) if status is not None else None,
            )
        )

    def set_search_query(self, query: str) -> IdeaState:
        return self._commit(replace(self._state, search_query=query))

    def set_sort_by(self, sort_by: IdeaSortField | str) -> IdeaState:
        return self._commit(replace(self._state, sort_by=IdeaSortField(sort_by)))

    def toggle_sort_dir(self) -> IdeaState:
        flipped = (
            SortDirection.ASC
            if self._state.sort_dir is SortDirection.DESC
            else SortDirection.DESC
        )
        return self._commit(replace(self._state, sort_dir=flipped))
