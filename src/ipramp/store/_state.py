"""Immutable application-state snapshots.

Stores never mutate a snapshot; every operation builds a new one with
``dataclasses.replace`` and hands it back to the caller.
"""

from dataclasses import dataclass, field

from ipramp.enums import IdeaSortField, IdeaStatus, SortDirection
from ipramp.idea import Idea, filter_and_sort_ideas
from ipramp.settings import InventorInfo, PromptPreferences
from ipramp.sprint import Sprint, SprintMemberRecord
from ipramp.storage import ReadStatus

__all__ = ["IdeaState", "SettingsState", "SprintState"]


@dataclass(frozen=True, slots=True)
class IdeaState:
    """Snapshot of a user's ideas and the active listing controls.

    Attributes:
        ideas: Loaded ideas, newest first.
        read_status: How the idea collection was last read.
        filter_status: Status filter for the listing, or None for all.
        search_query: Free-text search for the listing.
        sort_by: Listing sort field.
        sort_dir: Listing sort direction.
    """

    ideas: tuple[Idea, ...] = field(default_factory=tuple)
    read_status: ReadStatus = ReadStatus.ABSENT
    filter_status: IdeaStatus | None = None
    search_query: str = ""
    sort_by: IdeaSortField = IdeaSortField.UPDATED_AT
    sort_dir: SortDirection = SortDirection.DESC

    @property
    def filtered_ideas(self) -> tuple[Idea, ...]:
        """Ideas after applying the status filter, search and sort."""
        return tuple(
            filter_and_sort_ideas(
                self.ideas,
                status=self.filter_status,
                search=self.search_query,
                sort_by=self.sort_by,
                sort_dir=self.sort_dir,
            )
        )

    def get_idea(self, idea_id: str) -> Idea | None:
        return next((idea for idea in self.ideas if idea.id == idea_id), None)


@dataclass(frozen=True, slots=True)
class SprintState:
    """Snapshot of sprints and the sprint currently open in detail.

    Attributes:
        sprints: All sprints, newest first.
        active_sprint: Sprint whose detail is loaded, if any.
        sprint_ideas: Ideas linked to the active sprint.
        candidate_ideas: The user's ideas that are not in any sprint.
        members: Members of the active sprint.
    """

    sprints: tuple[Sprint, ...] = field(default_factory=tuple)
    active_sprint: Sprint | None = None
    sprint_ideas: tuple[Idea, ...] = field(default_factory=tuple)
    candidate_ideas: tuple[Idea, ...] = field(default_factory=tuple)
    members: tuple[SprintMemberRecord, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class SettingsState:
    prompt_preferences: PromptPreferences = field(default_factory=PromptPreferences)
    inventor_info: InventorInfo = field(default_factory=InventorInfo)
    loaded: bool = False
