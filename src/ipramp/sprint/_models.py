"""Sprint and sprint membership records."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from ipramp.enums import IdeaPhase, SessionMode, SprintStatus
from ipramp.exceptions import SprintValidationError

__all__ = [
    "DEFAULT_TIMER_SECONDS",
    "SPRINT_UPDATABLE_FIELDS",
    "MemberRole",
    "Sprint",
    "SprintMemberRecord",
]

# 72 hours
DEFAULT_TIMER_SECONDS: Final = 259_200


class MemberRole(StrEnum):
    MEMBER = "member"
    DATA_MINISTER = "data_minister"
    LEAD = "lead"


@dataclass(frozen=True, slots=True)
class Sprint:
    """A time-boxed ideation session.

    Ideas join a sprint by carrying its id in ``Idea.sprint_id``; the sprint
    itself does not list them.

    Attributes:
        id: Unique sprint identifier.
        name: Display name.
        owner_id: User who created the sprint.
        created_at: ISO 8601 creation timestamp.
        updated_at: ISO 8601 timestamp of the last change.
        team_id: Owning team, if any.
        description: Free-text description.
        theme: Problem area the sprint focuses on.
        status: Lifecycle status.
        session_mode: Quantity, quality or destroy session.
        phase: Current pipeline phase.
        timer_seconds_remaining: Countdown budget left.
        timer_running: Whether the countdown is running.
        started_at: ISO 8601 timestamp the timer was first started.
    """

    id: str
    name: str
    owner_id: str
    created_at: str
    updated_at: str
    team_id: str | None = None
    description: str = ""
    theme: str = ""
    status: SprintStatus = SprintStatus.ACTIVE
    session_mode: SessionMode = SessionMode.QUANTITY
    phase: IdeaPhase = IdeaPhase.FOUNDATION
    timer_seconds_remaining: int = DEFAULT_TIMER_SECONDS
    timer_running: bool = False
    started_at: str | None = None

    def __post_init__(self) -> None:
        if self.timer_seconds_remaining < 0:
            msg = "Sprint timer cannot be negative"
            raise SprintValidationError(
                msg,
                field="timer_seconds_remaining",
                value=self.timer_seconds_remaining,
                expected=">= 0",
            )


@dataclass(frozen=True, slots=True)
class SprintMemberRecord:
    """Membership of one user in one sprint.

    The pair ``(sprint_id, user_id)`` is unique within the member collection.
    """

    sprint_id: str
    user_id: str
    role: str = MemberRole.MEMBER.value


SPRINT_UPDATABLE_FIELDS: Final[frozenset[str]] = frozenset(
    {
        "name",
        "description",
        "theme",
        "status",
        "session_mode",
        "phase",
        "timer_seconds_remaining",
        "timer_running",
        "started_at",
    }
)
