# pyright: reportAny=false, reportExplicitAny=false
"""Conversion between sprint records and their persisted JSON layout."""

from typing import Any

from ipramp.enums import IdeaPhase, SessionMode, SprintStatus

from ._models import DEFAULT_TIMER_SECONDS, MemberRole, Sprint, SprintMemberRecord

__all__ = [
    "member_from_dict",
    "member_to_dict",
    "sprint_from_dict",
    "sprint_to_dict",
]


def sprint_to_dict(sprint: Sprint) -> dict[str, Any]:
    return {
        "id": sprint.id,
        "name": sprint.name,
        "ownerId": sprint.owner_id,
        "teamId": sprint.team_id,
        "description": sprint.description,
        "theme": sprint.theme,
        "status": sprint.status.value,
        "sessionMode": sprint.session_mode.value,
        "phase": sprint.phase.value,
        "timerSecondsRemaining": sprint.timer_seconds_remaining,
        "timerRunning": sprint.timer_running,
        "startedAt": sprint.started_at,
        "createdAt": sprint.created_at,
        "updatedAt": sprint.updated_at,
    }


def sprint_from_dict(data: dict[str, Any]) -> Sprint:
    """Decode a sprint, falling back to field defaults for missing keys.

    Raises:
        ValueError: If an enum value is unknown.
        SprintValidationError: If the timer is negative.
    """
    team_id = data.get("teamId")
    started_at = data.get("startedAt")
    return Sprint(
        id=str(data.get("id", "")),
        name=str(data.get("name", "")),
        owner_id=str(data.get("ownerId", "")),
        created_at=str(data.get("createdAt", "")),
        updated_at=str(data.get("updatedAt", "")),
        team_id=None if team_id is None else str(team_id),
        description=str(data.get("description", "")),
        theme=str(data.get("theme", "")),
        status=SprintStatus(str(data.get("status", SprintStatus.ACTIVE.value))),
        session_mode=SessionMode(
            str(data.get("sessionMode", SessionMode.QUANTITY.value))
        ),
        phase=IdeaPhase(str(data.get("phase", IdeaPhase.FOUNDATION.value))),
        timer_seconds_remaining=int(
            data.get("timerSecondsRemaining", DEFAULT_TIMER_SECONDS)
        ),
        timer_running=bool(data.get("timerRunning", False)),
        started_at=None if started_at is None else str(started_at),
    )


def member_to_dict(member: SprintMemberRecord) -> dict[str, Any]:
    return {"sprintId": member.sprint_id, "userId": member.user_id, "role": member.role}


def member_from_dict(data: dict[str, Any]) -> SprintMemberRecord:
    return SprintMemberRecord(
        sprint_id=str(data.get("sprintId", "")),
        user_id=str(data.get("userId", "")),
        role=str(data.get("role", MemberRole.MEMBER.value)),
    )
