"""Sprints and sprint membership."""

from ._codec import member_from_dict, member_to_dict, sprint_from_dict, sprint_to_dict
from ._models import (
    DEFAULT_TIMER_SECONDS,
    SPRINT_UPDATABLE_FIELDS,
    MemberRole,
    Sprint,
    SprintMemberRecord,
)

__all__ = [
    "DEFAULT_TIMER_SECONDS",
    "SPRINT_UPDATABLE_FIELDS",
    "MemberRole",
    "Sprint",
    "SprintMemberRecord",
    "member_from_dict",
    "member_to_dict",
    "sprint_from_dict",
    "sprint_to_dict",
]
