"""Enumeration types for ipramp."""

from enum import StrEnum


class IdeaStatus(StrEnum):
    """Lifecycle status of an idea."""

    DRAFT = "draft"
    DEVELOPING = "developing"
    SCORED = "scored"
    FILED = "filed"
    ARCHIVED = "archived"


class IdeaPhase(StrEnum):
    """Pipeline phase shared by ideas and sprints."""

    FOUNDATION = "foundation"
    VALIDATION = "validation"
    FILING = "filing"


class FrameworkType(StrEnum):
    """Brainstorming framework applied to an idea."""

    TRIZ = "triz"
    SIT = "sit"
    CK = "ck"
    ANALOGY = "analogy"
    FMEA = "fmea"
    NONE = "none"


class SessionMode(StrEnum):
    """Sprint session style."""

    QUANTITY = "quantity"
    QUALITY = "quality"
    DESTROY = "destroy"


class SprintStatus(StrEnum):
    """Sprint lifecycle status."""

    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"


class AliceRiskLevel(StrEnum):
    """Abstract-idea risk level from a full Alice assessment."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class AliceVerdict(StrEnum):
    """Verdict of the four-question Alice pre-screen."""

    STRONG = "strong"
    PROMISING = "promising"
    RISKY = "risky"
    ABSTRACT = "abstract"


class IdeaSortField(StrEnum):
    """Field an idea listing is ordered by."""

    UPDATED_AT = "updated_at"
    CREATED_AT = "created_at"
    TITLE = "title"


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"
