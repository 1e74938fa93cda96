"""Pure functions computing derived idea state.

Nothing here touches storage or mutates its input. Results depend only on
the arguments.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from ipramp.enums import AliceRiskLevel, FrameworkType, IdeaStatus, SprintStatus

from ._frameworks import compute_alice_verdict
from ._models import Idea, IdeaScore

__all__ = [
    "PIPELINE_STAGES",
    "BadgeColor",
    "IdeaProgress",
    "PipelineStage",
    "ScoreVerdict",
    "StageProgress",
    "compute_alice_verdict",
    "get_alice_risk_color",
    "get_idea_progress",
    "get_score_verdict",
    "get_sprint_status_color",
    "get_status_color",
    "get_total_score",
]


class ScoreVerdict(StrEnum):
    """Band for a total patentability score."""

    WEAK = "weak"
    MODERATE = "moderate"
    PROMISING = "promising"
    STRONG = "strong"


class BadgeColor(StrEnum):
    """Presentation token for status badges."""

    NEUTRAL = "neutral"
    BLUE = "blue"
    AMBER = "amber"
    GREEN = "green"
    RED = "red"
    GRAY = "gray"
    FADED = "faded"


# -----------------------------------------------------------------------------
# Pipeline progress
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class PipelineStage:
    """A checkpoint on the way from rough idea to filing.

    Attributes:
        id: Stable stage identifier.
        label: Display label.
        is_done: Predicate deciding whether an idea has passed the stage.
    """

    id: str
    label: str
    is_done: Callable[[Idea], bool]


@dataclass(frozen=True, slots=True)
class StageProgress:
    stage: PipelineStage
    done: bool


@dataclass(frozen=True, slots=True)
class IdeaProgress:
    """How far an idea has moved through the pipeline.

    Attributes:
        completed: Number of stages done.
        total: Number of stages.
        percent: ``round(100 * completed / total)``.
        stages: Per-stage status in pipeline order.
    """

    completed: int
    total: int
    percent: int
    stages: tuple[StageProgress, ...]


def _has_alice_check(idea: Idea) -> bool:
    if idea.alice_score is not None:
        return True
    data = idea.framework.data
    return getattr(data, "alice_pre_screen", None) is not None


PIPELINE_STAGES: Final[tuple[PipelineStage, ...]] = (
    PipelineStage(
        "problem", "Problem Defined", lambda i: bool(i.problem_statement.strip())
    ),
    PipelineStage(
        "framework",
        "Framework Applied",
        lambda i: i.framework.used != FrameworkType.NONE,
    ),
    PipelineStage(
        "solution", "Solution Described", lambda i: bool(i.proposed_solution.strip())
    ),
    PipelineStage("scored", "Scored", lambda i: i.score is not None),
    PipelineStage("alice", "Alice Checked", _has_alice_check),
    PipelineStage("claims", "Claims Drafted", lambda i: i.claim_draft is not None),
    PipelineStage(
        "inventive_step",
        "Inventive Step Analysed",
        lambda i: i.inventive_step_analysis is not None,
    ),
    PipelineStage(
        "market_needs",
        "Market Needs Analysed",
        lambda i: i.market_needs_analysis is not None,
    ),
)


def get_idea_progress(idea: Idea) -> IdeaProgress:
    """Evaluate every pipeline stage for an idea.

    Args:
        idea: The idea to evaluate.

    Returns:
        Progress with ``0 <= completed <= total`` and ``0 <= percent <= 100``.
    """
    stages = tuple(
        StageProgress(stage, stage.is_done(idea)) for stage in PIPELINE_STAGES
    )
    completed = sum(1 for s in stages if s.done)
    total = len(stages)
    return IdeaProgress(
        completed=completed,
        total=total,
        percent=round(100 * completed / total),
        stages=stages,
    )


# -----------------------------------------------------------------------------
# Scores and verdicts
# -----------------------------------------------------------------------------


def get_total_score(score: IdeaScore | None) -> int | None:
    """Sum the three dimensions, or None for an unscored idea."""
    if score is None:
        return None
    return score.inventive_step + score.defensibility + score.product_fit


# Lower bound of each band, highest first
_VERDICT_BANDS: Final[tuple[tuple[int, ScoreVerdict], ...]] = (
    (8, ScoreVerdict.STRONG),
    (6, ScoreVerdict.PROMISING),
    (4, ScoreVerdict.MODERATE),
)


def get_score_verdict(total: int) -> ScoreVerdict:
    """Map a total score to its band.

    0-3 weak, 4-5 moderate, 6-7 promising, 8-9 strong. Totals outside 0..9
    land in the nearest band.
    """
    for floor, verdict in _VERDICT_BANDS:
        if total >= floor:
            return verdict
    return ScoreVerdict.WEAK


# -----------------------------------------------------------------------------
# Badge colors
# -----------------------------------------------------------------------------

_STATUS_COLORS: Final[dict[IdeaStatus, BadgeColor]] = {
    IdeaStatus.DRAFT: BadgeColor.NEUTRAL,
    IdeaStatus.DEVELOPING: BadgeColor.BLUE,
    IdeaStatus.SCORED: BadgeColor.AMBER,
    IdeaStatus.FILED: BadgeColor.GREEN,
    IdeaStatus.ARCHIVED: BadgeColor.FADED,
}

_ALICE_RISK_COLORS: Final[dict[AliceRiskLevel, BadgeColor]] = {
    AliceRiskLevel.LOW: BadgeColor.GREEN,
    AliceRiskLevel.MEDIUM: BadgeColor.AMBER,
    AliceRiskLevel.HIGH: BadgeColor.RED,
}

_SPRINT_STATUS_COLORS: Final[dict[SprintStatus, BadgeColor]] = {
    SprintStatus.ACTIVE: BadgeColor.GREEN,
    SprintStatus.PAUSED: BadgeColor.AMBER,
    SprintStatus.COMPLETED: BadgeColor.GRAY,
}


def get_status_color(status: IdeaStatus | str) -> BadgeColor:
    return _STATUS_COLORS[IdeaStatus(status)]


def get_alice_risk_color(risk: AliceRiskLevel | str) -> BadgeColor:
    return _ALICE_RISK_COLORS[AliceRiskLevel(risk)]


def get_sprint_status_color(status: SprintStatus | str) -> BadgeColor:
    return _SPRINT_STATUS_COLORS[SprintStatus(status)]
