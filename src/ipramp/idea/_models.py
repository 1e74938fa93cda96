"""Data models for ideas and their scoring and filing sub-records.

All records are frozen. Mutation happens by building a new instance with
``dataclasses.replace``; the store layer stamps ``updated_at`` on every
change.
"""

from dataclasses import dataclass, field
from typing import Any, Final
from uuid import uuid4

import pendulum

from ipramp.enums import AliceRiskLevel, IdeaPhase, IdeaStatus
from ipramp.exceptions import IdeaValidationError

from ._frameworks import FrameworkState

__all__ = [
    "IDEA_TEXT_FIELDS",
    "IDEA_UPDATABLE_FIELDS",
    "SUB_SCORE_MAX",
    "AliceScore",
    "AlignmentScore",
    "ClaimDraft",
    "DependentClaim",
    "Idea",
    "IdeaScore",
    "InventiveStepAnalysis",
    "MarketNeedsAnalysis",
    "PatentReport",
    "create_blank_idea",
]

# Each scoring dimension is rated 0..3
SUB_SCORE_MAX: Final = 3


@dataclass(frozen=True, slots=True)
class IdeaScore:
    """Three-dimension patentability rating.

    Attributes:
        inventive_step: How non-obvious the idea is (0-3).
        defensibility: How easy infringement is to detect (0-3).
        product_fit: How closely it maps to a shipping product (0-3).

    Raises:
        IdeaValidationError: If any dimension falls outside 0..3.
    """

    inventive_step: int
    defensibility: int
    product_fit: int

    def __post_init__(self) -> None:
        for name in ("inventive_step", "defensibility", "product_fit"):
            value: int = getattr(self, name)
            if isinstance(value, bool) or not 0 <= value <= SUB_SCORE_MAX:
                msg = f"Score dimension {name} must be between 0 and {SUB_SCORE_MAX}"
                raise IdeaValidationError(
                    msg, field=name, value=value, expected=f"0..{SUB_SCORE_MAX}"
                )


@dataclass(frozen=True, slots=True)
class AliceScore:
    """Full Alice/Mayo eligibility assessment.

    Attributes:
        overall_score: Assessor's overall score.
        abstract_idea_risk: Risk that the claims read as an abstract idea.
        abstract_idea_analysis: Step-one discussion.
        practical_application: How the idea is tied to a practical use.
        inventive_concept: Step-two discussion.
        recommendations: Suggested claim adjustments.
        comparable_cases: Case law the assessment leans on.
    """

    overall_score: int
    abstract_idea_risk: AliceRiskLevel
    abstract_idea_analysis: str = ""
    practical_application: str = ""
    inventive_concept: str = ""
    recommendations: tuple[str, ...] = field(default_factory=tuple)
    comparable_cases: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class DependentClaim:
    """A numbered dependent claim."""

    claim_number: int
    text: str


@dataclass(frozen=True, slots=True)
class ClaimDraft:
    """Draft claim set: method, system and computer-readable-medium claims."""

    method_claim: str = ""
    system_claim: str = ""
    crm_claim: str = ""
    method_dependent_claims: tuple[DependentClaim, ...] = field(default_factory=tuple)
    system_dependent_claims: tuple[DependentClaim, ...] = field(default_factory=tuple)
    crm_dependent_claims: tuple[DependentClaim, ...] = field(default_factory=tuple)
    abstract_text: str = ""
    claim_strategy: str = ""
    alice_mitigation_notes: str = ""
    prosecution_tips: tuple[str, ...] = field(default_factory=tuple)
    notes: str = ""


@dataclass(frozen=True, slots=True)
class InventiveStepAnalysis:
    primary_inventive_step: str = ""
    secondary_steps: tuple[str, ...] = field(default_factory=tuple)
    non_obviousness_argument: str = ""
    closest_prior_art: tuple[str, ...] = field(default_factory=tuple)
    differentiating_factors: tuple[str, ...] = field(default_factory=tuple)
    technical_advantage: str = ""


@dataclass(frozen=True, slots=True)
class MarketNeedsAnalysis:
    market_size: str = ""
    target_segments: tuple[str, ...] = field(default_factory=tuple)
    pain_points_solved: tuple[str, ...] = field(default_factory=tuple)
    competitive_landscape: str = ""
    commercialization_potential: str = ""
    licensing_opportunities: tuple[str, ...] = field(default_factory=tuple)
    strategic_value: str = ""


@dataclass(frozen=True, slots=True)
class PatentReport:
    """Consolidated filing report built from the individual analyses."""

    executive_summary: str = ""
    inventive_step_analysis: InventiveStepAnalysis = field(
        default_factory=InventiveStepAnalysis
    )
    market_needs_analysis: MarketNeedsAnalysis = field(
        default_factory=MarketNeedsAnalysis
    )
    claim_strategy: str = ""
    filing_recommendation: str = ""
    risk_assessment: str = ""
    next_steps: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class AlignmentScore:
    """Business-goal alignment rating kept for data compatibility."""

    id: str
    idea_id: str
    goal_id: str
    score: int
    rationale: str = ""


@dataclass(frozen=True, slots=True)
class Idea:
    """A patent idea moving through the foundation/validation/filing pipeline.

    Attributes:
        id: Unique idea identifier.
        user_id: Owning user.
        title: Short human-readable title.
        created_at: ISO 8601 creation timestamp.
        updated_at: ISO 8601 timestamp of the last change.
        sprint_id: Sprint the idea belongs to, if any.
        team_id: Team the idea belongs to, if any.
        problem_statement: The engineering problem being solved.
        existing_approach: How the problem is solved today.
        proposed_solution: The new approach.
        technical_approach: Implementation detail of the new approach.
        contradiction_resolved: The trade-off the idea breaks.
        prior_art_notes: Notes from prior-art searching.
        red_team_notes: Critique collected while stress-testing the idea.
        status: Lifecycle status.
        phase: Pipeline phase.
        tech_stack: Technologies involved.
        tags: Freeform tags.
        score: Patentability rating, once scored.
        alice_score: Full Alice assessment, once run.
        framework: Selected brainstorming framework and its worksheet.
        claim_draft: Draft claims, once written.
        inventive_step_analysis: Filing analysis, once written.
        market_needs_analysis: Filing analysis, once written.
        patent_report: Consolidated report, once generated.
        alignment_scores: Business-goal alignment ratings.
    """

    id: str
    user_id: str
    title: str
    created_at: str
    updated_at: str
    sprint_id: str | None = None
    team_id: str | None = None
    problem_statement: str = ""
    existing_approach: str = ""
    proposed_solution: str = ""
    technical_approach: str = ""
    contradiction_resolved: str = ""
    prior_art_notes: str = ""
    red_team_notes: str = ""
    status: IdeaStatus = IdeaStatus.DRAFT
    phase: IdeaPhase = IdeaPhase.FOUNDATION
    tech_stack: tuple[str, ...] = field(default_factory=tuple)
    tags: tuple[str, ...] = field(default_factory=tuple)
    score: IdeaScore | None = None
    alice_score: AliceScore | None = None
    framework: FrameworkState = field(default_factory=FrameworkState)
    claim_draft: ClaimDraft | None = None
    inventive_step_analysis: InventiveStepAnalysis | None = None
    market_needs_analysis: MarketNeedsAnalysis | None = None
    patent_report: PatentReport | None = None
    alignment_scores: tuple[AlignmentScore, ...] = field(default_factory=tuple)


# Fields a partial update may touch; identity and timestamps are managed.
IDEA_UPDATABLE_FIELDS: Final[frozenset[str]] = frozenset(
    name
    for name in Idea.__dataclass_fields__
    if name not in {"id", "user_id", "created_at", "updated_at"}
)

IDEA_TEXT_FIELDS: Final[frozenset[str]] = frozenset(
    {
        "title",
        "problem_statement",
        "existing_approach",
        "proposed_solution",
        "technical_approach",
        "contradiction_resolved",
        "prior_art_notes",
        "red_team_notes",
    }
)


def create_blank_idea(
    user_id: str,
    *,
    idea_id: str | None = None,
    **fields: Any,  # pyright: ignore[reportAny,reportExplicitAny]
) -> Idea:
    """Build a new idea with empty content and matching timestamps.

    Args:
        user_id: Owning user.
        idea_id: Explicit id; a random UUID is generated when omitted.
        **fields: Initial values for any updatable field.

    Returns:
        A draft idea in the foundation phase.

    Raises:
        IdeaValidationError: If ``fields`` names a managed or unknown field.
    """
    unknown = sorted(set(fields) - IDEA_UPDATABLE_FIELDS)
    if unknown:
        msg = f"Cannot set idea field(s): {', '.join(unknown)}"
        raise IdeaValidationError(msg, idea_id=idea_id, field=unknown[0])

    now = pendulum.now("UTC").to_iso8601_string()
    fields.setdefault("title", "")
    return Idea(
        id=idea_id or str(uuid4()),
        user_id=user_id,
        created_at=now,
        updated_at=now,
        **fields,
    )
