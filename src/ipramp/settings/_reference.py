# ruff: noqa: E501
"""Static reference tables for frameworks, sprints and scoring."""

from dataclasses import dataclass
from typing import Final

from ipramp.enums import FrameworkType, IdeaPhase, SessionMode

__all__ = [
    "CK_PROMPTS",
    "FRAMEWORK_OPTIONS",
    "PATENT_MATRIX",
    "SESSION_MODES",
    "SIT_TEMPLATES",
    "SPRINT_PHASES",
    "CKPrompts",
    "FrameworkOption",
    "PatentMatrixDimension",
    "PatentMatrixLevel",
    "SITTemplate",
    "SessionModeConfig",
    "SprintPhaseConfig",
    "get_framework_option",
    "get_patent_matrix_level",
    "get_session_mode",
    "get_sit_template",
    "get_sprint_phase",
]


@dataclass(frozen=True, slots=True)
class SITTemplate:
    """A Systematic Inventive Thinking template.

    Attributes:
        id: Key used in ``SITData.answers``.
        name: Display name.
        prompt: The question the template asks.
        example: A worked example.
    """

    id: str
    name: str
    prompt: str
    example: str


@dataclass(frozen=True, slots=True)
class CKPrompts:
    concept: str
    knowledge: str
    expansion: str


@dataclass(frozen=True, slots=True)
class SprintPhaseConfig:
    """Targets for one sprint phase.

    Attributes:
        key: The phase.
        label: Display label.
        weeks: Week range the phase usually covers.
        target: Human-readable target.
        target_count: Number of ideas the phase aims for.
    """

    key: IdeaPhase
    label: str
    weeks: str
    target: str
    target_count: int


@dataclass(frozen=True, slots=True)
class SessionModeConfig:
    key: SessionMode
    label: str
    rules: tuple[str, ...]
    target: str


@dataclass(frozen=True, slots=True)
class PatentMatrixLevel:
    score: int
    label: str
    description: str


@dataclass(frozen=True, slots=True)
class PatentMatrixDimension:
    """One scoring dimension and the meaning of each level.

    ``key`` matches the corresponding ``IdeaScore`` field name.
    """

    key: str
    label: str
    levels: tuple[PatentMatrixLevel, ...]


@dataclass(frozen=True, slots=True)
class FrameworkOption:
    value: FrameworkType
    label: str
    description: str


SIT_TEMPLATES: Final[tuple[SITTemplate, ...]] = (
    SITTemplate("subtraction", "Subtraction", "What if we REMOVED a seemingly essential component?", "Remove thermostat display -> Voice/app-only control"),
    SITTemplate("division", "Division", "What if we SEPARATED and RELOCATED a function?", "Split auth from lock -> Phone becomes key"),
    SITTemplate("multiplication", "Multiplication", "What if we COPIED a component with modification?", "Multiple temp sensors -> Multi-zone awareness"),
    SITTemplate("task_unification", "Task Unification", "What if an existing component took on ADDITIONAL function?", "Occupancy sensor -> Also controls HVAC + security"),
    SITTemplate("attr_dependency", "Attribute Dependency", "What if we LINKED two previously unlinked variables?", "Light color <-> Time of day -> Circadian support"),
)

CK_PROMPTS: Final = CKPrompts(
    concept="What ideas can we imagine that we CANNOT yet prove true or false?",
    knowledge="What do we KNOW to be true? What's proven, emerging, or a gap?",
    expansion="Where do concepts meet knowledge gaps? That's your patent opportunity.",
)

SPRINT_PHASES: Final[tuple[SprintPhaseConfig, ...]] = (
    SprintPhaseConfig(IdeaPhase.FOUNDATION, "Foundation", "1-4", "20 raw concepts", 20),
    SprintPhaseConfig(IdeaPhase.VALIDATION, "Validation", "5-12", "10 validated ideas", 10),
    SprintPhaseConfig(IdeaPhase.FILING, "Filing", "13-30", "5 filed patents", 5),
)

SESSION_MODES: Final[tuple[SessionModeConfig, ...]] = (
    SessionModeConfig(
        SessionMode.QUANTITY,
        "Quantity",
        ("No criticism allowed", "No 'but' or 'however'", "Wild ideas encouraged", "Build on others' ideas", "Defer ALL judgment"),
        "50+ ideas",
    ),
    SessionModeConfig(
        SessionMode.QUALITY,
        "Quality",
        ("Constructive criticism OK", "Use 3x3 scoring matrix", "Debate pros and cons", "Prioritize top 20%", "Document reasoning"),
        "Top 10",
    ),
    SessionModeConfig(
        SessionMode.DESTROY,
        "Destroy",
        ("Attack mercilessly", '"This will fail because..."', "Find every weakness", "No sacred cows", "Survivors get filed"),
        "5 patent-ready",
    ),
)

PATENT_MATRIX: Final[tuple[PatentMatrixDimension, ...]] = (
    PatentMatrixDimension(
        "inventive_step",
        "Inventive Step",
        (
            PatentMatrixLevel(1, "Weak", "2-3x improvement over prior art"),
            PatentMatrixLevel(2, "Moderate", "5-10x improvement or new capability"),
            PatentMatrixLevel(3, "Strong", "10x+ or enables the impossible"),
        ),
    ),
    PatentMatrixDimension(
        "defensibility",
        "Defensibility",
        (
            PatentMatrixLevel(1, "Weak", "Obvious combination of known techniques"),
            PatentMatrixLevel(2, "Moderate", "Non-obvious but similar approaches exist"),
            PatentMatrixLevel(3, "Strong", "Novel mechanism with no clear workaround"),
        ),
    ),
    PatentMatrixDimension(
        "product_fit",
        "Product-Fit",
        (
            PatentMatrixLevel(1, "Weak", "Nice-to-have, no roadmap commitment"),
            PatentMatrixLevel(2, "Moderate", "Aligns with roadmap, 12-24 month horizon"),
            PatentMatrixLevel(3, "Strong", "Critical differentiator, competitors will copy"),
        ),
    ),
)

FRAMEWORK_OPTIONS: Final[tuple[FrameworkOption, ...]] = (
    FrameworkOption(FrameworkType.TRIZ, "TRIZ", "Contradiction analysis with inventive principles"),
    FrameworkOption(FrameworkType.SIT, "SIT", "Systematic Inventive Thinking templates"),
    FrameworkOption(FrameworkType.CK, "C-K Theory", "Concept-Knowledge space mapping"),
    FrameworkOption(FrameworkType.ANALOGY, "Analogy", "Cross-domain thinking, applying solutions from other fields"),
    FrameworkOption(FrameworkType.FMEA, "FMEA Inversion", "Turn failure modes into patent candidates"),
    FrameworkOption(FrameworkType.NONE, "Freeform", "No framework, describe the invention directly"),
)


def get_sit_template(template_id: str) -> SITTemplate | None:
    return next((t for t in SIT_TEMPLATES if t.id == template_id), None)


def get_sprint_phase(phase: IdeaPhase) -> SprintPhaseConfig:
    """Targets for ``phase``; every phase has an entry."""
    return next(p for p in SPRINT_PHASES if p.key == phase)


def get_session_mode(mode: SessionMode) -> SessionModeConfig:
    """Rules for ``mode``; every mode has an entry."""
    return next(m for m in SESSION_MODES if m.key == mode)


def get_framework_option(framework: FrameworkType) -> FrameworkOption:
    return next(o for o in FRAMEWORK_OPTIONS if o.value == framework)


def get_patent_matrix_level(dimension: str, score: int) -> PatentMatrixLevel | None:
    """Describe ``score`` on a scoring dimension.

    Returns:
        The matching level, or None for an unknown dimension or a score of 0
        (no level describes it).
    """
    for entry in PATENT_MATRIX:
        if entry.key == dimension:
            return next((lv for lv in entry.levels if lv.score == score), None)
    return None
