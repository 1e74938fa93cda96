"""Framework worksheets and the framework selection state machine.

An idea has at most one active framework. Its worksheet lives in a single
payload slot on ``FrameworkState`` so data for a framework that is no
longer selected cannot linger.

Transitions through ``select_framework``:

- ``none -> X``: X starts with an empty worksheet.
- ``X -> none``: the worksheet is cleared.
- ``X -> X``: nothing changes.
- ``X -> Y``: the old worksheet is discarded and Y starts empty.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields, replace
from enum import StrEnum
from typing import Any, Final, Self

from ipramp.enums import AliceVerdict, FrameworkType
from ipramp.exceptions import FrameworkMismatchError, IdeaValidationError
from ipramp.settings import SIT_TEMPLATES

__all__ = [
    "FMEA_SEVERITY_MAX",
    "AlicePreScreenChecklist",
    "AliceQuestion",
    "CKData",
    "FMEAData",
    "FMEAEntry",
    "FrameworkPayload",
    "FrameworkState",
    "LayerDrillState",
    "SITData",
    "TRIZData",
    "compute_alice_verdict",
    "empty_payload",
    "merge_framework_data",
    "select_framework",
    "set_alice_answer",
    "set_layer_drill",
]

FMEA_SEVERITY_MAX: Final = 10


# -----------------------------------------------------------------------------
# TRIZ worksheet
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class LayerDrillState:
    """Three-layer drill-down for one suggested principle.

    Attributes:
        principle_id: The principle being drilled.
        layer1: Obvious description of the application.
        layer2: Architectural detail.
        layer3: The specific inventive mechanism.
    """

    principle_id: int
    layer1: str = ""
    layer2: str = ""
    layer3: str = ""

    @property
    def is_empty(self) -> bool:
        """Whether all three layers are blank."""
        return not (self.layer1.strip() or self.layer2.strip() or self.layer3.strip())


def compute_alice_verdict(score: int) -> AliceVerdict:
    """Map a pre-screen yes-count to its verdict.

    4 strong, 3 promising, 2 risky, anything lower abstract.
    """
    if score >= 4:  # noqa: PLR2004
        return AliceVerdict.STRONG
    if score >= 3:  # noqa: PLR2004
        return AliceVerdict.PROMISING
    if score >= 2:  # noqa: PLR2004
        return AliceVerdict.RISKY
    return AliceVerdict.ABSTRACT


class AliceQuestion(StrEnum):
    """The four pre-screen questions."""

    TECHNICAL_PROBLEM = "technical_problem"
    SPECIFIC_SOLUTION = "specific_solution"
    TECHNICAL_IMPROVEMENT = "technical_improvement"
    NOT_CONVENTIONAL = "not_conventional"


@dataclass(frozen=True, slots=True)
class AlicePreScreenChecklist:
    """Quick four-question Alice screen.

    ``score`` and ``verdict`` are computed from the answers, so they can
    never disagree with them.
    """

    technical_problem: bool = False
    specific_solution: bool = False
    technical_improvement: bool = False
    not_conventional: bool = False

    @property
    def score(self) -> int:
        """Number of questions answered yes (0-4)."""
        return sum(
            (
                self.technical_problem,
                self.specific_solution,
                self.technical_improvement,
                self.not_conventional,
            )
        )

    @property
    def verdict(self) -> AliceVerdict:
        return compute_alice_verdict(self.score)

    def with_answer(self, question: AliceQuestion | str, value: bool) -> Self:
        """Return a copy with one answer changed.

        Raises:
            IdeaValidationError: If ``question`` is not one of the four
                pre-screen questions.
        """
        try:
            key = AliceQuestion(question)
        except ValueError as e:
            msg = f"Unknown Alice pre-screen question: {question}"
            raise IdeaValidationError(
                msg,
                field="alice_pre_screen",
                value=question,
                expected=", ".join(q.value for q in AliceQuestion),
            ) from e
        return replace(self, **{key.value: bool(value)})


@dataclass(frozen=True, slots=True)
class TRIZData:
    """Contradiction-matrix worksheet.

    Attributes:
        improving: Selected improving parameter id, as entered.
        worsening: Selected worsening parameter id, as entered.
        principles: Principle ids the user kept.
        resolution: How the contradiction is resolved.
        layer_drills: At most one drill per principle, none all-empty.
        alice_pre_screen: Pre-screen answers, once started.
    """

    improving: str = ""
    worsening: str = ""
    principles: tuple[int, ...] = field(default_factory=tuple)
    resolution: str = ""
    layer_drills: tuple[LayerDrillState, ...] = field(default_factory=tuple)
    alice_pre_screen: AlicePreScreenChecklist | None = None


# -----------------------------------------------------------------------------
# Other worksheets
# -----------------------------------------------------------------------------


def _check_sit_template_ids(template_ids: Iterable[str]) -> None:
    known = [t.id for t in SIT_TEMPLATES]
    unknown = sorted(set(template_ids) - set(known))
    if unknown:
        msg = f"Unknown SIT template(s): {', '.join(unknown)}"
        raise IdeaValidationError(
            msg, field=unknown[0], value=unknown[0], expected=", ".join(known)
        )


@dataclass(frozen=True, slots=True)
class SITData:
    """SIT worksheet: one free-text answer per template.

    ``answers`` holds ``(template_id, text)`` pairs in template order. Build
    it from a mapping with :meth:`from_mapping`.

    Raises:
        IdeaValidationError: If a template id is unknown or repeated.
    """

    answers: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        template_ids = [template_id for template_id, _ in self.answers]
        _check_sit_template_ids(template_ids)
        if len(set(template_ids)) != len(template_ids):
            msg = "Each SIT template takes one answer"
            raise IdeaValidationError(msg, field="answers")

    @classmethod
    def from_mapping(cls, answers: Mapping[str, str]) -> Self:
        _check_sit_template_ids(answers)
        return cls(
            tuple((t.id, str(answers[t.id])) for t in SIT_TEMPLATES if t.id in answers)
        )

    def as_dict(self) -> dict[str, str]:
        return dict(self.answers)

    def answer(self, template_id: str) -> str:
        return self.as_dict().get(template_id, "")

    def with_answers(self, **answers: str) -> Self:
        """Return a copy with the given template answers replaced."""
        return self.from_mapping({**self.as_dict(), **answers})


@dataclass(frozen=True, slots=True)
class CKData:
    """C-K theory worksheet."""

    concepts: str = ""
    knowledge: str = ""
    opportunity: str = ""


@dataclass(frozen=True, slots=True)
class FMEAEntry:
    """One inverted failure-mode row.

    Attributes:
        id: Row identifier.
        failure_mode: What goes wrong.
        effect: Impact when it does.
        severity: Rating from 1 to 10.
        novel_mitigation: The non-obvious fix.
        patent_candidate: Whether the mitigation is worth filing.
    """

    id: str
    failure_mode: str = ""
    effect: str = ""
    severity: int = 5
    novel_mitigation: str = ""
    patent_candidate: bool = False

    def __post_init__(self) -> None:
        if not 1 <= self.severity <= FMEA_SEVERITY_MAX:
            msg = f"FMEA severity must be between 1 and {FMEA_SEVERITY_MAX}"
            raise IdeaValidationError(
                msg,
                field="severity",
                value=self.severity,
                expected=f"1..{FMEA_SEVERITY_MAX}",
            )


@dataclass(frozen=True, slots=True)
class FMEAData:
    entries: tuple[FMEAEntry, ...] = field(default_factory=tuple)


type FrameworkPayload = TRIZData | SITData | CKData | FMEAData

_PAYLOAD_TYPES: Final[dict[FrameworkType, type[FrameworkPayload]]] = {
    FrameworkType.TRIZ: TRIZData,
    FrameworkType.SIT: SITData,
    FrameworkType.CK: CKData,
    FrameworkType.FMEA: FMEAData,
}


def empty_payload(framework: FrameworkType) -> FrameworkPayload | None:
    """Build the empty worksheet for a framework.

    Analogy and none carry no worksheet and return None.
    """
    payload_type = _PAYLOAD_TYPES.get(framework)
    return payload_type() if payload_type is not None else None


@dataclass(frozen=True, slots=True)
class FrameworkState:
    """The selected framework and its worksheet.

    Attributes:
        used: The selected framework.
        data: Worksheet for ``used``; None for analogy and none.

    Raises:
        IdeaValidationError: If ``data`` is not the worksheet type that
            ``used`` calls for.
    """

    used: FrameworkType = FrameworkType.NONE
    data: FrameworkPayload | None = None

    def __post_init__(self) -> None:
        expected = _PAYLOAD_TYPES.get(self.used)
        if expected is None and self.data is None:
            return
        if expected is not None and isinstance(self.data, expected):
            return
        msg = f"Framework {self.used} cannot hold {type(self.data).__name__}"
        raise IdeaValidationError(
            msg,
            field="framework",
            value=type(self.data).__name__,
            expected=expected.__name__ if expected is not None else "None",
        )

    @classmethod
    def for_framework(cls, framework: FrameworkType) -> Self:
        """Create a state with an empty worksheet for ``framework``."""
        return cls(used=framework, data=empty_payload(framework))


def _parse_framework(framework: FrameworkType | str) -> FrameworkType:
    try:
        return FrameworkType(framework)
    except ValueError as e:
        msg = f"Unknown framework: {framework}"
        raise IdeaValidationError(
            msg,
            field="framework",
            value=framework,
            expected=", ".join(f.value for f in FrameworkType),
        ) from e


def select_framework(
    state: FrameworkState, framework: FrameworkType | str
) -> FrameworkState:
    """Apply a framework selection.

    Args:
        state: Current framework state.
        framework: The framework to select.

    Returns:
        ``state`` unchanged when re-selecting the active framework,
        otherwise a fresh state with an empty worksheet.

    Raises:
        IdeaValidationError: If ``framework`` is not a known framework.
    """
    target = _parse_framework(framework)
    if target == state.used:
        return state
    return FrameworkState.for_framework(target)


def merge_framework_data(
    state: FrameworkState,
    framework: FrameworkType | str,
    **updates: Any,  # pyright: ignore[reportAny,reportExplicitAny]
) -> FrameworkState:
    """Merge field updates into the active worksheet.

    Sibling fields not named in ``updates`` are kept. SIT updates are keyed
    by template id and merge into the existing answers.

    Args:
        state: Current framework state.
        framework: The framework the updates were written for.
        **updates: Worksheet fields to replace.

    Returns:
        New state with the merged worksheet.

    Raises:
        FrameworkMismatchError: If ``framework`` is not the active one, or
            the active framework has no worksheet.
        IdeaValidationError: If ``framework`` is unknown, or an update names
            an unknown worksheet field or SIT template.
    """
    requested = _parse_framework(framework)
    if requested != state.used or state.data is None:
        msg = f"Cannot edit {requested} worksheet while {state.used} is active"
        raise FrameworkMismatchError(
            msg, active=state.used.value, requested=requested.value
        )

    if isinstance(state.data, SITData):
        return replace(state, data=state.data.with_answers(**updates))

    allowed = {f.name for f in fields(state.data)}
    unknown = sorted(set(updates) - allowed)
    if unknown:
        msg = f"Unknown {requested} worksheet field(s): {', '.join(unknown)}"
        raise IdeaValidationError(
            msg, field=unknown[0], expected=", ".join(sorted(allowed))
        )

    return replace(state, data=replace(state.data, **updates))


def set_layer_drill(triz: TRIZData, drill: LayerDrillState) -> TRIZData:
    """Replace or append the drill for ``drill.principle_id``.

    Entries whose three layers are all blank are dropped from the result,
    so clearing every layer removes the entry.
    """
    drills: list[LayerDrillState] = []
    replaced = False
    for existing in triz.layer_drills:
        if existing.principle_id == drill.principle_id:
            drills.append(drill)
            replaced = True
        else:
            drills.append(existing)
    if not replaced:
        drills.append(drill)
    return replace(triz, layer_drills=tuple(d for d in drills if not d.is_empty))


def set_alice_answer(
    triz: TRIZData, question: AliceQuestion | str, value: bool
) -> TRIZData:
    """Record one pre-screen answer, starting the checklist if needed."""
    checklist = triz.alice_pre_screen or AlicePreScreenChecklist()
    return replace(triz, alice_pre_screen=checklist.with_answer(question, value))
