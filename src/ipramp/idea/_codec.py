# pyright: reportAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
# pyright: reportExplicitAny=false, reportUnknownMemberType=false
"""Conversion between Idea records and their persisted JSON layout.

The persisted layout is camelCase and keeps scoring, framework and filing
payloads as nested objects. Decoding is lenient about missing keys (each
falls back to the field default) but strict about values that violate a
model invariant, which raise ``IdeaValidationError``.
"""

from typing import TYPE_CHECKING, Any

from ipramp.enums import AliceRiskLevel, FrameworkType, IdeaPhase, IdeaStatus
from ipramp.settings import SIT_TEMPLATES

from ._frameworks import (
    AlicePreScreenChecklist,
    CKData,
    FMEAData,
    FMEAEntry,
    FrameworkPayload,
    FrameworkState,
    LayerDrillState,
    SITData,
    TRIZData,
    empty_payload,
)
from ._models import (
    AliceScore,
    AlignmentScore,
    ClaimDraft,
    DependentClaim,
    Idea,
    IdeaScore,
    InventiveStepAnalysis,
    MarketNeedsAnalysis,
    PatentReport,
)

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

__all__ = ["idea_from_dict", "idea_to_dict"]


def _strs(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(str(v) for v in value)


def _opt_str(value: Any) -> str | None:
    return None if value is None else str(value)


# -----------------------------------------------------------------------------
# Encoding
# -----------------------------------------------------------------------------


def _encode_claims(claims: tuple[DependentClaim, ...]) -> list[dict[str, Any]]:
    return [{"claimNumber": c.claim_number, "text": c.text} for c in claims]


def _encode_inventive(a: InventiveStepAnalysis) -> dict[str, Any]:
    return {
        "primaryInventiveStep": a.primary_inventive_step,
        "secondarySteps": list(a.secondary_steps),
        "nonObviousnessArgument": a.non_obviousness_argument,
        "closestPriorArt": list(a.closest_prior_art),
        "differentiatingFactors": list(a.differentiating_factors),
        "technicalAdvantage": a.technical_advantage,
    }


def _encode_market(a: MarketNeedsAnalysis) -> dict[str, Any]:
    return {
        "marketSize": a.market_size,
        "targetSegments": list(a.target_segments),
        "painPointsSolved": list(a.pain_points_solved),
        "competitiveLandscape": a.competitive_landscape,
        "commercializationPotential": a.commercialization_potential,
        "licensingOpportunities": list(a.licensing_opportunities),
        "strategicValue": a.strategic_value,
    }


def _encode_payload(payload: FrameworkPayload) -> Any:
    match payload:
        case TRIZData():
            out: dict[str, Any] = {
                "improving": payload.improving,
                "worsening": payload.worsening,
                "principles": list(payload.principles),
                "resolution": payload.resolution,
            }
            if payload.layer_drills:
                out["layerDrills"] = [
                    {
                        "principleId": d.principle_id,
                        "layer1": d.layer1,
                        "layer2": d.layer2,
                        "layer3": d.layer3,
                    }
                    for d in payload.layer_drills
                ]
            if payload.alice_pre_screen is not None:
                check = payload.alice_pre_screen
                out["alicePreScreen"] = {
                    "technicalProblem": check.technical_problem,
                    "specificSolution": check.specific_solution,
                    "technicalImprovement": check.technical_improvement,
                    "notConventional": check.not_conventional,
                    "score": check.score,
                    "verdict": check.verdict.value,
                }
            return out
        case SITData():
            return payload.as_dict()
        case CKData():
            return {
                "concepts": payload.concepts,
                "knowledge": payload.knowledge,
                "opportunity": payload.opportunity,
            }
        case FMEAData():
            return [
                {
                    "id": e.id,
                    "failureMode": e.failure_mode,
                    "effect": e.effect,
                    "severity": e.severity,
                    "novelMitigation": e.novel_mitigation,
                    "patentCandidate": e.patent_candidate,
                }
                for e in payload.entries
            ]


def idea_to_dict(idea: Idea) -> dict[str, Any]:
    """Encode an idea into its persisted JSON layout.

    ``frameworkData`` holds only the key for the active framework, or is
    empty when the framework carries no worksheet.
    """
    framework_data: dict[str, Any] = {}
    if idea.framework.data is not None:
        framework_data[idea.framework.used.value] = _encode_payload(
            idea.framework.data
        )

    score = idea.score
    alice = idea.alice_score
    draft = idea.claim_draft
    report = idea.patent_report

    return {
        "id": idea.id,
        "userId": idea.user_id,
        "sprintId": idea.sprint_id,
        "teamId": idea.team_id,
        "title": idea.title,
        "problemStatement": idea.problem_statement,
        "existingApproach": idea.existing_approach,
        "proposedSolution": idea.proposed_solution,
        "technicalApproach": idea.technical_approach,
        "contradictionResolved": idea.contradiction_resolved,
        "priorArtNotes": idea.prior_art_notes,
        "status": idea.status.value,
        "phase": idea.phase.value,
        "techStack": list(idea.tech_stack),
        "tags": list(idea.tags),
        "score": None
        if score is None
        else {
            "inventiveStep": score.inventive_step,
            "defensibility": score.defensibility,
            "productFit": score.product_fit,
        },
        "aliceScore": None
        if alice is None
        else {
            "overallScore": alice.overall_score,
            "abstractIdeaRisk": alice.abstract_idea_risk.value,
            "abstractIdeaAnalysis": alice.abstract_idea_analysis,
            "practicalApplication": alice.practical_application,
            "inventiveConcept": alice.inventive_concept,
            "recommendations": list(alice.recommendations),
            "comparableCases": list(alice.comparable_cases),
        },
        "frameworkUsed": idea.framework.used.value,
        "frameworkData": framework_data,
        "claimDraft": None
        if draft is None
        else {
            "methodClaim": draft.method_claim,
            "systemClaim": draft.system_claim,
            "crmClaim": draft.crm_claim,
            "methodDependentClaims": _encode_claims(draft.method_dependent_claims),
            "systemDependentClaims": _encode_claims(draft.system_dependent_claims),
            "crmDependentClaims": _encode_claims(draft.crm_dependent_claims),
            "abstractText": draft.abstract_text,
            "claimStrategy": draft.claim_strategy,
            "aliceMitigationNotes": draft.alice_mitigation_notes,
            "prosecutionTips": list(draft.prosecution_tips),
            "notes": draft.notes,
        },
        "inventiveStepAnalysis": None
        if idea.inventive_step_analysis is None
        else _encode_inventive(idea.inventive_step_analysis),
        "marketNeedsAnalysis": None
        if idea.market_needs_analysis is None
        else _encode_market(idea.market_needs_analysis),
        "patentReport": None
        if report is None
        else {
            "executiveSummary": report.executive_summary,
            "inventiveStepAnalysis": _encode_inventive(report.inventive_step_analysis),
            "marketNeedsAnalysis": _encode_market(report.market_needs_analysis),
            "claimStrategy": report.claim_strategy,
            "filingRecommendation": report.filing_recommendation,
            "riskAssessment": report.risk_assessment,
            "nextSteps": list(report.next_steps),
        },
        "redTeamNotes": idea.red_team_notes,
        "alignmentScores": [
            {
                "id": a.id,
                "ideaId": a.idea_id,
                "goalId": a.goal_id,
                "score": a.score,
                "rationale": a.rationale,
            }
            for a in idea.alignment_scores
        ],
        "createdAt": idea.created_at,
        "updatedAt": idea.updated_at,
    }


# -----------------------------------------------------------------------------
# Decoding
# -----------------------------------------------------------------------------


def _decode_claims(value: Any) -> tuple[DependentClaim, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(
        DependentClaim(
            claim_number=int(c.get("claimNumber", 0)), text=str(c.get("text", ""))
        )
        for c in value
        if isinstance(c, dict)
    )


def _decode_inventive(data: dict[str, Any]) -> InventiveStepAnalysis:
    return InventiveStepAnalysis(
        primary_inventive_step=str(data.get("primaryInventiveStep", "")),
        secondary_steps=_strs(data.get("secondarySteps")),
        non_obviousness_argument=str(data.get("nonObviousnessArgument", "")),
        closest_prior_art=_strs(data.get("closestPriorArt")),
        differentiating_factors=_strs(data.get("differentiatingFactors")),
        technical_advantage=str(data.get("technicalAdvantage", "")),
    )


def _decode_market(data: dict[str, Any]) -> MarketNeedsAnalysis:
    return MarketNeedsAnalysis(
        market_size=str(data.get("marketSize", "")),
        target_segments=_strs(data.get("targetSegments")),
        pain_points_solved=_strs(data.get("painPointsSolved")),
        competitive_landscape=str(data.get("competitiveLandscape", "")),
        commercialization_potential=str(data.get("commercializationPotential", "")),
        licensing_opportunities=_strs(data.get("licensingOpportunities")),
        strategic_value=str(data.get("strategicValue", "")),
    )


def _decode_triz(data: dict[str, Any]) -> TRIZData:
    drills = tuple(
        LayerDrillState(
            principle_id=int(d.get("principleId", 0)),
            layer1=str(d.get("layer1", "")),
            layer2=str(d.get("layer2", "")),
            layer3=str(d.get("layer3", "")),
        )
        for d in data.get("layerDrills") or []
        if isinstance(d, dict)
    )

    checklist: AlicePreScreenChecklist | None = None
    raw_check = data.get("alicePreScreen")
    if isinstance(raw_check, dict):
        # score and verdict are recomputed from the answers
        checklist = AlicePreScreenChecklist(
            technical_problem=bool(raw_check.get("technicalProblem", False)),
            specific_solution=bool(raw_check.get("specificSolution", False)),
            technical_improvement=bool(raw_check.get("technicalImprovement", False)),
            not_conventional=bool(raw_check.get("notConventional", False)),
        )

    return TRIZData(
        improving=str(data.get("improving", "")),
        worsening=str(data.get("worsening", "")),
        principles=tuple(int(p) for p in data.get("principles") or []),
        resolution=str(data.get("resolution", "")),
        layer_drills=tuple(d for d in drills if not d.is_empty),
        alice_pre_screen=checklist,
    )


def _decode_sit(
    raw: dict[str, Any],
    idea_id: str,
    logger: "FilteringBoundLogger | None",  # noqa: UP037
) -> SITData:
    known = {t.id for t in SIT_TEMPLATES}
    unknown = sorted(str(k) for k in raw if str(k) not in known)
    if unknown and logger:
        logger.warning("unknown_sit_answers_dropped", idea_id=idea_id, dropped=unknown)
    return SITData.from_mapping(
        {str(k): str(v) for k, v in raw.items() if str(k) in known}
    )


def _decode_payload(
    used: FrameworkType,
    raw: Any,
    idea_id: str,
    logger: "FilteringBoundLogger | None",  # noqa: UP037
) -> FrameworkPayload | None:
    if raw is None:
        return empty_payload(used)
    match used:
        case FrameworkType.TRIZ if isinstance(raw, dict):
            return _decode_triz(raw)
        case FrameworkType.SIT if isinstance(raw, dict):
            return _decode_sit(raw, idea_id, logger)
        case FrameworkType.CK if isinstance(raw, dict):
            return CKData(
                concepts=str(raw.get("concepts", "")),
                knowledge=str(raw.get("knowledge", "")),
                opportunity=str(raw.get("opportunity", "")),
            )
        case FrameworkType.FMEA if isinstance(raw, list):
            return FMEAData(
                entries=tuple(
                    FMEAEntry(
                        id=str(e.get("id", "")),
                        failure_mode=str(e.get("failureMode", "")),
                        effect=str(e.get("effect", "")),
                        severity=int(e.get("severity", 5)),
                        novel_mitigation=str(e.get("novelMitigation", "")),
                        patent_candidate=bool(e.get("patentCandidate", False)),
                    )
                    for e in raw
                    if isinstance(e, dict)
                )
            )
        case _:
            return empty_payload(used)


def _decode_framework(
    data: dict[str, Any],
    idea_id: str,
    logger: "FilteringBoundLogger | None",  # noqa: UP037
) -> FrameworkState:
    used = FrameworkType(str(data.get("frameworkUsed", FrameworkType.NONE.value)))
    framework_data = data.get("frameworkData")
    if not isinstance(framework_data, dict):
        framework_data = {}

    stale = sorted(k for k in framework_data if k != used.value)
    if stale and logger:
        logger.warning(
            "stale_framework_data_dropped",
            idea_id=idea_id,
            framework=used.value,
            dropped=stale,
        )

    return FrameworkState(
        used=used,
        data=_decode_payload(
            used, framework_data.get(used.value), idea_id, logger
        ),
    )


def idea_from_dict(
    data: dict[str, Any],
    *,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> Idea:
    """Decode an idea from its persisted JSON layout.

    Worksheet data stored under a framework other than ``frameworkUsed`` is
    dropped and logged at warning level.

    Args:
        data: Raw idea object.
        logger: Optional logger for dropped-data warnings.

    Returns:
        The decoded idea.

    Raises:
        ValueError: If an enum value is unknown.
        IdeaValidationError: If a value violates a model invariant (for
            example a sub-score outside 0..3).
    """
    idea_id = str(data.get("id", ""))

    score: IdeaScore | None = None
    if isinstance(raw_score := data.get("score"), dict):
        score = IdeaScore(
            inventive_step=int(raw_score.get("inventiveStep", 0)),
            defensibility=int(raw_score.get("defensibility", 0)),
            product_fit=int(raw_score.get("productFit", 0)),
        )

    alice: AliceScore | None = None
    if isinstance(raw_alice := data.get("aliceScore"), dict):
        alice = AliceScore(
            overall_score=int(raw_alice.get("overallScore", 0)),
            abstract_idea_risk=AliceRiskLevel(
                str(raw_alice.get("abstractIdeaRisk", AliceRiskLevel.MEDIUM.value))
            ),
            abstract_idea_analysis=str(raw_alice.get("abstractIdeaAnalysis", "")),
            practical_application=str(raw_alice.get("practicalApplication", "")),
            inventive_concept=str(raw_alice.get("inventiveConcept", "")),
            recommendations=_strs(raw_alice.get("recommendations")),
            comparable_cases=_strs(raw_alice.get("comparableCases")),
        )

    draft: ClaimDraft | None = None
    if isinstance(raw_draft := data.get("claimDraft"), dict):
        draft = ClaimDraft(
            method_claim=str(raw_draft.get("methodClaim", "")),
            system_claim=str(raw_draft.get("systemClaim", "")),
            crm_claim=str(raw_draft.get("crmClaim", "")),
            method_dependent_claims=_decode_claims(
                raw_draft.get("methodDependentClaims")
            ),
            system_dependent_claims=_decode_claims(
                raw_draft.get("systemDependentClaims")
            ),
            crm_dependent_claims=_decode_claims(raw_draft.get("crmDependentClaims")),
            abstract_text=str(raw_draft.get("abstractText", "")),
            claim_strategy=str(raw_draft.get("claimStrategy", "")),
            alice_mitigation_notes=str(raw_draft.get("aliceMitigationNotes", "")),
            prosecution_tips=_strs(raw_draft.get("prosecutionTips")),
            notes=str(raw_draft.get("notes", "")),
        )

    report: PatentReport | None = None
    if isinstance(raw_report := data.get("patentReport"), dict):
        report = PatentReport(
            executive_summary=str(raw_report.get("executiveSummary", "")),
            inventive_step_analysis=_decode_inventive(
                raw_report.get("inventiveStepAnalysis") or {}
            ),
            market_needs_analysis=_decode_market(
                raw_report.get("marketNeedsAnalysis") or {}
            ),
            claim_strategy=str(raw_report.get("claimStrategy", "")),
            filing_recommendation=str(raw_report.get("filingRecommendation", "")),
            risk_assessment=str(raw_report.get("riskAssessment", "")),
            next_steps=_strs(raw_report.get("nextSteps")),
        )

    raw_inventive = data.get("inventiveStepAnalysis")
    raw_market = data.get("marketNeedsAnalysis")

    return Idea(
        id=idea_id,
        user_id=str(data.get("userId", "")),
        title=str(data.get("title", "")),
        created_at=str(data.get("createdAt", "")),
        updated_at=str(data.get("updatedAt", "")),
        sprint_id=_opt_str(data.get("sprintId")),
        team_id=_opt_str(data.get("teamId")),
        problem_statement=str(data.get("problemStatement", "")),
        existing_approach=str(data.get("existingApproach", "")),
        proposed_solution=str(data.get("proposedSolution", "")),
        technical_approach=str(data.get("technicalApproach", "")),
        contradiction_resolved=str(data.get("contradictionResolved", "")),
        prior_art_notes=str(data.get("priorArtNotes", "")),
        red_team_notes=str(data.get("redTeamNotes", "")),
        status=IdeaStatus(str(data.get("status", IdeaStatus.DRAFT.value))),
        phase=IdeaPhase(str(data.get("phase", IdeaPhase.FOUNDATION.value))),
        tech_stack=_strs(data.get("techStack")),
        tags=_strs(data.get("tags")),
        score=score,
        alice_score=alice,
        framework=_decode_framework(data, idea_id, logger),
        claim_draft=draft,
        inventive_step_analysis=_decode_inventive(raw_inventive)
        if isinstance(raw_inventive, dict)
        else None,
        market_needs_analysis=_decode_market(raw_market)
        if isinstance(raw_market, dict)
        else None,
        patent_report=report,
        alignment_scores=tuple(
            AlignmentScore(
                id=str(a.get("id", "")),
                idea_id=str(a.get("ideaId", idea_id)),
                goal_id=str(a.get("goalId", "")),
                score=int(a.get("score", 0)),
                rationale=str(a.get("rationale", "")),
            )
            for a in data.get("alignmentScores") or []
            if isinstance(a, dict)
        ),
    )
