"""Idea records, framework worksheets and derived idea state."""

from ._codec import idea_from_dict, idea_to_dict
from ._derived import (
    PIPELINE_STAGES,
    BadgeColor,
    IdeaProgress,
    PipelineStage,
    ScoreVerdict,
    StageProgress,
    get_alice_risk_color,
    get_idea_progress,
    get_score_verdict,
    get_sprint_status_color,
    get_status_color,
    get_total_score,
)
from ._frameworks import (
    AlicePreScreenChecklist,
    AliceQuestion,
    CKData,
    FMEAData,
    FMEAEntry,
    FrameworkPayload,
    FrameworkState,
    LayerDrillState,
    SITData,
    TRIZData,
    compute_alice_verdict,
    empty_payload,
    merge_framework_data,
    select_framework,
    set_alice_answer,
    set_layer_drill,
)
from ._models import (
    IDEA_TEXT_FIELDS,
    IDEA_UPDATABLE_FIELDS,
    AliceScore,
    AlignmentScore,
    ClaimDraft,
    DependentClaim,
    Idea,
    IdeaScore,
    InventiveStepAnalysis,
    MarketNeedsAnalysis,
    PatentReport,
    create_blank_idea,
)
from ._query import filter_and_sort_ideas, matches_search

__all__ = [
    "IDEA_TEXT_FIELDS",
    "IDEA_UPDATABLE_FIELDS",
    "PIPELINE_STAGES",
    "AlicePreScreenChecklist",
    "AliceQuestion",
    "AliceScore",
    "AlignmentScore",
    "BadgeColor",
    "CKData",
    "ClaimDraft",
    "DependentClaim",
    "FMEAData",
    "FMEAEntry",
    "FrameworkPayload",
    "FrameworkState",
    "Idea",
    "IdeaProgress",
    "IdeaScore",
    "InventiveStepAnalysis",
    "LayerDrillState",
    "MarketNeedsAnalysis",
    "PatentReport",
    "PipelineStage",
    "SITData",
    "ScoreVerdict",
    "StageProgress",
    "TRIZData",
    "compute_alice_verdict",
    "create_blank_idea",
    "empty_payload",
    "filter_and_sort_ideas",
    "get_alice_risk_color",
    "get_idea_progress",
    "get_score_verdict",
    "get_sprint_status_color",
    "get_status_color",
    "get_total_score",
    "idea_from_dict",
    "idea_to_dict",
    "matches_search",
    "merge_framework_data",
    "select_framework",
    "set_alice_answer",
    "set_layer_drill",
]
