"""Prompt preferences, inventor details and reference tables."""

from ._preferences import (
    CLAIM_STYLE_OPTIONS,
    DOMAIN_FOCUS_OPTIONS,
    JURISDICTION_OPTIONS,
    TECHNICAL_DEPTH_OPTIONS,
    TONE_OPTIONS,
    ClaimStyle,
    DomainFocus,
    InventorInfo,
    Jurisdiction,
    PromptPreferences,
    TechnicalDepth,
    Tone,
)
from ._reference import (
    CK_PROMPTS,
    FRAMEWORK_OPTIONS,
    PATENT_MATRIX,
    SESSION_MODES,
    SIT_TEMPLATES,
    SPRINT_PHASES,
    CKPrompts,
    FrameworkOption,
    PatentMatrixDimension,
    PatentMatrixLevel,
    SessionModeConfig,
    SITTemplate,
    SprintPhaseConfig,
    get_framework_option,
    get_patent_matrix_level,
    get_session_mode,
    get_sit_template,
    get_sprint_phase,
)

__all__ = [
    "CK_PROMPTS",
    "CLAIM_STYLE_OPTIONS",
    "DOMAIN_FOCUS_OPTIONS",
    "FRAMEWORK_OPTIONS",
    "JURISDICTION_OPTIONS",
    "PATENT_MATRIX",
    "SESSION_MODES",
    "SIT_TEMPLATES",
    "SPRINT_PHASES",
    "TECHNICAL_DEPTH_OPTIONS",
    "TONE_OPTIONS",
    "CKPrompts",
    "ClaimStyle",
    "DomainFocus",
    "FrameworkOption",
    "InventorInfo",
    "Jurisdiction",
    "PatentMatrixDimension",
    "PatentMatrixLevel",
    "PromptPreferences",
    "SITTemplate",
    "SessionModeConfig",
    "SprintPhaseConfig",
    "TechnicalDepth",
    "Tone",
    "get_framework_option",
    "get_patent_matrix_level",
    "get_session_mode",
    "get_sit_template",
    "get_sprint_phase",
]
