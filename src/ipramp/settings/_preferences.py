# pyright: reportAny=false, reportExplicitAny=false
"""Prompt preferences and inventor details.

Both records are persisted as camelCase JSON objects. Stored preferences
are merged over the defaults field by field, so a single bad value only
resets that field.
"""

from enum import StrEnum
from typing import Any, ClassVar, Final, Self

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

__all__ = [
    "CLAIM_STYLE_OPTIONS",
    "DOMAIN_FOCUS_OPTIONS",
    "JURISDICTION_OPTIONS",
    "TECHNICAL_DEPTH_OPTIONS",
    "TONE_OPTIONS",
    "ClaimStyle",
    "DomainFocus",
    "InventorInfo",
    "Jurisdiction",
    "PromptPreferences",
    "TechnicalDepth",
    "Tone",
]


class Jurisdiction(StrEnum):
    USPTO = "uspto"
    EPO = "epo"
    WIPO = "wipo"
    JPO = "jpo"


class ClaimStyle(StrEnum):
    BROAD = "broad"
    NARROW = "narrow"
    BALANCED = "balanced"


class TechnicalDepth(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    ACCESSIBLE = "accessible"


class Tone(StrEnum):
    FORMAL = "formal"
    PLAIN = "plain"


class DomainFocus(StrEnum):
    GENERAL = "general"
    CLOUD_INFRASTRUCTURE = "cloud_infrastructure"
    AI_ML = "ai_ml"
    SECURITY = "security"
    IOT = "iot"
    DATA_ANALYTICS = "data_analytics"
    FINTECH = "fintech"
    HEALTHCARE = "healthcare"
    BLOCKCHAIN = "blockchain"
    EDGE_COMPUTING = "edge_computing"
    DEVTOOLS = "devtools"


JURISDICTION_OPTIONS: Final[dict[Jurisdiction, str]] = {
    Jurisdiction.USPTO: "USPTO (United States)",
    Jurisdiction.EPO: "EPO (European Patent Office)",
    Jurisdiction.WIPO: "WIPO (International / PCT)",
    Jurisdiction.JPO: "JPO (Japan Patent Office)",
}

CLAIM_STYLE_OPTIONS: Final[dict[ClaimStyle, str]] = {
    ClaimStyle.BROAD: "Maximize claim scope for portfolio leverage",
    ClaimStyle.BALANCED: "Defensible scope with fallback positions",
    ClaimStyle.NARROW: "Highly specific claims for faster allowance",
}

TECHNICAL_DEPTH_OPTIONS: Final[dict[TechnicalDepth, str]] = {
    TechnicalDepth.HIGH: "Staff/principal engineer level",
    TechnicalDepth.MEDIUM: "Senior engineer level",
    TechnicalDepth.ACCESSIBLE: "Plain English for non-technical stakeholders",
}

TONE_OPTIONS: Final[dict[Tone, str]] = {
    Tone.FORMAL: "Formal Patent Language",
    Tone.PLAIN: "Plain English Draft",
}

DOMAIN_FOCUS_OPTIONS: Final[dict[DomainFocus, str]] = {
    DomainFocus.GENERAL: "General Software",
    DomainFocus.CLOUD_INFRASTRUCTURE: "Cloud & Infrastructure",
    DomainFocus.AI_ML: "AI & Machine Learning",
    DomainFocus.SECURITY: "Security & Privacy",
    DomainFocus.IOT: "Internet of Things",
    DomainFocus.DATA_ANALYTICS: "Data & Analytics",
    DomainFocus.FINTECH: "Fintech & Payments",
    DomainFocus.HEALTHCARE: "Healthcare & Biotech",
    DomainFocus.BLOCKCHAIN: "Blockchain & Web3",
    DomainFocus.EDGE_COMPUTING: "Edge Computing",
    DomainFocus.DEVTOOLS: "Developer Tools & DevOps",
}


class PromptPreferences(BaseModel):
    """Drafting preferences applied to generated patent text.

    Attributes:
        jurisdiction: Patent office the drafts target.
        claim_style: How wide the claims should reach.
        technical_depth: Reading level of the technical description.
        tone: Formal claim language or a plain-English draft.
        domain_focus: Technology area to emphasise.
        company_context: Free-text background on the applicant.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    jurisdiction: Jurisdiction = Jurisdiction.USPTO
    claim_style: ClaimStyle = ClaimStyle.BALANCED
    technical_depth: TechnicalDepth = TechnicalDepth.MEDIUM
    tone: Tone = Tone.FORMAL
    domain_focus: DomainFocus = DomainFocus.GENERAL
    company_context: str = ""

    @classmethod
    def from_stored(cls, data: Any) -> Self:
        """Merge a stored object over the defaults.

        Unknown keys are ignored. A value that fails validation falls back
        to that field's default rather than rejecting the whole object.

        Args:
            data: Decoded JSON; anything other than an object yields defaults.

        Returns:
            The merged preferences.
        """
        if not isinstance(data, dict):
            return cls()

        accepted: dict[str, Any] = {}
        for name, info in cls.model_fields.items():
            alias = info.alias or name
            for key in (alias, name):
                if key not in data:
                    continue
                try:
                    _ = cls.model_validate({name: data[key]})
                except ValidationError:
                    continue
                accepted[name] = data[key]
                break
        return cls.model_validate(accepted)

    def to_stored(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class InventorInfo(BaseModel):
    """Inventor details remembered between disclosure exports."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    name: str = ""
    department: str = ""
    email: str = ""
