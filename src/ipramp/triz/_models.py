"""Data models for the software contradiction matrix.

Parameters and principles are static reference data identified by stable
integer ids. They are never created or mutated at runtime.
"""

from dataclasses import dataclass, field
from enum import StrEnum

__all__ = [
    "ContradictionEntry",
    "ParameterCategory",
    "SoftwareParameter",
    "SoftwarePrinciple",
]


class ParameterCategory(StrEnum):
    """Grouping used when presenting parameters."""

    PERFORMANCE = "performance"
    SCALE = "scale"
    RELIABILITY = "reliability"
    SECURITY = "security"
    PRODUCT = "product"
    ENGINEERING = "engineering"
    OPERATIONS = "operations"
    AI_ML = "ai_ml"
    DATA = "data"
    INTEGRATION = "integration"
    ARCHITECTURE = "architecture"


@dataclass(frozen=True, slots=True)
class SoftwareParameter:
    """A system property that can be improved or worsened.

    Attributes:
        id: Stable parameter id (1-35).
        name: Short display name.
        category: Presentation group.
        description: What the parameter measures.
        example_tradeoff: A typical way improving it hurts something else.
    """

    id: int
    name: str
    category: ParameterCategory
    description: str
    example_tradeoff: str


@dataclass(frozen=True, slots=True)
class SoftwarePrinciple:
    """An inventive principle with software-flavoured examples.

    Attributes:
        id: Stable principle id (1-40).
        name: Classical name followed by its software reading.
        description: How the principle resolves a contradiction.
        software_examples: Concrete applications.
        patent_examples: Optional references to granted patents.
    """

    id: int
    name: str
    description: str
    software_examples: tuple[str, ...] = field(default_factory=tuple)
    patent_examples: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class ContradictionEntry:
    """One curated cell of the contradiction matrix.

    Attributes:
        improving: Id of the parameter being improved.
        worsening: Id of the parameter that degrades as a result.
        suggested_principles: Principle ids, most applicable first.
    """

    improving: int
    worsening: int
    suggested_principles: tuple[int, ...]
