"""Software contradiction matrix.

Static reference data (35 parameters, 40 principles, curated matrix) and
the pure lookup functions over it.
"""

from ._matrix import (
    get_parameter_by_id,
    get_parameters_by_category,
    get_principle_by_id,
    list_contradictions_for,
    lookup_contradiction,
)
from ._matrix_data import CONTRADICTION_MATRIX
from ._models import (
    ContradictionEntry,
    ParameterCategory,
    SoftwareParameter,
    SoftwarePrinciple,
)
from ._parameters import SOFTWARE_PARAMETERS
from ._principles import SOFTWARE_PRINCIPLES

__all__ = [
    "CONTRADICTION_MATRIX",
    "SOFTWARE_PARAMETERS",
    "SOFTWARE_PRINCIPLES",
    "ContradictionEntry",
    "ParameterCategory",
    "SoftwareParameter",
    "SoftwarePrinciple",
    "get_parameter_by_id",
    "get_parameters_by_category",
    "get_principle_by_id",
    "list_contradictions_for",
    "lookup_contradiction",
]
