"""Contradiction lookup over the curated software matrix."""

from typing import Final

from ._matrix_data import CONTRADICTION_MATRIX
from ._models import ContradictionEntry, SoftwareParameter, SoftwarePrinciple
from ._parameters import SOFTWARE_PARAMETERS
from ._principles import SOFTWARE_PRINCIPLES

__all__ = [
    "get_parameter_by_id",
    "get_parameters_by_category",
    "get_principle_by_id",
    "list_contradictions_for",
    "lookup_contradiction",
]

# Indexes built once at import; the source tables are immutable.
_PARAMETERS_BY_ID: Final[dict[int, SoftwareParameter]] = {
    p.id: p for p in SOFTWARE_PARAMETERS
}
_PRINCIPLES_BY_ID: Final[dict[int, SoftwarePrinciple]] = {
    p.id: p for p in SOFTWARE_PRINCIPLES
}


def _index_entries() -> dict[tuple[int, int], ContradictionEntry]:
    index: dict[tuple[int, int], ContradictionEntry] = {}
    for entry in CONTRADICTION_MATRIX:
        # First curated entry wins if a pair is ever listed twice
        index.setdefault((entry.improving, entry.worsening), entry)
    return index


_ENTRIES_BY_PAIR: Final = _index_entries()


def lookup_contradiction(
    improving_id: int, worsening_id: int
) -> tuple[SoftwarePrinciple, ...]:
    """Look up the principles suggested for a contradiction.

    The match is exact on the ordered pair: ``(a, b)`` and ``(b, a)`` are
    independent cells. Improving A at B's expense is a different problem
    from the reverse.

    Args:
        improving_id: Id of the parameter being improved.
        worsening_id: Id of the parameter that worsens.

    Returns:
        Suggested principles in curated order, or an empty tuple when the
        pair has no entry (including when either id is unknown).
    """
    entry = _ENTRIES_BY_PAIR.get((improving_id, worsening_id))
    if entry is None:
        return ()
    return tuple(
        _PRINCIPLES_BY_ID[pid]
        for pid in entry.suggested_principles
        if pid in _PRINCIPLES_BY_ID
    )


def list_contradictions_for(improving_id: int) -> tuple[ContradictionEntry, ...]:
    """List every curated entry for an improving parameter, in table order."""
    return tuple(e for e in CONTRADICTION_MATRIX if e.improving == improving_id)


def get_parameter_by_id(parameter_id: int) -> SoftwareParameter | None:
    """Get a parameter by id, or None if unknown."""
    return _PARAMETERS_BY_ID.get(parameter_id)


def get_principle_by_id(principle_id: int) -> SoftwarePrinciple | None:
    """Get a principle by id, or None if unknown."""
    return _PRINCIPLES_BY_ID.get(principle_id)


def get_parameters_by_category() -> dict[str, list[SoftwareParameter]]:
    """Group parameters by category, preserving table order.

    Returns:
        Mapping of category value to the parameters in that category.
    """
    groups: dict[str, list[SoftwareParameter]] = {}
    for param in SOFTWARE_PARAMETERS:
        groups.setdefault(param.category.value, []).append(param)
    return groups
