"""Property-based tests for contradiction matrix lookups."""

from hypothesis import given, strategies as st

from ipramp.triz import (
    CONTRADICTION_MATRIX,
    SOFTWARE_PARAMETERS,
    SOFTWARE_PRINCIPLES,
    ContradictionEntry,
    get_parameter_by_id,
    get_principle_by_id,
    list_contradictions_for,
    lookup_contradiction,
)

parameter_ids = st.sampled_from([p.id for p in SOFTWARE_PARAMETERS])
any_ids = st.integers(min_value=-5, max_value=60)
entries = st.sampled_from(CONTRADICTION_MATRIX)

_PAIRS = {(e.improving, e.worsening): e for e in CONTRADICTION_MATRIX}


@given(improving=any_ids, worsening=any_ids)
def test_lookup_is_deterministic(improving: int, worsening: int) -> None:
    assert lookup_contradiction(improving, worsening) == lookup_contradiction(
        improving, worsening
    )


@given(improving=parameter_ids, worsening=parameter_ids)
def test_lookup_matches_curated_entry_in_order(improving: int, worsening: int) -> None:
    result = [p.id for p in lookup_contradiction(improving, worsening)]

    entry = _PAIRS.get((improving, worsening))
    if entry is None:
        assert result == []
    else:
        assert result == list(entry.suggested_principles)


@given(entry=entries)
def test_reverse_pair_is_an_independent_cell(entry: ContradictionEntry) -> None:
    reverse = _PAIRS.get((entry.worsening, entry.improving))
    expected = list(reverse.suggested_principles) if reverse is not None else []

    result = lookup_contradiction(entry.worsening, entry.improving)

    assert [p.id for p in result] == expected


@given(entry=entries)
def test_curated_entries_reference_known_ids(entry: ContradictionEntry) -> None:
    assert get_parameter_by_id(entry.improving) is not None
    assert get_parameter_by_id(entry.worsening) is not None
    assert entry.improving != entry.worsening
    for principle_id in entry.suggested_principles:
        assert get_principle_by_id(principle_id) is not None


@given(improving=any_ids)
def test_list_contradictions_for_only_returns_that_parameter(improving: int) -> None:
    listed = list_contradictions_for(improving)

    assert all(e.improving == improving for e in listed)
    expected = [e for e in CONTRADICTION_MATRIX if e.improving == improving]
    assert list(listed) == expected


@given(principle_id=any_ids)
def test_principle_lookup_agrees_with_table(principle_id: int) -> None:
    known = {p.id: p for p in SOFTWARE_PRINCIPLES}

    assert get_principle_by_id(principle_id) == known.get(principle_id)
