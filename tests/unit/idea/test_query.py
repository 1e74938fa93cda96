from collections.abc import Callable
from dataclasses import replace

import pytest

from ipramp.enums import IdeaSortField, IdeaStatus, SortDirection
from ipramp.idea import Idea, filter_and_sort_ideas, matches_search


@pytest.fixture
def ideas(make_idea: Callable[..., Idea]) -> list[Idea]:
    """Three ideas with distinct timestamps; ``b`` is the most recent."""
    return [
        replace(
            make_idea(
                idea_id="a",
                title="beta cache",
                problem_statement="Slow warmup",
            ),
            created_at="2025-01-01T00:00:00Z",
            updated_at="2025-01-02T00:00:00Z",
        ),
        replace(
            make_idea(
                idea_id="b",
                title="Alpha Queue",
                tags=("Messaging",),
                status=IdeaStatus.SCORED,
            ),
            created_at="2025-01-03T00:00:00Z",
            updated_at="2025-01-05T00:00:00Z",
        ),
        replace(
            make_idea(
                idea_id="c",
                title="gamma index",
                problem_statement="Cache misses on cold start",
            ),
            created_at="2025-01-02T00:00:00Z",
            updated_at="2025-01-03T00:00:00Z",
        ),
    ]


def _ids(ideas: list[Idea]) -> list[str]:
    return [idea.id for idea in ideas]


class TestMatchesSearch:
    def test_blank_query_matches_everything(
        self, make_idea: Callable[..., Idea]
    ) -> None:
        idea = make_idea()

        assert matches_search(idea, "")
        assert matches_search(idea, "   ")

    def test_matches_title_case_insensitively(
        self, make_idea: Callable[..., Idea]
    ) -> None:
        assert matches_search(make_idea(title="Adaptive TTL"), "ttl")

    def test_matches_problem_statement(self, make_idea: Callable[..., Idea]) -> None:
        assert matches_search(make_idea(problem_statement="Cold starts"), "COLD")

    def test_matches_tags(self, make_idea: Callable[..., Idea]) -> None:
        assert matches_search(make_idea(tags=("Edge",)), "edge")

    def test_ignores_other_fields(self, make_idea: Callable[..., Idea]) -> None:
        idea = make_idea(title="Cache", proposed_solution="bloom filter")

        assert not matches_search(idea, "bloom")


class TestFilterAndSortIdeas:
    def test_defaults_to_updated_at_descending(self, ideas: list[Idea]) -> None:
        assert _ids(filter_and_sort_ideas(ideas)) == ["b", "c", "a"]

    def test_created_at_ascending(self, ideas: list[Idea]) -> None:
        result = filter_and_sort_ideas(
            ideas, sort_by=IdeaSortField.CREATED_AT, sort_dir=SortDirection.ASC
        )

        assert _ids(result) == ["a", "c", "b"]

    def test_title_sort_ignores_case(self, ideas: list[Idea]) -> None:
        result = filter_and_sort_ideas(ideas, sort_by="title", sort_dir="asc")

        assert _ids(result) == ["b", "a", "c"]

    def test_filters_by_status(self, ideas: list[Idea]) -> None:
        result = filter_and_sort_ideas(ideas, status=IdeaStatus.DRAFT)

        assert _ids(result) == ["c", "a"]

    def test_combines_status_and_search(self, ideas: list[Idea]) -> None:
        result = filter_and_sort_ideas(ideas, status="draft", search="cache")

        assert _ids(result) == ["c", "a"]

    def test_no_matches_returns_empty(self, ideas: list[Idea]) -> None:
        assert filter_and_sort_ideas(ideas, search="blockchain") == []

    def test_sort_is_stable_for_equal_keys(
        self, make_idea: Callable[..., Idea]
    ) -> None:
        same = [
            replace(make_idea(idea_id=i, title="Same"), updated_at="2025-01-01")
            for i in ("x", "y", "z")
        ]

        assert _ids(filter_and_sort_ideas(same)) == ["x", "y", "z"]
        assert _ids(filter_and_sort_ideas(same, sort_dir="asc")) == ["x", "y", "z"]

    def test_does_not_modify_input(self, ideas: list[Idea]) -> None:
        before = list(ideas)

        _ = filter_and_sort_ideas(ideas, sort_by="title")

        assert ideas == before

    def test_unknown_sort_field_raises(self, ideas: list[Idea]) -> None:
        with pytest.raises(ValueError, match="score"):
            _ = filter_and_sort_ideas(ideas, sort_by="score")
