from collections.abc import Callable
from dataclasses import FrozenInstanceError
from typing import TYPE_CHECKING

import pytest

from ipramp.enums import FrameworkType, IdeaPhase, IdeaStatus
from ipramp.exceptions import IdeaValidationError
from ipramp.idea import IDEA_UPDATABLE_FIELDS, Idea, IdeaScore, create_blank_idea

if TYPE_CHECKING:
    from pendulum import DateTime

FreezeTimeFunc = Callable[..., "DateTime"]


class TestIdeaScore:
    def test_accepts_bounds(self) -> None:
        score = IdeaScore(inventive_step=0, defensibility=3, product_fit=2)

        assert score.defensibility == 3

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("inventive_step", -1),
            ("defensibility", 4),
            ("product_fit", 10),
        ],
    )
    def test_rejects_out_of_range(self, field: str, value: int) -> None:
        values = {"inventive_step": 1, "defensibility": 1, "product_fit": 1}
        values[field] = value

        with pytest.raises(IdeaValidationError) as exc_info:
            _ = IdeaScore(**values)

        assert exc_info.value.field == field
        assert exc_info.value.value == value

    def test_rejects_bool(self) -> None:
        with pytest.raises(IdeaValidationError):
            _ = IdeaScore(inventive_step=True, defensibility=1, product_fit=1)


class TestCreateBlankIdea:
    def test_defaults(self, freeze_time: FreezeTimeFunc) -> None:
        _ = freeze_time(2025, 3, 1, 12)

        idea = create_blank_idea("user-1")

        assert idea.user_id == "user-1"
        assert idea.title == ""
        assert idea.status is IdeaStatus.DRAFT
        assert idea.phase is IdeaPhase.FOUNDATION
        assert idea.framework.used is FrameworkType.NONE
        assert idea.framework.data is None
        assert idea.score is None
        assert idea.created_at == idea.updated_at
        assert idea.created_at.startswith("2025-03-01T12:00:00")

    def test_generates_unique_ids(self) -> None:
        first = create_blank_idea("user-1")
        second = create_blank_idea("user-1")

        assert first.id != second.id

    def test_explicit_id_and_fields(self) -> None:
        idea = create_blank_idea(
            "user-1", idea_id="idea-1", title="Cache", tags=("perf",)
        )

        assert idea.id == "idea-1"
        assert idea.title == "Cache"
        assert idea.tags == ("perf",)

    def test_rejects_managed_fields(self) -> None:
        with pytest.raises(IdeaValidationError, match="created_at"):
            _ = create_blank_idea("user-1", created_at="2020-01-01")

    def test_rejects_unknown_fields(self) -> None:
        with pytest.raises(IdeaValidationError) as exc_info:
            _ = create_blank_idea("user-1", colour="blue")

        assert exc_info.value.field == "colour"


class TestIdea:
    def test_is_frozen(self, make_idea: Callable[..., Idea]) -> None:
        idea = make_idea(title="Original")

        with pytest.raises(FrozenInstanceError):
            idea.title = "Changed"  # pyright: ignore[reportAttributeAccessIssue]

    def test_updatable_fields_exclude_identity_and_timestamps(self) -> None:
        assert "title" in IDEA_UPDATABLE_FIELDS
        assert "framework" in IDEA_UPDATABLE_FIELDS
        for managed in ("id", "user_id", "created_at", "updated_at"):
            assert managed not in IDEA_UPDATABLE_FIELDS
