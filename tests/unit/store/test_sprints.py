import pytest

from ipramp.enums import IdeaStatus, SessionMode, SprintStatus
from ipramp.exceptions import SprintValidationError
from ipramp.storage import PersistenceAdapter
from ipramp.store import IdeaStore, SprintStore


@pytest.fixture
def store(adapter: PersistenceAdapter) -> SprintStore:
    return SprintStore(adapter)


@pytest.fixture
def ideas(adapter: PersistenceAdapter) -> IdeaStore:
    return IdeaStore(adapter)


class TestCreateSprint:
    @pytest.mark.anyio
    async def test_uses_configured_defaults(self, adapter: PersistenceAdapter) -> None:
        store = SprintStore(
            adapter,
            default_timer_seconds=3600,
            default_session_mode=SessionMode.QUALITY,
        )

        state = await store.create_sprint("Latency")

        sprint = state.sprints[0]
        assert sprint.timer_seconds_remaining == 3600
        assert sprint.session_mode is SessionMode.QUALITY
        assert sprint.owner_id == "local-user"
        assert sprint.status is SprintStatus.ACTIVE

    @pytest.mark.anyio
    async def test_explicit_session_mode_wins(self, store: SprintStore) -> None:
        state = await store.create_sprint("Teardown", session_mode="destroy")

        assert state.sprints[0].session_mode is SessionMode.DESTROY

    @pytest.mark.anyio
    async def test_creator_becomes_lead(
        self, adapter: PersistenceAdapter, store: SprintStore
    ) -> None:
        sprint = (await store.create_sprint("Latency")).sprints[0]

        members = await adapter.list_members(sprint.id)

        assert [(m.user_id, m.role) for m in members] == [("local-user", "lead")]

    @pytest.mark.anyio
    async def test_newest_first(self, store: SprintStore) -> None:
        _ = await store.create_sprint("one")
        state = await store.create_sprint("two")

        assert [s.name for s in state.sprints] == ["two", "one"]
        assert [s.name for s in (await store.load_sprints()).sprints] == [
            "two",
            "one",
        ]


class TestSprintDetail:
    @pytest.mark.anyio
    async def test_load_detail(self, store: SprintStore) -> None:
        sprint = (await store.create_sprint("Latency")).sprints[0]
        _ = await store.quick_add_idea("Warm pool", sprint.id)

        state = await store.load_sprint_detail(sprint.id)

        assert state.active_sprint == sprint
        assert [i.title for i in state.sprint_ideas] == ["Warm pool"]
        assert len(state.members) == 1

    @pytest.mark.anyio
    async def test_unknown_id_clears_detail(self, store: SprintStore) -> None:
        sprint = (await store.create_sprint("Latency")).sprints[0]
        _ = await store.load_sprint_detail(sprint.id)

        state = await store.load_sprint_detail("missing")

        assert state.active_sprint is None
        assert state.sprint_ideas == ()
        assert state.members == ()

    @pytest.mark.anyio
    async def test_update_refreshes_active_sprint(self, store: SprintStore) -> None:
        sprint = (await store.create_sprint("Latency")).sprints[0]
        _ = await store.load_sprint_detail(sprint.id)

        state = await store.update_sprint(sprint.id, status="completed")

        assert state.active_sprint is not None
        assert state.active_sprint.status is SprintStatus.COMPLETED
        assert state.sprints[0].status is SprintStatus.COMPLETED

    @pytest.mark.anyio
    async def test_update_negative_timer_raises(self, store: SprintStore) -> None:
        sprint = (await store.create_sprint("Latency")).sprints[0]

        with pytest.raises(SprintValidationError):
            _ = await store.update_sprint(sprint.id, timer_seconds_remaining=-1)


class TestSprintIdeas:
    @pytest.mark.anyio
    async def test_quick_add_creates_linked_draft(
        self, adapter: PersistenceAdapter, store: SprintStore
    ) -> None:
        sprint = (await store.create_sprint("Latency")).sprints[0]

        state = await store.quick_add_idea("Warm pool", sprint.id)

        idea = state.sprint_ideas[0]
        assert idea.sprint_id == sprint.id
        assert idea.status is IdeaStatus.DRAFT
        assert await adapter.get_idea(idea.id) == idea

    @pytest.mark.anyio
    async def test_add_and_remove_moves_between_lists(
        self, ideas: IdeaStore, store: SprintStore
    ) -> None:
        sprint = (await store.create_sprint("Latency")).sprints[0]
        idea = (await ideas.add_idea(title="Bloom")).ideas[0]
        _ = await store.load_candidates()
        assert [i.id for i in store.state.candidate_ideas] == [idea.id]

        state = await store.add_idea_to_sprint(idea.id, sprint.id)

        assert [i.id for i in state.sprint_ideas] == [idea.id]
        assert state.candidate_ideas == ()

        state = await store.remove_idea_from_sprint(idea.id)

        assert state.sprint_ideas == ()
        assert [i.id for i in state.candidate_ideas] == [idea.id]
        assert state.candidate_ideas[0].sprint_id is None

    @pytest.mark.anyio
    async def test_unknown_idea_keeps_state(self, store: SprintStore) -> None:
        before = await store.load_sprints()

        assert await store.add_idea_to_sprint("missing", "s1") is before
        assert await store.remove_idea_from_sprint("missing") is before

    @pytest.mark.anyio
    async def test_delete_unlinks_ideas_and_clears_detail(
        self, adapter: PersistenceAdapter, store: SprintStore
    ) -> None:
        sprint = (await store.create_sprint("Latency")).sprints[0]
        idea = (await store.quick_add_idea("Warm pool", sprint.id)).sprint_ideas[0]
        _ = await store.load_sprint_detail(sprint.id)

        state = await store.delete_sprint(sprint.id)

        assert state.sprints == ()
        assert state.active_sprint is None
        assert state.sprint_ideas == ()
        kept = await adapter.get_idea(idea.id)
        assert kept is not None
        assert kept.sprint_id is None
        assert await adapter.list_members(sprint.id) == []


class TestMembers:
    @pytest.mark.anyio
    async def test_add_and_remove(self, store: SprintStore) -> None:
        sprint = (await store.create_sprint("Latency")).sprints[0]

        state = await store.add_member(sprint.id, "u2")

        assert [m.user_id for m in state.members] == ["local-user", "u2"]
        assert state.members[1].role == "member"

        state = await store.remove_member(sprint.id, "u2")

        assert [m.user_id for m in state.members] == ["local-user"]

    @pytest.mark.anyio
    async def test_adding_twice_keeps_one_record(self, store: SprintStore) -> None:
        sprint = (await store.create_sprint("Latency")).sprints[0]

        _ = await store.add_member(sprint.id, "u2", "lead")
        state = await store.add_member(sprint.id, "u2")

        assert [(m.user_id, m.role) for m in state.members] == [
            ("local-user", "lead"),
            ("u2", "lead"),
        ]
