# pyright: reportAny=false, reportUnknownMemberType=false
from collections.abc import Callable

import orjson
import pytest

from ipramp.enums import FrameworkType, IdeaStatus, SprintStatus
from ipramp.exceptions import (
    DataImportError,
    IdeaValidationError,
    SprintValidationError,
)
from ipramp.idea import CKData, FrameworkState, Idea, IdeaScore
from ipramp.settings import InventorInfo, Jurisdiction, PromptPreferences, Tone
from ipramp.sprint import Sprint
from ipramp.storage import (
    EXPORT_VERSION,
    MemoryKeyValueStore,
    PersistenceAdapter,
    ReadStatus,
)


def _sprint(sprint_id: str = "s1", **overrides: object) -> Sprint:
    return Sprint(
        id=sprint_id,
        name=str(overrides.pop("name", "Caching sprint")),
        owner_id="local-user",
        created_at="2025-01-01T00:00:00Z",
        updated_at="2025-01-01T00:00:00Z",
        **overrides,  # pyright: ignore[reportArgumentType]
    )


class TestKeys:
    def test_default_prefix(self, adapter: PersistenceAdapter) -> None:
        assert adapter.ideas_key == "ipramp:ideas"
        assert adapter.sprints_key == "ipramp:sprints"
        assert adapter.members_key == "ipramp:sprint-members"
        assert adapter.prompt_prefs_key == "ipramp:prompt-prefs"
        assert adapter.inventor_info_key == "ipramp:inventor-info"

    def test_custom_prefix(self, kv_store: MemoryKeyValueStore) -> None:
        adapter = PersistenceAdapter(kv_store, key_prefix="work")

        assert adapter.ideas_key == "work:ideas"


class TestIdeaCrud:
    @pytest.mark.anyio
    async def test_empty_store_reads_absent(self, adapter: PersistenceAdapter) -> None:
        result = await adapter.read_ideas()

        assert result.items == ()
        assert result.status is ReadStatus.ABSENT

    @pytest.mark.anyio
    async def test_create_prepends(
        self, adapter: PersistenceAdapter, make_idea: Callable[..., Idea]
    ) -> None:
        first = await adapter.create_idea(make_idea(title="first"))
        second = await adapter.create_idea(make_idea(title="second"))

        ideas = await adapter.list_ideas("local-user")

        assert [i.id for i in ideas] == [second.id, first.id]
        assert (await adapter.read_ideas()).status is ReadStatus.LOADED

    @pytest.mark.anyio
    async def test_list_is_scoped_to_user(
        self, adapter: PersistenceAdapter, make_idea: Callable[..., Idea]
    ) -> None:
        _ = await adapter.create_idea(make_idea(title="mine"))
        _ = await adapter.create_idea(make_idea("someone-else", title="theirs"))

        ideas = await adapter.list_ideas("local-user")

        assert [i.title for i in ideas] == ["mine"]

    @pytest.mark.anyio
    async def test_get_idea(
        self, adapter: PersistenceAdapter, make_idea: Callable[..., Idea]
    ) -> None:
        idea = await adapter.create_idea(make_idea(title="x"))

        assert await adapter.get_idea(idea.id) == idea
        assert await adapter.get_idea("missing") is None

    @pytest.mark.anyio
    async def test_update_merges_and_stamps(
        self,
        adapter: PersistenceAdapter,
        make_idea: Callable[..., Idea],
        freeze_time: Callable[..., object],
    ) -> None:
        _ = freeze_time(2025, 1, 1)
        idea = await adapter.create_idea(make_idea(title="x", tags=("a",)))
        _ = freeze_time(2025, 2, 1)

        updated = await adapter.update_idea(idea.id, title="y", status="developing")

        assert updated is not None
        assert updated.title == "y"
        assert updated.tags == ("a",)
        assert updated.status is IdeaStatus.DEVELOPING
        assert updated.created_at.startswith("2025-01-01")
        assert updated.updated_at.startswith("2025-02-01")
        assert await adapter.get_idea(idea.id) == updated

    @pytest.mark.anyio
    async def test_update_missing_returns_none(
        self, adapter: PersistenceAdapter
    ) -> None:
        assert await adapter.update_idea("missing", title="y") is None

    @pytest.mark.anyio
    async def test_update_unknown_field_raises(
        self, adapter: PersistenceAdapter, make_idea: Callable[..., Idea]
    ) -> None:
        idea = await adapter.create_idea(make_idea())

        with pytest.raises(IdeaValidationError):
            _ = await adapter.update_idea(idea.id, created_at="2020-01-01")

    @pytest.mark.anyio
    async def test_update_unknown_status_raises_validation_error(
        self, adapter: PersistenceAdapter, make_idea: Callable[..., Idea]
    ) -> None:
        idea = await adapter.create_idea(make_idea())

        with pytest.raises(IdeaValidationError, match="Invalid status 'bogus'") as e:
            _ = await adapter.update_idea(idea.id, status="bogus")

        assert e.value.field == "status"
        stored = await adapter.get_idea(idea.id)
        assert stored is not None
        assert stored.status is IdeaStatus.DRAFT

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("score", "3"),
            ("framework", "triz"),
            ("claim_draft", "x"),
            ("title", 42),
            ("tags", "a,b"),
            ("sprint_id", 7),
        ],
    )
    @pytest.mark.anyio
    async def test_update_rejects_wrong_value_type(
        self,
        adapter: PersistenceAdapter,
        make_idea: Callable[..., Idea],
        field: str,
        value: object,
    ) -> None:
        idea = await adapter.create_idea(make_idea(title="kept"))

        with pytest.raises(IdeaValidationError, match=field) as e:
            _ = await adapter.update_idea(idea.id, **{field: value})

        assert e.value.field == field
        stored = await adapter.get_idea(idea.id)
        assert stored is not None
        assert stored.title == "kept"

    @pytest.mark.anyio
    async def test_update_accepts_list_for_tags(
        self, adapter: PersistenceAdapter, make_idea: Callable[..., Idea]
    ) -> None:
        idea = await adapter.create_idea(make_idea())

        updated = await adapter.update_idea(idea.id, tags=["cache", "edge"])

        assert updated is not None
        assert updated.tags == ("cache", "edge")

    @pytest.mark.anyio
    async def test_update_accepts_nested_records(
        self, adapter: PersistenceAdapter, make_idea: Callable[..., Idea]
    ) -> None:
        idea = await adapter.create_idea(make_idea())
        framework = FrameworkState(used=FrameworkType.CK, data=CKData(concepts="c"))

        _ = await adapter.update_idea(
            idea.id,
            score=IdeaScore(inventive_step=1, defensibility=2, product_fit=3),
            framework=framework,
        )
        stored = await adapter.get_idea(idea.id)

        assert stored is not None
        assert stored.framework == framework
        assert stored.score == IdeaScore(
            inventive_step=1, defensibility=2, product_fit=3
        )

    @pytest.mark.anyio
    async def test_delete(
        self, adapter: PersistenceAdapter, make_idea: Callable[..., Idea]
    ) -> None:
        idea = await adapter.create_idea(make_idea())

        assert await adapter.delete_idea(idea.id) is True
        assert await adapter.delete_idea(idea.id) is False
        assert await adapter.get_idea(idea.id) is None

    @pytest.mark.anyio
    async def test_filter_ideas(
        self, adapter: PersistenceAdapter, make_idea: Callable[..., Idea]
    ) -> None:
        _ = await adapter.create_idea(make_idea(title="Cache warmup"))
        _ = await adapter.create_idea(
            make_idea(title="Queue", status=IdeaStatus.FILED)
        )

        result = await adapter.filter_ideas("local-user", search="CACHE")

        assert [i.title for i in result] == ["Cache warmup"]
        filed = await adapter.filter_ideas("local-user", status="filed")
        assert [i.title for i in filed] == ["Queue"]


class TestCorruptStorage:
    @pytest.mark.anyio
    async def test_malformed_json_recovers_empty(
        self, kv_store: MemoryKeyValueStore, adapter: PersistenceAdapter
    ) -> None:
        kv_store.set("ipramp:ideas", "{not json")

        result = await adapter.read_ideas()

        assert result.items == ()
        assert result.status is ReadStatus.RECOVERED
        assert result.recovered
        assert result.error

    @pytest.mark.anyio
    async def test_non_array_recovers_empty(
        self, kv_store: MemoryKeyValueStore, adapter: PersistenceAdapter
    ) -> None:
        kv_store.set("ipramp:sprints", '{"id": "s1"}')

        result = await adapter.read_sprints()

        assert result.status is ReadStatus.RECOVERED
        assert await adapter.list_sprints() == []

    @pytest.mark.anyio
    async def test_invalid_record_recovers_empty(
        self, kv_store: MemoryKeyValueStore, adapter: PersistenceAdapter
    ) -> None:
        kv_store.set("ipramp:ideas", '[{"id": "i1", "status": "shipped"}]')

        result = await adapter.read_ideas()

        assert result.status is ReadStatus.RECOVERED

    @pytest.mark.anyio
    async def test_write_after_recovery_replaces_corrupt_value(
        self,
        kv_store: MemoryKeyValueStore,
        adapter: PersistenceAdapter,
        make_idea: Callable[..., Idea],
    ) -> None:
        kv_store.set("ipramp:ideas", "garbage")

        idea = await adapter.create_idea(make_idea())

        assert [i.id for i in await adapter.list_ideas("local-user")] == [idea.id]

    @pytest.mark.anyio
    async def test_corrupt_preferences_fall_back_to_defaults(
        self, kv_store: MemoryKeyValueStore, adapter: PersistenceAdapter
    ) -> None:
        kv_store.set("ipramp:prompt-prefs", "{{{")

        assert await adapter.load_prompt_preferences() == PromptPreferences()


class TestSprints:
    @pytest.mark.anyio
    async def test_create_and_list(self, adapter: PersistenceAdapter) -> None:
        _ = await adapter.create_sprint(_sprint("s1"))
        _ = await adapter.create_sprint(_sprint("s2"))

        assert [s.id for s in await adapter.list_sprints()] == ["s2", "s1"]

    @pytest.mark.anyio
    async def test_update_sprint(self, adapter: PersistenceAdapter) -> None:
        _ = await adapter.create_sprint(_sprint())

        updated = await adapter.update_sprint("s1", status="paused")

        assert updated is not None
        assert updated.status is SprintStatus.PAUSED
        assert updated.updated_at != "2025-01-01T00:00:00Z"

    @pytest.mark.anyio
    async def test_update_negative_timer_raises(
        self, adapter: PersistenceAdapter
    ) -> None:
        _ = await adapter.create_sprint(_sprint())

        with pytest.raises(SprintValidationError):
            _ = await adapter.update_sprint("s1", timer_seconds_remaining=-5)

    @pytest.mark.anyio
    async def test_update_unknown_enum_raises_validation_error(
        self, adapter: PersistenceAdapter
    ) -> None:
        _ = await adapter.create_sprint(_sprint())

        with pytest.raises(SprintValidationError, match="session_mode") as e:
            _ = await adapter.update_sprint("s1", session_mode="chaos")

        assert e.value.field == "session_mode"
        assert e.value.value == "chaos"

    @pytest.mark.anyio
    async def test_update_missing_returns_none(
        self, adapter: PersistenceAdapter
    ) -> None:
        assert await adapter.update_sprint("missing", name="x") is None

    @pytest.mark.anyio
    async def test_link_and_unlink(
        self, adapter: PersistenceAdapter, make_idea: Callable[..., Idea]
    ) -> None:
        _ = await adapter.create_sprint(_sprint())
        idea = await adapter.create_idea(make_idea())

        _ = await adapter.link_to_sprint(idea.id, "s1")

        assert [i.id for i in await adapter.list_sprint_ideas("s1")] == [idea.id]
        assert await adapter.list_personal_ideas("local-user") == []

        _ = await adapter.unlink_from_sprint(idea.id)

        assert await adapter.list_sprint_ideas("s1") == []
        candidates = await adapter.list_candidate_ideas("local-user")
        assert [i.id for i in candidates] == [idea.id]

    @pytest.mark.anyio
    async def test_delete_cascades(
        self, adapter: PersistenceAdapter, make_idea: Callable[..., Idea]
    ) -> None:
        _ = await adapter.create_sprint(_sprint("s1"))
        _ = await adapter.create_sprint(_sprint("s2"))
        linked = await adapter.create_idea(make_idea(sprint_id="s1"))
        other = await adapter.create_idea(make_idea(sprint_id="s2"))
        _ = await adapter.add_member("s1", "u1")
        _ = await adapter.add_member("s2", "u1")

        assert await adapter.delete_sprint("s1") is True

        assert [s.id for s in await adapter.list_sprints()] == ["s2"]
        kept = await adapter.get_idea(linked.id)
        assert kept is not None
        assert kept.sprint_id is None
        untouched = await adapter.get_idea(other.id)
        assert untouched is not None
        assert untouched.sprint_id == "s2"
        assert await adapter.list_members("s1") == []
        assert len(await adapter.list_members("s2")) == 1

    @pytest.mark.anyio
    async def test_delete_missing_returns_false(
        self, adapter: PersistenceAdapter
    ) -> None:
        assert await adapter.delete_sprint("missing") is False


class TestMembers:
    @pytest.mark.anyio
    async def test_add_defaults_to_member_role(
        self, adapter: PersistenceAdapter
    ) -> None:
        member = await adapter.add_member("s1", "u1")

        assert member.role == "member"

    @pytest.mark.anyio
    async def test_add_is_idempotent(self, adapter: PersistenceAdapter) -> None:
        first = await adapter.add_member("s1", "u1", "lead")
        again = await adapter.add_member("s1", "u1", "member")

        assert again == first
        assert again.role == "lead"
        assert len(await adapter.list_members("s1")) == 1

    @pytest.mark.anyio
    async def test_unknown_role_raises(self, adapter: PersistenceAdapter) -> None:
        with pytest.raises(ValueError, match="owner"):
            _ = await adapter.add_member("s1", "u1", "owner")

    @pytest.mark.anyio
    async def test_remove(self, adapter: PersistenceAdapter) -> None:
        _ = await adapter.add_member("s1", "u1")

        assert await adapter.remove_member("s1", "u1") is True
        assert await adapter.remove_member("s1", "u1") is False


class TestSettings:
    @pytest.mark.anyio
    async def test_preferences_default_when_unsaved(
        self, adapter: PersistenceAdapter
    ) -> None:
        assert await adapter.load_prompt_preferences() == PromptPreferences()

    @pytest.mark.anyio
    async def test_save_and_load_preferences(
        self, kv_store: MemoryKeyValueStore, adapter: PersistenceAdapter
    ) -> None:
        prefs = PromptPreferences(jurisdiction=Jurisdiction.JPO, tone=Tone.PLAIN)

        await adapter.save_prompt_preferences(prefs)

        assert await adapter.load_prompt_preferences() == prefs
        stored = orjson.loads(kv_store.get("ipramp:prompt-prefs") or "null")
        assert stored["jurisdiction"] == "jpo"

    @pytest.mark.anyio
    async def test_reset_preferences_removes_key(
        self, kv_store: MemoryKeyValueStore, adapter: PersistenceAdapter
    ) -> None:
        await adapter.save_prompt_preferences(PromptPreferences(tone=Tone.PLAIN))

        defaults = await adapter.reset_prompt_preferences()

        assert defaults == PromptPreferences()
        assert kv_store.get("ipramp:prompt-prefs") is None

    @pytest.mark.anyio
    async def test_inventor_info_round_trip(self, adapter: PersistenceAdapter) -> None:
        info = InventorInfo(name="Ada", department="R&D", email="ada@example.com")

        await adapter.save_inventor_info(info)

        assert await adapter.load_inventor_info() == info


class TestExportImport:
    @pytest.mark.anyio
    async def test_export_empty(self, adapter: PersistenceAdapter) -> None:
        document = orjson.loads(await adapter.export_all_data())

        assert document["ideas"] == []
        assert document["sprints"] == []
        assert document["members"] == []
        assert document["promptPrefs"] is None
        assert document["version"] == EXPORT_VERSION == "1.0.0"
        assert document["exportedAt"]

    @pytest.mark.anyio
    async def test_round_trip_into_fresh_store(
        self, adapter: PersistenceAdapter, make_idea: Callable[..., Idea]
    ) -> None:
        _ = await adapter.create_sprint(_sprint())
        idea = await adapter.create_idea(make_idea(title="x", sprint_id="s1"))
        _ = await adapter.add_member("s1", "u1")
        await adapter.save_prompt_preferences(PromptPreferences(tone=Tone.PLAIN))
        exported = await adapter.export_all_data()

        fresh = PersistenceAdapter(MemoryKeyValueStore())
        summary = await fresh.import_all_data(exported)

        assert (summary.ideas, summary.sprints, summary.members) == (1, 1, 1)
        assert summary.prompt_prefs is True
        assert summary.version == "1.0.0"
        assert await fresh.get_idea(idea.id) == idea
        assert [s.id for s in await fresh.list_sprints()] == ["s1"]
        assert (await fresh.load_prompt_preferences()).tone is Tone.PLAIN

    @pytest.mark.anyio
    async def test_import_replaces_present_collections_only(
        self, adapter: PersistenceAdapter, make_idea: Callable[..., Idea]
    ) -> None:
        _ = await adapter.create_sprint(_sprint())
        _ = await adapter.create_idea(make_idea(title="old"))

        summary = await adapter.import_all_data('{"ideas": [], "sprints": null}')

        assert summary.ideas == 0
        assert summary.sprints is None
        assert await adapter.list_ideas("local-user") == []
        assert [s.id for s in await adapter.list_sprints()] == ["s1"]

    @pytest.mark.anyio
    async def test_invalid_json(self, adapter: PersistenceAdapter) -> None:
        with pytest.raises(DataImportError) as exc_info:
            _ = await adapter.import_all_data("not json")

        assert exc_info.value.reason == "invalid_json"

    @pytest.mark.anyio
    async def test_not_an_object(self, adapter: PersistenceAdapter) -> None:
        with pytest.raises(DataImportError) as exc_info:
            _ = await adapter.import_all_data("[1, 2, 3]")

        assert exc_info.value.reason == "not_an_object"

    @pytest.mark.anyio
    async def test_invalid_record_writes_nothing(
        self, adapter: PersistenceAdapter, make_idea: Callable[..., Idea]
    ) -> None:
        existing = await adapter.create_idea(make_idea(title="keep me"))
        payload = orjson.dumps(
            {
                "ideas": [],
                "sprints": [{"id": "s9", "sessionMode": "chaos"}],
            }
        )

        with pytest.raises(DataImportError) as exc_info:
            _ = await adapter.import_all_data(payload)

        assert exc_info.value.reason == "invalid_record"
        assert [i.id for i in await adapter.list_ideas("local-user")] == [
            existing.id
        ]

    @pytest.mark.anyio
    async def test_non_object_record_is_invalid(
        self, adapter: PersistenceAdapter
    ) -> None:
        with pytest.raises(DataImportError) as exc_info:
            _ = await adapter.import_all_data('{"ideas": ["oops"]}')

        assert exc_info.value.reason == "invalid_record"


class TestClearAllData:
    @pytest.mark.anyio
    async def test_removes_only_prefixed_keys(
        self,
        kv_store: MemoryKeyValueStore,
        adapter: PersistenceAdapter,
        make_idea: Callable[..., Idea],
    ) -> None:
        _ = await adapter.create_idea(make_idea())
        _ = await adapter.create_sprint(_sprint())
        kv_store.set("unrelated:key", "1")

        removed = await adapter.clear_all_data()

        assert removed == 2
        assert list(kv_store.keys()) == ["unrelated:key"]
        assert (await adapter.read_ideas()).status is ReadStatus.ABSENT

    @pytest.mark.anyio
    async def test_empty_store_clears_nothing(
        self, adapter: PersistenceAdapter
    ) -> None:
        assert await adapter.clear_all_data() == 0
