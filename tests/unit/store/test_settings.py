import orjson
import pytest
from pydantic import ValidationError

from ipramp.exceptions import DataImportError
from ipramp.settings import (
    ClaimStyle,
    InventorInfo,
    Jurisdiction,
    PromptPreferences,
    Tone,
)
from ipramp.storage import MemoryKeyValueStore, PersistenceAdapter
from ipramp.store import SettingsStore


@pytest.fixture
def store(adapter: PersistenceAdapter) -> SettingsStore:
    return SettingsStore(adapter)


class TestSettingsStore:
    def test_initial_state_is_unloaded(self, store: SettingsStore) -> None:
        assert store.state.loaded is False
        assert store.state.prompt_preferences == PromptPreferences()

    @pytest.mark.anyio
    async def test_load(
        self, adapter: PersistenceAdapter, store: SettingsStore
    ) -> None:
        await adapter.save_inventor_info(InventorInfo(name="Ada"))

        state = await store.load()

        assert state.loaded is True
        assert state.inventor_info.name == "Ada"

    @pytest.mark.anyio
    async def test_update_does_not_persist_until_saved(
        self, adapter: PersistenceAdapter, store: SettingsStore
    ) -> None:
        state = store.update_prompt_preferences(tone="plain", claim_style="narrow")

        assert state.prompt_preferences.tone is Tone.PLAIN
        assert state.prompt_preferences.claim_style is ClaimStyle.NARROW
        assert await adapter.load_prompt_preferences() == PromptPreferences()

        _ = await store.save_prompt_preferences()

        assert (await adapter.load_prompt_preferences()).tone is Tone.PLAIN

    def test_update_invalid_value_raises(self, store: SettingsStore) -> None:
        with pytest.raises(ValidationError):
            _ = store.update_prompt_preferences(jurisdiction="mars")

        assert store.state.prompt_preferences.jurisdiction is Jurisdiction.USPTO

    @pytest.mark.anyio
    async def test_reset(self, store: SettingsStore) -> None:
        _ = store.update_prompt_preferences(tone="plain")
        _ = await store.save_prompt_preferences()

        state = await store.reset_prompt_preferences()

        assert state.prompt_preferences == PromptPreferences()

    @pytest.mark.anyio
    async def test_save_inventor_info(
        self, adapter: PersistenceAdapter, store: SettingsStore
    ) -> None:
        info = InventorInfo(name="Ada", email="ada@example.com")

        state = await store.save_inventor_info(info)

        assert state.inventor_info == info
        assert await adapter.load_inventor_info() == info


class TestDataTransfer:
    @pytest.mark.anyio
    async def test_import_reloads_preferences(self, store: SettingsStore) -> None:
        source = SettingsStore(PersistenceAdapter(MemoryKeyValueStore()))
        _ = source.update_prompt_preferences(jurisdiction="epo")
        _ = await source.save_prompt_preferences()
        exported = await source.export_all_data()

        summary = await store.import_all_data(exported)

        assert summary.prompt_prefs is True
        assert store.state.loaded is True
        assert store.state.prompt_preferences.jurisdiction is Jurisdiction.EPO

    @pytest.mark.anyio
    async def test_export_is_json(self, store: SettingsStore) -> None:
        document = orjson.loads(await store.export_all_data())

        assert document["version"] == "1.0.0"

    @pytest.mark.anyio
    async def test_failed_import_keeps_state(self, store: SettingsStore) -> None:
        _ = await store.load()

        with pytest.raises(DataImportError):
            _ = await store.import_all_data("[]")

        assert store.state.prompt_preferences == PromptPreferences()
