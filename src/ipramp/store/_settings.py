# pyright: reportAny=false, reportExplicitAny=false
"""Settings store: prompt preferences, inventor info and data transfer."""

from dataclasses import replace
from typing import TYPE_CHECKING, Any, Final

from ipramp.settings import InventorInfo, PromptPreferences

from ._state import SettingsState

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from ipramp.storage import ImportSummary, PersistenceAdapter

__all__ = ["SettingsStore"]


class SettingsStore:
    """Holds the current :class:`SettingsState`.

    Preference edits stay in the snapshot until :meth:`save_prompt_preferences`
    writes them.
    """

    __slots__: Final = ("_adapter", "_logger", "_state")

    _adapter: "PersistenceAdapter"  # noqa: UP037
    _logger: "FilteringBoundLogger | None"  # noqa: UP037
    _state: SettingsState

    def __init__(
        self,
        adapter: "PersistenceAdapter",  # noqa: UP037
        *,
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    ) -> None:
        self._adapter = adapter
        self._logger = logger
        self._state = SettingsState()

    @property
    def state(self) -> SettingsState:
        return self._state

    def _commit(self, state: SettingsState) -> SettingsState:
        self._state = state
        return state

    async def load(self) -> SettingsState:
        prefs = await self._adapter.load_prompt_preferences()
        info = await self._adapter.load_inventor_info()
        return self._commit(
            SettingsState(prompt_preferences=prefs, inventor_info=info, loaded=True)
        )

    def update_prompt_preferences(self, **updates: Any) -> SettingsState:
        """Merge preference fields into the snapshot without saving.

        Raises:
            pydantic.ValidationError: If a value is not valid for its field.
        """
        current = self._state.prompt_preferences.model_dump()
        merged = PromptPreferences.model_validate({**current, **updates})
        return self._commit(replace(self._state, prompt_preferences=merged))

    async def save_prompt_preferences(self) -> SettingsState:
        await self._adapter.save_prompt_preferences(self._state.prompt_preferences)
        return self._state

    async def reset_prompt_preferences(self) -> SettingsState:
        defaults = await self._adapter.reset_prompt_preferences()
        return self._commit(replace(self._state, prompt_preferences=defaults))

    async def save_inventor_info(self, info: InventorInfo) -> SettingsState:
        await self._adapter.save_inventor_info(info)
        return self._commit(replace(self._state, inventor_info=info))

    async def export_all_data(self) -> str:
        return await self._adapter.export_all_data()

    async def import_all_data(
        self, text: str | bytes
    ) -> "ImportSummary":  # noqa: UP037
        """Import an export document and reload settings from storage.

        Raises:
            DataImportError: If the document cannot be parsed or validated.
        """
        summary = await self._adapter.import_all_data(text)
        _ = await self.load()
        return summary
