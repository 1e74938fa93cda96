"""Application state: immutable snapshots and the stores that produce them."""

from ._debounce import DEFAULT_DEBOUNCE_SECONDS, FieldDebouncer
from ._ideas import LOCAL_USER_ID, IdeaStore
from ._settings import SettingsStore
from ._sprints import SprintStore
from ._state import IdeaState, SettingsState, SprintState

__all__ = [
    "DEFAULT_DEBOUNCE_SECONDS",
    "LOCAL_USER_ID",
    "FieldDebouncer",
    "IdeaState",
    "IdeaStore",
    "SettingsState",
    "SettingsStore",
    "SprintState",
    "SprintStore",
]
