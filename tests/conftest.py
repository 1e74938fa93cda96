"""Shared test fixtures for ipramp tests."""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import pytest
from rich.console import Console

from ipramp.idea import Idea, create_blank_idea
from ipramp.storage import MemoryKeyValueStore, PersistenceAdapter

if TYPE_CHECKING:
    from pendulum import DateTime

FreezeTimeFunc = Callable[..., "DateTime"]


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def kv_store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def adapter(kv_store: MemoryKeyValueStore) -> PersistenceAdapter:
    """Persistence adapter over an empty in-memory store."""
    return PersistenceAdapter(kv_store)


@pytest.fixture
def make_idea() -> Callable[..., Idea]:
    """Return a factory building ideas owned by ``local-user``."""

    def _make(user_id: str = "local-user", **fields: Any) -> Idea:  # pyright: ignore[reportExplicitAny,reportAny]
        return create_blank_idea(user_id, **fields)

    return _make


@pytest.fixture
def freeze_time(monkeypatch: pytest.MonkeyPatch) -> FreezeTimeFunc:
    """Return a function to freeze pendulum.now() to a fixed time."""
    import pendulum

    def _freeze(
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> DateTime:
        fixed = pendulum.datetime(year, month, day, hour, minute, second, tz="UTC")

        def mock_now(tz: str) -> DateTime:
            return fixed if tz == "UTC" else fixed.in_tz(tz)

        monkeypatch.setattr("pendulum.now", mock_now)
        return fixed

    return _freeze
