"""Key-value stores holding one JSON document per namespaced key.

The interface mirrors browser local storage: string keys, string values,
no partial updates. Two implementations are provided: a SQLite-backed
store for real use and an in-memory store for tests.
"""

from collections.abc import Iterator  # noqa: TC003
from pathlib import Path
from typing import TYPE_CHECKING, Final, Protocol, runtime_checkable

import pendulum
from pydantic import BaseModel

from ipramp.utils.database import (
    MEMORY_DATABASE,
    connect,
    delete,
    fetch_all,
    fetch_one,
    safe_identifier,
    upsert,
)

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

__all__ = [
    "KeyValueEntry",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "SQLiteKeyValueStore",
]

_TABLE: Final = "kv_store"
_SAFE_TABLE: Final = safe_identifier(_TABLE)

_SCHEMA: Final = f"""
CREATE TABLE IF NOT EXISTS {_SAFE_TABLE} (
    "key" TEXT PRIMARY KEY,
    "value" TEXT NOT NULL,
    "created_at" TEXT NOT NULL,
    "updated_at" TEXT NOT NULL
)
"""


class KeyValueEntry(BaseModel):
    """A stored document with its bookkeeping timestamps.

    Attributes:
        key: Namespaced key (e.g. ``ipramp:ideas``).
        value: Raw JSON text.
        created_at: When the key was first written (ISO 8601).
        updated_at: When the key was last written (ISO 8601).
    """

    key: str
    value: str
    created_at: str
    updated_at: str


class _KeyRow(BaseModel):
    key: str


@runtime_checkable
class KeyValueStore(Protocol):
    """Protocol for key-value store implementations."""

    def get(self, key: str) -> str | None:
        """Get the raw value for a key, or None if it was never written."""
        ...

    def set(self, key: str, value: str) -> None:
        """Write a value, replacing any previous one."""
        ...

    def delete(self, key: str) -> bool:
        """Remove a key.

        Returns:
            True if the key existed.
        """
        ...

    def keys(self) -> Iterator[str]:
        """Iterate over stored keys in sorted order."""
        ...


class MemoryKeyValueStore:
    """In-memory store. Data is lost when the instance is dropped."""

    __slots__: Final = ("_entries", "_logger")

    _entries: dict[str, KeyValueEntry]
    _logger: "FilteringBoundLogger | None"  # noqa: UP037

    def __init__(
        self,
        initial: dict[str, str] | None = None,
        *,
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    ) -> None:
        """Initialize the store.

        Args:
            initial: Raw values to preload, keyed by store key.
            logger: Optional logger for debug-level operation logging.
        """
        self._entries = {}
        self._logger = logger
        for key, value in (initial or {}).items():
            self.set(key, value)

    def get(self, key: str) -> str | None:
        entry = self._entries.get(key)
        if self._logger:
            self._logger.debug("store_get", key=key, found=entry is not None)
        return entry.value if entry is not None else None

    def get_entry(self, key: str) -> KeyValueEntry | None:
        return self._entries.get(key)

    def set(self, key: str, value: str) -> None:
        now_str = pendulum.now("UTC").to_iso8601_string()
        existing = self._entries.get(key)
        self._entries[key] = KeyValueEntry(
            key=key,
            value=value,
            created_at=existing.created_at if existing is not None else now_str,
            updated_at=now_str,
        )
        if self._logger:
            self._logger.debug(
                "store_set", key=key, size=len(value), is_update=existing is not None
            )

    def delete(self, key: str) -> bool:
        deleted = self._entries.pop(key, None) is not None
        if self._logger:
            self._logger.debug("store_delete", key=key, deleted=deleted)
        return deleted

    def keys(self) -> Iterator[str]:
        return iter(sorted(self._entries))


class SQLiteKeyValueStore:
    """SQLite-backed store.

    Each operation opens its own short transaction, so several processes
    can share a database file.
    """

    __slots__: Final = ("_db_path", "_logger")

    _db_path: Path
    _logger: "FilteringBoundLogger | None"  # noqa: UP037

    def __init__(
        self,
        db_path: str | Path,
        *,
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    ) -> None:
        """Initialize the store and create its table if needed.

        Args:
            db_path: Path to the database file. Parent directories are
                created on first use.
            logger: Optional logger for debug-level operation logging.

        Raises:
            ValueError: If ``db_path`` is ``:memory:``; an in-memory SQLite
                database would not survive between operations. Use
                MemoryKeyValueStore instead.
        """
        if str(db_path) == MEMORY_DATABASE:
            msg = "SQLiteKeyValueStore needs a file path; use MemoryKeyValueStore"
            raise ValueError(msg)
        self._db_path = Path(db_path)
        self._logger = logger
        with connect(self._db_path) as conn:
            _ = conn.execute(_SCHEMA)

    @property
    def db_path(self) -> Path:
        return self._db_path

    def get(self, key: str) -> str | None:
        entry = self.get_entry(key)
        if self._logger:
            self._logger.debug("store_get", key=key, found=entry is not None)
        return entry.value if entry is not None else None

    def get_entry(self, key: str) -> KeyValueEntry | None:
        with connect(self._db_path) as conn:
            return fetch_one(
                conn,
                KeyValueEntry,
                f'SELECT * FROM {_SAFE_TABLE} WHERE "key" = ?',  # noqa: S608
                (key,),
            )

    def set(self, key: str, value: str) -> None:
        now_str = pendulum.now("UTC").to_iso8601_string()
        entry = KeyValueEntry(
            key=key, value=value, created_at=now_str, updated_at=now_str
        )
        with connect(self._db_path) as conn:
            upsert(conn, _TABLE, entry, ["key"], preserve={"created_at"})
        if self._logger:
            self._logger.debug("store_set", key=key, size=len(value))

    def delete(self, key: str) -> bool:
        with connect(self._db_path) as conn:
            deleted = delete(conn, _TABLE, "key", key) > 0
        if self._logger:
            self._logger.debug("store_delete", key=key, deleted=deleted)
        return deleted

    def keys(self) -> Iterator[str]:
        with connect(self._db_path) as conn:
            rows = fetch_all(
                conn,
                _KeyRow,
                f'SELECT "key" FROM {_SAFE_TABLE} ORDER BY "key"',  # noqa: S608
            )
        return iter([row.key for row in rows])
