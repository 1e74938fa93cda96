"""Local persistence: key-value stores and the async persistence adapter."""

from ._adapter import (
    EXPORT_VERSION,
    CollectionRead,
    ExportBundle,
    ImportSummary,
    PersistenceAdapter,
    ReadStatus,
)
from ._kv import KeyValueEntry, KeyValueStore, MemoryKeyValueStore, SQLiteKeyValueStore

__all__ = [
    "EXPORT_VERSION",
    "CollectionRead",
    "ExportBundle",
    "ImportSummary",
    "KeyValueEntry",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "PersistenceAdapter",
    "ReadStatus",
    "SQLiteKeyValueStore",
]
