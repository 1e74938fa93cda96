"""SQLite helpers for Pydantic row models.

Thin wrappers used by the key-value store: a transactional connection
context manager, identifier quoting, and row fetch/upsert/delete helpers
that map rows to and from Pydantic models.
"""

import re
import sqlite3
from collections.abc import Iterator  # noqa: TC003
from contextlib import contextmanager, suppress
from pathlib import Path
from typing import Literal, cast

from pydantic import BaseModel

_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

type SQLValue = str | int | float | bytes | None

type IsolationLevel = Literal["DEFERRED", "EXCLUSIVE", "IMMEDIATE"] | None

MEMORY_DATABASE = ":memory:"


def _is_file_path(path: str | Path) -> bool:
    text = str(path)
    return text != MEMORY_DATABASE and not text.startswith("file:")


@contextmanager
def connect(
    path: str | Path,
    *,
    timeout: float = 30.0,
    isolation_level: IsolationLevel = "IMMEDIATE",
    wal_mode: bool = True,
) -> Iterator[sqlite3.Connection]:
    """Open a connection that commits on success and rolls back on error.

    Parent directories of a file database are created on demand. The
    connection is always closed on exit.

    Args:
        path: Database file path, or ``:memory:``.
        timeout: Seconds to wait for a lock.
        isolation_level: Transaction isolation level.
        wal_mode: Enable WAL journaling for file databases.

    Yields:
        Connection with ``row_factory`` set to ``sqlite3.Row``.

    Raises:
        sqlite3.OperationalError: If the database cannot be opened.
    """
    if _is_file_path(path):
        Path(path).parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(
        str(path),
        timeout=timeout,
        isolation_level=isolation_level,
        uri=str(path).startswith("file:"),
    )
    conn.row_factory = sqlite3.Row

    if wal_mode and _is_file_path(path):
        with suppress(sqlite3.OperationalError):
            _ = conn.execute("PRAGMA journal_mode=WAL")
        _ = conn.execute("PRAGMA busy_timeout=10000")

    try:
        yield conn
        conn.commit()
    except BaseException:
        with suppress(Exception):
            conn.rollback()
        raise
    finally:
        conn.close()


def safe_identifier(name: str) -> str:
    """Validate and double-quote a SQL identifier.

    Raises:
        ValueError: If the identifier contains characters other than
            letters, digits and underscores, or starts with a digit.
    """
    if not _IDENTIFIER_RE.fullmatch(name):
        msg = f"Invalid SQL identifier: {name!r}"
        raise ValueError(msg)
    return f'"{name}"'


def fetch_one[T: BaseModel](
    conn: sqlite3.Connection,
    model: type[T],
    sql: str,
    params: tuple[SQLValue, ...] = (),
) -> T | None:
    """Fetch a single row as a model, or None when no row matches."""
    row = cast("sqlite3.Row | None", conn.execute(sql, params).fetchone())
    if row is None:
        return None
    return model.model_validate(dict(row))


def fetch_all[T: BaseModel](
    conn: sqlite3.Connection,
    model: type[T],
    sql: str,
    params: tuple[SQLValue, ...] = (),
) -> list[T]:
    rows = cast("list[sqlite3.Row]", conn.execute(sql, params).fetchall())
    return [model.model_validate(dict(row)) for row in rows]


def upsert(
    conn: sqlite3.Connection,
    table: str,
    obj: BaseModel,
    conflict_columns: list[str],
    *,
    preserve: set[str] | None = None,
) -> None:
    """Insert a row, or update it when the conflict columns already exist.

    Args:
        conn: SQLite connection.
        table: Table name.
        obj: Row model; every field maps to a column.
        conflict_columns: Columns forming the uniqueness constraint.
        preserve: Columns written on insert but left untouched on update
            (e.g. creation timestamps).
    """
    safe_table = safe_identifier(table)
    data = obj.model_dump()
    keep = set(conflict_columns) | (preserve or set())
    cols = ", ".join(safe_identifier(k) for k in data)
    placeholders = ", ".join(f":{k}" for k in data)
    conflict = ", ".join(safe_identifier(c) for c in conflict_columns)
    updates = ", ".join(
        f"{safe_identifier(k)} = excluded.{safe_identifier(k)}"
        for k in data
        if k not in keep
    )
    action = f"DO UPDATE SET {updates}" if updates else "DO NOTHING"
    _ = conn.execute(
        f"INSERT INTO {safe_table} ({cols}) VALUES ({placeholders}) "  # noqa: S608
        f"ON CONFLICT ({conflict}) {action}",
        data,
    )


def delete(
    conn: sqlite3.Connection, table: str, key_column: str, key_value: SQLValue
) -> int:
    """Delete rows matching ``key_column = key_value``.

    Returns:
        Number of rows removed.
    """
    cursor = conn.execute(
        f"DELETE FROM {safe_identifier(table)} WHERE {safe_identifier(key_column)} = ?",  # noqa: S608
        (key_value,),
    )
    return cursor.rowcount
