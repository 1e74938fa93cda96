import sqlite3
from pathlib import Path

import pytest
from pydantic import BaseModel

from ipramp.utils.database import (
    connect,
    delete,
    fetch_all,
    fetch_one,
    safe_identifier,
    upsert,
)


class Row(BaseModel):
    key: str
    value: str
    created_at: str


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    path = tmp_path / "nested" / "test.sqlite"
    with connect(path) as conn:
        _ = conn.execute(
            'CREATE TABLE "rows" '
            '("key" TEXT PRIMARY KEY, "value" TEXT, "created_at" TEXT)'
        )
    return path


class TestSafeIdentifier:
    @pytest.mark.parametrize("name", ["kv_store", "_private", "Table1"])
    def test_quotes_valid_names(self, name: str) -> None:
        assert safe_identifier(name) == f'"{name}"'

    @pytest.mark.parametrize(
        "name", ["", "1table", "kv-store", 'x"; DROP TABLE y; --', "a b"]
    )
    def test_rejects_invalid_names(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid SQL identifier"):
            _ = safe_identifier(name)


class TestConnect:
    def test_creates_parent_directories(self, db_path: Path) -> None:
        assert db_path.parent.is_dir()

    def test_commits_on_success(self, db_path: Path) -> None:
        with connect(db_path) as conn:
            upsert(conn, "rows", Row(key="k", value="v", created_at="t0"), ["key"])

        with connect(db_path) as conn:
            assert fetch_one(conn, Row, 'SELECT * FROM "rows"') is not None

    def test_rolls_back_on_error(self, db_path: Path) -> None:
        msg = "boom"
        with pytest.raises(RuntimeError), connect(db_path) as conn:
            upsert(conn, "rows", Row(key="k", value="v", created_at="t0"), ["key"])
            raise RuntimeError(msg)

        with connect(db_path) as conn:
            assert fetch_all(conn, Row, 'SELECT * FROM "rows"') == []

    def test_memory_database(self) -> None:
        with connect(":memory:") as conn:
            assert isinstance(conn, sqlite3.Connection)


class TestRowHelpers:
    def test_upsert_preserves_columns(self, db_path: Path) -> None:
        with connect(db_path) as conn:
            upsert(conn, "rows", Row(key="k", value="1", created_at="t0"), ["key"])
            upsert(
                conn,
                "rows",
                Row(key="k", value="2", created_at="t1"),
                ["key"],
                preserve={"created_at"},
            )
            row = fetch_one(conn, Row, 'SELECT * FROM "rows" WHERE "key" = ?', ("k",))

        assert row == Row(key="k", value="2", created_at="t0")

    def test_fetch_one_missing_returns_none(self, db_path: Path) -> None:
        with connect(db_path) as conn:
            assert fetch_one(conn, Row, 'SELECT * FROM "rows"') is None

    def test_delete_returns_rowcount(self, db_path: Path) -> None:
        with connect(db_path) as conn:
            upsert(conn, "rows", Row(key="k", value="v", created_at="t0"), ["key"])
            assert delete(conn, "rows", "key", "k") == 1
            assert delete(conn, "rows", "key", "k") == 0

    def test_unsafe_table_name_raises(self, db_path: Path) -> None:
        with connect(db_path) as conn, pytest.raises(ValueError):
            upsert(conn, "rows; --", Row(key="k", value="v", created_at="t"), ["key"])
