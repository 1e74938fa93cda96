"""Integration tests for the data export, import and clear commands."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import orjson
import pytest


@pytest.fixture
def populated(
    ipramp_cli: Callable[..., None],
    created_id: Callable[[], str],
    capsys: pytest.CaptureFixture[str],
) -> str:
    ipramp_cli("sprint", "create", "Backup sprint")
    sprint_id = created_id()
    ipramp_cli("sprint", "quick-add", sprint_id, "Snapshot diffs")
    ipramp_cli("settings", "set", "tone=plain")
    _ = capsys.readouterr()
    return sprint_id


class TestDataExport:
    def test_export_to_stdout(
        self,
        ipramp_cli: Callable[..., None],
        read_json: Callable[[], Any],
        populated: str,
    ) -> None:
        ipramp_cli("data", "export")

        bundle = read_json()
        assert bundle["version"] == "1.0.0"
        assert "exportedAt" in bundle
        assert [s["id"] for s in bundle["sprints"]] == [populated]
        assert [i["title"] for i in bundle["ideas"]] == ["Snapshot diffs"]
        assert bundle["members"][0]["role"] == "lead"
        assert bundle["promptPrefs"]["tone"] == "plain"

    def test_export_to_file(
        self, ipramp_cli: Callable[..., None], tmp_path: Path, populated: str
    ) -> None:
        target = tmp_path / "backup.json"

        ipramp_cli("data", "export", "--output", str(target))

        bundle = orjson.loads(target.read_bytes())
        assert len(bundle["ideas"]) == 1


class TestDataImport:
    def test_round_trip_after_clear(
        self,
        ipramp_cli: Callable[..., None],
        read_json: Callable[[], Any],
        capsys: pytest.CaptureFixture[str],
        tmp_path: Path,
        populated: str,
    ) -> None:
        backup = tmp_path / "backup.json"
        ipramp_cli("data", "export", "-o", str(backup))
        ipramp_cli("data", "clear", "--yes")
        _ = capsys.readouterr()

        ipramp_cli("data", "import", str(backup))

        out = capsys.readouterr().out
        assert "Imported 1 ideas" in out
        assert "Imported 1 sprints" in out
        assert "Import complete" in out

        ipramp_cli("sprint", "list", "-f", "json")
        assert [s["id"] for s in read_json()] == [populated]

    def test_missing_collections_are_left_alone(
        self,
        ipramp_cli: Callable[..., None],
        read_json: Callable[[], Any],
        capsys: pytest.CaptureFixture[str],
        tmp_path: Path,
        populated: str,
    ) -> None:
        partial = tmp_path / "partial.json"
        _ = partial.write_bytes(orjson.dumps({"version": "1.0.0", "ideas": []}))

        ipramp_cli("data", "import", str(partial))
        _ = capsys.readouterr()

        ipramp_cli("sprint", "list", "-f", "json")
        assert [s["id"] for s in read_json()] == [populated]
        ipramp_cli("idea", "list", "-f", "json")
        assert read_json() == []

    def test_invalid_json_exits_validation_error(
        self,
        ipramp_cli_with_exit_code: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
        tmp_path: Path,
    ) -> None:
        bad = tmp_path / "bad.json"
        _ = bad.write_text("{not json", encoding="utf-8")

        assert ipramp_cli_with_exit_code("data", "import", str(bad)) == 2
        assert "Error:" in capsys.readouterr().err

    def test_missing_file_exits_not_found(
        self, ipramp_cli_with_exit_code: Callable[..., int], tmp_path: Path
    ) -> None:
        missing = tmp_path / "nope.json"

        assert ipramp_cli_with_exit_code("data", "import", str(missing)) == 3


class TestDataClear:
    def test_requires_confirmation(
        self, ipramp_cli_with_exit_code: Callable[..., int], populated: str
    ) -> None:
        assert ipramp_cli_with_exit_code("data", "clear") == 2

    def test_clear_removes_everything(
        self,
        ipramp_cli: Callable[..., None],
        read_json: Callable[[], Any],
        capsys: pytest.CaptureFixture[str],
        populated: str,
    ) -> None:
        ipramp_cli("data", "clear", "--yes")
        assert "Cleared" in capsys.readouterr().out

        ipramp_cli("sprint", "list", "-f", "json")
        assert read_json() == []
