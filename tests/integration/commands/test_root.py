"""Integration tests for the top-level launcher and its global options."""

from pathlib import Path

import orjson
import pytest
from rich.console import Console

from ipramp.cli import create_app


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "ipramp.toml"
    _ = path.write_text(
        f"""[user]
id = "grace"

[storage]
path = "{(tmp_path / "launch.sqlite").as_posix()}"
key_prefix = "launch"

[logging]
level = "debug"
file = "{(tmp_path / "cli.log").as_posix()}"
""",
        encoding="utf-8",
    )
    return path


class TestLaunch:
    def test_explicit_config_is_used(
        self,
        console: Console,
        config_file: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        app = create_app(console=console, error_console=console)

        try:
            app.meta(["--config", str(config_file), "config", "get", "user.id"])
        except SystemExit as e:
            assert e.code in (0, None)

        assert capsys.readouterr().out.strip() == "grace"

    def test_commands_write_to_configured_storage_and_log(
        self,
        console: Console,
        config_file: Path,
        tmp_path: Path,
    ) -> None:
        app = create_app(console=console, error_console=console)

        try:
            app.meta(["--config", str(config_file), "idea", "create", "Launch test"])
        except SystemExit as e:
            assert e.code in (0, None)

        assert (tmp_path / "launch.sqlite").exists()
        events = [
            orjson.loads(line)
            for line in (tmp_path / "cli.log").read_text().splitlines()
        ]
        assert any(e["event"] == "idea_created" for e in events)
        assert all(e["command"] == "idea" for e in events)

    def test_missing_config_file_exits(
        self,
        console: Console,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        app = create_app(console=console, error_console=console)

        with pytest.raises(SystemExit) as exc_info:
            app.meta(["--config", str(tmp_path / "missing.toml"), "config", "show"])

        assert exc_info.value.code == 1
        assert "Config file not found" in capsys.readouterr().err
