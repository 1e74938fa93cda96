"""Unit tests for logging utilities."""

import logging
from io import StringIO
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

import orjson
import pytest

from ipramp.utils import create_cli_logger, create_stream_logger

if TYPE_CHECKING:
    from pyfakefs.fake_filesystem import FakeFilesystem
    from pytest_mock import MockerFixture


class TestCreateLogger:
    def test_creates_log_directory_if_missing(self, fs: FakeFilesystem) -> None:
        from ipramp.utils._logging import _create_logger

        log_path = Path("/logs/test.log")
        assert not log_path.parent.exists()

        _ = _create_logger(str(log_path))

        assert log_path.parent.exists()

    def test_default_format_is_json(self, fs: FakeFilesystem) -> None:
        from ipramp.utils._logging import _create_logger

        logger = _create_logger("/logs/test.log")

        logger.info("idea_created", idea_id="i1")

        entry = orjson.loads(Path("/logs/test.log").read_text().splitlines()[0])
        assert entry["event"] == "idea_created"
        assert entry["idea_id"] == "i1"
        assert entry["level"] == "info"
        assert "timestamp" in entry

    def test_text_format(self, fs: FakeFilesystem) -> None:
        from ipramp.utils._logging import _create_logger

        logger = _create_logger("/logs/test.log", log_format="text")

        logger.info("idea_created", idea_id="i1")

        log_content = Path("/logs/test.log").read_text()
        assert "idea_created" in log_content
        assert "idea_id=i1" in log_content

    def test_with_rotation_uses_stdlib_handler(self, fs: FakeFilesystem) -> None:
        from ipramp.utils._logging import _create_logger

        _ = _create_logger("/logs/rotating.log", max_bytes=1000, backup_count=3)

        names = [
            name
            for name in logging.root.manager.loggerDict
            if name.startswith("ipramp.rotating.")
        ]
        assert names
        handler = logging.getLogger(names[-1]).handlers[0]
        assert isinstance(handler, RotatingFileHandler)
        assert handler.maxBytes == 1000
        assert handler.backupCount == 3


class TestCreateStreamLogger:
    def test_writes_json_lines(self) -> None:
        stream = StringIO()
        logger = create_stream_logger(stream, level="debug", log_format="json")

        logger.debug("collection_written", key="ipramp:ideas", count=2)

        entry = orjson.loads(stream.getvalue().splitlines()[0])
        assert entry["event"] == "collection_written"
        assert entry["count"] == 2

    def test_filters_below_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("IPRAMP_DEBUG", raising=False)
        stream = StringIO()
        logger = create_stream_logger(stream, level="warning")

        logger.info("quiet")
        logger.warning("collection_recovered")

        assert "quiet" not in stream.getvalue()
        assert "collection_recovered" in stream.getvalue()

    def test_debug_env_overrides_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("IPRAMP_DEBUG", "1")
        stream = StringIO()
        logger = create_stream_logger(stream, level="error")

        logger.debug("loud")

        assert "loud" in stream.getvalue()

    def test_level_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("IPRAMP_DEBUG", raising=False)
        monkeypatch.setenv("IPRAMP_LOG_LEVEL", "error")
        stream = StringIO()
        logger = create_stream_logger(stream)

        logger.warning("hidden")

        assert stream.getvalue() == ""


class TestCreateCliLogger:
    def test_writes_to_configured_file(
        self, fs: FakeFilesystem, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("IPRAMP_DEBUG", raising=False)

        logger = create_cli_logger(log_file="/var/log/ipramp/cli.log", command="idea")
        logger.info("command_started")

        entry = orjson.loads(
            Path("/var/log/ipramp/cli.log").read_text().splitlines()[0]
        )
        assert entry["event"] == "command_started"
        assert entry["command"] == "idea"

    def test_defaults_to_platform_log_file(
        self, fs: FakeFilesystem, mocker: MockerFixture
    ) -> None:
        _ = mocker.patch(
            "ipramp.utils._logging.get_cli_log_file",
            return_value=Path("/logs/cli.log"),
        )

        logger = create_cli_logger(level="error")
        logger.error("storage_failed")

        assert "storage_failed" in Path("/logs/cli.log").read_text()

