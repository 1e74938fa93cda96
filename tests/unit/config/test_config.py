# pyright: reportAny=false
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from ipramp.config import (
    DEFAULT_CONFIG,
    Config,
    ConfigSourceName,
    ConfigValidationError,
    LogFormat,
    LogLevel,
)
from ipramp.enums import SessionMode

if TYPE_CHECKING:
    from pyfakefs.fake_filesystem import FakeFilesystem
    from pytest_mock import MockerFixture

USER_CONFIG = Path("/home/user/.config/ipramp/config.toml")


@pytest.fixture
def user_config_path(mocker: MockerFixture) -> Path:
    _ = mocker.patch(
        "ipramp.config._discovery.get_user_config_path", return_value=USER_CONFIG
    )
    return USER_CONFIG


class TestDefaults:
    def test_sections(self) -> None:
        config = Config()

        assert config.logging.level is LogLevel.INFO
        assert config.logging.format is LogFormat.JSON
        assert config.storage.key_prefix == "ipramp"
        assert config.sprint.default_timer_seconds == 259_200
        assert config.sprint.default_session_mode is SessionMode.QUANTITY
        assert config.user.id == "local-user"

    def test_to_dict_matches_defaults(self) -> None:
        assert Config().to_dict() == DEFAULT_CONFIG

    def test_to_dict_returns_a_copy(self) -> None:
        data = Config().to_dict()
        data["storage"]["key_prefix"] = "changed"

        assert DEFAULT_CONFIG["storage"]["key_prefix"] == "ipramp"


class TestFromDict:
    def test_merges_over_defaults(self) -> None:
        config = Config.from_dict({"sprint": {"default_session_mode": "destroy"}})

        assert config.sprint.default_session_mode is SessionMode.DESTROY
        assert config.sprint.default_timer_seconds == 259_200

    def test_invalid_value_raises(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            _ = Config.from_dict({"sprint": {"default_timer_seconds": -1}})

        assert exc_info.value.key == "sprint.default_timer_seconds"
        assert exc_info.value.expected == ">= 0"

    def test_unknown_keys_are_kept_but_ignored(self) -> None:
        config = Config.from_dict({"extra": {"flag": True}})

        assert config.get("extra.flag") is True


class TestGet:
    def test_dotted_lookup(self) -> None:
        assert Config().get("storage.key_prefix") == "ipramp"

    def test_section_lookup(self) -> None:
        assert Config().get("user") == {"id": "local-user"}

    def test_missing_returns_default(self) -> None:
        assert Config().get("storage.missing") is None
        assert Config().get("nope.key", "fallback") == "fallback"

    def test_path_through_scalar_returns_default(self) -> None:
        assert Config().get("user.id.deeper", 1) == 1


class TestSerialization:
    def test_to_dict_without_defaults(self) -> None:
        config = Config.from_dict({"storage": {"path": "/data/ipramp.db"}})

        assert config.to_dict(include_defaults=False) == {
            "storage": {"path": "/data/ipramp.db"}
        }

    def test_to_toml_round_trips(self) -> None:
        config = Config.from_dict({"logging": {"level": "debug"}})

        text = config.to_toml(include_defaults=True)

        assert tomllib.loads(text) == config.to_dict()

    def test_to_toml_defaults_only_is_empty(self) -> None:
        assert Config().to_toml() == ""


class TestStorageSection:
    def test_explicit_path_is_expanded(self) -> None:
        config = Config.from_dict({"storage": {"path": "~/ipramp.db"}})

        assert config.storage.resolve_path() == Path("~/ipramp.db").expanduser()

    def test_empty_path_uses_data_dir(self, mocker: MockerFixture) -> None:
        _ = mocker.patch(
            "ipramp.config._sections.get_default_db_path",
            return_value=Path("/data/ipramp/ipramp.db"),
        )

        assert Config().storage.resolve_path() == Path("/data/ipramp/ipramp.db")


class TestFromFile:
    def test_loads_file(self, fs: FakeFilesystem) -> None:
        path = Path("/project/custom.toml")
        _ = fs.create_file(path, contents='[user]\nid = "ada"\n')

        config = Config.from_file(path)

        assert config.user.id == "ada"
        assert [s.name for s in config.sources] == [ConfigSourceName.PROJECT]

    def test_invalid_value_names_source(self, fs: FakeFilesystem) -> None:
        path = Path("/project/custom.toml")
        _ = fs.create_file(path, contents='[logging]\nlevel = "loud"\n')

        with pytest.raises(ConfigValidationError) as exc_info:
            _ = Config.from_file(path)

        assert exc_info.value.key == "logging.level"
        assert exc_info.value.source == str(path)


class TestLoad:
    def test_defaults_only(
        self, fs: FakeFilesystem, user_config_path: Path
    ) -> None:
        _ = fs.create_dir("/project")

        config = Config.load(start=Path("/project"), include_env=False)

        assert config.to_dict() == DEFAULT_CONFIG
        names = [s.name for s in config.sources]
        assert names == [ConfigSourceName.USER, ConfigSourceName.DEFAULT]

    def test_precedence(
        self,
        fs: FakeFilesystem,
        user_config_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        _ = fs.create_file(
            user_config_path,
            contents='[user]\nid = "from-user"\n[storage]\nkey_prefix = "user"\n',
        )
        _ = fs.create_file(
            "/project/ipramp.toml",
            contents='[user]\nid = "from-project"\n[logging]\nlevel = "warning"\n',
        )
        _ = fs.create_dir("/project/src/deep")
        monkeypatch.setenv("IPRAMP_LOGGING__LEVEL", "error")

        config = Config.load(
            start=Path("/project/src/deep"),
            cli_overrides={"logging": {"format": "text"}},
        )

        assert config.storage.key_prefix == "user"
        assert config.user.id == "from-project"
        assert config.logging.level is LogLevel.ERROR
        assert config.logging.format is LogFormat.TEXT
        assert [s.name for s in config.sources] == [
            ConfigSourceName.CLI,
            ConfigSourceName.ENV,
            ConfigSourceName.PROJECT,
            ConfigSourceName.USER,
            ConfigSourceName.DEFAULT,
        ]

    def test_missing_user_file_is_reported(
        self, fs: FakeFilesystem, user_config_path: Path
    ) -> None:
        _ = fs.create_dir("/project")

        config = Config.load(start=Path("/project"), include_env=False)

        user = next(s for s in config.sources if s.name == ConfigSourceName.USER)
        assert user.path == user_config_path
        assert user.exists is False
        assert user.values == {}
