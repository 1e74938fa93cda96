"""Pydantic models for the configuration sections."""

from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from ipramp.enums import SessionMode
from ipramp.sprint import DEFAULT_TIMER_SECONDS
from ipramp.utils import get_default_db_path

from ._common import LogFormat, LogLevel

__all__ = ["LoggingConfig", "SprintConfig", "StorageConfig", "UserConfig"]


class LoggingConfig(BaseModel):
    """Logging configuration section.

    Attributes:
        level: Log level threshold.
        format: Log output format.
        file: Path to the log file; empty uses the platform log directory.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.JSON
    file: str = ""


class StorageConfig(BaseModel):
    """Storage configuration section.

    Attributes:
        path: SQLite database file; empty uses the platform data directory.
        key_prefix: Namespace for every stored collection key.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    path: str = ""
    key_prefix: str = Field(default="ipramp", min_length=1)

    def resolve_path(self) -> Path:
        if self.path:
            return Path(self.path).expanduser()
        return get_default_db_path()


class SprintConfig(BaseModel):
    """Defaults applied to newly created sprints."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    default_timer_seconds: int = Field(default=DEFAULT_TIMER_SECONDS, ge=0)
    default_session_mode: SessionMode = SessionMode.QUANTITY


class UserConfig(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(default="local-user", min_length=1)
