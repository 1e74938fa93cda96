# pyright: reportExplicitAny=false, reportAny=false, reportUnknownVariableType=false
# pyright: reportUnknownArgumentType=false
"""Configuration container with typed section access."""

from pathlib import Path  # noqa: TC003
from typing import Any, ClassVar, Self, overload

import tomli_w
from pydantic import BaseModel, ConfigDict, PrivateAttr

from ._common import ConfigSource, ConfigSourceName
from ._defaults import DEFAULT_CONFIG
from ._discovery import discover_sources
from ._loader import copy_value, deep_merge, parse_env_vars, read_toml_file
from ._sections import LoggingConfig, SprintConfig, StorageConfig, UserConfig
from ._validation import ConfigSchema, raise_if_validation_errors, validate_config


class Config(BaseModel):
    """Immutable, typed access to merged ipramp configuration.

    Build instances with :meth:`load`, :meth:`from_file` or
    :meth:`from_dict` rather than the constructor.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    _data: dict[str, Any] = PrivateAttr(default_factory=dict)
    _sources: tuple[ConfigSource, ...] = PrivateAttr(default=())
    _schema: ConfigSchema = PrivateAttr(default_factory=ConfigSchema)

    def __init__(
        self,
        *,
        _data: dict[str, Any] | None = None,
        _sources: tuple[ConfigSource, ...] = (),
    ) -> None:
        super().__init__()
        self._data = _data if _data is not None else copy_value(DEFAULT_CONFIG)
        self._sources = _sources
        self._schema = ConfigSchema.model_validate(self._data)

    @classmethod
    def _build(
        cls,
        data: dict[str, Any],
        sources: tuple[ConfigSource, ...],
        *,
        source: str | None = None,
    ) -> Self:
        merged = deep_merge(DEFAULT_CONFIG, data)
        raise_if_validation_errors(validate_config(merged), source=source)
        return cls(_data=merged, _sources=sources)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create configuration from a dictionary merged over the defaults.

        Raises:
            ConfigValidationError: If a value is invalid.
        """
        return cls._build(data, ())

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Load configuration from one TOML file merged over the defaults.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigLoadError: If the file cannot be parsed.
            ConfigValidationError: If a value is invalid.
        """
        data = read_toml_file(path)
        source = ConfigSource(
            name=ConfigSourceName.PROJECT, path=path, exists=True, values=data
        )
        return cls._build(data, (source,), source=str(path))

    @classmethod
    def load(
        cls,
        *,
        start: Path | None = None,
        include_env: bool = True,
        cli_overrides: dict[str, Any] | None = None,
    ) -> Self:
        """Load and merge every configuration source.

        Precedence, lowest first: defaults, user file, project file
        (``ipramp.toml`` found upward from ``start``), environment, CLI.

        Raises:
            ConfigLoadError: If a config file cannot be parsed.
            ConfigValidationError: If the merged config is invalid.
        """
        sources = discover_sources(
            start, include_env=include_env, cli_overrides=cli_overrides
        )

        merged: dict[str, Any] = {}
        loaded: list[ConfigSource] = []
        for source in reversed(sources):
            values: dict[str, Any] = {}
            if source.name in {ConfigSourceName.DEFAULT, ConfigSourceName.CLI}:
                values = source.values
            elif source.name == ConfigSourceName.ENV:
                values = parse_env_vars()
            elif source.path is not None and source.exists:
                values = read_toml_file(source.path)

            loaded.append(
                ConfigSource(
                    name=source.name,
                    path=source.path,
                    exists=source.exists,
                    values=values,
                )
            )
            if values:
                merged = deep_merge(merged, values)

        return cls._build(merged, tuple(reversed(loaded)))

    @property
    def sources(self) -> list[ConfigSource]:
        """Sources that contributed to this configuration, highest first."""
        return list(self._sources)

    @property
    def logging(self) -> LoggingConfig:
        return self._schema.logging

    @property
    def storage(self) -> StorageConfig:
        return self._schema.storage

    @property
    def sprint(self) -> SprintConfig:
        return self._schema.sprint

    @property
    def user(self) -> UserConfig:
        return self._schema.user

    @overload
    def get(self, key: str) -> Any: ...

    @overload
    def get[T](self, key: str, default: T) -> Any | T: ...

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key.

        Examples:
            >>> config.get("storage.key_prefix")
            'ipramp'
            >>> config.get("missing.key", "fallback")
            'fallback'
        """
        current: Any = self._data
        for part in key.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def to_dict(self, *, include_defaults: bool = True) -> dict[str, Any]:
        """Return the configuration as a new dictionary.

        Args:
            include_defaults: If False, only values that differ from the
                defaults are included.
        """
        if include_defaults:
            return copy_value(self._data)
        return _diff_from_defaults(self._data, DEFAULT_CONFIG)

    def to_toml(self, *, include_defaults: bool = False) -> str:
        return tomli_w.dumps(self.to_dict(include_defaults=include_defaults))


def _diff_from_defaults(
    data: dict[str, Any], defaults: dict[str, Any]
) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in data.items():
        if key not in defaults:
            result[key] = copy_value(value)
        elif isinstance(value, dict) and isinstance(defaults[key], dict):
            nested = _diff_from_defaults(value, defaults[key])
            if nested:
                result[key] = nested
        elif value != defaults[key]:
            result[key] = copy_value(value)
    return result
