"""Configuration source discovery."""

from pathlib import Path
from typing import Any, Final

from ipramp.utils import get_user_config_dir

from ._common import ConfigSource, ConfigSourceName
from ._defaults import DEFAULT_CONFIG

PROJECT_CONFIG_NAME: Final = "ipramp.toml"


def find_project_config(start: Path | None = None) -> Path | None:
    """Search upward from ``start`` for an ``ipramp.toml`` file.

    Args:
        start: Directory to start from; defaults to the working directory.

    Returns:
        Path to the nearest project config file, or None if none is found
        before the filesystem root.
    """
    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / PROJECT_CONFIG_NAME
        if _file_exists(candidate):
            return candidate
        if current.parent == current:
            return None
        current = current.parent


def get_user_config_path() -> Path:
    r"""Get the platform-specific user config file path.

    - Linux: ``~/.config/ipramp/config.toml``
    - macOS: ``~/Library/Application Support/ipramp/config.toml``
    - Windows: ``%APPDATA%\ipramp\config.toml``

    The file and its directory may not exist.
    """
    return get_user_config_dir() / "config.toml"


def _file_exists(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        return False


def discover_sources(
    start: Path | None = None,
    *,
    include_env: bool = True,
    cli_overrides: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny]
) -> list[ConfigSource]:
    """Discover configuration sources, highest precedence first.

    File sources are listed with ``exists=False`` when missing, and their
    values are read later by the loader.

    Args:
        start: Directory to search for a project config from.
        include_env: Include environment variables as a source.
        cli_overrides: Explicit overrides; included when not None.
    """
    sources: list[ConfigSource] = []

    if cli_overrides is not None:
        sources.append(
            ConfigSource(
                name=ConfigSourceName.CLI,
                path=None,
                exists=bool(cli_overrides),
                values=cli_overrides,
            )
        )

    if include_env:
        sources.append(
            ConfigSource(name=ConfigSourceName.ENV, path=None, exists=True, values={})
        )

    project_path = find_project_config(start)
    if project_path is not None:
        sources.append(
            ConfigSource(
                name=ConfigSourceName.PROJECT,
                path=project_path,
                exists=True,
                values={},
            )
        )

    user_path = get_user_config_path()
    sources.append(
        ConfigSource(
            name=ConfigSourceName.USER,
            path=user_path,
            exists=_file_exists(user_path),
            values={},
        )
    )

    sources.append(
        ConfigSource(
            name=ConfigSourceName.DEFAULT,
            path=None,
            exists=True,
            values=DEFAULT_CONFIG,
        )
    )
    return sources
