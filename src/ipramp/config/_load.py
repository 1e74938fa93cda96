"""Error-tolerant configuration loading for the CLI."""

import os
import sys
from pathlib import Path  # noqa: TC003

from ipramp.exceptions import ConfigError

from ._config import Config


def _fail_or_warn(error_msg: str, *, strict: bool) -> tuple[Config, str]:
    if strict:
        print(f"Error: {error_msg}", file=sys.stderr)  # noqa: T201
        sys.exit(1)
    print(f"Warning: {error_msg}", file=sys.stderr)  # noqa: T201
    return Config(), error_msg


def safe_load_config(
    *,
    config_path: Path | None = None,
    start: Path | None = None,
    cli_overrides: dict[str, object] | None = None,
) -> tuple[Config, str | None]:
    """Load configuration, falling back to defaults on error.

    With ``IPRAMP_STRICT_CONFIG=1`` any load error prints to stderr and
    exits with status 1. Otherwise the error is printed as a warning and
    the default configuration is returned. An explicit ``config_path``
    that does not exist always exits.

    Args:
        config_path: Explicit config file (``--config``).
        start: Directory to search for a project config from.
        cli_overrides: Overrides from command-line flags.

    Returns:
        The configuration and the error message, or None on success.
    """
    strict = os.environ.get("IPRAMP_STRICT_CONFIG", "0") == "1"

    try:
        if config_path is not None:
            if not config_path.exists():
                print(  # noqa: T201
                    f"Error: Config file not found: {config_path}", file=sys.stderr
                )
                sys.exit(1)
            return Config.from_file(config_path), None
        config = Config.load(start=start, cli_overrides=cli_overrides)
    except ConfigError as e:
        return _fail_or_warn(f"Failed to load config: {e}", strict=strict)
    except OSError as e:
        return _fail_or_warn(f"Failed to read config: {e}", strict=strict)
    return config, None
