from pathlib import Path

import platformdirs

APP_NAME = "ipramp"


def get_data_dir() -> Path:
    """Get the per-user data directory (e.g. ``~/.local/share/ipramp``)."""
    return platformdirs.user_data_path(APP_NAME)


def get_default_db_path() -> Path:
    """Get the default key-value database path inside the data directory."""
    return get_data_dir() / "ipramp.db"


def get_log_dir() -> Path:
    return platformdirs.user_log_path(APP_NAME)


def get_cli_log_file() -> Path:
    """Get the path to the CLI log file inside the log directory."""
    return get_log_dir() / "cli.log"


def get_user_config_dir() -> Path:
    return platformdirs.user_config_path(APP_NAME)
