"""Shared utilities: logging, paths and SQLite helpers."""

from ._logging import create_cli_logger, create_stream_logger
from ._paths import (
    get_cli_log_file,
    get_data_dir,
    get_default_db_path,
    get_log_dir,
    get_user_config_dir,
)

__all__ = [
    "create_cli_logger",
    "create_stream_logger",
    "get_cli_log_file",
    "get_data_dir",
    "get_default_db_path",
    "get_log_dir",
    "get_user_config_dir",
]
