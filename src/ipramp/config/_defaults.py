"""Built-in configuration values, the lowest-precedence source."""

from typing import Any

from ipramp.sprint import DEFAULT_TIMER_SECONDS

DEFAULT_CONFIG: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
    "logging": {
        "level": "info",
        "format": "json",
        "file": "",
    },
    "storage": {
        "path": "",
        "key_prefix": "ipramp",
    },
    "sprint": {
        "default_timer_seconds": DEFAULT_TIMER_SECONDS,
        "default_session_mode": "quantity",
    },
    "user": {
        "id": "local-user",
    },
}
