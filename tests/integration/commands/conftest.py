from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import orjson
import pytest
from rich.console import Console

from ipramp.cli import CLIContext, create_app
from ipramp.config import Config


@pytest.fixture(autouse=True)
def cli_context(tmp_path: Path) -> Iterator[CLIContext]:
    """Point every command at a fresh SQLite database."""
    ctx = CLIContext(
        config=Config.from_dict(
            {
                "user": {"id": "ada"},
                "storage": {"path": str(tmp_path / "ipramp.sqlite")},
            }
        )
    )
    CLIContext.set_current(ctx)
    yield ctx
    CLIContext.reset()


@pytest.fixture
def ipramp_cli(console: Console) -> Callable[..., None]:
    """Create CLI app for testing.

    Returns a callable that runs the CLI and suppresses SystemExit.
    Use ipramp_cli_with_exit_code when you need to check the exit code.
    """

    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> None:
        try:
            app(args)
        except SystemExit:
            pass

    return _run


@pytest.fixture
def ipramp_cli_with_exit_code(console: Console) -> Callable[..., int]:
    """Create CLI app for testing that returns the exit code."""

    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> int:
        try:
            app(args)
        except SystemExit as e:
            return e.code if isinstance(e.code, int) else 1
        else:
            return 0

    return _run


@pytest.fixture
def read_json(
    capsys: pytest.CaptureFixture[str],
) -> Callable[[], Any]:  # pyright: ignore[reportExplicitAny]
    """Return a function that parses everything printed to stdout so far."""

    def _read() -> Any:  # pyright: ignore[reportExplicitAny,reportAny]
        return orjson.loads(capsys.readouterr().out)

    return _read


@pytest.fixture
def created_id(capsys: pytest.CaptureFixture[str]) -> Callable[[], str]:
    """Return a function that extracts the id from a "Created ...: <id>" line."""

    def _extract() -> str:
        out = capsys.readouterr().out
        line = next(ln for ln in out.splitlines() if ln.startswith("Created"))
        return line.rsplit(":", 1)[1].strip()

    return _extract
