"""The command-line interface for ipramp."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console

from ipramp.config import safe_load_config
from ipramp.utils import create_cli_logger

from ._commands import register_commands
from ._commands._context import CLIContext

_HELP = "Capture, score and file patent ideas from the command line."

app = App(name="ipramp", help=_HELP, help_on_error=True)
register_commands(app)


def _launch(
    target: App,
    tokens: tuple[str, ...],
    *,
    verbose: bool,
    quiet: bool,
    no_color: bool,
    config: Path | None,
) -> None:
    # Build CLI overrides from flags
    cli_overrides: dict[str, object] | None = None
    if verbose:
        cli_overrides = {"logging": {"level": "debug"}}

    loaded_config, config_error = safe_load_config(
        config_path=config, cli_overrides=cli_overrides
    )

    cli_logger = create_cli_logger(
        level=loaded_config.logging.level.value,
        log_format=loaded_config.logging.format.value,  # type: ignore[arg-type]
        log_file=loaded_config.logging.file,
        command=tokens[0] if tokens else "",
    )

    ctx = CLIContext(
        config=loaded_config,
        verbose=verbose,
        quiet=quiet,
        no_color=no_color,
        config_path=config,
        config_error=config_error,
        logger=cli_logger,
    )
    CLIContext.set_current(ctx)

    try:
        target(tokens)
    finally:
        CLIContext.reset()


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    new_app = App(
        name="ipramp",
        help=_HELP,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @new_app.meta.default
    def _default(  # pyright: ignore[reportUnusedFunction]
        *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
        verbose: Annotated[bool, Parameter(help="Enable debug logging")] = False,
        quiet: Annotated[bool, Parameter(help="Suppress non-essential output")] = False,
        no_color: Annotated[
            bool, Parameter(name="--no-color", help="Disable colored output")
        ] = False,
        config: Annotated[
            Path | None, Parameter(name="--config", help="Path to config file")
        ] = None,
    ) -> None:
        """Launch ipramp with global options.

        Args:
            tokens: Command tokens to pass to subcommands.
            verbose: Enable debug logging.
            quiet: Suppress non-essential output.
            no_color: Disable colored output.
            config: Explicit path to config file.
        """
        _launch(
            new_app,
            tokens,
            verbose=verbose,
            quiet=quiet,
            no_color=no_color,
            config=config,
        )

    register_commands(new_app)
    return new_app


def main() -> None:
    """Default entrypoint for the `ipramp` CLI."""
    create_app().meta()


if __name__ == "__main__":
    main()
