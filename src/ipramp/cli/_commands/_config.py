# pyright: reportUnusedFunction=false, reportAny=false
# ruff: noqa: A002, D415, FBT002
"""Commands for viewing the merged configuration."""

from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console

from ._context import CLIContext, OutputFormat
from ._shared import ExitCode, exit_with_error, format_json, format_table

app = App(name="config", help="Inspect ipramp configuration", help_on_error=True)


@app.command(name="show")
def _show(
    *,
    format: Annotated[
        OutputFormat,
        Parameter(name=["--format", "-f"], help="Output format (toml, json)"),
    ] = OutputFormat.TOML,
    no_defaults: Annotated[
        bool, Parameter(name="--no-defaults", help="Exclude default values")
    ] = False,
) -> None:
    """Display merged configuration

    Args:
        format: Output format (toml, json).
        no_defaults: Exclude default values from output.
    """
    ctx = CLIContext.get_current()
    if ctx.config_error:
        exit_with_error(ctx.config_error, ExitCode.LOAD_ERROR)

    config = ctx.config
    if format == OutputFormat.JSON:
        output = format_json(config.to_dict(include_defaults=not no_defaults))
    else:
        output = config.to_toml(include_defaults=not no_defaults)
    print(output.rstrip())


@app.command(name="get")
def _get(key: str, /) -> None:
    """Get a configuration value by dot-notation key

    Args:
        key: Dot-notation key path (e.g., storage.key_prefix).
    """
    value = CLIContext.get_current().config.get(key)
    if value is None:
        exit_with_error(f"Key '{key}' not found", ExitCode.NOT_FOUND)
    if isinstance(value, dict):
        print(format_json(value))
    else:
        print(value)


@app.command(name="sources")
def _sources() -> None:
    """List configuration sources, highest precedence first"""
    sources = CLIContext.get_current().config.sources
    rows = [
        [s.name.value, str(s.path) if s.path else "-", "yes" if s.exists else "no"]
        for s in sources
    ]
    Console().print(format_table(["Source", "Path", "Exists"], rows))
