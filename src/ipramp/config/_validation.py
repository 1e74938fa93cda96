# pyright: reportAny=false, reportExplicitAny=false, reportUnknownArgumentType=false
"""Configuration validation against the section schemas."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, ConfigDict, ValidationError

from ipramp.exceptions import ConfigValidationError

from ._sections import LoggingConfig, SprintConfig, StorageConfig, UserConfig

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """A configuration value that failed validation.

    Attributes:
        key: Dotted path to the key (e.g. ``sprint.default_timer_seconds``).
        message: Human-readable description.
        expected: Expected value or type, when known.
        actual: The offending value.
    """

    key: str
    message: str
    expected: str | None
    actual: Any


class ConfigSchema(BaseModel):
    """Root schema. Unknown sections and keys are ignored."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    storage: StorageConfig = StorageConfig()
    sprint: SprintConfig = SprintConfig()
    user: UserConfig = UserConfig()


def _to_issue(error: "ErrorDetails") -> ValidationIssue:  # noqa: UP037
    ctx = error.get("ctx") or {}
    expected: str | None = None
    if "expected" in ctx:
        expected = str(ctx["expected"])
    elif "ge" in ctx:
        expected = f">= {ctx['ge']}"
    elif "min_length" in ctx:
        expected = f"at least {ctx['min_length']} character(s)"
    return ValidationIssue(
        key=".".join(str(part) for part in error.get("loc", ())),
        message=str(error.get("msg", "Validation error")),
        expected=expected,
        actual=error.get("input"),
    )


def validate_config(config: dict[str, Any]) -> list[ValidationIssue]:
    """Validate a merged configuration dictionary.

    Returns:
        The issues found; empty when the configuration is valid.
    """
    try:
        _ = ConfigSchema.model_validate(config)
    except ValidationError as e:
        return [_to_issue(err) for err in e.errors()]
    return []


def raise_if_validation_errors(
    issues: list[ValidationIssue], source: str | None = None
) -> None:
    """Raise for the first issue, if any.

    Raises:
        ConfigValidationError: If ``issues`` is not empty.
    """
    if not issues:
        return
    issue = issues[0]
    msg = f"Invalid configuration value for '{issue.key}'"
    raise ConfigValidationError(
        msg,
        key=issue.key,
        value=issue.actual,
        expected=issue.expected or issue.message,
        source=source,
    )
