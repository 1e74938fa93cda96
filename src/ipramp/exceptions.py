"""ipramp exceptions."""

from pathlib import Path
from typing import Any


class IPRampError(Exception):
    """Base exception for ipramp errors."""


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(IPRampError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source


# =============================================================================
# Idea Exceptions
# =============================================================================


class IdeaError(IPRampError):
    """Base exception for idea errors."""


class IdeaNotFoundError(IdeaError, KeyError):
    """Raised when an idea cannot be found.

    The persistence adapter signals a missing idea with ``None``/``False``;
    this exception is raised only at boundaries that require the idea to
    exist, such as the CLI.

    Attributes:
        idea_id: The ID of the idea that was not found.
    """

    def __init__(self, message: str, *, idea_id: str | None = None) -> None:
        """Initialize with error message and idea context.

        Args:
            message: Human-readable error message.
            idea_id: The ID of the idea that was not found.
        """
        super().__init__(message)
        self.idea_id: str | None = idea_id


class IdeaValidationError(IdeaError, ValueError):
    """Raised when idea validation fails.

    Attributes:
        idea_id: The ID of the idea that failed validation.
        field: The field that failed validation.
        value: The invalid value.
        expected: Description of what was expected.
    """

    def __init__(
        self,
        message: str,
        *,
        idea_id: str | None = None,
        field: str | None = None,
        value: Any = None,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str | None = None,
    ) -> None:
        """Initialize with error message and validation context.

        Args:
            message: Human-readable error message.
            idea_id: The ID of the idea that failed validation.
            field: The field that failed validation.
            value: The invalid value.
            expected: Description of what was expected.
        """
        super().__init__(message)
        self.idea_id: str | None = idea_id
        self.field: str | None = field
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str | None = expected


class FrameworkMismatchError(IdeaError, ValueError):
    """Raised when worksheet data targets a framework that is not active.

    Attributes:
        active: The framework currently selected on the idea.
        requested: The framework the update was meant for.
    """

    def __init__(self, message: str, *, active: str, requested: str) -> None:
        """Initialize with error message and framework context."""
        super().__init__(message)
        self.active: str = active
        self.requested: str = requested


# =============================================================================
# Sprint Exceptions
# =============================================================================


class SprintError(IPRampError):
    """Base exception for sprint errors."""


class SprintNotFoundError(SprintError, KeyError):
    """Raised when a sprint cannot be found.

    Attributes:
        sprint_id: The ID of the sprint that was not found.
    """

    def __init__(self, message: str, *, sprint_id: str | None = None) -> None:
        """Initialize with error message and sprint context."""
        super().__init__(message)
        self.sprint_id: str | None = sprint_id


class SprintValidationError(SprintError, ValueError):
    """Raised when sprint validation fails.

    Attributes:
        field: The field that failed validation.
        value: The invalid value.
        expected: Description of what was expected.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: Any = None,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.field: str | None = field
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str | None = expected


# =============================================================================
# Storage Exceptions
# =============================================================================


class StorageError(IPRampError):
    """Base exception for storage errors."""


class DataImportError(StorageError, ValueError):
    """Raised when an import payload cannot be parsed or validated.

    Attributes:
        reason: Short machine-friendly reason (e.g. "invalid_json").
    """

    def __init__(self, message: str, *, reason: str) -> None:
        """Initialize with error message and failure reason."""
        super().__init__(message)
        self.reason: str = reason
