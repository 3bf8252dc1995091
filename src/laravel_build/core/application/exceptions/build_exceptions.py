"""Exception hierarchy for the build script application layer.

Every component raises from this tree so the HTTP layer can map failures
to responses by type instead of by message.
"""

from typing import Any

from laravel_build.core.domain.build.value_objects.build_error_kind import BuildErrorKind


class ApplicationError(Exception):
    """Base exception for all application-layer errors."""

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context: dict[str, Any] = context or {}


class InvalidBuildRequestError(ApplicationError):
    """Raised when a build request fails validation.

    Carries exactly one ``BuildErrorKind``, the first failing rule.
    """

    def __init__(self, kind: BuildErrorKind, *, context: dict[str, Any] | None = None) -> None:
        super().__init__(f"Build request rejected: {kind.value}", context=context)
        self.kind = kind


class ScriptTemplateNotFoundError(ApplicationError):
    """Raised at startup when the build script template cannot be loaded."""


class ScriptRenderError(ApplicationError):
    """Raised when the build script template fails to render."""
