from laravel_build.core.application.exceptions.build_exceptions import (
    ApplicationError,
    InvalidBuildRequestError,
    ScriptRenderError,
    ScriptTemplateNotFoundError,
)

__all__ = [
    "ApplicationError",
    "InvalidBuildRequestError",
    "ScriptRenderError",
    "ScriptTemplateNotFoundError",
]
