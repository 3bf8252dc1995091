from laravel_build.core.application.validation.build_request_validator import (
    BuildRequestValidator,
)

__all__ = ["BuildRequestValidator"]
