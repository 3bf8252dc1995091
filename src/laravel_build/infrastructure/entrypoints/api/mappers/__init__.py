from laravel_build.infrastructure.entrypoints.api.mappers.build_request_mapper import (
    BuildRequestMapper,
)
from laravel_build.infrastructure.entrypoints.api.mappers.rejection_message_mapper import (
    RejectionMessageMapper,
)

__all__ = ["BuildRequestMapper", "RejectionMessageMapper"]
