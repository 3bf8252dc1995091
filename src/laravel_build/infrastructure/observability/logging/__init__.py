from laravel_build.infrastructure.observability.logging.request_context_middleware import (
    RequestContextMiddleware,
)
from laravel_build.infrastructure.observability.logging.service_schema_processor import (
    service_schema_processor,
)

__all__ = [
    "RequestContextMiddleware",
    "service_schema_processor",
]
