from laravel_build.core.domain.build.catalogs import (
    NO_SERVICES,
    SUPPORTED_PHP_VERSIONS,
    SUPPORTED_SERVICES,
)

__all__ = [
    "NO_SERVICES",
    "SUPPORTED_PHP_VERSIONS",
    "SUPPORTED_SERVICES",
]
