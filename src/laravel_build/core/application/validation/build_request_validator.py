"""Acceptance rules for build requests.

Rules run in a fixed order (name, PHP version, services) and the first
failure wins, so a request is rejected with exactly one error kind.
"""

import unicodedata

from laravel_build.core.application.exceptions.build_exceptions import (
    InvalidBuildRequestError,
)
from laravel_build.core.domain.build.catalogs import (
    NO_SERVICES,
    PHP_VERSION_CATALOG,
    SERVICE_CATALOG,
)
from laravel_build.core.domain.build.value_objects.build_error_kind import BuildErrorKind
from laravel_build.core.domain.build.value_objects.raw_build_request import RawBuildRequest
from laravel_build.core.domain.build.value_objects.validated_build_params import (
    ValidatedBuildParams,
)

# Letters, marks and numbers from any script.
_NAME_CATEGORY_PREFIXES = frozenset({"L", "M", "N"})
_NAME_EXTRA_CHARACTERS = frozenset({"_", "-"})


class BuildRequestValidator:
    def validate(self, raw: RawBuildRequest) -> ValidatedBuildParams:
        """Return validated params or raise InvalidBuildRequestError."""
        services = self.deduplicate(raw.services)

        if not self.is_valid_name(raw.name):
            raise InvalidBuildRequestError(BuildErrorKind.INVALID_NAME, context={"name": raw.name})
        if not self.is_valid_php_version(raw.php_version):
            raise InvalidBuildRequestError(
                BuildErrorKind.INVALID_PHP_VERSION, context={"php": raw.php_version}
            )
        if not self.are_valid_services(services):
            raise InvalidBuildRequestError(
                BuildErrorKind.INVALID_SERVICES, context={"services": list(services)}
            )

        return ValidatedBuildParams(name=raw.name, php_version=raw.php_version, services=services)

    @staticmethod
    def deduplicate(services: tuple[str, ...]) -> tuple[str, ...]:
        """Drop repeated services, keeping the first occurrence of each."""
        return tuple(dict.fromkeys(services))

    @staticmethod
    def is_valid_name(name: str) -> bool:
        if not name:
            return False
        return all(_is_name_character(character) for character in name)

    @staticmethod
    def is_valid_php_version(php_version: str) -> bool:
        return php_version in PHP_VERSION_CATALOG

    @staticmethod
    def are_valid_services(services: tuple[str, ...]) -> bool:
        """Check a deduplicated service list.

        "none" is accepted only as the sole entry; alongside other services
        it is treated like any unknown name.
        """
        if not services:
            return False
        if len(services) == 1 and services[0] == NO_SERVICES:
            return True
        return all(service in SERVICE_CATALOG for service in services)


def _is_name_character(character: str) -> bool:
    if character in _NAME_EXTRA_CHARACTERS:
        return True
    return unicodedata.category(character)[0] in _NAME_CATEGORY_PREFIXES
