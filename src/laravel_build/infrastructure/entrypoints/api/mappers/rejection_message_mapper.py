from laravel_build.core.domain.build.catalogs import SUPPORTED_PHP_VERSIONS, SUPPORTED_SERVICES
from laravel_build.core.domain.build.value_objects.build_error_kind import BuildErrorKind


def _php_versions_sentence() -> str:
    *head, last = SUPPORTED_PHP_VERSIONS
    return f"{', '.join(head)} or {last}"


_MESSAGES: dict[BuildErrorKind, str] = {
    BuildErrorKind.INVALID_NAME: (
        "Invalid site name. Please only use alpha-numeric characters, dashes, and underscores."
    ),
    BuildErrorKind.INVALID_PHP_VERSION: (
        f"Invalid PHP version. Please specify a supported version ({_php_versions_sentence()})."
    ),
    BuildErrorKind.INVALID_SERVICES: (
        "Invalid service name. Please provide one or more of the supported services "
        f"({', '.join(SUPPORTED_SERVICES)}) or \"none\"."
    ),
}


class RejectionMessageMapper:
    """Maps a rejection kind to the user-facing message returned with HTTP 400."""

    @staticmethod
    def to_message(kind: BuildErrorKind) -> str:
        return _MESSAGES[kind]
