from enum import StrEnum, auto


class BuildErrorKind(StrEnum):
    """Why a build request was rejected. Exactly one kind is reported per request."""

    INVALID_NAME = auto()
    INVALID_PHP_VERSION = auto()
    INVALID_SERVICES = auto()
