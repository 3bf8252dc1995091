from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RawBuildRequest:
    """Unvalidated input of a single build request.

    ``services`` keeps the caller's order and may contain duplicates.
    """

    name: str
    php_version: str
    services: tuple[str, ...]

    @classmethod
    def from_service_list(cls, name: str, php_version: str, service_list: str) -> RawBuildRequest:
        """Build a request from the comma-separated form used in query strings."""
        return cls(name=name, php_version=php_version, services=tuple(service_list.split(",")))
