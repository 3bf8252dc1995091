from __future__ import annotations

from dataclasses import dataclass

from laravel_build.core.domain.build.catalogs import NO_SERVICES


@dataclass(frozen=True, slots=True)
class ValidatedBuildParams:
    name: str
    php_version: str
    services: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(set(self.services)) != len(self.services):
            raise ValueError("services must not contain duplicates")
        if NO_SERVICES in self.services and len(self.services) != 1:
            raise ValueError(f"'{NO_SERVICES}' cannot be combined with other services")

    def has_service(self, service: str) -> bool:
        return service in self.services
