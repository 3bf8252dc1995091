from starlette.datastructures import QueryParams

from laravel_build.core.domain.build.value_objects.raw_build_request import RawBuildRequest
from laravel_build.infrastructure.configuration.main_settings import Settings
from laravel_build.infrastructure.entrypoints.api.dtos.build_query_dto import BuildQueryDTO


class BuildRequestMapper:
    @staticmethod
    def from_query(name: str, query_params: QueryParams) -> BuildQueryDTO:
        """Read the build query; pest and devcontainer count by presence alone."""
        return BuildQueryDTO(
            name=name,
            php=BuildRequestMapper._first_value(query_params, "php"),
            services=BuildRequestMapper._first_value(query_params, "with"),
            pest="pest" in query_params,
            devcontainer="devcontainer" in query_params,
        )

    @staticmethod
    def to_domain(dto: BuildQueryDTO, settings: Settings) -> RawBuildRequest:
        php_version = dto.php if dto.php is not None else settings.default_php_version
        services = dto.services if dto.services is not None else settings.default_services
        return RawBuildRequest.from_service_list(dto.name, php_version, services)

    @staticmethod
    def _first_value(query_params: QueryParams, key: str) -> str | None:
        # A repeated key resolves to its first occurrence.
        values = query_params.getlist(key)
        return values[0] if values else None
