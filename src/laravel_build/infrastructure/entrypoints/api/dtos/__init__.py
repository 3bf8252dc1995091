from laravel_build.infrastructure.entrypoints.api.dtos.build_query_dto import BuildQueryDTO

__all__ = ["BuildQueryDTO"]
