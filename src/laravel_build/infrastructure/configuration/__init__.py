from laravel_build.infrastructure.configuration.main_settings import Settings

__all__ = ["Settings"]
