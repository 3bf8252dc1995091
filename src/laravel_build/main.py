import uvicorn

from laravel_build.infrastructure.configuration.main_settings import Settings
from laravel_build.infrastructure.entrypoints.api.app_factory import create_app


def dev():
    """Run the development server."""
    settings = Settings()
    uvicorn.run(
        "laravel_build.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level=settings.log_level.lower(),
    )


# Instantiate global app for ASGI
settings = Settings()
app = create_app(settings)
