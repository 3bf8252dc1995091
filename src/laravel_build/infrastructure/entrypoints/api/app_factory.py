from fastapi import FastAPI

from laravel_build.core.application.use_cases.generate_build_script_use_case import (
    GenerateBuildScriptUseCase,
)
from laravel_build.infrastructure.configuration.main_settings import Settings
from laravel_build.infrastructure.entrypoints.api.build_router import router as build_router
from laravel_build.infrastructure.entrypoints.api.health_router import router as health_router
from laravel_build.infrastructure.observability.logger_factory_service import (
    configure_logging,
    get_logger,
)
from laravel_build.infrastructure.observability.logging.request_context_middleware import (
    RequestContextMiddleware,
)
from laravel_build.infrastructure.templates.jinja2_script_renderer import Jinja2ScriptRenderer

logger = get_logger("app_factory")


def create_app(settings: Settings) -> FastAPI:
    configure_logging(settings)

    logger.info("--- BOOT DIAGNOSTICS ---")
    logger.info(f"App Name: {settings.app_name}")
    logger.info(f"Env: {settings.env}")
    logger.info(f"Script Template: {settings.script_template_path}")
    logger.info(f"Defaults: php={settings.default_php_version} with={settings.default_services}")
    logger.info("------------------------")

    renderer = Jinja2ScriptRenderer(settings.script_template_path)

    # No interactive docs: /docs and /openapi.json would shadow project names.
    app = FastAPI(title=settings.app_name, docs_url=None, redoc_url=None, openapi_url=None)
    app.state.settings = settings
    app.state.generate_build_script = GenerateBuildScriptUseCase(renderer)
    app.add_middleware(RequestContextMiddleware)

    # Two-segment health path first; the build route captures every single segment.
    app.include_router(health_router)
    app.include_router(build_router)

    return app
