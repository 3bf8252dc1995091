from fastapi import Request

from laravel_build.core.application.use_cases.generate_build_script_use_case import (
    GenerateBuildScriptUseCase,
)
from laravel_build.infrastructure.configuration.main_settings import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_use_case(request: Request) -> GenerateBuildScriptUseCase:
    return request.app.state.generate_build_script
