from laravel_build.core.application.use_cases.generate_build_script_use_case import (
    GenerateBuildScriptUseCase,
)

__all__ = ["GenerateBuildScriptUseCase"]
