from laravel_build.core.domain.build.value_objects.build_error_kind import BuildErrorKind
from laravel_build.core.domain.build.value_objects.generated_build_script import (
    GeneratedBuildScript,
)
from laravel_build.core.domain.build.value_objects.raw_build_request import RawBuildRequest
from laravel_build.core.domain.build.value_objects.script_params import ScriptParams
from laravel_build.core.domain.build.value_objects.validated_build_params import (
    ValidatedBuildParams,
)

__all__ = [
    "BuildErrorKind",
    "GeneratedBuildScript",
    "RawBuildRequest",
    "ScriptParams",
    "ValidatedBuildParams",
]
