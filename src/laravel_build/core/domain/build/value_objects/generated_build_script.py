from dataclasses import dataclass

from laravel_build.core.domain.build.value_objects.script_params import ScriptParams


@dataclass(frozen=True, slots=True)
class GeneratedBuildScript:
    params: ScriptParams
    content: str
