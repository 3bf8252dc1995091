from laravel_build.core.application.builders.script_params_builder import ScriptParamsBuilder
from laravel_build.core.application.ports.script_renderer_port import ScriptRendererPort
from laravel_build.core.application.validation.build_request_validator import (
    BuildRequestValidator,
)
from laravel_build.core.domain.build.value_objects.generated_build_script import (
    GeneratedBuildScript,
)
from laravel_build.core.domain.build.value_objects.raw_build_request import RawBuildRequest


class GenerateBuildScriptUseCase:
    """Validate a build request, derive the script values and render the script.

    InvalidBuildRequestError from the validator propagates unchanged; nothing
    is rendered for a rejected request.
    """

    def __init__(
        self,
        renderer: ScriptRendererPort,
        validator: BuildRequestValidator | None = None,
        builder: ScriptParamsBuilder | None = None,
    ) -> None:
        self.renderer = renderer
        self.validator = validator or BuildRequestValidator()
        self.builder = builder or ScriptParamsBuilder()

    def execute(
        self,
        raw: RawBuildRequest,
        *,
        pest_requested: bool = False,
        devcontainer_requested: bool = False,
    ) -> GeneratedBuildScript:
        validated = self.validator.validate(raw)
        params = self.builder.build(
            validated,
            pest_requested=pest_requested,
            devcontainer_requested=devcontainer_requested,
        )
        return GeneratedBuildScript(params=params, content=self.renderer.render(params))
