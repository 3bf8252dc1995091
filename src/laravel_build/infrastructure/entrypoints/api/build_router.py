from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import PlainTextResponse, RedirectResponse

from laravel_build.core.application.exceptions.build_exceptions import (
    InvalidBuildRequestError,
    ScriptRenderError,
)
from laravel_build.core.application.use_cases.generate_build_script_use_case import (
    GenerateBuildScriptUseCase,
)
from laravel_build.infrastructure.configuration.main_settings import Settings
from laravel_build.infrastructure.entrypoints.api.dependencies import get_settings, get_use_case
from laravel_build.infrastructure.entrypoints.api.mappers.build_request_mapper import (
    BuildRequestMapper,
)
from laravel_build.infrastructure.entrypoints.api.mappers.rejection_message_mapper import (
    RejectionMessageMapper,
)
from laravel_build.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger("build_router")
router = APIRouter()

RENDER_FAILURE_MESSAGE = "Unable to generate the build script."


@router.get("/", include_in_schema=False)
def docs_redirect(settings: Settings = Depends(get_settings)) -> RedirectResponse:
    return RedirectResponse(settings.docs_url, status_code=status.HTTP_302_FOUND)


@router.get("/{name}", response_class=PlainTextResponse)
def build_script(
    name: str,
    request: Request,
    settings: Settings = Depends(get_settings),
    use_case: GenerateBuildScriptUseCase = Depends(get_use_case),
) -> PlainTextResponse:
    query = BuildRequestMapper.from_query(name, request.query_params)
    raw = BuildRequestMapper.to_domain(query, settings)

    try:
        script = use_case.execute(
            raw,
            pest_requested=query.pest,
            devcontainer_requested=query.devcontainer,
        )
    except InvalidBuildRequestError as exc:
        logger.info("Build request rejected", rejection_kind=exc.kind.value, **exc.context)
        return PlainTextResponse(
            RejectionMessageMapper.to_message(exc.kind),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    except ScriptRenderError as exc:
        logger.error(
            "Build script rendering failed",
            error_type=type(exc).__name__,
            error_details=str(exc),
            error_retryable=False,
        )
        return PlainTextResponse(
            RENDER_FAILURE_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    logger.info(
        "Build script generated",
        name=script.params.name,
        php=script.params.php_version,
        services=script.params.with_list,
    )
    return PlainTextResponse(script.content, status_code=status.HTTP_200_OK)
