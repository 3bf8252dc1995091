from laravel_build.core.domain.build.catalogs import NO_SERVICES
from laravel_build.core.domain.build.value_objects.script_params import ScriptParams
from laravel_build.core.domain.build.value_objects.validated_build_params import (
    ValidatedBuildParams,
)

PEST_FLAG = "--pest"
DEVCONTAINER_FLAG = "--devcontainer"


class ScriptParamsBuilder:
    """Derives the script template values from validated build params."""

    def build(
        self,
        params: ValidatedBuildParams,
        *,
        pest_requested: bool,
        devcontainer_requested: bool,
    ) -> ScriptParams:
        return ScriptParams(
            name=params.name,
            php_version=params.php_version,
            with_list=",".join(params.services),
            services_list=" ".join(params.services),
            database_flag=self._resolve_database_flag(params),
            pest_flag=PEST_FLAG if pest_requested else "",
            devcontainer_flag=DEVCONTAINER_FLAG if devcontainer_requested else "",
        )

    @staticmethod
    def _resolve_database_flag(params: ValidatedBuildParams) -> str:
        # pgsql wins over mariadb when both are requested.
        if params.has_service("pgsql"):
            return "--database pgsql"
        if params.has_service("mariadb"):
            return "--database mariadb"
        if params.has_service(NO_SERVICES):
            return ""
        return "--database mysql"
