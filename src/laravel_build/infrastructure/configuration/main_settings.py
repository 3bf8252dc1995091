from enum import StrEnum
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from laravel_build.core.application.validation.build_request_validator import (
    BuildRequestValidator,
)
from laravel_build.core.domain.build.catalogs import SUPPORTED_PHP_VERSIONS

DEFAULT_SCRIPT_TEMPLATE_PATH = Path(__file__).resolve().parents[1] / "templates" / "script.sh.j2"


class LogFormat(StrEnum):
    JSON = "json"
    CONSOLE = "console"


class Settings(BaseSettings):
    """
    Service settings, read from LARAVEL_BUILD_* environment variables.
    """
    app_name: str = "Laravel Build"
    env: str = Field(default="local", description="Deployment environment (local, qa, prod...)")
    log_level: str = "INFO"
    log_format: LogFormat | None = Field(default=None, description="Overrides the per-environment renderer")

    host: str = "0.0.0.0"
    port: int = 8080

    docs_url: str = Field(default="https://laravel.com/docs", description="Target of the root redirect")
    default_php_version: str = Field(default="83", description="PHP version used when 'php' is omitted")
    default_services: str = Field(
        default="mysql,redis,meilisearch,mailpit,selenium",
        description="Comma-separated services used when 'with' is omitted",
    )
    script_template_path: Path = Field(default=DEFAULT_SCRIPT_TEMPLATE_PATH)

    @field_validator("default_php_version")
    @classmethod
    def validate_default_php_version(cls, v: str) -> str:
        if v not in SUPPORTED_PHP_VERSIONS:
            raise ValueError(f"default_php_version must be one of {', '.join(SUPPORTED_PHP_VERSIONS)}")
        return v

    @field_validator("default_services")
    @classmethod
    def validate_default_services(cls, v: str) -> str:
        services = BuildRequestValidator.deduplicate(tuple(v.split(",")))
        if not BuildRequestValidator.are_valid_services(services):
            raise ValueError(f"default_services is not a valid service list: '{v}'")
        return v

    model_config = SettingsConfigDict(
        env_prefix="LARAVEL_BUILD_",
        env_file=None,
        extra="ignore",
    )
