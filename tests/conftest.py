import pytest
from fastapi.testclient import TestClient

from laravel_build.core.domain.build.value_objects.validated_build_params import (
    ValidatedBuildParams,
)
from laravel_build.infrastructure.configuration.main_settings import Settings
from laravel_build.infrastructure.entrypoints.api.app_factory import create_app


@pytest.fixture
def settings():
    return Settings(app_name="TestLaravelBuild", env="test")


@pytest.fixture
def client(settings):
    return TestClient(create_app(settings), follow_redirects=False)


@pytest.fixture
def make_params():
    def _make(*services, name="my-app", php_version="83"):
        return ValidatedBuildParams(name=name, php_version=php_version, services=tuple(services))

    return _make
