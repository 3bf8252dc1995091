import pytest

from laravel_build.infrastructure.configuration.main_settings import LogFormat, Settings
from laravel_build.infrastructure.observability.logger_factory_service import resolve_log_format


@pytest.mark.parametrize(
    "env, expected",
    [
        ("local", LogFormat.CONSOLE),
        ("test", LogFormat.CONSOLE),
        ("qa", LogFormat.JSON),
        ("Production", LogFormat.JSON),
    ],
)
def test_format_follows_environment(env, expected):
    assert resolve_log_format(Settings(env=env)) is expected


def test_explicit_format_overrides_environment():
    assert resolve_log_format(Settings(env="prod", log_format="console")) is LogFormat.CONSOLE
    assert resolve_log_format(Settings(env="local", log_format="json")) is LogFormat.JSON


def test_format_is_read_from_environment(monkeypatch):
    monkeypatch.setenv("LARAVEL_BUILD_LOG_FORMAT", "json")
    assert resolve_log_format(Settings()) is LogFormat.JSON
