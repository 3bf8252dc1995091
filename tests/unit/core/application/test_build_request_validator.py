import pytest

from laravel_build.core.application.exceptions.build_exceptions import InvalidBuildRequestError
from laravel_build.core.application.validation.build_request_validator import (
    BuildRequestValidator,
)
from laravel_build.core.domain.build.catalogs import SUPPORTED_PHP_VERSIONS, SUPPORTED_SERVICES
from laravel_build.core.domain.build.value_objects.build_error_kind import BuildErrorKind
from laravel_build.core.domain.build.value_objects.raw_build_request import RawBuildRequest


@pytest.fixture
def validator():
    return BuildRequestValidator()


def _request(name="my-app", php="83", with_="mysql,redis"):
    return RawBuildRequest.from_service_list(name, php, with_)


def _rejection(validator, raw):
    with pytest.raises(InvalidBuildRequestError) as exc:
        validator.validate(raw)
    return exc.value.kind


class TestNameRule:
    @pytest.mark.parametrize(
        "name",
        ["my-app", "my_app", "app42", "A", "-", "_", "café", "приложение", "アプリ", "e\u0301", "٣٤"],
    )
    def test_accepts_letters_marks_numbers_dash_underscore(self, validator, name):
        assert validator.validate(_request(name=name)).name == name

    @pytest.mark.parametrize(
        "name",
        ["", "bad name!", "my app", "my/app", "my.app", "app$", "tab\tname", "émoji😀", "a+b"],
    )
    def test_rejects_anything_else(self, validator, name):
        assert _rejection(validator, _request(name=name)) is BuildErrorKind.INVALID_NAME


class TestPhpVersionRule:
    @pytest.mark.parametrize("php", SUPPORTED_PHP_VERSIONS)
    def test_accepts_supported_versions(self, validator, php):
        assert validator.validate(_request(php=php)).php_version == php

    @pytest.mark.parametrize("php", ["", "7.4", "8.3", "84", "73", "php83", " 83"])
    def test_rejects_unsupported_or_unnormalized_versions(self, validator, php):
        assert _rejection(validator, _request(php=php)) is BuildErrorKind.INVALID_PHP_VERSION


class TestServiceListRule:
    def test_duplicates_are_removed_keeping_first_occurrence(self, validator):
        params = validator.validate(_request(with_="mysql,mysql,redis"))
        assert params.services == ("mysql", "redis")

    def test_order_is_preserved(self, validator):
        params = validator.validate(_request(with_="redis,pgsql,redis,mailpit,pgsql"))
        assert params.services == ("redis", "pgsql", "mailpit")

    def test_none_alone_is_accepted(self, validator):
        assert validator.validate(_request(with_="none")).services == ("none",)

    def test_repeated_none_collapses_to_none(self, validator):
        assert validator.validate(_request(with_="none,none")).services == ("none",)

    @pytest.mark.parametrize("service", SUPPORTED_SERVICES)
    def test_single_catalog_service_is_accepted(self, validator, service):
        assert validator.validate(_request(with_=service)).services == (service,)

    def test_full_catalog_is_accepted(self, validator):
        params = validator.validate(_request(with_=",".join(SUPPORTED_SERVICES)))
        assert params.services == SUPPORTED_SERVICES

    @pytest.mark.parametrize("with_", ["none,mysql", "mysql,none", "bogus", "mysql,bogus", "", "mysql,", "MySQL"])
    def test_rejects_invalid_lists(self, validator, with_):
        assert _rejection(validator, _request(with_=with_)) is BuildErrorKind.INVALID_SERVICES

    def test_empty_sequence_is_rejected(self, validator):
        raw = RawBuildRequest(name="my-app", php_version="83", services=())
        assert _rejection(validator, raw) is BuildErrorKind.INVALID_SERVICES


class TestPrecedence:
    def test_name_failure_wins_over_everything(self, validator):
        raw = _request(name="bad name!", php="99", with_="bogus")
        assert _rejection(validator, raw) is BuildErrorKind.INVALID_NAME

    def test_php_failure_wins_over_services(self, validator):
        raw = _request(php="99", with_="bogus")
        assert _rejection(validator, raw) is BuildErrorKind.INVALID_PHP_VERSION

    def test_rejection_carries_offending_value(self, validator):
        with pytest.raises(InvalidBuildRequestError) as exc:
            validator.validate(_request(php="7.4"))
        assert exc.value.context == {"php": "7.4"}
