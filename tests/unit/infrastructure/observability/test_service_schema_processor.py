from laravel_build.infrastructure.observability.logging.service_schema_processor import (
    service_schema_processor,
)


def test_nests_request_http_and_error_blocks():
    event = {
        "event": "Request processed",
        "level": "info",
        "timestamp": "2024-01-01T00:00:00Z",
        "request_id": "abc",
        "context_path": "/my-app",
        "context_method": "GET",
        "http_status": 200,
        "http_duration_ms": 1.5,
        "error_type": "ScriptRenderError",
        "error_details": "boom",
    }

    result = service_schema_processor(None, "info", event)

    assert result["message"] == "Request processed"
    assert result["service"] == "laravel-build"
    assert result["request"] == {
        "request_id": "abc",
        "component": None,
        "path": "/my-app",
        "method": "GET",
    }
    assert result["http"] == {"status": 200, "duration_ms": 1.5}
    assert result["error"] == {"type": "ScriptRenderError", "details": "boom", "retryable": False}
    assert "extra" not in result


def test_leftover_keys_go_to_extra_and_empty_blocks_are_omitted():
    result = service_schema_processor(None, "info", {"event": "Build script generated", "php": "83"})

    assert result["extra"] == {"php": "83"}
    assert "request" not in result
    assert "http" not in result
    assert "error" not in result
