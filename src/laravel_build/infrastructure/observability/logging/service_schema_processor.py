"""Structlog processor that nests flat event keys into the service log schema.

Keys are consumed with dict.pop(key, default) so a missing field never
raises; whatever is left over ends up under ``extra``.
"""

from __future__ import annotations

import os
from typing import Any

SERVICE_NAME = "laravel-build"


def _build_root_fields(event_dict: dict[str, Any]) -> dict[str, Any]:
    return {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", "info"),
        "service": os.environ.get("SERVICE_NAME", SERVICE_NAME),
        "message": event_dict.pop("event", ""),
    }


def _build_request(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Request identification block. Returns None outside a request."""
    request_id = event_dict.pop("request_id", None)
    component = event_dict.pop("context_component", None)
    path = event_dict.pop("context_path", None)
    method = event_dict.pop("context_method", None)
    if request_id is None and component is None and path is None:
        return None
    return {
        "request_id": request_id,
        "component": component,
        "path": path,
        "method": method,
    }


def _build_http(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    status = event_dict.pop("http_status", None)
    if status is None:
        return None
    return {
        "status": status,
        "duration_ms": event_dict.pop("http_duration_ms", None),
    }


def _build_error(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    error_type = event_dict.pop("error_type", None)
    if error_type is None:
        return None
    return {
        "type": error_type,
        "details": event_dict.pop("error_details", None),
        "retryable": event_dict.pop("error_retryable", False),
    }


def service_schema_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    result = _build_root_fields(event_dict)

    for block_name, builder in (
        ("request", _build_request),
        ("http", _build_http),
        ("error", _build_error),
    ):
        block = builder(event_dict)
        if block is not None:
            result[block_name] = block

    if event_dict:
        result["extra"] = dict(event_dict)

    return result
