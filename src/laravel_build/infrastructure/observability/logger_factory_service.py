"""Structlog setup for the service, driven by Settings.

Structlog loggers and stdlib loggers (uvicorn included) share one processor
chain, so every line carries the same schema. Request completion is logged
by RequestContextMiddleware, which is why uvicorn's own access log is muted.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable

import structlog

from laravel_build.infrastructure.configuration.main_settings import LogFormat, Settings
from laravel_build.infrastructure.observability.logging.service_schema_processor import (
    service_schema_processor,
)

_JSON_ENVIRONMENTS = frozenset({"qa", "staging", "prod", "production"})

_RENDERERS: dict[LogFormat, Callable[[], Any]] = {
    LogFormat.JSON: structlog.processors.JSONRenderer,
    LogFormat.CONSOLE: lambda: structlog.dev.ConsoleRenderer(colors=True),
}


def configure_logging(settings: Settings) -> None:
    """Configure structlog and the stdlib root logger once per process."""
    if structlog.is_configured():
        return

    pre_chain: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    renderer = _RENDERERS[resolve_log_format(settings)]()

    structlog.configure(
        processors=[*pre_chain, service_schema_processor, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _bridge_stdlib_logging(pre_chain, renderer, settings.log_level)


def resolve_log_format(settings: Settings) -> LogFormat:
    """An explicit log_format wins; otherwise shared environments log JSON."""
    if settings.log_format is not None:
        return settings.log_format
    if settings.env.lower() in _JSON_ENVIRONMENTS:
        return LogFormat.JSON
    return LogFormat.CONSOLE


def get_logger(component: str) -> Any:
    """Return a lazy structlog logger pre-bound with context_component.

    Safe at import time: the binding is resolved on first use, after
    configure_logging() has run.
    """
    return structlog.get_logger(context_component=component)


def _bridge_stdlib_logging(pre_chain: list[Any], renderer: Any, log_level: str) -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                service_schema_processor,
                renderer,
            ],
        )
    )
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(log_level.upper())

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
