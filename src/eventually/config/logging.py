"""Structured logging setup."""

from __future__ import annotations

import logging
from typing import Any

import structlog

from eventually.config.settings import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog from *settings* (defaults to the cached settings)."""
    settings = settings or get_settings()
    renderer: structlog.typing.Processor
    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=settings.debug and settings.is_development
        )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, settings.log_level)
        ),
        cache_logger_on_first_use=False,
    )


class LibraryLogger:
    """Logger used inside eventually.

    Once the application configures structlog, calls go through that
    configuration unchanged. Until then, structlog's defaults are used but
    filtered at ``EVENTUALLY_LOG_LEVEL``, so the library's debug output
    stays silent unless asked for.
    """

    def __init__(self, name: str | None = None) -> None:
        self._name = name

    def _resolve(self) -> Any:
        if structlog.is_configured():
            return structlog.get_logger(self._name)
        level = getattr(logging, get_settings().log_level)
        return structlog.wrap_logger(
            None,
            wrapper_class=structlog.make_filtering_bound_logger(level),
        )

    def __getattr__(self, name: str) -> Any:
        return getattr(self._resolve(), name)


def get_logger(name: str | None = None) -> LibraryLogger:
    """Return a logger for *name*."""
    return LibraryLogger(name)
