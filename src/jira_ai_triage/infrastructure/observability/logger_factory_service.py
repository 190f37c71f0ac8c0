"""Logging setup for the triage service.

Application modules log through stdlib loggers from LoggerFactoryService. Those records,
and events emitted directly through structlog (the correlation middleware), share one
processor chain ending in log_schema_processor, so both come out in the same schema.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

from jira_ai_triage.infrastructure.observability.logging.log_schema_processor import (
    log_schema_processor,
)

JSON_ENVIRONMENTS = frozenset({"qa", "staging", "prod", "production"})

_CONFIGURED = False


def configure_logging(level: str | None = None) -> None:
    """Installs the structlog pipeline and the root stdlib handler. Only the first call has effect."""
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    chain = _shared_chain()
    renderer = _select_renderer()

    structlog.configure(
        processors=[*chain, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _install_root_handler(chain, renderer, _resolve_level(level))


def set_level(level: str) -> None:
    logging.getLogger().setLevel(_resolve_level(level))


def _shared_chain() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        log_schema_processor,
    ]


def _install_root_handler(chain: list[Any], renderer: Any, level: int) -> None:
    # stdlib records carry the "_record"/"_from_structlog" meta keys; strip them before the schema runs
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *chain, renderer],
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def _resolve_level(level: str | None) -> int:
    name = (level or os.environ.get("LOG_LEVEL") or "INFO").upper()
    return getattr(logging, name, logging.INFO)


def _select_renderer() -> Any:
    """LOG_FORMAT (json|console) wins; otherwise JSON in deployed environments, console locally."""
    log_format = os.environ.get("LOG_FORMAT", "").lower()
    if not log_format:
        env = os.environ.get("APP_ENV", "local").lower()
        log_format = "json" if env in JSON_ENVIRONMENTS else "console"

    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)


class LoggerFactoryService:
    @staticmethod
    def build_logger(name: str) -> logging.Logger:
        configure_logging()
        return logging.getLogger(name)
