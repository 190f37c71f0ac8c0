"""Structlog processor that reshapes flat event dicts into the service log schema.

All field extraction uses dict.pop(key, default) so missing keys never raise.
"""

from __future__ import annotations

import os
from typing import Any

SERVICE_NAME = "jira-ai-triage"


def _build_root_fields(event_dict: dict[str, Any]) -> dict[str, Any]:
    return {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", "info"),
        "service": os.environ.get("SERVICE_NAME", SERVICE_NAME),
        "environment": os.environ.get("APP_ENV", "local"),
        "correlation_id": event_dict.pop("correlation_id", None),
        "message": event_dict.pop("event", ""),
    }


def _safe_float(value: Any) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _build_processing(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    status = event_dict.pop("processing_status", None)
    if status is None:
        return None
    return {
        "status": status,
        "duration_ms": _safe_float(event_dict.pop("processing_duration_ms", None)),
        "http_status": event_dict.pop("processing_http_status", None),
    }


def _build_error(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Returns None if no error_type present."""
    error_type = event_dict.pop("error_type", None)
    if error_type is None:
        return None
    return {
        "type": error_type,
        "stage": event_dict.pop("error_stage", None),
        "details": event_dict.pop("error_details", None),
    }


def _build_context(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    component = event_dict.pop("context_component", None)
    endpoint = event_dict.pop("context_endpoint", None)
    if component is None and endpoint is None:
        return None
    return {
        "component": component,
        "endpoint": endpoint,
        "method": event_dict.pop("context_method", None),
        "issue_key": event_dict.pop("issue_key", None),
    }


def log_schema_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    result = _build_root_fields(event_dict)

    processing = _build_processing(event_dict)
    if processing is not None:
        result["processing"] = processing

    error = _build_error(event_dict)
    if error is not None:
        result["error"] = error

    context = _build_context(event_dict)
    if context is not None:
        result["context"] = context

    if event_dict:
        result["extra"] = dict(event_dict)

    return result
