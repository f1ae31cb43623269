"""
Structured logging: timestamp, event_type, level, logger name.

structlog with ISO timestamps and consistent keys so scorer, loader and API
output can be aggregated. All modules should use get_logger() and pass an
event_type as the first argument.

Import configures structlog from the process environment. Entrypoints call
configure_structlog() again once settings (including .env) are loaded;
module-level loggers are lazy proxies, so they pick up the new level and
renderer on their next call.

Never log password text; log its length and the resulting score instead.

Uses only Python stdlib logging and structlog; no psw_strength imports to avoid circular imports.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

import structlog
from structlog._config import BoundLoggerLazyProxy


def level_value(name: str | None) -> int:
    """Map a level name such as "warning" to its logging constant; INFO when unknown."""
    value = getattr(logging, (name or "").strip().upper(), None)
    return value if isinstance(value, int) else logging.INFO


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Ensure timestamp is always present (ISO 8601)."""
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _normalize_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Rename structlog 'event' to event_type; keep message if present."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    if "message" not in event_dict and "event_type" in event_dict:
        event_dict["message"] = str(event_dict["event_type"])
    return event_dict


def configure_structlog(log_format: str | None = None, level: str | int | None = None) -> None:
    """
    Configure structlog output.

    log_format: "json" or "console"; defaults to LOG_FORMAT from the environment.
    level: level name or logging constant; defaults to LOG_LEVEL from the environment.
    """
    fmt = (log_format or os.getenv("LOG_FORMAT") or "json").strip().lower()
    if level is None:
        level = os.getenv("LOG_LEVEL")
    threshold = level if isinstance(level, int) else level_value(level)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _add_timestamp,
        _normalize_event,
    ]
    if fmt == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
        )
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(threshold),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        # Off so a later configure_structlog() reaches loggers already used at import.
        cache_logger_on_first_use=False,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> Any:
    """
    Return a structured logger for the given module name.

        logger = get_logger(__name__)
        logger.info("password_analyzed", length=12, score=96, meaning="Great")
    Output (JSON): {"event_type": "password_analyzed", "length": 12, "score": 96, "meaning": "Great",
                    "timestamp": "...", "level": "info", "logger": "module.name"}
    """
    return BoundLoggerLazyProxy(
        None, initial_values={"logger": name}, logger_factory_args=(name,)
    )
