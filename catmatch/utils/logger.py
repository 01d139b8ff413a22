# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
CategoryMatch — Structured Logging
JSON-formatted logs via structlog. Engine modules log one event per
operation (match, batch, triage, validation), never per comparison.

Embedding applications should call configure_logging() once at startup
(or install their own structlog configuration). Until then structlog's
defaults apply, which print every event, debug included, to stdout.
Per-suggestion events from find_best_match() are logged at debug and are
dropped under the configured default level of INFO.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from catmatch.config import get_settings


def _add_app_info(
    logger: Any, method: str, event_dict: EventDict
) -> EventDict:
    """Inject application name into every log entry."""
    event_dict["app"] = "catmatch"
    return event_dict


def configure_logging() -> None:
    """
    Configure structlog for JSON output in production and
    human-readable console output in development (DEBUG level).
    Called once by the embedding application or runner script.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        _add_app_info,
    ]

    if settings.log_level == "DEBUG":
        processors: list[Processor] = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True)
        ]
    else:
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]

    # Logs go to stderr so runner output on stdout stays machine-readable
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )


def get_logger(name: str = "catmatch") -> structlog.BoundLogger:
    """
    Return a structlog bound logger.

    Usage:
        log = get_logger(__name__)
        log.info("best_match_found", suggestion="Smartphone", confidence=95)

    To tag every entry of one ingestion run:
        structlog.contextvars.bind_contextvars(batch_id=batch_id)
        log.info("batch_match_start")
        structlog.contextvars.clear_contextvars()
    """
    return structlog.get_logger(name)
