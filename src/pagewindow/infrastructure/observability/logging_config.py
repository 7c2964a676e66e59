"""
Structured logging for pagewindow.

Everything under ``pagewindow`` logs through plain
``logging.getLogger(__name__)`` loggers, at DEBUG for renderer resolution,
registry changes and ignored config keys. The package itself never
configures logging. Hosts either keep their own handlers, or call
:func:`setup_logging` (as the ``pagewindow`` CLI does) to get one JSON line
per record on stderr, tagged ``service="pagewindow"``.

Stdlib records and records from :func:`get_logger` loggers run through the
same processor chain, so both carry level, logger name, timestamp and any
context bound with :func:`bind_paginator_context`.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any, TextIO

import structlog

if TYPE_CHECKING:
    from pagewindow.domain.models.paginator import Paginator

SERVICE_NAME: str = "pagewindow"


def add_service_name(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Tag the event with ``SERVICE_NAME`` unless a caller already set one."""
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def _shared_processors() -> list[structlog.types.Processor]:
    # Applied to structlog events and, via foreign_pre_chain, to the stdlib
    # records the library modules emit.
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_service_name,  # type: ignore[list-item]
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def setup_logging(log_level: str = "INFO", stream: TextIO | None = None) -> None:
    """
    Route every ``pagewindow`` log record to *stream* as JSON.

    Replaces the root logger's handlers, so call it once from an entry
    point rather than from library code.

    Parameters
    ----------
    log_level:
        Minimum severity level name. Unknown names fall back to ``INFO``;
        ``DEBUG`` shows renderer resolution and ignored config keys.
    stream:
        Destination of the log lines. Defaults to ``sys.stderr`` so markup
        printed on stdout by the CLI stays clean.
    """

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(),
        ],
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)


def bind_paginator_context(paginator: Paginator) -> None:
    """
    Attach the paginator's counters to every following log event.

    Uses structlog context variables, so the fields also reach records from
    the library's stdlib loggers. Clear them with
    ``structlog.contextvars.clear_contextvars()``.
    """
    structlog.contextvars.bind_contextvars(
        current_page=paginator.get_current_page(),
        per_page=paginator.get_per_page(),
        total_records=paginator.get_total_records(),
        renderer=paginator.get_renderer_name(),
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger named *name*, e.g. ``get_logger("pagewindow.cli")``."""
    return structlog.get_logger(name)  # type: ignore[no-any-return]
