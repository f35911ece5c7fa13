"""structlog configuration for libstock.

Two output modes:
- Human (default): colored console output to stderr
- JSON (log_json): Structured JSON lines to stderr

Library modules log through stdlib ``logging``; the lending-event plugin
logs through structlog. Both end up in the same stderr handler.
"""

from __future__ import annotations

import logging
import sys

import structlog

EVENTS_LOGGER = "libstock.events"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    events: bool = False,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        verbose: Enable DEBUG-level output for ``libstock``. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
        events: Let ``libstock.events`` through at INFO even when not verbose.
    """
    shared = _shared_processors()

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("libstock").setLevel(logging.DEBUG if verbose else logging.WARNING)
    events_level = logging.NOTSET
    if events and not verbose:
        events_level = logging.INFO
    logging.getLogger(EVENTS_LOGGER).setLevel(events_level)
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
