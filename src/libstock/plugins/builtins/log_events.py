"""Built-in plugin that records lending events as structured log lines."""

from __future__ import annotations

import structlog

from libstock.config.logging import EVENTS_LOGGER
from libstock.plugins.hookspecs import hookimpl


class LogEventsPlugin:
    """Emit ``book.borrowed`` / ``book.returned`` events via structlog."""

    def __init__(self, logger_name: str = EVENTS_LOGGER) -> None:
        self._log = structlog.get_logger(logger_name)

    @hookimpl
    def post_borrow(self, member_id: int, title: str) -> None:
        self._log.info("book.borrowed", member_id=member_id, title=title)

    @hookimpl
    def post_return(self, member_id: int, title: str) -> None:
        self._log.info("book.returned", member_id=member_id, title=title)
