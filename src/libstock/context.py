"""AppContext — wires settings into a ready InventoryService.

Created once by the embedding application. Collaborators are built lazily
on first access so constructing the context never touches the database.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from libstock.config.logging import configure_logging

if TYPE_CHECKING:
    from libstock.config.settings import LibstockSettings
    from libstock.plugins.manager import PluginManager
    from libstock.services.inventory import InventoryService
    from libstock.services.ports import BookStore, MemberValidator, Notifier

logger = logging.getLogger(__name__)


class AppContext:
    """Owns the configured store, member validator, and notifier."""

    def __init__(self, settings: LibstockSettings) -> None:
        self.settings = settings
        self._store: BookStore | None = None
        self._members: MemberValidator | None = None
        self._notifier: Notifier | None = None
        self._inventory: InventoryService | None = None

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            events=settings.notify.log_events,
        )

    @property
    def store(self) -> BookStore:
        if self._store is None:
            self._store = self._build_store()
        return self._store

    @property
    def members(self) -> MemberValidator:
        if self._members is None:
            from libstock.infrastructure.members import AllowListMemberValidator

            cfg = self.settings.members
            self._members = AllowListMemberValidator(cfg.allowed, allow_all=cfg.allow_all)
        return self._members

    @property
    def notifier(self) -> Notifier:
        if self._notifier is None:
            from libstock.plugins.notifier import PluginNotifier

            self._notifier = PluginNotifier(self._build_plugin_manager())
        return self._notifier

    @property
    def inventory(self) -> InventoryService:
        """The inventory service (created lazily on first access)."""
        if self._inventory is None:
            from libstock.services.inventory import InventoryService

            self._inventory = InventoryService(self.store, self.members, self.notifier)
        return self._inventory

    def close(self) -> None:
        """Release the store's resources, if it holds any."""
        close = getattr(self._store, "close", None)
        if close is not None:
            close()
        self._store = None
        self._inventory = None

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _build_store(self) -> BookStore:
        cfg = self.settings.store
        if cfg.backend == "sqlite":
            from libstock.infrastructure.database import SqlBookStore, init_database

            db_path = self.settings.db_path
            logger.debug("Opening SQLite book store at %s", db_path)
            return SqlBookStore(init_database(db_path), per_title_locking=cfg.per_title_locking)

        from libstock.infrastructure.memory import InMemoryBookStore

        return InMemoryBookStore(per_title_locking=cfg.per_title_locking)

    def _build_plugin_manager(self) -> PluginManager:
        from libstock.plugins.builtins.log_events import LogEventsPlugin
        from libstock.plugins.manager import PluginManager

        pm = PluginManager()
        if self.settings.notify.discover_plugins:
            pm.discover_and_load()
        if self.settings.notify.log_events:
            pm.register_plugin(LogEventsPlugin(), name="log-events-builtin")
        return pm
