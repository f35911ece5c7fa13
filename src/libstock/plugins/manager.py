"""Plugin discovery and loading.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
Built-in plugins are registered directly by :class:`~libstock.context.AppContext`.
"""

from __future__ import annotations

import inspect
import logging

import pluggy

from libstock.plugins.hookspecs import LibstockHookSpec

PROJECT_NAME = "libstock"
ENTRY_POINT_GROUP = "libstock.plugins"
_IMPL_MARKER = f"{PROJECT_NAME}_impl"

logger = logging.getLogger(__name__)


class PluginManager:
    """Owns the pluggy manager behind :class:`~libstock.plugins.notifier.PluginNotifier`."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(LibstockHookSpec)

    def discover_and_load(self) -> list[str]:
        """Load plugins published under the ``libstock.plugins`` entry-point group.

        Returns the names of all registered plugins afterwards.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._instantiate_entry_point_classes()
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly (e.g. built-in plugins)."""
        resolved_name = name or type(plugin).__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or type(p).__name__ for p in self._pm.get_plugins()]

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _instantiate_entry_point_classes(self) -> None:
        """Swap plugin classes registered by entry points for instances.

        A class left registered would be dispatched with ``self`` unbound.
        Classes without any ``@hookimpl`` method are dropped unconstructed.
        """
        classes = [p for p in self._pm.get_plugins() if inspect.isclass(p)]
        for cls in classes:
            name = self._pm.get_name(cls) or cls.__name__
            self._pm.unregister(cls)

            if not _declares_hooks(cls):
                logger.debug("Skipping entry-point class %s: no hook implementations", name)
                continue
            try:
                instance = cls()
            except Exception:
                logger.warning("Failed to instantiate entry-point plugin %s", name, exc_info=True)
                continue

            self._pm.register(instance, name=name)
            logger.debug("Instantiated entry-point plugin: %s", name)


def _declares_hooks(cls: type) -> bool:
    """True if any public attribute of *cls* carries the ``libstock_impl`` marker."""
    return any(
        callable(attr) and getattr(attr, _IMPL_MARKER, None)
        for name, attr in inspect.getmembers(cls)
        if not name.startswith("_")
    )
