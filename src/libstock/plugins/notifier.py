"""PluginNotifier — the Notifier port on top of pluggy hooks.

Hook failures are not caught here; they reach the caller of the
inventory operation unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from libstock.plugins.manager import PluginManager


class PluginNotifier:
    """Fans each lending event out to every registered plugin."""

    def __init__(self, plugin_manager: PluginManager) -> None:
        self._pm = plugin_manager

    @property
    def plugin_manager(self) -> PluginManager:
        return self._pm

    def notify_borrow(self, member_id: int, title: str) -> None:
        self._pm.hook.post_borrow(member_id=member_id, title=title)

    def notify_return(self, member_id: int, title: str) -> None:
        self._pm.hook.post_return(member_id=member_id, title=title)
