"""Extension layer — lending notifications via pluggy.

Discovery: entry_points (pip-installed) in the ``libstock.plugins`` group.
"""

from libstock.plugins.manager import PluginManager
from libstock.plugins.notifier import PluginNotifier

__all__ = ["PluginManager", "PluginNotifier"]
