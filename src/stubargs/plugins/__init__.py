"""Extension layer — plugin system via pluggy.

Discovery: entry_points (pip-installed) under ``stubargs.plugins``.
INVARIANT: Plugin failures are warnings, never errors.
"""

from stubargs.plugins.manager import PluginManager, hookimpl

__all__ = ["PluginManager", "hookimpl"]
