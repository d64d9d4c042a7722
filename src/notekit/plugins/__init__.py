"""Extension layer: plugin system via pluggy.

Discovery: entry_points (pip-installed) in the ``notekit.plugins`` group.
INVARIANT: Plugin failures are warnings, never errors.
"""

from notekit.plugins.hookspecs import hookimpl
from notekit.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]
