"""Plugin discovery and loading.

Discovery: entry points in the ``notekit.plugins`` group, loaded through
pluggy's setuptools entry-point support. Plugins may also be registered
directly. Capabilities: extra field types.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

import pluggy

from notekit.domain.fieldtypes import FieldType
from notekit.plugins.hookspecs import NotekitHookSpec

if TYPE_CHECKING:
    from notekit.domain.catalog import TypeCatalog

PROJECT_NAME = "notekit"
ENTRY_POINT_GROUP = "notekit.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading and field type collection."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(NotekitHookSpec)
        self._loaded: bool = False

    def discover_and_load(self, *, disabled: list[str] | None = None) -> list[str]:
        """Load entry-point plugins, skipping any named in *disabled*.

        Returns the names of all registered plugins.
        """
        for name in disabled or []:
            self._pm.set_blocked(name)
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def get_plugins(self) -> list[object]:
        return list(self._pm.get_plugins())

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    # ------------------------------------------------------------------
    # Field types
    # ------------------------------------------------------------------

    def collect_field_types(self) -> list[FieldType]:
        """Gather field types from every plugin.

        A plugin that raises or returns something other than a list of
        :class:`FieldType` is skipped with a warning.
        """
        collected: list[FieldType] = []
        for plugin in self._pm.get_plugins():
            plugin_name = self._pm.get_name(plugin) or plugin.__class__.__name__
            collected.extend(self._plugin_field_types(plugin, plugin_name))
        return collected

    def install_field_types(self, catalog: TypeCatalog) -> list[str]:
        """Register every plugin field type in *catalog*; return their type strings."""
        installed: list[str] = []
        for field_type in self.collect_field_types():
            catalog.register(field_type)
            installed.append(field_type.type_string)
        return installed

    @staticmethod
    def _plugin_field_types(plugin: object, plugin_name: str) -> list[FieldType]:
        hook = getattr(plugin, "register_field_types", None)
        if hook is None:
            return []

        try:
            types = hook()
        except Exception:
            logger.warning("Failed to collect field types from plugin %s", plugin_name, exc_info=True)
            return []

        if types is None:
            return []
        if not isinstance(types, (list, tuple)):
            logger.warning("Plugin %s returned non-list field type registrations", plugin_name)
            return []

        valid: list[FieldType] = []
        for field_type in types:
            if isinstance(field_type, FieldType):
                valid.append(field_type)
            else:
                logger.warning("Skipping field type %r from plugin %s", field_type, plugin_name)
        return valid

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly; hook
        calls against a class leave ``self`` unbound.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            if not self._has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)

            try:
                instance = plugin()
            except Exception:
                logger.warning("Failed to instantiate entry-point plugin %s", plugin_name, exc_info=True)
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Check whether *cls* has any methods decorated with ``@hookimpl``.

        ``HookimplMarker("notekit")`` sets a ``notekit_impl`` attribute on
        decorated methods.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, "notekit_impl", None):
                return True
        return False
