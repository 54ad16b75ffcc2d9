"""Plugin discovery, rule collection, and event dispatch.

Discovery uses pluggy's setuptools entry-point loading for the
``stubargs.plugins`` group.
"""

from __future__ import annotations

import inspect
import logging

import pluggy

from stubargs.domain.rules import TypeLiteralRule
from stubargs.plugins.hookspecs import StubargsHookSpec

PROJECT_NAME = "stubargs"

hookimpl = pluggy.HookimplMarker(PROJECT_NAME)

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(StubargsHookSpec)
        self._loaded: bool = False

    def discover_and_load(self) -> list[str]:
        """Load entry-point plugins and return the registered plugin names."""
        self._pm.load_setuptools_entrypoints(f"{PROJECT_NAME}.plugins")
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

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def collect_rules(self, warnings: list[str] | None = None) -> list[TypeLiteralRule]:
        """Gather rules from every plugin's ``register_type_rules`` hook.

        A plugin that raises or returns something other than a list of
        rules is skipped with a warning.
        """
        rules: list[TypeLiteralRule] = []
        for plugin in self._pm.get_plugins():
            hook = getattr(plugin, "register_type_rules", None)
            if hook is None:
                continue
            plugin_name = self._pm.get_name(plugin) or plugin.__class__.__name__
            try:
                provided = hook()
            except Exception:
                logger.warning("Failed to collect rules from plugin %s", plugin_name, exc_info=True)
                if warnings is not None:
                    warnings.append(f"Plugin {plugin_name} failed to register rules")
                continue
            if provided is None:
                continue
            if not isinstance(provided, list) or not all(
                isinstance(r, TypeLiteralRule) for r in provided
            ):
                logger.warning("Plugin %s returned invalid rule registrations", plugin_name)
                if warnings is not None:
                    warnings.append(f"Plugin {plugin_name} returned invalid rules")
                continue
            rules.extend(provided)
        return rules

    def dispatch_post_insert(
        self, call_name: str, offset: int, inserted: str, warnings: list[str]
    ) -> None:
        try:
            self._pm.hook.post_insert(call_name=call_name, offset=offset, inserted=inserted)
        except Exception:
            logger.debug("post_insert dispatch failed", exc_info=True)
            warnings.append("Event dispatch failed for post_insert")

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a class directly, which leaves
        ``self`` unbound at dispatch time.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s", plugin_name, exc_info=True
                )
                continue
            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)
