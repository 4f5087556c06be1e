"""Plugin discovery and loading.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints,
plus local directory discovery from ``.presence/plugins/``.
Capability: contributing per-type existence checks to the registry.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from collections.abc import Iterable
from pathlib import Path

import pluggy

from presence.plugins.hookspecs import PROJECT_NAME, PresenceHookSpec

ENTRY_POINT_GROUP = "presence.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and existence-check registration."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(PresenceHookSpec)
        self._loaded: bool = False
        self._contributed: dict[str, list[type]] = {}

    def discover_and_load(
        self,
        *,
        local_dir: Path | None = None,
        disabled: Iterable[str] = (),
    ) -> list[str]:
        """Discover plugins from entry points and an optional local directory.

        Uses pluggy's native setuptools entry_point discovery for the
        ``presence.plugins`` group, then scans *local_dir* for single-file
        Python plugins.  Names listed in *disabled* are blocked before
        loading.  Every loaded plugin's existence checks are then
        registered.

        Returns a list of loaded plugin names.
        """
        for plugin_name in disabled:
            self._pm.set_blocked(plugin_name)
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        if local_dir is not None:
            self._discover_local(local_dir)
        self._register_existence_checks()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        if self._pm.register(plugin, name=resolved_name) is None:
            logger.debug("Plugin %s is disabled", resolved_name)
            return
        if self._loaded:
            self._register_plugin_checks(plugin, resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        """Unregister a plugin instance."""
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        """Access the hook relay."""
        return self._pm.hook

    def get_plugins(self) -> list[object]:
        """Return all registered plugins."""
        return list(self._pm.get_plugins())

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def contributed_types(self) -> dict[str, list[type]]:
        """Return plugin name -> classes whose checks that plugin registered."""
        return {name: list(types) for name, types in self._contributed.items()}

    # ------------------------------------------------------------------
    # Local directory discovery
    # ------------------------------------------------------------------

    def _discover_local(self, local_dir: Path) -> None:
        """Scan *local_dir* for single-file Python plugins.

        Each ``*.py`` file (excluding ``_``-prefixed names) is loaded as a
        module. Classes inside the module that carry pluggy hookimpl-decorated
        methods are instantiated and registered.

        Errors are logged as warnings but never raised.
        """
        if not local_dir.is_dir():
            return

        for py_file in sorted(local_dir.glob("*.py")):
            if py_file.name.startswith("_"):
                continue
            module_name = f"presence_local_plugin_{py_file.stem}"
            if self._pm.is_blocked(module_name):
                continue
            try:
                spec = importlib.util.spec_from_file_location(module_name, py_file)
                if spec is None or spec.loader is None:
                    logger.warning("Could not create module spec for %s", py_file)
                    continue
                module = importlib.util.module_from_spec(spec)
                sys.modules[module_name] = module
                spec.loader.exec_module(module)
            except Exception:
                logger.warning("Failed to load local plugin %s", py_file, exc_info=True)
                sys.modules.pop(module_name, None)
                continue

            for _attr_name, obj in inspect.getmembers(module, inspect.isclass):
                if obj.__module__ != module_name:
                    continue  # imported
                if not self._has_hook_impls(obj):
                    continue
                try:
                    instance = obj()
                    self.register_plugin(instance, name=module_name)
                    logger.debug("Loaded local plugin %s from %s", obj.__name__, py_file)
                except Exception:
                    logger.warning(
                        "Failed to instantiate plugin class %s from %s",
                        obj.__name__,
                        py_file,
                        exc_info=True,
                    )

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
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
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)

    # ------------------------------------------------------------------
    # Existence-check registration
    # ------------------------------------------------------------------

    def _register_existence_checks(self) -> None:
        for plugin in self._pm.get_plugins():
            plugin_name = self._pm.get_name(plugin) or plugin.__class__.__name__
            self._register_plugin_checks(plugin, plugin_name)

    def _register_plugin_checks(self, plugin: object, plugin_name: str) -> None:
        """Register existence checks exposed by a single plugin instance."""
        from presence.domain.registry import register_existence_check

        hook = getattr(plugin, "register_existence_checks", None)
        if hook is None:
            return

        try:
            check_map = hook()
        except Exception:
            logger.warning(
                "Failed to collect existence checks from plugin %s",
                plugin_name,
                exc_info=True,
            )
            return

        if check_map is None:
            return
        if not isinstance(check_map, dict):
            logger.warning(
                "Plugin %s returned non-dict existence check registrations",
                plugin_name,
            )
            return

        registered = self._contributed.setdefault(plugin_name, [])
        for cls, check in check_map.items():
            try:
                register_existence_check(cls, check)
            except (TypeError, ValueError):
                logger.warning(
                    "Skipping existence check registration %r from plugin %s",
                    cls,
                    plugin_name,
                    exc_info=True,
                )
                continue
            if cls not in registered:
                registered.append(cls)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Check whether *cls* has any methods decorated with ``@hookimpl``.

        Pluggy's ``HookimplMarker("presence")`` sets a ``presence_impl``
        attribute on decorated methods.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, "presence_impl", None):
                return True
        return False
