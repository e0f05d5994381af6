"""Settings loading for resolver configuration.

Settings live in YAML files, searched in precedence order:
- an explicit path (e.g. ``--config``)
- project: .node-resolver/settings.yaml
- user: ~/.node-resolver/settings.yaml

Example::

    resolver:
      extensions: [".js", ".jsx"]
      platforms: [native]
      moduleDirectories: [node_modules, /opt/shared/node_modules]
      moduleNameMapper:
        "^@/(.*)$": "<rootDir>/src/$1"
      resolver: my_project.resolve:custom_resolver
    mocks:
      fs: /project/__mocks__/fs.js
    duplicates: {}
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import PluginLoadError
from .errors import SettingsError
from .filesystem import FileSystem
from .module_map import ModuleMap
from .options import ResolverOptions
from .options import ResolverPlugin
from .resolver import Resolver

logger = logging.getLogger(__name__)

SETTINGS_DIR = ".node-resolver"
SETTINGS_FILE = "settings.yaml"


def get_settings_search_paths() -> list[Path]:
    """Settings files in precedence order (project first, then user)."""
    return [
        Path.cwd() / SETTINGS_DIR / SETTINGS_FILE,
        Path.home() / SETTINGS_DIR / SETTINGS_FILE,
    ]


def load_resolver_plugin(reference: str) -> ResolverPlugin:
    """Import a resolver plugin from a ``package.module:function`` reference.

    A dotted ``package.module.function`` form is accepted as well.

    Raises:
        PluginLoadError: Module or attribute missing, or not callable
    """
    if ":" in reference:
        module_name, _, attr = reference.partition(":")
    else:
        module_name, _, attr = reference.rpartition(".")

    if not module_name or not attr:
        raise PluginLoadError(reference, "expected 'package.module:function'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise PluginLoadError(reference, str(e)) from e

    plugin = getattr(module, attr, None)
    if plugin is None:
        raise PluginLoadError(reference, f"module '{module_name}' has no attribute '{attr}'")
    if not callable(plugin):
        raise PluginLoadError(reference, f"'{attr}' is not callable")

    logger.debug(f"Loaded resolver plugin {reference}")
    return plugin


def _normalize_mapper(value: Any) -> list[dict[str, Any]]:
    """Accept moduleNameMapper as a list of rules or as a regex -> moduleName mapping."""
    if value is None:
        return []
    if isinstance(value, Mapping):
        return [{"regex": regex, "moduleName": name} for regex, name in value.items()]
    return list(value)


class ResolverSettings:
    """Resolver configuration read from a settings file.

    Args:
        data: Parsed settings dictionary
        path: File the settings came from, if any
    """

    def __init__(self, data: Mapping[str, Any] | None = None, path: Path | None = None):
        self.data: dict[str, Any] = dict(data or {})
        self.path = path

    @classmethod
    def load(cls, path: Path | str | None = None) -> ResolverSettings:
        """Load settings from ``path`` or the first existing default location.

        Returns empty settings when no file exists and no path was given.

        Raises:
            SettingsError: File missing (explicit path), unreadable, or not a mapping
        """
        if path is not None:
            candidates = [Path(path)]
            if not candidates[0].exists():
                raise SettingsError(str(path), "file not found")
        else:
            candidates = [p for p in get_settings_search_paths() if p.exists()]

        if not candidates:
            logger.debug("No resolver settings found, using defaults")
            return cls()

        settings_path = candidates[0]
        try:
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise SettingsError(str(settings_path), str(e)) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise SettingsError(str(settings_path), "top level must be a mapping")

        logger.debug(f"Loaded resolver settings from {settings_path}")
        return cls(data, settings_path)

    @property
    def default_root_dir(self) -> str | None:
        """Project root implied by the settings file location."""
        if self.path is None:
            return None
        parent = self.path.resolve().parent
        if parent.name == SETTINGS_DIR:
            parent = parent.parent
        return str(parent)

    def resolver_options(self, **overrides: Any) -> ResolverOptions:
        """Build ResolverOptions from the ``resolver`` section.

        Args:
            **overrides: Field values taking precedence over the file
                (None values are ignored)

        Raises:
            SettingsError: The section fails validation
            PluginLoadError: A string ``resolver`` reference cannot be loaded
        """
        section = dict(self.data.get("resolver") or {})

        if "moduleNameMapper" in section:
            section["moduleNameMapper"] = _normalize_mapper(section["moduleNameMapper"])
        if "module_name_mapper" in section:
            section["module_name_mapper"] = _normalize_mapper(section["module_name_mapper"])

        if isinstance(section.get("resolver"), str):
            section["resolver"] = load_resolver_plugin(section["resolver"])

        if "rootDir" not in section and "root_dir" not in section and self.default_root_dir:
            section["rootDir"] = self.default_root_dir

        try:
            options = ResolverOptions.model_validate(section)
        except ValidationError as e:
            raise SettingsError(str(self.path or "<settings>"), str(e)) from e

        updates = {key: value for key, value in overrides.items() if value is not None}
        if updates:
            options = options.model_copy(update=updates)
        return options

    def module_map(self) -> ModuleMap:
        return ModuleMap.from_dict(self.data)

    def create_resolver(self, fs: FileSystem | None = None, **overrides: Any) -> Resolver:
        """Resolver bound to these settings."""
        return Resolver(self.module_map(), self.resolver_options(**overrides), fs=fs)

    def __repr__(self) -> str:
        return f"ResolverSettings({self.path or 'defaults'})"
