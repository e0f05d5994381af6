"""Module resolution engine.

Resolution order for ``Resolver.resolve_module`` (first match wins):
1. moduleNameMapper rewrite (the mapped name goes through the steps below)
2. Core module: the name itself is returned
3. Module map duplicate registry
4. External resolver plugin, trusted verbatim when configured
5. Relative or absolute specifier: probed from the requiring file's directory
6. Bare name: probed in every directory of the search path, nearest first

A Resolver holds read-only configuration only. It performs no caching and
can be shared across threads.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from .candidates import CandidateProbe
from .core_modules import is_core_module
from .errors import ModuleNotFoundError
from .filesystem import FileSystem
from .filesystem import LocalFileSystem
from .module_map import ModuleMap
from .module_map import ModuleMapLike
from .name_mapper import NameMapper
from .options import FindOptions
from .options import ResolverOptions
from .path_ops import PathOps
from .path_ops import get_path_ops
from .search_paths import build_search_paths

logger = logging.getLogger(__name__)

NODE_PATH_ENV = "NODE_PATH"


def is_relative_specifier(specifier: str) -> bool:
    """True for "./x", "../x", "." and ".." (either separator)."""
    if specifier in (".", ".."):
        return True
    return specifier.startswith(("./", "../", ".\\", "..\\"))


def node_path_entries(
    path_ops: PathOps,
    fs: FileSystem | None = None,
    env: Mapping[str, str] | None = None,
    cwd: str | None = None,
) -> list[str]:
    """Extra search roots from the NODE_PATH environment variable.

    Entries are split on the convention's delimiter, blanks are dropped, and
    each entry is resolved against the real (symlink-free) working directory.
    """
    environ = os.environ if env is None else env
    entries = path_ops.split_list(environ.get(NODE_PATH_ENV))
    if not entries:
        return []

    fs = fs or LocalFileSystem()
    working_dir = cwd if cwd is not None else os.getcwd()
    real_cwd = fs.realpath(working_dir) or working_dir
    return [path_ops.resolve(entry, cwd=real_cwd) for entry in entries]


def find_node_module(
    specifier: str,
    options: FindOptions | Mapping[str, Any],
    *,
    fs: FileSystem | None = None,
    env: Mapping[str, str] | None = None,
    cwd: str | None = None,
) -> str | None:
    """Resolve a specifier without a Resolver instance.

    The effective ``paths`` are the NODE_PATH entries followed by
    ``options.paths``. With a resolver plugin configured, the plugin is called
    with ``(specifier, options_dict)`` and its result is returned as-is, even
    when it does not name an existing file. Errors raised by the plugin
    propagate unchanged.

    Args:
        specifier: Module specifier to resolve
        options: FindOptions or an equivalent dictionary (camelCase accepted)
        fs: Filesystem collaborator (default: local disk)
        env: Environment mapping (default: os.environ)
        cwd: Working directory (default: process cwd)

    Returns:
        Resolved path, or None when the default resolution finds nothing
    """
    if not isinstance(options, FindOptions):
        options = FindOptions.model_validate(options)

    path_ops = get_path_ops(options.path_convention)
    fs = fs or LocalFileSystem()
    paths = node_path_entries(path_ops, fs, env, cwd) + list(options.paths)

    if options.resolver is not None:
        logger.debug(f"[resolve] {specifier} -> plugin {getattr(options.resolver, '__name__', options.resolver)!s}")
        return options.resolver(specifier, options.plugin_options(paths))

    probe = CandidateProbe(fs, path_ops, options.extensions, options.platforms, options.browser)
    basedir = path_ops.resolve(options.basedir, cwd=cwd)

    if is_relative_specifier(specifier) or path_ops.is_absolute(specifier):
        found = probe.resolve_path(
            path_ops.resolve(basedir, specifier, cwd=cwd),
            directory_only=path_ops.names_directory(specifier),
        )
        logger.debug(f"[resolve] {specifier} from {basedir} -> {found or 'not found'}")
        return found

    for directory in build_search_paths(basedir, options.module_directory, path_ops, paths, cwd=cwd):
        found = probe.probe(directory, specifier)
        if found is not None:
            logger.debug(f"[resolve] {specifier} -> {found} (in {directory})")
            return found

    logger.debug(f"[resolve] {specifier} from {basedir} -> not found")
    return None


class Resolver:
    """Resolves module specifiers for one module map and one configuration.

    Args:
        module_map: Read-only mock/duplicate registries (default: empty)
        options: ResolverOptions or an equivalent dictionary
        fs: Filesystem collaborator (default: local disk)

    Raises:
        InvalidMappingError: A moduleNameMapper rule is malformed
    """

    find_node_module = staticmethod(find_node_module)

    def __init__(
        self,
        module_map: ModuleMapLike | None = None,
        options: ResolverOptions | Mapping[str, Any] | None = None,
        *,
        fs: FileSystem | None = None,
    ):
        if options is None:
            options = ResolverOptions()
        elif not isinstance(options, ResolverOptions):
            options = ResolverOptions.model_validate(options)

        self._module_map: ModuleMapLike = module_map if module_map is not None else ModuleMap()
        self._options = options
        self._fs: FileSystem = fs or LocalFileSystem()
        self._path_ops = get_path_ops(options.path_convention)
        self._mapper = NameMapper(options.module_name_mapper, root_dir=options.root_dir)

    @property
    def options(self) -> ResolverOptions:
        return self._options

    @property
    def path_ops(self) -> PathOps:
        return self._path_ops

    def is_core_module(self, name: str) -> bool:
        return is_core_module(name, self._options.has_core_modules)

    def get_module(self, name: str) -> str | None:
        """Path registered for ``name`` in the module map, if any."""
        return self._module_map.lookup_duplicate(name)

    def get_module_paths(self, from_dir: str) -> list[str]:
        """Directories probed for bare names required from ``from_dir``."""
        return build_search_paths(from_dir, self._options.module_directories, self._path_ops)

    def resolve_module(self, from_file: str, specifier: str) -> str:
        """Resolve ``specifier`` as required from ``from_file``.

        Returns:
            Absolute path, a core module name, or whatever a plugin returned

        Raises:
            ModuleNotFoundError: Nothing matched
        """
        dirname = self._path_ops.dirname(from_file)
        mapped = self._mapper.map(specifier)
        name = mapped.name if mapped else specifier

        module = self._resolve_from_dir(dirname, name)
        if module is None:
            raise ModuleNotFoundError(specifier, from_file, mapped_name=mapped.name if mapped else None)
        return module

    def resolve_module_or_none(self, from_file: str, specifier: str) -> str | None:
        """Like resolve_module, returning None instead of raising ModuleNotFoundError."""
        try:
            return self.resolve_module(from_file, specifier)
        except ModuleNotFoundError:
            return None

    def get_mock_module(self, from_file: str, name: str) -> str | None:
        """Path of the mock (or mapped substitute) for ``name``.

        Returns None when no mock is available; absence is not an error.
        """
        mock = self._module_map.lookup_mock(name)
        if mock:
            return mock

        dirname = self._path_ops.dirname(from_file)
        mapped = self._mapper.map(name)
        if mapped is not None:
            mock = self._module_map.lookup_mock(mapped.name)
            if mock:
                return mock
            return self.get_module(mapped.name) or self._find(mapped.name, dirname)

        if self._options.resolver is not None:
            # No rule matched: fall back to the plugin for the plain name
            return self.get_module(name) or self._find(name, dirname)

        return None

    def _resolve_from_dir(self, dirname: str, name: str) -> str | None:
        if self.is_core_module(name):
            logger.debug(f"[resolve] {name} -> core module")
            return name

        module = self.get_module(name)
        if module:
            logger.debug(f"[resolve] {name} -> module map ({module})")
            return module

        return self._find(name, dirname)

    def _find(self, name: str, basedir: str) -> str | None:
        options = FindOptions(
            basedir=basedir,
            browser=self._options.browser,
            extensions=self._options.extensions,
            platforms=self._options.platforms,
            module_directory=self._options.module_directories,
            paths=self._options.module_paths,
            resolver=self._options.resolver,
            root_dir=self._options.root_dir,
            path_convention=self._path_ops.name,
        )
        return find_node_module(name, options, fs=self._fs)

    def __repr__(self) -> str:
        return f"Resolver({self._path_ops.name}, extensions={self._options.extensions})"
