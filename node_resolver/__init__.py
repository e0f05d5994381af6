"""Node-style module resolution.

Resolves module specifiers (bare names, relative paths, core modules) to
files on disk, honoring extension and platform fallbacks, moduleNameMapper
rewrites, mock registries, and pluggable external resolvers under either
POSIX or Windows path conventions.
"""

from .core_modules import is_core_module
from .errors import InvalidMappingError
from .errors import ModuleNotFoundError
from .errors import PluginLoadError
from .errors import ResolverError
from .errors import SettingsError
from .module_map import ModuleMap
from .options import FindOptions
from .options import ModuleNameMapping
from .options import ResolverOptions
from .path_ops import get_path_ops
from .path_ops import posix
from .path_ops import win32
from .resolver import Resolver
from .resolver import find_node_module

__all__ = [
    "FindOptions",
    "InvalidMappingError",
    "ModuleMap",
    "ModuleNameMapping",
    "ModuleNotFoundError",
    "PluginLoadError",
    "Resolver",
    "ResolverError",
    "ResolverOptions",
    "SettingsError",
    "find_node_module",
    "get_path_ops",
    "is_core_module",
    "posix",
    "win32",
]
