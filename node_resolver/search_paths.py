"""Search path construction for bare module names.

Walks from a starting directory up to the filesystem root and combines each
level with the configured module directories. Nearer directories always come
before farther ones, so locally installed modules shadow global ones.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from collections.abc import Iterator

from .path_ops import PathOps

logger = logging.getLogger(__name__)

DEFAULT_MODULE_DIRECTORIES = ("node_modules",)


def iter_ancestors(start: str, path_ops: PathOps) -> Iterator[str]:
    """Yield ``start`` and each of its ancestors, ending with the root."""
    current = path_ops.normalize(start)
    while True:
        yield current
        parent = path_ops.dirname(current)
        if parent == current:
            return
        current = parent


def build_search_paths(
    from_dir: str,
    module_directories: Iterable[str] | None,
    path_ops: PathOps,
    paths: Iterable[str] | None = None,
    cwd: str | None = None,
) -> list[str]:
    """Build the ordered list of directories to probe for a bare name.

    Absolute entries of ``module_directories`` are fixed search roots: they
    are emitted once, at the nearest level, in their configured position
    among the relative entries. Relative entries are joined onto every
    ancestor of ``from_dir`` including the root.

    Args:
        from_dir: Directory the lookup starts from (made absolute first)
        module_directories: Directory names or absolute paths (default: node_modules)
        path_ops: Path convention to use
        paths: Extra directories appended after the walked ones
        cwd: Working directory used to make ``from_dir`` absolute

    Returns:
        De-duplicated list of directories in probe order
    """
    modules = list(module_directories) if module_directories else list(DEFAULT_MODULE_DIRECTORIES)
    start = path_ops.resolve(from_dir, cwd=cwd)

    result: list[str] = []
    seen: set[str] = set()

    def emit(directory: str) -> None:
        if directory not in seen:
            seen.add(directory)
            result.append(directory)

    for level_index, level in enumerate(iter_ancestors(start, path_ops)):
        for module_dir in modules:
            if path_ops.is_absolute(module_dir):
                if level_index == 0:
                    emit(path_ops.normalize(module_dir))
            else:
                emit(path_ops.join(level, module_dir))

    for extra in paths or ():
        emit(extra)

    logger.debug(f"[resolve:paths] {from_dir} -> {len(result)} search directories")
    return result
