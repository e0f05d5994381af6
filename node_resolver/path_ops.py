"""Platform path conventions as explicit strategy objects.

Two conventions are available on every host:
- posix: forward slashes, single root "/"
- win32: backslashes, drive letters and UNC roots

The resolver receives one of these at construction and threads it through
every path computation. Nothing here touches process-wide path functions,
so resolvers with different conventions can run side by side.
"""

from __future__ import annotations

import ntpath
import os
import posixpath
from types import ModuleType
from typing import Literal

PathConvention = Literal["posix", "win32"]


class PathOps:
    """Path arithmetic for one platform convention.

    Wraps the stdlib flavour module (``posixpath`` or ``ntpath``) so results
    are identical whatever the host OS is.
    """

    def __init__(self, name: PathConvention, flavour: ModuleType):
        self.name = name
        self._flavour = flavour

    @property
    def sep(self) -> str:
        return self._flavour.sep

    @property
    def delimiter(self) -> str:
        """Separator used in path-list environment variables such as NODE_PATH."""
        return self._flavour.pathsep

    def normalize(self, path: str) -> str:
        return self._flavour.normpath(path)

    def join(self, *parts: str) -> str:
        """Join path segments and normalize the result.

        Empty segments are skipped. An absolute segment restarts the path,
        except that on win32 a rooted segment without a drive keeps the
        drive of what came before.
        """
        segments = [p for p in parts if p]
        if not segments:
            return "."
        return self._flavour.normpath(self._flavour.join(*segments))

    def dirname(self, path: str) -> str:
        """Parent directory of ``path``.

        The parent of a root is the root itself, separator included
        ("/" on posix, "D:\\" on win32).
        """
        return self._flavour.dirname(self._flavour.normpath(path))

    def basename(self, path: str) -> str:
        return self._flavour.basename(self._flavour.normpath(path))

    def extname(self, path: str) -> str:
        return self._flavour.splitext(self.basename(path))[1]

    def is_absolute(self, path: str) -> bool:
        if self.name == "win32":
            # Rooted paths without a drive ("\\temp") count as absolute,
            # as do UNC paths.
            drive, rest = ntpath.splitdrive(path)
            if drive.startswith(("\\\\", "//")):
                return True
            return rest[:1] in ("\\", "/")
        return self._flavour.isabs(path)

    def is_root(self, path: str) -> bool:
        return self.dirname(path) == self.normalize(path)

    def names_directory(self, path: str) -> bool:
        """True when ``path`` can only denote a directory.

        That is a trailing separator, or a final "." or ".." segment.
        Normalization drops these markers, so callers check before joining.
        """
        separators = tuple(s for s in (self._flavour.sep, self._flavour.altsep) if s)
        if path.endswith(separators):
            return True
        last = path
        for sep in separators:
            last = last.rsplit(sep, 1)[-1]
        return last in (".", "..")

    def resolve(self, *parts: str, cwd: str | None = None) -> str:
        """Resolve segments to an absolute, normalized path.

        Segments are applied left to right on top of ``cwd`` (defaults to the
        process working directory). On win32 a drive-less rooted result keeps
        the drive of ``cwd`` when it has one.
        """
        base = cwd if cwd is not None else os.getcwd()
        segments = [p for p in parts if p]
        return self._flavour.normpath(self._flavour.join(base, *segments))

    def split_list(self, value: str | None) -> list[str]:
        """Split a path-list string on this convention's delimiter, dropping blanks."""
        if not value:
            return []
        return [entry for entry in value.split(self.delimiter) if entry.strip()]

    def __repr__(self) -> str:
        return f"PathOps({self.name})"


posix = PathOps("posix", posixpath)
win32 = PathOps("win32", ntpath)

PATH_CONVENTIONS: dict[str, PathOps] = {
    "posix": posix,
    "win32": win32,
}


def host_path_ops() -> PathOps:
    """Convention of the running host."""
    return win32 if os.name == "nt" else posix


def get_path_ops(convention: PathConvention | PathOps | None = None) -> PathOps:
    """Select a path convention by name.

    Args:
        convention: "posix", "win32", an existing PathOps, or None for the host

    Returns:
        PathOps instance

    Raises:
        ValueError: Unknown convention name
    """
    if convention is None:
        return host_path_ops()
    if isinstance(convention, PathOps):
        return convention
    try:
        return PATH_CONVENTIONS[convention]
    except KeyError:
        raise ValueError(
            f"Unknown path convention '{convention}'. Available: {', '.join(sorted(PATH_CONVENTIONS))}"
        ) from None
