"""Filesystem collaborator used by candidate probing."""

from __future__ import annotations

import os
from typing import Protocol


class FileSystem(Protocol):
    """Read-only filesystem primitives the resolver relies on.

    Probing only calls is_file and is_directory; exists completes the
    collaborator shape that embedders and external resolvers share.
    """

    def exists(self, path: str) -> bool: ...

    def is_file(self, path: str) -> bool: ...

    def is_directory(self, path: str) -> bool: ...

    def realpath(self, path: str) -> str: ...

    def read_text(self, path: str) -> str: ...


class LocalFileSystem:
    """Filesystem backed by the local disk."""

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    def realpath(self, path: str) -> str:
        """Resolve symlinks, falling back to the input when that fails."""
        try:
            return os.path.realpath(path)
        except OSError:
            return path

    def read_text(self, path: str) -> str:
        with open(path, encoding="utf-8") as f:
            return f.read()

    def __repr__(self) -> str:
        return "LocalFileSystem()"
