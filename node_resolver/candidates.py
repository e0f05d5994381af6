"""Candidate file probing.

Given a base path, builds the ordered list of candidate files to test and
returns the first one that exists. Directories are entered through their
package descriptor (package.json) and then their index file.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence

from .filesystem import FileSystem
from .path_ops import PathOps

logger = logging.getLogger(__name__)

PACKAGE_DESCRIPTOR = "package.json"
INDEX_NAME = "index"


class CandidateProbe:
    """Probe candidate files for a base path.

    Candidate order (first existing file wins):
    1. the base path itself, when its extension is a configured one
    2. base + "." + platform + extension, for each platform then extension
    3. base + extension, for each extension
    If the base path is a directory, its package entry point is tried, then
    steps 2-3 against ``index`` inside it.
    """

    def __init__(
        self,
        fs: FileSystem,
        path_ops: PathOps,
        extensions: Sequence[str],
        platforms: Sequence[str] = (),
        browser: bool = False,
    ):
        self.fs = fs
        self.path_ops = path_ops
        self.extensions = list(extensions)
        self.platforms = list(platforms)
        self.browser = browser

    def candidates(self, base: str) -> list[str]:
        """Ordered candidate file paths for ``base``."""
        result: list[str] = []
        if self.path_ops.extname(base) in self.extensions:
            result.append(base)
        for platform in self.platforms:
            for ext in self.extensions:
                result.append(f"{base}.{platform}{ext}")
        for ext in self.extensions:
            result.append(f"{base}{ext}")
        return result

    def find_file(self, base: str) -> str | None:
        for candidate in self.candidates(base):
            if self.fs.is_file(candidate):
                return candidate
        return None

    def find_in_directory(self, directory: str, _visited: set[str] | None = None) -> str | None:
        """Resolve a directory through its package entry point or index file."""
        visited = _visited if _visited is not None else set()
        if directory in visited:
            return None
        visited.add(directory)

        entry = self._read_package_entry(directory)
        if entry:
            target = self.path_ops.join(directory, entry)
            found = self.find_file(target)
            if found is None and target != directory and self.fs.is_directory(target):
                found = self.find_in_directory(target, visited)
            if found is not None:
                return found
            logger.debug(f"[resolve:probe] package entry '{entry}' in {directory} not found")

        return self.find_file(self.path_ops.join(directory, INDEX_NAME))

    def resolve_path(self, target: str, directory_only: bool = False) -> str | None:
        """Resolve an absolute target as a file, then as a directory.

        With ``directory_only`` the file candidates are skipped.
        """
        found = None if directory_only else self.find_file(target)
        if found is None and self.fs.is_directory(target):
            found = self.find_in_directory(target)
        return found

    def probe(self, directory: str, base_name: str) -> str | None:
        """Resolve ``base_name`` inside ``directory``; None when nothing matches."""
        return self.resolve_path(
            self.path_ops.join(directory, base_name),
            directory_only=self.path_ops.names_directory(base_name),
        )

    def _read_package_entry(self, directory: str) -> str | None:
        descriptor = self.path_ops.join(directory, PACKAGE_DESCRIPTOR)
        if not self.fs.is_file(descriptor):
            return None

        try:
            data = json.loads(self.fs.read_text(descriptor))
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to read {descriptor}: {e}")
            return None

        if not isinstance(data, dict):
            return None

        if self.browser and isinstance(data.get("browser"), str):
            return data["browser"]
        main = data.get("main")
        return main if isinstance(main, str) and main else None

    def __repr__(self) -> str:
        return f"CandidateProbe(extensions={self.extensions}, platforms={self.platforms})"
