"""Pytest configuration and shared fixtures for resolver tests."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from node_resolver.path_ops import PathOps


class FakeFileSystem:
    """In-memory filesystem keyed by paths in a given convention."""

    def __init__(self, files: dict[str, str], path_ops: PathOps):
        self.files = dict(files)
        self.directories: set[str] = set()
        for path in self.files:
            parent = path_ops.dirname(path)
            while parent not in self.directories:
                self.directories.add(parent)
                grandparent = path_ops.dirname(parent)
                if grandparent == parent:
                    break
                parent = grandparent

    def exists(self, path: str) -> bool:
        return self.is_file(path) or self.is_directory(path)

    def is_file(self, path: str) -> bool:
        return path in self.files

    def is_directory(self, path: str) -> bool:
        return path in self.directories

    def realpath(self, path: str) -> str:
        return path

    def read_text(self, path: str) -> str:
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(path) from None


@pytest.fixture
def fake_fs():
    """Factory for in-memory filesystems."""
    return FakeFileSystem


@pytest.fixture
def user_resolver():
    """Resolver plugin double that always answers 'module'."""
    return MagicMock(return_value="module")


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Create a small project tree.

    Creates:
    - src/index.js, src/util.js
    - src/__mocks__/mockJsDependency.js
    - src/__mocks__/mockJsxDependency.jsx (+ .native.jsx)
    - node_modules/left-pad/package.json (main: lib/pad.js)
    - node_modules/shadowed/index.js
    - src/node_modules/shadowed/index.js (nearer, wins)
    """
    src = tmp_path / "src"
    mocks = src / "__mocks__"
    mocks.mkdir(parents=True)
    (src / "index.js").write_text("module.exports = {};")
    (src / "util.js").write_text("module.exports = {};")
    (mocks / "mockJsDependency.js").write_text("")
    (mocks / "mockJsxDependency.jsx").write_text("")
    (mocks / "mockJsxDependency.native.jsx").write_text("")

    left_pad = tmp_path / "node_modules" / "left-pad"
    (left_pad / "lib").mkdir(parents=True)
    (left_pad / "package.json").write_text('{"name": "left-pad", "main": "lib/pad.js"}')
    (left_pad / "lib" / "pad.js").write_text("")

    far = tmp_path / "node_modules" / "shadowed"
    far.mkdir(parents=True)
    (far / "index.js").write_text("")
    near = src / "node_modules" / "shadowed"
    near.mkdir(parents=True)
    (near / "index.js").write_text("")

    return tmp_path
