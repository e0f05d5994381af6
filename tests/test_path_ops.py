"""Tests for platform path conventions."""

import pytest

from node_resolver.path_ops import PathOps
from node_resolver.path_ops import get_path_ops
from node_resolver.path_ops import host_path_ops
from node_resolver.path_ops import posix
from node_resolver.path_ops import win32


class TestPosix:
    def test_separators(self):
        assert posix.sep == "/"
        assert posix.delimiter == ":"

    def test_dirname(self):
        assert posix.dirname("/temp/project") == "/temp"
        assert posix.dirname("/temp/project/") == "/temp"
        assert posix.dirname("/") == "/"

    def test_join_normalizes(self):
        assert posix.join("/temp/project", "node_modules") == "/temp/project/node_modules"
        assert posix.join("/temp/project", "../lib", "./x") == "/temp/lib/x"
        assert posix.join("/", "node_modules") == "/node_modules"

    def test_resolve_uses_explicit_cwd(self):
        assert posix.resolve("lib", cwd="/work") == "/work/lib"
        assert posix.resolve("/abs", "rel", cwd="/work") == "/abs/rel"
        assert posix.resolve("/temp/project", cwd="/work") == "/temp/project"

    def test_is_absolute(self):
        assert posix.is_absolute("/root/path") is True
        assert posix.is_absolute("node_modules") is False

    def test_extname(self):
        assert posix.extname("/a/b.native.jsx") == ".jsx"
        assert posix.extname("/a/.bashrc") == ""


class TestWin32:
    def test_separators(self):
        assert win32.sep == "\\"
        assert win32.delimiter == ";"

    def test_dirname_of_drive_root_keeps_separator(self):
        assert win32.dirname("D:\\project") == "D:\\"
        assert win32.dirname("D:\\") == "D:\\"
        assert win32.dirname("D:\\a\\b") == "D:\\a"

    def test_join(self):
        assert win32.join("D:\\", "node_modules") == "D:\\node_modules"
        assert win32.join("D:\\project", "node_modules") == "D:\\project\\node_modules"
        assert win32.join("D:/project", "node_modules") == "D:\\project\\node_modules"

    def test_is_absolute(self):
        assert win32.is_absolute("C:\\path\\to\\node_modules") is True
        assert win32.is_absolute("\\temp\\project") is True
        assert win32.is_absolute("\\\\server\\share\\dir") is True
        assert win32.is_absolute("node_modules") is False
        assert win32.is_absolute("C:relative") is False

    def test_resolve_rooted_path_on_posix_style_cwd(self):
        # A posix cwd has no drive, so the result is drive-less
        assert win32.resolve("/temp/project", cwd="/work") == "\\temp\\project"

    def test_resolve_keeps_drive_of_cwd(self):
        assert win32.resolve("\\temp", cwd="C:\\work") == "C:\\temp"
        assert win32.resolve("lib", cwd="C:\\work") == "C:\\work\\lib"

    def test_is_root(self):
        assert win32.is_root("D:\\") is True
        assert win32.is_root("D:\\project") is False


def test_resolve_does_not_leak_between_conventions():
    before = posix.resolve("/temp/project", cwd="/")
    win32.resolve("/temp/project", cwd="/")
    assert posix.resolve("/temp/project", cwd="/") == before == "/temp/project"


@pytest.mark.parametrize(
    ("path_ops", "path", "expected"),
    [
        (posix, "lib/", True),
        (posix, "./lib/", True),
        (posix, ".", True),
        (posix, "../..", True),
        (posix, "a/.", True),
        (posix, "./lib", False),
        (posix, "../lib.js", False),
        (posix, "lib\\", False),
        (win32, "lib\\", True),
        (win32, "lib/", True),
        (win32, "a\\..", True),
        (win32, ".\\lib", False),
    ],
)
def test_names_directory(path_ops, path, expected):
    assert path_ops.names_directory(path) is expected


def test_split_list_drops_blanks():
    assert posix.split_list("a::b: :") == ["a", "b"]
    assert win32.split_list("C:\\a;;D:\\b") == ["C:\\a", "D:\\b"]
    assert posix.split_list(None) == []


class TestGetPathOps:
    def test_by_name(self):
        assert get_path_ops("posix") is posix
        assert get_path_ops("win32") is win32

    def test_passthrough(self):
        assert get_path_ops(win32) is win32

    def test_none_is_host(self):
        assert get_path_ops(None) is host_path_ops()
        assert isinstance(host_path_ops(), PathOps)

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown path convention"):
            get_path_ops("vms")  # type: ignore[arg-type]
