"""Tests for the local filesystem collaborator."""

from pathlib import Path

from node_resolver.filesystem import LocalFileSystem


def test_primitives(tmp_path: Path):
    fs = LocalFileSystem()
    (tmp_path / "pkg").mkdir()
    (tmp_path / "pkg" / "index.js").write_text("module.exports = 1;")
    file_path = str(tmp_path / "pkg" / "index.js")

    assert fs.exists(file_path)
    assert fs.exists(str(tmp_path / "pkg"))
    assert not fs.exists(str(tmp_path / "missing.js"))
    assert fs.is_file(file_path) and not fs.is_directory(file_path)
    assert fs.is_directory(str(tmp_path / "pkg")) and not fs.is_file(str(tmp_path / "pkg"))
    assert fs.read_text(file_path) == "module.exports = 1;"


def test_realpath_follows_symlinks(tmp_path: Path):
    target = tmp_path / "real"
    target.mkdir()
    link = tmp_path / "link"
    link.symlink_to(target, target_is_directory=True)

    assert LocalFileSystem().realpath(str(link)) == str(target.resolve())
