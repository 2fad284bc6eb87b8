"""Tests for archive_reader module."""

import io
import zipfile

import pytest

from ArcTree.archive_reader import ArchiveError, read_zip_entries
from ArcTree.models import PathEntry
from ArcTree.tree_builder import TreeBuilder


def _zip_bytes(members: dict[str, bytes]) -> io.BytesIO:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, data in members.items():
            archive.writestr(name, data)
    buffer.seek(0)
    return buffer


class TestReadZipEntries:
    def test_files_and_directories(self):
        buffer = _zip_bytes({"docs/": b"", "docs/index.md": b"hello", "setup.cfg": b"x"})
        assert read_zip_entries(buffer) == [
            PathEntry("docs/", is_directory=True, size=0),
            PathEntry("docs/index.md", size=5),
            PathEntry("setup.cfg", size=1),
        ]

    def test_keeps_archive_order(self):
        buffer = _zip_bytes({"b.txt": b"", "a/": b"", "a/c.txt": b""})
        assert [e.path for e in read_zip_entries(buffer)] == ["b.txt", "a/", "a/c.txt"]

    def test_reads_from_path(self, tmp_path):
        target = tmp_path / "sample.zip"
        target.write_bytes(_zip_bytes({"one.txt": b"1"}).getvalue())
        assert read_zip_entries(target) == [PathEntry("one.txt", size=1)]

    def test_slashed_names_build_five_roots(self):
        names = [
            "directory/file.txt",
            "directory/",
            "a/directory/d",
            "a/directory/e",
            "directory/f/f",
            "directory/f/g",
            "h",
            "h///i",
        ]
        buffer = _zip_bytes({name: b"" for name in names})
        roots = TreeBuilder().build_roots(read_zip_entries(buffer))
        assert [r.path for r in roots] == [
            "a/directory/d",
            "a/directory/e",
            "directory/",
            "h",
            "h///i",
        ]
        assert len(roots[2].children) == 3


class TestErrors:
    def test_not_a_zip(self):
        with pytest.raises(ArchiveError, match="Not a readable ZIP archive"):
            read_zip_entries(io.BytesIO(b"definitely not a zip"))

    def test_missing_file(self, tmp_path):
        with pytest.raises(ArchiveError, match="Cannot open archive"):
            read_zip_entries(tmp_path / "missing.zip")
