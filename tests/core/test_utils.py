"""
Tests for utility functions.
"""

import os
import time
import tempfile

from texsync.core.utils import (
    ensure_dir,
    get_file_extension,
    has_extension,
    list_source_files,
    get_mtime_ns,
    is_stale,
    derive_target_path,
)

class TestUtils:
    """
    Tests for the utils module.
    """

    def setup_method(self):
        """
        Set up test environment.
        """
        self.temp_dir = tempfile.TemporaryDirectory()
        self.dir = self.temp_dir.name

    def teardown_method(self):
        """
        Clean up test environment.
        """
        self.temp_dir.cleanup()

    def touch(self, name, mtime_ns=None):
        path = os.path.join(self.dir, name)
        with open(path, "w") as f:
            f.write(name)
        if mtime_ns is not None:
            os.utime(path, ns=(mtime_ns, mtime_ns))
        return path

    def test_get_file_extension(self):
        assert get_file_extension("master/wall.SVG") == ".svg"
        assert get_file_extension("wall.png") == ".png"
        assert get_file_extension("Makefile") == ""

    def test_has_extension(self):
        assert has_extension("wall.PNG", [".png"])
        assert has_extension("wall.svg", [".SVG", ".png"])
        assert not has_extension("wall.svg.bak", [".svg"])

    def test_list_source_files_sorted_and_filtered(self):
        """
        Test that listing is filtered by extension and sorted by name.
        """
        for name in ["b.svg", "a.svg", "C.svg", "notes.txt", "a.png"]:
            self.touch(name)
        os.makedirs(os.path.join(self.dir, "folder.svg"))

        files = list_source_files(self.dir, [".svg"])

        assert [os.path.basename(path) for path in files] == ["C.svg", "a.svg", "b.svg"]
        assert all(os.path.dirname(path) == self.dir for path in files)

    def test_list_source_files_empty(self):
        assert list_source_files(self.dir, [".svg"]) == []

    def test_get_mtime_ns(self):
        path = self.touch("a.png", mtime_ns=1_000_000_000_000)

        assert get_mtime_ns(path) == 1_000_000_000_000
        assert get_mtime_ns(os.path.join(self.dir, "missing.png")) is None

    def test_is_stale(self):
        """
        Test staleness for missing, older, equal and newer targets.
        """
        now = time.time_ns()
        source = self.touch("a.svg", mtime_ns=now - 50_000_000_000)

        assert is_stale(source, os.path.join(self.dir, "missing.png"))

        older = self.touch("older.png", mtime_ns=now - 100_000_000_000)
        assert is_stale(source, older)

        equal = self.touch("equal.png", mtime_ns=now - 50_000_000_000)
        assert not is_stale(source, equal)

        newer = self.touch("newer.png", mtime_ns=now)
        assert not is_stale(source, newer)

    def test_derive_target_path(self):
        assert derive_target_path("/assets/master/wall.svg", "/assets", ".png") == os.path.join("/assets", "wall.png")
        assert derive_target_path("/assets/master/floor.png", "/assets", ".png") == os.path.join("/assets", "floor.png")
        assert derive_target_path("/a/b/x.y.svg", "/a", ".png") == os.path.join("/a", "x.y.png")

    def test_ensure_dir(self):
        path = os.path.join(self.dir, "out", "icons")

        assert ensure_dir(path) == path
        assert os.path.isdir(path)
        assert ensure_dir(path) == path
