"""Tests for scoped file helpers"""

import pytest

from fptour_app.utils.files import read_all_text, write_all_text


class TestFiles:
    """Test read_all_text and write_all_text"""

    def test_round_trip(self, tmp_path):
        """Test written text reads back unchanged"""
        path = write_all_text(tmp_path / "page.html", "<p>café</p>")
        assert read_all_text(path) == "<p>café</p>"

    def test_creates_parent_dirs(self, tmp_path):
        """Test missing directories are created"""
        path = write_all_text(tmp_path / "a" / "b" / "page.html", "x")
        assert path.exists()

    def test_no_parent_dirs(self, tmp_path):
        """Test create_dirs=False leaves missing directories missing"""
        with pytest.raises(FileNotFoundError):
            write_all_text(tmp_path / "missing" / "page.html", "x", create_dirs=False)

    def test_overwrites(self, tmp_path):
        """Test writing replaces previous contents"""
        path = tmp_path / "page.html"
        write_all_text(path, "first")
        write_all_text(path, "second")
        assert read_all_text(path) == "second"

    def test_read_missing(self, tmp_path):
        """Test missing files raise OSError"""
        with pytest.raises(FileNotFoundError):
            read_all_text(tmp_path / "nope.txt")
