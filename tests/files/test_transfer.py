"""Tests for copy, write, move and remove operations."""

import os
import stat

import pytest

from fcmd.config import DEFAULT_PERM
from fcmd.files import cp
from fcmd.files import mv
from fcmd.files import rm
from fcmd.files import write_file


@pytest.fixture
def umask_022():
    """Run with a known umask so created modes are predictable."""
    old_umask = os.umask(0o022)
    yield
    os.umask(old_umask)


def mode_of(path) -> int:
    return stat.S_IMODE(path.stat().st_mode)


class TestCp:
    """Tests for cp()."""

    def test_copies_content(self, tmp_path):
        """Test copying a file to a new path."""
        source = tmp_path / "source.txt"
        source.write_bytes(b"\x00binary\xffcontent")
        target = tmp_path / "target.txt"

        cp(source, target)

        assert target.read_bytes() == b"\x00binary\xffcontent"
        assert source.read_bytes() == b"\x00binary\xffcontent"

    def test_truncates_existing_target(self, tmp_path):
        """Test that a longer existing target is fully replaced."""
        source = tmp_path / "source.txt"
        source.write_text("short")
        target = tmp_path / "target.txt"
        target.write_text("a much longer existing content")

        cp(source, target)

        assert target.read_text() == "short"

    def test_creates_parent_directories(self, tmp_path, umask_022):
        """Test that missing parents are created, the innermost with perm."""
        source = tmp_path / "source.txt"
        source.write_text("content")
        target = tmp_path / "a" / "b" / "target.txt"

        cp(source, target)

        assert target.read_text() == "content"
        assert mode_of(target.parent) == DEFAULT_PERM

    def test_custom_perm_for_parent(self, tmp_path, umask_022):
        """Test that perm applies to the created parent directory."""
        source = tmp_path / "source.txt"
        source.write_text("content")
        target = tmp_path / "out" / "target.txt"

        cp(source, target, perm=0o700)

        assert mode_of(tmp_path / "out") == 0o700

    def test_missing_source_creates_nothing(self, tmp_path):
        """Test that a missing source raises before parents are created."""
        target = tmp_path / "new_dir" / "target.txt"

        with pytest.raises(FileNotFoundError):
            cp(tmp_path / "missing.txt", target)

        assert not (tmp_path / "new_dir").exists()

    def test_directory_source_raises(self, tmp_path):
        """Test that a directory cannot be copied as a file."""
        with pytest.raises(IsADirectoryError):
            cp(tmp_path, tmp_path / "target.txt")

    def test_accepts_strings(self, tmp_path):
        """Test that plain string paths work."""
        source = tmp_path / "source.txt"
        source.write_text("content")

        cp(str(source), str(tmp_path / "target.txt"))

        assert (tmp_path / "target.txt").read_text() == "content"


class TestWriteFile:
    """Tests for write_file()."""

    def test_writes_bytes(self, tmp_path):
        """Test writing bytes to a new file."""
        target = tmp_path / "file.bin"

        write_file(target, b"\x01\x02")

        assert target.read_bytes() == b"\x01\x02"

    def test_writes_text_as_utf8(self, tmp_path):
        """Test that strings are encoded as UTF-8."""
        target = tmp_path / "file.txt"

        write_file(target, "héllo ✓")

        assert target.read_bytes() == "héllo ✓".encode("utf-8")

    def test_new_file_gets_perm(self, tmp_path, umask_022):
        """Test that a created file gets the default mode."""
        target = tmp_path / "file.txt"

        write_file(target, "content")

        assert mode_of(target) == DEFAULT_PERM

    def test_custom_perm(self, tmp_path, umask_022):
        """Test that a created file gets a custom mode."""
        target = tmp_path / "file.txt"

        write_file(target, "content", perm=0o640)

        assert mode_of(target) == 0o640

    def test_truncates_existing_and_keeps_mode(self, tmp_path, umask_022):
        """Test that an existing file is truncated and keeps its mode."""
        target = tmp_path / "file.txt"
        target.write_text("old and longer content")
        target.chmod(0o600)

        write_file(target, "new")

        assert target.read_text() == "new"
        assert mode_of(target) == 0o600

    def test_creates_parent_directories(self, tmp_path, umask_022):
        """Test that missing parents are created."""
        target = tmp_path / "a" / "b" / "file.txt"

        write_file(target, "content")

        assert target.read_text() == "content"
        assert mode_of(target.parent) == DEFAULT_PERM

    def test_bare_filename_in_current_directory(self, tmp_path, monkeypatch):
        """Test that a target without a directory part is written in place."""
        monkeypatch.chdir(tmp_path)

        write_file("file.txt", "content")

        assert (tmp_path / "file.txt").read_text() == "content"

    def test_directory_target_raises(self, tmp_path):
        """Test that writing to a directory fails."""
        with pytest.raises(OSError):
            write_file(tmp_path, "content")


class TestMv:
    """Tests for mv()."""

    def test_renames_file(self, tmp_path):
        """Test renaming a file."""
        source = tmp_path / "old.txt"
        source.write_text("content")
        target = tmp_path / "new.txt"

        mv(source, target)

        assert not source.exists()
        assert target.read_text() == "content"

    def test_moves_directory(self, tmp_path):
        """Test moving a directory with its contents."""
        source = tmp_path / "src_dir"
        source.mkdir()
        (source / "inner.txt").write_text("content")
        target = tmp_path / "moved"

        mv(source, target)

        assert not source.exists()
        assert (target / "inner.txt").read_text() == "content"

    def test_replaces_existing_file(self, tmp_path):
        """Test that an existing target file is replaced."""
        source = tmp_path / "source.txt"
        source.write_text("new")
        target = tmp_path / "target.txt"
        target.write_text("old")

        mv(source, target)

        assert target.read_text() == "new"
        assert not source.exists()

    def test_missing_source_raises(self, tmp_path):
        """Test that a missing source raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            mv(tmp_path / "missing", tmp_path / "target")

    def test_missing_target_parent_raises(self, tmp_path):
        """Test that parent directories are not created."""
        source = tmp_path / "source.txt"
        source.touch()

        with pytest.raises(FileNotFoundError):
            mv(source, tmp_path / "missing" / "target.txt")

        assert source.exists()


class TestRm:
    """Tests for rm()."""

    def test_removes_file(self, tmp_path):
        """Test removing a file."""
        target = tmp_path / "file.txt"
        target.touch()

        rm(target)

        assert not target.exists()

    def test_removes_directory_tree(self, tmp_path):
        """Test removing a directory and everything in it."""
        target = tmp_path / "tree"
        (target / "a" / "b").mkdir(parents=True)
        (target / "a" / "b" / "file.txt").touch()
        (target / ".hidden").touch()

        rm(target)

        assert not target.exists()

    def test_missing_target_is_not_an_error(self, tmp_path):
        """Test that removing a missing path succeeds silently."""
        rm(tmp_path / "missing")

    def test_removes_symlink_not_destination(self, tmp_path):
        """Test that a directory symlink is unlinked, not emptied."""
        real_dir = tmp_path / "real"
        real_dir.mkdir()
        (real_dir / "keep.txt").touch()
        link = tmp_path / "link"
        link.symlink_to(real_dir)

        rm(link)

        assert not link.is_symlink()
        assert (real_dir / "keep.txt").exists()

    def test_removes_dangling_symlink(self, tmp_path):
        """Test that a broken symlink is removed."""
        link = tmp_path / "link"
        link.symlink_to(tmp_path / "missing")

        rm(link)

        assert not link.is_symlink()
