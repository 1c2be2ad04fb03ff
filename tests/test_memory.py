"""Tests for MemoryFileSystem behaviour not shared with the real disk."""

from __future__ import annotations

import errno

import pytest

from scaffold_files.errors import FilesIOError
from scaffold_files.memory import MemoryFileSystem
from scaffold_files.settings import FilesSettings


class TestWorkingDirectory:
    """Tests for pwd and chdir."""

    def test_starts_at_root(self, memory_fs: MemoryFileSystem) -> None:
        """Test the current directory starts at the root."""
        assert memory_fs.pwd() == "/"

    def test_relative_paths_resolve_from_root(self, memory_fs: MemoryFileSystem) -> None:
        """Test relative paths start at the root until chdir."""
        memory_fs.write("path/to/file.rb", "foo")

        assert memory_fs.read("/path/to/file.rb") == "foo"

    def test_nested_chdir(self, memory_fs: MemoryFileSystem) -> None:
        """Test chdir blocks nest and unwind in order."""
        memory_fs.mkdir("/a/b")

        with memory_fs.chdir("/a"):
            assert memory_fs.pwd() == "/a"
            with memory_fs.chdir("b"):
                assert memory_fs.pwd() == "/a/b"
                memory_fs.write("file.rb", "foo")
            assert memory_fs.pwd() == "/a"

        assert memory_fs.pwd() == "/"
        assert memory_fs.read("/a/b/file.rb") == "foo"

    def test_parent_segments(self, memory_fs: MemoryFileSystem) -> None:
        """Test .. climbs from the current directory."""
        memory_fs.mkdir("/a/b")

        with memory_fs.chdir("/a/b"):
            memory_fs.write("../c.rb", "foo")
            assert memory_fs.exists("../c.rb") is True

        assert memory_fs.read("/a/c.rb") == "foo"

    def test_parent_segments_stop_at_root(self, memory_fs: MemoryFileSystem) -> None:
        """Test .. never climbs above the root."""
        memory_fs.write("/../../file.rb", "foo")

        assert memory_fs.read("/file.rb") == "foo"

    def test_windows_separators(self, memory_fs: MemoryFileSystem) -> None:
        """Test backslashes are treated as separators."""
        memory_fs.write("path\\to\\file.rb", "foo")

        assert memory_fs.read("path/to/file.rb") == "foo"

    def test_expand_path_at_root(self, memory_fs: MemoryFileSystem) -> None:
        """Test relative paths expand from the root by default."""
        assert memory_fs.expand_path("foo/bar") == "/foo/bar"

    def test_entries_of_root(self, memory_fs: MemoryFileSystem) -> None:
        """Test the root lists top level entries."""
        memory_fs.write("/b.rb", "")
        memory_fs.mkdir("/a")

        assert memory_fs.entries("/") == ["a", "b.rb"]


class TestRemoval:
    """Tests for rm and rm_rf guards."""

    def test_rm_directory_is_not_permitted(self, memory_fs: MemoryFileSystem) -> None:
        """Test rm on a directory raises with EPERM."""
        memory_fs.mkdir("/dir")

        with pytest.raises(FilesIOError) as exc_info:
            memory_fs.rm("/dir")

        assert exc_info.value.cause.errno == errno.EPERM

    def test_rm_root_is_not_permitted(self, memory_fs: MemoryFileSystem) -> None:
        """Test the root can't be removed."""
        with pytest.raises(FilesIOError) as exc_info:
            memory_fs.rm_rf("/")

        assert exc_info.value.cause.errno == errno.EPERM

    def test_rm_through_file(self, memory_fs: MemoryFileSystem) -> None:
        """Test a path walking through a file is missing."""
        memory_fs.write("/file.rb", "")

        with pytest.raises(FilesIOError) as exc_info:
            memory_fs.rm("/file.rb/nested")

        assert exc_info.value.cause.errno == errno.ENOENT


class TestWriteGuards:
    """Tests for write and mkdir errors."""

    def test_write_root(self, memory_fs: MemoryFileSystem) -> None:
        """Test the root can't become a file."""
        with pytest.raises(FilesIOError) as exc_info:
            memory_fs.write("/", "foo")

        assert exc_info.value.cause.errno == errno.EISDIR

    def test_write_current_directory(self, memory_fs: MemoryFileSystem) -> None:
        """Test the current directory can't become a file."""
        memory_fs.mkdir("/dir")

        with memory_fs.chdir("/dir"):
            with pytest.raises(FilesIOError):
                memory_fs.write(".", "foo")

    def test_write_through_file(self, memory_fs: MemoryFileSystem) -> None:
        """Test writing below a file raises with ENOTDIR."""
        memory_fs.write("/file.rb", "")

        with pytest.raises(FilesIOError) as exc_info:
            memory_fs.write("/file.rb/nested.rb", "")

        assert exc_info.value.cause.errno == errno.ENOTDIR

    def test_mkdir_on_file(self, memory_fs: MemoryFileSystem) -> None:
        """Test mkdir on a file raises with EEXIST."""
        memory_fs.write("/file.rb", "")

        with pytest.raises(FilesIOError) as exc_info:
            memory_fs.mkdir("/file.rb")

        assert exc_info.value.cause.errno == errno.EEXIST


class TestModes:
    """Tests for default permission bits."""

    def test_write_resets_file_mode(self, memory_fs: MemoryFileSystem) -> None:
        """Test writing a file restores the default file mode."""
        memory_fs.write("/script.sh", "")
        memory_fs.chmod("/script.sh", 0o755)

        memory_fs.write("/script.sh", "echo")

        assert memory_fs.mode("/script.sh") == 0o644
        assert memory_fs.is_executable("/script.sh") is False

    def test_directory_mode(self, memory_fs: MemoryFileSystem) -> None:
        """Test directories default to 0o755."""
        memory_fs.mkdir("/dir")

        assert memory_fs.mode("/dir") == 0o755
        assert memory_fs.is_executable("/dir") is True

    def test_file_mode(self, memory_fs: MemoryFileSystem) -> None:
        """Test files default to 0o644."""
        memory_fs.write("/file.rb", "")

        assert memory_fs.mode("/file.rb") == 0o644
        assert memory_fs.is_executable("/file.rb") is False

    def test_chmod_masks_extra_bits(self, memory_fs: MemoryFileSystem) -> None:
        """Test only permission bits are kept."""
        memory_fs.write("/file.rb", "")

        memory_fs.chmod("/file.rb", 0o100755)

        assert memory_fs.mode("/file.rb") == 0o755


class TestSettings:
    """Tests for settings-driven behaviour."""

    def test_readlines_uses_newline(self) -> None:
        """Test lines are split on the configured terminator."""
        fs = MemoryFileSystem.create(FilesSettings(newline="\r\n"))
        fs.write("/file.rb", "foo\r\nbar")

        assert fs.readlines("/file.rb") == ["foo\r\n", "bar"]
