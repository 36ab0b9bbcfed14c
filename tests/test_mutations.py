"""Tests for rename, create and delete operations."""

import os
from unittest.mock import patch

import pytest

from fm_engine.core.exceptions import (
    AlreadyExistsError,
    CreateError,
    DeleteError,
    ErrorKind,
    NoParentError,
    PathNotFoundError,
    RenameError,
    WriteError,
)
from fm_engine.filesystem.mutations import (
    create_file,
    create_folder,
    delete_entry,
    remove_permanently,
    rename_entry,
)


class TestRenameEntry:
    """Test rename functionality."""

    def test_rename_file(self, sample_tree):
        """Test renaming a file within its parent."""
        rename_entry(str(sample_tree / "b.txt"), "renamed.txt")

        assert not (sample_tree / "b.txt").exists()
        assert (sample_tree / "renamed.txt").read_text() == "content b"

    def test_rename_directory(self, sample_tree):
        """Test renaming a directory keeps its contents."""
        rename_entry(str(sample_tree / "c"), "nested")

        assert (sample_tree / "nested" / "d.txt").exists()

    def test_rename_missing_path(self, temp_dir):
        """Test that renaming a nonexistent path fails with NotFound."""
        with pytest.raises(PathNotFoundError) as exc_info:
            rename_entry(str(temp_dir / "missing.txt"), "other.txt")

        assert exc_info.value.kind == ErrorKind.not_found
        assert not (temp_dir / "other.txt").exists()

    def test_rename_collision(self, temp_dir):
        """Test that an existing target is never overwritten."""
        (temp_dir / "one.txt").write_text("one")
        (temp_dir / "two.txt").write_text("two")

        with pytest.raises(AlreadyExistsError) as exc_info:
            rename_entry(str(temp_dir / "one.txt"), "two.txt")

        assert exc_info.value.kind == ErrorKind.already_exists
        assert "already exists" in str(exc_info.value)
        assert (temp_dir / "one.txt").read_text() == "one"
        assert (temp_dir / "two.txt").read_text() == "two"

    @pytest.mark.parametrize("bad_name", ["", ".", "..", "sub/name", "a\0b"])
    def test_rename_invalid_name(self, temp_dir, bad_name):
        """Test that names with directory components are rejected."""
        (temp_dir / "one.txt").write_text("one")

        with pytest.raises(RenameError):
            rename_entry(str(temp_dir / "one.txt"), bad_name)

        assert (temp_dir / "one.txt").exists()

    @patch("fm_engine.filesystem.mutations.parent_of")
    def test_rename_without_parent(self, mock_parent_of, temp_dir):
        """Test that a path without a parent fails with NoParent."""
        mock_parent_of.side_effect = NoParentError("No parent directory")

        with pytest.raises(NoParentError):
            rename_entry(str(temp_dir), "other")

    @patch("fm_engine.filesystem.mutations.os.rename")
    def test_rename_os_failure(self, mock_rename, temp_dir):
        """Test that OS errors surface as RenameError."""
        (temp_dir / "one.txt").write_text("one")
        mock_rename.side_effect = OSError(18, "Invalid cross-device link")

        with pytest.raises(RenameError) as exc_info:
            rename_entry(str(temp_dir / "one.txt"), "two.txt")

        assert isinstance(exc_info.value, WriteError)
        assert "Failed to rename" in str(exc_info.value)


class TestCreateEntries:
    """Test file and folder creation."""

    def test_create_file(self, temp_dir):
        """Test creating an empty file."""
        create_file(str(temp_dir), "new.txt")

        assert (temp_dir / "new.txt").is_file()
        assert (temp_dir / "new.txt").read_bytes() == b""

    def test_create_folder(self, temp_dir):
        """Test creating an empty folder."""
        create_folder(str(temp_dir), "new")

        assert (temp_dir / "new").is_dir()
        assert list((temp_dir / "new").iterdir()) == []

    def test_create_file_collision_leaves_existing(self, temp_dir):
        """Test that a colliding create leaves content and timestamp untouched."""
        existing = temp_dir / "keep.txt"
        existing.write_text("precious")
        os.utime(existing, (1_000_000, 1_000_000))

        with pytest.raises(AlreadyExistsError):
            create_file(str(temp_dir), "keep.txt")

        assert existing.read_text() == "precious"
        assert existing.stat().st_mtime == 1_000_000

    def test_create_folder_collision_with_file(self, temp_dir):
        """Test that a folder cannot replace an existing file."""
        (temp_dir / "thing").write_text("file")

        with pytest.raises(AlreadyExistsError) as exc_info:
            create_folder(str(temp_dir), "thing")

        assert "A folder named 'thing' already exists" in str(exc_info.value)
        assert (temp_dir / "thing").read_text() == "file"

    def test_create_file_missing_parent(self, temp_dir):
        """Test that a missing parent surfaces as CreateError."""
        with pytest.raises(CreateError) as exc_info:
            create_file(str(temp_dir / "missing"), "new.txt")

        assert exc_info.value.kind == ErrorKind.create_failure

    def test_create_folder_missing_parent(self, temp_dir):
        """Test that a missing parent surfaces as CreateError."""
        with pytest.raises(CreateError):
            create_folder(str(temp_dir / "missing"), "new")

    @pytest.mark.parametrize("create", [create_file, create_folder])
    @pytest.mark.parametrize("bad_name", ["sub/inner.txt", "a\0b"])
    def test_create_invalid_name(self, temp_dir, create, bad_name):
        """Test that names with separators or NUL bytes are rejected."""
        (temp_dir / "sub").mkdir()

        with pytest.raises(CreateError) as exc_info:
            create(str(temp_dir), bad_name)

        assert exc_info.value.kind == ErrorKind.create_failure
        assert not (temp_dir / "sub" / "inner.txt").exists()
        assert sorted(os.listdir(temp_dir)) == ["sub"]


class TestDeleteEntry:
    """Test permanent and trash deletion."""

    def test_delete_missing_path(self, temp_dir):
        """Test that deleting a nonexistent path fails with NotFound."""
        with pytest.raises(PathNotFoundError):
            delete_entry(str(temp_dir / "missing"), permanent=True)

    def test_permanent_delete_file(self, sample_tree):
        """Test irreversible removal of a file."""
        delete_entry(str(sample_tree / "b.txt"), permanent=True)

        assert not (sample_tree / "b.txt").exists()

    def test_permanent_delete_directory(self, sample_tree):
        """Test recursive removal of a directory tree."""
        delete_entry(str(sample_tree), permanent=True)

        assert not sample_tree.exists()

    @patch("fm_engine.filesystem.mutations.shutil.rmtree")
    def test_permanent_delete_failure_aborts(self, mock_rmtree, sample_tree):
        """Test that a failure inside recursive removal is reported."""
        mock_rmtree.side_effect = PermissionError("Permission denied")

        with pytest.raises(DeleteError) as exc_info:
            delete_entry(str(sample_tree), permanent=True)

        assert exc_info.value.kind == ErrorKind.delete_failure
        assert "Failed to delete" in str(exc_info.value)

    @patch("fm_engine.filesystem.mutations.send2trash")
    def test_trash_delete(self, mock_send2trash, sample_tree):
        """Test that non-permanent delete goes through the trash."""
        delete_entry(str(sample_tree / "b.txt"))

        mock_send2trash.assert_called_once_with(str(sample_tree / "b.txt"))
        assert (sample_tree / "b.txt").exists()

    @patch("fm_engine.filesystem.mutations.send2trash")
    def test_trash_failure(self, mock_send2trash, sample_tree):
        """Test that trash errors surface as DeleteError."""
        mock_send2trash.side_effect = OSError("Trash unavailable")

        with pytest.raises(DeleteError) as exc_info:
            delete_entry(str(sample_tree / "b.txt"))

        assert "Failed to move to trash" in str(exc_info.value)

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_remove_permanently_does_not_follow_symlink(self, sample_tree, temp_dir):
        """Test that removing a directory symlink leaves the target intact."""
        link = temp_dir / "link"
        os.symlink(sample_tree, link)

        remove_permanently(str(link))

        assert not os.path.lexists(link)
        assert (sample_tree / "b.txt").exists()
