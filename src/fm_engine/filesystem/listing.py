"""Directory listing and navigation helpers."""

import os
import stat
from pathlib import Path

from fm_engine.core import get_logger, settings
from fm_engine.core.exceptions import NotDirectoryError, PathNotFoundError, ReadError
from fm_engine.schemas import FileEntry

from .disk_usage import disk_usage
from .paths import PathLike, parent_of

logger = get_logger(__name__)


def _sort_key(entry: FileEntry) -> tuple[bool, str, str]:
    # Directories first, then case-insensitive name; raw name breaks ties.
    return (not entry.is_dir, entry.name.casefold(), entry.name)


def _to_file_entry(item: os.DirEntry) -> FileEntry:
    st = item.stat(follow_symlinks=settings.follow_symlinks)
    is_dir = stat.S_ISDIR(st.st_mode)
    modified = int(st.st_mtime) if st.st_mtime > 0 else 0
    return FileEntry(
        name=item.name,
        path=item.path,
        is_dir=is_dir,
        size=0 if is_dir else disk_usage(st),
        modified=modified,
    )


def list_directory(path: PathLike) -> list[FileEntry]:
    """List the immediate children of a directory.

    Args:
        path: Directory to list

    Returns:
        FileEntry objects, directories first, then by case-insensitive name

    Raises:
        NotDirectoryError: If path is not a directory
        ReadError: If enumeration or metadata retrieval fails
    """
    if not os.path.isdir(path):
        raise NotDirectoryError(f"Not a directory: {path}", path=str(path))

    logger.debug("Listing directory", path=str(path))

    entries = []
    try:
        with os.scandir(path) as it:
            for item in it:
                entries.append(_to_file_entry(item))
    except OSError as e:
        error_msg = f"Failed to read directory '{path}': {e}"
        logger.error(error_msg, error=str(e))
        raise ReadError(error_msg, path=str(path)) from e

    entries.sort(key=_sort_key)
    return entries


def get_home_directory() -> str:
    """Return the current user's home directory as an absolute path."""
    try:
        home = Path.home()
    except (KeyError, RuntimeError) as e:
        raise PathNotFoundError("Could not determine home directory") from e
    return str(home.absolute())


def get_parent_directory(path: PathLike) -> str:
    """Return the absolute parent directory of ``path``."""
    return str(parent_of(path))
