"""Single-entry structural changes: rename, create and delete.

Existence and collision checks run before the underlying primitive so that
an existing entry is never silently overwritten.
"""

import os
import shutil
from pathlib import Path

from send2trash import send2trash

from fm_engine.core import get_logger, get_tracer, operation_span
from fm_engine.core.exceptions import (
    AlreadyExistsError,
    CreateError,
    DeleteError,
    PathNotFoundError,
    RenameError,
)

from .paths import PathLike, exists, is_plain_name, parent_of

logger = get_logger(__name__)
tracer = get_tracer(__name__)


def remove_permanently(path: PathLike) -> None:
    """Remove a file, symlink or directory tree without going through the trash.

    Raises:
        OSError: If any part of the removal fails
    """
    if os.path.isdir(path) and not os.path.islink(path):
        shutil.rmtree(path)
    else:
        os.remove(path)


def _is_case_only_rename(source: Path, destination: Path) -> bool:
    if source.name == destination.name:
        return False
    if source.name.casefold() != destination.name.casefold():
        return False
    try:
        return os.path.samefile(source, destination)
    except OSError:
        return False


def rename_entry(path: PathLike, new_name: str) -> None:
    """Rename an entry within its current parent directory.

    Args:
        path: Existing file or directory
        new_name: New base name, without any directory component

    Raises:
        PathNotFoundError: If the source does not exist
        NoParentError: If the source has no parent directory
        AlreadyExistsError: If ``new_name`` is already taken in the parent
        RenameError: If the name is invalid or the OS rename fails
    """
    source = Path(path)
    if not exists(source):
        raise PathNotFoundError(f"Path does not exist: {path}", path=str(path))

    parent = parent_of(source)
    if not is_plain_name(new_name):
        raise RenameError(f"Invalid name: '{new_name}'", path=str(path))

    destination = parent / new_name
    if exists(destination) and not _is_case_only_rename(source, destination):
        raise AlreadyExistsError(
            f"A file named '{new_name}' already exists", path=str(destination)
        )

    try:
        os.rename(source, destination)
    except OSError as e:
        error_msg = f"Failed to rename: {e}"
        logger.error(error_msg, path=str(path), new_name=new_name)
        raise RenameError(error_msg, path=str(path)) from e

    logger.info("Renamed entry", path=str(path), destination=str(destination))


def create_file(directory: PathLike, name: str) -> None:
    """Create an empty file in ``directory``.

    Raises:
        AlreadyExistsError: If an entry with that name already exists
        CreateError: If the name is invalid or the OS call fails
    """
    target = Path(directory) / name
    if not is_plain_name(name):
        raise CreateError(f"Invalid name: '{name}'", path=str(target))
    if exists(target):
        raise AlreadyExistsError(
            f"A file named '{name}' already exists", path=str(target)
        )

    try:
        with open(target, "x"):
            pass
    except FileExistsError as e:
        raise AlreadyExistsError(
            f"A file named '{name}' already exists", path=str(target)
        ) from e
    except OSError as e:
        error_msg = f"Failed to create file: {e}"
        logger.error(error_msg, path=str(target))
        raise CreateError(error_msg, path=str(target)) from e

    logger.info("Created file", path=str(target))


def create_folder(directory: PathLike, name: str) -> None:
    """Create an empty directory in ``directory``.

    Raises:
        AlreadyExistsError: If an entry with that name already exists
        CreateError: If the name is invalid or the OS call fails
    """
    target = Path(directory) / name
    if not is_plain_name(name):
        raise CreateError(f"Invalid name: '{name}'", path=str(target))
    if exists(target):
        raise AlreadyExistsError(
            f"A folder named '{name}' already exists", path=str(target)
        )

    try:
        os.mkdir(target)
    except FileExistsError as e:
        raise AlreadyExistsError(
            f"A folder named '{name}' already exists", path=str(target)
        ) from e
    except OSError as e:
        error_msg = f"Failed to create folder: {e}"
        logger.error(error_msg, path=str(target))
        raise CreateError(error_msg, path=str(target)) from e

    logger.info("Created folder", path=str(target))


def delete_entry(path: PathLike, permanent: bool = False) -> None:
    """Delete an entry, either to the OS trash or irreversibly.

    Args:
        path: File or directory to delete
        permanent: Remove irreversibly instead of sending to the trash

    Raises:
        PathNotFoundError: If the path does not exist
        DeleteError: If the trash or removal call fails at any point
    """
    if not exists(path):
        raise PathNotFoundError(f"Path does not exist: {path}", path=str(path))

    with operation_span(tracer, "delete", path=path, permanent=permanent):

        if permanent:
            try:
                remove_permanently(path)
            except OSError as e:
                error_msg = f"Failed to delete: {e}"
                logger.error(error_msg, path=str(path))
                raise DeleteError(error_msg, path=str(path)) from e
        else:
            try:
                send2trash(os.fspath(path))
            except OSError as e:
                error_msg = f"Failed to move to trash: {e}"
                logger.error(error_msg, path=str(path))
                raise DeleteError(error_msg, path=str(path)) from e

    logger.info("Deleted entry", path=str(path), permanent=permanent)
