"""Path primitives shared by the filesystem operations."""

import os
from pathlib import Path
from typing import Union

from fm_engine.core.config import settings
from fm_engine.core.exceptions import NoFileNameError, NoParentError

PathLike = Union[str, os.PathLike]


def parent_of(path: PathLike) -> Path:
    """Return the absolute parent directory of ``path``.

    Raises:
        NoParentError: If ``path`` is a filesystem root
    """
    absolute = Path(os.path.abspath(path))
    parent = absolute.parent
    if parent == absolute:
        raise NoParentError("No parent directory", path=str(path))
    return parent


def base_name_of(path: PathLike) -> str:
    """Return the final component of ``path``.

    Raises:
        NoFileNameError: If ``path`` has no usable final component (e.g. ``/``)
    """
    name = Path(path).name
    if name in ("", ".", ".."):
        raise NoFileNameError("Cannot determine file name", path=str(path))
    return name


def is_plain_name(name: str) -> bool:
    """Check that ``name`` is a single path component."""
    if name in ("", ".", ".."):
        return False
    if "\0" in name:
        return False
    separators = {os.sep}
    if os.altsep:
        separators.add(os.altsep)
    return not any(sep in name for sep in separators)


def exists(path: PathLike) -> bool:
    """Check existence without following symlinks, so dangling links count."""
    return os.path.lexists(path)


def is_walkable_dir(path: PathLike) -> bool:
    """Check whether a recursive walk should descend into ``path``."""
    if not os.path.isdir(path):
        return False
    return settings.follow_symlinks or not os.path.islink(path)
