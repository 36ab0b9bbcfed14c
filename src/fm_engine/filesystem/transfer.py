"""Copy and move operations.

The copy engine mirrors a tree with an explicit depth-first walk and aborts
on the first error; a partially copied tree is left in place. The move
engine tries an atomic rename first and falls back to copy followed by
removal of the original when the rename is refused (typically across
volumes).
"""

import os
import shutil
from pathlib import Path

from fm_engine.core import (
    get_logger,
    get_tracer,
    operation_span,
    settings,
    span_attributes,
)
from fm_engine.core.exceptions import (
    CleanupError,
    CopyError,
    NotDirectoryError,
    PathNotFoundError,
)

from .mutations import remove_permanently
from .paths import PathLike, base_name_of, exists, is_walkable_dir

logger = get_logger(__name__)
tracer = get_tracer(__name__)


def _resolve_target(source: PathLike, destination_dir: PathLike) -> Path:
    """Validate a copy/move request and return the destination path.

    Raises:
        PathNotFoundError: If the source does not exist
        NotDirectoryError: If the destination is not a directory
        NoFileNameError: If the source has no base name
    """
    if not exists(source):
        raise PathNotFoundError(f"Source does not exist: {source}", path=str(source))
    if not os.path.isdir(destination_dir):
        raise NotDirectoryError(
            f"Destination is not a directory: {destination_dir}",
            path=str(destination_dir),
        )
    return Path(destination_dir) / base_name_of(source)


def _is_within(target: Path, source: Path) -> bool:
    resolved_source = source.resolve()
    resolved_target = target.resolve()
    return (
        resolved_target == resolved_source
        or resolved_source in resolved_target.parents
    )


def _copy_file(source: PathLike, target: PathLike) -> None:
    # copyfile, unlike copy2, refuses a directory target instead of nesting.
    follow = settings.follow_symlinks
    shutil.copyfile(source, target, follow_symlinks=follow)
    shutil.copystat(source, target, follow_symlinks=follow)


def _copy_tree(source: Path, target: Path) -> None:
    """Mirror ``source`` into ``target`` depth-first.

    Raises:
        OSError: On the first failure; nothing is rolled back
    """
    seen: set[tuple[int, int]] = set()
    pending = [(source, target)]

    while pending:
        src_dir, dst_dir = pending.pop()

        st = src_dir.stat()
        key = (st.st_dev, st.st_ino)
        if key in seen:
            logger.warning("Skipping directory cycle", path=str(src_dir))
            continue
        seen.add(key)

        dst_dir.mkdir(parents=True, exist_ok=True)
        # Links resolving into the copy itself must not be descended.
        dst_stat = dst_dir.stat()
        seen.add((dst_stat.st_dev, dst_stat.st_ino))

        with os.scandir(src_dir) as it:
            for item in it:
                child_target = dst_dir / item.name
                if item.is_dir(follow_symlinks=settings.follow_symlinks):
                    pending.append((Path(item.path), child_target))
                else:
                    _copy_file(item.path, child_target)


def copy_entry(source: PathLike, destination_dir: PathLike) -> str:
    """Copy a file or directory tree into a destination directory.

    The copy keeps the source's base name. A same-named file already in the
    destination is overwritten.

    Args:
        source: File or directory to copy
        destination_dir: Existing directory to copy into

    Returns:
        Path of the created copy

    Raises:
        PathNotFoundError: If the source does not exist
        NotDirectoryError: If the destination is not a directory
        NoFileNameError: If the source has no base name
        CopyError: If the source would be copied into itself or any I/O fails
    """
    target = _resolve_target(source, destination_dir)
    source_path = Path(source)

    with operation_span(tracer, "copy", source=source, destination=target):

        try:
            if is_walkable_dir(source_path):
                if _is_within(target, source_path):
                    raise CopyError(
                        f"Cannot copy '{source}' into itself", path=str(source)
                    )
                _copy_tree(source_path, target)
            else:
                _copy_file(source_path, target)
        except OSError as e:
            error_msg = f"Failed to copy '{source}': {e}"
            logger.error(error_msg, source=str(source), destination=str(target))
            raise CopyError(error_msg, path=str(source)) from e

    logger.info("Copied entry", source=str(source), destination=str(target))
    return str(target)


def move_entry(source: PathLike, destination_dir: PathLike) -> str:
    """Move a file or directory tree into a destination directory.

    Args:
        source: File or directory to move
        destination_dir: Existing directory to move into

    Returns:
        Path of the moved entry

    Raises:
        PathNotFoundError: If the source does not exist
        NotDirectoryError: If the destination is not a directory
        NoFileNameError: If the source has no base name
        CopyError: If the cross-volume copy fails
        CleanupError: If the copy succeeded but the original could not be removed
    """
    target = _resolve_target(source, destination_dir)

    with operation_span(
        tracer, "move", source=source, destination=target
    ) as span:

        try:
            os.rename(source, target)
        except OSError as e:
            logger.info(
                "Rename failed, falling back to copy and remove",
                source=str(source),
                destination=str(target),
                error=str(e),
            )
            span.set_attributes(span_attributes(fallback=True))
        else:
            logger.info("Moved entry", source=str(source), destination=str(target))
            return str(target)

        copied = copy_entry(source, destination_dir)

        try:
            remove_permanently(source)
        except OSError as e:
            error_msg = f"Copied but failed to remove source: {e}"
            logger.error(error_msg, source=str(source), destination=copied)
            raise CleanupError(error_msg, path=str(source)) from e

    logger.info("Moved entry", source=str(source), destination=copied)
    return copied
