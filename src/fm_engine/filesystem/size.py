"""Recursive on-disk size computation."""

import os
import stat
from pathlib import Path

from fm_engine.core import (
    get_logger,
    get_tracer,
    operation_span,
    settings,
    span_attributes,
)
from fm_engine.core.exceptions import NotDirectoryError

from .disk_usage import disk_usage
from .paths import PathLike

logger = get_logger(__name__)
tracer = get_tracer(__name__)


def calculate_directory_size(path: PathLike) -> int:
    """Sum the on-disk usage of every file below a directory.

    Unreadable directories and entries are skipped and contribute 0, so one
    inaccessible subtree does not prevent a total for the rest.

    Args:
        path: Root directory of the walk

    Returns:
        Total bytes of disk usage

    Raises:
        NotDirectoryError: If path is not a directory
    """
    if not os.path.isdir(path):
        raise NotDirectoryError(f"Not a directory: {path}", path=str(path))

    with operation_span(tracer, "size", path=path) as span:

        root = Path(path)
        root_stat = root.stat()
        seen = {(root_stat.st_dev, root_stat.st_ino)}
        pending = [root]
        total = 0
        skipped = 0

        while pending:
            directory = pending.pop()
            try:
                with os.scandir(directory) as it:
                    for item in it:
                        try:
                            st = item.stat(follow_symlinks=settings.follow_symlinks)
                        except OSError as e:
                            skipped += 1
                            logger.debug(
                                "Skipping unreadable entry", path=item.path, error=str(e)
                            )
                            continue

                        if stat.S_ISDIR(st.st_mode):
                            key = (st.st_dev, st.st_ino)
                            if key not in seen:
                                seen.add(key)
                                pending.append(Path(item.path))
                        else:
                            total += disk_usage(st)
            except OSError as e:
                skipped += 1
                logger.debug(
                    "Skipping unreadable directory", path=str(directory), error=str(e)
                )

        span.set_attributes(span_attributes(total_bytes=total))

    logger.info(
        "Directory size calculated", path=str(path), total_bytes=total, skipped=skipped
    )
    return total
