"""Exception hierarchy for fm-engine.

Every failure carries a human-readable message (``str(exc)``), a
machine-readable :class:`ErrorKind` and, where known, the path involved.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Machine-readable error kinds surfaced to callers."""

    not_found = "NotFound"
    not_a_directory = "NotADirectory"
    already_exists = "AlreadyExists"
    no_parent = "NoParent"
    no_file_name = "NoFileName"
    read_failure = "ReadFailure"
    write_failure = "WriteFailure"
    copy_failure = "CopyFailure"
    delete_failure = "DeleteFailure"
    rename_failure = "RenameFailure"
    create_failure = "CreateFailure"
    cleanup_failure = "CleanupFailure"
    launch_failure = "LaunchFailure"
    unsupported_platform = "UnsupportedPlatform"


class FMEngineError(Exception):
    """Base exception for all fm-engine errors."""

    kind: Optional[ErrorKind] = None

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path


class PathNotFoundError(FMEngineError):
    """Raised when a path does not exist."""

    kind = ErrorKind.not_found


class NotDirectoryError(FMEngineError):
    """Raised when a directory was expected but something else was found."""

    kind = ErrorKind.not_a_directory


class AlreadyExistsError(FMEngineError):
    """Raised when a create or rename would collide with an existing entry."""

    kind = ErrorKind.already_exists


class ValidationError(FMEngineError):
    """Raised when a path lacks a required structural component."""

    pass


class NoParentError(ValidationError):
    kind = ErrorKind.no_parent


class NoFileNameError(ValidationError):
    kind = ErrorKind.no_file_name


class ReadError(FMEngineError):
    """Raised when reading a directory or entry metadata fails."""

    kind = ErrorKind.read_failure


class WriteError(FMEngineError):
    """Base for failures of operations that change the filesystem."""

    kind = ErrorKind.write_failure


class CopyError(WriteError):
    kind = ErrorKind.copy_failure


class DeleteError(WriteError):
    kind = ErrorKind.delete_failure


class RenameError(WriteError):
    kind = ErrorKind.rename_failure


class CreateError(WriteError):
    kind = ErrorKind.create_failure


class CleanupError(WriteError):
    """Raised when a cross-volume move copied the source but could not remove it.

    The destination is complete; the source still exists.
    """

    kind = ErrorKind.cleanup_failure


class LaunchError(FMEngineError):
    """Raised when an external process could not be spawned."""

    kind = ErrorKind.launch_failure


class UnsupportedPlatformError(FMEngineError):
    """Raised when no launcher or terminal emulator is available."""

    kind = ErrorKind.unsupported_platform
