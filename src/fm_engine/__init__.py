"""Filesystem operations engine for a desktop file manager.

This package lists directories and performs rename, delete (trash or
permanent), copy, move, create and recursive size computation on the local
filesystem across Windows, macOS and Linux. Every call is synchronous and
operates on the live filesystem; nothing is cached.

Key Features:
    - Deterministic directory listing (directories first, case-insensitive)
    - Collision-checked rename and create
    - Recursive copy, and move with a cross-volume fallback
    - On-disk (block-accounted) size reporting
    - Platform launchers for opening entries and terminals
    - CLI interface

Usage:

    >>> from fm_engine import list_directory, copy_entry
    >>> entries = list_directory("/home/user")
    >>> copy_entry("/home/user/report.pdf", "/mnt/backup")
    '/mnt/backup/report.pdf'

Failures raise subclasses of :class:`FMEngineError`, each carrying a
readable message and a machine-readable ``kind``.
"""

__version__ = "0.1.0"

from .core.exceptions import ErrorKind, FMEngineError
from .filesystem import (
    calculate_directory_size,
    copy_entry,
    create_file,
    create_folder,
    delete_entry,
    disk_usage,
    get_home_directory,
    get_parent_directory,
    list_directory,
    move_entry,
    rename_entry,
)
from .launchers import ExternalLauncher, get_launcher, open_entry, open_in_terminal
from .schemas import FileEntry

__all__ = [
    # Data
    "FileEntry",
    # Errors
    "ErrorKind",
    "FMEngineError",
    # Listing and navigation
    "list_directory",
    "get_home_directory",
    "get_parent_directory",
    # Mutations
    "rename_entry",
    "create_file",
    "create_folder",
    "delete_entry",
    # Transfer
    "copy_entry",
    "move_entry",
    # Size
    "calculate_directory_size",
    "disk_usage",
    # Launchers
    "ExternalLauncher",
    "get_launcher",
    "open_entry",
    "open_in_terminal",
]
