"""Filesystem operations and utilities."""

from .disk_usage import block_usage, disk_usage, logical_size
from .listing import get_home_directory, get_parent_directory, list_directory
from .mutations import create_file, create_folder, delete_entry, rename_entry
from .size import calculate_directory_size
from .transfer import copy_entry, move_entry

__all__ = [
    "block_usage",
    "disk_usage",
    "logical_size",
    "get_home_directory",
    "get_parent_directory",
    "list_directory",
    "create_file",
    "create_folder",
    "delete_entry",
    "rename_entry",
    "calculate_directory_size",
    "copy_entry",
    "move_entry",
]
