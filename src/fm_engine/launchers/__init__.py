"""Launchers for OS default applications and terminals."""

from .external import (
    ExternalLauncher,
    LinuxLauncher,
    MacOSLauncher,
    PlatformType,
    WindowsLauncher,
    get_launcher,
    open_entry,
    open_in_terminal,
)

__all__ = [
    "ExternalLauncher",
    "LinuxLauncher",
    "MacOSLauncher",
    "PlatformType",
    "WindowsLauncher",
    "get_launcher",
    "open_entry",
    "open_in_terminal",
]
