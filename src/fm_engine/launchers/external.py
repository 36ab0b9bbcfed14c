"""External process launchers for opening entries and terminals."""

import os
import subprocess
import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from fm_engine.core import get_logger, settings
from fm_engine.core.exceptions import (
    LaunchError,
    NotDirectoryError,
    PathNotFoundError,
    UnsupportedPlatformError,
)

logger = get_logger(__name__)


class PlatformType(str, Enum):
    """Platforms with a launcher implementation."""

    macos = "darwin"
    windows = "win32"
    linux = "linux"


def _spawn(command: list[str], cwd: Optional[str] = None) -> None:
    """Start a detached process without waiting for it.

    Raises:
        OSError: If the process could not be started
    """
    subprocess.Popen(
        command,
        cwd=cwd,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )


class ExternalLauncher(ABC):
    """Abstract base class for spawning OS viewers and terminals."""

    @abstractmethod
    def open_entry(self, path: str) -> None:
        """Open a path with the OS default application.

        Raises:
            LaunchError: If the launcher process could not be spawned
        """
        pass

    @abstractmethod
    def open_terminal(self, path: str) -> None:
        """Open a terminal whose working directory is ``path``.

        Raises:
            LaunchError: If the terminal process could not be spawned
            UnsupportedPlatformError: If no terminal emulator is available
        """
        pass

    def _launch(self, command: list[str], cwd: Optional[str] = None) -> None:
        try:
            _spawn(command, cwd=cwd)
        except OSError as e:
            error_msg = f"Failed to launch '{command[0]}': {e}"
            logger.error(error_msg, command=command)
            raise LaunchError(error_msg, path=cwd or command[-1]) from e


class MacOSLauncher(ExternalLauncher):
    """Launches through ``open``; prefers iTerm over Terminal when installed."""

    def open_entry(self, path: str) -> None:
        self._launch(["open", path])

    def open_terminal(self, path: str) -> None:
        app = "iTerm" if os.path.exists(settings.macos_iterm_path) else "Terminal"
        self._launch(["open", "-a", app, path])


class WindowsLauncher(ExternalLauncher):
    """Launches through ``cmd /C start``."""

    def open_entry(self, path: str) -> None:
        self._launch(["cmd", "/C", "start", "", path])

    def open_terminal(self, path: str) -> None:
        self._launch(["cmd", "/C", "start", "cmd", "/K"], cwd=path)


class LinuxLauncher(ExternalLauncher):
    """Launches through ``xdg-open`` and the first available terminal emulator."""

    def open_entry(self, path: str) -> None:
        self._launch(["xdg-open", path])

    def open_terminal(self, path: str) -> None:
        for terminal in settings.terminal_candidates:
            try:
                if terminal == "gnome-terminal":
                    _spawn([terminal, "--working-directory", path])
                else:
                    _spawn([terminal], cwd=path)
            except OSError as e:
                logger.debug("Terminal candidate failed", terminal=terminal, error=str(e))
                continue
            logger.info("Opened terminal", terminal=terminal, path=path)
            return

        raise UnsupportedPlatformError(
            "No supported terminal emulator found", path=path
        )


def get_launcher(platform: Optional[str] = None) -> ExternalLauncher:
    """Return the launcher for ``platform`` (defaults to the running OS).

    Raises:
        UnsupportedPlatformError: If the platform has no launcher
    """
    platform = platform or sys.platform

    if platform == PlatformType.macos:
        return MacOSLauncher()
    elif platform == PlatformType.windows:
        return WindowsLauncher()
    elif platform.startswith(PlatformType.linux.value):
        return LinuxLauncher()

    available = ", ".join([p.value for p in PlatformType])
    raise UnsupportedPlatformError(
        f"Unsupported platform: {platform}. Available platforms: {available}"
    )


def open_entry(path: str, launcher: Optional[ExternalLauncher] = None) -> None:
    """Open a file or directory with the OS default application.

    Raises:
        PathNotFoundError: If the path does not exist
        LaunchError: If the launcher process could not be spawned
    """
    if not os.path.exists(path):
        raise PathNotFoundError(f"Path does not exist: {path}", path=path)

    (launcher or get_launcher()).open_entry(path)
    logger.info("Opened entry", path=path)


def open_in_terminal(path: str, launcher: Optional[ExternalLauncher] = None) -> None:
    """Open a terminal in a directory.

    Raises:
        NotDirectoryError: If the path is not a directory
        LaunchError: If the terminal process could not be spawned
        UnsupportedPlatformError: If no terminal emulator is available
    """
    if not os.path.isdir(path):
        raise NotDirectoryError(f"Not a directory: {path}", path=path)

    (launcher or get_launcher()).open_terminal(path)
