"""Saving the meteogram to disk or handing it to the desktop image viewer."""

import logging
import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Optional, Protocol

from .errors import LaunchError, OutputIOError

logger = logging.getLogger(__name__)


class Opener(Protocol):
    """Something that opens a file with the user's default application."""

    def open(self, path: Path) -> None: ...


class SystemOpener:
    """Opens files with the platform's default application.

    The viewer is spawned and left running; nothing waits for it.
    """

    def _find_command(self) -> Optional[str]:
        """Find the opener executable for this platform."""
        name = "open" if sys.platform == "darwin" else "xdg-open"
        return shutil.which(name)

    def open(self, path: Path) -> None:
        if sys.platform == "win32":
            try:
                os.startfile(str(path))  # type: ignore[attr-defined]
            except OSError as e:
                raise LaunchError(f"Could not open {path}: {e}") from e
            return

        command = self._find_command()
        if not command:
            raise LaunchError("No program found to open files (tried open/xdg-open)")

        try:
            subprocess.Popen(
                [command, str(path)],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as e:
            raise LaunchError(f"Could not run {command}: {e}") from e


class OutputSink:
    """Writes meteogram bytes to a chosen file or to a scratch file that gets opened."""

    def __init__(self, temp_dir: Path, opener: Opener, temp_filename: str = "meteo.png"):
        """
        Args:
            temp_dir: Directory for the scratch file used by show().
            opener: Used by show() to display the scratch file.
            temp_filename: Fixed scratch file name, overwritten on every call.
        """
        self.temp_dir = Path(temp_dir)
        self.opener = opener
        self.temp_filename = temp_filename

    @property
    def temp_path(self) -> Path:
        return self.temp_dir / self.temp_filename

    def save_to(self, data: bytes, path: Path) -> Path:
        """Create or truncate ``path`` and write ``data`` to it."""
        path = Path(path)
        try:
            with open(path, "wb") as f:
                f.write(data)
        except OSError as e:
            raise OutputIOError(f"Could not write {path}: {e}") from e
        logger.info(f"Wrote {path}")
        return path

    def show(self, data: bytes) -> Path:
        """Write ``data`` to the scratch file and open it in the default viewer."""
        path = self.save_to(data, self.temp_path)
        try:
            self.opener.open(path)
        except LaunchError:
            raise
        except OSError as e:
            raise LaunchError(f"Could not open {path}: {e}") from e
        logger.debug(f"Opened {path}")
        return path

    def deliver(self, data: bytes, output: Optional[Path] = None) -> Path:
        """Save to ``output`` when given, otherwise show the image."""
        if output is not None:
            return self.save_to(data, output)
        return self.show(data)
