import subprocess
import sys
from abc import ABC, abstractmethod
from pathlib import Path

from paperfiler.logging.logger import Log


class BaseFolderOpener(ABC):
    """Reveals a folder to the user once a batch is done."""

    @abstractmethod
    def open(self, folder: Path) -> None:
        """Open the folder. Implementations never raise."""


class SystemFolderOpener(BaseFolderOpener):
    """Opens a folder in the platform file manager, fire-and-forget."""

    def __init__(self, platform: str | None = None) -> None:
        self._platform = platform if platform is not None else sys.platform

    def command(self, folder: Path) -> list[str]:
        if self._platform.startswith("win"):
            return ["explorer", str(folder)]
        if self._platform == "darwin":
            return ["open", str(folder)]
        return ["xdg-open", str(folder)]

    def open(self, folder: Path) -> None:
        cmd = self.command(folder)
        try:
            subprocess.Popen(
                cmd,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as exc:
            Log.error(f"Error opening folder {folder} with {cmd[0]}: {exc}")
            return
        Log.info(f"Opened output folder {folder}")


class NullFolderOpener(BaseFolderOpener):
    """Does nothing. Used for headless runs and tests."""

    def open(self, folder: Path) -> None:
        Log.debug(f"Skipping folder open for {folder}")
