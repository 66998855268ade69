"""Where: src/sugarpath/features/path/adapters/working_directory.py
What: Working directory providers satisfying ``WorkingDirectoryPort``.
Why: Read the process cwd once, or pin a fixed base for deterministic callers.
"""

from __future__ import annotations

import os
import threading
from collections.abc import Callable
from typing import Final, final

from sugarpath.platform.logging import logger
from sugarpath.shared.errors import SugarPathError


class WorkingDirectoryError(SugarPathError, RuntimeError):
    """Raised when the process working directory cannot be determined."""


@final
class OsWorkingDirectory:
    """Read the process working directory on first use and keep it."""

    def __init__(self, getcwd: Callable[[], str] = os.getcwd) -> None:
        self._getcwd: Callable[[], str] = getcwd
        self._lock: Final[threading.Lock] = threading.Lock()
        self._value: str | None = None

    def current(self) -> str:
        """Return the cached working directory, reading it on the first call.

        Raises:
            WorkingDirectoryError: If the operating system cannot report it.
        """
        value = self._value
        if value is not None:
            return value

        with self._lock:
            if self._value is not None:
                return self._value
            try:
                value = self._getcwd()
            except OSError as e:
                logger.error("Failed to read current working directory: %s", e)
                raise WorkingDirectoryError("current working directory is unavailable") from e
            logger.debug("Working directory cached as %s", value)
            self._value = value
            return value


@final
class StaticWorkingDirectory:
    """Fixed base directory supplied by the caller."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path: str = os.fspath(path)

    def current(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"StaticWorkingDirectory({self._path!r})"


_PROCESS_WORKING_DIRECTORY: Final[OsWorkingDirectory] = OsWorkingDirectory()


def process_working_directory() -> OsWorkingDirectory:
    """Return the provider shared by every default resolver in this process."""

    return _PROCESS_WORKING_DIRECTORY


__all__ = [
    "OsWorkingDirectory",
    "StaticWorkingDirectory",
    "WorkingDirectoryError",
    "process_working_directory",
]
