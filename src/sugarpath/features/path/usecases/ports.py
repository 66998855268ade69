"""Ports for path use cases.

Where: features/path/usecases.
What: Protocol describing the one environmental input path resolution needs.
Why: Let callers inject a fixed base directory instead of the process cwd.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class WorkingDirectoryPort(Protocol):
    """Read access to the directory relative paths are resolved against."""

    def current(self) -> str:
        """Return the absolute working directory; stable across calls."""
        ...
