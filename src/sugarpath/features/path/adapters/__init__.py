"""Adapters supplying environment input to the path use cases."""

from .working_directory import (
    OsWorkingDirectory,
    StaticWorkingDirectory,
    WorkingDirectoryError,
    process_working_directory,
)

__all__ = [
    "OsWorkingDirectory",
    "StaticWorkingDirectory",
    "WorkingDirectoryError",
    "process_working_directory",
]
