"""
Summary: Export path feature domain, use case and adapter symbols.
Why: Provide a stable import surface for the application layer and tests.
"""

from sugarpath.shared.components import Component

from .adapters import (
    OsWorkingDirectory,
    StaticWorkingDirectory,
    WorkingDirectoryError,
    process_working_directory,
)
from .domain.assembler import assemble
from .domain.collapser import collapse
from .domain.decomposer import decompose
from .domain.flavours import (
    POSIX,
    WINDOWS,
    PathFlavour,
    PosixFlavour,
    UnknownFlavourError,
    WindowsFlavour,
    flavour_for_name,
    host_flavour,
)
from .usecases.normalize import normalize_path
from .usecases.ports import WorkingDirectoryPort
from .usecases.relative import relative_path
from .usecases.resolve import is_absolute_path, join_components, resolve_path

__all__ = [
    "Component",
    "POSIX",
    "WINDOWS",
    "PathFlavour",
    "PosixFlavour",
    "WindowsFlavour",
    "UnknownFlavourError",
    "flavour_for_name",
    "host_flavour",
    "decompose",
    "collapse",
    "assemble",
    "normalize_path",
    "resolve_path",
    "relative_path",
    "is_absolute_path",
    "join_components",
    "WorkingDirectoryPort",
    "OsWorkingDirectory",
    "StaticWorkingDirectory",
    "WorkingDirectoryError",
    "process_working_directory",
]
