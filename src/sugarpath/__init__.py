"""Sugar functions for manipulating path strings.

``normalize``, ``resolve`` and ``relative`` follow Node.js ``path`` semantics
for POSIX and Windows conventions, without touching the filesystem.

>>> from sugarpath import PathResolver, POSIX
>>> PathResolver(POSIX).normalize("/foo/bar//baz/asdf/quux/..")
'/foo/bar/baz/asdf'
"""

from __future__ import annotations

from sugarpath.application.services.resolver_service import (
    DEFAULT_RESOLVER,
    PathInput,
    PathResolver,
    default_resolver,
)
from sugarpath.config.settings import ResolverSettings, SettingsError, build_resolver
from sugarpath.features.path import (
    POSIX,
    WINDOWS,
    OsWorkingDirectory,
    PathFlavour,
    StaticWorkingDirectory,
    UnknownFlavourError,
    WorkingDirectoryError,
    WorkingDirectoryPort,
    host_flavour,
)
from sugarpath.shared.errors import SugarPathError
from sugarpath.sugar_path import SugarPath


def normalize(path: PathInput) -> str:
    """Normalize ``path`` under the host flavour."""
    return DEFAULT_RESOLVER.normalize(path)


def resolve(path: PathInput) -> str:
    """Resolve ``path`` against the process working directory."""
    return DEFAULT_RESOLVER.resolve(path)


def relative(path: PathInput, to: PathInput) -> str:
    """Express ``path`` relative to ``to`` under the host flavour."""
    return DEFAULT_RESOLVER.relative(path, to)


def is_absolute(path: PathInput) -> bool:
    return DEFAULT_RESOLVER.is_absolute(path)


__all__ = [
    "DEFAULT_RESOLVER",
    "OsWorkingDirectory",
    "POSIX",
    "PathFlavour",
    "PathInput",
    "PathResolver",
    "ResolverSettings",
    "SettingsError",
    "StaticWorkingDirectory",
    "SugarPath",
    "SugarPathError",
    "UnknownFlavourError",
    "WINDOWS",
    "WorkingDirectoryError",
    "WorkingDirectoryPort",
    "build_resolver",
    "default_resolver",
    "host_flavour",
    "is_absolute",
    "normalize",
    "relative",
    "resolve",
]
