"""Application service binding a path flavour to a working directory.

Where: application/services/resolver_service.py
What: ``PathResolver`` facade over the normalize/resolve/relative use cases.
Why: Thread the flavour and cwd through one explicit context value instead of
process-wide state, so callers and tests can pin both.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Final, TypeAlias, final

from sugarpath.features.path import (
    PathFlavour,
    WorkingDirectoryPort,
    host_flavour,
    is_absolute_path,
    normalize_path,
    process_working_directory,
    relative_path,
    resolve_path,
)

if TYPE_CHECKING:
    from sugarpath.sugar_path import SugarPath

PathInput: TypeAlias = str | os.PathLike[str]


@final
class PathResolver:
    """Normalize, resolve and relativize paths under one flavour and base directory."""

    def __init__(
        self,
        flavour: PathFlavour | None = None,
        working_directory: WorkingDirectoryPort | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            flavour: Path conventions; the host platform's when None.
            working_directory: Base for relative input; the process cwd,
                read once and shared, when None.
        """
        self._flavour: PathFlavour = flavour if flavour is not None else host_flavour()
        self._working_directory: WorkingDirectoryPort = (
            working_directory
            if working_directory is not None
            else process_working_directory()
        )

    @property
    def flavour(self) -> PathFlavour:
        return self._flavour

    @property
    def working_directory(self) -> WorkingDirectoryPort:
        return self._working_directory

    def normalize(self, path: PathInput) -> str:
        """Collapse ``.``/``..`` segments and duplicate separators."""
        return normalize_path(os.fspath(path), self._flavour)

    def resolve(self, path: PathInput) -> str:
        """Return ``path`` as an absolute normalized path."""
        return resolve_path(os.fspath(path), self._flavour, self._working_directory)

    def relative(self, path: PathInput, to: PathInput) -> str:
        """Return ``path`` expressed relative to ``to``; empty when they coincide."""
        return relative_path(
            os.fspath(path), os.fspath(to), self._flavour, self._working_directory
        )

    def is_absolute(self, path: PathInput) -> bool:
        return is_absolute_path(os.fspath(path), self._flavour)

    def path(self, value: PathInput) -> SugarPath:
        """Wrap ``value`` in a ``SugarPath`` bound to this resolver."""
        from sugarpath.sugar_path import SugarPath

        return SugarPath(value, resolver=self)

    def __repr__(self) -> str:
        return (
            f"PathResolver(flavour={self._flavour!r}, "
            f"working_directory={self._working_directory!r})"
        )


DEFAULT_RESOLVER: Final[PathResolver] = PathResolver()


def default_resolver() -> PathResolver:
    """Return the host-flavoured resolver backed by the process working directory."""

    return DEFAULT_RESOLVER


__all__ = ["DEFAULT_RESOLVER", "PathInput", "PathResolver", "default_resolver"]
