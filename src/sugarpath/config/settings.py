"""Where: src/sugarpath/config/settings.py
What: Programmatic resolver settings with validation and a resolver factory.
Why: Let host applications select a flavour and base directory from plain data.
Assumptions: - Settings arrive as an already-parsed mapping; no files are read here.
Trade-offs: - Unknown keys are ignored so host config sections can carry extras.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from sugarpath.application.services.resolver_service import PathResolver
from sugarpath.features.path import (
    PathFlavour,
    StaticWorkingDirectory,
    UnknownFlavourError,
    flavour_for_name,
    is_absolute_path,
)
from sugarpath.platform.logging import logger
from sugarpath.shared.errors import SugarPathError

FLAVOUR_DEFAULT: Final[str] = "host"


class SettingsError(SugarPathError, ValueError):
    """Raised when resolver settings fail validation."""


@dataclass(frozen=True, slots=True)
class ResolverSettings:
    """Resolver configuration."""

    # "host", "posix" or "windows"
    flavour: str = FLAVOUR_DEFAULT

    # Fixed working directory; the process cwd when None
    base_dir: str | None = None

    def __post_init__(self) -> None:
        flavour = self.path_flavour()
        if self.base_dir is not None and not is_absolute_path(self.base_dir, flavour):
            logger.error("Base directory '%s' is not absolute", self.base_dir)
            raise SettingsError(
                f"base_dir must be absolute under the {flavour.name} flavour: {self.base_dir}"
            )

    def path_flavour(self) -> PathFlavour:
        """Return the flavour named by ``flavour``.

        Raises:
            SettingsError: If the name is not recognised.
        """
        try:
            return flavour_for_name(self.flavour)
        except UnknownFlavourError as e:
            logger.error("Invalid resolver settings: %s", e)
            raise SettingsError(str(e)) from e

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> ResolverSettings:
        """Build settings from a plain mapping such as a parsed config section.

        Args:
            data: Mapping with optional ``flavour`` and ``base_dir`` keys.

        Returns:
            ResolverSettings: Validated settings; missing or None values use defaults.

        Raises:
            SettingsError: If a value has the wrong type or fails validation.
        """
        flavour = data.get("flavour")
        if flavour is None:
            flavour = FLAVOUR_DEFAULT
        elif not isinstance(flavour, str):
            raise SettingsError(f"flavour must be a string, got {type(flavour).__name__}")

        base_dir = data.get("base_dir")
        if base_dir is not None and not isinstance(base_dir, str):
            raise SettingsError(f"base_dir must be a string, got {type(base_dir).__name__}")

        return cls(flavour=flavour, base_dir=base_dir or None)


def build_resolver(settings: ResolverSettings | None = None) -> PathResolver:
    """Construct a ``PathResolver`` from ``settings`` (defaults when None)."""

    settings = settings if settings is not None else ResolverSettings()
    working_directory = (
        StaticWorkingDirectory(settings.base_dir) if settings.base_dir is not None else None
    )
    return PathResolver(settings.path_flavour(), working_directory)


__all__ = ["FLAVOUR_DEFAULT", "ResolverSettings", "SettingsError", "build_resolver"]
