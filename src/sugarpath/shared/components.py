"""Shared path component value objects (domain <-> use cases).

This module centralizes the classified units a path string is broken into.
Decomposition, collapsing, reassembly and comparison all rely on this single
closed set of variants.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Final, TypeAlias


class PrefixKind(Enum):
    """Windows root qualifier forms."""

    DISK = "disk"
    UNC = "unc"
    DEVICE_NS = "device_ns"
    VERBATIM = "verbatim"
    VERBATIM_DISK = "verbatim_disk"
    VERBATIM_UNC = "verbatim_unc"


@dataclass(frozen=True, slots=True)
class Prefix:
    """Drive letter, UNC share or device qualifier preceding the root.

    ``text`` is kept verbatim for rendering; equality only looks at ``kind``
    and ``key`` so ``c:`` and ``C:`` compare equal.
    """

    text: str = field(compare=False)
    kind: PrefixKind
    key: str

    @property
    def is_drive(self) -> bool:
        return self.kind is PrefixKind.DISK

    @property
    def is_verbatim(self) -> bool:
        return self.kind in (
            PrefixKind.VERBATIM,
            PrefixKind.VERBATIM_DISK,
            PrefixKind.VERBATIM_UNC,
        )

    @property
    def has_implicit_root(self) -> bool:
        """Whether the prefix alone already denotes an absolute location."""
        return not self.is_drive


@dataclass(frozen=True, slots=True)
class RootDir:
    """Root separator marker."""


@dataclass(frozen=True, slots=True)
class CurDir:
    """A literal ``.`` segment."""


@dataclass(frozen=True, slots=True)
class ParentDir:
    """A literal ``..`` segment."""


@dataclass(frozen=True, slots=True)
class Normal:
    """A named path segment without separators."""

    text: str


Component: TypeAlias = Prefix | RootDir | CurDir | ParentDir | Normal

ROOT_DIR: Final[RootDir] = RootDir()
CUR_DIR: Final[CurDir] = CurDir()
PARENT_DIR: Final[ParentDir] = ParentDir()


def is_anchor(component: Component) -> bool:
    """Return True for components that pin a path to a location (prefix or root)."""

    return isinstance(component, (Prefix, RootDir))


__all__ = [
    "Component",
    "CurDir",
    "CUR_DIR",
    "Normal",
    "ParentDir",
    "PARENT_DIR",
    "Prefix",
    "PrefixKind",
    "RootDir",
    "ROOT_DIR",
    "is_anchor",
]
