"""
Summary: Express one path relative to another with leading `..` ascents.
Why: Callers need the shortest path from a base directory to a target.
"""

from __future__ import annotations

from sugarpath.features.path.domain.assembler import assemble
from sugarpath.features.path.domain.decomposer import decompose
from sugarpath.features.path.domain.flavours import PathFlavour
from sugarpath.features.path.usecases.ports import WorkingDirectoryPort
from sugarpath.features.path.usecases.resolve import resolve_path
from sugarpath.shared.components import (
    PARENT_DIR,
    Component,
    Normal,
    Prefix,
    RootDir,
    is_anchor,
)


def _anchored_segments(resolved: str, flavour: PathFlavour) -> list[Component]:
    return [
        component
        for component in decompose(resolved, flavour)
        if isinstance(component, (Prefix, RootDir, Normal))
    ]


def _components_match(left: Component, right: Component, flavour: PathFlavour) -> bool:
    if isinstance(left, Normal) and isinstance(right, Normal):
        return flavour.segments_match(left.text, right.text)
    return left == right


def relative_path(
    path: str, to: str, flavour: PathFlavour, cwd: WorkingDirectoryPort
) -> str:
    """Return ``path`` expressed relative to the directory ``to``.

    Both inputs are resolved first. Identical locations give empty text.
    When ``path`` lives under a different prefix or root than ``to``, no
    ascent can reach it and its absolute form is returned instead.

    Args:
        path: Target location.
        to: Base directory the result is relative to.
        flavour: Platform policy.
        cwd: Source of the base directory for relative input.

    Returns:
        str: Relative path such that joining it onto ``to`` reaches ``path``.
    """
    base = _anchored_segments(resolve_path(to, flavour, cwd), flavour)
    target = _anchored_segments(resolve_path(path, flavour, cwd), flavour)
    if base == target:
        return ""

    common = 0
    for left, right in zip(base, target):
        if not _components_match(left, right, flavour):
            break
        common += 1

    remainder = target[common:]
    if remainder and is_anchor(remainder[0]):
        return assemble(remainder, flavour)
    ascents = [PARENT_DIR] * (len(base) - common)
    return assemble([*ascents, *remainder], flavour)


__all__ = ["relative_path"]
