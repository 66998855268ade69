"""
Summary: Resolve path text to an absolute canonical path against a working directory.
Why: Relative paths need a base; drive-relative Windows paths need an anchor.
"""

from __future__ import annotations

from collections.abc import Sequence

from sugarpath.features.path.domain.decomposer import decompose
from sugarpath.features.path.domain.flavours import PathFlavour
from sugarpath.features.path.usecases.normalize import render_canonical
from sugarpath.features.path.usecases.ports import WorkingDirectoryPort
from sugarpath.platform.logging import logger
from sugarpath.shared.components import ROOT_DIR, Component, Prefix, RootDir


def is_absolute_path(raw: str, flavour: PathFlavour) -> bool:
    """Return True when ``raw`` does not depend on any working directory."""

    return flavour.is_absolute(decompose(flavour.unify_separators(raw), flavour))


def join_components(
    base: Sequence[Component], relative: Sequence[Component]
) -> list[Component]:
    """Append ``relative`` onto ``base`` the way a path buffer push does.

    A rooted path without prefix keeps only the prefix of ``base``; any other
    relative path extends the full ``base`` sequence.
    """
    if relative and isinstance(relative[0], RootDir):
        anchor = [base[0]] if base and isinstance(base[0], Prefix) else []
        return [*anchor, *relative]
    return [*base, *relative]


def resolve_path(raw: str, flavour: PathFlavour, cwd: WorkingDirectoryPort) -> str:
    """Resolve ``raw`` to an absolute, normalized path.

    Args:
        raw: Path text, absolute or relative.
        flavour: Platform policy.
        cwd: Source of the base directory for relative input.

    Returns:
        str: Absolute normalized path.
    """
    unified = flavour.unify_separators(raw)
    components = decompose(unified, flavour)
    if flavour.is_absolute(components):
        return render_canonical(components, flavour)

    if components and isinstance(components[0], Prefix):
        # Drive-relative: anchored at the drive root, per-drive cwd is not consulted
        logger.debug("Anchoring drive-relative path '%s' at its root", raw)
        anchored = [components[0], ROOT_DIR, *components[1:]]
        return render_canonical(anchored, flavour)

    base = decompose(flavour.unify_separators(cwd.current()), flavour)
    return render_canonical(join_components(base, components), flavour)


__all__ = ["is_absolute_path", "join_components", "resolve_path"]
