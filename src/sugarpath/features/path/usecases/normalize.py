"""
Summary: Normalize path text by collapsing dot segments and duplicate separators.
Why: Give resolve and relative one canonical rendering to build on.
"""

from __future__ import annotations

from collections.abc import Sequence

from sugarpath.features.path.domain.assembler import assemble
from sugarpath.features.path.domain.collapser import collapse
from sugarpath.features.path.domain.decomposer import decompose
from sugarpath.features.path.domain.flavours import PathFlavour
from sugarpath.shared.components import CUR_DIR, ROOT_DIR, Component, Prefix


def render_canonical(components: Sequence[Component], flavour: PathFlavour) -> str:
    """Collapse ``components`` and render them, never returning empty text.

    An empty result renders as ``.``. A lone drive prefix renders as
    ``<drive>.``; a lone verbatim prefix (``\\\\?\\C:``) gains its root
    separator. UNC and device prefixes never arrive alone since the
    decomposer already gives them a root.
    """
    canonical = collapse(components)
    if not canonical:
        canonical.append(CUR_DIR)
    elif len(canonical) == 1 and isinstance(canonical[0], Prefix):
        canonical.append(ROOT_DIR if canonical[0].has_implicit_root else CUR_DIR)
    return assemble(canonical, flavour)


def normalize_path(raw: str, flavour: PathFlavour) -> str:
    """Normalize ``raw``, resolving ``.`` and ``..`` segments.

    Sequential separators are replaced by one preferred separator and
    trailing separators are dropped. Ascents that cannot be resolved are
    kept when the path is relative and discarded above a root.

    Args:
        raw: Path text to normalize. The empty string is accepted.
        flavour: Platform policy.

    Returns:
        str: Normalized path, ``.`` for an empty result.
    """
    unified = flavour.unify_separators(raw)
    return render_canonical(decompose(unified, flavour), flavour)


__all__ = ["normalize_path", "render_canonical"]
