"""
Summary: Break raw path text into an ordered list of typed components.
Why: Every path operation works on classified segments rather than strings.
"""

from __future__ import annotations

from sugarpath.features.path.domain.flavours import PathFlavour
from sugarpath.shared.components import (
    CUR_DIR,
    PARENT_DIR,
    ROOT_DIR,
    Component,
    Normal,
)


def _classify(token: str) -> Component:
    if token == ".":
        return CUR_DIR
    if token == "..":
        return PARENT_DIR
    return Normal(token)


def _split(text: str, separators: str) -> list[str]:
    primary = separators[0]
    for alternate in separators[1:]:
        text = text.replace(alternate, primary)
    return [token for token in text.split(primary) if token]


def decompose(raw: str, flavour: PathFlavour) -> list[Component]:
    """Decompose ``raw`` into components under ``flavour``'s conventions.

    Args:
        raw: Path text; may be empty, relative or absolute.
        flavour: Platform policy supplying prefix grammar and separators.

    Returns:
        list[Component]: At most one leading ``Prefix``, an optional
        ``RootDir`` (always present after a UNC or device prefix), then one
        component per non-empty token. Consecutive
        separators never produce empty segments.
    """
    prefix, rest = flavour.split_prefix(raw)
    separators = flavour.separators(prefix)

    components: list[Component] = []
    if prefix is not None:
        components.append(prefix)
    if rest and rest[0] in separators:
        components.append(ROOT_DIR)
    elif prefix is not None and prefix.has_implicit_root and not prefix.is_verbatim:
        # UNC shares and device names stand for their root even without a trailing separator
        components.append(ROOT_DIR)
    components.extend(_classify(token) for token in _split(rest, separators))
    return components


__all__ = ["decompose"]
