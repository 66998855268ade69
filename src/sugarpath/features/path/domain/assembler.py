"""
Summary: Join components back into path text with the preferred separator.
Why: Keep rendering rules (drive gluing, single root) out of the use cases.
"""

from __future__ import annotations

from collections.abc import Iterable

from sugarpath.features.path.domain.flavours import PathFlavour
from sugarpath.shared.components import Component, CurDir, Normal, ParentDir, Prefix, RootDir


def render(component: Component, flavour: PathFlavour) -> str:
    """Return the text of a single component."""

    match component:
        case Prefix(text=text) | Normal(text=text):
            return text
        case RootDir():
            return flavour.sep
        case CurDir():
            return "."
        case ParentDir():
            return ".."


def assemble(components: Iterable[Component], flavour: PathFlavour) -> str:
    """Render ``components`` as a single path string.

    A segment that directly follows a bare drive prefix is glued onto it
    (``C:`` + ``foo`` gives ``C:foo``); elsewhere exactly one separator sits
    between components and none trails unless the path is a bare root.
    """
    sep = flavour.sep
    text = ""
    previous: Component | None = None
    for component in components:
        piece = render(component, flavour)
        if not text:
            text = piece
        elif isinstance(component, RootDir):
            if not text.endswith(sep):
                text += sep
        elif (isinstance(previous, Prefix) and previous.is_drive) or text.endswith(sep):
            text += piece
        else:
            text += sep + piece
        previous = component
    return text


__all__ = ["assemble", "render"]
