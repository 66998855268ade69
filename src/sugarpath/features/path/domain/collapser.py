"""
Summary: Fold `.` and `..` segments into a canonical component sequence.
Why: Normalize and resolve share one stack pass so their outputs agree.
"""

from __future__ import annotations

from collections.abc import Iterable

from sugarpath.shared.components import (
    Component,
    CurDir,
    Normal,
    ParentDir,
    Prefix,
    RootDir,
)


def collapse(components: Iterable[Component]) -> list[Component]:
    """Replay ``components`` through a stack, resolving ascents where possible.

    Ascents with nothing to consume are kept as a leading run; ascents
    directly above a root, or above a verbatim prefix that already names an
    absolute location, are dropped. Feeding ``a + b`` gives the same result
    as feeding ``collapse(a) + b``.

    Args:
        components: Decomposed components, prefix first if present.

    Returns:
        list[Component]: Canonical sequence without ``CurDir`` entries.
    """
    stack: list[Component] = []
    for component in components:
        match component:
            case CurDir():
                continue
            case ParentDir():
                top = stack[-1] if stack else None
                if isinstance(top, Prefix) and top.has_implicit_root:
                    continue
                if top is None or isinstance(top, Prefix):
                    stack.append(component)
                elif isinstance(top, RootDir):
                    continue
                elif isinstance(top, ParentDir):
                    stack.append(component)
                else:
                    _ = stack.pop()
            case Prefix() | RootDir() | Normal():
                stack.append(component)
    return stack


__all__ = ["collapse"]
