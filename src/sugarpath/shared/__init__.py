# Where: sugarpath.shared.__init__
# What: Provide a concise import surface for the component value objects.
# Why: Keep decomposer, collapser and use cases on one shared definition.

"""Shared value objects exposed at the package level."""

from .components import (
    CUR_DIR,
    PARENT_DIR,
    ROOT_DIR,
    Component,
    CurDir,
    Normal,
    ParentDir,
    Prefix,
    PrefixKind,
    RootDir,
    is_anchor,
)

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
