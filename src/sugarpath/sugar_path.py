"""Path-like value carrying normalize/resolve/relative as methods."""

from __future__ import annotations

import os
from typing import final, override

from sugarpath.application.services.resolver_service import (
    PathInput,
    PathResolver,
    default_resolver,
)


@final
class SugarPath(os.PathLike[str]):
    """Immutable path string bound to a ``PathResolver``.

    Every operation returns a new ``SugarPath`` sharing the same resolver,
    so chained calls keep one flavour and one base directory.
    """

    __slots__ = ("_text", "_resolver")

    def __init__(self, value: PathInput, resolver: PathResolver | None = None) -> None:
        self._text: str = os.fspath(value)
        self._resolver: PathResolver = resolver if resolver is not None else default_resolver()

    @property
    def resolver(self) -> PathResolver:
        return self._resolver

    def normalize(self) -> SugarPath:
        """Return this path with ``.``/``..`` segments and repeated separators collapsed."""
        return SugarPath(self._resolver.normalize(self._text), self._resolver)

    def resolve(self) -> SugarPath:
        """Return this path made absolute against the resolver's working directory."""
        return SugarPath(self._resolver.resolve(self._text), self._resolver)

    def relative(self, to: PathInput) -> SugarPath:
        """Return this path expressed relative to ``to``.

        >>> from sugarpath import PathResolver, POSIX
        >>> PathResolver(POSIX).path("/bin").relative("/var/lib")
        SugarPath('../../bin')
        """
        return SugarPath(self._resolver.relative(self._text, to), self._resolver)

    def is_absolute(self) -> bool:
        return self._resolver.is_absolute(self._text)

    @override
    def __fspath__(self) -> str:
        return self._text

    @override
    def __str__(self) -> str:
        return self._text

    @override
    def __repr__(self) -> str:
        return f"SugarPath({self._text!r})"

    @override
    def __eq__(self, other: object) -> bool:
        if isinstance(other, SugarPath):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    @override
    def __hash__(self) -> int:
        return hash(self._text)


__all__ = ["SugarPath"]
