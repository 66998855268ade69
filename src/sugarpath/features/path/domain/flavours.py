"""
Summary: POSIX and Windows path conventions expressed as strategy objects.
Why: Keep platform rules in one value so Windows semantics run on any host.
"""

from __future__ import annotations

import os
import string
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import ClassVar, Final, final, override

from sugarpath.shared.components import Component, Prefix, PrefixKind, RootDir
from sugarpath.shared.errors import SugarPathError


class PathFlavour(ABC):
    """Separator set, prefix grammar and segment comparison for one platform."""

    name: ClassVar[str]
    sep: ClassVar[str]

    @abstractmethod
    def split_prefix(self, raw: str) -> tuple[Prefix | None, str]:
        """Detach a leading prefix from ``raw``.

        Args:
            raw: Path text as supplied by the caller.

        Returns:
            tuple: The detected prefix (or None) and the remaining text.
        """

    @abstractmethod
    def separators(self, prefix: Prefix | None) -> str:
        """Return the characters accepted as separators after ``prefix``."""

    @abstractmethod
    def unify_separators(self, raw: str) -> str:
        """Rewrite alternate separators to the preferred one."""

    @abstractmethod
    def segments_match(self, left: str, right: str) -> bool:
        """Compare two named segments under this platform's rules."""

    @abstractmethod
    def is_absolute(self, components: Sequence[Component]) -> bool:
        """Whether a decomposed path is anchored independently of any cwd."""

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


@final
class PosixFlavour(PathFlavour):
    """``/``-separated paths without prefixes, compared case-sensitively."""

    name: ClassVar[str] = "posix"
    sep: ClassVar[str] = "/"

    @override
    def split_prefix(self, raw: str) -> tuple[Prefix | None, str]:
        return None, raw

    @override
    def separators(self, prefix: Prefix | None) -> str:
        return "/"

    @override
    def unify_separators(self, raw: str) -> str:
        return raw

    @override
    def segments_match(self, left: str, right: str) -> bool:
        return left == right

    @override
    def is_absolute(self, components: Sequence[Component]) -> bool:
        return bool(components) and isinstance(components[0], RootDir)


_ASCII_LOWER: Final = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _is_drive_letter(char: str) -> bool:
    return char in string.ascii_letters


def _next_name(text: str, separators: str) -> str:
    """Return the leading run of ``text`` up to the first separator."""

    for index, char in enumerate(text):
        if char in separators:
            return text[:index]
    return text


def _two_names(text: str, separators: str) -> tuple[str, str]:
    first = _next_name(text, separators)
    rest = text[len(first) + 1 :]
    return first, _next_name(rest, separators)


@final
class WindowsFlavour(PathFlavour):
    """Backslash-preferred paths with drive, UNC, device and verbatim prefixes."""

    name: ClassVar[str] = "windows"
    sep: ClassVar[str] = "\\"

    SEPARATORS: ClassVar[str] = "\\/"
    VERBATIM_SEPARATORS: ClassVar[str] = "\\"

    @override
    def split_prefix(self, raw: str) -> tuple[Prefix | None, str]:
        prefix = self._parse_prefix(raw)
        if prefix is None:
            return None, raw
        return prefix, raw[len(prefix.text) :]

    def _parse_prefix(self, raw: str) -> Prefix | None:
        if len(raw) >= 2 and raw[0] in self.SEPARATORS and raw[1] in self.SEPARATORS:
            if raw.startswith("\\\\?\\"):
                return self._parse_verbatim(raw)
            if len(raw) >= 4 and raw[2] == "." and raw[3] in self.SEPARATORS:
                name = _next_name(raw[4:], self.SEPARATORS)
                text = raw[: 4 + len(name)]
                return Prefix(text, PrefixKind.DEVICE_NS, text)
            server, share = _two_names(raw[2:], self.SEPARATORS)
            if server and share:
                text = raw[: 2 + len(server) + 1 + len(share)]
                return Prefix(text, PrefixKind.UNC, text)
            return None

        if len(raw) >= 2 and _is_drive_letter(raw[0]) and raw[1] == ":":
            return Prefix(raw[:2], PrefixKind.DISK, raw[0].upper())
        return None

    def _parse_verbatim(self, raw: str) -> Prefix:
        body = raw[4:]
        if body.startswith("UNC\\"):
            server, share = _two_names(body[4:], self.VERBATIM_SEPARATORS)
            length = 8 + len(server) + (1 + len(share) if share else 0)
            text = raw[:length]
            return Prefix(text, PrefixKind.VERBATIM_UNC, text)
        if (
            len(body) >= 2
            and _is_drive_letter(body[0])
            and body[1] == ":"
            and body[2:3] in ("", "\\")
        ):
            return Prefix(raw[:6], PrefixKind.VERBATIM_DISK, body[0].upper())
        name = _next_name(body, self.VERBATIM_SEPARATORS)
        text = raw[: 4 + len(name)]
        return Prefix(text, PrefixKind.VERBATIM, text)

    @override
    def separators(self, prefix: Prefix | None) -> str:
        if prefix is not None and prefix.is_verbatim:
            return self.VERBATIM_SEPARATORS
        return self.SEPARATORS

    @override
    def unify_separators(self, raw: str) -> str:
        return raw.replace("/", "\\")

    @override
    def segments_match(self, left: str, right: str) -> bool:
        # ASCII-only folding, non-ASCII letters still compare exactly
        return left.translate(_ASCII_LOWER) == right.translate(_ASCII_LOWER)

    @override
    def is_absolute(self, components: Sequence[Component]) -> bool:
        if not components or not isinstance(components[0], Prefix):
            return False
        if components[0].has_implicit_root:
            return True
        return len(components) > 1 and isinstance(components[1], RootDir)


POSIX: Final[PathFlavour] = PosixFlavour()
WINDOWS: Final[PathFlavour] = WindowsFlavour()

FLAVOURS: Final[dict[str, PathFlavour]] = {POSIX.name: POSIX, WINDOWS.name: WINDOWS}


class UnknownFlavourError(SugarPathError, ValueError):
    """Raised when a flavour name does not match any known convention."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown path flavour: {name}")
        self.name: str = name


def host_flavour() -> PathFlavour:
    """Return the flavour matching the running interpreter."""

    return WINDOWS if os.name == "nt" else POSIX


def flavour_for_name(name: str) -> PathFlavour:
    """Look up a flavour by name; ``"host"`` selects the running platform.

    Raises:
        UnknownFlavourError: If ``name`` is not ``host``, ``posix`` or ``windows``.
    """

    key = name.strip().lower()
    if key == "host":
        return host_flavour()
    try:
        return FLAVOURS[key]
    except KeyError:
        raise UnknownFlavourError(name) from None


__all__ = [
    "FLAVOURS",
    "POSIX",
    "PathFlavour",
    "PosixFlavour",
    "UnknownFlavourError",
    "WINDOWS",
    "WindowsFlavour",
    "flavour_for_name",
    "host_flavour",
]
