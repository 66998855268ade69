"""Tests for the ``SugarPath`` path-like value."""

from __future__ import annotations

import os

from sugarpath import DEFAULT_RESOLVER, PathResolver, SugarPath


def test_methods_return_bound_sugar_paths(posix_resolver: PathResolver) -> None:
    path = posix_resolver.path("src/./pkg/../app.py")

    normalized = path.normalize()
    resolved = path.resolve()

    assert normalized == "src/app.py"
    assert resolved == SugarPath("/home/user/project/src/app.py")
    assert normalized.resolver is posix_resolver
    assert resolved.is_absolute()
    assert not path.is_absolute()


def test_relative_accepts_sugar_path(posix_resolver: PathResolver) -> None:
    target = posix_resolver.path("/bin")
    base = posix_resolver.path("/var/lib")

    assert target.relative(base) == "../../bin"
    assert isinstance(target.relative("/var"), SugarPath)


def test_windows_chain(windows_resolver: PathResolver) -> None:
    path = windows_resolver.path(r"C:\Foo\Bar")

    assert path.relative(r"C:\foo\baz") == r"..\Bar"
    assert windows_resolver.path("C:").normalize() == "C:."


def test_path_protocol_and_text() -> None:
    path = SugarPath("a/b")

    assert os.fspath(path) == "a/b"
    assert str(path) == "a/b"
    assert repr(path) == "SugarPath('a/b')"
    assert os.path.join(path, "c") == os.path.join("a/b", "c")


def test_equality_and_hashing() -> None:
    assert SugarPath("a") == SugarPath("a")
    assert SugarPath("a") == "a"
    assert SugarPath("a") != SugarPath("b")
    assert SugarPath("a") != 1
    assert len({SugarPath("a"), SugarPath("a"), SugarPath("b")}) == 2


def test_default_resolver_is_used_when_unbound() -> None:
    assert SugarPath("x").resolver is DEFAULT_RESOLVER
