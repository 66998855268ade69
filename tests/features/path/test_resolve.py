"""
Summary: Tests for resolving path text against a fixed working directory.
Why: Resolve must always yield an absolute canonical path on both flavours.
"""

from __future__ import annotations

import pytest
from pytest_mock import MockerFixture

from sugarpath.features.path import (
    POSIX,
    WINDOWS,
    StaticWorkingDirectory,
    decompose,
    is_absolute_path,
    join_components,
    resolve_path,
)
from sugarpath.shared.components import PARENT_DIR, ROOT_DIR, Normal, Prefix, PrefixKind

POSIX_CWD = StaticWorkingDirectory("/home/user/project")
WINDOWS_CWD = StaticWorkingDirectory(r"C:\Users\dev\project")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("", "/home/user/project"),
        (".", "/home/user/project"),
        ("src/../lib", "/home/user/project/lib"),
        ("../other", "/home/user/other"),
        ("../../../../..", "/"),
        ("/etc//passwd", "/etc/passwd"),
        ("/../etc", "/etc"),
    ],
)
def test_posix_resolve(raw: str, expected: str) -> None:
    assert resolve_path(raw, POSIX, POSIX_CWD) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (r"src\main.py", r"C:\Users\dev\project\src\main.py"),
        ("src/main.py", r"C:\Users\dev\project\src\main.py"),
        (r"D:\data", r"D:\data"),
        (r"D:data\x", r"D:\data\x"),
        ("D:", "D:\\"),
        (r"\tmp", r"C:\tmp"),
        ("/tmp/x", r"C:\tmp\x"),
        (r"..\..\..\..", "C:\\"),
        (r"\\srv\share\a\..\b", r"\\srv\share\b"),
        ("", r"C:\Users\dev\project"),
    ],
)
def test_windows_resolve(raw: str, expected: str) -> None:
    assert resolve_path(raw, WINDOWS, WINDOWS_CWD) == expected


def test_drive_relative_path_ignores_working_directory(mocker: MockerFixture) -> None:
    """``C:foo`` is anchored at the drive root without reading any cwd."""

    cwd = mocker.Mock()

    assert resolve_path("C:foo", WINDOWS, cwd) == r"C:\foo"
    cwd.current.assert_not_called()


def test_absolute_input_does_not_read_working_directory(mocker: MockerFixture) -> None:
    cwd = mocker.Mock()

    assert resolve_path("/a/./b", POSIX, cwd) == "/a/b"
    cwd.current.assert_not_called()


SAMPLES: tuple[str, ...] = ("", ".", "a/b", "../..", "/x/../y", "C:z", r"\w", r"\\s\sh")


@pytest.mark.parametrize("raw", SAMPLES)
def test_resolve_is_absolute(raw: str) -> None:
    assert is_absolute_path(resolve_path(raw, POSIX, POSIX_CWD), POSIX)
    assert is_absolute_path(resolve_path(raw, WINDOWS, WINDOWS_CWD), WINDOWS)


@pytest.mark.parametrize("raw", SAMPLES)
def test_resolve_is_idempotent(raw: str) -> None:
    once = resolve_path(raw, POSIX, POSIX_CWD)
    assert resolve_path(once, POSIX, POSIX_CWD) == once

    once = resolve_path(raw, WINDOWS, WINDOWS_CWD)
    assert resolve_path(once, WINDOWS, WINDOWS_CWD) == once


@pytest.mark.parametrize(
    ("cwd", "raw", "expected"),
    [
        (r"\\srv\sh", "..", "\\\\srv\\sh\\"),
        (r"\\srv\sh", r"..\..\a", r"\\srv\sh\a"),
        (r"\\srv\sh", r"a\..\..\b", r"\\srv\sh\b"),
        (r"\\.\COM1", "..", "\\\\.\\COM1\\"),
        (r"\\?\C:", "..", "\\\\?\\C:\\"),
        (r"\\?\C:", r"..\x", r"\\?\C:\x"),
    ],
)
def test_ascents_cannot_escape_bare_share_or_device(cwd: str, raw: str, expected: str) -> None:
    """A working directory naming a share or device acts as a root."""

    working_directory = StaticWorkingDirectory(cwd)
    resolved = resolve_path(raw, WINDOWS, working_directory)

    assert resolved == expected
    assert PARENT_DIR not in decompose(resolved, WINDOWS)
    assert resolve_path(resolved, WINDOWS, working_directory) == resolved


class TestJoinComponents:
    """Joining a relative path onto a base follows path buffer push rules."""

    def test_relative_segments_extend_base(self) -> None:
        base = decompose("/srv/app", POSIX)
        assert join_components(base, [Normal("x")]) == [
            ROOT_DIR,
            Normal("srv"),
            Normal("app"),
            Normal("x"),
        ]

    def test_rooted_path_keeps_only_base_prefix(self) -> None:
        base = decompose(r"C:\Users\dev", WINDOWS)
        assert join_components(base, [ROOT_DIR, Normal("tmp")]) == [
            Prefix("C:", PrefixKind.DISK, "C"),
            ROOT_DIR,
            Normal("tmp"),
        ]

    def test_rooted_path_without_base_prefix(self) -> None:
        assert join_components([ROOT_DIR, Normal("a")], [ROOT_DIR, Normal("b")]) == [
            ROOT_DIR,
            Normal("b"),
        ]
