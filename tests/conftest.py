"""Shared pytest fixtures pinning flavour and working directory."""

from __future__ import annotations

import pytest

from sugarpath import POSIX, WINDOWS, PathResolver, StaticWorkingDirectory

POSIX_CWD = "/home/user/project"
WINDOWS_CWD = r"C:\Users\dev\project"


@pytest.fixture
def posix_cwd() -> StaticWorkingDirectory:
    return StaticWorkingDirectory(POSIX_CWD)


@pytest.fixture
def windows_cwd() -> StaticWorkingDirectory:
    return StaticWorkingDirectory(WINDOWS_CWD)


@pytest.fixture
def posix_resolver(posix_cwd: StaticWorkingDirectory) -> PathResolver:
    """POSIX resolver rooted at a fixed project directory."""

    return PathResolver(POSIX, posix_cwd)


@pytest.fixture
def windows_resolver(windows_cwd: StaticWorkingDirectory) -> PathResolver:
    """Windows resolver rooted at a fixed project directory on drive C."""

    return PathResolver(WINDOWS, windows_cwd)
