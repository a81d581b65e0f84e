"""Well-known paths of the running process and user."""

from __future__ import annotations

import enum
import os
import sys

from kbase.path import Path

_PROC_SELF_EXE = "/proc/self/exe"


class PathKey(enum.IntEnum):
    """Keys for the paths the base provider knows about."""

    BASE_PATH_START = 0
    FILE_EXE = 1
    FILE_MODULE = 2
    DIR_EXE = 3
    DIR_MODULE = 4
    DIR_CURRENT = 5
    DIR_TEMP = 6
    DIR_HOME = 7
    BASE_PATH_END = 8


def _executable_path() -> Path:
    try:
        return Path(os.readlink(_PROC_SELF_EXE))
    except OSError:
        pass
    if sys.executable:
        return Path(os.path.realpath(sys.executable))
    return Path()


def _current_directory() -> Path:
    try:
        return Path(os.getcwd())
    except OSError:
        return Path()


def _temp_directory() -> Path:
    tmp = os.environ.get("TMPDIR")
    if tmp is not None:
        return Path(tmp)
    return Path("/tmp")


def _home_directory() -> Path:
    home = os.environ.get("HOME")
    if home is not None:
        return Path(home)
    return Path()


def base_path_provider(key: int) -> Path:
    """Return the path for `key`, or an empty path if the key is not provided."""
    try:
        key = PathKey(key)
    except ValueError:
        return Path()

    if key in (PathKey.FILE_EXE, PathKey.FILE_MODULE):
        return _executable_path()
    if key in (PathKey.DIR_EXE, PathKey.DIR_MODULE):
        return _executable_path().parent_path()
    if key is PathKey.DIR_CURRENT:
        return _current_directory()
    if key is PathKey.DIR_TEMP:
        return _temp_directory()
    if key is PathKey.DIR_HOME:
        return _home_directory()
    return Path()