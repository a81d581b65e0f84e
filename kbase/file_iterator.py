"""Walking the entries of a directory, optionally recursively."""

from __future__ import annotations

import dataclasses
import os
import stat
from collections.abc import Iterator
from datetime import datetime
from typing import Optional, Union

from kbase.chrono_util import time_point_from_timespec
from kbase.path import Path

PathArg = Union[str, Path, "os.PathLike[str]"]

_NS_PER_SECOND = 1_000_000_000


@dataclasses.dataclass(frozen=True)
class FileInfo:
    """Size, kind and time stamps of a file or directory."""

    file_path: Path
    size: int
    is_directory: bool
    creation_time: datetime
    last_modified_time: datetime
    last_accessed_time: datetime


def _time_from_ns(nanoseconds: int) -> datetime:
    seconds, rest = divmod(nanoseconds, _NS_PER_SECOND)
    return time_point_from_timespec(seconds, rest)


def _info_from_stat(path: Path, st: Optional[os.stat_result]) -> FileInfo:
    """Build a FileInfo from a stat result; a missing result yields zeroed fields."""
    if st is None:
        return FileInfo(path, 0, False, _time_from_ns(0), _time_from_ns(0), _time_from_ns(0))
    return FileInfo(
        file_path=path,
        size=st.st_size,
        is_directory=stat.S_ISDIR(st.st_mode),
        creation_time=_time_from_ns(st.st_ctime_ns),
        last_modified_time=_time_from_ns(st.st_mtime_ns),
        last_accessed_time=_time_from_ns(st.st_atime_ns),
    )


class FileIterator:
    """Iterator over FileInfo entries of a directory.

    In recursive mode every entry of a directory is produced before any entry
    of its subdirectories. Symbolic links to directories are not followed, and
    directories that cannot be opened are skipped silently.
    """

    def __init__(self, dir_path: PathArg, recursive: bool = False) -> None:
        self._recursive = bool(recursive)
        self._pending: list[Path] = [Path(dir_path)]
        self._current_dir = Path()
        self._scanner = None

    def __iter__(self) -> Iterator[FileInfo]:
        return self

    def __next__(self) -> FileInfo:
        while self._pending or self._scanner is not None:
            if self._scanner is None:
                self._current_dir = self._pending.pop()
                try:
                    self._scanner = os.scandir(self._current_dir.value)
                except OSError:
                    continue

            try:
                entry = next(self._scanner)
            except StopIteration:
                self._close_scanner()
                continue
            except OSError:
                self._close_scanner()
                continue

            if entry.name in (Path.CURRENT_DIR, Path.PARENT_DIR):
                continue

            entry_path = self._current_dir.append_with(entry.name)
            try:
                entry_stat: Optional[os.stat_result] = os.lstat(entry_path.value)
            except OSError:
                entry_stat = None

            if self._recursive and entry_stat is not None and stat.S_ISDIR(entry_stat.st_mode):
                self._pending.append(entry_path)

            return _info_from_stat(entry_path, entry_stat)

        raise StopIteration

    def _close_scanner(self) -> None:
        if self._scanner is not None:
            self._scanner.close()
            self._scanner = None

    def __del__(self) -> None:
        self._close_scanner()