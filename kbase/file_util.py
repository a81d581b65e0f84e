"""File and directory operations built on Path and FileIterator."""

from __future__ import annotations

import enum
import logging
import os
import stat
from typing import Optional, Union

from kbase.file_iterator import FileInfo, FileIterator, _info_from_stat
from kbase.path import Path

PathArg = Union[str, Path, "os.PathLike[str]"]
DataArg = Union[str, bytes, bytearray, memoryview]

_logger = logging.getLogger(__name__)

_COPY_CHUNK_SIZE = 32 * 1024
_DIR_MODE = 0o700


class OpenMode(enum.Enum):
    """How a file is opened for writing."""

    BINARY = "binary"
    TEXT = "text"


def make_absolute_path(path: PathArg) -> Path:
    """Return the canonical absolute path of an existing `path`, or an empty Path."""
    path = Path(path)
    if not path:
        return Path()
    try:
        return Path(os.path.realpath(path.value, strict=True))
    except OSError as exc:
        _logger.warning("realpath() failed for %s; %s", path.value, exc)
        return Path()


def path_exists(path: PathArg) -> bool:
    """Return True if the path exists."""
    return os.access(Path(path).value, os.F_OK)


def directory_exists(path: PathArg) -> bool:
    """Return True if the path exists and is a directory."""
    try:
        return stat.S_ISDIR(os.stat(Path(path).value).st_mode)
    except (OSError, ValueError):
        return False


def is_directory_empty(path: PathArg) -> bool:
    """Return True if the directory has no entries (or cannot be read)."""
    return next(FileIterator(path, False), None) is None


def make_directory(path: PathArg) -> bool:
    """Create a directory and any missing parents.

    Returns True on success or if the directory already exists.
    """
    path = Path(path)
    if not path:
        return False

    try:
        info = os.stat(path.value)
    except OSError:
        info = None

    if info is not None:
        if stat.S_ISDIR(info.st_mode):
            return True
        _logger.warning("Creating directory on %s conflicts with existing file!", path.value)
        return False

    if not make_directory(path.parent_path()):
        return False

    try:
        os.mkdir(path.value, _DIR_MODE)
    except OSError as exc:
        if not directory_exists(path):
            _logger.warning("Failed to create directory %s; %s", path.value, exc)
            return False

    return True


def get_file_info(path: PathArg) -> Optional[FileInfo]:
    """Return information about a file or directory, or None if it cannot be stat'ed."""
    path = Path(path)
    try:
        st = os.stat(path.value)
    except OSError:
        return None
    return _info_from_stat(path, st)


def remove_file(path: PathArg, recursive: bool = False) -> bool:
    """Remove a file or directory; a directory must be empty unless `recursive`."""
    path = Path(path)
    try:
        info = os.stat(path.value)
    except OSError:
        return False

    try:
        if not stat.S_ISDIR(info.st_mode):
            os.unlink(path.value)
            return True
        if not recursive:
            os.rmdir(path.value)
            return True
    except OSError:
        return False

    directories = [path]
    try:
        for entry in FileIterator(path, True):
            if entry.is_directory:
                directories.append(entry.file_path)
            else:
                os.unlink(entry.file_path.value)

        while directories:
            os.rmdir(directories.pop().value)
    except OSError:
        return False

    return True


def duplicate_file(src: PathArg, dest: PathArg) -> bool:
    """Copy the contents of `src` to `dest`, overwriting `dest`."""
    src, dest = Path(src), Path(dest)
    try:
        src_file = open(src.value, "rb")
    except OSError as exc:
        _logger.warning("Failed to open file to read on %s; %s", src.value, exc)
        return False

    with src_file:
        try:
            dest_file = open(dest.value, "wb")
        except OSError as exc:
            _logger.warning("Failed to open file to write on %s; %s", dest.value, exc)
            return False

        with dest_file:
            try:
                while chunk := src_file.read(_COPY_CHUNK_SIZE):
                    dest_file.write(chunk)
            except OSError:
                return False

    return True


def duplicate_directory(src: PathArg, dest: PathArg, recursive: bool = False) -> bool:
    """Copy the files of `src` into `dest`, and subdirectories too if `recursive`.

    The parent of `dest` must exist. Raises ValueError if, in recursive mode,
    `dest` lies inside `src`.
    """
    src, dest = Path(src), Path(dest)
    if not directory_exists(src):
        return False

    full_src = src if src.is_absolute() else make_absolute_path(src)

    full_dest = dest
    if not full_dest.is_absolute():
        full_dest_parent = make_absolute_path(dest.parent_path())
        if not full_dest_parent:
            return False
        full_dest = full_dest_parent.append_with(dest.filename())

    if recursive and full_src.is_parent(full_dest):
        raise ValueError(
            f"destination {full_dest.value!r} is inside source {full_src.value!r}")

    if full_src == full_dest:
        return True

    if not directory_exists(full_dest):
        try:
            os.mkdir(full_dest.value, _DIR_MODE)
        except OSError:
            return False

    for src_entry in FileIterator(full_src, recursive):
        dest_entry_path = full_src.append_relative_path(src_entry.file_path, full_dest)
        if dest_entry_path is None:
            return False

        if src_entry.is_directory:
            if not directory_exists(dest_entry_path):
                try:
                    os.mkdir(dest_entry_path.value, _DIR_MODE)
                except OSError:
                    return False
        elif not duplicate_file(src_entry.file_path, dest_entry_path):
            return False

    return True


def make_file_move(src: PathArg, dest: PathArg) -> bool:
    """Move a file or directory; falls back to copy-and-delete for directories."""
    src, dest = Path(src), Path(dest)
    try:
        os.rename(src.value, dest.value)
        return True
    except OSError:
        pass

    return duplicate_directory(src, dest, True) and remove_file(src, True)


def read_file_to_string(path: PathArg) -> bytes:
    """Return the whole file read in binary mode, or empty bytes on failure."""
    path = Path(path)
    try:
        with open(path.value, "rb") as file:
            return file.read()
    except OSError:
        _logger.warning("Create/open file failed for path %s", path.value)
        return b""


def _write(path: PathArg, data: DataArg, mode: OpenMode, append: bool) -> None:
    path = Path(path)
    mode = OpenMode(mode)
    flag = "a" if append else "w"
    try:
        if mode is OpenMode.BINARY:
            payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)
            with open(path.value, flag + "b") as file:
                file.write(payload)
        else:
            text = data if isinstance(data, str) else bytes(data).decode("utf-8")
            with open(path.value, flag, encoding="utf-8") as file:
                file.write(text)
    except OSError:
        _logger.warning("Create/open file failed for path %s", path.value)


def write_string_to_file(path: PathArg, data: DataArg, mode: OpenMode = OpenMode.BINARY) -> None:
    """Write `data` to `path`, replacing its contents; failures are only logged."""
    _write(path, data, mode, append=False)


def append_string_to_file(path: PathArg, data: DataArg,
                          mode: OpenMode = OpenMode.BINARY) -> None:
    """Append `data` to `path`, creating it if needed; failures are only logged."""
    _write(path, data, mode, append=True)