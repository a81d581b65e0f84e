"""File-system path values with lexical manipulation helpers."""

from __future__ import annotations

import functools
import os
from typing import Union

PathLikeValue = Union[str, "Path", "os.PathLike[str]"]


def _find_drive_letter(path: str) -> int:
    """Return the index of the ':' in a leading drive spec, or -1 if there is none."""
    if len(path) >= 2 and path[1] == ":" and ("A" <= path[0] <= "Z" or "a" <= path[0] <= "z"):
        return 1
    return -1


def _rfind_separator(path: str) -> int:
    return max(path.rfind(sep) for sep in Path.SEPARATORS)


def _is_path_absolute(path: str) -> bool:
    return len(path) > 0 and Path.is_separator(path[0])


def _is_special_case(path: str) -> bool:
    return path in (Path.CURRENT_DIR, Path.PARENT_DIR)


def _extension_separator_position(path: str) -> int:
    if _is_special_case(path):
        return -1
    return path.rfind(Path.EXTENSION_SEPARATOR)


def _as_string(value: PathLikeValue) -> str:
    if isinstance(value, Path):
        return value.value
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return os.fspath(value)


@functools.total_ordering
class Path:
    """A path stored as a string, manipulated purely lexically.

    Both '/' and '\\' are recognised as separators; '/' is preferred.
    """

    PREFERRED_SEPARATOR = "/"
    EXTENSION_SEPARATOR = "."
    SEPARATORS = "\\/"
    CURRENT_DIR = "."
    PARENT_DIR = ".."

    def __init__(self, value: PathLikeValue = "") -> None:
        self._value = _as_string(value)

    @property
    def value(self) -> str:
        """The underlying path string."""
        return self._value

    def __bool__(self) -> bool:
        return bool(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Path({self._value!r})"

    def __fspath__(self) -> str:
        return self._value

    def clear(self) -> None:
        """Make the path empty."""
        self._value = ""

    @staticmethod
    def is_separator(ch: str) -> bool:
        """Return True if `ch` is one of the path separators."""
        return len(ch) == 1 and ch in Path.SEPARATORS

    def ends_with_separator(self) -> bool:
        """Return True if the path ends with a separator."""
        return bool(self._value) and self.is_separator(self._value[-1])

    def strip_trailing_separators(self) -> Path:
        """Remove redundant trailing separators, keeping a meaningful root."""
        value = self._value
        start = _find_drive_letter(value) + 2
        last_stripped = None
        pos = len(value)
        while pos > start and self.is_separator(value[pos - 1]):
            if pos != start + 1 or not self.is_separator(value[start - 1]) \
                    or last_stripped is not None:
                last_stripped = pos
            else:
                break
            pos -= 1
        self._value = value[:pos]
        return self

    def make_path_separator_to(self, separator: str) -> Path:
        """Replace the kind of separator found first with `separator`."""
        positions = [p for p in (self._value.find(s) for s in self.SEPARATORS) if p != -1]
        if positions:
            pos = min(positions)
            old_sep = self._value[pos]
            if old_sep != separator:
                self._value = self._value[:pos] + self._value[pos:].replace(old_sep, separator)
        return self

    def make_preferred_separator(self) -> Path:
        """Convert separators to the preferred separator."""
        return self.make_path_separator_to(self.PREFERRED_SEPARATOR)

    def parent_path(self) -> Path:
        """Return the parent directory; empty for a single element or an empty path."""
        parent = Path(self._value).strip_trailing_separators()
        value = parent._value
        letter = _find_drive_letter(value)
        last_sep = _rfind_separator(value)

        if last_sep == -1:
            if letter != -1 and value.endswith(":"):
                value = ""
            else:
                value = value[:letter + 1]
        elif last_sep == letter + 1:
            value = "" if self.is_separator(value[-1]) else value[:letter + 2]
        elif last_sep == letter + 2 and self.is_separator(value[letter + 1]):
            value = "" if self.is_separator(value[-1]) else value[:letter + 3]
        else:
            value = value[:last_sep]

        parent._value = value
        return parent

    def filename(self) -> Path:
        """Return the last component; a root path is returned as is."""
        name = Path(self._value).strip_trailing_separators()
        value = name._value
        last_sep = _rfind_separator(value)
        if last_sep != -1 and last_sep < len(value) - 1:
            value = value[last_sep + 1:]

        letter = _find_drive_letter(value)
        if letter != -1 and letter + 1 < len(value) and not self.is_separator(value[letter + 1]):
            value = value[letter + 1:]

        name._value = value
        return name

    def components(self) -> list[str]:
        """Return every component of the path, including the root and drive."""
        if not self._value:
            return []

        components: list[str] = []
        current = Path(self._value)
        while current.parent_path():
            name = current.filename().value
            if not all(self.is_separator(ch) for ch in name):
                components.append(name)
            current = current.parent_path()

        value = current.value
        letter = _find_drive_letter(value)
        if value and value != self.CURRENT_DIR and letter + 1 < len(value):
            components.append(value[letter + 1:])

        if letter != -1:
            components.append(value[:letter + 1])

        components.reverse()
        return components

    def is_absolute(self) -> bool:
        """Return True if the path is absolute."""
        return _is_path_absolute(self._value)

    def append(self, components: PathLikeValue) -> Path:
        """Append a relative path in place.

        Raises ValueError if `components` is absolute.
        """
        components = _as_string(components)
        if _is_path_absolute(components):
            raise ValueError(f"cannot append absolute path {components!r}")

        if self._value == self.CURRENT_DIR:
            self._value = components
            return self

        self.strip_trailing_separators()

        if components and self._value:
            if not self.is_separator(self._value[-1]):
                if _find_drive_letter(self._value) + 1 != len(self._value):
                    self._value += self.PREFERRED_SEPARATOR

        self._value += components
        return self

    def append_with(self, components: PathLikeValue) -> Path:
        """Return a new path with `components` appended."""
        return Path(self._value).append(components)

    def append_relative_path(self, child: Path, path: Path) -> Path | None:
        """Return `path` extended by the part of `child` below this path.

        Returns None if this path is not a parent of `child`.
        """
        current_components = self.components()
        child_components = child.components()

        if not current_components or len(current_components) >= len(child_components):
            return None

        prefix = child_components[:len(current_components)]
        if prefix != current_components:
            return None

        result = Path(path)
        for component in child_components[len(current_components):]:
            result.append(component)
        return result

    def is_parent(self, child: Path) -> bool:
        """Return True if this path is a parent of `child`."""
        return self.append_relative_path(child, Path()) is not None

    def reference_parent(self) -> bool:
        """Return True if any component is '..' (trailing spaces ignored)."""
        return any(component.rstrip(" ") == self.PARENT_DIR for component in self.components())

    def extension(self) -> str:
        """Return the extension of the file name, starting with '.', or ''."""
        base = self.filename().value
        pos = _extension_separator_position(base)
        return "" if pos == -1 else base[pos:]

    def remove_extension(self) -> Path:
        """Remove the last extension, if any."""
        if self.extension():
            pos = _extension_separator_position(self._value)
            if pos != -1:
                self._value = self._value[:pos]
        return self

    def add_extension(self, extension: str) -> Path:
        """Add `extension`, with or without a leading '.', to the file name."""
        if not extension or extension == self.EXTENSION_SEPARATOR:
            return self

        if _is_special_case(self.filename().value):
            self._value += self.PREFERRED_SEPARATOR

        if not self._value.endswith(self.EXTENSION_SEPARATOR) \
                and not extension.startswith(self.EXTENSION_SEPARATOR):
            self._value += self.EXTENSION_SEPARATOR

        self._value += extension
        return self

    def replace_extension(self, extension: str) -> Path:
        """Replace the extension; an empty or '.' extension just removes it."""
        self.remove_extension()

        if not extension or extension == self.EXTENSION_SEPARATOR:
            return self

        if _is_special_case(self.filename().value):
            self._value += self.PREFERRED_SEPARATOR

        if not extension.startswith(self.EXTENSION_SEPARATOR):
            self._value += self.EXTENSION_SEPARATOR

        self._value += extension
        return self

    def as_utf8(self) -> str:
        """Return the path as a UTF-8 string."""
        return self._value

    @staticmethod
    def from_utf8(path: str | bytes) -> Path:
        """Create a path from a UTF-8 string or bytes."""
        return Path(path)