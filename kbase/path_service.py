"""Looking up well-known paths by key through registered providers."""

from __future__ import annotations

import dataclasses
import threading
from typing import Callable, Optional

from kbase.base_path_provider import PathKey, base_path_provider
from kbase.file_util import make_absolute_path
from kbase.path import Path

ProviderFunc = Callable[[int], Optional[Path]]


@dataclasses.dataclass(frozen=True)
class _PathProvider:
    fn: ProviderFunc
    start: int
    end: int


class _PathContext:
    def __init__(self) -> None:
        self.lock = threading.RLock()
        self.providers = [_PathProvider(base_path_provider,
                                        int(PathKey.BASE_PATH_START),
                                        int(PathKey.BASE_PATH_END))]
        self.cache: dict[int, Path] = {}
        self.cache_disabled = False


_context = _PathContext()


def _path_from_cache(key: int) -> Path:
    with _context.lock:
        if _context.cache_disabled or key == PathKey.DIR_CURRENT:
            return Path()
        return _context.cache.get(key, Path())


def _cache_path(key: int, path: Path) -> None:
    with _context.lock:
        if not _context.cache_disabled and key != PathKey.DIR_CURRENT:
            _context.cache[key] = path


def get_path(key: int) -> Path:
    """Return the absolute path for `key`, or an empty Path if no provider knows it.

    Raises ValueError for keys below the base range, and RuntimeError if a
    relative path returned by a provider cannot be made absolute.
    """
    key = int(key)
    if key < PathKey.BASE_PATH_START:
        raise ValueError(f"invalid path key {key}")

    path = _path_from_cache(key)
    if path:
        return path

    with _context.lock:
        providers = list(_context.providers)
    path = Path()
    for provider in providers:
        result = provider.fn(key)
        if result:
            path = Path(result)
            break

    if not path:
        return path

    if not path.is_absolute():
        full_path = make_absolute_path(path)
        if not full_path:
            raise RuntimeError(f"cannot make {path.value!r} absolute for key {key}")
        path = full_path

    _cache_path(key, path)
    return path


def register_path_provider(provider: ProviderFunc, start: int, end: int) -> None:
    """Register `provider` for keys in [start, end].

    Raises ValueError if start is not below end, or if the range overlaps one
    already registered.
    """
    start, end = int(start), int(end)
    if start >= end:
        raise ValueError(f"invalid key range [{start}, {end}]")

    with _context.lock:
        if __debug__:
            for existing in _context.providers:
                if not (start > existing.end or end < existing.start):
                    raise ValueError(
                        f"key range [{start}, {end}] overlaps "
                        f"[{existing.start}, {existing.end}]")
        _context.providers.append(_PathProvider(provider, start, end))


def disable_cache() -> None:
    """Stop caching looked-up paths and drop those already cached."""
    with _context.lock:
        if not _context.cache_disabled:
            _context.cache.clear()
            _context.cache_disabled = True


def enable_cache() -> None:
    """Resume caching looked-up paths."""
    with _context.lock:
        _context.cache_disabled = False