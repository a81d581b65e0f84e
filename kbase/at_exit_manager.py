"""Running registered cleanup callbacks at a controlled point."""

from __future__ import annotations

import threading
from typing import Callable, ClassVar, Optional

ExitCallback = Callable[[], object]


class AtExitManager:
    """Holds cleanup callbacks and runs them, last registered first, on close.

    Only one manager may be active at a time.
    """

    _current: ClassVar[Optional[AtExitManager]] = None
    _registry_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._callbacks: list[ExitCallback] = []
        self._closed = False
        with AtExitManager._registry_lock:
            if AtExitManager._current is not None:
                raise RuntimeError("only one AtExitManager may be active at a time")
            AtExitManager._current = self

    def __enter__(self) -> AtExitManager:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Run all registered callbacks in reverse order and deactivate the manager."""
        if self._closed:
            return
        if AtExitManager._current is not self:
            raise RuntimeError("this AtExitManager is not the active one")
        try:
            self._process_callbacks()
        finally:
            self._closed = True
            with AtExitManager._registry_lock:
                AtExitManager._current = None

    def _process_callbacks(self) -> None:
        while True:
            with self._lock:
                if not self._callbacks:
                    return
                callback = self._callbacks.pop()
            callback()

    @staticmethod
    def register_callback(callback: ExitCallback) -> None:
        """Register `callback` with the active manager.

        Raises RuntimeError if no manager is active.
        """
        manager = AtExitManager._current
        if manager is None:
            raise RuntimeError("no active AtExitManager")
        if not callable(callback):
            raise TypeError("callback must be callable")
        with manager._lock:
            manager._callbacks.append(callback)