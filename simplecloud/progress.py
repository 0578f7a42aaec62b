"""A thread-safe progress counter that notifies listeners on change."""

from __future__ import annotations

import threading
from typing import Callable

__all__ = ["BarUpdater"]


class BarUpdater:
    """Accumulates transferred byte counts for a progress display."""

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()
        self._listeners: list[Callable[[], None]] = []
        self._stopped = threading.Event()

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    @property
    def stopped(self) -> bool:
        return self._stopped.is_set()

    def increment(self, size: int) -> None:
        """Add ``size`` to the counter and notify listeners."""
        with self._lock:
            self._value += size
        self._notify()

    def set_value(self, size: int) -> None:
        """Replace the counter and notify listeners."""
        with self._lock:
            self._value = size
        self._notify()

    def reset(self) -> None:
        """Set the counter back to zero without notifying."""
        with self._lock:
            self._value = 0

    def stop(self) -> None:
        self._stopped.set()

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Call ``callback`` on every change; returns a function that unsubscribes."""
        with self._lock:
            self._listeners.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._listeners:
                    self._listeners.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener()