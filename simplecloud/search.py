"""Searching folder contents and moving back and forth through visited folders."""

from __future__ import annotations

import time
from typing import Callable, Iterable, Optional

from .elements import ElementCore

__all__ = [
    "ANIMATION_TIME_MS",
    "NO_RESULTS_MESSAGE",
    "NavigationHistory",
    "extract_filename",
    "search_elements",
    "search_path",
]

ANIMATION_TIME_MS = 270
"""Length of the folder transition, during which navigation is ignored."""

NO_RESULTS_MESSAGE = "🧐 No File Found !"

_UNKNOWN_NAME = "Unknown"
_ROOT = ":/"


def extract_filename(path: str) -> str:
    """Last non-empty component of ``path``, or ``"Unknown"`` if there is none."""
    parts = [part for part in path.split("/") if part]
    return parts[-1] if parts else _UNKNOWN_NAME


def search_elements(elements: Iterable[ElementCore], query: str) -> list[ElementCore]:
    """Elements whose name contains ``query``, ignoring case, in their original order.

    An empty query matches nothing.
    """
    if not query:
        return []
    needle = query.lower()
    return [element for element in elements if needle in element.name.lower()]


def search_path(filepath: str) -> str:
    """Short root-relative path for a search hit: its parent folder and name."""
    parts = filepath.split("/")
    if len(parts) >= 2:
        return _ROOT + parts[-2] + "/" + parts[-1]
    return _ROOT + parts[-1]


class NavigationHistory:
    """Visited folder paths with a cursor, like a browser's back and forward.

    After a move, further moves are ignored until ``cooldown`` seconds have
    passed, so that a running transition is not interrupted.
    """

    def __init__(
        self,
        cooldown: float = 0.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if cooldown < 0:
            raise ValueError("cooldown must not be negative")
        self._paths: list[str] = []
        self._index = 0
        self._cooldown = cooldown
        self._clock = clock
        self._available_at: Optional[float] = None

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> Optional[str]:
        """The path under the cursor, or ``None`` when nothing was visited."""
        return self._paths[self._index] if self._paths else None

    @property
    def paths(self) -> list[str]:
        return list(self._paths)

    @property
    def can_go_back(self) -> bool:
        return self._index > 0

    @property
    def can_go_forward(self) -> bool:
        return self._index < len(self._paths) - 1

    def __len__(self) -> int:
        return len(self._paths)

    def push(self, path: str) -> None:
        """Visit ``path``: forward entries are dropped and the cursor moves to it."""
        if self._paths:
            del self._paths[self._index + 1:]
        self._paths.append(path)
        self._index = len(self._paths) - 1

    def back(self) -> Optional[str]:
        """Step back and return the new current path, or ``None`` if no move happened."""
        if not self.can_go_back or not self._take_slot():
            return None
        self._index -= 1
        return self._paths[self._index]

    def forward(self) -> Optional[str]:
        """Step forward and return the new current path, or ``None`` if no move happened."""
        if not self.can_go_forward or not self._take_slot():
            return None
        self._index += 1
        return self._paths[self._index]

    def reset(self) -> Optional[str]:
        """Forget all visited paths; returns the path that was current."""
        last = self.current
        self._paths.clear()
        self._index = 0
        self._available_at = None
        return last

    def _take_slot(self) -> bool:
        now = self._clock()
        if self._available_at is not None and now < self._available_at:
            return False
        self._available_at = now + self._cooldown
        return True