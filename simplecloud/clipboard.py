"""Process-wide clipboard for copy, cut and restore of cloud elements."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, Optional

from .elements import ElementCore

__all__ = ["TransactionType", "Clipboard"]


class TransactionType(Enum):
    COPY = "Copy"
    CUT = "Cut"
    RESTORE = "Restore"


class Clipboard:
    """Holds element cores waiting to be pasted."""

    _instance: ClassVar[Optional["Clipboard"]] = None

    def __init__(self) -> None:
        self._items: list[ElementCore] = []
        self.type = TransactionType.COPY

    @classmethod
    def instance(cls) -> Optional["Clipboard"]:
        """The shared clipboard, or ``None`` before :meth:`init`."""
        return cls._instance

    @classmethod
    def init(cls) -> "Clipboard":
        """Create the shared clipboard if it does not exist yet."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def clean_up(cls) -> None:
        """Drop the shared clipboard."""
        cls._instance = None

    def append(self, item: ElementCore) -> None:
        self._items.append(item)

    def clear(self) -> None:
        self._items.clear()

    def items(self) -> list[ElementCore]:
        """A copy of the held items, in insertion order."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)