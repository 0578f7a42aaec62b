"""Entries (files, folders, shortcuts) shown in the cloud browser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

__all__ = ["ElementType", "ElementView", "ElementCore", "CloudElement"]


class ElementType(Enum):
    FILE = "File"
    FOLDER = "Folder"
    SHORTCUT = "Shortcut"
    NONE = "None"


class ElementView(Enum):
    LINEAR = "Linear"
    GRID = "Grid"


def _filepath_of(info: Any) -> Any:
    return getattr(info, "filepath", info)


@dataclass(eq=False)
class ElementCore:
    """The copyable essence of an element: its name, path and file info.

    Two cores are equal when name, path and the info's ``filepath`` match.
    """

    name: str = ""
    path: str = ""
    info: Any = None

    def _key(self) -> tuple:
        return (self.name, self.path, _filepath_of(self.info))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ElementCore):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


class CloudElement:
    """A selectable entry with change notifications."""

    def __init__(
        self,
        name: str = "d",
        size: int = 0,
        element_type: ElementType = ElementType.NONE,
        info: Any = None,
    ) -> None:
        self.name = name
        self.size = size
        self.element_type = element_type
        self.info = info
        self.multi_selection = False
        self.menu: Any = None
        self._selected = False
        self._view = ElementView.GRID
        self._selected_listeners: list[Callable[[bool], None]] = []
        self._view_listeners: list[Callable[[ElementView], None]] = []

    @property
    def selected(self) -> bool:
        return self._selected

    @property
    def view(self) -> ElementView:
        return self._view

    def set_selected(self, selected: bool) -> None:
        self._selected = bool(selected)
        for listener in list(self._selected_listeners):
            listener(self._selected)

    def set_view(self, view: ElementView) -> None:
        self._view = ElementView(view)
        for listener in list(self._view_listeners):
            listener(self._view)

    def on_selected_changed(self, callback: Callable[[bool], None]) -> None:
        self._selected_listeners.append(callback)

    def on_view_changed(self, callback: Callable[[ElementView], None]) -> None:
        self._view_listeners.append(callback)

    def core(self) -> ElementCore:
        return ElementCore(self.name, self.name, self.info)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, size={self.size!r}, "
            f"element_type={self.element_type!r})"
        )