"""Breadcrumb model of the current folder path, in several display styles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

__all__ = [
    "DEFAULT_STYLE",
    "MAX_PATH_BUTTONS",
    "HistoryView",
    "PathButton",
    "HistoryDisplay",
    "build_partial_path",
]

DEFAULT_STYLE = """
QPushButton {
    border-radius: 10px;
    background: rgba(30,30,30,0.5);
    padding-left: 10px;
    padding-right: 10px;
    color: white;
    font: 13pt "Segoe UI";
    border: none;
}

QPushButton:hover {
    background: #479EF5;
    color: black;
}

QPushButton:pressed {
    background-color: rgba(70, 158, 245, 0.6);
}
"""

MAX_PATH_BUTTONS = 10
"""Most path buttons the modern view shows before eliding the start."""

_ELLIPSIS = "..."


class HistoryView(Enum):
    """How the path is presented."""

    MODERN = "Modern"
    NORMAL = "Normal"
    MINIMAL = "Minimal"
    BREADCRUMB = "Breadcrumb"


@dataclass(frozen=True)
class PathButton:
    """One item of the displayed path.

    ``role`` is ``"home"``, ``"path"``, ``"ellipsis"`` or ``"separator"``;
    ``full_path`` is the path a click on the item navigates to, if any.
    """

    text: str
    role: str = "path"
    full_path: Optional[str] = None
    enabled: bool = True


def _parts(path: str) -> list[str]:
    return [part for part in path.split("/") if part]


def build_partial_path(path: str, index: int) -> str:
    """The first ``index + 1`` components of ``path`` joined by ``/``.

    An index beyond the last component gives ``path`` unchanged.
    """
    parts = _parts(path)
    if index >= len(parts):
        return path
    return "/".join(parts[: index + 1])


class HistoryDisplay:
    """Turns a folder path into clickable buttons for the current view."""

    def __init__(self, view: HistoryView = HistoryView.MODERN) -> None:
        self._path = ""
        self._view = HistoryView(view)
        self._button_style = DEFAULT_STYLE
        self._buttons: list[PathButton] = []
        self._path_listeners: list[Callable[[str], None]] = []
        self._home_listeners: list[Callable[[], None]] = []

    @property
    def path(self) -> str:
        return self._path

    @property
    def view(self) -> HistoryView:
        return self._view

    @property
    def button_style(self) -> str:
        return self._button_style

    @button_style.setter
    def button_style(self, style: str) -> None:
        self._button_style = style
        self._rebuild()

    def set_path(self, path: str) -> None:
        """Show ``path``; nothing changes if it is already shown."""
        if path != self._path:
            self._path = path
            self._rebuild()

    def set_view(self, view: HistoryView) -> None:
        """Switch the display style; nothing changes if it is already in use."""
        view = HistoryView(view)
        if view is not self._view:
            self._view = view
            self._rebuild()

    def buttons(self) -> list[PathButton]:
        """The items currently displayed, left to right."""
        return list(self._buttons)

    def on_path_clicked(self, callback: Callable[[str], None]) -> None:
        self._path_listeners.append(callback)

    def on_home_clicked(self, callback: Callable[[], None]) -> None:
        self._home_listeners.append(callback)

    def click(self, button: PathButton) -> None:
        """Act on a click of ``button``; disabled items raise ``ValueError``."""
        if button not in self._buttons:
            raise ValueError("button is not displayed")
        if not button.enabled:
            raise ValueError("button is disabled")
        if button.role == "home":
            for listener in list(self._home_listeners):
                listener()
        elif button.full_path is not None:
            for listener in list(self._path_listeners):
                listener(button.full_path)

    # -- building ---------------------------------------------------------

    def _rebuild(self) -> None:
        builders = {
            HistoryView.MODERN: self._modern,
            HistoryView.NORMAL: self._normal,
            HistoryView.MINIMAL: self._minimal,
            HistoryView.BREADCRUMB: self._breadcrumb,
        }
        self._buttons = builders[self._view]() if self._path else []

    def _modern(self) -> list[PathButton]:
        parts = _parts(self._path)
        if not parts:
            return []
        items: list[PathButton] = []
        if self._path.startswith(":"):
            items.append(PathButton("", role="home"))
        start = len(parts) - MAX_PATH_BUTTONS if len(parts) > MAX_PATH_BUTTONS else 1
        if start > 1:
            items.append(PathButton(_ELLIPSIS, role="ellipsis", enabled=False))
        last = len(parts) - 1
        for index in range(start, len(parts)):
            items.append(
                PathButton(parts[index], full_path=build_partial_path(self._path, index))
            )
            if index < last:
                items.append(PathButton("", role="separator", enabled=False))
        return items

    def _normal(self) -> list[PathButton]:
        return [PathButton(self._path, full_path=self._path)]

    def _minimal(self) -> list[PathButton]:
        parts = _parts(self._path)
        text = parts[-1] if parts else self._path
        return [PathButton(text, full_path=self._path)]

    def _breadcrumb(self) -> list[PathButton]:
        parts = _parts(self._path)
        if len(parts) <= 1:
            return self._minimal()
        text = _ELLIPSIS + "/".join(parts[-2:])
        return [PathButton(text, full_path=self._path)]