"""Sorting, selection and rubber-band picking of folder entries."""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from typing import Iterable, Sequence

from .common import format_size
from .elements import CloudElement, ElementType

__all__ = [
    "DEFAULT_MIME_TYPE",
    "Rect",
    "sort_by_size",
    "sort_by_name",
    "sort_by_type",
    "has_selected",
    "selected_size",
    "selection_label",
    "clear_selection",
    "select_in_rectangle",
    "guess_mime_type",
]

DEFAULT_MIME_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class Rect:
    """An integer rectangle whose right and bottom edges are inclusive.

    A rectangle with no width or no height is empty and intersects nothing.
    """

    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0

    @property
    def right(self) -> int:
        return self.left + self.width - 1

    @property
    def bottom(self) -> int:
        return self.top + self.height - 1

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    @classmethod
    def from_points(cls, start: tuple[int, int], end: tuple[int, int]) -> "Rect":
        """The normalised rectangle spanning both corner points, inclusive."""
        (x1, y1), (x2, y2) = start, end
        left, right = min(x1, x2), max(x1, x2)
        top, bottom = min(y1, y2), max(y1, y2)
        return cls(left, top, right - left + 1, bottom - top + 1)

    def intersects(self, other: "Rect") -> bool:
        """True when both rectangles are non-empty and share at least one point."""
        if self.is_empty or other.is_empty:
            return False
        if self.left > other.right or other.left > self.right:
            return False
        if self.top > other.bottom or other.top > self.bottom:
            return False
        return True


def sort_by_size(elements: Iterable[CloudElement], ascending: bool = True) -> list[CloudElement]:
    """Elements ordered by size."""
    return sorted(elements, key=lambda element: element.size, reverse=not ascending)


def sort_by_name(elements: Iterable[CloudElement], ascending: bool = True) -> list[CloudElement]:
    """Elements ordered by name, ignoring case."""
    return sorted(elements, key=lambda element: element.name.lower(), reverse=not ascending)


def sort_by_type(elements: Iterable[CloudElement], folders_first: bool = True) -> list[CloudElement]:
    """Folders grouped before (or after) everything else, each group by name."""

    def key(element: CloudElement) -> tuple[int, str]:
        is_folder = element.element_type is ElementType.FOLDER
        return (0 if is_folder == folders_first else 1, element.name.lower())

    return sorted(elements, key=key)


def has_selected(elements: Iterable[CloudElement]) -> bool:
    """True when at least one element is selected."""
    return any(element.selected for element in elements)


def selected_size(elements: Iterable[CloudElement]) -> int:
    """Total size in bytes of the selected elements."""
    return sum(element.size for element in elements if element.selected)


def selection_label(elements: Iterable[CloudElement]) -> str:
    """Formatted total size of the selection, as shown in the selection menu."""
    return format_size(selected_size(elements))


def clear_selection(elements: Iterable[CloudElement]) -> None:
    """Deselect every selected element and leave multi-selection."""
    for element in elements:
        if element.selected:
            element.set_selected(False)
            element.multi_selection = False


def select_in_rectangle(
    elements: Sequence[CloudElement], selection: Rect, visible: Rect
) -> list[CloudElement]:
    """Select the visible elements whose ``geometry`` meets ``selection``.

    Elements outside ``visible`` are left untouched; visible elements outside
    ``selection`` are deselected. Returns the elements now selected by the band.
    """
    picked: list[CloudElement] = []
    for element in elements:
        geometry: Rect = element.geometry  # type: ignore[attr-defined]
        if not visible.intersects(geometry):
            continue
        inside = selection.intersects(geometry)
        element.set_selected(inside)
        element.multi_selection = inside
        if inside:
            picked.append(element)
    return picked


def guess_mime_type(path: str) -> str:
    """MIME type suggested by the file name, or the generic binary type."""
    mime_type, _ = mimetypes.guess_type(path)
    return mime_type or DEFAULT_MIME_TYPE