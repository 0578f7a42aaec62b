"""Name clash checks for entries inside a folder."""

from __future__ import annotations

from typing import Iterable, Protocol

__all__ = ["is_name_available"]


class _Named(Protocol):
    name: str


def is_name_available(filename: str, elements: Iterable[_Named]) -> bool:
    """True when no element in ``elements`` is already called ``filename``."""
    return all(element.name != filename for element in elements)