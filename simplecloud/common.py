"""Shared enumerations and small text helpers."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "Theme",
    "View",
    "DOUBLE_CLICK_TIME",
    "PORT",
    "SEND_FILE_PORT",
    "RECEIVE_FILE_PORT",
    "format_size",
    "capitalize",
]


class Theme(Enum):
    """Colour theme of the application."""

    DARK = "Dark"
    LIGHT = "Light"


class View(Enum):
    """How folder contents are laid out."""

    LINEAR = "Linear"
    GRID = "Grid"


DOUBLE_CLICK_TIME = 250
"""Milliseconds within which two clicks count as a double click."""

PORT = 1244
SEND_FILE_PORT = 1245
RECEIVE_FILE_PORT = 1246

_KIB = 1024
_MIB = 1024 * 1024
_GIB = 1024 * 1024 * 1024


def format_size(size: int) -> str:
    """Render a byte count with two decimals and a unit, e.g. ``1.50MB``."""
    if size < 0:
        raise ValueError("size must not be negative")
    if size >= _GIB:
        value, unit = size / _GIB, "GB"
    elif size >= _MIB:
        value, unit = size / _MIB, "MB"
    elif size >= _KIB:
        value, unit = size / _KIB, "KB"
    else:
        value, unit = float(size), "bytes"
    return f"{value:.2f}{unit}"


def capitalize(text: str) -> str:
    """Upper-case the first character and lower-case the rest."""
    if not text:
        return text
    return text[0].upper() + text[1:].lower()