"""Easing curve types offered for animations, with their display names."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["EasingType", "easing_name", "easing_items"]


class EasingType(IntEnum):
    """Easing curves; values match the identifiers stored in settings data."""

    LINEAR = 0
    IN_QUAD = 1
    OUT_QUAD = 2
    IN_OUT_QUAD = 3
    IN_CUBIC = 5
    OUT_CUBIC = 6
    IN_OUT_CUBIC = 7
    IN_QUART = 9
    OUT_QUART = 10
    IN_OUT_QUART = 11
    IN_QUINT = 13
    OUT_QUINT = 14
    IN_OUT_QUINT = 15
    IN_SINE = 17
    OUT_SINE = 18
    IN_OUT_SINE = 19
    IN_EXPO = 21
    OUT_EXPO = 22
    IN_OUT_EXPO = 23
    IN_CIRC = 25
    OUT_CIRC = 26
    IN_OUT_CIRC = 27
    IN_ELASTIC = 29
    OUT_ELASTIC = 30
    IN_OUT_ELASTIC = 31
    IN_BACK = 33
    OUT_BACK = 34
    IN_OUT_BACK = 35
    IN_BOUNCE = 37
    OUT_BOUNCE = 38
    IN_OUT_BOUNCE = 39
    SINE_CURVE = 43
    COSINE_CURVE = 44

    @property
    def label(self) -> str:
        return "".join(part.capitalize() for part in self.name.split("_"))


def easing_name(easing: int) -> str:
    """Display name of ``easing``, or an empty string if it is not offered."""
    try:
        return EasingType(easing).label
    except ValueError:
        return ""


def easing_items() -> list[tuple[str, EasingType]]:
    """(display name, type) pairs ordered by type value."""
    return [(easing.label, easing) for easing in sorted(EasingType)]