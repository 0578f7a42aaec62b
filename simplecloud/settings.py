"""Typed access to the user's application settings."""

from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar

from .common import Theme
from .easing import EasingType
from .settings_store import (
    APPEARANCE,
    NOTIFICATION,
    USER_SECTION,
    UTILITIES,
    SettingsStore,
)

__all__ = ["SettingsManager"]

T = TypeVar("T")

_OUT_CIRC_KEY = "QEasing::OutCirc"
_CURVE_KEYS = {
    EasingType.LINEAR: "QEasingCurve::Linear",
    EasingType.IN_QUAD: "QEasingCurve::InQuad",
    EasingType.OUT_QUAD: "QEasingCurve::OutQuad",
    EasingType.IN_OUT_QUAD: "QEasingCurve::InOutQuad",
}


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _to_bool(value: Any) -> bool:
    return value if isinstance(value, bool) else False


def _to_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _to_float(value: Any) -> float:
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    return 0.0


class _Setting(Generic[T]):
    """A settings value stored under ``key`` of ``section``.

    Assigning it stores the value, fires ``<name>_changed`` (with the new value
    when ``payload`` is true), updates the user's section and marks the
    settings as edited.
    """

    def __init__(
        self,
        section: str,
        key: str,
        read: Callable[[Any], T],
        write: Callable[[Any], Any],
        payload: bool = True,
    ) -> None:
        self.section = section
        self.key = key
        self.read = read
        self.write = write
        self.payload = payload
        self.signal = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.signal = f"{name}_changed"

    def __get__(self, instance: Optional["SettingsManager"], owner: type) -> Any:
        if instance is None:
            return self
        return self.read(instance._value(self.section, self.key))

    def __set__(self, instance: "SettingsManager", value: Any) -> None:
        stored = self.write(value)
        payload = (stored,) if self.payload else ()
        instance._set(self.section, self.key, stored, self.signal, *payload)


def _int(section: str, key: str, payload: bool = True) -> _Setting[int]:
    return _Setting(section, key, _to_int, int, payload)


def _bool(section: str, key: str, payload: bool = True) -> _Setting[bool]:
    return _Setting(section, key, _to_bool, bool, payload)


def _str(section: str, key: str, payload: bool = True) -> _Setting[str]:
    return _Setting(section, key, _to_str, str, payload)


def _float(section: str, key: str, payload: bool = True) -> _Setting[float]:
    return _Setting(section, key, _to_float, float, payload)


class SettingsManager(SettingsStore):
    """Settings store with one attribute per known setting.

    Reading an attribute that is missing or of the wrong JSON type gives the
    type's empty value (0, 0.0, ``False`` or ``""``).
    """

    # appearance
    animation_duration = _int(APPEARANCE, "animation_duration")
    background_color = _str(APPEARANCE, "backgroundColor")
    background_image = _str(APPEARANCE, "backgroundImage")
    custom_color = _bool(APPEARANCE, "custom_background_color")
    custom_image = _bool(APPEARANCE, "custom_background_image")
    font_size = _int(APPEARANCE, "font_size")
    font_family = _str(APPEARANCE, "font_style")
    transparency = _bool(APPEARANCE, "transparency")
    animation_enabled = _bool(APPEARANCE, "enable_animation")

    # notification
    notification_page_enable = _bool(NOTIFICATION, "enable_notification_page")
    notification_son = _str(NOTIFICATION, "notification_son", payload=False)
    poppout_notification_page = _bool(NOTIFICATION, "popout_notification_page", payload=False)
    use_system_notification_page = _bool(
        NOTIFICATION, "use_system_notification_page", payload=False
    )
    enable_notification = _bool(NOTIFICATION, "enable_notification", payload=False)
    notification_duration = _int(NOTIFICATION, "notification_duration")
    notification_volume = _float(NOTIFICATION, "notification_volume")

    # user section
    change_user_data_path = _bool(USER_SECTION, "change_user_data_path", payload=False)
    user_data_path = _str(USER_SECTION, "user_data_path", payload=False)

    # utilities
    synchronize = _bool(UTILITIES, "synchronize_preferences", payload=False)
    launch_on_startup = _bool(UTILITIES, "launch_on_startup", payload=False)
    start_download_startup = _bool(UTILITIES, "start_lazy_download_on_startup", payload=False)
    enable_trash = _bool(UTILITIES, "enable_trash")
    delete_file_after = _int(UTILITIES, "delete_deleted_file_after", payload=False)
    delete_after_upload = _bool(UTILITIES, "delete_after_upload", payload=False)
    upload_limit = _int(UTILITIES, "upload_limit")
    download_limit = _int(UTILITIES, "download_limit")
    upload_speed_limit = _int(UTILITIES, "upload_speed_limit")
    download_speed_limit = _int(UTILITIES, "download_speed_limit")
    trash_max_size = _int(UTILITIES, "recycle_bin_max_size", payload=False)
    delete_greater_than_5 = _bool(UTILITIES, "automatically_delete_file_greater_than_5GB")

    @property
    def email(self) -> str:
        return "userEmail"

    def theme(self) -> Theme:
        """The stored theme; anything but ``"Dark"`` counts as light."""
        if self._value(APPEARANCE, "theme") == Theme.DARK.value:
            return Theme.DARK
        return Theme.LIGHT

    def set_theme(self, theme: Theme) -> None:
        theme = Theme(theme)
        stored = "Dark" if theme is Theme.DARK else "Light"
        self._set(APPEARANCE, "theme", stored, "theme_changed", theme)

    def easing_curve(self) -> EasingType:
        """The animation curve; only the out-circ key is recognised, else linear."""
        if self._value(APPEARANCE, "easing_curve") == _OUT_CIRC_KEY:
            return EasingType.OUT_CIRC
        return EasingType.LINEAR

    def set_easing_curve(self, easing: EasingType) -> None:
        """Store ``easing``; curves without a key are stored as linear."""
        try:
            easing = EasingType(easing)
        except ValueError:
            easing = EasingType.LINEAR
        stored = _CURVE_KEYS.get(easing, _CURVE_KEYS[EasingType.LINEAR])
        self._set(APPEARANCE, "easing_curve", stored, "easing_curve_changed")

    def update_profile_picture(self, data: bytes) -> None:
        """Replace the profile picture from the server without marking an edit."""
        self._picture = bytes(data)
        self._emit("default_profile_picture_changed", self._picture)

    def set_default_profile_picture(self, data: bytes) -> None:
        """Replace the profile picture (PNG bytes) as a user edit."""
        self._picture = bytes(data)
        self._emit("default_profile_picture_changed", self._picture)
        self._edited = True

    def default_profile_picture(self) -> bytes:
        return self._picture