"""JSON-backed storage of per-user application settings."""

from __future__ import annotations

import copy
import json
from collections import defaultdict
from pathlib import Path
from typing import Any, Callable, Optional, Union

__all__ = [
    "APPEARANCE",
    "UTILITIES",
    "NOTIFICATION",
    "USER_SECTION",
    "SECTIONS",
    "SettingsError",
    "SettingsStore",
]

APPEARANCE = "appareance"
UTILITIES = "Utilities"
NOTIFICATION = "notification"
USER_SECTION = "userSection"
SECTIONS = (APPEARANCE, UTILITIES, NOTIFICATION, USER_SECTION)

_TCLOUD = "TCloud"
_DEFAULTS = "default_setting"
_SETTING_TO_USE = "setting_to_use"
_FILE_NAME = "settings.json"

Synchronizer = Callable[[bytes, bytes], None]


class SettingsError(Exception):
    """Raised when settings cannot be parsed, read or written."""


def _object(value: Any) -> dict:
    return copy.deepcopy(value) if isinstance(value, dict) else {}


class SettingsStore:
    """Holds the settings document: shared defaults plus one section per user.

    When a ``synchronizer`` is given, :meth:`save` hands the serialised
    document and the profile picture to it instead of writing a file.
    """

    def __init__(
        self,
        username: str,
        file_path: Optional[Union[str, Path]] = None,
        synchronizer: Optional[Synchronizer] = None,
    ) -> None:
        self._username = username
        self._explicit_path = Path(file_path) if file_path is not None else None
        self._synchronizer = synchronizer
        self._root: dict = {}
        self._tcloud: dict = {}
        self._defaults: dict = {}
        self._user: dict = {}
        self._sections: dict[str, dict] = {name: {} for name in SECTIONS}
        self._picture = b""
        self._edited = False
        self._listeners: dict[str, list[Callable[..., None]]] = defaultdict(list)

    # -- state -------------------------------------------------------------

    @property
    def username(self) -> str:
        return self._username

    @property
    def edited(self) -> bool:
        return self._edited

    @edited.setter
    def edited(self, value: bool) -> None:
        self._edited = bool(value)

    @property
    def synchronized(self) -> bool:
        return self._synchronizer is not None

    @property
    def file_path(self) -> Optional[Path]:
        """Where :meth:`save` writes: the explicit path or the user data folder."""
        if self._explicit_path is not None:
            return self._explicit_path
        data_path = self._sections[USER_SECTION].get("user_data_path")
        if isinstance(data_path, str) and data_path:
            return Path(data_path) / _FILE_NAME
        return None

    @property
    def user_settings(self) -> dict:
        return copy.deepcopy(self._user)

    @property
    def default_settings(self) -> dict:
        return copy.deepcopy(self._defaults)

    @property
    def tcloud_settings(self) -> dict:
        return copy.deepcopy(self._tcloud)

    # -- notifications -----------------------------------------------------

    def connect(self, signal: str, callback: Callable[..., None]) -> Callable[[], None]:
        """Call ``callback`` whenever ``signal`` fires; returns an unsubscriber."""
        self._listeners[signal].append(callback)

        def disconnect() -> None:
            listeners = self._listeners.get(signal, [])
            if callback in listeners:
                listeners.remove(callback)

        return disconnect

    def _emit(self, signal: str, *args: Any) -> None:
        for callback in list(self._listeners.get(signal, ())):
            callback(*args)

    # -- loading -----------------------------------------------------------

    def load_from_raw_data(self, raw_data: Union[bytes, str]) -> None:
        """Load the whole document from JSON text."""
        try:
            document = json.loads(raw_data)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise SettingsError(f"failed to parse settings JSON: {exc}") from exc
        if not isinstance(document, dict):
            raise SettingsError("settings JSON is not an object")
        self._install(document)

    def load_resource(self, path: Union[str, Path]) -> None:
        """Load the document from a JSON file."""
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise SettingsError(f"failed to open {path}: {exc}") from exc
        self.load_from_raw_data(data)

    def _install(self, document: dict) -> None:
        self._root = copy.deepcopy(document)
        self._tcloud = _object(self._root.get(_TCLOUD))
        self._defaults = _object(self._root.get(_DEFAULTS))
        if self._username in self._root:
            self._user = _object(self._root[self._username])
        else:
            self._copy_defaults_to_user()
        self.merge_with_default_settings()
        self._update_settings()

    def merge_with_default_settings(self) -> None:
        """Fill keys missing from the user's settings with the defaults."""
        for key, default_value in self._defaults.items():
            if key not in self._user:
                self._user[key] = copy.deepcopy(default_value)
            elif isinstance(self._user[key], dict):
                user_sub = self._user[key]
                for sub_key, sub_value in _object(default_value).items():
                    user_sub.setdefault(sub_key, copy.deepcopy(sub_value))
        self._root[self._username] = copy.deepcopy(self._user)

    def _copy_defaults_to_user(self) -> None:
        self._user = copy.deepcopy(self._defaults)
        self._update_settings()
        self._update_user_setting()

    def _update_settings(self) -> None:
        for name in SECTIONS:
            self._sections[name] = _object(self._user.get(name))

    def _update_user_setting(self) -> None:
        for name in SECTIONS:
            self._user[name] = copy.deepcopy(self._sections[name])
        self._root[self._username] = copy.deepcopy(self._user)
        self._tcloud[_SETTING_TO_USE] = self._username
        self._root[_TCLOUD] = copy.deepcopy(self._tcloud)

    # -- section access ----------------------------------------------------

    def _value(self, section: str, key: str, default: Any = None) -> Any:
        return self._sections[section].get(key, default)

    def _set(self, section: str, key: str, value: Any, signal: Optional[str] = None, *payload: Any) -> None:
        self._sections[section][key] = value
        if signal:
            self._emit(signal, *payload)
        self._update_user_setting()
        self._edited = True

    # -- persistence -------------------------------------------------------

    def _serialise(self) -> bytes:
        document = {k: v for k, v in self._root.items() if k != _DEFAULTS}
        return (json.dumps(document, indent=4, ensure_ascii=False) + "\n").encode("utf-8")

    def save(self) -> None:
        """Send the document to the synchronizer, or write it to :attr:`file_path`."""
        data = self._serialise()
        if self._synchronizer is not None:
            self._synchronizer(data, self._picture)
            return
        path = self.file_path
        if path is None:
            raise SettingsError("no settings file path is configured")
        try:
            path.write_bytes(data)
        except OSError as exc:
            raise SettingsError(f"failed to write {path}: {exc}") from exc
        self._edited = False

    def debug(self) -> str:
        """Readable dump of the application and current user settings."""
        tcloud = json.dumps(self._tcloud, indent=4, ensure_ascii=False) + "\n"
        user = json.dumps(self._user, indent=4, ensure_ascii=False) + "\n"
        return f"TCloudSettings: {tcloud}\n\n{self._username} Settings: {user}"

    def reset(self) -> None:
        """Replace the user's settings with the defaults."""
        self._user = copy.deepcopy(self._defaults)
        self._root[self._username] = copy.deepcopy(self._user)
        self._update_settings()
        self._edited = False

    def set_username(self, new_username: str) -> None:
        """Move the current settings to ``new_username`` and save."""
        if new_username == self._username:
            return
        if self._username in self._root:
            self._root[new_username] = copy.deepcopy(self._root[self._username])
        else:
            self._root[new_username] = copy.deepcopy(self._defaults)
        old_username = self._username
        self._username = new_username
        self._user = _object(self._root.get(new_username))
        self._update_settings()
        self._tcloud[_SETTING_TO_USE] = new_username
        self._root[_TCLOUD] = copy.deepcopy(self._tcloud)
        self._root.pop(old_username, None)
        self.save()