import json

import pytest

from simplecloud.settings_store import (
    APPEARANCE,
    SettingsError,
    SettingsStore,
)

DEFAULTS = {
    "appareance": {"theme": "Dark", "animation_duration": 300},
    "Utilities": {"enable_trash": True},
    "notification": {"notification_volume": 0.5},
    "userSection": {"user_data_path": ""},
}


def _document(defaults=DEFAULTS):
    return {
        "TCloud": {"setting_to_use": "alice"},
        "default_setting": defaults,
        "alice": {"appareance": {"theme": "Light"}},
    }


def _raw(defaults=DEFAULTS):
    return json.dumps(_document(defaults))


def test_unknown_user_receives_defaults():
    store = SettingsStore("bob")
    store.load_from_raw_data(_raw())
    assert store.user_settings == DEFAULTS
    assert store.tcloud_settings["setting_to_use"] == "bob"


def test_known_user_is_merged_with_defaults():
    store = SettingsStore("alice")
    store.load_from_raw_data(_raw())
    user = store.user_settings
    assert user["appareance"] == {"theme": "Light", "animation_duration": 300}
    assert user["Utilities"] == DEFAULTS["Utilities"]
    assert store.default_settings == DEFAULTS


def test_invalid_json_raises():
    store = SettingsStore("alice")
    with pytest.raises(SettingsError):
        store.load_from_raw_data(b"{not json")


def test_non_object_json_raises():
    store = SettingsStore("alice")
    with pytest.raises(SettingsError):
        store.load_from_raw_data("[1, 2]")


def test_load_resource_reads_file(tmp_path):
    source = tmp_path / "settings.json"
    source.write_text(_raw())
    store = SettingsStore("alice")
    store.load_resource(source)
    assert store.user_settings["appareance"]["theme"] == "Light"


def test_load_resource_missing_file_raises(tmp_path):
    store = SettingsStore("alice")
    with pytest.raises(SettingsError):
        store.load_resource(tmp_path / "absent.json")


def test_save_writes_without_defaults(tmp_path):
    target = tmp_path / "out.json"
    store = SettingsStore("alice", file_path=target)
    store.load_from_raw_data(_raw())
    store.edited = True
    store.save()
    saved = json.loads(target.read_text())
    assert "default_setting" not in saved
    assert saved["alice"] == store.user_settings
    assert store.edited is False


def test_save_uses_synchronizer():
    sent = []
    store = SettingsStore("alice", synchronizer=lambda data, pic: sent.append((data, pic)))
    store.load_from_raw_data(_raw())
    store.edited = True
    store.save()
    assert len(sent) == 1
    data, picture = sent[0]
    assert picture == b""
    assert "default_setting" not in json.loads(data)
    assert store.edited is True


def test_save_without_path_raises():
    store = SettingsStore("alice")
    store.load_from_raw_data(_raw())
    with pytest.raises(SettingsError):
        store.save()


def test_file_path_follows_user_data_path(tmp_path):
    defaults = dict(DEFAULTS, userSection={"user_data_path": str(tmp_path)})
    store = SettingsStore("bob")
    store.load_from_raw_data(_raw(defaults))
    assert store.file_path == tmp_path / "settings.json"
    store.save()
    assert "bob" in json.loads((tmp_path / "settings.json").read_text())


def test_debug_lists_both_sections():
    store = SettingsStore("alice")
    store.load_from_raw_data(_raw())
    text = store.debug()
    assert text.startswith("TCloudSettings: ")
    assert "alice Settings: " in text


def test_reset_restores_defaults():
    store = SettingsStore("alice")
    store.load_from_raw_data(_raw())
    store._set(APPEARANCE, "theme", "Light")
    assert store.edited is True
    store.reset()
    assert store.user_settings == DEFAULTS
    assert store.edited is False


def test_set_username_moves_settings(tmp_path):
    target = tmp_path / "out.json"
    store = SettingsStore("alice", file_path=target)
    store.load_from_raw_data(_raw())
    before = store.user_settings
    store.set_username("carol")
    assert store.username == "carol"
    assert store.user_settings == before
    assert store.tcloud_settings["setting_to_use"] == "carol"
    saved = json.loads(target.read_text())
    assert "carol" in saved
    assert "alice" not in saved


def test_set_username_same_name_does_nothing(tmp_path):
    target = tmp_path / "out.json"
    store = SettingsStore("alice", file_path=target)
    store.load_from_raw_data(_raw())
    store.set_username("alice")
    assert not target.exists()


def test_connect_and_disconnect():
    store = SettingsStore("alice")
    store.load_from_raw_data(_raw())
    received = []
    disconnect = store.connect("theme_changed", received.append)
    store._set(APPEARANCE, "theme", "Dark", "theme_changed", "Dark")
    assert received == ["Dark"]
    assert store.user_settings["appareance"]["theme"] == "Dark"
    disconnect()
    store._set(APPEARANCE, "theme", "Light", "theme_changed", "Light")
    assert received == ["Dark"]