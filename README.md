# simplecloud

The core logic of a cloud file-storage client, with no user interface.
It covers the client's settings, its clipboard and selection handling,
searching, breadcrumb paths and moving back and forth through visited
folders. It depends only on the standard library.

## Installation

```
pip install .
```

To install with the test tools and run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `simplecloud.common`: the `Theme` and `View` enums, the constants
  `DOUBLE_CLICK_TIME`, `PORT`, `SEND_FILE_PORT` and `RECEIVE_FILE_PORT`,
  `format_size` for readable sizes (`format_size(2048)` gives `"2.00KB"`)
  and `capitalize`.
- `simplecloud.compression`: `compress` and `decompress` produce and read
  zlib data prefixed with a 4-byte big-endian length. `Compressor` wraps
  them and tracks whether a cycle is running. Bad input raises
  `CompressionError`.
- `simplecloud.progress`: `BarUpdater` is a thread-safe byte counter. It
  calls the callbacks registered with `subscribe` whenever `increment` or
  `set_value` changes it.
- `simplecloud.elements`: `ElementType`, `ElementView`, `ElementCore` and
  `CloudElement`. `CloudElement` represents a selectable file or folder
  and notifies listeners when its selection or view changes.
- `simplecloud.clipboard`: the shared `Clipboard`. Create it with
  `Clipboard.init()`, get it with `Clipboard.instance()` and drop it with
  `Clipboard.clean_up()`. Its `type` is a `TransactionType`: copy, cut or
  restore.
- `simplecloud.filechecker`: `is_name_available(filename, elements)`
  checks whether a name is still free among a folder's entries.
- `simplecloud.easing`: `EasingType`, with `easing_name` for display
  names and `easing_items` for (name, type) pairs.
- `simplecloud.settings_store`: `SettingsStore` holds a JSON document
  made of shared defaults (`default_setting`) and one section per user.
  It merges a user's settings with the defaults, resets them, renames the
  user (`set_username`), and saves. Saving writes to a file, or passes the
  data to a synchronizer callback if one is given. Listeners are added
  with `connect(signal, callback)`. Errors raise `SettingsError`.
- `simplecloud.settings`: `SettingsManager` extends the store with one
  attribute for each known setting, such as `font_size`,
  `animation_duration`, `notification_volume`, `enable_trash` or
  `user_data_path`. Assigning an attribute stores the value, fires
  `<name>_changed` and marks the settings as edited. It also provides
  `theme`/`set_theme`, `easing_curve`/`set_easing_curve` and
  profile-picture bytes.
- `simplecloud.signup`: `validate_signup` returns a `SignupRequest` or
  raises `SignupError`, which carries a `title` and a `message`.
- `simplecloud.breadcrumb`: `HistoryDisplay` turns a path into a list of
  `PathButton`s in one of the `HistoryView` styles: modern, normal,
  minimal or breadcrumb. `build_partial_path` gives the path a button
  leads to.
- `simplecloud.selection`: sorting by size, name or type, selection
  totals and labels, rubber-band selection with `Rect`, and
  `guess_mime_type`.
- `simplecloud.search`: `search_elements`, `search_path`,
  `extract_filename` and `NavigationHistory`, a back and forward history
  with an optional cooldown between moves.

## Example

```python
from simplecloud.common import format_size
from simplecloud.search import NavigationHistory
from simplecloud.settings import SettingsManager

print(format_size(3 * 1024 * 1024))  # 3.00MB

history = NavigationHistory()
history.push(":/docs")
history.push(":/docs/reports")
print(history.back())  # :/docs

settings = SettingsManager("alice", file_path="settings.json")
settings.load_from_raw_data('{"default_setting": {"appareance": {"font_size": 11}}}')
print(settings.font_size)  # 11
settings.font_size = 12
print(settings.edited)     # True
settings.save()            # writes settings.json
```

## What it does not do

The package has no graphical interface, no command-line program and no
network code. It does not upload, download or delete files on a server,
and it does not contact a sign-up service. Settings are kept only as JSON
in memory, in a file, or in whatever the synchronizer callback does with
them. A program that uses the package has to supply its own screens and
transport.