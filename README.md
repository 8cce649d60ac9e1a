# rdevkeys

A layout-independent model of keyboard and mouse events, and tables that map
each physical key to the codes different systems use for it:

- X.org keycodes (`rdevkeys.linux_keycodes`)
- Windows virtual-key codes and scancodes (`rdevkeys.windows_keycodes`)
- macOS virtual keycodes (`rdevkeys.macos_keycodes`), with the Carbon
  `kVK_*` constants in `rdevkeys.macos_virtual_keycodes`
- Android key codes (`rdevkeys.android_keycodes`)
- USB HID usage codes (`rdevkeys.usb_hid_keycodes`)
- Browser `KeyboardEvent.code` strings (`rdevkeys.chrome_keycodes`)

It needs nothing outside the standard library and supports Python 3.10 and later.

## Keys and codes

A key is a member of `rdevkeys.event.Key`, named after its place on a US
QWERTY keyboard, not after the character it produces. Every table module
offers `key_from_code` and `code_from_key`:

```python
from rdevkeys import chrome_keycodes, linux_keycodes, usb_hid_keycodes, windows_keycodes

key = linux_keycodes.key_from_code(39)          # Key.KeyS
usb_hid_keycodes.code_from_key(key)             # 0x16
windows_keycodes.scancode_from_key(key)         # 0x1F
chrome_keycodes.code_from_key(key)              # "KeyS"
```

A numeric code that a table does not name comes back from `key_from_code` as
an `UnknownKey` carrying the code, and `code_from_key` gives that same code
back. `code_from_key` returns `None` for a named key the table has no code for,
and for a `RawKey`. Where a table gives two keys the same code, `key_from_code`
returns the one listed first. In the browser table an unmatched string gives
`UnknownKey(0)`, and only named keys have a code.

`rdevkeys.event.is_known(key)` is true only for members of `Key`.

`rdevkeys.macos_virtual_keycodes.name_of(code)` returns the Carbon name of a
macOS virtual key code, or `None`.

### Windows

A Windows key is identified by both its virtual-key code and its scancode:

- `key_from_code` / `code_from_key` use the virtual-key code;
- `key_from_scancode` / `scancode_from_key` use the scancode (scancode 0 is
  always unknown);
- `get_win_key(keycode, scancode)` picks the key from a pair seen together,
  trusting the virtual code for AltGr, keypad divide and right Control, whose
  scancodes are shared with other keys;
- `get_win_codes(key)` returns the `(keycode, scancode)` pair, or `None`.

## Converting between systems

`rdevkeys.codes_conv` converts a code from one system straight into another
by way of the named key:

```python
from rdevkeys.codes_conv import (
    linux_code_to_win_scancode,
    usb_hid_code_to_linux_code,
    win_scancode_to_macos_code,
)

usb_hid_code_to_linux_code(0x16)     # 39
linux_code_to_win_scancode(39)       # 0x1F
win_scancode_to_macos_code(0x1F)     # 1
```

The conversions available are from Windows scancodes, X.org keycodes and USB
HID codes to each of the other systems (including Android key codes). Each
returns `None` when the source code is not a named key or the target system
has no code for it. The `*_macos_iso_code` variants, and
`macos_iso_code_from_key`, swap the grave and section keys, as they sit on ISO
keyboards.

`describe_key_event(event, platform)` renders a key event as two lines showing
its text, type, platform and position codes, and the matching Windows, X.org
and macOS codes; `platform` is `Platform.WINDOWS` or `Platform.LINUX` and says
which system's codes the event carries. It returns `None` for events other
than key presses and releases.

## Events

`rdevkeys.event` holds the event model:

- `Key`, `UnknownKey` and `RawKey` (with `RawKeyKind`) for keys;
- `Button` and `UnknownButton` for mouse buttons;
- the event types `KeyPress`, `KeyRelease`, `ButtonPress`, `ButtonRelease`,
  `MouseMove` (pixels) and `Wheel`;
- `UnicodeInfo`, the text a key press produced and whether it was a dead key;
- `Event`, which ties an event type to a UTC timestamp, its `UnicodeInfo` and
  its platform, position and USB HID codes.

Events serialise to and from plain mappings and JSON:

```python
from rdevkeys.event import Event, Key, KeyPress, UnicodeInfo

event = Event(KeyPress(Key.KeyS), unicode=UnicodeInfo(name="S"))
text = event.to_json()
assert Event.from_json(text) == event
```

The timestamp is stored as seconds and nanoseconds since the Unix epoch.
`from_dict` and `from_json` raise `ValueError` on malformed input.

`keyboard_only(environ=None)` is true when the `KEYBOARD_ONLY` environment
variable is set to a non-empty value.

## Keyboard text, recorded events, grabbing and simulating

These parts carry the logic for working with an X display, and reach the
display only through a small backend object that you supply, so they can be
driven by any connection or by a stand-in in tests.

- `rdevkeys.keyboard.Keyboard(backend)` turns key presses into text. The
  `KeyboardBackend` supplies the current modifier mask, the UTF-8 lookup of a
  key code and the names of keysyms. `add(event_type)` returns a
  `UnicodeInfo` for key presses (ignoring Control, marking dead keys, and
  returning `None` for C0 control characters) and `None` for everything else;
  `is_dead()` and `keysym` describe the last press. `decode_lookup(buf)` is
  the byte decoding on its own.
- `rdevkeys.xevents` turns recorded core X events into events:
  `convert_event` maps an event type number (`XEventType`) and detail code to
  an event type (buttons 4 and 5 become wheel steps), `convert` adds the
  keyboard text, `RecordDatum.from_bytes` parses recorded data,
  `record_range(keyboard_only)` gives the event types to record, and
  `Listener(callback, keyboard).handle(data)` does it all for one datum.
  `display_size(display)` returns the screen size of an object with a
  `screen_size()` method.
- `rdevkeys.grab.GrabService(backend, keyboard_factory)` runs a grab in
  background threads: `start(callback)`, `enable()`, `disable()`,
  `is_grabbed()` and `exit()`. Failed attempts to open the `GrabBackend` are
  retried after `retry_delay(attempt)` seconds. `convert_key_event` and
  `is_control` build the events it delivers.
- `rdevkeys.simulate.Simulator(connect)` sends key, button, motion and wheel
  events through a fresh `FakeInputBackend` for each call: `simulate`,
  `simulate_char` (remapping a spare key code to the character's keysym, see
  `char_keysym`) and `simulate_unicode`, which always fails. Coordinates pass
  through `clamp_coordinate`.

Failures are raised as `DisplayError`, `ListenError`, `GrabError` (each with a
`kind` from its nested `Kind` enum) and `SimulateError`, all found in
`rdevkeys.event`.

## What this package does not do

It does not open a display connection or talk to X, Windows or macOS input
APIs itself: there are no ready-made backends, so listening, grabbing and
simulating work only with a backend you provide. The keyboard text, listening,
grabbing and simulating logic follows X.org conventions; there is no
counterpart for Windows or macOS hooks. There is no command-line program.