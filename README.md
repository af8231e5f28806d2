# goldfish

Core pieces of a small game engine, usable on their own. Nothing outside the
standard library is needed.

## What is in it

- `goldfish.resource`: resource packs. A pack is a sequence of entries, each a
  128-byte NUL-padded name, a 4-byte big-endian length and zlib-compressed
  data, ended by an all-zero name field. `Resource(path)` opens a pack, or
  serves files straight from a directory when `path` is one, or starts empty
  when `path` is `None`. It has `get(name)`, `add(name, data)`,
  `write(path, progress)`, `names()` and supports `name in resource`.
  `get` raises `KeyError` for a missing name and `ResourceError` for corrupt
  data, and `Resource(path)` raises `ResourceError` when the file cannot be
  opened or is truncated. `add` ignores empty data and directory-backed
  resources, and raises `ValueError` for names of 128 bytes or more.
- `goldfish.unicode`: `decode_utf8(data)` returns `(code_point, length)` for
  the first UTF-8 sequence of `data` and raises `ValueError` for malformed or
  overlong sequences. `utf8_sequence_length(byte)` gives the length a lead
  byte announces, or 0.
- `goldfish.version`: `get_version()` returns a `Version` dataclass;
  `parse_version(text)` splits `"1.0.0"` into `(1, 0, 0)`.
- `goldfish.graphic`: `Color`, `ClipStack` (nested clip rectangles, each
  clamped to the one below), `perspective_matrix`, `look_at_matrix`, and
  `Canvas`, a drawing surface that records each operation in its `commands`
  list together with the clip rectangle active at the time.
- `goldfish.texture`: `Texture` prepares RGBA pixels for upload, stretching
  them to power-of-two sides unless `npot` is true; plus
  `nearest_power_of_two`, `resample`, `has_extension`, `parse_major_version`
  and `supports_npot`.
- `goldfish.thread`: `Worker` (runs `func(data)` on a thread), `Mutex` (also a
  context manager) and `Signal` (an auto-resetting wake-up).
- `goldfish.sound`: `NullSound` calls `callback(buffer, frames)` every
  `interval` milliseconds with 16-bit stereo frames that are then discarded.
- `goldfish.gui`: `Gui` holds a tree of `Component`s and draws them onto a
  `Canvas`; it creates and renders buttons and frames. `goldfish.widgets`
  adds progress bars, range sliders and scrollbars; `goldfish.containers`
  adds tabbed panes, scrolling text boxes and windows.

## Installing

```
pip install .
```

## Packing resources

```
goldfish-pack [-d basedir] output [dir ...]
```

Every file below `basedir` (default `.`) is compressed into `output`, stored
under its path relative to `basedir`. When directory names follow the output
name, only those directories are packed. The file count and per-file
progress are printed; the exit status is 1 on a bad flag, a missing output
name, an unreadable directory or a failed write.

Reading a pack back:

```python
from goldfish.resource import Resource

pack = Resource("assets.pak")
print(pack.names())
data = pack.get("textures/logo.png")
```

Building one in code:

```python
pack = Resource(None)
pack.add("hello.txt", b"hello")
pack.write("out.pak", False)
```

## Engine information

```
goldfish-engineinfo
```

prints the engine version, build date, thread model and renderer.

## What it does not do

- There is no renderer and no window. `Canvas` only records drawing
  commands; turning them into pixels is left to the caller, and
  `goldfish-engineinfo` reports the renderer as `none on none`.
- There is no audio output. `NullSound` paces the callback but plays nothing.
- There is no image decoding. A window's icon is loaded only through a
  `gui.image_loader(name)` callable that the caller supplies, returning
  `(width, height, rgba)` or `None`.
- The GUI has no event loop: the caller sets `mouse_x`, `mouse_y`, `pressed`
  and `hover` on the `Gui` and calls the render and click functions.

## Tests

```
pip install .[test]
pytest
```