# betterwall

Building blocks for a desktop wallpaper manager: easing curves, transition
effects drawn with Pillow, a time-driven transition engine, and small
utilities for files, strings, logging, errors and lazily built views.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install .[test]
pytest
```

## Easing

`betterwall.easing` holds the usual easing curves (`linear`, and the quad,
cubic, quart, sine, expo, circ, back, elastic and bounce families in
`ease_in_*`, `ease_out_*` and `ease_in_out_*` forms). Each maps a progress
value in `[0, 1]` to an eased value; the back and elastic curves overshoot
that range on purpose.

```python
from betterwall import easing

easing.ease_out_cubic(0.5)
curve = easing.get_by_name("easeInOutSine")
custom = easing.cubic_bezier(0.25, 0.1, 0.25, 1.0)
easing.available_names()
```

`get_by_name` also accepts `"easeIn"`/`"ease-in"`, `"easeOut"`/`"ease-out"`
and `"easeInOut"`/`"ease-in-out"` for the quad curves. Unknown names fall back
to `ease_in_out_quad`.

## Transitions

Effects draw onto an RGBA `PIL.Image.Image` canvas whose size is the output
size; a canvas in any other mode raises `ValueError`. Source and target
images may be in any mode.

- `betterwall.effects`: `FadeEffect`, `SlideEffect` and `WipeEffect`, the
  abstract base `TransitionEffect`, and `TransitionParams`, which carries a
  `Direction` (`LEFT`, `RIGHT`, `UP`, `DOWN`; default `LEFT`).
- `betterwall.advanced_effects`: `ExpandingCircleEffect`,
  `ExpandingSquareEffect`, `DissolveEffect`, `ZoomEffect`, `MorphEffect`,
  `AngledWipeEffect`, `PixelateEffect` and `BlindsEffect`, configured through
  their constructors (origin, corner radius, block size, zoom factor, angle
  and soft edge, number and orientation of blinds).

Every effect has a `name` and a
`render(canvas, source, target, progress, params=None)` method.

`betterwall.engine.TransitionEngine` drives an effect over time:

```python
from PIL import Image
from betterwall.engine import TransitionEngine
from betterwall.effects import FadeEffect

old = Image.new("RGB", (640, 480), "black")
new = Image.new("RGB", (640, 480), "white")
canvas = Image.new("RGBA", (640, 480))

engine = TransitionEngine()
engine.start(old, new, FadeEffect(), 500, "easeInOut", lambda: print("done"))
while engine.render(canvas):
    ...  # show the canvas, wait engine.frame_interval()
```

`render` returns `False` once the transition has finished, after drawing the
final frame and calling the callback; `stop` abandons a transition without
calling it. `start_with_easing` takes an easing function instead of a name.
An image handed to `preload` becomes the target of the next transition
started without one. `progress()` and `eased_progress()` report how far the
transition has got, and `frame_interval()` gives a `timedelta` for
`target_fps` (60 by default). The constructor accepts a `clock` returning
monotonic seconds, which is handy in tests.

## Utilities

- `betterwall.stringutils`: `trim`, `to_lower`, `to_upper`, `split`, `join`,
  `url_encode`, `url_decode`, `starts_with`, `ends_with`, `replace_all`.
- `betterwall.fileutils`: `exists`, `create_directories`, `read_file`,
  `write_file` (creates parent directories), `expand_path` for a leading `~`,
  `extension`, `mime_type` from the file extension, and `calculate_hash`
  (hex SHA-256, or an empty string if the file cannot be read).
- `betterwall.systemutils`: `process_rss` (from `/proc/self/statm`, 0 when
  unknown) and `format_bytes` (`format_bytes(1536)` gives `"1.5 KB"`).
- `betterwall.logger`: a thread-safe `Logger` that writes coloured lines to
  the console and, after `init(log_dir)`, plain lines to
  `betterwallpaper.log` in that directory, renaming the file aside once it
  passes 5 MB. `get_logger()` returns the process-wide logger, which the
  helpers `debug`, `info`, `warning`, `error` and `fatal` write to.
- `betterwall.errors`: `WallpaperError`, an exception carrying an
  `ErrorCode`, an `ErrorSeverity`, a technical message, a message for the
  user and optional context, with `describe()` for logs and class methods
  such as `file_not_found`, `monitor_not_found` and `network_error`.
  `default_messages` and `default_severity` give the defaults per code.
- `betterwall.lazy`: `LazyView`, which builds its view from a factory the
  first time it is needed, runs load callbacks once, and can `unload` it.

## What it does not do

The package renders transition frames into Pillow images and offers the
helpers above. It does not put wallpapers on a screen, talk to a compositor
or display server, run a background service, or provide a command-line tool
or graphical interface; showing the frames is up to the program using it.