# debugglass

`debugglass` adds a small live overlay to a running program so you can watch
its internals while it works. You describe what to show: windows, tabs inside
those windows, and widgets inside the tabs. Your program keeps the widgets up
to date from its own threads. A background thread redraws everything at a
steady frame rate until you stop it.

By default each frame is drawn live on the terminal with `rich`, inside a
panel titled with the overlay's title.

## Building blocks

- **`debugglass.overlay.DebugGlass`** owns the overlay.
  - `run(options)` starts the render thread. `options` is an optional
    `OverlayOptions`. `run` returns `False` if the overlay is already running.
  - `stop()` asks the thread to finish and waits for it to do so.
  - `is_running()` reports whether the thread is active.
  - `set_background_renderer(callback)` installs a function that is called
    with the frame before the windows are drawn on every frame. Pass `None`
    to remove it.
  - `render_frame()` draws one frame on demand and returns it as a `Frame`.

  A `DebugGlass` can be used as a context manager; leaving the `with` block
  calls `stop()`. You can pass a `display` function to the constructor. It is
  called as `display(title, frame)` for every frame, and replaces the
  terminal output.
- **`OverlayOptions`** holds four fields: `width`, `height`, `title` (default
  `"DebugGlass"`) and `frame_time` (the pause between frames in seconds,
  default `0.016`). `width` and `height` are stored, but text displays do
  not use them.
- **`debugglass.content.Frame`** collects the lines of one frame.
  - `text(line)` appends a line.
  - `section(title)` is a context manager that writes a heading and indents
    everything written inside it.
  - `lines()` returns the lines written so far.
  - `render_text()` joins them into one string.

  `WindowContent` is the base class for widgets. Each widget implements
  `render(frame)`.
- **Windows and tabs** (`debugglass.registry`): `DebugGlass.windows` is a
  `SubWindowRegistry`. `add(name)` or `registry[name]` returns the window
  with that name, creating it if it does not exist yet. `find(name)` returns
  the window or `None` without creating one. `snapshot()` lists all windows.
  Each `SubWindow` has a `tabs` collection: `tabs.add(label)` and
  `tabs.find(label)`. A window can also have its own render callback, set
  with `set_render_callback`.
- **Tabs** (`debugglass.tab.Tab`) have an optional render callback that is
  drawn first, followed by their widgets. A tab provides `add_graph`,
  `add_variable`, `add_structure`, `add_message_monitor` and
  `find_message_monitor`.
- **Widgets**:
  - `Graph` keeps the most recent float samples up to a fixed capacity
    (default 256, minimum 2) and draws them as a sparkline. `set_range()` sets
    the vertical scale, and you may give the bounds in either order.
    `samples()` returns the samples, oldest first.
  - `Variable` shows `label: value`. `set_value()` accepts any value and
    shows it as text.
  - `Structure` is a tree of nested structures and variables. Its children
    are drawn indented beneath its label.
  - `MessageMonitor` is a table with one row per message id, in the order
    the ids were first seen. Each row shows the latest value, an update count
    and the age of the last update in milliseconds. Rows updated within the
    last half second are marked with `*`. Float values are shown with three
    decimals. Values that are not strings or numbers raise `TypeError`.

All widgets are safe to update from other threads while the overlay is
drawing.

## Example

```python
import math
import time

from debugglass.overlay import DebugGlass

glass = DebugGlass()

stats = glass.windows.add("Stats").tabs.add("live")
waveform = stats.add_graph("Waveform")
waveform.set_range(0.0, 1.0)

state = stats.add_structure("Systems")
mode = state.add_variable("Mode")
mode.set_value("demo")

bus = stats.add_message_monitor("Telemetry Bus")

with glass:
    glass.run()
    phase = 0.0
    for _ in range(500):
        phase += 0.05
        waveform.add_value(0.5 + 0.5 * math.sin(phase))
        bus.upsert_message(f"ID_{int(phase) % 3}", 42.0 + math.sin(phase))
        time.sleep(0.016)
```

## Demos

The package ships with four demo scenes: `hello`, `background`,
`message-monitor` and `subwindow`. Start one from the command line:

```
debugglass-demo subwindow --duration 5
```

If you give no scene, `hello` runs. If you give no duration, each scene uses
its own default length. Use `debugglass-demo --help` to list the options.
From Python, the same scenes are `hello_demo`, `background_demo`,
`message_monitor_demo` and `subwindow_demo` in `debugglass.demos`. Each takes
the number of seconds to run and returns an exit status.

## What it does not do

The overlay is drawn as text, either on the terminal or through a `display`
function you supply. It does not open a graphical window. There is no mouse
or keyboard interaction, and structures cannot be collapsed. A background
renderer writes text lines into the frame; it does not paint pixels.

## Installing for development

```
pip install -e ".[test]"
pytest
```