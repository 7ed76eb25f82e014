import threading
import time

import pytest

from debugglass.content import Frame
from debugglass.overlay import IDLE_MESSAGE, DebugGlass, OverlayOptions


def _wait_for(predicate, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return predicate()


class _Recorder:
    def __init__(self):
        self.lock = threading.Lock()
        self.calls = []

    def __call__(self, title, frame):
        with self.lock:
            self.calls.append((title, frame.render_text()))

    def count(self):
        with self.lock:
            return len(self.calls)

    def texts(self):
        with self.lock:
            return [text for _, text in self.calls]


def test_options_defaults():
    options = OverlayOptions()
    assert (options.width, options.height) == (640, 480)
    assert options.title == "DebugGlass"
    assert options.frame_time == pytest.approx(0.016)


def test_idle_frame_when_no_windows():
    overlay = DebugGlass(display=_Recorder())
    assert overlay.render_frame().lines() == ["DebugGlass", "  " + IDLE_MESSAGE]


def test_frame_contains_windows_and_tabs():
    overlay = DebugGlass(display=_Recorder())
    tab = overlay.windows.add("Stats").tabs.add("main")
    tab.add_variable("Mode").set_value("demo")
    lines = overlay.render_frame().lines()
    assert lines[0] == "Stats"
    assert any(line.strip() == "Mode: demo" for line in lines)
    assert IDLE_MESSAGE not in "\n".join(lines)


def test_unnamed_window_gets_default_title():
    overlay = DebugGlass(display=_Recorder())
    overlay.windows.add("")
    assert overlay.render_frame().lines()[0] == "Window"


def test_background_is_drawn_first():
    overlay = DebugGlass(display=_Recorder())
    overlay.set_background_renderer(lambda frame: frame.text("backdrop"))
    lines = overlay.render_frame().lines()
    assert lines[0] == "backdrop"
    overlay.set_background_renderer(None)
    assert "backdrop" not in overlay.render_frame().lines()


def test_run_twice_is_refused_and_stop_ends_run():
    recorder = _Recorder()
    overlay = DebugGlass(display=recorder)
    assert overlay.run(OverlayOptions(title="Demo", frame_time=0.001)) is True
    assert overlay.is_running() is True
    assert overlay.run() is False
    assert _wait_for(lambda: recorder.count() > 0)
    overlay.stop()
    assert overlay.is_running() is False
    assert all(title == "Demo" for title, _ in recorder.calls)


def test_can_run_again_after_stop():
    recorder = _Recorder()
    overlay = DebugGlass(display=recorder)
    assert overlay.run(OverlayOptions(frame_time=0.001)) is True
    overlay.stop()
    assert overlay.run(OverlayOptions(frame_time=0.001)) is True
    assert overlay.is_running() is True
    overlay.stop()
    assert overlay.is_running() is False


def test_frames_reflect_updates_while_running():
    recorder = _Recorder()
    overlay = DebugGlass(display=recorder)
    variable = overlay.windows.add("Vars").tabs.add("t").add_variable("Count")
    variable.set_value(1)
    assert "Count: 1" in overlay.render_frame().render_text()
    assert overlay.run(OverlayOptions(frame_time=0.001)) is True
    try:
        variable.set_value(2)
        seen = _wait_for(
            lambda: any("Count: 2" in text for text in recorder.texts())
        )
    finally:
        overlay.stop()
    assert seen is True
    text = overlay.render_frame().render_text()
    assert "Count: 2" in text
    assert "Count: 1" not in text


def test_failing_display_stops_running(capsys):
    def broken(title, frame):
        raise RuntimeError("no screen")

    overlay = DebugGlass(display=broken)
    assert overlay.run(OverlayOptions(frame_time=0.001)) is True
    assert _wait_for(lambda: not overlay.is_running())
    overlay.stop()
    assert "no screen" in capsys.readouterr().err


def test_context_manager_stops_on_exit():
    recorder = _Recorder()
    with DebugGlass(display=recorder) as overlay:
        overlay.run(OverlayOptions(frame_time=0.001))
        assert overlay.is_running() is True
    assert overlay.is_running() is False


def test_render_frame_returns_fresh_frames():
    overlay = DebugGlass(display=_Recorder())
    first = overlay.render_frame()
    second = overlay.render_frame()
    assert isinstance(first, Frame)
    assert first is not second
    assert first.lines() == second.lines()