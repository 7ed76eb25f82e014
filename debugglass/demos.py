"""Small demonstration programs for the overlay."""

from __future__ import annotations

import argparse
import math
import random
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from debugglass.content import Frame
from debugglass.graph import Graph
from debugglass.message_monitor import MessageMonitor
from debugglass.overlay import DebugGlass, OverlayOptions
from debugglass.variable import Variable

MESSAGE_IDS = ("ID_101", "ID_220", "ID_305", "ID_999")
START_FAILURE = "Failed to start DebugGlass"


def _start(monitor: DebugGlass, title: str) -> bool:
    if not monitor.run(OverlayOptions(title=title)):
        print(START_FAILURE, file=sys.stderr)
        return False
    return True


def hello_demo(duration: float = 10.0) -> int:
    """Show the idle overlay for ``duration`` seconds."""
    monitor = DebugGlass()
    if not _start(monitor, "DebugGlass Demo"):
        return 1
    print("Hello World", flush=True)
    time.sleep(duration)
    monitor.stop()
    return 0


def _background_colour(t: float) -> tuple[float, float, float]:
    red = 0.2 + 0.3 * (0.5 + 0.5 * math.sin(t * 0.7))
    green = 0.2 + 0.3 * (0.5 + 0.5 * math.sin(t * 0.9 + 1.0))
    blue = 0.3 + 0.4 * (0.5 + 0.5 * math.sin(t * 1.1 + 2.0))
    return red, green, blue


def _setup_background(monitor: DebugGlass, start_time: float) -> None:
    def draw(frame: Frame) -> None:
        red, green, blue = _background_colour(time.monotonic() - start_time)
        frame.text(f"Background rgb({red:.2f}, {green:.2f}, {blue:.2f})")

    monitor.set_background_renderer(draw)

    def info(frame: Frame) -> None:
        frame.text("Background driven by set_background_renderer()")
        frame.text("")
        frame.text("Watch the backdrop colour change over time.")

    monitor.windows.add("Overlay Info").tabs.add("main").set_render_callback(info)


def background_demo(duration: float = 15.0) -> int:
    """Show an animated background beneath an info window."""
    monitor = DebugGlass()
    _setup_background(monitor, time.monotonic())
    if not _start(monitor, "DebugGlass Background Demo"):
        return 1
    print("Background demo running", flush=True)
    time.sleep(duration)
    monitor.stop()
    return 0


def _text_callback(line: str) -> Callable[[Frame], None]:
    return lambda frame: frame.text(line)


def _setup_message_monitor(monitor: DebugGlass) -> MessageMonitor:
    tab = monitor.windows.add("Message Monitor").tabs.add("stream")
    tab.set_render_callback(_text_callback("IDs update in place as new samples arrive"))
    return tab.add_message_monitor("CAN Trace")


def message_monitor_demo(duration: float = 20.0) -> int:
    """Feed random values for a fixed set of ids into a message monitor."""
    monitor = DebugGlass()
    messages = _setup_message_monitor(monitor)
    if not _start(monitor, "Message Monitor Demo"):
        return 1
    print("Message monitor demo running", flush=True)

    rng = random.Random()
    end_time = time.monotonic() + duration
    while time.monotonic() < end_time:
        for message_id in MESSAGE_IDS:
            messages.upsert_message(message_id, rng.uniform(0.0, 100.0))
        time.sleep(0.15)

    monitor.stop()
    return 0


@dataclass
class _SubwindowHandles:
    waveform: Graph
    latency: Variable
    latest_event: Variable
    messages: MessageMonitor


def _setup_subwindows(monitor: DebugGlass) -> _SubwindowHandles:
    stats_tab = monitor.windows.add("Stats").tabs.add("tab1")
    stats_tab.set_render_callback(_text_callback("Live Waveform"))
    waveform = stats_tab.add_graph("Waveform")
    waveform.set_range(0.0, 1.0)

    variables_tab = monitor.windows.add("Variables").tabs.add("tab1")
    variables_tab.set_render_callback(_text_callback("Tracked Variables"))
    systems = variables_tab.add_structure("Systems")
    systems.add_variable("Mode").set_value("demo")
    systems.add_variable("FPS Target").set_value(60)
    telemetry = systems.add_structure("Telemetry")
    latency = telemetry.add_variable("Latency (ms)")
    latency.set_value(4.2)
    logs = systems.add_structure("Logs")
    latest_event = logs.add_variable("Latest Event")
    latest_event.set_value("Initialized renderer")

    messages_tab = monitor.windows.add("Messages").tabs.add("bus")
    messages_tab.set_render_callback(_text_callback("Live message stream (ID/value)"))
    messages = messages_tab.add_message_monitor("Telemetry Bus")

    return _SubwindowHandles(waveform, latency, latest_event, messages)


def _subwindow_step(handles: _SubwindowHandles, phase: float) -> None:
    handles.waveform.add_value(0.5 + 0.5 * math.sin(phase))
    handles.latency.set_value(4.0 + 1.0 * math.sin(phase * 0.5))
    if phase < 2.0:
        handles.latest_event.set_value("Connected to telemetry feed")
    else:
        handles.latest_event.set_value("Awaiting user commands...")
    index = int(phase) % 3
    handles.messages.upsert_message(f"ID_{index}", 42.0 + math.sin(phase + index))


def subwindow_demo(duration: float = 50.0) -> int:
    """Show several windows with a graph, a variable tree and a message monitor."""
    monitor = DebugGlass()
    handles = _setup_subwindows(monitor)
    if not _start(monitor, "DebugGlass Subwindow Demo"):
        return 1
    print("DebugGlass subwindow demo running", flush=True)

    end_time = time.monotonic() + duration
    phase = 0.0
    while time.monotonic() < end_time:
        phase += 0.05
        _subwindow_step(handles, phase)
        time.sleep(0.016)

    monitor.stop()
    return 0


_DEMOS: dict[str, Callable[..., int]] = {
    "hello": hello_demo,
    "background": background_demo,
    "message-monitor": message_monitor_demo,
    "subwindow": subwindow_demo,
}


def main(argv: Optional[list[str]] = None) -> int:
    """Run one demo chosen on the command line."""
    parser = argparse.ArgumentParser(prog="debugglass", description="Run a DebugGlass demo.")
    parser.add_argument("demo", nargs="?", default="hello", choices=sorted(_DEMOS))
    parser.add_argument("--duration", type=float, default=None, help="seconds to run")
    args = parser.parse_args(argv)
    demo = _DEMOS[args.demo]
    if args.duration is None:
        return demo()
    return demo(args.duration)


if __name__ == "__main__":
    sys.exit(main())