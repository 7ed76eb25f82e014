"""The overlay: a background thread that keeps redrawing every sub-window."""

from __future__ import annotations

import contextlib
import sys
import threading
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from debugglass.content import Frame
from debugglass.registry import SubWindowRegistry

IDLE_MESSAGE = "DebugGlass overlay running..."
IDLE_WINDOW_TITLE = "DebugGlass"
UNNAMED_WINDOW_TITLE = "Window"

Display = Callable[[str, Frame], None]
BackgroundRenderer = Callable[[Frame], None]


@dataclass
class OverlayOptions:
    """How the overlay is shown.

    ``width`` and ``height`` are the nominal window size in pixels; text
    displays do not use them. ``frame_time`` is the pause between frames,
    in seconds.
    """

    width: int = 640
    height: int = 480
    title: str = "DebugGlass"
    frame_time: float = 0.016


@contextlib.contextmanager
def _rich_display() -> Iterator[Display]:
    console = Console()
    with Live(
        console=console,
        auto_refresh=False,
        redirect_stdout=False,
        redirect_stderr=False,
    ) as live:

        def show(title: str, frame: Frame) -> None:
            live.update(Panel(Text(frame.render_text()), title=title), refresh=True)

        yield show


class DebugGlass:
    """Owns the sub-windows and redraws them on a worker thread while running.

    Each frame is handed to ``display`` together with the window title; without
    one, frames are drawn live on the terminal.
    """

    def __init__(self, display: Optional[Display] = None) -> None:
        self.windows = SubWindowRegistry()
        self._display = display
        self._state_lock = threading.Lock()
        self._running = False
        self._stop_requested = threading.Event()
        self._worker: Optional[threading.Thread] = None
        self._background_lock = threading.Lock()
        self._background: Optional[BackgroundRenderer] = None

    def __enter__(self) -> DebugGlass:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def run(self, options: Optional[OverlayOptions] = None) -> bool:
        """Start drawing on a worker thread; return False if already running."""
        options = options if options is not None else OverlayOptions()
        with self._state_lock:
            if self._running:
                return False
            self._running = True
            self._stop_requested.clear()
            self._worker = threading.Thread(
                target=self._thread_main, args=(options,), name="debugglass", daemon=True
            )
            self._worker.start()
        return True

    def stop(self) -> None:
        """Ask the worker to finish and wait for it."""
        self._stop_requested.set()
        with self._state_lock:
            worker, self._worker = self._worker, None
        if worker is not None and worker is not threading.current_thread():
            worker.join()
        with self._state_lock:
            self._running = False

    def is_running(self) -> bool:
        with self._state_lock:
            return self._running

    def set_background_renderer(self, callback: Optional[BackgroundRenderer]) -> None:
        """Set what is drawn beneath the windows each frame; ``None`` clears it."""
        with self._background_lock:
            self._background = callback

    def render_frame(self) -> Frame:
        """Draw the background and every sub-window into a new frame."""
        frame = Frame()
        with self._background_lock:
            background = self._background
        if background is not None:
            background(frame)

        windows = self.windows.snapshot()
        if not windows:
            with frame.section(IDLE_WINDOW_TITLE):
                frame.text(IDLE_MESSAGE)
            return frame

        for window in windows:
            with frame.section(window.name or UNNAMED_WINDOW_TITLE):
                window.render(frame)
        return frame

    def _open_display(self) -> contextlib.AbstractContextManager[Display]:
        if self._display is not None:
            return contextlib.nullcontext(self._display)
        return _rich_display()

    def _thread_main(self, options: OverlayOptions) -> None:
        try:
            with self._open_display() as show:
                while not self._stop_requested.is_set():
                    show(options.title, self.render_frame())
                    self._stop_requested.wait(max(0.0, options.frame_time))
        except Exception as exc:
            print(f"DebugGlass display failed: {exc}", file=sys.stderr)
        finally:
            with self._state_lock:
                self._running = False