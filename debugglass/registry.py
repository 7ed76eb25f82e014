"""Named sub-windows, each holding a set of tabs."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Optional

from debugglass.content import Frame
from debugglass.tab import Tab

EMPTY_MESSAGE = "No tabs defined"
DEFAULT_TAB_TITLE = "Tab"

RenderCallback = Callable[[Frame], None]


class TabCollection:
    """The ``tabs`` view of a sub-window."""

    def __init__(self, owner: SubWindow) -> None:
        self._owner = owner

    def add(self, label: str) -> Tab:
        """Append a new tab to the owning window and return it."""
        return self._owner.add_tab(label)

    def find(self, label: str) -> Optional[Tab]:
        """Return the owning window's first tab with ``label``, or ``None``."""
        return self._owner.find_tab(label)


class SubWindow:
    """A named window with an optional callback and a row of tabs."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._lock = threading.Lock()
        self._callback: Optional[RenderCallback] = None
        self._tabs: list[Tab] = []
        self.tabs = TabCollection(self)

    @property
    def name(self) -> str:
        return self._name

    def set_render_callback(self, callback: Optional[RenderCallback]) -> None:
        """Set the function drawn before the tabs; ``None`` clears it."""
        with self._lock:
            self._callback = callback

    def add_tab(self, label: str) -> Tab:
        """Append a new tab and return it; labels need not be unique."""
        tab = Tab(label)
        with self._lock:
            self._tabs.append(tab)
        return tab

    def find_tab(self, label: str) -> Optional[Tab]:
        """Return the first tab with ``label``, or ``None``."""
        with self._lock:
            return next((tab for tab in self._tabs if tab.label == label), None)

    def render(self, frame: Frame) -> None:
        with self._lock:
            callback = self._callback
            tabs = list(self._tabs)

        if callback is not None:
            callback(frame)

        if not tabs:
            frame.text(EMPTY_MESSAGE)
            return

        for tab in tabs:
            with frame.section(tab.label or DEFAULT_TAB_TITLE):
                tab.render(frame)


class SubWindowRegistry:
    """Sub-windows by name; adding an existing name returns that window."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._windows: dict[str, SubWindow] = {}

    def add(self, name: str) -> SubWindow:
        """Return the window called ``name``, creating it if needed."""
        with self._lock:
            window = self._windows.get(name)
            if window is None:
                window = SubWindow(name)
                self._windows[name] = window
            return window

    def __getitem__(self, name: str) -> SubWindow:
        return self.add(name)

    def find(self, name: str) -> Optional[SubWindow]:
        """Return the window called ``name`` without creating it."""
        with self._lock:
            return self._windows.get(name)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._windows

    def __len__(self) -> int:
        with self._lock:
            return len(self._windows)

    def snapshot(self) -> list[SubWindow]:
        """Return all windows at this moment."""
        with self._lock:
            return list(self._windows.values())