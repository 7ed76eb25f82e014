"""A tab holding an optional render callback and a list of widgets."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Optional

from debugglass.content import Frame, WindowContent
from debugglass.graph import Graph
from debugglass.message_monitor import MessageMonitor
from debugglass.structure import Structure
from debugglass.variable import Variable

EMPTY_MESSAGE = "No content assigned"

RenderCallback = Callable[[Frame], None]


class Tab:
    """One page of a sub-window: a callback drawn first, then its widgets."""

    def __init__(self, label: str) -> None:
        self._label = label
        self._lock = threading.Lock()
        self._callback: Optional[RenderCallback] = None
        self._widgets: list[WindowContent] = []

    @property
    def label(self) -> str:
        return self._label

    def set_render_callback(self, callback: Optional[RenderCallback]) -> None:
        """Set the function drawn before the widgets; ``None`` clears it."""
        with self._lock:
            self._callback = callback

    def _append(self, widget: WindowContent) -> None:
        with self._lock:
            self._widgets.append(widget)

    def add_graph(self, label: str) -> Graph:
        """Append a graph and return it."""
        graph = Graph(label)
        self._append(graph)
        return graph

    def add_variable(self, label: str) -> Variable:
        """Append a variable and return it."""
        variable = Variable(label)
        self._append(variable)
        return variable

    def add_structure(self, label: str) -> Structure:
        """Append a structure and return it."""
        structure = Structure(label)
        self._append(structure)
        return structure

    def add_message_monitor(self, label: str) -> MessageMonitor:
        """Append a message monitor and return it."""
        monitor = MessageMonitor(label)
        self._append(monitor)
        return monitor

    def find_message_monitor(self, label: str) -> Optional[MessageMonitor]:
        """Return the first message monitor with ``label``, or ``None``."""
        with self._lock:
            widgets = list(self._widgets)
        return next(
            (
                widget
                for widget in widgets
                if isinstance(widget, MessageMonitor) and widget.label == label
            ),
            None,
        )

    @property
    def widgets(self) -> list[WindowContent]:
        """The widgets in the order they were added."""
        with self._lock:
            return list(self._widgets)

    def render(self, frame: Frame) -> None:
        with self._lock:
            callback = self._callback
            widgets = list(self._widgets)

        if callback is not None:
            callback(frame)

        for widget in widgets:
            widget.render(frame)

        if callback is None and not widgets:
            frame.text(EMPTY_MESSAGE)