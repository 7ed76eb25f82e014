"""A collapsible tree of variables and nested structures."""

from __future__ import annotations

import threading

from debugglass.content import Frame, WindowContent
from debugglass.variable import Variable


class Structure(WindowContent):
    """A labelled node whose children are drawn indented beneath it."""

    def __init__(self, label: str) -> None:
        self._label = label
        self._lock = threading.Lock()
        self._children: list[WindowContent] = []

    @property
    def label(self) -> str:
        return self._label

    def add_structure(self, label: str) -> Structure:
        """Append a nested structure and return it."""
        child = Structure(label)
        with self._lock:
            self._children.append(child)
        return child

    def add_variable(self, label: str) -> Variable:
        """Append a variable and return it."""
        child = Variable(label)
        with self._lock:
            self._children.append(child)
        return child

    def children(self) -> list[WindowContent]:
        """Return the children in the order they were added."""
        with self._lock:
            return list(self._children)

    def render(self, frame: Frame) -> None:
        with frame.section(self._label):
            for child in self.children():
                child.render(frame)