"""A labelled value shown as text."""

from __future__ import annotations

import threading
from typing import Any

from debugglass.content import Frame, WindowContent


def format_value(value: Any) -> str:
    """Turn a value into display text the way a default text stream would."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


class Variable(WindowContent):
    """Shows ``label: value``; the value may be replaced at any time."""

    def __init__(self, label: str) -> None:
        self._label = label
        self._lock = threading.Lock()
        self._value = ""

    @property
    def label(self) -> str:
        return self._label

    @property
    def value(self) -> str:
        with self._lock:
            return self._value

    def set_value(self, value: Any) -> None:
        """Replace the shown value; non-strings are formatted as text."""
        text = format_value(value)
        with self._lock:
            self._value = text

    def render(self, frame: Frame) -> None:
        frame.text(f"{self._label}: {self.value}")