"""Text frames that widgets draw into, and the base class for widgets."""

from __future__ import annotations

import abc
from collections.abc import Iterator
from contextlib import contextmanager


class Frame:
    """Collects the lines one render pass produces, with nested sections."""

    def __init__(self, indent: str = "  ") -> None:
        self._indent = indent
        self._depth = 0
        self._lines: list[str] = []

    def text(self, line: str) -> None:
        """Append one line at the current nesting depth."""
        self._lines.append(f"{self._indent * self._depth}{line}")

    @contextmanager
    def section(self, title: str) -> Iterator[Frame]:
        """Write a heading and indent everything written inside the block."""
        self.text(title)
        self._depth += 1
        try:
            yield self
        finally:
            self._depth -= 1

    def lines(self) -> list[str]:
        """Return a copy of the lines written so far."""
        return list(self._lines)

    def render_text(self) -> str:
        """Return the frame as one newline-separated string."""
        return "\n".join(self._lines)


class WindowContent(abc.ABC):
    """Anything that can draw itself into a frame."""

    @abc.abstractmethod
    def render(self, frame: Frame) -> None:
        """Draw this content into ``frame``."""