"""A table of messages keyed by id, updated in place."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, replace

from debugglass.content import Frame, WindowContent

HIGHLIGHT_WINDOW_SECONDS = 0.5
EMPTY_MESSAGE = "No messages received"
HEADERS = ("ID", "Value", "Updates", "Age (ms)")
HIGHLIGHT_MARK = "*"


@dataclass(frozen=True)
class MessageEntry:
    """One row of the monitor."""

    id: str
    value: str
    update_count: int
    last_update: float


def _format_message_value(value: object) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:.3f}"
    raise TypeError(f"unsupported message value type: {type(value).__name__}")


class MessageMonitor(WindowContent):
    """Keeps the latest value per id, in first-seen order, with update counts."""

    def __init__(self, label: str, clock: Callable[[], float] = time.monotonic) -> None:
        self._label = label
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: dict[str, MessageEntry] = {}

    @property
    def label(self) -> str:
        return self._label

    def upsert_message(self, id: str, value: str | int | float) -> None:
        """Insert a new id or replace its value and bump its update count.

        Floats are shown with three decimals; other non-numeric,
        non-string values raise TypeError.
        """
        if not isinstance(id, str):
            raise TypeError("message id must be a string")
        text = _format_message_value(value)
        now = self._clock()
        with self._lock:
            existing = self._entries.get(id)
            if existing is None:
                self._entries[id] = MessageEntry(id, text, 1, now)
            else:
                self._entries[id] = replace(
                    existing,
                    value=text,
                    update_count=existing.update_count + 1,
                    last_update=now,
                )

    def entries(self) -> list[MessageEntry]:
        """Return the rows in the order their ids were first seen."""
        with self._lock:
            return list(self._entries.values())

    def render(self, frame: Frame) -> None:
        snapshot = self.entries()
        if not snapshot:
            frame.text(EMPTY_MESSAGE)
            return

        now = self._clock()
        rows = []
        for entry in snapshot:
            age = now - entry.last_update
            mark = HIGHLIGHT_MARK if age <= HIGHLIGHT_WINDOW_SECONDS else " "
            cells = (entry.id, entry.value, str(entry.update_count), str(int(age * 1000)))
            rows.append((mark, cells))

        widths = [
            max(len(HEADERS[column]), *(len(cells[column]) for _, cells in rows))
            for column in range(len(HEADERS))
        ]

        def line(mark: str, cells: tuple[str, ...]) -> str:
            padded = (cell.ljust(width) for cell, width in zip(cells, widths))
            return f"{mark} " + " | ".join(padded).rstrip()

        frame.text(line(" ", HEADERS))
        for mark, cells in rows:
            frame.text(line(mark, cells))