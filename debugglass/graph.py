"""A fixed-capacity line graph of float samples."""

from __future__ import annotations

import threading
from collections import deque

from debugglass.content import Frame, WindowContent

DEFAULT_CAPACITY = 256
MIN_CAPACITY = 2
SPARK_LEVELS = "▁▂▃▄▅▆▇█"
EMPTY_MESSAGE = "No samples yet"


class Graph(WindowContent):
    """Keeps the most recent samples and draws them as a sparkline."""

    def __init__(self, label: str, capacity: int = DEFAULT_CAPACITY) -> None:
        self._label = label
        self._capacity = max(MIN_CAPACITY, capacity)
        self._lock = threading.Lock()
        self._samples: deque[float] = deque(maxlen=self._capacity)
        self._min_value = 0.0
        self._max_value = 1.0

    @property
    def label(self) -> str:
        return self._label

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def range(self) -> tuple[float, float]:
        with self._lock:
            return self._min_value, self._max_value

    def add_value(self, value: float) -> None:
        """Record a sample, dropping the oldest once the graph is full."""
        with self._lock:
            self._samples.append(float(value))

    def set_range(self, min_value: float, max_value: float) -> None:
        """Set the vertical scale; the bounds may be given in either order."""
        if min_value > max_value:
            min_value, max_value = max_value, min_value
        with self._lock:
            self._min_value = float(min_value)
            self._max_value = float(max_value)

    def samples(self) -> list[float]:
        """Return the stored samples, oldest first."""
        with self._lock:
            return list(self._samples)

    def render(self, frame: Frame) -> None:
        with self._lock:
            samples = list(self._samples)
            low, high = self._min_value, self._max_value
        if not samples:
            frame.text(EMPTY_MESSAGE)
            return
        frame.text(f"{self._label} {_sparkline(samples, low, high)}")


def _sparkline(samples: list[float], low: float, high: float) -> str:
    top = len(SPARK_LEVELS) - 1
    span = high - low

    def level(value: float) -> str:
        if span <= 0:
            return SPARK_LEVELS[0]
        ratio = min(1.0, max(0.0, (value - low) / span))
        return SPARK_LEVELS[round(ratio * top)]

    return "".join(level(value) for value in samples)