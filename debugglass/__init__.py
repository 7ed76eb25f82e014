"""Live text overlay of windows, tabs and thread-safe debug widgets."""

__version__ = "0.1.0"