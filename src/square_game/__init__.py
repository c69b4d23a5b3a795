"""Falling 2x2 block puzzle where same-color rectangles of 2x2 or larger are cleared."""

__version__ = "0.1.0"
