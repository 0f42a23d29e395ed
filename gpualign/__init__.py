"""Texture format, small-tile and placement-alignment rules, and memory segment choice."""

__version__ = "0.1.0"
__all__ = ["formats", "tiles", "memory"]