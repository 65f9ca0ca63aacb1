"""Monkey Map: path simulation over a flat or cube-wrapped tile map."""

__version__ = "0.1.0"
