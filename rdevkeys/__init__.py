"""Keyboard and mouse event model, key code tables for several systems and conversions between them."""

__version__ = "0.1.0"