"""Compact sets of Unicode code points, ordered code point lists and range tables."""

__version__ = "0.1.0"

__all__ = ["iterutil", "sets", "unicodecompat"]