"""Building blocks for a desktop recorder: damage tracking, options, clipping, a stand-in cursor and signals."""

__version__ = "0.1.0"

__all__ = ["args", "damage", "mathutil", "pointer", "rects", "signals"]