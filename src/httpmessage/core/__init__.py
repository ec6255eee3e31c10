"""
Byte-stream layer: the body resource every message owns.
"""

from .stream import READABLE_MODES, WRITABLE_MODES, Stream

__all__ = ["Stream", "READABLE_MODES", "WRITABLE_MODES"]
