"""
gline Python Package

Parses single lines of G-code into structured, queryable values and
regenerates transmission-ready text with checksum and line number.

Key components:
- Line: Parsed line with typed optional fields and move/home classification
- CommandKind: Canonical command codes (G0, G1, G28, ...)
- Multipliers: Speed/extrusion/travel factors applied at render time
- checksum, checksummed, prefixed: Wire framing helpers
"""

from .gcode import CommandKind, Line, Multipliers
from .protocol.wire import checksum, checksummed, prefixed

__version__ = "0.1.0"
__all__ = [
    "__version__",
    "Line",
    "CommandKind",
    "Multipliers",
    "checksum",
    "checksummed",
    "prefixed",
]
