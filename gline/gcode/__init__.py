"""
G-code line handling for gline

Main components:
- codes.py: Command code table and CommandKind enum
- parser.py: Grammar scanner producing raw captures
- line.py: Parsed line value with classification and regeneration
- multipliers.py: Multiplier policy applied to lines at render time
"""

from .codes import CommandKind
from .line import Line, LineFields
from .multipliers import Multipliers
from .parser import LineCaptures, LineScanner

__all__ = [
    "CommandKind",
    "Line",
    "LineFields",
    "LineCaptures",
    "LineScanner",
    "Multipliers",
]
