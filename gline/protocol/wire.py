"""
Wire encoding helpers for transmission-ready G-code lines.

This module centralizes the checksum and line-number framing applied to a
stripped line before it is handed to a serial sender.
"""

import numpy as np

__all__ = [
    "checksum",
    "checksummed",
    "prefixed",
    "format_value",
    "is_line_number",
]


def checksum(text: str) -> int:
    """
    XOR of every byte of the UTF-8 encoded text (0 for empty text).
    """
    data = np.frombuffer(text.encode("utf-8"), dtype=np.uint8)
    return int(np.bitwise_xor.reduce(data)) if data.size else 0


def checksummed(text: str) -> str:
    """Append '*<checksum>' with the checksum rendered in decimal."""
    return f"{text}*{checksum(text)}"


def prefixed(text: str, line_number: int) -> str:
    """
    Prefix a checksummed line with its sequence number.

    The checksum covers `text` only, never the 'N<n> ' prefix.
    """
    return f"N{line_number} {checksummed(text)}"


def is_line_number(value: object) -> bool:
    """True for non-negative ints; bools and every other type are rejected."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def format_value(value: int | float) -> str:
    """
    Textual form of a parameter value in a regenerated line.

    Floats keep their shortest round-trip form, so 5.0 stays '5.0'.
    """
    if isinstance(value, float):
        return repr(value)
    return str(value)
