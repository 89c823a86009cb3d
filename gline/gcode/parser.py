"""
G-code Line Grammar

Scans one line of G-code into raw capture strings. The grammar, in order, is:

    command? SP? S? SP? P? SP? X? SP? Y? SP? Z? SP? F? SP? E? SP? string_data? (';' comment)?

where the command is G/M/T followed by one to three digits and every segment
is optional. Nothing after a missing command is recognized except a comment.
"""

import logging
import re
from dataclasses import dataclass

from gline.config import TRACE_ENABLED
from gline.utils.errors import GrammarError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineCaptures:
    """Raw substrings captured from a line; None means the segment was absent"""

    line: str | None = None  # command + regular data + string data
    command: str | None = None
    command_letter: str | None = None
    command_number: str | None = None
    s_data: str | None = None
    p_data: str | None = None
    x_data: str | None = None
    y_data: str | None = None
    z_data: str | None = None
    f_data: str | None = None
    e_data: str | None = None
    string_data: str | None = None
    comment: str | None = None


EMPTY_CAPTURES = LineCaptures()


class LineScanner:
    """Hand-written scanner for the single-line G-code grammar"""

    COMMENT_DELIMITER = ";"
    COMMAND_PATTERN = re.compile(r"([GMT])([0-9]{1,3})")

    # Fixed order; each entry is tried exactly once, followed by one optional space
    PARAMETER_PATTERNS: tuple[tuple[str, re.Pattern], ...] = (
        ("s_data", re.compile(r"S([0-9]*)")),
        ("p_data", re.compile(r"P([0-9]*)")),
        ("x_data", re.compile(r"X(-?[0-9]+\.?[0-9]*)")),
        ("y_data", re.compile(r"Y(-?[0-9]+\.?[0-9]*)")),
        ("z_data", re.compile(r"Z(-?[0-9]+\.?[0-9]*)")),
        ("f_data", re.compile(r"F([0-9]+\.?[0-9]*)")),
        ("e_data", re.compile(r"E(-?[0-9]+\.?[0-9]*)")),
    )

    def scan(self, text: str, uppercase: bool = False) -> LineCaptures:
        """
        Apply the grammar to a line of text

        Args:
            text: One line of G-code, newline excluded
            uppercase: Upper-case the text before matching

        Returns:
            LineCaptures with every unmatched segment set to None

        Raises:
            GrammarError: If text is not a string
        """
        if not isinstance(text, str):
            raise GrammarError(f"expected str, got {type(text).__name__}", text)
        if uppercase:
            text = text.upper()

        end = text.find(self.COMMENT_DELIMITER)
        comment = text[end + 1 :] if end >= 0 else None
        if end < 0:
            end = len(text)

        command_match = self.COMMAND_PATTERN.match(text)
        if not command_match:
            return LineCaptures(comment=comment)

        captures: dict[str, str] = {}
        pos = self._skip_space(text, command_match.end())
        for name, pattern in self.PARAMETER_PATTERNS:
            match = pattern.match(text, pos, end)
            if match:
                captures[name] = match.group(1)
                pos = match.end()
            pos = self._skip_space(text, pos)

        if TRACE_ENABLED:
            logger.trace(f"scan {text!r}: command={command_match.group(0)} params={captures}")  # type: ignore[attr-defined]

        return LineCaptures(
            line=text[:end],
            command=command_match.group(0),
            command_letter=command_match.group(1),
            command_number=command_match.group(2),
            string_data=text[pos:end],
            comment=comment,
            **captures,
        )

    @staticmethod
    def _skip_space(text: str, pos: int) -> int:
        """Consume at most one space at pos"""
        if text.startswith(" ", pos):
            return pos + 1
        return pos
