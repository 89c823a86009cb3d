"""
Parsed G-code Line

A Line holds one instruction as an immutable set of typed, optional fields,
classifies it, and regenerates a transmission-ready text with checksum and
optional line number. Speed, extrusion and travel multipliers are the only
mutable state and are applied at render time only.
"""

import logging
import numbers
from dataclasses import dataclass

from gline import config
from gline.gcode.codes import CommandKind
from gline.gcode.parser import EMPTY_CAPTURES, LineCaptures, LineScanner
from gline.protocol import wire
from gline.utils.errors import GrammarError

logger = logging.getLogger(__name__)

_scanner = LineScanner()


def _to_int(data: str | None) -> int | None:
    if data is None:
        return None
    # 'S' and 'P' may carry no digits at all
    return int(data) if data else 0


def _to_float(data: str | None) -> float | None:
    return float(data) if data is not None else None


def _strip(data: str | None) -> str | None:
    return data.strip() if data is not None else None


def valid_multiplier(value: object) -> bool:
    """A multiplier is valid when it is a real number strictly above zero."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool) and value > 0


@dataclass(frozen=True)
class LineFields:
    """Typed fields materialized from LineCaptures"""

    line: str | None = None
    command: str | None = None
    command_letter: str | None = None
    command_number: int | None = None
    tool_number: int | None = None
    kind: CommandKind | None = None
    s: int | None = None
    p: int | None = None
    x: float | None = None
    y: float | None = None
    z: float | None = None
    f: float | None = None
    e: float | None = None
    string_data: str | None = None
    comment: str | None = None

    @classmethod
    def from_captures(cls, captures: LineCaptures) -> "LineFields":
        letter = captures.command_letter
        number = _to_int(captures.command_number)
        string_data = _strip(captures.string_data)
        return cls(
            line=_strip(captures.line),
            command=captures.command,
            command_letter=letter,
            command_number=number,
            tool_number=number if letter == "T" else None,
            kind=CommandKind.lookup(letter, number),
            s=_to_int(captures.s_data),
            p=_to_int(captures.p_data),
            x=_to_float(captures.x_data),
            y=_to_float(captures.y_data),
            z=_to_float(captures.z_data),
            f=_to_float(captures.f_data),
            e=_to_float(captures.e_data),
            string_data=string_data or None,
            comment=_strip(captures.comment),
        )


def _field(name: str, doc: str | None = None) -> property:
    return property(lambda self: getattr(self._fields, name), doc=doc)


class Line:
    """One line of G-code"""

    def __init__(self, raw: str | None = None, *, uppercase: bool | None = None):
        """
        Parse a line of G-code

        Args:
            raw: Line text without newline; None is treated as ''
            uppercase: Upper-case before matching (defaults to config.UPPERCASE_DEFAULT).
                The raw text itself is kept exactly as given.
        """
        self._raw = "" if raw is None else raw
        self._uppercase = config.UPPERCASE_DEFAULT if uppercase is None else bool(uppercase)
        self._speed_multiplier: float | None = None
        self._extrusion_multiplier: float | None = None
        self._travel_multiplier: float | None = None

        try:
            captures = _scanner.scan(self._raw, uppercase=self._uppercase)
        except GrammarError as e:
            logger.debug(f"Treating line as empty: {e}")
            captures = EMPTY_CAPTURES
        self._captures = captures
        self._fields = LineFields.from_captures(captures)

    @property
    def raw(self):
        """The exact text given at construction"""
        return self._raw

    @property
    def uppercase(self) -> bool:
        return self._uppercase

    @property
    def captures(self) -> LineCaptures:
        """Raw grammar captures behind the typed fields"""
        return self._captures

    line = _field("line", "Stripped command + parameters + string data, or None without a command")
    command = _field("command", "Command text as written, e.g. 'G1' or 'G01'")
    command_letter = _field("command_letter")
    command_number = _field("command_number")
    tool_number = _field("tool_number", "Command number of a T command, None otherwise")
    kind = _field("kind", "CommandKind from the command code table, None when unknown")
    s = _field("s")
    p = _field("p")
    x = _field("x")
    y = _field("y")
    z = _field("z")
    f = _field("f", "Speed in mm/minute")
    e = _field("e")
    string_data = _field("string_data")
    comment = _field("comment")

    # ------------------------------------------------------------------
    # Multipliers
    # ------------------------------------------------------------------

    def _checked_multiplier(self, name: str, value: object) -> float | None:
        if value is None or valid_multiplier(value):
            return value  # type: ignore[return-value]
        logger.debug(f"Ignoring invalid {name}: {value!r}")
        return None

    @property
    def speed_multiplier(self) -> float | None:
        """Factor applied to F of extrusion moves"""
        return self._speed_multiplier

    @speed_multiplier.setter
    def speed_multiplier(self, value) -> None:
        self._speed_multiplier = self._checked_multiplier("speed_multiplier", value)

    @property
    def extrusion_multiplier(self) -> float | None:
        """Factor applied to E"""
        return self._extrusion_multiplier

    @extrusion_multiplier.setter
    def extrusion_multiplier(self, value) -> None:
        self._extrusion_multiplier = self._checked_multiplier("extrusion_multiplier", value)

    @property
    def travel_multiplier(self) -> float | None:
        """Factor applied to F of travel moves"""
        return self._travel_multiplier

    @travel_multiplier.setter
    def travel_multiplier(self, value) -> None:
        self._travel_multiplier = self._checked_multiplier("travel_multiplier", value)

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    @property
    def empty(self) -> bool:
        """True when no command was recognized (blank, comment-only or malformed)"""
        return self.command is None

    @property
    def is_move(self) -> bool:
        return self.kind is not None and self.kind.is_move

    @property
    def travel_move(self) -> bool:
        return self.is_move and self.e is None

    @property
    def extrusion_move(self) -> bool:
        return self.is_move and self.e is not None and self.e > 0

    @property
    def full_home(self) -> bool:
        """Home with X, Y and Z all given"""
        return (
            self.kind is CommandKind.HOME
            and self.x is not None
            and self.y is not None
            and self.z is not None
        )

    # ------------------------------------------------------------------
    # Regeneration
    # ------------------------------------------------------------------

    def multiplied_extrusion(self) -> float | None:
        if self.e is not None and valid_multiplier(self._extrusion_multiplier):
            return self.e * self._extrusion_multiplier
        return self.e

    def multiplied_speed(self) -> float | None:
        if self.f is None:
            return None
        if self.travel_move and valid_multiplier(self._travel_multiplier):
            return self.f * self._travel_multiplier
        if self.extrusion_move and valid_multiplier(self._speed_multiplier):
            return self.f * self._speed_multiplier
        return self.f

    @property
    def checksum(self) -> int:
        """XOR checksum of the stripped line"""
        return wire.checksum(self.line or "")

    def _regenerate(self) -> str:
        if self.command is None:
            return ""
        parts = [self.command]
        for letter, value in (
            ("X", self.x),
            ("Y", self.y),
            ("Z", self.z),
            ("F", self.multiplied_speed()),
            ("E", self.multiplied_extrusion()),
        ):
            if value is not None:
                parts.append(f"{letter}{wire.format_value(value)}")
        if self.string_data is not None:
            parts.append(self.string_data)
        return " ".join(parts)

    def render(self, line_number: int | None = None) -> str:
        """
        Transmission-ready text of the line

        Args:
            line_number: Sequence number for the 'N<n> ' prefix. Anything other
                than a non-negative int is treated as absent.

        Returns:
            '<line>*<checksum>' without a line number. With one, the line is
            rebuilt from its fields when a speed or extrusion multiplier is set
            and prefixed with 'N<n> '.
        """
        stripped = self.line or ""
        if not wire.is_line_number(line_number):
            return wire.checksummed(stripped)
        if self._extrusion_multiplier is None and self._speed_multiplier is None:
            return wire.prefixed(stripped, line_number)
        return wire.prefixed(self._regenerate(), line_number)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Line({self._raw!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self._raw == other._raw and self._uppercase == other._uppercase

    def __hash__(self) -> int:
        return hash((self._raw, self._uppercase))
