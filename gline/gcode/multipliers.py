"""
Multiplier policy shared by the lines of one print job.
"""

import logging
from dataclasses import dataclass

from gline.config import env_positive_float_optional
from gline.gcode.line import Line, valid_multiplier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Multipliers:
    """
    Speed, extrusion and travel factors to stamp onto parsed lines.

    Rules:
    - speed applies to F of extrusion moves.
    - travel applies to F of travel moves.
    - extrusion applies to E of any line.
    - Invalid values (non-numeric, <= 0) are dropped to None.
    """

    speed: float | None = None
    extrusion: float | None = None
    travel: float | None = None

    def __post_init__(self) -> None:
        for name in ("speed", "extrusion", "travel"):
            value = getattr(self, name)
            if value is not None and not valid_multiplier(value):
                logger.debug(f"Ignoring invalid {name} multiplier: {value!r}")
                object.__setattr__(self, name, None)

    @staticmethod
    def from_env() -> "Multipliers":
        return Multipliers(
            speed=env_positive_float_optional("GLINE_SPEED_MULTIPLIER"),
            extrusion=env_positive_float_optional("GLINE_EXTRUSION_MULTIPLIER"),
            travel=env_positive_float_optional("GLINE_TRAVEL_MULTIPLIER"),
        )

    @property
    def active(self) -> bool:
        return any(v is not None for v in (self.speed, self.extrusion, self.travel))

    def apply_to(self, line: Line) -> Line:
        """Copy the factors onto line and return it"""
        line.speed_multiplier = self.speed
        line.extrusion_multiplier = self.extrusion
        line.travel_multiplier = self.travel
        return line
