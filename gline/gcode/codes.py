"""
G-code Command Code Table

Canonical textual codes for the RepRap/Marlin command family, exposed both as
plain module constants and as the CommandKind enum used for classification.
"""

from enum import Enum

# Movement and positioning
RAPID_MOVE = "G0"
CONTROLLED_MOVE = "G1"
DWELL = "G4"
HEAD_OFFSET = "G10"
USE_INCHES = "G20"
USE_MILLIMETRES = "G21"
HOME = "G28"
ABS_POSITIONING = "G90"
REL_POSITIONING = "G91"
SET_POSITION = "G92"

# Machine control
STOP = "M0"
SLEEP = "M1"
ENABLE_MOTORS = "M17"
DISABLE_MOTORS = "M18"
POWER_ON = "M80"
POWER_OFF = "M81"
ABS_EXT_MODE = "M82"
REL_EXT_MODE = "M83"
IDLE_HOLD = "M84"
EMERGENCY_STOP = "M112"

# SD card
LIST_SD = "M20"
INIT_SD = "M21"
RELEASE_SD = "M22"
SELECT_SD_FILE = "M23"
START_SD_PRINT = "M24"
PAUSE_SD_PRINT = "M25"
SET_SD_POSITION = "M26"
SD_PRINT_STATUS = "M27"
START_SD_WRITE = "M28"
STOP_SD_WRITE = "M29"

# Temperature and fans
SET_EXT_TEMP_NW = "M104"
GET_EXT_TEMP = "M105"
FAN_ON = "M106"
FAN_OFF = "M107"
SET_EXT_TEMP_W = "M109"
SET_BED_TEMP_NW = "M140"
SET_BED_TEMP_W = "M190"

# Reporting
SET_LINE_NUM = "M110"
GET_POSITION = "M114"
GET_FW_INFO = "M115"


class CommandKind(Enum):
    """Semantic command identity, valued by its canonical code."""

    RAPID_MOVE = RAPID_MOVE
    CONTROLLED_MOVE = CONTROLLED_MOVE
    DWELL = DWELL
    HEAD_OFFSET = HEAD_OFFSET
    USE_INCHES = USE_INCHES
    USE_MILLIMETRES = USE_MILLIMETRES
    HOME = HOME
    ABS_POSITIONING = ABS_POSITIONING
    REL_POSITIONING = REL_POSITIONING
    SET_POSITION = SET_POSITION
    STOP = STOP
    SLEEP = SLEEP
    ENABLE_MOTORS = ENABLE_MOTORS
    DISABLE_MOTORS = DISABLE_MOTORS
    POWER_ON = POWER_ON
    POWER_OFF = POWER_OFF
    ABS_EXT_MODE = ABS_EXT_MODE
    REL_EXT_MODE = REL_EXT_MODE
    IDLE_HOLD = IDLE_HOLD
    EMERGENCY_STOP = EMERGENCY_STOP
    LIST_SD = LIST_SD
    INIT_SD = INIT_SD
    RELEASE_SD = RELEASE_SD
    SELECT_SD_FILE = SELECT_SD_FILE
    START_SD_PRINT = START_SD_PRINT
    PAUSE_SD_PRINT = PAUSE_SD_PRINT
    SET_SD_POSITION = SET_SD_POSITION
    SD_PRINT_STATUS = SD_PRINT_STATUS
    START_SD_WRITE = START_SD_WRITE
    STOP_SD_WRITE = STOP_SD_WRITE
    SET_EXT_TEMP_NW = SET_EXT_TEMP_NW
    GET_EXT_TEMP = GET_EXT_TEMP
    FAN_ON = FAN_ON
    FAN_OFF = FAN_OFF
    SET_EXT_TEMP_W = SET_EXT_TEMP_W
    SET_BED_TEMP_NW = SET_BED_TEMP_NW
    SET_BED_TEMP_W = SET_BED_TEMP_W
    SET_LINE_NUM = SET_LINE_NUM
    GET_POSITION = GET_POSITION
    GET_FW_INFO = GET_FW_INFO

    @classmethod
    def lookup(cls, letter: str | None, number: int | None) -> "CommandKind | None":
        """
        Resolve a command to its kind.

        Args:
            letter: Command letter ('G', 'M' or 'T')
            number: Command number, leading zeros already dropped

        Returns:
            The matching CommandKind, or None for unknown/absent commands
        """
        if letter is None or number is None:
            return None
        try:
            return cls(f"{letter}{number}")
        except ValueError:
            return None

    @property
    def is_move(self) -> bool:
        return self in (CommandKind.RAPID_MOVE, CommandKind.CONTROLLED_MOVE)
