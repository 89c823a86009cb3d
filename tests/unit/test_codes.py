import pytest

from gline.gcode import codes
from gline.gcode.codes import CommandKind


@pytest.mark.parametrize(
    "letter,number,expected",
    [
        ("G", 0, CommandKind.RAPID_MOVE),
        ("G", 1, CommandKind.CONTROLLED_MOVE),
        ("G", 28, CommandKind.HOME),
        ("M", 105, CommandKind.GET_EXT_TEMP),
        ("M", 999, None),
        ("T", 0, None),
        (None, None, None),
    ],
)
def test_lookup(letter, number, expected):
    assert CommandKind.lookup(letter, number) is expected


def test_kind_values_are_table_codes():
    assert CommandKind.RAPID_MOVE.value == codes.RAPID_MOVE == "G0"
    assert CommandKind.CONTROLLED_MOVE.value == codes.CONTROLLED_MOVE == "G1"
    assert CommandKind.HOME.value == codes.HOME == "G28"


def test_is_move():
    assert CommandKind.RAPID_MOVE.is_move
    assert CommandKind.CONTROLLED_MOVE.is_move
    assert not CommandKind.HOME.is_move
