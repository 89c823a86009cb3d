import pytest

from gline.gcode.parser import EMPTY_CAPTURES, LineScanner
from gline.utils.errors import GrammarError


@pytest.fixture
def scanner():
    return LineScanner()


def test_full_parameter_set(scanner):
    c = scanner.scan("G1 X10 Y20 Z5 F1500 E2.5")
    assert c.command == "G1"
    assert c.command_letter == "G"
    assert c.command_number == "1"
    assert (c.x_data, c.y_data, c.z_data, c.f_data, c.e_data) == ("10", "20", "5", "1500", "2.5")
    assert c.s_data is None and c.p_data is None
    assert c.string_data == ""
    assert c.comment is None
    assert c.line == "G1 X10 Y20 Z5 F1500 E2.5"


def test_empty_text_matches_with_all_segments_absent(scanner):
    assert scanner.scan("") == EMPTY_CAPTURES


def test_comment_only(scanner):
    c = scanner.scan("; layer 2")
    assert c.command is None
    assert c.line is None
    assert c.comment == " layer 2"


def test_comment_after_command(scanner):
    c = scanner.scan("G28 X0 ; home x")
    assert c.line == "G28 X0 "
    assert c.x_data == "0"
    assert c.comment == " home x"


def test_parameters_out_of_order_fall_into_string_data(scanner):
    c = scanner.scan("G1 Y5 X10")
    assert c.y_data == "5"
    assert c.x_data is None
    assert c.string_data == "X10"


def test_command_number_limited_to_three_digits(scanner):
    c = scanner.scan("G1000")
    assert c.command == "G100"
    assert c.string_data == "0"


def test_single_optional_space_between_segments(scanner):
    c = scanner.scan("G1  X10")
    assert c.x_data == "10"


def test_parameters_without_spaces(scanner):
    c = scanner.scan("G1X10Y-2.5")
    assert c.x_data == "10"
    assert c.y_data == "-2.5"


def test_s_without_digits_is_captured_empty(scanner):
    c = scanner.scan("M106 S")
    assert c.s_data == ""


def test_f_is_unsigned(scanner):
    c = scanner.scan("G1 F-100")
    assert c.f_data is None
    assert c.string_data == "F-100"


def test_lower_case_is_not_recognized(scanner):
    c = scanner.scan("g1 x10")
    assert c.command is None


def test_uppercase_option(scanner):
    c = scanner.scan("g1 x10 ; note", uppercase=True)
    assert c.command == "G1"
    assert c.x_data == "10"
    assert c.comment == " NOTE"


def test_leading_whitespace_is_not_a_command(scanner):
    assert scanner.scan(" G1 X10").command is None


def test_non_string_raises_grammar_error(scanner):
    with pytest.raises(GrammarError) as excinfo:
        scanner.scan(None)
    assert "expected str" in str(excinfo.value)
