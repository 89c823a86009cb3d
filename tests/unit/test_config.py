import logging

import pytest

from gline import config


def test_trace_level_registered():
    assert config.TRACE == 5
    assert logging.getLevelName(config.TRACE) == "TRACE"
    assert hasattr(logging.getLogger("gline"), "trace")


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("1", True),
        ("Yes", True),
        (" on ", True),
        ("0", False),
        ("off", False),
        ("maybe", None),
    ],
)
def test_env_bool_optional(monkeypatch, raw, expected):
    monkeypatch.setenv("GLINE_TEST_FLAG", raw)
    assert config.env_bool_optional("GLINE_TEST_FLAG") is expected


def test_env_bool_optional_unset(monkeypatch):
    monkeypatch.delenv("GLINE_TEST_FLAG", raising=False)
    assert config.env_bool_optional("GLINE_TEST_FLAG") is None


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("2", 2.0),
        ("0.5", 0.5),
        ("0", None),
        ("-1", None),
        ("nan", None),
        ("x", None),
        ("  ", None),
    ],
)
def test_env_positive_float_optional(monkeypatch, raw, expected):
    monkeypatch.setenv("GLINE_TEST_FACTOR", raw)
    assert config.env_positive_float_optional("GLINE_TEST_FACTOR") == expected


def test_uppercase_default_is_bool():
    assert isinstance(config.UPPERCASE_DEFAULT, bool)
