import math

import pytest

from inistore.core.convert import convert, resolve_kind, to_bool, to_float, to_int
from inistore.core.models import ValueKind


@pytest.mark.parametrize("text, expected", [("0", 0), ("42", 42), ("-7", -7), ("+3", 3)])
def test_to_int(text, expected):
    assert to_int(text) == expected


@pytest.mark.parametrize("text", ["42abc", "4.2", "1_000", "", " 7", "0x10", "٣", "42\n"])
def test_to_int_rejects(text):
    with pytest.raises(ValueError):
        to_int(text)


def test_to_float():
    assert to_float("1.5") == 1.5
    assert to_float("-2e3") == -2000.0
    assert to_float("10") == 10.0
    for bad in ("1.5x", "1_0.0", "", "1.2.3"):
        with pytest.raises(ValueError):
            to_float(bad)


def test_to_float_overflow_is_rejected():
    for big in ("1e400", "-1e400", "+9e999"):
        with pytest.raises(ValueError):
            to_float(big)
    assert math.isinf(to_float("inf"))
    assert to_float("-Infinity") == float("-inf")


@pytest.mark.parametrize("text", ["1", "yes", "TRUE", "On"])
def test_to_bool_true(text):
    assert to_bool(text) is True


@pytest.mark.parametrize("text", ["0", "no", "false", "OFF"])
def test_to_bool_false(text):
    assert to_bool(text) is False


def test_to_bool_rejects():
    with pytest.raises(ValueError):
        to_bool("maybe")


def test_resolve_kind():
    assert resolve_kind(int) is ValueKind.INT
    assert resolve_kind(bool) is ValueKind.BOOL
    assert resolve_kind("FLOAT") is ValueKind.FLOAT
    assert resolve_kind(ValueKind.STR) is ValueKind.STR
    with pytest.raises(TypeError):
        resolve_kind(dict)
    with pytest.raises(TypeError):
        resolve_kind("decimal")


def test_convert_dispatch():
    assert convert("42", int) == 42
    assert convert("42", "str") == "42"
