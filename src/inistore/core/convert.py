from __future__ import annotations

import configparser
import math
import re
from typing import Any, Callable, Dict, Union

from inistore.core.models import ValueKind

Converter = Callable[[str], Any]
KindLike = Union[ValueKind, str, type]

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INF_TOKENS = ("inf", "infinity")

# "1/yes/true/on" and "0/no/false/off", compared lowercase
BOOLEAN_STATES: Dict[str, bool] = dict(configparser.ConfigParser.BOOLEAN_STATES)


def to_int(text: str) -> int:
    # int() alone would accept "1_000", " 7 " and non-ASCII digits
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    return int(text)


def to_float(text: str) -> float:
    if "_" in text or text != text.strip():
        raise ValueError(f"not a float: {text!r}")
    result = float(text)
    # float() saturates out-of-range literals like "1e400" to inf
    if math.isinf(result) and text.lstrip("+-").lower() not in _INF_TOKENS:
        raise ValueError(f"float out of range: {text!r}")
    return result


def to_bool(text: str) -> bool:
    try:
        return BOOLEAN_STATES[text.lower()]
    except KeyError:
        raise ValueError(f"not a boolean: {text!r}") from None


def to_str(text: str) -> str:
    return text


CONVERTERS: Dict[ValueKind, Converter] = {
    ValueKind.STR: to_str,
    ValueKind.INT: to_int,
    ValueKind.FLOAT: to_float,
    ValueKind.BOOL: to_bool,
}

_TYPE_KINDS: Dict[type, ValueKind] = {
    str: ValueKind.STR,
    int: ValueKind.INT,
    float: ValueKind.FLOAT,
    bool: ValueKind.BOOL,
}


def resolve_kind(kind: KindLike) -> ValueKind:
    """Accept a ValueKind, its name ("int"), or the Python type itself."""
    if isinstance(kind, ValueKind):
        return kind
    if isinstance(kind, type):
        try:
            return _TYPE_KINDS[kind]
        except KeyError:
            raise TypeError(f"unsupported value type: {kind.__name__}") from None
    try:
        return ValueKind(str(kind).lower())
    except ValueError:
        raise TypeError(f"unsupported value kind: {kind!r}") from None


def convert(text: str, kind: KindLike) -> Any:
    """
    Convert the whole of `text` to `kind`. Raises ValueError when any part
    of the text is left over or the format is wrong.
    """
    return CONVERTERS[resolve_kind(kind)](text)
