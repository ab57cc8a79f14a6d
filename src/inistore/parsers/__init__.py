from __future__ import annotations

from inistore.parsers.errors import (
    EmptyKeyOrValue,
    IniParseError,
    MalformedSectionHeader,
    PropertyOutsideSection,
    SourceReadError,
    UnrecognizedLine,
)
from inistore.parsers.ini_parser import classify_line, parse_ini
from inistore.parsers.types import Document, ParsedProperty, Section

__all__ = [
    "Document",
    "EmptyKeyOrValue",
    "IniParseError",
    "MalformedSectionHeader",
    "ParsedProperty",
    "PropertyOutsideSection",
    "Section",
    "SourceReadError",
    "UnrecognizedLine",
    "classify_line",
    "parse_ini",
]
