from __future__ import annotations

from inistore.core.errors import (
    IniStoreError,
    PropertyLookupError,
    PropertyNotFound,
    SectionNotFound,
    ValueConversionError,
)
from inistore.core.models import LoadOptions, LoadSummary, ValueKind
from inistore.core.store import IniStore
from inistore.parsers import (
    EmptyKeyOrValue,
    IniParseError,
    MalformedSectionHeader,
    ParsedProperty,
    PropertyOutsideSection,
    SourceReadError,
    UnrecognizedLine,
    parse_ini,
)

__version__ = "0.1.0"

__all__ = [
    "EmptyKeyOrValue",
    "IniParseError",
    "IniStore",
    "IniStoreError",
    "LoadOptions",
    "LoadSummary",
    "MalformedSectionHeader",
    "ParsedProperty",
    "PropertyLookupError",
    "PropertyNotFound",
    "PropertyOutsideSection",
    "SectionNotFound",
    "SourceReadError",
    "UnrecognizedLine",
    "ValueConversionError",
    "ValueKind",
    "parse_ini",
]
