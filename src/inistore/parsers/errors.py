from __future__ import annotations

from inistore.core.errors import IniStoreError


class SourceReadError(IniStoreError, OSError):
    """The source could not be opened or read. Not a grammar problem."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Cannot read '{source}': {reason}")
        self.source = source
        self.reason = reason


class IniParseError(IniStoreError, ValueError):
    """A structural error on a specific (1-based) line."""

    description = "Invalid INI syntax"

    def __init__(self, line: int) -> None:
        super().__init__(f"{self.description} on line {line}")
        self.line = line


class MalformedSectionHeader(IniParseError):
    description = "Invalid section declaration"


class UnrecognizedLine(IniParseError):
    description = "Unknown setting"


class EmptyKeyOrValue(IniParseError):
    description = "Neither the key nor the value can be empty"


class PropertyOutsideSection(IniParseError):
    description = "Property declared before any section"
