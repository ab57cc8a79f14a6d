from __future__ import annotations

from enum import IntEnum
from typing import Optional


class ExitCode(IntEnum):
    OK = 0
    NOT_FOUND = 1
    PARSE_ERROR = 2
    CONVERSION_ERROR = 3
    IO_ERROR = 4


class IniStoreError(Exception):
    """Base class for everything this package raises."""


class PropertyLookupError(IniStoreError, LookupError):
    def __init__(self, message: str, *, section: str) -> None:
        super().__init__(message)
        self.section = section


class SectionNotFound(PropertyLookupError):
    def __init__(self, section: str) -> None:
        super().__init__(f"Section '{section}' not found", section=section)


class PropertyNotFound(PropertyLookupError):
    def __init__(self, section: str, key: str) -> None:
        super().__init__(
            f"Property '{key}' not found in section '{section}'", section=section
        )
        self.key = key


class ValueConversionError(IniStoreError, ValueError):
    """
    The stored text could not be converted to the requested type.

    `target` is a human readable name of the type ("int", "bool", or the
    __name__ of a custom converter).
    """

    def __init__(
        self, section: str, key: str, target: str, value: Optional[str] = None
    ) -> None:
        msg = f"Invalid {target} value at '{section}:{key}'"
        if value is not None:
            msg += f": {value!r}"
        super().__init__(msg)
        self.section = section
        self.key = key
        self.target = target
        self.value = value
