from __future__ import annotations

import codecs
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field, field_validator


# ================================
# Enums
# ================================


class LineKind(str, Enum):
    BLANK = "blank"
    COMMENT = "comment"
    SECTION_HEADER = "section_header"
    KEY_VALUE = "key_value"
    INVALID = "invalid"


class ValueKind(str, Enum):
    STR = "str"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"


# ================================
# Load options (defaults only)
# ================================


class LoadOptions(BaseModel):
    """
    How a path source is opened. Streams handed to `IniStore.load` are
    already decoded, so these only apply to paths.
    """

    encoding: str = Field(
        default="utf-8-sig",
        min_length=1,
        description="Text encoding of the file. The default also skips a UTF-8 BOM.",
    )
    errors: Literal["strict", "replace", "ignore"] = Field(default="strict")

    @field_validator("encoding")
    @classmethod
    def _encoding_must_exist(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {v}") from e
        return v


# ================================
# Load results
# ================================


class LoadSummary(BaseModel):
    source: str
    sections: int = Field(default=0, ge=0)
    properties: int = Field(default=0, ge=0)
    lines: int = Field(default=0, ge=0)

    def describe(self) -> str:
        return (
            f"{self.source}: {self.properties} properties in "
            f"{self.sections} sections ({self.lines} lines)"
        )

