from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


# section name -> key -> value
Section = Dict[str, str]
Document = Dict[str, Section]


@dataclass(frozen=True)
class ParsedProperty:
    """ A key-value assignment as it appeared in the source."""
    section: str
    key: str
    value: str
    line: int

    @property
    def dotted_key(self) -> str:
        return f"{self.section}.{self.key}"
