from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from inistore.core.models import LineKind
from inistore.parsers.common import (
    ASSIGNMENT,
    COMMENT_MARKER,
    SECTION_CLOSE,
    SECTION_OPEN,
    trim,
)
from inistore.parsers.errors import (
    EmptyKeyOrValue,
    MalformedSectionHeader,
    PropertyOutsideSection,
    UnrecognizedLine,
)
from inistore.parsers.types import Document, ParsedProperty


def classify_line(line: str) -> LineKind:
    """
    Classify one already-trimmed line.

    Only the shape is looked at here; whether a header has a usable name or
    an assignment has both sides is decided by `parse_ini`.
    """
    if not line:
        return LineKind.BLANK
    if line[0] == COMMENT_MARKER:
        return LineKind.COMMENT
    if line[0] == SECTION_OPEN:
        return LineKind.SECTION_HEADER
    if ASSIGNMENT in line:
        return LineKind.KEY_VALUE
    return LineKind.INVALID


def _section_name(line: str, lineno: int) -> str:
    # "[x]" is the shortest valid header
    if len(line) < 3 or line[-1] != SECTION_CLOSE:
        raise MalformedSectionHeader(lineno)
    name = trim(line[1:-1])
    if not name:
        raise MalformedSectionHeader(lineno)
    return name


def _split_assignment(line: str, lineno: int) -> Tuple[str, str]:
    key, val = line.split(ASSIGNMENT, 1)
    key = trim(key)
    val = trim(val)
    if not key or not val:
        raise EmptyKeyOrValue(lineno)
    return key, val


def parse_ini(lines: Iterable[str]) -> Tuple[Document, List[ParsedProperty], int]:
    """
    Parse INI lines into a fresh document.

    Returns (document, properties, line_count). `properties` lists every
    assignment in source order, duplicates included; the document keeps the
    last value per (section, key).

    Stops at the first bad line and raises one of the IniParseError
    subclasses carrying its 1-based number. Nothing partial is returned.

    Format:
      ; comment
      [section]
      key = value      (split on the first '=' only)
    """
    doc: Document = {}
    props: List[ParsedProperty] = []
    section: Optional[str] = None
    lineno = 0

    for lineno, raw in enumerate(lines, start=1):
        line = trim(raw)
        kind = classify_line(line)

        if kind in (LineKind.BLANK, LineKind.COMMENT):
            continue

        if kind == LineKind.SECTION_HEADER:
            # sections appear in the document with their first property
            section = _section_name(line, lineno)
            continue

        if kind == LineKind.INVALID:
            raise UnrecognizedLine(lineno)

        key, val = _split_assignment(line, lineno)
        if section is None:
            raise PropertyOutsideSection(lineno)

        doc.setdefault(section, {})[key] = val
        props.append(ParsedProperty(section=section, key=key, value=val, line=lineno))

    return doc, props, lineno
