from __future__ import annotations

import copy
import io
import logging
import os
import threading
from types import MappingProxyType
from typing import (
    Any,
    Iterable,
    List,
    Mapping,
    Optional,
    Tuple,
    Union,
)

from inistore.core.convert import CONVERTERS, Converter, KindLike, resolve_kind
from inistore.core.errors import (
    PropertyNotFound,
    SectionNotFound,
    ValueConversionError,
)
from inistore.core.models import LoadOptions, LoadSummary
from inistore.parsers.errors import SourceReadError
from inistore.parsers.ini_parser import parse_ini
from inistore.parsers.types import Document, ParsedProperty

logger = logging.getLogger(__name__)

Source = Union[str, "os.PathLike[str]", Iterable[str]]


def _source_name(source: Any) -> str:
    if isinstance(source, (str, os.PathLike)):
        return os.fspath(source)
    name = getattr(source, "name", None)
    if isinstance(name, str):
        return name
    return f"<{type(source).__name__}>"


class IniStore:
    """
    In-memory view of one INI file.

    Usage:
        store = IniStore()
        store.load("settings.ini")
        host = store.get("server", "host")
        port = store.get_typed("server", "port", int)

    `load` builds a new document off to the side and only swaps it in once
    the whole source parsed. A failed load leaves the previous contents
    untouched. Published documents are never mutated, so lookups only need
    the lock long enough to grab the current reference.
    """

    def __init__(self, options: Optional[LoadOptions] = None) -> None:
        self.options = options or LoadOptions()
        self._lock = threading.Lock()
        self._document: Document = {}
        self._properties: Tuple[ParsedProperty, ...] = ()
        self._source: Optional[str] = None

    # ----------------------------
    # Loading
    # ----------------------------

    def load(self, source: Source) -> LoadSummary:
        """
        Replace the contents with what `source` holds.

        `source` is a path, or an already-open text stream (anything that
        iterates lines). Paths are opened and closed here; streams belong to
        the caller and are left open.

        Raises SourceReadError when the path or stream cannot be read or
        decoded, or an IniParseError subclass for the first malformed line.
        """
        return self._load(source, _source_name(source))

    def loads(self, text: str, *, name: str = "<string>") -> LoadSummary:
        """Like `load`, for INI content already in memory."""
        return self._load(io.StringIO(text), name)

    def _load(self, source: Source, name: str) -> LoadSummary:
        with self._lock:
            try:
                if isinstance(source, (str, os.PathLike)):
                    doc, props, nlines = self._parse_path(source)
                else:
                    doc, props, nlines = parse_ini(source)
            except UnicodeDecodeError as e:
                raise SourceReadError(name, str(e)) from e
            except OSError as e:
                raise SourceReadError(name, e.strerror or str(e)) from e

            self._document = doc
            self._properties = tuple(props)
            self._source = name

        summary = LoadSummary(
            source=name,
            sections=len(doc),
            properties=sum(len(s) for s in doc.values()),
            lines=nlines,
        )
        logger.debug("loaded %s", summary.describe())
        return summary

    def _parse_path(self, path: Any):
        with open(
            path,
            "r",
            encoding=self.options.encoding,
            errors=self.options.errors,
        ) as f:
            return parse_ini(f)

    # ----------------------------
    # Lookup
    # ----------------------------

    def _snapshot(self) -> Document:
        with self._lock:
            return self._document

    def get(self, section: str, key: str) -> str:
        """
        Exact, case-sensitive lookup.

        SectionNotFound is raised before PropertyNotFound is considered.
        """
        doc = self._snapshot()
        try:
            props = doc[section]
        except KeyError:
            raise SectionNotFound(section) from None
        try:
            return props[key]
        except KeyError:
            raise PropertyNotFound(section, key) from None

    def find(self, section: str, key: str) -> Optional[str]:
        return self._snapshot().get(section, {}).get(key)

    def get_typed(
        self,
        section: str,
        key: str,
        kind: KindLike = str,
        *,
        converter: Optional[Converter] = None,
    ) -> Any:
        """
        `get` followed by a whole-string conversion.

        `kind` is a ValueKind, its name, or one of int/float/bool/str.
        Passing `converter` replaces the built-in conversion; it should
        raise ValueError (or TypeError/ArithmeticError) on bad input.

        Lookup errors pass through unchanged; conversion failures become
        ValueConversionError.
        """
        value = self.get(section, key)
        if converter is not None:
            target = getattr(converter, "__name__", type(converter).__name__)
            fn = converter
        else:
            value_kind = resolve_kind(kind)
            target = value_kind.value
            fn = CONVERTERS[value_kind]

        try:
            return fn(value)
        except (ValueError, TypeError, ArithmeticError) as e:
            raise ValueConversionError(section, key, target, value) from e

    def get_int(self, section: str, key: str) -> int:
        return self.get_typed(section, key, int)

    def get_float(self, section: str, key: str) -> float:
        return self.get_typed(section, key, float)

    def get_bool(self, section: str, key: str) -> bool:
        return self.get_typed(section, key, bool)

    # ----------------------------
    # Introspection
    # ----------------------------

    @property
    def source(self) -> Optional[str]:
        with self._lock:
            return self._source

    def sections(self) -> List[str]:
        return list(self._snapshot())

    def has_section(self, section: str) -> bool:
        return section in self._snapshot()

    def has_property(self, section: str, key: str) -> bool:
        return key in self._snapshot().get(section, {})

    def section(self, section: str) -> Mapping[str, str]:
        doc = self._snapshot()
        try:
            return MappingProxyType(doc[section])
        except KeyError:
            raise SectionNotFound(section) from None

    def properties(self) -> List[ParsedProperty]:
        with self._lock:
            return list(self._properties)

    def as_dict(self) -> Document:
        return copy.deepcopy(self._snapshot())

    def __contains__(self, section: object) -> bool:
        return section in self._snapshot()

    def __len__(self) -> int:
        return len(self._snapshot())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(source={self.source!r}, sections={len(self)})"
