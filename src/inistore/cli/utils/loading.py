from __future__ import annotations

from pathlib import Path
from typing import Tuple

import typer
from pydantic import ValidationError

from inistore.cli.ui import UI, render_error
from inistore.core.errors import (
    ExitCode,
    IniStoreError,
    PropertyLookupError,
    ValueConversionError,
)
from inistore.core.models import LoadOptions, LoadSummary
from inistore.core.store import IniStore
from inistore.parsers.errors import IniParseError, SourceReadError


def exit_code_for(err: IniStoreError) -> ExitCode:
    if isinstance(err, SourceReadError):
        return ExitCode.IO_ERROR
    if isinstance(err, IniParseError):
        return ExitCode.PARSE_ERROR
    if isinstance(err, PropertyLookupError):
        return ExitCode.NOT_FOUND
    if isinstance(err, ValueConversionError):
        return ExitCode.CONVERSION_ERROR
    return ExitCode.PARSE_ERROR


def fail(ui: UI, err: IniStoreError) -> typer.Exit:
    render_error(ui.err_console, err, verbose=ui.verbose)
    return typer.Exit(code=int(exit_code_for(err)))


def load_store(ui: UI, path: Path, *, encoding: str) -> Tuple[IniStore, LoadSummary]:
    try:
        options = LoadOptions(encoding=encoding)
    except ValidationError as e:
        raise typer.BadParameter(f"unknown encoding: {encoding}", param_hint="--encoding") from e

    store = IniStore(options)
    try:
        summary = store.load(path)
    except IniStoreError as e:
        raise fail(ui, e) from e
    return store, summary
