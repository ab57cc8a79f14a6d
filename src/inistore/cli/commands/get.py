from __future__ import annotations

from pathlib import Path

import typer

from inistore.cli.ui import get_ui
from inistore.cli.utils.loading import fail, load_store
from inistore.core.errors import IniStoreError
from inistore.core.models import ValueKind


def get_cmd(
    path: Path = typer.Argument(..., help="INI file to read."),
    section: str = typer.Argument(..., help="Section name (exact, case-sensitive)."),
    key: str = typer.Argument(..., help="Property key (exact, case-sensitive)."),
    kind: ValueKind = typer.Option(
        ValueKind.STR,
        "--type",
        "-t",
        case_sensitive=False,
        help="Convert the value before printing; fails if it does not convert.",
    ),
    encoding: str = typer.Option("utf-8-sig", "--encoding", help="File encoding."),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    """Print one property value."""
    ui = get_ui(verbose=verbose)
    store, _ = load_store(ui, path, encoding=encoding)
    try:
        value = store.get_typed(section, key, kind)
    except IniStoreError as e:
        raise fail(ui, e) from e
    typer.echo(value)
