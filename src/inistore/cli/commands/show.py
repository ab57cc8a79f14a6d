from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from inistore.cli.ui import PropertiesRenderOptions, get_ui, render_properties_table
from inistore.cli.utils.loading import fail, load_store
from inistore.core.errors import SectionNotFound


def show_cmd(
    path: Path = typer.Argument(..., help="INI file to display."),
    section: Optional[str] = typer.Option(
        None, "--section", "-s", help="Only show this section."
    ),
    lines: bool = typer.Option(
        True, "--lines/--no-lines", help="Show the source line of each value."
    ),
    flat: bool = typer.Option(
        False, "--flat", help="Show keys as section.key in a single column."
    ),
    encoding: str = typer.Option("utf-8-sig", "--encoding", help="File encoding."),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    """Print every effective property as a table."""
    ui = get_ui(verbose=verbose)
    store, summary = load_store(ui, path, encoding=encoding)

    if section is not None and not store.has_section(section):
        raise fail(ui, SectionNotFound(section))

    title = summary.source if section is None else f"{summary.source} [{section}]"
    render_properties_table(
        ui.console,
        store.properties(),
        opts=PropertiesRenderOptions(
            title=title, section=section, show_lines=lines, flat=flat
        ),
    )
