from __future__ import annotations

from pathlib import Path

import typer

from inistore.cli.ui import get_ui, render_summary
from inistore.cli.utils.loading import load_store
from inistore.core.errors import ExitCode


def check_cmd(
    path: Path = typer.Argument(..., help="INI file to validate."),
    encoding: str = typer.Option("utf-8-sig", "--encoding", help="File encoding."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only set the exit code."),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    """Parse a file and report whether it is valid."""
    ui = get_ui(verbose=verbose)
    _, summary = load_store(ui, path, encoding=encoding)
    if not quiet:
        render_summary(ui.console, summary)
    raise typer.Exit(code=int(ExitCode.OK))
