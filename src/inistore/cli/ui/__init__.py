from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from inistore.cli.ui.formatters import (
    PropertiesRenderOptions,
    render_error,
    render_properties_table,
    render_summary,
)

THEME = Theme(
    {
        "ok": "bold green",
        "warn": "yellow",
        "err": "bold red",
        "muted": "dim",
        "path": "cyan",
        "section": "bold magenta",
        "key": "bold",
    }
)


@dataclass(frozen=True)
class UI:
    console: Console
    err_console: Console
    verbose: bool = False


def get_ui(*, verbose: bool = False) -> UI:
    ui = UI(
        console=Console(theme=THEME),
        err_console=Console(theme=THEME, stderr=True),
        verbose=verbose,
    )
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=ui.err_console, show_path=False)],
            force=True,
        )
    return ui


__all__ = [
    "PropertiesRenderOptions",
    "THEME",
    "UI",
    "get_ui",
    "render_error",
    "render_properties_table",
    "render_summary",
]
