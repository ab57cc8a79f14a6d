from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from inistore.core.models import LoadSummary
from inistore.parsers.types import ParsedProperty


def _short(s: str, max_len: int = 140) -> str:
    s = s or ""
    if len(s) <= max_len:
        return s
    return s[:max_len] + "…"


# ----------------------------
# Property tables
# ----------------------------

@dataclass(frozen=True)
class PropertiesRenderOptions:
    title: Optional[str] = None
    section: Optional[str] = None   # only this section
    show_lines: bool = True         # source line numbers column
    flat: bool = False              # one "section.key" column
    max_value_len: int = 120


def render_properties_table(
    console: Console,
    properties: Sequence[ParsedProperty],
    *,
    opts: Optional[PropertiesRenderOptions] = None,
) -> None:
    """
    One row per effective (section, key). Overridden duplicates are dropped,
    the line shown is the one that won.
    """
    opts = opts or PropertiesRenderOptions()

    effective = {}
    for p in properties:
        if opts.section is not None and p.section != opts.section:
            continue
        effective[(p.section, p.key)] = p

    if not effective:
        console.print("[muted]No properties.[/muted]")
        return

    rows = list(effective.values())
    title = escape(opts.title) if opts.title else f"Properties ({len(rows)})"
    table = Table(title=title, show_lines=False)

    if opts.flat:
        table.add_column("Key", style="key", no_wrap=True)
    else:
        table.add_column("Section", style="section", no_wrap=True)
        table.add_column("Key", style="key", no_wrap=True)
    table.add_column("Value")
    if opts.show_lines:
        table.add_column("Line", justify="right", no_wrap=True)

    for p in rows:
        if opts.flat:
            row = [Text(p.dotted_key)]
        else:
            row = [Text(p.section), Text(p.key)]
        row.append(Text(_short(p.value, opts.max_value_len)))
        if opts.show_lines:
            row.append(str(p.line))
        table.add_row(*row)

    console.print(table)


# ----------------------------
# Summaries / errors
# ----------------------------

def render_summary(console: Console, summary: LoadSummary) -> None:
    console.print(
        f"[ok]OK[/ok] [path]{escape(summary.source)}[/path]: "
        f"{summary.sections} section(s), {summary.properties} properties, "
        f"{summary.lines} line(s)",
        soft_wrap=True,
    )


def render_error(console: Console, err: BaseException, *, verbose: bool = False) -> None:
    console.print(f"[err]error:[/err] {escape(str(err))}", soft_wrap=True)
    if verbose and err.__cause__ is not None:
        console.print(f"[muted]  caused by: {type(err.__cause__).__name__}: {escape(str(err.__cause__))}[/muted]")
