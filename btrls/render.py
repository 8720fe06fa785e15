from __future__ import annotations

import json
import logging
from typing import List, Optional, Sequence

from rich import box
from rich.color import Color
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from .colors import RGB, ColorConfig
from .entries import Entry

logger = logging.getLogger(__name__)

HEADERS = ("Type", "Name", "Size", "Modified_At", "Read_Only")
NAME_COL = HEADERS.index("Name")


def rgb_style(rgb: Optional[RGB]) -> Style:
    if rgb is None:
        return Style.null()
    return Style(color=Color.from_rgb(rgb.red, rgb.green, rgb.blue))


def row_cells(entry: Entry) -> List[str]:
    return [
        str(entry.e_type),
        entry.name,
        entry.len_bytes,
        entry.modified,
        str(entry.read_only).lower(),
    ]


def row_colors(entry: Entry, colors: ColorConfig) -> List[Optional[RGB]]:
    """
    Foreground color per column for one data row.

    Applied in order, later steps overriding earlier ones: leading column,
    trailing column, directory name, executable name, then the hidden color
    over the whole row.
    """
    cells: List[Optional[RGB]] = [None] * len(HEADERS)
    cells[0] = colors.leading_col
    cells[-1] = colors.trailing_col
    if entry.is_dir and not entry.hidden:
        cells[NAME_COL] = colors.directory
    if entry.is_exec:
        cells[NAME_COL] = colors.executable
    if entry.hidden:
        cells = [colors.hidden] * len(HEADERS)
    return cells


def build_table(entries: Sequence[Entry], colors: ColorConfig) -> Table:
    table = Table(
        box=box.ROUNDED,
        header_style=rgb_style(colors.title_row),
    )
    for header in HEADERS:
        table.add_column(header)
    for entry in entries:
        table.add_row(*(
            Text(value, style=rgb_style(rgb))
            for value, rgb in zip(row_cells(entry), row_colors(entry, colors))
        ))
    return table


def print_table(entries: Sequence[Entry], colors: ColorConfig, console: Optional[Console] = None) -> None:
    console = console or Console()
    console.print(build_table(entries, colors))


def to_json(entries: Sequence[Entry]) -> str:
    try:
        return json.dumps([e.to_dict() for e in entries], ensure_ascii=False)
    except (TypeError, ValueError) as e:
        logger.error("JSON serialization failed: %s", e)
        return "Cannot Parse JSON"
