"""Rich renderer: a fixed-height header over a ranked interface table."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from rich import box
from rich.console import RenderableType
from rich.layout import Layout
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from nettop.config import Config
from nettop.net import Row
from nettop.units import humanize

HEADER_HEIGHT = 3

# (label, width)
COLUMNS = [
    ("INTERFACE", 16),
    ("RX/s", 12),
    ("TX/s", 12),
    ("PKTS In", 10),
    ("PKTS Out", 10),
    ("Err In", 8),
    ("Err Out", 8),
]


class Surface(Protocol):
    def update(self, *renderables: RenderableType) -> None: ...


@dataclass(frozen=True)
class LiveMeta:
    """Per-tick values shown in the header."""
    config: Config
    interface_count: int


def header_text(meta: LiveMeta) -> str:
    virtual = "shown" if meta.config.show_virtual else "hidden"
    return (
        f" nettop - live (q:quit  +/-:rate  i:virtual)"
        f"   refresh: {meta.config.refresh_ms} ms"
        f"   virtual: {virtual}"
        f"   ifaces: {meta.interface_count} "
    )


def build_header(meta: LiveMeta) -> Panel:
    return Panel(Text(header_text(meta), no_wrap=True, overflow="ellipsis"),
                 box=box.ROUNDED)


def build_table(rows: Sequence[Row]) -> Panel:
    """Bordered table, one line per interface in the order given."""
    table = Table(
        box=None,
        header_style="bold",
        show_edge=False,
        pad_edge=False,
        padding=(0, 1, 0, 0),  # single space between columns
    )
    for label, width in COLUMNS:
        table.add_column(label, width=width, no_wrap=True, overflow="ellipsis")

    for r in rows:
        table.add_row(
            r.interface,
            humanize(r.rx_rate),
            humanize(r.tx_rate),
            str(r.packets_in),
            str(r.packets_out),
            str(r.errors_in),
            str(r.errors_out),
        )
    return Panel(table, title="Interfaces", title_align="left", box=box.ROUNDED)


def build_layout(rows: Sequence[Row], meta: LiveMeta) -> Layout:
    layout = Layout()
    layout.split_column(
        Layout(build_header(meta), name="header", size=HEADER_HEIGHT),
        Layout(build_table(rows), name="table", ratio=1),
    )
    return layout


def draw(surface: Surface, rows: Sequence[Row], meta: LiveMeta) -> None:
    """Full redraw of the screen."""
    surface.update(build_layout(rows, meta))
