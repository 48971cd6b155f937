"""Aggregate drive bar and per-partition usage table."""
import math
from typing import Iterable, List, Optional, Sequence, Tuple

from rich.console import Console
from rich.text import Text

from diskbar.discovery.mounts import MountTable
from diskbar.models.drive import Drive, Partition
from diskbar.render.palette import color_for, symbol_for

USAGE_BAR_WIDTH = 20
SIZE_TEXT_WIDTH = 18

FILLED = "█"
EMPTY = "░"
MARKER = "■"


def _printable(text: str) -> str:
    """Replace bytes that were not valid UTF-8 so the line can be written out."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def _round(value: float) -> int:
    """Round half away from zero for non-negative values."""
    return int(math.floor(value + 0.5))


def allocate_widths(
    partitions: Sequence[Partition], drive_size: int, width: int
) -> List[Tuple[int, int]]:
    """Split *width* cells between partitions proportionally to their size.

    Returns ``(partition index, cells)`` pairs for the segments to draw.
    Widths are rounded independently and clamped to the remaining budget
    in discovery order, so later partitions can shrink or vanish. Segments
    that round to zero cells are left out.
    """
    total = max(drive_size, 1)
    used_width = 0
    segments = []

    for index, partition in enumerate(partitions):
        cells = min(_round(partition.size / total * width), width - used_width)
        if cells <= 0:
            continue
        segments.append((index, cells))
        used_width += cells

    return segments


def usage_cells(used: int, total_bytes: int, bar_width: int = USAGE_BAR_WIDTH) -> int:
    """Number of filled cells in a usage bar of *bar_width* cells."""
    if total_bytes <= 0:
        ratio = 1.0 if used > 0 else 0.0
    else:
        ratio = min(max(used / total_bytes, 0.0), 1.0)
    return _round(ratio * bar_width)


def header_line(drive: Drive) -> Text:
    text = Text()
    text.append("Drive:", style="bold blue")
    text.append(" ")
    text.append(drive.name, style="bold")
    text.append(f" ({drive.size_gb:.2f} GB)")
    return text


def aggregate_bar(drive: Drive, width: int) -> Text:
    """The bracketed bar with one colored segment per partition."""
    bar = Text("[")
    used_width = 0
    for index, cells in allocate_widths(drive.partitions, drive.size, width):
        bar.append(symbol_for(index) * cells, style=color_for(index))
        used_width += cells
    if used_width < width:
        bar.append(" " * (width - used_width))
    bar.append("]")
    return bar


def usage_bar(partition: Partition, index: int, bar_width: int = USAGE_BAR_WIDTH) -> Text:
    if partition.used is None:
        return Text("Unmounted", style="dim")
    filled = usage_cells(partition.used, partition.size_bytes, bar_width)
    return Text(FILLED * filled + EMPTY * (bar_width - filled), style=color_for(index))


def detail_line(
    partition: Partition,
    index: int,
    name_width: int,
    mounts: MountTable,
    bar_width: int = USAGE_BAR_WIDTH,
) -> Text:
    """One row of the usage table: marker, name, bar, sizes and mount path."""
    size_text = f"{partition.used_gb:.1f} / {partition.size_gb:.1f} GB"
    mountpoint = _printable(mounts.mountpoint_for(partition.name) or "-")

    line = Text("  ")
    line.append(MARKER, style=color_for(index))
    line.append(f" {partition.name:<{name_width}} ")
    line.append_text(usage_bar(partition, index, bar_width))
    line.append(f" {size_text:>{SIZE_TEXT_WIDTH}} {mountpoint}")
    return line


def render_drive(
    drive: Drive,
    width: int,
    mounts: MountTable,
    console: Optional[Console] = None,
    bar_width: int = USAGE_BAR_WIDTH,
) -> None:
    """Print the aggregate bar and usage table for *drive*."""
    console = console or Console()

    console.print()
    console.print(header_line(drive), soft_wrap=True)
    console.print(aggregate_bar(drive, width), soft_wrap=True)

    name_width = max((len(p.name) for p in drive.partitions), default=0)
    for index, partition in enumerate(drive.partitions):
        console.print(
            detail_line(partition, index, name_width, mounts, bar_width),
            soft_wrap=True,
        )


def render_drives(
    drives: Iterable[Drive],
    width: int,
    mounts: MountTable,
    console: Optional[Console] = None,
    bar_width: int = USAGE_BAR_WIDTH,
) -> None:
    console = console or Console()
    for drive in drives:
        render_drive(drive, width, mounts, console, bar_width)
