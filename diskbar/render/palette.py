"""Symbols, colors and unit conversions shared by the chart."""
from rich.console import Console

from diskbar.models.drive import GIB, SECTOR_SIZE

SYMBOLS = ("█", "▓", "▒", "░")
COLORS = ("green", "yellow", "blue", "magenta", "cyan")

DEFAULT_CHART_WIDTH = 80
MAX_CHART_WIDTH = 100
# Room left for the brackets and the terminal edge
WIDTH_MARGIN = 10


def symbol_for(index: int) -> str:
    return SYMBOLS[index % len(SYMBOLS)]


def color_for(index: int) -> str:
    return COLORS[index % len(COLORS)]


def sectors_to_gb(sectors: int) -> float:
    return sectors * SECTOR_SIZE / GIB


def bytes_to_gb(size: int) -> float:
    return size / GIB


def chart_width(console: Console, max_width: int = MAX_CHART_WIDTH) -> int:
    """Width of the aggregate bar for *console*.

    Falls back to 80 columns when stdout is not a terminal.
    """
    if not console.is_terminal:
        return DEFAULT_CHART_WIDTH
    return max(min(console.width - WIDTH_MARGIN, max_width), 0)
