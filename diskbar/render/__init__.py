"""Terminal rendering of drive charts."""
from diskbar.render.chart import (
    allocate_widths,
    render_drive,
    render_drives,
    usage_cells,
)
from diskbar.render.palette import (
    COLORS,
    SYMBOLS,
    bytes_to_gb,
    chart_width,
    color_for,
    sectors_to_gb,
    symbol_for,
)

__all__ = [
    'COLORS',
    'SYMBOLS',
    'allocate_widths',
    'bytes_to_gb',
    'chart_width',
    'color_for',
    'render_drive',
    'render_drives',
    'sectors_to_gb',
    'symbol_for',
    'usage_cells',
]
