#!/usr/bin/env python3
"""diskbar CLI - drive capacity and partition usage at a glance."""
from typing import Optional

import typer
from rich.console import Console

from diskbar import __version__
from diskbar.cli_support import handle_cli_error, is_mock, print_error
from diskbar.core.config import ConfigError, get_config
from diskbar.core.logger import console as err_console, get_logger, set_verbose, setup_file_logging
from diskbar.discovery import DiscoveryError, DriveDiscovery, MountTable
from diskbar.discovery.drives import MOCK_MOUNTS
from diskbar.render import chart_width, render_drives

app = typer.Typer(
    name="diskbar",
    help="""diskbar - drive capacity and partition usage at a glance

Reads /sys/block and /proc/mounts and draws one proportional bar per drive,
followed by a usage line for each partition.
""",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"diskbar {__version__}")
        raise typer.Exit()


@app.command()
def main(
    width: Optional[int] = typer.Option(
        None, "--width", "-w", min=0, help="Chart width in cells (default: terminal width)"
    ),
    mock: bool = typer.Option(False, "--mock", help="Render sample drives instead of this host's"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write logs to this file"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """Show every drive with its partitions and their usage."""
    set_verbose(verbose)
    setup_file_logging(log_file=log_file, verbose=verbose)

    try:
        config = get_config()
    except ConfigError as e:
        handle_cli_error(e, err_console, verbose=verbose)

    mock = mock or is_mock()

    # One snapshot for discovery and rendering alike
    mounts = MountTable(MOCK_MOUNTS) if mock else MountTable.load(config.mounts_file)
    discovery = DriveDiscovery(sys_block=config.sys_block, mounts=mounts, mock=mock)

    try:
        drives = discovery.discover_all()
    except DiscoveryError as e:
        handle_cli_error(e, err_console, verbose=verbose)

    if width is None:
        width = chart_width(console, max_width=config.max_chart_width)
    logger.debug(f"Rendering {len(drives)} drive(s) at width {width}")

    render_drives(drives, width, mounts, console, bar_width=config.usage_bar_width)

    if discovery.failures:
        for failure in discovery.failures:
            print_error(err_console, f"Drive skipped: {failure}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
