"""Shared utilities for the diskbar CLI."""
from __future__ import annotations

import os

import typer
from rich.console import Console
from rich.markup import escape


def is_mock() -> bool:
    """Return True when the CLI should render sample drives."""
    return os.environ.get("DISKBAR_MOCK") == "1"


def handle_cli_error(
    e: Exception,
    console: Console,
    verbose: bool = False,
    exit_code: int = 1
) -> None:
    """Handle CLI errors with consistent formatting.

    Args:
        e: Exception to handle
        console: Rich console for output
        verbose: Show exception traceback if True
        exit_code: Exit code to use
    """
    console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False, soft_wrap=True)
    if verbose:
        console.print_exception()
    raise typer.Exit(exit_code)


def print_error(console: Console, message: str, prefix: str = "✗") -> None:
    """Print error message with consistent formatting.

    Args:
        console: Rich console for output
        message: Error message
        prefix: Prefix symbol (default: ✗)
    """
    console.print(f"[red]{prefix}[/red] {escape(message)}", highlight=False, soft_wrap=True)
