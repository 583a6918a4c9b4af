"""Shared console helpers for makefeature.

Rich-based progress and status output.  The module-level ``console`` is used
by the CLI; components that print (the scaffolder, stub publishing) accept a
``Console`` so tests can pass a quiet one.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

console = Console()


def print_success(message: str, out: Console | None = None) -> None:
    """Print a green success message."""
    (out or console).print(f"[bold green]{message}[/bold green]")


def print_error(message: str, out: Console | None = None) -> None:
    """Print a red error message."""
    (out or console).print(f"[bold red]{message}[/bold red]")


def print_warning(message: str, out: Console | None = None) -> None:
    """Print a yellow warning message."""
    (out or console).print(f"[bold yellow]{message}[/bold yellow]")


def print_info(message: str, out: Console | None = None) -> None:
    """Print a plain informational line (markup disabled, paths may hold brackets)."""
    (out or console).print(message, markup=False, highlight=False)


def print_summary_table(
    data: dict[str, str], title: str = "Summary", out: Console | None = None
) -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
        out: Console to print on (defaults to the module console).
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    target = out or console
    target.print(table)
    target.print()
