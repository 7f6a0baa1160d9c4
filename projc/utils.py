"""Console output helpers for projc.

All user-facing status lines go through the shared Rich ``console`` so that
colour handling and redirection behave the same everywhere.
"""

from __future__ import annotations

from rich.console import Console
from rich.rule import Rule
from rich.table import Table

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def print_banner(title: str) -> None:
    """Print a full-width rule with *title* in the middle."""
    console.print()
    console.print(Rule(f"[bold bright_green] {title} [/bold bright_green]", style="bright_green"))
    console.print()


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_info(message: str) -> None:
    """Print a plain progress line."""
    console.print(message, markup=False)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(message, style="bold green", markup=False)


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(message, style="bold red", markup=False)


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(message, style="bold yellow", markup=False)


def print_fatal(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(message, style="bold red", markup=False)
