"""Shared console helpers for gomvc.

Provides the Rich console every module prints through, coloured status
helpers, a summary table, and the interactive module-identifier prompt.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gomvc.errors import InputFailure

console = Console()

MODULE_PROMPT = (
    "Enter the project name for Go module initialization "
    "(e.g., github.com/username/project): "
)


# ---------------------------------------------------------------------------
# Interactive input
# ---------------------------------------------------------------------------


def prompt_module_id(prompt: str = MODULE_PROMPT) -> str:
    """Ask for the module identifier on the console and return it stripped.

    An empty answer is returned as ``""``; callers decide what to do with it.

    Raises:
        InputFailure: If standard input is closed or cannot be read.
    """
    try:
        answer = console.input(prompt)
    except EOFError as exc:
        raise InputFailure("no module identifier given: end of input") from exc
    except OSError as exc:
        raise InputFailure(f"could not read module identifier: {exc}") from exc
    return answer.strip()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


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
        table.add_row(escape(key), escape(str(value)))

    console.print(table)
    console.print()


def print_info(message: str) -> None:
    """Print a plain progress message."""
    console.print(message, markup=False, highlight=False)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
