"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Lets the shell and `doctor` share panels and tables.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


def print_banner(console: Console) -> None:
    """Print the welcome banner.

    Can be turned off for non-interactive use (piped input, tests).
    """

    title = Text("bookshelf", style="bold cyan")
    subtitle = Text("Type HELP for the list of commands, EXIT to quit.", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_lines(console: Console, lines: Iterable[str]) -> None:
    """Print command output verbatim: no markup, emoji codes, highlighting or wrapping."""

    for line in lines:
        console.print(line, markup=False, emoji=False, highlight=False, soft_wrap=True)


def build_doctor_table() -> Table:
    table = Table(title="bookshelf doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
