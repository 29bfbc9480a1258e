"""Typer entry point: the interactive shell plus the `doctor` sub-commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from cli import doctor
from cli.logging_config import configure_logging
from cli.ui_components import print_banner, print_lines
from core.config import AppSettings
from core.domain.errors import InvalidArgumentError
from core.interfaces.library import LibraryDataProvider
from core.services.command_runner import create_command, execute_command, parse_input_line
from core.services.library_data import LibraryData

app = typer.Typer(no_args_is_help=True, help="Manage a catalogue of books from the command line.")
app.add_typer(doctor.app, name="doctor")

_console = Console()

logger = logging.getLogger(__name__)


def process_line(line: str, data: LibraryDataProvider, console: Console) -> bool:
    """Run one line of input; returns False once the session should end."""

    try:
        kind, argument = parse_input_line(line)
    except InvalidArgumentError as exc:
        logger.error("ERROR: %s", exc)
        return True

    command = create_command(kind, argument)
    if command is None:
        return True

    outcome = execute_command(command, data)
    print_lines(console, outcome.lines)
    return not outcome.exit_requested


def run_shell(data: LibraryDataProvider, *, console: Console, prompt: str) -> None:
    """Read commands until EXIT, end of input or Ctrl-C."""

    while True:
        try:
            line = console.input(prompt, markup=False, emoji=False)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        if not line.strip():
            continue
        if not process_line(line, data, console):
            break


@app.command()
def shell(
    files: Optional[List[Path]] = typer.Argument(None, help="Catalogue files to load before the first prompt."),
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Show the welcome banner."),
) -> None:
    """Start the interactive shell."""

    settings = AppSettings()
    configure_logging(settings.log_level)

    data = LibraryData(encoding=settings.file_encoding)
    for path in [*settings.library_files, *(files or [])]:
        data.load_data(path)

    if banner and settings.show_banner:
        print_banner(_console)

    run_shell(data, console=_console, prompt=settings.prompt)


def run() -> None:
    app()
