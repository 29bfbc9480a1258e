"""Doctor command for environment and catalogue diagnostics."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.library_file import LibraryFileLoader
from cli.ui_components import build_doctor_table
from core.config import AppSettings, save_user_settings

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_library_file(path: Path, *, encoding: str) -> tuple[bool, str]:
    """Load and parse a catalogue file, summarising what would be kept."""

    loader = LibraryFileLoader(encoding=encoding)
    if not loader.load_file_content(path):
        return False, "cannot be read"
    books = loader.parse_file_content()
    details = f"{len(books)} entries"
    if loader.line_errors:
        numbers = ", ".join(str(err.line_number) for err in loader.line_errors)
        details += f", {len(loader.line_errors)} rejected (lines {numbers})"
    return not loader.line_errors, details


@app.command()
def run(
    files: Optional[List[Path]] = typer.Argument(None, help="Extra catalogue files to check."),
) -> None:
    """Show the active settings and check every catalogue file."""

    settings = AppSettings()

    table = build_doctor_table()
    table.add_row("Log level", "OK", settings.log_level)
    table.add_row("File encoding", "OK", settings.file_encoding)
    table.add_row("Prompt", "OK", repr(settings.prompt))

    paths = [*settings.library_files, *(files or [])]
    if not paths:
        table.add_row("Library files", "NONE", "Nothing configured; use ADD in the shell")
    for path in paths:
        ok, details = _check_library_file(path, encoding=settings.file_encoding)
        table.add_row(str(path), "OK" if ok else "FAIL", details)

    _console.print(table)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    library_file = typer.prompt("Catalogue file loaded at startup", default="", show_default=False).strip()
    prompt = typer.prompt("Shell prompt", default="> ", show_default=True)
    log_level = typer.prompt("Log level", default="INFO", show_default=True).strip().upper()

    if library_file and not library_file.endswith(".csv"):
        raise typer.BadParameter("the catalogue file must be a .csv file")

    values: dict[str, object] = {"prompt": prompt, "log_level": log_level}
    if library_file:
        values["library_files"] = [Path(library_file)]

    try:
        env_path = save_user_settings(**values)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc
    _console.print(f"[green]Saved config to:[/green] {env_path}")
