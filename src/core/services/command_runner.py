"""Creating and executing library commands.

This module is the dispatch seam between the shell and the catalogue:

- `parse_input_line` turns one line of user input into a keyword + argument.
- `create_command` builds a validated command, or reports and returns None.
- `execute_command` looks up the handler for the command's `kind` and runs it
  against the library data passed in.

Handlers never print. They return a `CommandOutcome` with the output lines so
UI layers decide how to render them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from pydantic import TypeAdapter

from core.domain.commands import (
    ARGUMENT_DELIMITER,
    COMMAND_CLASSES,
    AddCommand,
    CommandType,
    EntryField,
    ExitCommand,
    GroupCommand,
    HelpCommand,
    LibraryCommand,
    ListCommand,
    ListMode,
    RemoveCommand,
    SearchCommand,
)
from core.domain.errors import InvalidArgumentError
from core.interfaces.library import LibraryDataProvider
from core.services.grouping import group_by_author, group_by_title

logger = logging.getLogger(__name__)


NULL_LIB_MSG = "The library cannot be None."
NO_ENTRIES_MSG = "The library has no book entries."
GROUP_HEADER_PREFIX = "## "
GROUP_ITEM_INDENT = "    "

HELP_LINES: tuple[str, ...] = (
    "Available commands:",
    "  ADD <file.csv>             load book entries from a file",
    "  LIST [short|long]          list all books (titles only, or in full)",
    "  SEARCH <term>              titles containing <term>, case-insensitive",
    "  REMOVE TITLE <title>       remove the first book with this exact title",
    "  REMOVE AUTHOR <author>     remove every book by this author",
    "  GROUP TITLE|AUTHOR         books grouped by first letter or by author",
    "  HELP                       show this help",
    "  EXIT                       leave the program",
)


@dataclass
class CommandOutcome:
    """Output of one executed command."""

    lines: list[str] = field(default_factory=list)
    exit_requested: bool = False


def parse_input_line(line: str) -> tuple[CommandType, str]:
    """Split `KEYWORD[ ARGUMENT]`; the keyword is matched case-insensitively."""

    text = line.strip()
    keyword, _, argument = text.partition(ARGUMENT_DELIMITER)
    if not keyword:
        raise InvalidArgumentError("No command given.", argument=line)
    return CommandType.from_keyword(keyword.upper()), argument


def create_command(kind: CommandType, argument: str) -> LibraryCommand | None:
    """Build the command for `kind`, or None if `argument` is invalid.

    The rejection is logged; callers must treat None as "nothing executed".
    Raises `TypeError` if either input is None.
    """

    if kind is None:
        raise TypeError("Given command type must not be None.")
    if argument is None:
        raise TypeError("Given argument input must not be None.")

    command_cls = COMMAND_CLASSES[CommandType(kind)]
    try:
        return command_cls.from_argument(argument)
    except InvalidArgumentError as exc:
        logger.error("ERROR: %s", exc)
        return None


def _run_help(command: HelpCommand, data: LibraryDataProvider) -> CommandOutcome:
    return CommandOutcome(lines=list(HELP_LINES))


def _run_exit(command: ExitCommand, data: LibraryDataProvider) -> CommandOutcome:
    return CommandOutcome(lines=["Ending program."], exit_requested=True)


def _run_add(command: AddCommand, data: LibraryDataProvider) -> CommandOutcome:
    added = data.load_data(command.path)
    return CommandOutcome(lines=[f"{added} books added from {command.path}."])


def _run_list(command: ListCommand, data: LibraryDataProvider) -> CommandOutcome:
    books = data.book_data
    if not books:
        return CommandOutcome(lines=[NO_ENTRIES_MSG])

    lines = [f"{len(books)} books in library:"]
    if command.mode is ListMode.SHORT:
        lines.extend(book.title for book in books)
    else:
        for book in books:
            lines.extend(str(book).split("\n"))
            lines.append("")
    return CommandOutcome(lines=lines)


def _run_search(command: SearchCommand, data: LibraryDataProvider) -> CommandOutcome:
    needle = command.term.upper()
    hits = [book.title for book in data.book_data if needle in book.title.upper()]
    if not hits:
        return CommandOutcome(lines=[f"No hits found for search term: {command.term}"])
    return CommandOutcome(lines=hits)


def _remove_by_title(data: LibraryDataProvider, term: str) -> str:
    books = data.book_data
    for index, book in enumerate(books):
        if book.title == term:
            del books[index]
            return f"{term}: removed successfully."
    return f"{term}: not found."


def _remove_by_author(data: LibraryDataProvider, term: str) -> str:
    books = data.book_data
    kept = [book for book in books if term not in book.authors]
    removed = len(books) - len(kept)
    books[:] = kept
    return f"{removed} books removed for author: {term}"


def _run_remove(command: RemoveCommand, data: LibraryDataProvider) -> CommandOutcome:
    if command.mode is EntryField.TITLE:
        message = _remove_by_title(data, command.term)
    else:
        message = _remove_by_author(data, command.term)
    return CommandOutcome(lines=[message])


def _run_group(command: GroupCommand, data: LibraryDataProvider) -> CommandOutcome:
    books = data.book_data
    if not books:
        return CommandOutcome(lines=[NO_ENTRIES_MSG])

    if command.mode is EntryField.TITLE:
        groups = group_by_title(books)
    else:
        groups = group_by_author(books)

    lines = [f"Grouped data by {command.mode.value}"]
    for label, titles in groups:
        lines.append(GROUP_HEADER_PREFIX + label)
        lines.extend(GROUP_ITEM_INDENT + title for title in titles)
    return CommandOutcome(lines=lines)


_HANDLERS: dict[CommandType, Callable[..., CommandOutcome]] = {
    CommandType.HELP: _run_help,
    CommandType.EXIT: _run_exit,
    CommandType.ADD: _run_add,
    CommandType.LIST: _run_list,
    CommandType.SEARCH: _run_search,
    CommandType.REMOVE: _run_remove,
    CommandType.GROUP: _run_group,
}


_COMMAND_ADAPTER: TypeAdapter[LibraryCommand] = TypeAdapter(LibraryCommand)


def execute_command(command: LibraryCommand, data: LibraryDataProvider) -> CommandOutcome:
    """Run `command` against `data`, which must not be None.

    `command` is checked against the tagged union first: anything that is not
    one of the known variants raises a pydantic `ValidationError`.
    """

    if data is None:
        raise TypeError(NULL_LIB_MSG)
    command = _COMMAND_ADAPTER.validate_python(command)
    return _HANDLERS[command.kind](command, data)
