"""Loading book entries from catalogue files.

File format, one entry per line:

    title,author1-author2,average_rating,ISBN,num_pages

A literal header line and blank lines are skipped. Lines that do not form a
valid `BookEntry` are reported and skipped; the rest of the file still loads.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from core.domain.models import BookEntry


FILE_HEADER = "title,authors,average_rating,ISBN,# num_pages"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineError:
    """A catalogue line that could not be turned into a book entry."""

    line_number: int
    line: str
    message: str


def describe_error(exc: ValueError) -> str:
    """One-line summary of a record validation failure."""

    if isinstance(exc, ValidationError):
        parts = []
        for err in exc.errors():
            loc = ".".join(str(p) for p in err.get("loc", ()))
            parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
        return "; ".join(parts)
    return str(exc)


def parse_book_lines(lines: Sequence[str]) -> tuple[list[BookEntry], list[LineError]]:
    """Parse raw lines into entries, collecting per-line errors (1-based)."""

    books: list[BookEntry] = []
    errors: list[LineError] = []
    for line_number, line in enumerate(lines, start=1):
        if not line.strip() or line == FILE_HEADER:
            continue
        try:
            books.append(BookEntry.from_line(line))
        except ValueError as exc:
            error = LineError(line_number=line_number, line=line, message=describe_error(exc))
            logger.error(
                "Potential book on line %d could not be added because of: %s",
                error.line_number,
                error.message,
            )
            errors.append(error)
    return books, errors


class LibraryFileLoader:
    """Reads a catalogue file and parses it on demand.

    `load_file_content` must succeed before `parse_file_content` returns
    anything; parsing without content is reported, not raised.
    """

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self.encoding = encoding
        self.file_content: list[str] | None = None
        self.line_errors: list[LineError] = []

    def load_file_content(self, path: Path) -> bool:
        if path is None:
            raise TypeError("Given filename must not be None.")
        try:
            self.file_content = path.read_text(encoding=self.encoding).splitlines()
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Reading file content failed: %s", exc)
            return False
        return True

    def content_loaded(self) -> bool:
        return self.file_content is not None

    def parse_file_content(self) -> list[BookEntry]:
        if not self.content_loaded():
            logger.error("No content loaded before parsing.")
            self.line_errors = []
            return []

        books, self.line_errors = parse_book_lines(self.file_content)
        return books
