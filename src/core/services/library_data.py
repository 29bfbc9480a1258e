"""In-memory catalogue shared by all commands of a shell session."""

from __future__ import annotations

import logging
from pathlib import Path

from adapters.library_file import LibraryFileLoader
from core.domain.models import BookEntry

logger = logging.getLogger(__name__)


class LibraryData:
    """Owns the catalogue list and loads entries into it."""

    def __init__(self, books: list[BookEntry] | None = None, *, encoding: str = "utf-8") -> None:
        self._books: list[BookEntry] = books if books is not None else []
        self.encoding = encoding

    @property
    def book_data(self) -> list[BookEntry]:
        return self._books

    def load_data(self, path: Path) -> int:
        """Append the entries parsed from `path`; returns how many were added."""

        if path is None:
            raise TypeError("Given path must not be None.")

        loader = LibraryFileLoader(encoding=self.encoding)
        if not loader.load_file_content(path):
            return 0

        new_books = loader.parse_file_content()
        self._books.extend(new_books)
        logger.debug("Loaded %d entries from %s", len(new_books), path)
        return len(new_books)

    def __len__(self) -> int:
        return len(self._books)
