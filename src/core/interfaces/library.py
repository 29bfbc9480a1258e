"""Contract for the library data that commands operate on.

Why Protocol:
- Commands only need the live catalogue and a way to load more entries.
- Tests can hand in any object with that shape.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from core.domain.models import BookEntry


@runtime_checkable
class LibraryDataProvider(Protocol):
    """Minimal contract for the shared catalogue.

    Design rules:
    - `book_data` returns the live list, never a copy: mutations made by one
      command are visible to the next.
    - `load_data` appends parsed entries and returns how many were added.
    """

    @property
    def book_data(self) -> list[BookEntry]:
        ...

    def load_data(self, path: Path) -> int:
        ...
