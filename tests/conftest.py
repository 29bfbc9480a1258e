"""
Pytest configuration and fixtures for bookshelf tests.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from adapters.library_file import FILE_HEADER  # noqa: E402
from core.domain.models import BookEntry  # noqa: E402
from core.services.library_data import LibraryData  # noqa: E402


def make_book(title, authors=("Jane Doe",), rating=4.0, isbn="9780000000000", pages=100):
    return BookEntry(title=title, authors=list(authors), rating=rating, isbn=isbn, pages=pages)


@pytest.fixture
def sample_books():
    return [
        make_book("Category Theory", ("Saunders Mac Lane",), 4.3, "9780387984032", 314),
        make_book("concatenate", ("Amy", "Bob"), 3.5, "9781111111111", 50),
        make_book("dog", ("Bob",), 2.0, "9782222222222", 12),
    ]


@pytest.fixture
def library(sample_books):
    return LibraryData(list(sample_books))


@pytest.fixture
def empty_library():
    return LibraryData()


@pytest.fixture
def write_catalogue(tmp_path):
    """Write a catalogue file with the given lines and return its path."""

    def _write(lines, name="books.csv", header=True):
        content = ([FILE_HEADER] if header else []) + list(lines)
        path = tmp_path / name
        path.write_text("\n".join(content) + "\n", encoding="utf-8")
        return path

    return _write
