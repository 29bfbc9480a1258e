"""Bucketing of catalogue entries for the GROUP command.

Both groupings return `(label, titles)` pairs in print order and never
re-sort titles inside a group: they keep catalogue order.
"""

from __future__ import annotations

import string
from typing import Iterable

from core.domain.models import BookEntry


DIGITS_LABEL = "[0-9]"
OTHER_LABEL = "[other]"

# A-Z, then digits, then the overflow bucket.
NUM_LETTER_GROUPS = len(string.ascii_uppercase)
DIGITS_INDEX = NUM_LETTER_GROUPS
OTHER_INDEX = NUM_LETTER_GROUPS + 1


def title_bucket_index(title: str) -> int:
    """Bucket for a title, from its upper-cased first character."""

    first = title[0].upper()
    if first in string.digits:
        return DIGITS_INDEX
    if len(first) == 1 and first in string.ascii_uppercase:
        return ord(first) - ord("A")
    return OTHER_INDEX


def bucket_label(index: int) -> str:
    if index == DIGITS_INDEX:
        return DIGITS_LABEL
    if index == OTHER_INDEX:
        return OTHER_LABEL
    return string.ascii_uppercase[index]


def group_by_title(books: Iterable[BookEntry]) -> list[tuple[str, list[str]]]:
    buckets: list[list[str]] = [[] for _ in range(OTHER_INDEX + 1)]
    for book in books:
        buckets[title_bucket_index(book.title)].append(book.title)

    return [(bucket_label(i), titles) for i, titles in enumerate(buckets) if titles]


def group_by_author(books: Iterable[BookEntry]) -> list[tuple[str, list[str]]]:
    """Authors ascending; a title repeats once per matching author slot."""

    books = list(books)
    authors = sorted({author for book in books for author in book.authors})

    groups: list[tuple[str, list[str]]] = []
    for author in authors:
        titles = [
            book.title
            for book in books
            for book_author in book.authors
            if book_author == author
        ]
        groups.append((author, titles))
    return groups
