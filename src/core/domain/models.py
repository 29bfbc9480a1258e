"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Construction-time validation gives us immutable records that can never hold
  an out-of-range rating or a negative page count.
- Parsing text fields (rating, pages) reuses the same validation path as
  typed construction.

Note:
- These models describe *what* a book entry is, not *where* it comes from.
"""

from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


AUTHOR_DELIMITER = "-"
BOOK_LINE_DELIMITER = ","
NUM_OF_FIELDS = 5

MIN_RATING = 0
MAX_RATING = 5


class BookEntry(BaseModel):
    """Immutable data for a single book entry.

    Equality and hashing cover all five fields, with `authors` compared as
    an ordered sequence.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(
        ...,
        min_length=1,
        description="Full title of the book.",
    )
    authors: tuple[str, ...] = Field(
        ...,
        min_length=1,
        description="Authors in the order they are credited.",
    )
    rating: float = Field(
        ...,
        ge=MIN_RATING,
        le=MAX_RATING,
        allow_inf_nan=False,
        description="Average rating out of 5.",
    )
    isbn: str = Field(
        ...,
        description="13-digit International Standard Book Number (not validated).",
    )
    pages: int = Field(
        ...,
        ge=0,
        description="Number of pages.",
    )

    @field_validator("authors")
    @classmethod
    def _authors_not_empty(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for author in value:
            if not author:
                raise ValueError("author names cannot be empty")
        return value

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> "BookEntry":
        """Build an entry from the five text fields of one catalogue line.

        Raises `ValueError` when the field count is wrong, and a pydantic
        `ValidationError` (also a `ValueError`) for any invalid field.
        """

        if len(fields) != NUM_OF_FIELDS:
            raise ValueError(
                f"a book entry needs exactly {NUM_OF_FIELDS} fields, got {len(fields)}"
            )
        title, authors, rating, isbn, pages = fields
        return cls(
            title=title,
            authors=authors.split(AUTHOR_DELIMITER),
            rating=rating,
            isbn=isbn,
            pages=pages,
        )

    @classmethod
    def from_line(cls, line: str) -> "BookEntry":
        return cls.from_fields(line.split(BOOK_LINE_DELIMITER))

    def __str__(self) -> str:
        return (
            f"{self.title}\n"
            f"by {', '.join(self.authors)}\n"
            f"Rating: {self.rating:.2f}\n"
            f"ISBN: {self.isbn}\n"
            f"{self.pages} pages"
        )
