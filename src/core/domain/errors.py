"""Domain errors."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """A command keyword or argument string was rejected during validation."""

    def __init__(self, message: str, *, argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument
