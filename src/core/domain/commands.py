"""Library commands as a closed set of tagged variants.

Every variant is an immutable Pydantic model that carries its own parsed
argument payload. `from_argument` is the only way the shell builds one: it
validates the raw argument first, so an invalid command object never exists.
Execution lives in `core.services.command_runner` and dispatches on `kind`.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated, Any, Literal, TypeVar, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.errors import InvalidArgumentError


class CommandType(str, Enum):
    """Keywords the shell understands."""

    HELP = "HELP"
    EXIT = "EXIT"
    ADD = "ADD"
    LIST = "LIST"
    SEARCH = "SEARCH"
    REMOVE = "REMOVE"
    GROUP = "GROUP"

    @classmethod
    def from_keyword(cls, keyword: str) -> "CommandType":
        """Match a keyword exactly; case folding is up to the caller."""

        try:
            return cls(keyword)
        except ValueError:
            raise InvalidArgumentError(f"Unknown command: {keyword!r}", argument=keyword) from None


class ListMode(str, Enum):
    SHORT = "short"
    LONG = "long"


class EntryField(str, Enum):
    """Field a REMOVE or GROUP command works on."""

    TITLE = "TITLE"
    AUTHOR = "AUTHOR"


ADD_FILE_EXTENSION = ".csv"
ARGUMENT_DELIMITER = " "

_C = TypeVar("_C", bound="CommandBase")


class CommandBase(BaseModel):
    """Shared validation and construction for every command variant."""

    model_config = ConfigDict(frozen=True)

    argument: str = Field(
        default="",
        description="Raw argument string as typed after the keyword.",
    )

    @classmethod
    def command_type(cls) -> CommandType:
        return cls.model_fields["kind"].default

    @classmethod
    def validate_argument(cls, argument: str) -> bool:
        """Base rule: the command takes no argument."""

        return not argument.strip()

    @classmethod
    def _parse_argument(cls, argument: str) -> dict[str, Any]:
        return {}

    @classmethod
    def from_argument(cls: type[_C], argument: str) -> _C:
        """Validate `argument` and build the command.

        Raises:
        - `TypeError` if `argument` is None.
        - `InvalidArgumentError` if the argument is rejected.
        """

        if argument is None:
            raise TypeError("Given argument input must not be None.")
        if not cls.validate_argument(argument):
            raise InvalidArgumentError(
                f"Invalid argument for the {cls.command_type().value} command: {argument}",
                argument=argument,
            )
        return cls(argument=argument, **cls._parse_argument(argument))


class HelpCommand(CommandBase):
    kind: Literal[CommandType.HELP] = CommandType.HELP


class ExitCommand(CommandBase):
    kind: Literal[CommandType.EXIT] = CommandType.EXIT


class AddCommand(CommandBase):
    """Load more entries from a `.csv` file."""

    kind: Literal[CommandType.ADD] = CommandType.ADD
    path: Path = Field(..., description="File the new entries are read from.")

    @classmethod
    def validate_argument(cls, argument: str) -> bool:
        return argument.endswith(ADD_FILE_EXTENSION)

    @classmethod
    def _parse_argument(cls, argument: str) -> dict[str, Any]:
        return {"path": Path(argument)}


class ListCommand(CommandBase):
    """List every entry; an empty argument means the short form."""

    kind: Literal[CommandType.LIST] = CommandType.LIST
    mode: ListMode = ListMode.SHORT

    @classmethod
    def validate_argument(cls, argument: str) -> bool:
        return argument == "" or argument in {m.value for m in ListMode}

    @classmethod
    def _parse_argument(cls, argument: str) -> dict[str, Any]:
        return {"mode": ListMode(argument) if argument else ListMode.SHORT}


class SearchCommand(CommandBase):
    kind: Literal[CommandType.SEARCH] = CommandType.SEARCH
    term: str = Field(..., min_length=1, description="Single word looked up in titles.")

    @classmethod
    def validate_argument(cls, argument: str) -> bool:
        return bool(argument.strip()) and ARGUMENT_DELIMITER not in argument

    @classmethod
    def _parse_argument(cls, argument: str) -> dict[str, Any]:
        return {"term": argument}


class RemoveCommand(CommandBase):
    """`TITLE <term>` or `AUTHOR <term>`; only the first space splits."""

    kind: Literal[CommandType.REMOVE] = CommandType.REMOVE
    mode: EntryField
    term: str = Field(..., min_length=1, description="Exact title or author name to remove.")

    @classmethod
    def validate_argument(cls, argument: str) -> bool:
        mode, delimiter, term = argument.partition(ARGUMENT_DELIMITER)
        if not delimiter:
            return False
        return mode in {f.value for f in EntryField} and bool(term.strip())

    @classmethod
    def _parse_argument(cls, argument: str) -> dict[str, Any]:
        mode, _, term = argument.partition(ARGUMENT_DELIMITER)
        return {"mode": EntryField(mode), "term": term}


class GroupCommand(CommandBase):
    kind: Literal[CommandType.GROUP] = CommandType.GROUP
    mode: EntryField

    @classmethod
    def validate_argument(cls, argument: str) -> bool:
        return argument in {f.value for f in EntryField}

    @classmethod
    def _parse_argument(cls, argument: str) -> dict[str, Any]:
        return {"mode": EntryField(argument)}


LibraryCommand = Annotated[
    Union[
        HelpCommand,
        ExitCommand,
        AddCommand,
        ListCommand,
        SearchCommand,
        RemoveCommand,
        GroupCommand,
    ],
    Field(discriminator="kind"),
]

COMMAND_CLASSES: dict[CommandType, type[CommandBase]] = {
    CommandType.HELP: HelpCommand,
    CommandType.EXIT: ExitCommand,
    CommandType.ADD: AddCommand,
    CommandType.LIST: ListCommand,
    CommandType.SEARCH: SearchCommand,
    CommandType.REMOVE: RemoveCommand,
    CommandType.GROUP: GroupCommand,
}
