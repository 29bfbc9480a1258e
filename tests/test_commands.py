"""
Tests for command argument validation, the factory and input parsing.
"""

import logging
from pathlib import Path

import pytest

from core.domain.commands import (
    AddCommand,
    CommandType,
    EntryField,
    ExitCommand,
    GroupCommand,
    HelpCommand,
    ListCommand,
    ListMode,
    RemoveCommand,
    SearchCommand,
)
from core.domain.errors import InvalidArgumentError
from core.services.command_runner import create_command, parse_input_line


class TestArgumentValidation:
    """Each command kind applies its own grammar."""

    @pytest.mark.parametrize("argument", ["", "short", "long"])
    def test_list_accepts(self, argument):
        assert ListCommand.validate_argument(argument)

    @pytest.mark.parametrize("argument", ["bogus", "SHORT", " long", "short long"])
    def test_list_rejects(self, argument):
        assert not ListCommand.validate_argument(argument)

    def test_list_empty_defaults_to_short(self):
        assert ListCommand.from_argument("").mode is ListMode.SHORT
        assert ListCommand.from_argument("long").mode is ListMode.LONG

    @pytest.mark.parametrize("argument", ["cat", "Dune", "x"])
    def test_search_accepts_single_token(self, argument):
        assert SearchCommand.from_argument(argument).term == argument

    @pytest.mark.parametrize("argument", ["", "   ", "two words", "trailing "])
    def test_search_rejects(self, argument):
        with pytest.raises(InvalidArgumentError):
            SearchCommand.from_argument(argument)

    def test_remove_title_term_may_contain_spaces(self):
        command = RemoveCommand.from_argument("TITLE The Lord of the Rings")
        assert command.mode is EntryField.TITLE
        assert command.term == "The Lord of the Rings"

    def test_remove_author(self):
        command = RemoveCommand.from_argument("AUTHOR Jane Austen")
        assert command.mode is EntryField.AUTHOR
        assert command.term == "Jane Austen"

    @pytest.mark.parametrize(
        "argument",
        ["TITLE", "AUTHOR", "TITLE ", "TITLE   ", "NAME foo", "title foo", "TITLEfoo bar", ""],
    )
    def test_remove_rejects(self, argument):
        assert not RemoveCommand.validate_argument(argument)

    @pytest.mark.parametrize("argument", ["TITLE", "AUTHOR"])
    def test_group_accepts(self, argument):
        assert GroupCommand.from_argument(argument).mode is EntryField(argument)

    @pytest.mark.parametrize("argument", ["", "title", "TITLE AUTHOR", "ISBN"])
    def test_group_rejects(self, argument):
        assert not GroupCommand.validate_argument(argument)

    def test_add_requires_csv_extension(self):
        assert AddCommand.from_argument("data/books.csv").path == Path("data/books.csv")
        assert not AddCommand.validate_argument("books.txt")
        assert not AddCommand.validate_argument("csv")

    @pytest.mark.parametrize("command_cls", [HelpCommand, ExitCommand])
    def test_help_and_exit_take_no_argument(self, command_cls):
        assert command_cls.validate_argument("")
        assert not command_cls.validate_argument("now")

    def test_none_argument_is_a_contract_violation(self):
        with pytest.raises(TypeError):
            SearchCommand.from_argument(None)

    def test_invalid_argument_message_names_the_command(self):
        with pytest.raises(InvalidArgumentError, match="LIST"):
            ListCommand.from_argument("bogus")


class TestCreateCommand:
    """The factory returns a validated command or None."""

    @pytest.mark.parametrize(
        "kind,argument,expected",
        [
            (CommandType.HELP, "", HelpCommand),
            (CommandType.EXIT, "", ExitCommand),
            (CommandType.ADD, "books.csv", AddCommand),
            (CommandType.LIST, "long", ListCommand),
            (CommandType.SEARCH, "cat", SearchCommand),
            (CommandType.REMOVE, "TITLE Dune", RemoveCommand),
            (CommandType.GROUP, "AUTHOR", GroupCommand),
        ],
    )
    def test_builds_matching_command(self, kind, argument, expected):
        command = create_command(kind, argument)
        assert isinstance(command, expected)
        assert command.kind is kind
        assert command.argument == argument

    def test_invalid_argument_returns_none_and_reports(self, caplog):
        with caplog.at_level(logging.ERROR):
            assert create_command(CommandType.LIST, "bogus") is None
        assert "ERROR: Invalid argument for the LIST command: bogus" in caplog.text

    def test_none_inputs_raise(self):
        with pytest.raises(TypeError):
            create_command(None, "")
        with pytest.raises(TypeError):
            create_command(CommandType.LIST, None)


class TestParseInputLine:
    """Splitting `KEYWORD[ ARGUMENT]`."""

    def test_keyword_only(self):
        assert parse_input_line("list") == (CommandType.LIST, "")

    def test_keyword_and_argument(self):
        assert parse_input_line("REMOVE TITLE Good Omens") == (CommandType.REMOVE, "TITLE Good Omens")

    def test_surrounding_whitespace_is_stripped(self):
        assert parse_input_line("  search cat \n") == (CommandType.SEARCH, "cat")

    def test_unknown_keyword(self):
        with pytest.raises(InvalidArgumentError, match="Unknown command"):
            parse_input_line("borrow Dune")

    def test_empty_line(self):
        with pytest.raises(InvalidArgumentError):
            parse_input_line("   ")
