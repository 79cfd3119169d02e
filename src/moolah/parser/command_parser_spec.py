from __future__ import annotations

import pytest

from moolah.command import AddCommand, DeleteCommand, ListCommand
from moolah.exceptions import MissingTagError, UnknownCommandError, UnsupportedTagError
from moolah.parser.command_parser import parse_command, split_command_word


class DescribeSplitCommandWord:
    def it_should_separate_word_and_parameters(self):
        assert split_command_word("add t/expense c/Food") == ("add", "t/expense c/Food")

    def it_should_strip_surrounding_whitespace(self):
        assert split_command_word("  list  c/Food ") == ("list", "c/Food")

    def it_should_return_empty_parameters_for_bare_word(self):
        assert split_command_word("bye") == ("bye", "")


class DescribeParseCommand:
    def it_should_build_the_command_for_its_word(self):
        command = parse_command("delete e/3")
        assert isinstance(command, DeleteCommand)
        assert command.entry_number == 3

    def it_should_create_a_fresh_instance_per_line(self):
        first = parse_command("list c/Food")
        second = parse_command("list")
        assert isinstance(first, ListCommand)
        assert second is not first
        assert second.category is None

    def it_should_flag_bye_as_exit(self):
        assert parse_command("bye").is_exit is True
        assert parse_command("list").is_exit is False

    @pytest.mark.parametrize("line", ["", "   ", "spend a/5", "ADD t/expense"])
    def it_should_reject_unknown_command_words(self, line):
        with pytest.raises(UnknownCommandError):
            parse_command(line)

    def it_should_propagate_parameter_errors(self):
        with pytest.raises(MissingTagError):
            parse_command("add")

    def it_should_parse_add_with_all_tags(self):
        command = parse_command("add t/income c/Salary a/4000 d/28022022 i/February")
        assert isinstance(command, AddCommand)
        assert command.amount == 4000


def it_should_reject_parameters_on_commands_without_tags():
    with pytest.raises(UnsupportedTagError):
        parse_command("bye now")
