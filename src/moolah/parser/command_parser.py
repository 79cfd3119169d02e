"""Turns a full input line into a populated command instance."""

from __future__ import annotations

import logging

from moolah.command import COMMANDS, Command
from moolah.exceptions import UnknownCommandError
from moolah.parser import parameter_parser

logger = logging.getLogger(__name__)


def split_command_word(user_input: str) -> tuple[str, str]:
    """Return (command_word, parameters_input), both stripped."""
    command_word, _, parameters_input = user_input.strip().partition(" ")
    return command_word, parameters_input.strip()


def parse_command(user_input: str) -> Command:
    command_word, parameters_input = split_command_word(user_input)
    command_cls = COMMANDS.get(command_word)
    if command_cls is None:
        raise UnknownCommandError()

    command = command_cls()
    parameter_parser.parse(command, parameters_input)
    logger.debug("Parsed %s command", command_word)
    return command


__all__ = ["parse_command", "split_command_word"]
