"""
Parameter parser - validates the text after the command word and stores the
converted values on the command object.

The input goes through these checks, in order, stopping at the first failure:
1. Every mandatory tag of the command is present
2. No tag outside the command's mandatory and optional tags is used
3. No tag is given more than once
4. No tag is given without a value
5. Each value is converted by the converter for its tag and stored on the command

Only the fields of tags present in the input are touched; all other fields
keep their defaults.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from moolah.exceptions import (
    DuplicateTagError,
    EmptyParameterError,
    MissingTagError,
    UnsupportedTagError,
)
from moolah.parser import converters
from moolah.parser.tags import TAG_LENGTH, CommandTag

if TYPE_CHECKING:
    from moolah.command.base import Command

logger = logging.getLogger(__name__)

DELIMITER = " "

Converter = Callable[[str], Any]

# tag -> (command attribute, converter)
FIELD_CONVERTERS: dict[CommandTag, tuple[str, Converter]] = {
    CommandTag.TYPE: ("type", converters.parse_type_for_adding),
    CommandTag.CATEGORY: ("category", converters.parse_category),
    CommandTag.AMOUNT: ("amount", converters.parse_amount),
    CommandTag.DATE: ("date", converters.parse_date),
    CommandTag.DESCRIPTION: ("description", converters.parse_description),
    CommandTag.ENTRY_NUMBER: ("entry_number", converters.parse_entry_number),
    CommandTag.HELP_OPTION: ("is_detailed", converters.parse_help_option),
    CommandTag.STATS_TYPE: ("stats_type", converters.parse_stats_type),
}


def parse(command: Command, parameters_input: str) -> None:
    """Parse the parameter input into the fields of ``command``.

    Args:
        command: Fresh command instance; its class declares the tag contract.
        parameters_input: User input after the command word (may be empty).

    Raises:
        MoolahError: The first violation found; no partial result is reported.
    """
    splits = split_parameters(parameters_input)

    _check_mandatory_tags_exist(command, splits)

    # Empty input passed the mandatory check, so the command has no mandatory
    # tag and there is nothing left to set.
    if not parameters_input:
        return

    _check_unsupported_tags_not_exist(command, splits)
    _check_duplicate_tags_not_exist(splits)
    _check_parameters_not_empty(splits)

    for split in splits:
        tag, value = split[:TAG_LENGTH], split[TAG_LENGTH:]
        _set_parameter(command, tag, value)


def split_parameters(parameters_input: str) -> list[str]:
    """Split on single spaces; trailing empty tokens are dropped."""
    splits = parameters_input.split(DELIMITER)
    while len(splits) > 1 and splits[-1] == "":
        splits.pop()
    if parameters_input and splits == [""]:
        return []
    return splits


def _check_mandatory_tags_exist(command: Command, splits: list[str]) -> None:
    for tag in command.mandatory_tags:
        if not any(split.startswith(tag) for split in splits):
            raise MissingTagError()


def _check_unsupported_tags_not_exist(command: Command, splits: list[str]) -> None:
    supported = set(command.mandatory_tags) | set(command.optional_tags)
    for split in splits:
        # No tag is shorter than two characters
        if len(split) < TAG_LENGTH:
            raise UnsupportedTagError()
        if split[:TAG_LENGTH] not in supported:
            raise UnsupportedTagError()


def _check_duplicate_tags_not_exist(splits: list[str]) -> None:
    seen: set[str] = set()
    for split in splits:
        tag = split[:TAG_LENGTH]
        if tag in seen:
            raise DuplicateTagError()
        seen.add(tag)


def _check_parameters_not_empty(splits: list[str]) -> None:
    for split in splits:
        if len(split) <= TAG_LENGTH:
            raise EmptyParameterError()


def _set_parameter(command: Command, tag: str, value: str) -> None:
    try:
        field_name, converter = FIELD_CONVERTERS[CommandTag(tag)]
    except (KeyError, ValueError):
        raise MissingTagError() from None
    converter = command.converter_overrides.get(tag, converter)
    setattr(command, field_name, converter(value))
    logger.debug("Set %s on %s", field_name, command.command_word)


__all__ = ["FIELD_CONVERTERS", "parse", "split_parameters"]
