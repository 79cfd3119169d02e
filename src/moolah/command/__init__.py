from __future__ import annotations

# Command classes for Moolah.
# Each class declares the tags it accepts and implements `execute(...)`.
# The command parser looks classes up here by their command word.

from .add import AddCommand
from .base import Command
from .bye import ByeCommand
from .delete import DeleteCommand
from .edit import EditCommand
from .help import HelpCommand
from .listing import ListCommand
from .purge import PurgeCommand
from .stats import StatsCommand

COMMANDS: dict[str, type[Command]] = {
    cls.command_word: cls
    for cls in (
        AddCommand,
        ListCommand,
        EditCommand,
        DeleteCommand,
        PurgeCommand,
        StatsCommand,
        HelpCommand,
        ByeCommand,
    )
}

__all__ = [
    "COMMANDS",
    "Command",
    "AddCommand",
    "ListCommand",
    "EditCommand",
    "DeleteCommand",
    "PurgeCommand",
    "StatsCommand",
    "HelpCommand",
    "ByeCommand",
]
