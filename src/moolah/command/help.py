from __future__ import annotations

from moolah.command.base import Command
from moolah.parser.tags import CommandTag


class HelpCommand(Command):
    command_word = "help"
    optional_tags = (CommandTag.HELP_OPTION,)
    summary = "Show the list of commands; add o/detailed for usage."
    usage = "help [o/detailed]"

    def execute(self, transactions, ui, store) -> None:
        from moolah.command import COMMANDS

        ui.show_help(list(COMMANDS.values()), detailed=self.is_detailed)
