from __future__ import annotations

from moolah.command.base import Command


class ByeCommand(Command):
    command_word = "bye"
    summary = "Exit Moolah."
    usage = "bye"
    is_exit = True

    def execute(self, transactions, ui, store) -> None:
        ui.show_farewell()
