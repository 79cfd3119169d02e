from __future__ import annotations

from moolah.command.base import Command
from moolah.parser.tags import CommandTag


class DeleteCommand(Command):
    command_word = "delete"
    mandatory_tags = (CommandTag.ENTRY_NUMBER,)
    summary = "Delete a transaction by its entry number."
    usage = "delete e/ENTRY"

    def execute(self, transactions, ui, store) -> None:
        removed = transactions.delete(self.entry_number)
        store.save(transactions)
        ui.show_transaction("I have deleted the following transaction:", removed)
