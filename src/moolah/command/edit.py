from __future__ import annotations

from moolah.command.base import Command
from moolah.exceptions import MissingTagError
from moolah.parser.tags import CommandTag

EDITABLE_FIELDS = ("type", "category", "amount", "date", "description")


class EditCommand(Command):
    command_word = "edit"
    mandatory_tags = (CommandTag.ENTRY_NUMBER,)
    optional_tags = (
        CommandTag.TYPE,
        CommandTag.CATEGORY,
        CommandTag.AMOUNT,
        CommandTag.DATE,
        CommandTag.DESCRIPTION,
    )
    summary = "Change one or more fields of an existing transaction."
    usage = "edit e/ENTRY [t/TYPE] [c/CATEGORY] [a/AMOUNT] [d/DATE] [i/DESCRIPTION]"

    def execute(self, transactions, ui, store) -> None:
        changes = {
            name: getattr(self, name) for name in EDITABLE_FIELDS if getattr(self, name) is not None
        }
        # At least one field to change must be given
        if not changes:
            raise MissingTagError()

        updated = transactions.edit(self.entry_number, **changes)
        store.save(transactions)
        ui.show_transaction(f"I have updated entry {self.entry_number}:", updated)
