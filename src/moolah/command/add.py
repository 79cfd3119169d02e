from __future__ import annotations

from moolah.command.base import Command
from moolah.model.transaction import Transaction
from moolah.parser.tags import CommandTag


class AddCommand(Command):
    command_word = "add"
    mandatory_tags = (
        CommandTag.TYPE,
        CommandTag.CATEGORY,
        CommandTag.AMOUNT,
        CommandTag.DATE,
        CommandTag.DESCRIPTION,
    )
    summary = "Add a new expense or income."
    usage = "add t/TYPE c/CATEGORY a/AMOUNT d/DATE i/DESCRIPTION"

    def execute(self, transactions, ui, store) -> None:
        txn = Transaction(
            type=self.type,
            category=self.category,
            amount=self.amount,
            date=self.date,
            description=self.description,
        )
        transactions.add(txn)
        store.save(transactions)
        ui.show_transaction("I have added the following transaction:", txn)
