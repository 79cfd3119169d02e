from __future__ import annotations

from moolah.command.base import Command
from moolah.config import PURGE_CONFIRMATION
from moolah.exceptions import EmptyTransactionListError

PURGE_WARNING = (
    "This will delete ALL transactions and cannot be undone. "
    f"Enter '{PURGE_CONFIRMATION}' to confirm, or anything else to abort."
)


class PurgeCommand(Command):
    command_word = "purge"
    summary = "Delete all transactions (asks for confirmation)."
    usage = "purge"

    def execute(self, transactions, ui, store) -> None:
        if transactions.is_empty():
            raise EmptyTransactionListError()

        ui.show_warning(PURGE_WARNING)
        try:
            answer = ui.read_command("Confirm: ")
        except EOFError:
            answer = ""
        if answer != PURGE_CONFIRMATION:
            ui.show_info("Aborting purge, returning to home.")
            return

        transactions.purge()
        store.save(transactions)
        ui.show_info("All transactions have been deleted.")
