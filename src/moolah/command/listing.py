from __future__ import annotations

from moolah.command.base import Command
from moolah.parser import converters
from moolah.parser.tags import CommandTag


class ListCommand(Command):
    """Show all transactions, or those matching every given filter."""

    command_word = "list"
    optional_tags = (CommandTag.TYPE, CommandTag.CATEGORY, CommandTag.DATE)
    converter_overrides = {CommandTag.TYPE: converters.parse_type_for_listing}
    summary = "List transactions, optionally filtered by type, category or date."
    usage = "list [t/TYPE] [c/CATEGORY] [d/DATE]"

    def execute(self, transactions, ui, store) -> None:
        if transactions.is_empty():
            ui.show_info("There are no transactions recorded yet.")
            return

        rows = transactions.filter(type=self.type, category=self.category, date=self.date)
        if not rows:
            ui.show_info("No transactions match the given filters.")
            return
        ui.show_transactions(rows)
