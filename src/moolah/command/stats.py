from __future__ import annotations

from moolah.command.base import Command
from moolah.exceptions import EmptyTransactionListError
from moolah.model.transaction import TransactionType
from moolah.parser.tags import CommandTag


class StatsCommand(Command):
    command_word = "stats"
    mandatory_tags = (CommandTag.STATS_TYPE,)
    summary = "Show statistics, e.g. totals per category."
    usage = "stats s/STATS_TYPE"

    def execute(self, transactions, ui, store) -> None:
        if transactions.is_empty():
            raise EmptyTransactionListError()

        # "categories" is the only stats type the parser lets through
        ui.show_category_stats(
            transactions.category_totals(),
            total_income=transactions.total(TransactionType.INCOME),
            total_expense=transactions.total(TransactionType.EXPENSE),
        )
