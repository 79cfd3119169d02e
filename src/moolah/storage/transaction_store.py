"""
Disk persistence for the transaction list.

The whole list is rewritten on every save; the file is small and written
only after a command changes it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from moolah.exceptions import StorageError
from moolah.model.transaction_io import dump_transactions_csv, load_transactions_csv
from moolah.model.transaction_list import TransactionList

logger = logging.getLogger(__name__)


class TransactionStore:
    """Loads and saves a TransactionList as CSV at a fixed path."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.skipped = 0

    def load(self) -> TransactionList:
        """Load the list; a missing file yields an empty list.

        Rows that cannot be read are skipped with a warning.
        """
        if not self.path.exists():
            logger.info("No transaction file at %s; starting with an empty list", self.path)
            return TransactionList()
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error("Failed to read %s: %s", self.path, e)
            raise StorageError() from e

        result = load_transactions_csv(text)
        self.skipped = result.skipped
        if result.skipped:
            logger.warning("Skipped %d unreadable row(s) in %s", result.skipped, self.path)
        logger.debug("Loaded %d transaction(s) from %s", len(result.transactions), self.path)
        return TransactionList(result.transactions)

    def save(self, transactions: TransactionList) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(dump_transactions_csv(transactions), encoding="utf-8")
        except OSError as e:
            logger.error("Failed to write %s: %s", self.path, e)
            raise StorageError() from e
        logger.debug("Saved %d transaction(s) to %s", len(transactions), self.path)


__all__ = ["TransactionStore"]
