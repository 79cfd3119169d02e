"""
In-memory list of transactions.

Entry numbers exposed to users are 1-based; the list maps them to positions
and rejects anything out of range with InvalidIndexError.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from datetime import date

from moolah.exceptions import EmptyTransactionListError, InvalidIndexError
from moolah.model.transaction import Transaction, TransactionType


class TransactionList:
    """Ordered, mutable collection of transactions."""

    def __init__(self, transactions: Iterable[Transaction] | None = None) -> None:
        self._transactions: list[Transaction] = list(transactions or [])

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._transactions)

    def is_empty(self) -> bool:
        return not self._transactions

    def _position(self, entry_number: int) -> int:
        if self.is_empty():
            raise EmptyTransactionListError()
        if entry_number < 1 or entry_number > len(self._transactions):
            raise InvalidIndexError()
        return entry_number - 1

    def add(self, transaction: Transaction) -> None:
        self._transactions.append(transaction)

    def get(self, entry_number: int) -> Transaction:
        return self._transactions[self._position(entry_number)]

    def edit(self, entry_number: int, **changes) -> Transaction:
        """Replace the given fields of one entry and return the updated transaction.

        Fields not named in ``changes`` keep their current values.
        """
        position = self._position(entry_number)
        updated = self._transactions[position].model_copy(update=changes)
        self._transactions[position] = updated
        return updated

    def delete(self, entry_number: int) -> Transaction:
        return self._transactions.pop(self._position(entry_number))

    def purge(self) -> None:
        self._transactions.clear()

    def filter(
        self,
        *,
        type: TransactionType | None = None,
        category: str | None = None,
        date: date | None = None,
    ) -> list[tuple[int, Transaction]]:
        """Return (entry_number, transaction) pairs matching every given filter."""
        matches = []
        for entry_number, txn in enumerate(self._transactions, start=1):
            if type is not None and txn.type != type:
                continue
            if category is not None and txn.category != category:
                continue
            if date is not None and txn.date != date:
                continue
            matches.append((entry_number, txn))
        return matches

    def category_totals(self) -> dict[tuple[TransactionType, str], int]:
        """Sum amounts per (type, category), in order of first appearance."""
        totals: dict[tuple[TransactionType, str], int] = {}
        for txn in self._transactions:
            key = (txn.type, txn.category)
            totals[key] = totals.get(key, 0) + txn.amount
        return totals

    def total(self, type: TransactionType) -> int:
        return sum(txn.amount for txn in self._transactions if txn.type == type)


__all__ = ["TransactionList"]
