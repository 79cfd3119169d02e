from __future__ import annotations

"""
Transaction CSV <-> model conversion (pure text, no disk I/O).

One CSV row per transaction, with a fixed column order so dumps are
deterministic. Values are kept exactly as written, whitespace included.
Rows that fail validation on load are skipped and counted; callers decide
whether to report them.
"""

import csv
import io
from collections.abc import Iterable
from dataclasses import dataclass, field

from pydantic import ValidationError

from .transaction import Transaction

TRANSACTION_COLUMNS: list[str] = [
    "type",
    "category",
    "amount",
    "date",
    "description",
]


@dataclass
class LoadResult:
    """Transactions parsed from CSV text plus the number of rejected rows."""

    transactions: list[Transaction] = field(default_factory=list)
    skipped: int = 0


def dump_transactions_csv(transactions: Iterable[Transaction]) -> str:
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=TRANSACTION_COLUMNS, lineterminator="\n")
    writer.writeheader()
    for txn in transactions:
        writer.writerow(
            {
                "type": txn.type.value,
                "category": txn.category,
                "amount": str(txn.amount),
                "date": txn.date.isoformat(),
                "description": txn.description,
            }
        )
    return buf.getvalue()


def load_transactions_csv(text: str) -> LoadResult:
    result = LoadResult()
    reader = csv.DictReader(io.StringIO(text))
    for row in reader:
        values = {col: row.get(col) or "" for col in TRANSACTION_COLUMNS}
        try:
            result.transactions.append(Transaction.model_validate(values))
        except ValidationError:
            result.skipped += 1
    return result


__all__ = [
    "TRANSACTION_COLUMNS",
    "LoadResult",
    "dump_transactions_csv",
    "load_transactions_csv",
]
