from .transaction import Transaction, TransactionType
from .transaction_io import (
    TRANSACTION_COLUMNS,
    LoadResult,
    dump_transactions_csv,
    load_transactions_csv,
)
from .transaction_list import TransactionList

__all__ = [
    # models
    "Transaction",
    "TransactionType",
    "TransactionList",
    # IO helpers
    "dump_transactions_csv",
    "load_transactions_csv",
    "LoadResult",
    "TRANSACTION_COLUMNS",
]
