from .transaction_store import TransactionStore

__all__ = ["TransactionStore"]
