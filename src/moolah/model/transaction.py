from __future__ import annotations

"""
Transaction model for Moolah.

Scope
- Pure Pydantic v2 model; no I/O (handled by transaction_io.py)
- A transaction is either an expense or an income, told apart by TransactionType
"""

from datetime import date as dt_date
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from moolah.config import DATE_OUTPUT_PATTERN, MAX_AMOUNT, MIN_AMOUNT


class TransactionType(StrEnum):
    """Kinds of transaction. The values are the canonical names users type."""

    EXPENSE = "expense"
    INCOME = "income"


class Transaction(BaseModel):
    """One recorded expense or income."""

    model_config = ConfigDict(frozen=True)

    type: TransactionType
    category: str = Field(min_length=1)
    amount: int = Field(ge=MIN_AMOUNT, le=MAX_AMOUNT, description="Whole currency units")
    date: dt_date
    description: str = Field(min_length=1)

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE

    @property
    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME

    def display_date(self) -> str:
        return self.date.strftime(DATE_OUTPUT_PATTERN)

    def __str__(self) -> str:
        return (
            f"[{self.type.value.capitalize()}] {self.description} "
            f"Amt: ${self.amount} Cat: {self.category} Date: {self.display_date()}"
        )


__all__ = ["Transaction", "TransactionType"]
