from __future__ import annotations

"""
Tests for the Transaction model.
"""

from datetime import date

import pytest
from pydantic import ValidationError

from moolah.model.transaction import Transaction, TransactionType


def _txn(**overrides) -> Transaction:
    values = dict(
        type=TransactionType.EXPENSE,
        category="Food",
        amount=12,
        date=date(2022, 2, 1),
        description="Lunch",
    )
    values.update(overrides)
    return Transaction(**values)


class DescribeTransaction:
    def it_should_create_valid_expense(self):
        txn = _txn()
        assert txn.is_expense is True
        assert txn.is_income is False

    def it_should_coerce_type_from_canonical_name(self):
        assert _txn(type="income").type is TransactionType.INCOME

    def it_should_reject_negative_amount(self):
        with pytest.raises(ValidationError):
            _txn(amount=-1)

    def it_should_reject_amount_above_limit(self):
        with pytest.raises(ValidationError):
            _txn(amount=10_000_001)

    def it_should_reject_empty_category(self):
        with pytest.raises(ValidationError):
            _txn(category="")

    def it_should_be_immutable(self):
        with pytest.raises(ValidationError):
            _txn().amount = 5

    def it_should_render_a_readable_line(self):
        assert str(_txn()) == "[Expense] Lunch Amt: $12 Cat: Food Date: 01 Feb 2022"
