from __future__ import annotations

from datetime import date

from moolah.model.transaction import Transaction, TransactionType
from moolah.model.transaction_io import dump_transactions_csv, load_transactions_csv


class DescribeTransactionCsv:
    def it_should_write_header_and_iso_dates(self):
        txn = Transaction(type="expense", category="Food", amount=12, date=date(2022, 2, 1), description="Lunch")
        text = dump_transactions_csv([txn])
        assert text == "type,category,amount,date,description\nexpense,Food,12,2022-02-01,Lunch\n"

    def it_should_load_what_it_dumps(self):
        txns = [
            Transaction(type="expense", category="Food", amount=12, date=date(2022, 2, 1), description="Lunch"),
            Transaction(type="income", category="Salary", amount=4000, date=date(2022, 2, 28), description="Pay"),
        ]
        result = load_transactions_csv(dump_transactions_csv(txns))
        assert result.transactions == txns
        assert result.skipped == 0

    def it_should_skip_and_count_invalid_rows(self):
        text = (
            "type,category,amount,date,description\n"
            "expense,Food,12,2022-02-01,Lunch\n"
            "refund,Food,12,2022-02-01,Oops\n"
            "income,Salary,not-a-number,2022-02-28,Pay\n"
            "income,Salary\n"
        )
        result = load_transactions_csv(text)
        assert [t.description for t in result.transactions] == ["Lunch"]
        assert result.transactions[0].type is TransactionType.EXPENSE
        assert result.skipped == 3

    def it_should_load_nothing_from_empty_text(self):
        result = load_transactions_csv("")
        assert result.transactions == []
        assert result.skipped == 0

    def it_should_keep_surrounding_whitespace_in_values(self):
        txn = Transaction(type="expense", category="\xa0", amount=1, date=date(2022, 2, 1), description="Lunch\t")
        result = load_transactions_csv(dump_transactions_csv([txn]))
        assert result.skipped == 0
        assert result.transactions == [txn]
        assert result.transactions[0].description == "Lunch\t"
        assert result.transactions[0].category == "\xa0"
