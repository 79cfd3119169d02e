"""
Per-tag validation and conversion of raw parameter values.

Each converter takes the text following a tag and returns a typed value, or
raises the MoolahError subclass for that field. Character-class checks run
before any numeric parsing so every failure has a single cause.
"""

from __future__ import annotations

import re
from datetime import date, datetime

from moolah.config import DATE_INPUT_PATTERN, MAX_AMOUNT, MIN_AMOUNT, SPECIAL_SYMBOLS
from moolah.exceptions import (
    EntryNotNumericError,
    InvalidAmountError,
    InvalidCategoryError,
    InvalidDateError,
    InvalidStatsTypeError,
    UnknownHelpOptionError,
    UnknownTransactionTypeError,
)
from moolah.model.transaction import TransactionType

HELP_OPTION_DETAILED = "detailed"
STATS_TYPE_CATEGORIES = "categories"

_SPECIAL_SYMBOLS_RE = re.compile(f"[{re.escape(SPECIAL_SYMBOLS)}]")
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

MIN_ENTRY_NUMBER = -(2**31)
MAX_ENTRY_NUMBER = 2**31 - 1

_LISTING_TYPES = {
    "expense": TransactionType.EXPENSE,
    "income": TransactionType.INCOME,
}


def contain_numeric(value: str) -> bool:
    return any(ch.isdigit() for ch in value)


def contain_alphabet(value: str) -> bool:
    return any(ch.isalpha() for ch in value)


def contain_special_symbol(value: str) -> bool:
    return _SPECIAL_SYMBOLS_RE.search(value) is not None


def parse_type_for_listing(value: str) -> TransactionType:
    """Map a listing filter ("expense" / "income") to its transaction type."""
    try:
        return _LISTING_TYPES[value]
    except KeyError:
        raise UnknownTransactionTypeError() from None


def parse_type_for_adding(value: str) -> TransactionType:
    """Accept only the canonical name of the expense or income kind."""
    if value not in (TransactionType.EXPENSE.value, TransactionType.INCOME.value):
        raise UnknownTransactionTypeError()
    return TransactionType(value)


def parse_category(value: str) -> str:
    if contain_numeric(value) or contain_special_symbol(value):
        raise InvalidCategoryError()
    return value


def parse_amount(value: str) -> int:
    if contain_alphabet(value) or contain_special_symbol(value):
        raise InvalidAmountError()
    if not _INTEGER_RE.fullmatch(value):
        raise InvalidAmountError()
    amount = int(value)
    if amount < MIN_AMOUNT or amount > MAX_AMOUNT:
        raise InvalidAmountError()
    return amount


def parse_date(value: str) -> date:
    """Parse a ddMMyyyy date strictly.

    strptime tolerates single-digit days and months, so the zero-padded
    day, month and year of the parsed date must equal the text that was given.
    """
    try:
        parsed = datetime.strptime(value, DATE_INPUT_PATTERN).date()
    except ValueError:
        raise InvalidDateError() from None
    if f"{parsed.day:02d}{parsed.month:02d}{parsed.year:04d}" != value:
        raise InvalidDateError()
    return parsed


def parse_description(value: str) -> str:
    return value


def parse_entry_number(value: str) -> int:
    # Range is checked against the live list, not here; values beyond a
    # 32-bit integer are not numbers an entry could ever have
    if not _INTEGER_RE.fullmatch(value):
        raise EntryNotNumericError()
    entry_number = int(value)
    if not MIN_ENTRY_NUMBER <= entry_number <= MAX_ENTRY_NUMBER:
        raise EntryNotNumericError()
    return entry_number


def parse_help_option(value: str) -> bool:
    if value != HELP_OPTION_DETAILED:
        raise UnknownHelpOptionError()
    return True


def parse_stats_type(value: str) -> str:
    if value != STATS_TYPE_CATEGORIES:
        raise InvalidStatsTypeError()
    return value


__all__ = [
    "HELP_OPTION_DETAILED",
    "STATS_TYPE_CATEGORIES",
    "contain_alphabet",
    "contain_numeric",
    "contain_special_symbol",
    "parse_amount",
    "parse_category",
    "parse_date",
    "parse_description",
    "parse_entry_number",
    "parse_help_option",
    "parse_stats_type",
    "parse_type_for_adding",
    "parse_type_for_listing",
]
