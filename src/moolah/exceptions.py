"""
Error taxonomy for Moolah.

Every error carries a fixed, user-displayable message and no dynamic data.
The shell shows the message and re-prompts; nothing here prints.
"""

from __future__ import annotations


class MoolahError(Exception):
    """Base class for every error Moolah reports to the user."""

    message = "Something went wrong."

    def __init__(self) -> None:
        super().__init__(self.message)


# --- Parameter parsing ---


class MissingTagError(MoolahError):
    message = "Mandatory tag(s) are missing from the command. Use 'help' to view the command format."


class UnsupportedTagError(MoolahError):
    message = "Unsupported tag(s) found in the command. Use 'help' to view the supported tags."


class DuplicateTagError(MoolahError):
    message = "Duplicate tag(s) found in the command. Each tag may only be given once."


class EmptyParameterError(MoolahError):
    message = "A tag was given without a value. Enter a value right after each tag."


class UnknownTransactionTypeError(MoolahError):
    message = "The transaction type must be either 'expense' or 'income'."


class InvalidCategoryError(MoolahError):
    message = "The category must not contain digits or special symbols."


class InvalidAmountError(MoolahError):
    message = "The amount must be a whole number between 0 and 10000000."


class InvalidDateError(MoolahError):
    message = "The date must be a valid date in the format ddMMyyyy, e.g. 01022022."


class EntryNotNumericError(MoolahError):
    message = "The entry number must be numeric."


class UnknownHelpOptionError(MoolahError):
    message = "The only supported help option is 'detailed'."


class InvalidStatsTypeError(MoolahError):
    message = "The only supported statistics type is 'categories'."


# --- Command dispatch and execution ---


class UnknownCommandError(MoolahError):
    message = "Unknown command. Use 'help' to view the list of commands."


class InvalidIndexError(MoolahError):
    message = "The entry number does not match any transaction in the list."


class EmptyTransactionListError(MoolahError):
    message = "There are no transactions recorded yet."


class StorageError(MoolahError):
    message = "The transaction file could not be read or written."


__all__ = [
    "MoolahError",
    "MissingTagError",
    "UnsupportedTagError",
    "DuplicateTagError",
    "EmptyParameterError",
    "UnknownTransactionTypeError",
    "InvalidCategoryError",
    "InvalidAmountError",
    "InvalidDateError",
    "EntryNotNumericError",
    "UnknownHelpOptionError",
    "InvalidStatsTypeError",
    "UnknownCommandError",
    "InvalidIndexError",
    "EmptyTransactionListError",
    "StorageError",
]
