"""Fixed two-character tags that prefix every command parameter."""

from __future__ import annotations

from enum import StrEnum

TAG_LENGTH = 2


class CommandTag(StrEnum):
    TYPE = "t/"
    CATEGORY = "c/"
    AMOUNT = "a/"
    DATE = "d/"
    DESCRIPTION = "i/"
    ENTRY_NUMBER = "e/"
    HELP_OPTION = "o/"
    STATS_TYPE = "s/"


__all__ = ["CommandTag", "TAG_LENGTH"]
