from __future__ import annotations

"""
Base class for Moolah commands.

A command class declares its tag contract (mandatory and optional tags) and
help text. An instance is created for every input line, filled in by the
parameter parser, executed once and discarded.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import date as dt_date
from typing import TYPE_CHECKING, Any, ClassVar

from moolah.model.transaction import TransactionType
from moolah.parser.tags import CommandTag

if TYPE_CHECKING:
    from moolah.model.transaction_list import TransactionList
    from moolah.storage.transaction_store import TransactionStore
    from moolah.ui import Ui


@dataclass
class Command(ABC):
    """Parsed user command; one field per supported tag."""

    command_word: ClassVar[str] = ""
    mandatory_tags: ClassVar[tuple[CommandTag, ...]] = ()
    optional_tags: ClassVar[tuple[CommandTag, ...]] = ()
    converter_overrides: ClassVar[Mapping[CommandTag, Callable[[str], Any]]] = {}
    summary: ClassVar[str] = ""
    usage: ClassVar[str] = ""
    is_exit: ClassVar[bool] = False

    type: TransactionType | None = None
    category: str | None = None
    amount: int | None = None
    date: dt_date | None = None
    description: str | None = None
    entry_number: int | None = None
    is_detailed: bool = False
    stats_type: str | None = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        overlap = set(cls.mandatory_tags) & set(cls.optional_tags)
        if overlap:
            raise TypeError(
                f"{cls.__name__} declares tags as both mandatory and optional: "
                + ", ".join(sorted(overlap))
            )

    @abstractmethod
    def execute(self, transactions: TransactionList, ui: Ui, store: TransactionStore) -> None:
        """Run the command against the transaction list."""
        raise NotImplementedError


__all__ = ["Command"]
