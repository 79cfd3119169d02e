from __future__ import annotations

"""
Console input and output for Moolah (Rich).

All user-facing text goes through Ui so commands never print directly and
tests can capture output by handing in a recording Console and a scripted
reader.
"""

from collections.abc import Callable, Iterable, Sequence
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.text import Text

from moolah.model.transaction import Transaction, TransactionType

if TYPE_CHECKING:
    from moolah.command.base import Command

GREETING = "Welcome to Moolah Manager! Enter 'help' to see what I can do."
FAREWELL = "Bye! Hope to see you again soon."
PROMPT = "moolah > "


def fmt_amount(txn: Transaction) -> Text:
    s = f"{txn.amount:,}"
    if txn.is_expense:
        return Text(f"-{s}", style="bold red")
    return Text(s, style="bold green")


class Ui:
    """Reads commands and renders results on a Rich console."""

    def __init__(
        self,
        console: Console | None = None,
        reader: Callable[[str], str] | None = None,
    ) -> None:
        self.console = console or Console()
        self._reader = reader or self.console.input

    def read_command(self, prompt: str = PROMPT) -> str:
        """Return the next input line; raises EOFError when input is exhausted."""
        return self._reader(prompt).strip()

    def show_greeting(self) -> None:
        self.console.print(f"[bold cyan]{GREETING}[/]")

    def show_farewell(self) -> None:
        self.console.print(f"[bold cyan]{FAREWELL}[/]")

    def show_info(self, message: str) -> None:
        self.console.print(message)

    def show_warning(self, message: str) -> None:
        self.console.print(f"[yellow]{message}[/]")

    def show_error(self, message: str) -> None:
        self.console.print(f"[red]Error:[/] {message}")

    def show_transaction(self, heading: str, txn: Transaction) -> None:
        self.console.print(f"[green]{heading}[/]")
        self.console.print(f"  {txn}", markup=False, highlight=False)

    def show_transactions(self, rows: Iterable[tuple[int, Transaction]]) -> None:
        table = Table(title="Transactions", show_lines=False)
        table.add_column("Entry", style="cyan", justify="right", no_wrap=True)
        table.add_column("Type", style="blue")
        table.add_column("Category", style="white")
        table.add_column("Amount", justify="right")
        table.add_column("Date", style="white", no_wrap=True)
        table.add_column("Description", style="white")

        for entry_number, txn in rows:
            table.add_row(
                str(entry_number),
                txn.type.value,
                txn.category,
                fmt_amount(txn),
                txn.display_date(),
                Text(txn.description),
            )
        self.console.print(table)

    def show_category_stats(
        self,
        totals: dict[tuple[TransactionType, str], int],
        total_income: int,
        total_expense: int,
    ) -> None:
        table = Table(title="Totals by Category", show_lines=False)
        table.add_column("Type", style="blue")
        table.add_column("Category", style="cyan")
        table.add_column("Total", style="yellow", justify="right")

        # Expenses first, then income
        for kind in (TransactionType.EXPENSE, TransactionType.INCOME):
            for (txn_type, category), amount in totals.items():
                if txn_type == kind:
                    table.add_row(kind.value, category, f"{amount:,}")
        self.console.print(table)

        savings = total_income - total_expense
        style = "bold green" if savings >= 0 else "bold red"
        self.console.print(f"Total income:  [green]{total_income:,}[/]")
        self.console.print(f"Total expense: [red]{total_expense:,}[/]")
        self.console.print(f"Savings:       [{style}]{savings:,}[/]")

    def show_help(self, commands: Sequence[type[Command]], detailed: bool) -> None:
        table = Table(title="Commands", show_lines=False)
        table.add_column("Command", style="cyan", no_wrap=True)
        table.add_column("Description", style="white")
        for command in commands:
            table.add_row(command.command_word, command.summary)
        self.console.print(table)

        if not detailed:
            self.console.print("[dim]Use 'help o/detailed' for usage and tag formats.[/]")
            return

        # Usage lines contain square brackets, so print them without markup
        self.console.print("Usage:")
        for command in commands:
            self.console.print(f"  {command.usage}", markup=False, highlight=False)
        self.console.print(TAG_LEGEND, markup=False, highlight=False)


TAG_LEGEND = """Tags:
  t/TYPE         expense or income
  c/CATEGORY     text without digits or special symbols
  a/AMOUNT       whole number from 0 to 10000000
  d/DATE         date as ddMMyyyy, e.g. 01022022
  i/DESCRIPTION  one word, no spaces
  e/ENTRY        entry number shown by 'list'
  s/STATS_TYPE   categories
  o/OPTION       detailed"""


__all__ = ["Ui", "fmt_amount", "GREETING", "FAREWELL", "PROMPT"]
