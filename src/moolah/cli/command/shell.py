from __future__ import annotations

"""
Interactive Moolah shell: read a line, parse it, execute it, repeat.

Errors raised while parsing or executing a line are shown to the user and the
shell re-prompts; only `bye` or end of input ends the session.
"""

import logging

from moolah.exceptions import MoolahError
from moolah.model.transaction_list import TransactionList
from moolah.parser.command_parser import parse_command
from moolah.storage.transaction_store import TransactionStore
from moolah.ui import Ui
from moolah.workspace import Workspace

logger = logging.getLogger(__name__)


def execute_line(line: str, transactions: TransactionList, ui: Ui, store: TransactionStore) -> bool:
    """Parse and execute one input line.

    Returns True when the command asks the shell to exit.

    Raises:
        MoolahError: The line was rejected by the parser or the command failed.
    """
    command = parse_command(line)
    command.execute(transactions, ui, store)
    return command.is_exit


def _open_store(workspace: Workspace, ui: Ui) -> tuple[TransactionStore, TransactionList]:
    store = TransactionStore(workspace.transactions_path)
    transactions = store.load()
    if store.skipped:
        ui.show_warning(
            f"{store.skipped} unreadable row(s) in {store.path} were skipped "
            "and will be dropped on the next save."
        )
    return store, transactions


def run(*, workspace: Workspace, ui: Ui | None = None) -> int:
    """Run the interactive shell until `bye` or end of input.

    Returns an exit code (0 on a normal exit, 1 if the data file cannot be read).
    """
    ui = ui or Ui()
    try:
        store, transactions = _open_store(workspace, ui)
    except MoolahError as e:
        ui.show_error(e.message)
        return 1

    ui.show_greeting()
    while True:
        try:
            line = ui.read_command()
        except (EOFError, KeyboardInterrupt):
            ui.show_farewell()
            return 0
        if not line:
            continue
        try:
            if execute_line(line, transactions, ui, store):
                return 0
        except MoolahError as e:
            logger.debug("Command failed: %s", type(e).__name__)
            ui.show_error(e.message)


def run_once(*, line: str, workspace: Workspace, ui: Ui | None = None) -> int:
    """Execute a single input line non-interactively.

    Returns an exit code (0 success; 1 if the line was rejected or failed).
    """
    ui = ui or Ui()
    try:
        store, transactions = _open_store(workspace, ui)
        execute_line(line, transactions, ui, store)
    except MoolahError as e:
        ui.show_error(e.message)
        return 1
    return 0
