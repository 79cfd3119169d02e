# Shared fixtures; also makes the package under src/ importable without installing it.
import io
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))

import pytest
from rich.console import Console

from moolah.model.transaction_list import TransactionList
from moolah.storage.transaction_store import TransactionStore
from moolah.ui import Ui
from moolah.workspace import Workspace


class ScriptedReader:
    """Feeds prepared lines to Ui; raises EOFError once they run out."""

    def __init__(self, lines=None):
        self.lines = list(lines or [])
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def reader():
    return ScriptedReader()


@pytest.fixture
def console():
    return Console(file=io.StringIO(), record=True, width=120, color_system=None)


@pytest.fixture
def ui(console, reader):
    return Ui(console=console, reader=reader)


@pytest.fixture
def workspace(tmp_path):
    return Workspace(root=tmp_path)


@pytest.fixture
def store(workspace):
    return TransactionStore(workspace.transactions_path)


@pytest.fixture
def transactions():
    return TransactionList()
