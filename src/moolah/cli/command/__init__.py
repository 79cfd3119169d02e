from __future__ import annotations

# Entry-point implementations for the moolah CLI.
# Each module exposes a `run(...)` function that returns an exit code.
# Typer wrappers in moolah.cli.app delegate here.

__all__ = [
    "shell",
]
