from __future__ import annotations

"""
Moolah CLI Wrapper (Typer + Rich)

Local-only personal finance tracker. Running `moolah` with no command opens
the interactive shell; `moolah exec` runs a single shell line.

All data lives under a single workspace root:
  --data-dir / MOOLAH_DATA env var / current working directory
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from moolah.config import DATA_ENV_VAR, DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR
from moolah.workspace import Workspace

APP_HELP = "Moolah personal finance tracker (local-only)"

app = typer.Typer(invoke_without_command=True, add_completion=False, help=APP_HELP)


def resolve_log_level(level: str) -> int:
    """Map a level name to its number; unknown names fall back to WARNING."""
    return logging.getLevelNamesMapping().get(level.upper(), logging.WARNING)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=resolve_log_level(level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.callback()
def main(
    ctx: typer.Context,
    data_dir: Optional[Path] = typer.Option(
        None,
        "--data-dir",
        envvar=DATA_ENV_VAR,
        help="Workspace root directory (default: current directory)",
    ),
    log_level: str = typer.Option(
        DEFAULT_LOG_LEVEL,
        "--log-level",
        envvar=LOG_LEVEL_ENV_VAR,
        help="Logging level written to stderr (DEBUG, INFO, WARNING, ERROR)",
    ),
):
    """Moolah - all data resolved from a single workspace root."""
    configure_logging(log_level)
    ctx.ensure_object(dict)
    ctx.obj["workspace"] = Workspace.resolve(data_dir)

    if ctx.invoked_subcommand is None:
        from moolah.cli.command import shell as cmd_shell

        code = cmd_shell.run(workspace=_ws(ctx))
        raise typer.Exit(code=code)


def _ws(ctx: typer.Context) -> Workspace:
    return ctx.obj["workspace"]


@app.command()
def shell(ctx: typer.Context):
    """Open the interactive shell.

    Type 'help' inside the shell for the list of commands, 'bye' to leave.

    Examples:
      moolah shell
      moolah --data-dir ~/finances
    """
    from moolah.cli.command import shell as cmd_shell

    code = cmd_shell.run(workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command(name="exec")
def exec_line(
    ctx: typer.Context,
    line: str = typer.Argument(..., help="A shell command line, e.g. 'list t/expense'"),
):
    """Run a single shell command line and exit.

    Examples:
      moolah exec "add t/expense c/Food a/12 d/01022022 i/Lunch"
      moolah exec "list c/Food"
      moolah exec "stats s/categories"
    """
    from moolah.cli.command import shell as cmd_shell

    code = cmd_shell.run_once(line=line, workspace=_ws(ctx))
    raise typer.Exit(code=code)


if __name__ == "__main__":
    app()
