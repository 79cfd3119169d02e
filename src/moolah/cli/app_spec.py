from __future__ import annotations

import logging

import pytest
from typer.testing import CliRunner

from moolah.cli.app import app, resolve_log_level
from moolah.storage.transaction_store import TransactionStore
from moolah.workspace import Workspace

runner = CliRunner()


class DescribeApp:
    def it_should_add_and_list_through_exec(self, tmp_path):
        rc = runner.invoke(
            app, ["--data-dir", str(tmp_path), "exec", "add t/expense c/Food a/12 d/01022022 i/Lunch"]
        )
        assert rc.exit_code == 0

        listed = runner.invoke(app, ["--data-dir", str(tmp_path), "exec", "list c/Food"])
        assert listed.exit_code == 0
        assert "Lunch" in listed.output

        saved = TransactionStore(Workspace(root=tmp_path).transactions_path).load()
        assert len(saved) == 1

    def it_should_fail_exec_on_invalid_line(self, tmp_path):
        result = runner.invoke(app, ["--data-dir", str(tmp_path), "exec", "add a/5"])
        assert result.exit_code == 1
        assert "Mandatory tag(s) are missing" in result.output

    def it_should_read_data_dir_from_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("MOOLAH_DATA", str(tmp_path))
        result = runner.invoke(app, ["exec", "add t/income c/Pay a/10 d/01022022 i/Tip"])
        assert result.exit_code == 0
        assert (tmp_path / "data" / "transactions.csv").is_file()

    def it_should_open_the_shell_without_a_command(self, tmp_path):
        result = runner.invoke(app, ["--data-dir", str(tmp_path)], input="help\nbye\n")
        assert result.exit_code == 0
        assert "Welcome to Moolah Manager" in result.output
        assert "purge" in result.output


class DescribeResolveLogLevel:
    @pytest.mark.parametrize("name, expected", [("debug", logging.DEBUG), ("INFO", logging.INFO), ("error", logging.ERROR)])
    def it_should_map_level_names(self, name, expected):
        assert resolve_log_level(name) == expected

    @pytest.mark.parametrize("name", ["root", "basicconfig", "loud", ""])
    def it_should_fall_back_to_warning_for_non_level_names(self, name):
        assert resolve_log_level(name) == logging.WARNING

    def it_should_not_crash_on_a_non_level_option(self, tmp_path):
        result = runner.invoke(app, ["--data-dir", str(tmp_path), "--log-level", "root", "exec", "list"])
        assert result.exit_code == 0
