from __future__ import annotations

from pathlib import Path

from moolah.workspace import Workspace


class DescribeWorkspace:
    class DescribeResolve:
        def it_should_use_explicit_path_when_provided(self):
            ws = Workspace.resolve(explicit=Path("/tmp/my-money"))
            assert ws.root == Path("/tmp/my-money")

        def it_should_use_moolah_data_env_var_when_set(self, monkeypatch):
            monkeypatch.setenv("MOOLAH_DATA", "/tmp/env-money")
            assert Workspace.resolve().root == Path("/tmp/env-money")

        def it_should_prefer_explicit_over_env_var(self, monkeypatch):
            monkeypatch.setenv("MOOLAH_DATA", "/tmp/env-money")
            ws = Workspace.resolve(explicit=Path("/tmp/explicit"))
            assert ws.root == Path("/tmp/explicit")

        def it_should_fall_back_to_cwd_when_no_env_var(self, monkeypatch):
            monkeypatch.delenv("MOOLAH_DATA", raising=False)
            assert Workspace.resolve().root == Path.cwd()

    def it_should_keep_transactions_under_data_dir(self):
        ws = Workspace(root=Path("/money"))
        assert ws.data_dir == Path("/money/data")
        assert ws.transactions_path == Path("/money/data/transactions.csv")
