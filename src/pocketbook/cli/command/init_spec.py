"""Tests for init command."""

from __future__ import annotations

from pathlib import Path
from tempfile import TemporaryDirectory

from pocketbook.cli.command.init import run
from pocketbook.config import Settings, load_settings
from pocketbook.storage.record_store import TRANSACTIONS, RecordStore
from pocketbook.workspace import Workspace


class DescribeInitCommand:
    """Tests for init command."""

    def it_should_create_directories_settings_and_store(self):
        with TemporaryDirectory() as tmpdir:
            workspace = Workspace(root=Path(tmpdir))
            rc = run(workspace=workspace)

            assert rc == 0
            assert workspace.data_dir.is_dir()
            assert workspace.config_dir.is_dir()
            assert workspace.reports_dir.is_dir()
            assert workspace.settings_config.is_file()
            assert RecordStore(workspace.store_path).exists()

    def it_should_be_safe_to_run_twice(self):
        with TemporaryDirectory() as tmpdir:
            workspace = Workspace(root=Path(tmpdir))
            assert run(workspace=workspace) == 0

            workspace.settings_config.write_text("trend_months: 3\n", encoding="utf-8")
            store = RecordStore(workspace.store_path)
            store.set(TRANSACTIONS, [{"id": "keep"}])

            assert run(workspace=workspace) == 0

            assert workspace.settings_config.read_text(encoding="utf-8") == "trend_months: 3\n"
            assert store.get(TRANSACTIONS) == [{"id": "keep"}]

    def it_should_write_starter_settings_matching_defaults(self):
        with TemporaryDirectory() as tmpdir:
            workspace = Workspace(root=Path(tmpdir))
            run(workspace=workspace)
            assert load_settings(workspace.settings_config) == Settings()

    def it_should_report_when_already_initialized(self, capsys):
        with TemporaryDirectory() as tmpdir:
            workspace = Workspace(root=Path(tmpdir))
            run(workspace=workspace)
            capsys.readouterr()

            run(workspace=workspace)
            assert "already fully initialized" in capsys.readouterr().out
