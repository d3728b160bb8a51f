"""Unit tests for the CLI — command registration and spool-backed runs."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from opmonitor.cli.app import app
from opmonitor.config import settings
from opmonitor.providers import OperationNotFoundError

runner = CliRunner()


@pytest.fixture(autouse=True)
def _no_wait(monkeypatch: pytest.MonkeyPatch):
    """Poll without sleeping."""
    monkeypatch.setattr(settings, "poll_interval_seconds", 0.0)


def _write(path: Path, data: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


class TestCliApp:
    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        assert result.exit_code in (0, 2)
        assert "usage" in result.output.lower()

    def test_help_lists_commands(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for name in ("wait", "restore", "info", "backups", "backup-url", "demo"):
            assert name in result.output

    @pytest.mark.parametrize("name", ["wait", "restore", "info", "backups", "backup-url", "demo"])
    def test_command_help(self, name: str):
        result = runner.invoke(app, [name, "--help"])
        assert result.exit_code == 0


class TestWaitCommand:
    def test_available(self, tmp_path: Path):
        _write(
            tmp_path / "database.json",
            {
                "state": "available",
                "state_updated_at": "2026-02-27T12:00:00Z",
                "created_at": "2026-02-27T11:00:00Z",
            },
        )
        result = runner.invoke(app, ["--status-dir", str(tmp_path), "wait"])
        assert result.exit_code == 0
        assert "The database is now ready" in result.output

    def test_failed_exits_nonzero(self, tmp_path: Path):
        _write(
            tmp_path / "database.json",
            {
                "state": "failed",
                "state_updated_at": "2026-02-27T12:00:00Z",
                "created_at": "2026-02-27T11:00:00Z",
            },
        )
        result = runner.invoke(app, ["--status-dir", str(tmp_path), "wait"])
        assert result.exit_code == 1
        assert "The database encountered an error" in result.output

    def test_missing_snapshot_aborts(self, tmp_path: Path):
        result = runner.invoke(app, ["--status-dir", str(tmp_path), "wait"])
        assert result.exit_code != 0
        assert isinstance(result.exception, OperationNotFoundError)


class TestRestoreCommand:
    def test_attach_to_finished_restore(self, tmp_path: Path):
        _write(
            tmp_path / "restores" / "r1.json",
            {
                "progress": [["restore", "start"], ["restore", 2048], ["restore", "finish"]],
                "finished_at": "2026-02-27T12:00:00Z",
            },
        )
        result = runner.invoke(
            app, ["--status-dir", str(tmp_path), "restore", "--attach", "r1"]
        )
        assert result.exit_code == 0
        assert "Restore    ... 2KB, done" in result.output
        assert "Restore complete" in result.output

    def test_failed_restore(self, tmp_path: Path):
        _write(
            tmp_path / "restores" / "r2.json",
            {"progress": [], "error_at": "2026-02-27T12:00:00Z", "log": "disk full"},
        )
        result = runner.invoke(
            app, ["--status-dir", str(tmp_path), "restore", "--attach", "r2"]
        )
        assert result.exit_code == 1
        assert "An error occurred while restoring the backup" in result.output
        assert "disk full" in result.output

    def test_requires_backup_ref_or_attach(self, tmp_path: Path):
        result = runner.invoke(app, ["--status-dir", str(tmp_path), "restore"])
        assert result.exit_code == 2
        assert "--attach" in result.output
        assert not (tmp_path / "restores").exists()


class TestInfoCommand:
    def test_info(self, tmp_path: Path):
        _write(
            tmp_path / "database.json",
            {
                "state": "available",
                "state_updated_at": "2026-02-27T12:00:00Z",
                "created_at": "2026-02-27T11:00:00Z",
                "num_bytes": 2048,
                "num_tables": 3,
                "postgresql_version": "9.0.3",
            },
        )
        result = runner.invoke(app, ["--status-dir", str(tmp_path), "--app", "billing", "info"])
        assert result.exit_code == 0
        assert "=== billing database" in result.output
        assert "Data size:   2KB in 3 tables" in result.output
        assert "PG version:  9.0.3" in result.output
        assert "Born:        2026-02-27 11:00 UTC" in result.output


class TestBackupsCommand:
    def test_empty(self, tmp_path: Path):
        result = runner.invoke(app, ["--status-dir", str(tmp_path), "--app", "billing", "backups"])
        assert result.exit_code == 0
        assert "App billing has no database backups" in result.output

    def test_newest_first(self, tmp_path: Path):
        _write(
            tmp_path / "backups.json",
            [
                {
                    "name": "b001",
                    "started_at": "2026-01-01T00:00:00Z",
                    "finished_at": "2026-01-01T00:05:00Z",
                    "size_compressed": 3 * 1024 * 1024,
                },
                {"name": "b0002", "started_at": "2026-01-03T00:00:00Z"},
                {
                    "name": "b003",
                    "started_at": "2026-01-02T00:00:00Z",
                    "progress": [["dump", "start"]],
                },
            ],
        )
        result = runner.invoke(app, ["--status-dir", str(tmp_path), "backups"])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "b0002  Pending",
            "b003   Dumping",
            "b001   3.0MB",
        ]


class TestBackupUrlCommand:
    _backups = [
        {
            "name": "b001",
            "started_at": "2026-01-01T00:00:00Z",
            "finished_at": "2026-01-01T00:05:00Z",
            "dump_url": "https://dumps.example.com/b001",
        },
        {
            "name": "b002",
            "started_at": "2026-01-02T00:00:00Z",
            "error_at": "2026-01-02T00:01:00Z",
        },
    ]

    def test_named_backup(self, tmp_path: Path):
        _write(tmp_path / "backups.json", self._backups)
        result = runner.invoke(app, ["--status-dir", str(tmp_path), "backup-url", "b001"])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "URL for backup b001:",
            "https://dumps.example.com/b001",
        ]

    def test_defaults_to_most_recent(self, tmp_path: Path):
        _write(tmp_path / "backups.json", self._backups)
        result = runner.invoke(app, ["--status-dir", str(tmp_path), "backup-url"])
        assert result.exit_code == 1
        assert "Backup b002 did not complete successfully" in result.output

    def test_unknown_backup(self, tmp_path: Path):
        _write(tmp_path / "backups.json", self._backups)
        result = runner.invoke(app, ["--status-dir", str(tmp_path), "backup-url", "b999"])
        assert result.exit_code != 0
        assert isinstance(result.exception, OperationNotFoundError)


class TestDemoCommand:
    def test_demo_runs_to_completion(self):
        result = runner.invoke(app, ["demo", "--interval", "0"])
        assert result.exit_code == 0
        assert "The database is now ready" in result.output
        assert "Download   ... 7.0MB, done" in result.output
        assert "Analyze    ... 0B, done" in result.output
        assert "Restore complete" in result.output
