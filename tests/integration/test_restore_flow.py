"""End-to-end: spool directory updated between polls by a fake agent.

The poller's sleep hook stands in for the external agent that rewrites the
restore document while the watcher waits.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

from opmonitor.core.poller import OperationPoller
from opmonitor.core.watchers import DatabaseWaiter, RestoreWatcher
from opmonitor.display.recording import RecordingSink
from opmonitor.providers.spool import SpoolDirectoryProvider


class _Agent:
    """Writes the next scripted document every time the poller sleeps."""

    def __init__(self, path_for: Callable[[], Path], documents: list[dict]) -> None:
        self._path_for = path_for
        self._documents = list(documents)
        self.sleeps = 0

    def __call__(self, _interval: float) -> None:
        self.sleeps += 1
        if self._documents:
            path = self._path_for()
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(self._documents.pop(0)), encoding="utf-8")


def test_restore_through_spool_directory(tmp_path: Path):
    provider = SpoolDirectoryProvider(tmp_path)
    restore_ids: list[str] = []

    def restore_path() -> Path:
        return tmp_path / "restores" / f"{restore_ids[0]}.json"

    progress: list[list] = []
    documents: list[dict] = []
    for step in (
        ["download", "start"],
        ["download", 1024 * 1024],
        ["download", "finish"],
        ["restore", "start"],
        ["restore", 5 * 1024 * 1024],
        ["restore", "finish"],
    ):
        progress.append(step)
        documents.append({"progress": list(progress)})
    documents.append({"progress": list(progress), "finished_at": "2026-02-27T12:00:00Z"})

    agent = _Agent(restore_path, documents)
    original_create = provider.create_restore

    def create_restore(param: str):
        handle = original_create(param)
        restore_ids.append(handle.id)
        return handle

    provider.create_restore = create_restore  # type: ignore[method-assign]

    sink = RecordingSink()
    final = RestoreWatcher(provider, sink, OperationPoller(sleep=agent)).restore("b042")

    assert final.finished
    assert agent.sleeps == len(documents)
    assert sink.lines == [
        "Download   ... 1.0MB, done",
        "Restore    ... 5.0MB, done",
        "Restore complete",
    ]


def test_wait_through_spool_directory(tmp_path: Path):
    base = {
        "state_updated_at": "2026-02-27T12:00:00Z",
        "created_at": "2026-02-27T11:00:00Z",
    }
    (tmp_path / "database.json").write_text(
        json.dumps({**base, "state": "provisioning"}), encoding="utf-8"
    )
    agent = _Agent(
        lambda: tmp_path / "database.json",
        [{**base, "state": "provisioning"}, {**base, "state": "available"}],
    )

    sink = RecordingSink()
    final = DatabaseWaiter(
        SpoolDirectoryProvider(tmp_path), sink, OperationPoller(sleep=agent)
    ).wait()

    assert final.state == "available"
    assert sink.texts == [
        "Provisioning database /",
        "Provisioning database -",
        "The database is now ready",
    ]
