"""Scripted provider — replays fixed snapshot sequences.

Each ``get_*`` call returns the next scripted snapshot; once a script is
exhausted its last snapshot repeats.  Used by ``opmonitor demo`` and by
the test suite.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

from opmonitor.models.operations import (
    BackupStatus,
    DatabaseStatus,
    RestoreHandle,
    RestoreStatus,
)
from opmonitor.providers import OperationNotFoundError, pick_backup

T = TypeVar("T")


class _Script(Generic[T]):
    def __init__(self, items: Iterable[T]) -> None:
        self._items = list(items)
        self.position = 0

    def __bool__(self) -> bool:
        return bool(self._items)

    def next(self) -> T:
        item = self._items[min(self.position, len(self._items) - 1)]
        self.position += 1
        return item


class ScriptedStatusProvider:
    """In-memory status provider replaying scripted snapshots.

    Parameters
    ----------
    databases:
        Database snapshots returned by successive ``get_database`` calls.
    restores:
        Restore snapshots per restore id.
    backups:
        The backup listing.
    next_restore_id:
        Id handed out by ``create_restore``; it must have a script in
        *restores*.
    """

    def __init__(
        self,
        databases: Iterable[DatabaseStatus] = (),
        restores: dict[str, Iterable[RestoreStatus]] | None = None,
        backups: Iterable[BackupStatus] = (),
        *,
        next_restore_id: str = "restore-1",
    ) -> None:
        self._databases = _Script(databases)
        self._restores = {rid: _Script(seq) for rid, seq in (restores or {}).items()}
        self._backups = list(backups)
        self._next_restore_id = next_restore_id
        self.calls: list[tuple[str, str | None]] = []

    def get_database(self) -> DatabaseStatus:
        self.calls.append(("get_database", None))
        if not self._databases:
            raise OperationNotFoundError("No database scripted")
        return self._databases.next()

    def get_restore(self, restore_id: str) -> RestoreStatus:
        self.calls.append(("get_restore", restore_id))
        script = self._restores.get(restore_id)
        if not script:
            raise OperationNotFoundError(f"No restore scripted for {restore_id}")
        return script.next()

    def create_restore(self, restore_param: str) -> RestoreHandle:
        self.calls.append(("create_restore", restore_param))
        return RestoreHandle(id=self._next_restore_id)

    def get_backups(self) -> list[BackupStatus]:
        self.calls.append(("get_backups", None))
        return list(self._backups)

    def get_backup(self, name: str | None = None) -> BackupStatus:
        self.calls.append(("get_backup", name))
        return pick_backup(self._backups, name)
