"""Status provider protocol — the polling interface of remote operations.

A provider answers point-in-time questions about the database and its
restores and backups.  Every call returns a fresh snapshot; the core
never caches them.  How a provider reaches the remote service is its own
business.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from opmonitor.models.operations import (
    BackupStatus,
    DatabaseStatus,
    RestoreHandle,
    RestoreStatus,
)


class ProviderUnavailableError(RuntimeError):
    """Raised when a snapshot cannot be fetched or understood."""


class OperationNotFoundError(ProviderUnavailableError):
    """Raised when the requested operation does not exist."""


@runtime_checkable
class StatusProvider(Protocol):
    """Protocol that every status provider must implement."""

    def get_database(self) -> DatabaseStatus:
        """Return the current database status."""
        ...

    def get_restore(self, restore_id: str) -> RestoreStatus:
        """Return the current status of restore *restore_id*."""
        ...

    def create_restore(self, restore_param: str) -> RestoreHandle:
        """Start restoring from *restore_param* (a backup name or URL)."""
        ...

    def get_backups(self) -> list[BackupStatus]:
        """Return all legacy backups."""
        ...

    def get_backup(self, name: str | None = None) -> BackupStatus:
        """Return backup *name*, or the most recently started one."""
        ...


def pick_backup(backups: list[BackupStatus], name: str | None = None) -> BackupStatus:
    """Select backup *name* from *backups*; with no name, the newest by start time.

    Raises :class:`OperationNotFoundError` when nothing matches.
    """
    if name is None:
        if not backups:
            raise OperationNotFoundError("No backups found")
        return max(backups, key=lambda b: b.started_at)
    for backup in backups:
        if backup.name == name:
            return backup
    raise OperationNotFoundError(f"No backup named {name}")


__all__ = [
    "OperationNotFoundError",
    "ProviderUnavailableError",
    "StatusProvider",
    "pick_backup",
]
