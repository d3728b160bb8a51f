"""Spool-directory provider — reads operation snapshots from JSON files.

Layout::

    {root}/database.json          DatabaseStatus
    {root}/backups.json           [BackupStatus, ...]
    {root}/restores/{id}.json     RestoreStatus

An external agent keeps these files current.  Every call re-reads the
file, so each poll sees the latest snapshot.  ``create_restore`` drops a
new restore document into ``restores/`` for the agent to pick up.
"""

from __future__ import annotations

import json
import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from opmonitor.models.operations import (
    BackupStatus,
    DatabaseStatus,
    RestoreHandle,
    RestoreStatus,
)
from opmonitor.providers import (
    OperationNotFoundError,
    ProviderUnavailableError,
    pick_backup,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

_BACKUP_LIST = TypeAdapter(list[BackupStatus])


class SpoolDirectoryProvider:
    """Status provider backed by a directory of JSON snapshots.

    Parameters
    ----------
    root:
        The spool directory.  Defaults to ``.opmonitor``.
    """

    def __init__(self, root: Path | str | None = None) -> None:
        self._root = Path(root) if root else Path(".opmonitor")

    @property
    def root(self) -> Path:
        return self._root

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def _read_json(self, path: Path, what: str) -> Any:
        if not path.exists():
            raise OperationNotFoundError(f"No {what} snapshot at {path}")
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ProviderUnavailableError(f"Cannot read {what} snapshot {path}: {exc}") from exc

    def _load(self, model: type[M], path: Path, what: str) -> M:
        data = self._read_json(path, what)
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise ProviderUnavailableError(f"Malformed {what} snapshot {path}: {exc}") from exc

    def get_database(self) -> DatabaseStatus:
        return self._load(DatabaseStatus, self._root / "database.json", "database")

    def get_restore(self, restore_id: str) -> RestoreStatus:
        path = self._restore_path(restore_id)
        restore = self._load(RestoreStatus, path, f"restore {restore_id}")
        if not restore.id:
            restore = restore.model_copy(update={"id": restore_id})
        return restore

    def get_backups(self) -> list[BackupStatus]:
        path = self._root / "backups.json"
        if not path.exists():
            return []
        data = self._read_json(path, "backups")
        try:
            return _BACKUP_LIST.validate_python(data)
        except ValidationError as exc:
            raise ProviderUnavailableError(f"Malformed backups snapshot {path}: {exc}") from exc

    def get_backup(self, name: str | None = None) -> BackupStatus:
        return pick_backup(self.get_backups(), name)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create_restore(self, restore_param: str) -> RestoreHandle:
        restore_id = uuid.uuid4().hex
        path = self._restore_path(restore_id)
        document = {
            "id": restore_id,
            "param": restore_param,
            "progress": [],
            "created_at": datetime.now(timezone.utc).isoformat(),
        }
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        except OSError as exc:
            raise ProviderUnavailableError(f"Cannot create restore at {path}: {exc}") from exc

        logger.debug("SpoolDirectoryProvider: wrote restore request %s", path)
        return RestoreHandle(id=restore_id)

    def _restore_path(self, restore_id: str) -> Path:
        if not restore_id or "/" in restore_id or "\\" in restore_id or restore_id.startswith("."):
            raise OperationNotFoundError(f"Invalid restore id: {restore_id!r}")
        return self._root / "restores" / f"{restore_id}.json"
