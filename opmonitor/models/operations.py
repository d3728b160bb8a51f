"""Operation snapshot models returned by a status provider."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

from opmonitor.models.progress import ProgressEntry


class OperationState(str, Enum):
    """Known database states.  Providers may report others."""

    PENDING = "pending"
    PROVISIONING = "provisioning"
    AVAILABLE = "available"
    DEPROVISIONED = "deprovisioned"
    FAILED = "failed"


# States that end a "wait until database ready" loop.
TERMINAL_STATES: frozenset[str] = frozenset(
    {
        OperationState.AVAILABLE.value,
        OperationState.DEPROVISIONED.value,
        OperationState.FAILED.value,
    }
)


def is_terminal_state(state: str) -> bool:
    """Return True if *state* ends the database wait."""
    return state in TERMINAL_STATES


def _empty_trail_if_null(value: object) -> object:
    # Providers send null before the first stage starts
    return [] if value is None else value


class DatabaseStatus(BaseModel):
    """Point-in-time status of the database.

    ``state`` stays a plain string so unknown provider states are carried
    verbatim.
    """

    model_config = ConfigDict(frozen=True)

    state: str
    state_updated_at: datetime
    created_at: datetime
    num_bytes: int | None = None
    num_tables: int | None = None
    postgresql_version: str | None = None

    @property
    def is_terminal(self) -> bool:
        return is_terminal_state(self.state)


class RestoreHandle(BaseModel):
    """Identifier of a freshly created restore."""

    model_config = ConfigDict(frozen=True)

    id: str


class RestoreStatus(BaseModel):
    """Point-in-time status of a restore, including its full progress trail."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    progress: list[ProgressEntry] = []
    error_at: datetime | None = None
    finished_at: datetime | None = None
    log: str | None = None

    @field_validator("progress", mode="before")
    @classmethod
    def _null_progress(cls, value: object) -> object:
        return _empty_trail_if_null(value)

    @property
    def failed(self) -> bool:
        return self.error_at is not None

    @property
    def finished(self) -> bool:
        return self.finished_at is not None


class BackupStatus(BaseModel):
    """A legacy backup as listed by the provider."""

    model_config = ConfigDict(frozen=True)

    name: str
    started_at: datetime
    finished_at: datetime | None = None
    error_at: datetime | None = None
    progress: list[ProgressEntry] = []
    size_compressed: int | None = None
    dump_url: str | None = None

    @field_validator("progress", mode="before")
    @classmethod
    def _null_progress(cls, value: object) -> object:
        return _empty_trail_if_null(value)
