"""opmonitor data models — Pydantic v2; provider snapshots are frozen."""

from opmonitor.models.operations import (
    TERMINAL_STATES,
    BackupStatus,
    DatabaseStatus,
    OperationState,
    RestoreHandle,
    RestoreStatus,
    is_terminal_state,
)
from opmonitor.models.progress import AmountKind, ProgressEntry, RenderState

__all__ = [
    # operations
    "OperationState",
    "TERMINAL_STATES",
    "is_terminal_state",
    "DatabaseStatus",
    "RestoreStatus",
    "RestoreHandle",
    "BackupStatus",
    # progress
    "AmountKind",
    "ProgressEntry",
    "RenderState",
]
